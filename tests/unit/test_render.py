"""Unit tests for the Connect tab view model and QR cache."""

from __future__ import annotations

from retadi.pairing.encoder import encode
from retadi.pairing.state import SessionSnapshot
from retadi.ui.render import connect_view
from retadi.ui.services.qr import QrCache

URL = "http://192.168.1.20:3000"


class TestConnectView:

    def test_stopped_shows_start_button(self):
        view = connect_view(SessionSnapshot(port=3000), None)
        assert view.show_start is True
        assert view.show_stop is False
        assert view.url == ""
        assert view.qr_src is None
        assert view.status_text == "Server Stopped"

    def test_running_with_bitmap(self):
        snapshot = SessionSnapshot(running=True, url=URL, port=3000)
        view = connect_view(snapshot, encode(URL))
        assert view.status_text == "Server Running"
        assert view.url == URL
        assert view.show_start is False
        assert view.show_stop is True
        assert view.qr_src.startswith("data:image/png;base64,")
        assert view.caption == "Scan to Connect"

    def test_running_without_bitmap_keeps_url(self):
        snapshot = SessionSnapshot(running=True, url=URL, port=3000)
        view = connect_view(snapshot, None)
        assert view.url == URL
        assert view.qr_src is None
        assert "manually" in view.caption

    def test_pure(self):
        snapshot = SessionSnapshot(running=True, url=URL, port=3000)
        bitmap = encode(URL)
        assert connect_view(snapshot, bitmap) == connect_view(snapshot, bitmap)


class TestQrCache:

    def test_encodes_once_per_url(self):
        cache = QrCache(size=200)
        first = cache.get(URL)
        second = cache.get(URL)
        assert first is second
        assert cache.encodes == 1
        assert (first.width, first.height) == (200, 200)

    def test_new_url_invalidates(self):
        cache = QrCache(size=200)
        first = cache.get(URL)
        second = cache.get("http://192.168.1.20:4000")
        assert first != second
        assert cache.encodes == 2

    def test_empty_url(self):
        cache = QrCache()
        assert cache.get("") is None
        assert cache.encodes == 0

    def test_failure_is_cached(self):
        cache = QrCache()
        oversized = "http://" + "a" * 4000
        assert cache.get(oversized) is None
        assert cache.get(oversized) is None
        assert cache.encodes == 1
