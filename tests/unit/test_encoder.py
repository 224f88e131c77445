"""Unit tests for retadi.pairing.encoder."""

from __future__ import annotations

import pytest

from retadi.exceptions import EncodingError
from retadi.pairing.encoder import (
    DARK,
    LIGHT,
    QUIET_ZONE,
    Bitmap,
    encode,
    module_matrix,
    render_ascii,
)

URL = "http://192.168.1.20:3000"


class TestEncode:
    """Test QR bitmap generation."""

    def test_exact_target_size(self):
        bitmap = encode(URL, (400, 400))
        assert bitmap.width == 400
        assert bitmap.height == 400
        assert len(bitmap.pixels) == 400 * 400

    def test_only_two_colours(self):
        bitmap = encode(URL)
        assert set(bitmap.pixels) == {DARK, LIGHT}

    def test_deterministic(self):
        first = encode(URL, (400, 400))
        second = encode(URL, (400, 400))
        assert first.pixels == second.pixels
        assert first == second

    def test_different_text_different_bitmap(self):
        assert encode(URL).pixels != encode("http://192.168.1.21:3000").pixels

    def test_quiet_zone_is_light(self):
        modules = len(module_matrix(URL))
        scale = 400 // modules
        margin = (400 - modules * scale) // 2 + QUIET_ZONE * scale
        bitmap = encode(URL, (400, 400))

        for y in range(margin):
            for x in range(400):
                assert not bitmap.is_dark(x, y)
        for y in range(400):
            for x in range(margin):
                assert not bitmap.is_dark(x, y)

    def test_finder_pattern_corner_is_dark(self):
        modules = len(module_matrix(URL))
        scale = 400 // modules
        margin = (400 - modules * scale) // 2 + QUIET_ZONE * scale
        bitmap = encode(URL, (400, 400))
        assert bitmap.is_dark(margin, margin)

    def test_non_square_target_is_padded(self):
        bitmap = encode(URL, (500, 400))
        assert (bitmap.width, bitmap.height) == (500, 400)
        assert len(bitmap.pixels) == 500 * 400
        # Horizontal padding stays light across every row.
        assert all(not bitmap.is_dark(0, y) for y in range(400))
        assert all(not bitmap.is_dark(499, y) for y in range(400))

    def test_oversized_payload_raises(self):
        with pytest.raises(EncodingError, match="exceeds QR capacity"):
            encode("a" * 4000)

    def test_target_too_small_raises(self):
        with pytest.raises(EncodingError, match="smaller than"):
            encode(URL, (10, 10))


class TestBitmapExport:
    """Test PNG and data URL export."""

    def test_png_signature(self):
        assert encode(URL).to_png().startswith(b"\x89PNG\r\n\x1a\n")

    def test_image_matches_pixels(self):
        bitmap = encode(URL, (200, 200))
        image = bitmap.to_image()
        assert image.size == (200, 200)
        assert image.mode == "L"
        assert image.tobytes() == bitmap.pixels

    def test_data_url(self):
        bitmap = encode(URL)
        assert bitmap.data_url.startswith("data:image/png;base64,")
        assert bitmap.data_url is bitmap.data_url

    def test_is_dark_indexing(self):
        bitmap = Bitmap(width=2, height=2, pixels=bytes([LIGHT, DARK, DARK, LIGHT]))
        assert not bitmap.is_dark(0, 0)
        assert bitmap.is_dark(1, 0)
        assert bitmap.is_dark(0, 1)
        assert not bitmap.is_dark(1, 1)


class TestRenderAscii:

    def test_renders_block_characters(self):
        text = render_ascii(URL)
        assert text.count("\n") > 10

    def test_oversized_payload_raises(self):
        with pytest.raises(EncodingError):
            render_ascii("a" * 4000)


class TestCapacityErrors:
    """Library overflow signals all surface as EncodingError."""

    def test_version_value_error_is_wrapped(self, monkeypatch):
        def reject(self, fit=True):
            raise ValueError("Invalid version (was 41, expected 1 to 40)")

        monkeypatch.setattr("qrcode.QRCode.make", reject)
        with pytest.raises(EncodingError, match="exceeds QR capacity"):
            encode(URL)

    def test_overflow_error_is_wrapped(self, monkeypatch):
        from qrcode.exceptions import DataOverflowError

        def overflow(self, fit=True):
            raise DataOverflowError()

        monkeypatch.setattr("qrcode.QRCode.make", overflow)
        with pytest.raises(EncodingError):
            render_ascii(URL)

    def test_just_over_capacity(self):
        # Version 40 at level M holds 2331 bytes.
        encode("a" * 2331)
        with pytest.raises(EncodingError):
            encode("a" * 2332)
