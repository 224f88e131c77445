"""Toolkit-independent view model for the Connect tab.

``connect_view`` is a pure function of the session snapshot and the cached
bitmap, so the render loop can compare successive views and only rebuild
widgets when something visible changed.
"""

from __future__ import annotations

from dataclasses import dataclass

from retadi.pairing.encoder import Bitmap
from retadi.pairing.state import SessionSnapshot
from retadi.ui.theme import COLORS

QR_DISPLAY_PX = 300


@dataclass(frozen=True)
class ConnectView:
    status_text: str
    status_color: str
    url: str
    show_start: bool
    show_stop: bool
    qr_src: str | None
    caption: str


def connect_view(snapshot: SessionSnapshot, bitmap: Bitmap | None) -> ConnectView:
    if not snapshot.running:
        return ConnectView(
            status_text="Server Stopped",
            status_color=COLORS["text_muted"],
            url="",
            show_start=True,
            show_stop=False,
            qr_src=None,
            caption="Start the server to pair a device",
        )

    if bitmap is None:
        caption = "QR code unavailable, enter the address manually"
        qr_src = None
    else:
        caption = "Scan to Connect"
        qr_src = bitmap.data_url

    return ConnectView(
        status_text="Server Running",
        status_color=COLORS["accent"],
        url=snapshot.url,
        show_start=False,
        show_stop=True,
        qr_src=qr_src,
        caption=caption,
    )
