"""Per-URL cache of encoded QR bitmaps for the render loop."""

from __future__ import annotations

from retadi.config import DEFAULT_QR_SIZE
from retadi.exceptions import EncodingError
from retadi.pairing.encoder import Bitmap, encode
from retadi.utils.logging import get_logger

logger = get_logger(__name__)


class QrCache:
    """Holds the bitmap for one URL; encodes again only when the URL changes.

    A failed encode is remembered too, so an oversized URL is not retried
    every frame.
    """

    def __init__(self, size: int = DEFAULT_QR_SIZE) -> None:
        self.size = size
        self._url: str | None = None
        self._bitmap: Bitmap | None = None
        self.encodes = 0

    def get(self, url: str) -> Bitmap | None:
        if not url:
            return None
        if url != self._url:
            self._url = url
            self._bitmap = None
            self.encodes += 1
            try:
                self._bitmap = encode(url, (self.size, self.size))
            except EncodingError as exc:
                logger.warning("qr_encode_failed", url=url, error=str(exc))
        return self._bitmap
