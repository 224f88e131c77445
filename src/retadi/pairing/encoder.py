"""QR encoding of the pairing URL into a fixed-size monochrome bitmap."""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from functools import cached_property

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

from retadi.exceptions import EncodingError

DARK = 0
LIGHT = 255

# Minimum quiet zone around the symbol, in modules.
QUIET_ZONE = 4

DEFAULT_SIZE = (400, 400)


@dataclass(frozen=True)
class Bitmap:
    """Row-major 8-bit grayscale pixel grid holding only DARK and LIGHT."""

    width: int
    height: int
    pixels: bytes

    def is_dark(self, x: int, y: int) -> bool:
        return self.pixels[y * self.width + x] == DARK

    def to_image(self) -> Image.Image:
        return Image.frombytes("L", (self.width, self.height), self.pixels)

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self.to_image().save(buf, format="PNG")
        return buf.getvalue()

    @cached_property
    def data_url(self) -> str:
        """PNG data URL for direct use as an ``<img>`` source."""
        return "data:image/png;base64," + base64.b64encode(self.to_png()).decode("ascii")


def _make_qr(text: str) -> qrcode.QRCode:
    qr = qrcode.QRCode(version=None, error_correction=ERROR_CORRECT_M, border=QUIET_ZONE)
    qr.add_data(text)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        # qrcode >= 8 raises ValueError for the overflowing version number.
        raise EncodingError(
            f"Payload of {len(text.encode('utf-8'))} bytes exceeds QR capacity"
        ) from exc
    return qr


def module_matrix(text: str) -> list[list[bool]]:
    """Return the QR module grid for *text*, quiet zone included (True = dark).

    Raises:
        EncodingError: If *text* does not fit in the largest QR version.
    """
    return _make_qr(text).get_matrix()


def encode(text: str, target_size: tuple[int, int] = DEFAULT_SIZE) -> Bitmap:
    """Encode *text* as a QR bitmap of exactly *target_size* pixels.

    Each module is scaled by the largest whole factor that fits the shorter
    side; leftover pixels are added as light padding, centred, so the quiet
    zone is never reduced.

    Raises:
        EncodingError: If *text* exceeds QR capacity or *target_size* cannot
            hold one pixel per module.
    """
    width, height = target_size
    matrix = module_matrix(text)
    modules = len(matrix)

    scale = min(width, height) // modules
    if scale < 1:
        raise EncodingError(
            f"Target size {width}x{height} is smaller than the {modules}x{modules} symbol"
        )

    side = modules * scale
    left = (width - side) // 2
    top = (height - side) // 2

    pixels = bytearray([LIGHT]) * (width * height)
    for row_index, row in enumerate(matrix):
        line = bytes(DARK if dark else LIGHT for dark in row for _ in range(scale))
        for sub in range(scale):
            offset = (top + row_index * scale + sub) * width + left
            pixels[offset:offset + side] = line

    return Bitmap(width=width, height=height, pixels=bytes(pixels))


def render_ascii(text: str) -> str:
    """Render *text* as a terminal-printable QR code.

    Raises:
        EncodingError: If *text* exceeds QR capacity.
    """
    out = io.StringIO()
    _make_qr(text).print_ascii(out=out, invert=True)
    return out.getvalue()
