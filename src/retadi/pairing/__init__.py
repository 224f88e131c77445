"""LAN pairing service: address resolution, QR encoding, session state and server."""

from retadi.pairing.encoder import Bitmap, encode
from retadi.pairing.resolver import resolve
from retadi.pairing.server import PairingServer
from retadi.pairing.state import SessionSnapshot, SessionState

__all__ = [
    "Bitmap",
    "PairingServer",
    "SessionSnapshot",
    "SessionState",
    "encode",
    "resolve",
]
