"""Exception hierarchy for the pairing service."""

from __future__ import annotations


class RetadiError(Exception):
    """Base exception for all ReTADI errors."""


class ResolveDegraded(RetadiError):
    """No LAN-reachable address was found; loopback is used instead."""


class EncodingError(RetadiError):
    """Text could not be turned into a scannable bitmap."""


class ServerError(RetadiError):
    """Base exception for pairing server lifecycle errors."""


class BindError(ServerError):
    """The listener could not be bound (port in use or not permitted)."""

    def __init__(self, message: str, host: str = "0.0.0.0", port: int = 0) -> None:
        self.host = host
        self.port = port
        super().__init__(message)


class AlreadyRunningError(ServerError):
    """The pairing server is already running."""
