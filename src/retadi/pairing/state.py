"""Shared session state between the pairing server and the UI shell.

One writer (the server's start/stop routines) and any number of readers
(the UI render loop polls it every frame). Readers get an immutable
snapshot; the lock is held only for the reference swap, never for I/O.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from retadi.config import DEFAULT_PORT


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time copy of the session. ``url`` is set iff ``running``."""

    running: bool = False
    url: str = ""
    port: int = DEFAULT_PORT


class SessionState:
    """Mutation-guarded session record handed to both server and UI."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self._lock = threading.Lock()
        self._snapshot = SessionSnapshot(port=port)

    def read(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot

    def _publish(self, url: str, port: int) -> None:
        """Mark the session running at *url*. Pairing server only."""
        if not url:
            raise ValueError("A running session needs a non-empty URL")
        snapshot = SessionSnapshot(running=True, url=url, port=port)
        with self._lock:
            self._snapshot = snapshot

    def _clear(self) -> None:
        """Mark the session stopped, keeping the last port. Pairing server only."""
        with self._lock:
            self._snapshot = SessionSnapshot(port=self._snapshot.port)
