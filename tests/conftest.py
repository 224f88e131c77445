"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import socket
from pathlib import Path

import pytest

from retadi.pairing.server import PairingServer
from retadi.pairing.state import SessionState


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Asset directory holding only an index.html with body ``hello``."""
    root = tmp_path / "clientside"
    root.mkdir()
    (root / "index.html").write_text("hello")
    return root


@pytest.fixture
def session() -> SessionState:
    return SessionState()


@pytest.fixture
def pairing_server(session: SessionState):
    """A pairing server that is always stopped at teardown."""
    server = PairingServer(session, timeout_keep_alive=1)
    yield server
    server.stop()


@pytest.fixture
def occupied_port():
    """A port with a live listener on all interfaces."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("0.0.0.0", 0))
        sock.listen(1)
        yield sock.getsockname()[1]
