"""Pairing server lifecycle: bind, serve in the background, publish the URL.

The bind happens synchronously in :meth:`PairingServer.start` so failures
surface to the caller as :class:`BindError`. The uvicorn serve loop then runs
on its own thread and event loop; connections are handled concurrently there
and the UI only ever observes the result through :class:`SessionState`.
"""

from __future__ import annotations

import asyncio
import socket
import sys
import threading
import time
from pathlib import Path
from typing import Callable

import uvicorn

from retadi.api.app import create_app
from retadi.config import DEFAULT_ASSET_ROOT, DEFAULT_PORT
from retadi.exceptions import AlreadyRunningError, BindError, ServerError
from retadi.pairing.resolver import resolve
from retadi.pairing.state import SessionState
from retadi.utils.logging import get_logger

logger = get_logger(__name__)

ALL_INTERFACES = "0.0.0.0"


def bind_listener(host: str, port: int, backlog: int = 128) -> socket.socket:
    """Bind and listen on ``host:port``.

    Raises:
        BindError: If the address is in use or not permitted.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        if sys.platform != "win32":
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError as exc:
        sock.close()
        raise BindError(
            f"Cannot bind {host}:{port}: {exc.strerror or exc}", host=host, port=port
        ) from exc
    sock.set_inheritable(True)
    return sock


class PairingServer:
    """Single-listener HTTP server advertising itself through a SessionState."""

    def __init__(
        self,
        state: SessionState,
        host: str = ALL_INTERFACES,
        resolver: Callable[[int], str] = resolve,
        timeout_keep_alive: int = 5,
        startup_timeout: float = 5.0,
    ) -> None:
        self.state = state
        self._host = host
        self._resolver = resolver
        self._timeout_keep_alive = timeout_keep_alive
        self._startup_timeout = startup_timeout
        self._lifecycle_lock = threading.Lock()
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._sock: socket.socket | None = None

    @property
    def is_running(self) -> bool:
        return self.state.read().running

    def start(self, port: int = DEFAULT_PORT, asset_root: Path | str = DEFAULT_ASSET_ROOT) -> str:
        """Bind the listener, start serving and publish the session.

        Returns once uvicorn is accepting connections; serving continues on
        a background thread.

        Args:
            port: TCP port, 0 for an ephemeral one.
            asset_root: Directory served to the companion device.

        Returns:
            The advertised connection URL.

        Raises:
            ValueError: If *port* is outside 0..65535.
            AlreadyRunningError: If a listener is already active.
            BindError: If the port cannot be bound. The session stays stopped.
            ServerError: If uvicorn does not come up. The session stays stopped.
        """
        if not 0 <= port <= 65535:
            raise ValueError(f"Port out of range: {port}")

        with self._lifecycle_lock:
            if self._thread is not None or self.state.read().running:
                raise AlreadyRunningError(
                    f"Pairing server already running at {self.state.read().url}"
                )

            sock = bind_listener(self._host, port)
            bound_port = sock.getsockname()[1]

            try:
                config = uvicorn.Config(
                    create_app(asset_root),
                    log_config=None,
                    access_log=False,
                    timeout_keep_alive=self._timeout_keep_alive,
                    timeout_graceful_shutdown=2,
                )
                server = uvicorn.Server(config)
                thread = threading.Thread(
                    target=server.run,
                    kwargs={"sockets": [sock]},
                    name=f"pairing-server-{bound_port}",
                    daemon=True,
                )
                thread.start()
            except BaseException:
                sock.close()
                raise

            if not self._wait_started(server, thread):
                server.should_exit = True
                thread.join(self._startup_timeout)
                sock.close()
                raise ServerError(f"Pairing server on port {bound_port} failed to start")

            self._sock = sock
            self._server = server
            self._thread = thread

            url = self._resolver(bound_port)
            self.state._publish(url, bound_port)

        logger.info("pairing_server_started", url=url, port=bound_port)
        return url

    def _wait_started(self, server: uvicorn.Server, thread: threading.Thread) -> bool:
        """Block until uvicorn is serving, its thread died, or the timeout passed."""
        deadline = time.monotonic() + self._startup_timeout
        while not server.started:
            if not thread.is_alive() or time.monotonic() > deadline:
                logger.error("pairing_server_startup_failed", alive=thread.is_alive())
                return False
            time.sleep(0.01)
        return True

    async def start_async(
        self, port: int = DEFAULT_PORT, asset_root: Path | str = DEFAULT_ASSET_ROOT
    ) -> str:
        """Run :meth:`start` off the calling event loop and await the bind."""
        return await asyncio.to_thread(self.start, port, asset_root)

    def stop(self, timeout: float = 5.0) -> None:
        """Close the listener and mark the session stopped. No-op if idle."""
        with self._lifecycle_lock:
            if self._thread is None:
                return
            server, thread, sock = self._server, self._thread, self._sock
            self._server = self._thread = self._sock = None

            server.should_exit = True
            thread.join(timeout)
            if thread.is_alive():
                logger.warning("pairing_server_stop_timeout", timeout=timeout)
            sock.close()
            self.state._clear()

        logger.info("pairing_server_stopped")

    async def stop_async(self, timeout: float = 5.0) -> None:
        """Run :meth:`stop` off the calling event loop."""
        await asyncio.to_thread(self.stop, timeout)
