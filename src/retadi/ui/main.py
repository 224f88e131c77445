"""NiceGUI desktop shell setup and launch."""

from __future__ import annotations

from nicegui import app, ui

from retadi import __version__
from retadi.config import AppSettings
from retadi.exceptions import ServerError
from retadi.pairing.server import PairingServer
from retadi.pairing.state import SessionState
from retadi.ui.layout import shell_layout
from retadi.ui.services.qr import QrCache
from retadi.utils.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "ReTADI Server"
WINDOW_SIZE = (1000, 700)


def setup_ui(server: PairingServer, settings: AppSettings) -> None:
    """Register the shell page and the server lifecycle hooks."""
    cache = QrCache(size=settings.qr_size)

    @ui.page("/")
    def index():
        from retadi.ui.pages.applets import applets_panel
        from retadi.ui.pages.connect import connect_panel
        from retadi.ui.pages.settings import settings_panel

        shell_layout({
            "Connect": lambda: connect_panel(server, settings, cache),
            "Applets": applets_panel,
            "Settings": lambda: settings_panel(server, settings),
        })

    if settings.auto_start:
        async def auto_start():
            try:
                await server.start_async(settings.port, settings.asset_root)
            except ServerError as exc:
                logger.error("auto_start_failed", error=str(exc), port=settings.port)

        app.on_startup(auto_start)

    app.on_shutdown(server.stop_async)


def run_app(settings: AppSettings) -> None:
    """Open the shell window and block until it is closed."""
    state = SessionState(port=settings.port)
    server = PairingServer(state, timeout_keep_alive=settings.timeout_keep_alive)
    setup_ui(server, settings)

    logger.info("shell_starting", version=__version__, native=settings.native)
    ui.run(
        title=WINDOW_TITLE,
        native=settings.native,
        window_size=WINDOW_SIZE if settings.native else None,
        port=settings.ui_port,
        dark=True,
        reload=False,
        show=not settings.native,
    )
