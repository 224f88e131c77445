"""Connect tab - start the pairing server and show the QR code."""

from __future__ import annotations

from nicegui import ui

from retadi.config import AppSettings
from retadi.exceptions import AlreadyRunningError, ServerError
from retadi.pairing.server import PairingServer
from retadi.ui.components.common import card_style, page_heading
from retadi.ui.render import QR_DISPLAY_PX, ConnectView, connect_view
from retadi.ui.services.qr import QrCache
from retadi.ui.theme import COLORS

POLL_INTERVAL_S = 0.25


def connect_panel(server: PairingServer, settings: AppSettings, cache: QrCache) -> None:
    """Render the Connect tab and poll the session for changes."""
    page_heading("Connect Device", "Start the server and scan the code with your tablet")

    async def start_server():
        try:
            url = await server.start_async(settings.port, settings.asset_root)
        except AlreadyRunningError as exc:
            ui.notify(str(exc), type="warning")
        except ServerError as exc:
            ui.notify(f"Could not start server: {exc}", type="negative")
        else:
            ui.notify(f"Server running at {url}", type="positive")
        refresh()

    async def stop_server():
        await server.stop_async()
        ui.notify("Server stopped", type="info")
        refresh()

    current: dict[str, ConnectView | None] = {"view": None}

    @ui.refreshable
    def body() -> None:
        view = current["view"]
        if view is None:
            return
        with ui.card().classes("items-center q-pa-lg").style(card_style()):
            ui.label(view.status_text).classes("text-h5 text-bold").style(
                f"color: {view.status_color};"
            )
            if view.url:
                ui.label(view.url).classes("text-h6").style(
                    f"color: {COLORS['text_primary']}; user-select: all;"
                )
            if view.qr_src:
                with ui.card().classes("q-pa-md").style("background: #ffffff;"):
                    ui.image(view.qr_src).classes("retadi-qr").style(
                        f"width: {QR_DISPLAY_PX}px; height: {QR_DISPLAY_PX}px;"
                    )
            ui.label(view.caption).style(f"color: {COLORS['text_secondary']};")

            if view.show_start:
                ui.button("Start Server", icon="play_arrow", on_click=start_server).classes(
                    "text-h6 q-px-xl q-mt-md"
                ).style(f"background: {COLORS['alt_accent']} !important; color: #ffffff;")
            if view.show_stop:
                ui.button("Stop Server", icon="stop", on_click=stop_server).props(
                    "flat"
                ).style(f"color: {COLORS['text_muted']};")

    def refresh() -> None:
        snapshot = server.state.read()
        view = connect_view(snapshot, cache.get(snapshot.url))
        if view != current["view"]:
            current["view"] = view
            body.refresh()

    body()
    refresh()
    ui.timer(POLL_INTERVAL_S, refresh)
