"""Settings tab - server port, asset directory, auto-start, about."""

from __future__ import annotations

from nicegui import ui
from pydantic import ValidationError

from retadi import __version__
from retadi.config import AppSettings
from retadi.pairing.server import PairingServer
from retadi.ui.components.common import card_header, card_style, kv_pair, page_heading
from retadi.ui.theme import COLORS


def port_from_input(value: float | None) -> int | None:
    """Whole port number from a number field, or None while it is cleared."""
    if value is None:
        return None
    return int(value)


def settings_panel(server: PairingServer, settings: AppSettings) -> None:
    """Render the settings cards bound to the in-memory *settings*."""
    page_heading("Settings")

    def apply(field: str, value) -> None:
        try:
            setattr(settings, field, value)
        except ValidationError as exc:
            ui.notify(exc.errors()[0]["msg"], type="negative")
            return
        if field == "port" and server.is_running:
            ui.notify("The new port is used at the next server start", type="info")

    def on_port_change(e) -> None:
        port = port_from_input(e.value)
        if port is not None:
            apply("port", port)

    with ui.card().classes("w-full q-pa-md q-mt-md").style(card_style()):
        card_header("Server Settings")
        with ui.row().classes("items-center gap-4"):
            ui.number(
                "Port",
                value=settings.port,
                min=0,
                max=65535,
                precision=0,
                on_change=on_port_change,
            ).classes("w-32")
            ui.input(
                "Asset directory",
                value=str(settings.asset_root),
                on_change=lambda e: apply("asset_root", e.value),
            ).classes("w-80")
        kv_pair("Auto-start", "On" if settings.auto_start else "Off")
        ui.label("Set at launch with --auto-start or RETADI_AUTO_START").classes(
            "text-caption"
        ).style(f"color: {COLORS['text_muted']};")

    with ui.card().classes("w-full q-pa-md q-mt-md").style(card_style()):
        card_header("About")
        kv_pair("Version", f"ReTADI Server v{__version__}")
        ui.label("Remote Tablet Display Interface").style(
            f"color: {COLORS['text_secondary']};"
        )
