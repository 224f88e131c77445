"""Applets tab - catalog of applets for the companion device."""

from __future__ import annotations

from dataclasses import dataclass

from nicegui import ui

from retadi.ui.components.common import card_style, page_heading
from retadi.ui.theme import COLORS


@dataclass(frozen=True)
class AppletInfo:
    name: str
    description: str
    icon: str = "widgets"


CATALOG: tuple[AppletInfo, ...] = tuple(
    AppletInfo(f"Applet {i}", "Description of the applet functionality")
    for i in range(1, 7)
)


def applets_panel(catalog: tuple[AppletInfo, ...] = CATALOG) -> None:
    """Render the applet catalog as a card grid."""
    page_heading("Applets", "Manage and install applets for your device")

    def install(applet: AppletInfo) -> None:
        ui.notify(f"Installing {applet.name} is not available yet", type="info")

    with ui.grid(columns=3).classes("w-full gap-4 q-mt-md"):
        for applet in catalog:
            with ui.card().classes("q-pa-md").style(card_style()):
                with ui.row().classes("items-center gap-2"):
                    ui.icon(applet.icon).style(f"color: {COLORS['accent']}; font-size: 1.5rem;")
                    ui.label(applet.name).classes("text-h6").style(
                        f"color: {COLORS['text_primary']};"
                    )
                ui.label(applet.description).style(f"color: {COLORS['text_secondary']};")
                ui.button(
                    "Install", on_click=lambda a=applet: install(a)
                ).style(f"background: {COLORS['alt_accent']} !important; color: #ffffff;")
