"""
Shell layout: a vertical tab bar on the left and the active tab's panel.
"""

from __future__ import annotations

from typing import Callable

from nicegui import ui

from retadi.ui.theme import COLORS, CSS

TABS = ("Connect", "Applets", "Settings")


def shell_layout(panels: dict[str, Callable[[], None]]) -> None:
    """Create the tabbed window.

    Args:
        panels: Tab name to a callable that builds that tab's content,
            in display order.
    """
    ui.add_css(CSS)
    ui.dark_mode(True)
    ui.colors(primary=COLORS["alt_accent"], secondary=COLORS["bg_card"], accent=COLORS["accent"])

    with ui.left_drawer(value=True).classes("q-pa-none").style(
        f"width: 180px; background-color: {COLORS['bg_dark']};"
    ):
        with ui.tabs().props("vertical indicator-color=transparent").classes(
            "retadi-tabs q-mt-md"
        ) as tabs:
            tab_refs = {name: ui.tab(name) for name in panels}

    first = next(iter(tab_refs.values()))
    with ui.tab_panels(tabs, value=first).classes("w-full").style(
        f"background-color: {COLORS['bg_dark']};"
    ):
        for name, build in panels.items():
            with ui.tab_panel(tab_refs[name]).classes("q-pa-lg"):
                build()
