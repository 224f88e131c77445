"""Shared UI helpers for shell pages."""

from __future__ import annotations

from nicegui import ui

from retadi.ui.theme import COLORS


def card_style() -> str:
    return f"background: {COLORS['bg_card']}; border: none;"


def page_heading(title: str, subtitle: str | None = None) -> None:
    """Render a tab heading with an optional muted subtitle."""
    ui.label(title).classes("text-h4 text-bold").style(f"color: {COLORS['accent']};")
    if subtitle:
        ui.label(subtitle).classes("text-subtitle1").style(
            f"color: {COLORS['text_secondary']};"
        )


def card_header(title: str) -> None:
    ui.label(title).classes("text-h6").style(f"color: {COLORS['accent']};")


def kv_pair(label: str, value: str, value_color: str | None = None) -> None:
    """Render a compact key-value pair."""
    with ui.row().classes("items-center gap-2"):
        ui.label(f"{label}:").style(
            f"color: {COLORS['text_secondary']}; font-size: 0.95rem;"
        )
        ui.label(value).style(
            f"color: {value_color or COLORS['text_primary']}; font-weight: 600;"
        )
