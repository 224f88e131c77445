"""Dark theme configuration for the desktop shell."""

from __future__ import annotations

COLORS = {
    "accent": "#00ffc3",
    "alt_accent": "#004736",
    "accent_hover": "#008565",
    "bg_dark": "#222222",
    "bg_card": "#333333",
    "bg_hover": "#464646",
    "text_primary": "#ffffff",
    "text_secondary": "#d3d3d3",
    "text_muted": "#8c8c8c",
    "accent_red": "#f85149",
    "accent_yellow": "#d29922",
}

CSS = """
body {
    background-color: #222222 !important;
    color: #ffffff !important;
}
.q-card {
    background-color: #333333 !important;
    border-radius: 12px !important;
}
.q-drawer {
    background-color: #222222 !important;
}
.q-btn {
    text-transform: none !important;
}
.retadi-tabs .q-tab {
    width: 140px;
    height: 45px;
    margin: 6px 10px;
    border-radius: 10px;
    background-color: #333333;
    color: #d3d3d3;
    font-size: 16px;
}
.retadi-tabs .q-tab:hover {
    background-color: #464646;
    color: #ffffff;
}
.retadi-tabs .q-tab--active {
    background-color: #004736;
    color: #ffffff;
}
.retadi-tabs .q-tab--active:hover {
    background-color: #008565;
}
.retadi-qr {
    image-rendering: pixelated;
}
"""
