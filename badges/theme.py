"""Badge gallery theme and CSS.

Provides BadgeTheme (a gr.themes.Base subclass) and GALLERY_CSS, the
layout rules for the gallery page. Badge colours themselves live in
assets/css/status-badge.css and reach the page through the style registry.
"""

from __future__ import annotations

import gradio as gr
from gradio.themes import Color


# ── Colour palette ─────────────────────────────────────────────────────
GREY_50 = "#f6f7f7"
GREY_100 = "#f0f0f1"
GREY_200 = "#dcdcde"
GREY_300 = "#c3c4c7"
GREY_400 = "#a7aaad"
GREY_500 = "#8c8f94"
GREY_600 = "#646970"
GREY_700 = "#50575e"
GREY_800 = "#3c434a"
GREY_900 = "#2c3338"
GREY_950 = "#1d2327"

BLUE_500 = "#2271b1"
BLUE_600 = "#135e96"


class BadgeTheme(gr.themes.Base):
    """Light admin-style theme for the badge gallery."""

    def __init__(self):
        grey = Color(
            GREY_50, GREY_100, GREY_200, GREY_300, GREY_400,
            GREY_500, GREY_600, GREY_700, GREY_800, GREY_900,
            GREY_950, name="grey",
        )

        super().__init__(
            primary_hue=gr.themes.colors.blue,
            secondary_hue=grey,
            neutral_hue=grey,
            font=["-apple-system", "BlinkMacSystemFont", "Segoe UI", "sans-serif"],
        )

        self.body_background_fill = GREY_100
        self.background_fill_primary = "#ffffff"
        self.body_text_color = GREY_950
        self.block_border_color = GREY_200
        self.block_radius = "4px"
        self.button_primary_background_fill = BLUE_500
        self.button_primary_background_fill_hover = BLUE_600
        self.button_primary_text_color = "#ffffff"


# ── Gallery layout ─────────────────────────────────────────────────────

GALLERY_CSS = """
.badge-preview {
    min-height: 48px;
    display: flex;
    align-items: center;
    padding: 8px 0;
}
.badge-legend {
    display: grid;
    grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
    gap: 16px;
}
.badge-legend-group h4 {
    margin: 0 0 8px;
    font-size: 12px;
    text-transform: uppercase;
    letter-spacing: 0.5px;
    color: #646970;
}
.badge-legend-group ul {
    list-style: none;
    margin: 0;
    padding: 0;
    display: flex;
    flex-wrap: wrap;
    gap: 6px;
}
"""
