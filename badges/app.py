"""Main entry point for the status badge gallery.

Type a status to preview its badge; the legend below lists every status
the badge knows about, grouped by category.

Launch:
    python -m badges.app
"""

from __future__ import annotations

import logging

import gradio as gr

from badges.components.badge_grid import render_badge_legend
from badges.components.status_badge import StatusBadge
from badges.config import settings
from badges.log import configure_logging
from badges.services.style_registry import StyleRegistry, default_registry
from badges.theme import GALLERY_CSS, BadgeTheme

logger = logging.getLogger(__name__)

AUTO = "auto"
CATEGORY_CHOICES = [AUTO] + [c.value for c in StatusBadge.categories()]


def preview_badge(badge: StatusBadge, status: str, category: str = AUTO, label: str = "") -> str:
    """Render the preview badge for the gallery inputs.

    ``AUTO`` and an empty label mean "resolve from the status".
    """
    if not status.strip():
        return ""
    return badge.render(
        status,
        category=None if category in (None, AUTO) else category,
        label=label or None,
    )


def describe_status(badge: StatusBadge, status: str) -> str:
    """One-line summary of how a status resolves."""
    if not status.strip():
        return ""
    category = badge.get_category(status)
    known = badge.is_known(status)
    source = "mapped" if known else "unmapped, using default"
    return f"{category.value} · {badge.get_icon(category)} · {source}"


def create_app(badge: StatusBadge | None = None) -> gr.Blocks:
    """Build the badge gallery page."""
    if badge is None:
        badge = StatusBadge(settings.get_overrides())

    with gr.Blocks(title="Status Badges") as app:
        gr.Markdown("## Status badges")

        with gr.Row():
            status_in = gr.Textbox(label="Status", value="active", scale=2)
            category_in = gr.Dropdown(
                label="Category", choices=CATEGORY_CHOICES, value=AUTO, scale=1,
            )
            label_in = gr.Textbox(label="Label", placeholder="Generated from status", scale=2)

        preview = gr.HTML(
            value=preview_badge(badge, "active"),
            elem_classes="badge-preview",
        )
        summary = gr.Markdown(describe_status(badge, "active"))

        gr.Markdown("### Known statuses")
        gr.HTML(render_badge_legend(badge))

        def _update(status, category, label):
            return preview_badge(badge, status, category, label), describe_status(badge, status)

        for component in (status_in, category_in, label_in):
            component.change(
                _update,
                inputs=[status_in, category_in, label_in],
                outputs=[preview, summary],
            )

    return app


def page_css(registry: StyleRegistry | None = None) -> str:
    """Stylesheets required by rendered components plus the gallery layout."""
    registry = registry if registry is not None else default_registry()
    missing = registry.missing_dependencies()
    if missing:
        logger.warning("Stylesheet dependencies not bundled: %s", ", ".join(missing))
    return f"{registry.render_css()}\n{GALLERY_CSS}"


def main():
    configure_logging(settings.log_level)

    app = create_app()
    logger.info("Starting badge gallery on %s:%d", settings.server_name, settings.server_port)
    app.launch(
        server_name=settings.server_name,
        server_port=settings.server_port,
        share=settings.share,
        show_error=True,
        theme=BadgeTheme(),
        css=page_css(),
    )


if __name__ == "__main__":
    main()
