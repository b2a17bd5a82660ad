"""Status badge component — category-coloured pill with icon.

Statuses map to one of five categories through a built-in table, optionally
extended per instance::

    badge = StatusBadge({"churned": "danger", "trialing": Category.WARNING})
    badge.render("active")
    badge.render("something", category=Category.INFO)
    badge.render("in_progress", label="In Progress")
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from badges.components.helpers import escape_attr, escape_text, format_label
from badges.constants import (
    BADGE_CLASS,
    BUILTIN_STATUSES,
    ICON_FONT_CLASS,
    ICONS,
    STYLE_DEPENDENCIES,
    STYLE_HANDLE,
    STYLESHEET,
    Category,
)
from badges.services.style_registry import StyleRegistry, default_registry

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"

_CATEGORIES = (
    Category.SUCCESS,
    Category.WARNING,
    Category.DANGER,
    Category.INFO,
    Category.DEFAULT,
)


# Only ASCII whitespace and NUL are trimmed from statuses.
_TRIM_CHARS = " \t\n\r\0\x0b"


def _normalise(status: str) -> str:
    return status.strip(_TRIM_CHARS).lower()


class StatusBadge:
    """Resolves status strings to categories, icons and labels, and renders badges."""

    def __init__(
        self,
        overrides: Mapping[str, Category | str] | None = None,
        *,
        registry: StyleRegistry | None = None,
    ):
        merged = dict(BUILTIN_STATUSES)
        for status, category in (overrides or {}).items():
            merged[_normalise(status)] = Category.coerce(category)
        self._map = MappingProxyType(merged)
        self._registry = registry if registry is not None else default_registry()

    # ── Lookups ──

    def get_category(self, status: str) -> Category:
        """Return the category for *status*, or DEFAULT if unmapped."""
        return self._map.get(_normalise(status), Category.DEFAULT)

    @staticmethod
    def get_icon(category: Category | str) -> str:
        """Return the icon class for *category*.

        Unknown category strings get the default icon.
        """
        try:
            return ICONS[Category.coerce(category)]
        except ValueError:
            return ICONS[Category.DEFAULT]

    def is_known(self, status: str) -> bool:
        """Whether *status* has an entry in the map."""
        return _normalise(status) in self._map

    format_label = staticmethod(format_label)

    def is_category(self, status: str, category: Category | str) -> bool:
        return self.get_category(status) is Category.coerce(category)

    def is_success(self, status: str) -> bool:
        return self.is_category(status, Category.SUCCESS)

    def is_warning(self, status: str) -> bool:
        return self.is_category(status, Category.WARNING)

    def is_danger(self, status: str) -> bool:
        return self.is_category(status, Category.DANGER)

    def is_info(self, status: str) -> bool:
        return self.is_category(status, Category.INFO)

    def get_map(self) -> Mapping[str, Category]:
        """Return the merged status map as a read-only view."""
        return self._map

    @staticmethod
    def categories() -> list[Category]:
        """All categories in canonical order."""
        return list(_CATEGORIES)

    # ── Stylesheet ──

    def ensure_registered(self) -> bool:
        """Register and enqueue the badge stylesheet once per registry.

        Called by every render(); call it directly to load the stylesheet
        before any badge is rendered. Returns True on the call that did
        the registration.
        """
        return self._registry.require_style(
            STYLE_HANDLE, ASSETS_DIR, STYLESHEET, STYLE_DEPENDENCIES
        )

    enqueue = ensure_registered

    # ── Rendering ──

    def render(
        self,
        status: str,
        category: Category | str | None = None,
        label: str | None = None,
    ) -> str:
        """Render a status badge.

        Args:
            status: Status value, e.g. "active" or "on_hold".
            category: Use this category instead of the mapped one.
            label: Display text. Generated from *status* if omitted.
        """
        self.ensure_registered()

        resolved = Category.coerce(category) if category is not None else self.get_category(status)
        text = label if label is not None else format_label(status)
        icon = self.get_icon(resolved)

        return (
            f'<span class="{BADGE_CLASS} {BADGE_CLASS}--{escape_attr(resolved.value)}">'
            f'<span class="{ICON_FONT_CLASS} {escape_attr(icon)}"></span>'
            f"{escape_text(text)}"
            f"</span>"
        )


_default_badge: StatusBadge | None = None


def render_status_badge(
    status: str,
    category: Category | str | None = None,
    label: str | None = None,
) -> str:
    """Render a badge with the built-in status map."""
    global _default_badge
    if _default_badge is None:
        _default_badge = StatusBadge()
    return _default_badge.render(status, category=category, label=label)
