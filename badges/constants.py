"""Shared constants for status badges — single source of truth."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from badges.errors import InvalidCategoryError


class Category(str, Enum):
    """Badge categories, in canonical display order."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"
    DEFAULT = "default"

    @classmethod
    def coerce(cls, value: Category | str) -> Category:
        """Return the Category for *value*, accepting plain strings.

        Strings are matched case-insensitively after trimming. Raises
        InvalidCategoryError for anything outside the five categories.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidCategoryError(value)


# ── Stylesheet ─────────────────────────────────────────────────────────
STYLE_HANDLE = "wp-status-badge"
STYLESHEET = "css/status-badge.css"
STYLE_DEPENDENCIES = ("dashicons",)

# ── Markup ─────────────────────────────────────────────────────────────
BADGE_CLASS = "wp-status-badge"
ICON_FONT_CLASS = "dashicons"

ICONS: MappingProxyType[Category, str] = MappingProxyType({
    Category.SUCCESS: "dashicons-yes-alt",
    Category.WARNING: "dashicons-clock",
    Category.DANGER: "dashicons-dismiss",
    Category.INFO: "dashicons-info-outline",
    Category.DEFAULT: "dashicons-marker",
})

# Common status strings across e-commerce, CRM and general app workflows.
BUILTIN_STATUSES: MappingProxyType[str, Category] = MappingProxyType({
    # Success (green)
    "active": Category.SUCCESS,
    "approved": Category.SUCCESS,
    "completed": Category.SUCCESS,
    "confirmed": Category.SUCCESS,
    "connected": Category.SUCCESS,
    "delivered": Category.SUCCESS,
    "enabled": Category.SUCCESS,
    "live": Category.SUCCESS,
    "open": Category.SUCCESS,
    "paid": Category.SUCCESS,
    "published": Category.SUCCESS,
    "resolved": Category.SUCCESS,
    "valid": Category.SUCCESS,
    "verified": Category.SUCCESS,
    "yes": Category.SUCCESS,
    # Warning (amber)
    "awaiting": Category.WARNING,
    "draft": Category.WARNING,
    "expiring": Category.WARNING,
    "on-hold": Category.WARNING,
    "on_hold": Category.WARNING,
    "partially_refunded": Category.WARNING,
    "pending": Category.WARNING,
    "processing": Category.WARNING,
    "review": Category.WARNING,
    "scheduled": Category.WARNING,
    "trial": Category.WARNING,
    "trialing": Category.WARNING,
    "unpaid": Category.WARNING,
    # Danger (red)
    "banned": Category.DANGER,
    "blocked": Category.DANGER,
    "cancelled": Category.DANGER,
    "canceled": Category.DANGER,
    "declined": Category.DANGER,
    "error": Category.DANGER,
    "expired": Category.DANGER,
    "failed": Category.DANGER,
    "invalid": Category.DANGER,
    "overdue": Category.DANGER,
    "refunded": Category.DANGER,
    "rejected": Category.DANGER,
    "revoked": Category.DANGER,
    "spam": Category.DANGER,
    "suspended": Category.DANGER,
    "terminated": Category.DANGER,
    # Info (blue)
    "importing": Category.INFO,
    "info": Category.INFO,
    "new": Category.INFO,
    "notice": Category.INFO,
    "syncing": Category.INFO,
    "updated": Category.INFO,
    # Default (grey)
    "archived": Category.DEFAULT,
    "closed": Category.DEFAULT,
    "disabled": Category.DEFAULT,
    "hidden": Category.DEFAULT,
    "inactive": Category.DEFAULT,
    "no": Category.DEFAULT,
    "none": Category.DEFAULT,
    "paused": Category.DEFAULT,
    "trashed": Category.DEFAULT,
    "unknown": Category.DEFAULT,
})
