"""Helper utilities for HTML components."""

from __future__ import annotations

import re

# Word boundaries for label capitalisation: ASCII whitespace only.
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])([a-z])")


def escape_text(text: str) -> str:
    """Basic HTML escaping, quotes included."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def escape_attr(text: str) -> str:
    """Escape text for use inside a quoted attribute value."""
    return escape_text(text)


def format_label(status: str) -> str:
    """Convert a status value to a human-readable label.

    Underscores and hyphens become spaces (one for one, runs are not
    merged) and a lower-case ASCII letter starting a word is upper-cased.
    Everything else is left as given, so ``"ACTIVE_user"`` becomes
    ``"ACTIVE User"`` and ``"ßtraße"`` stays as is.
    """
    spaced = status.replace("_", " ").replace("-", " ")
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)
