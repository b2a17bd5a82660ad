"""Badge legend component — every known status grouped by category."""

from __future__ import annotations

from badges.components.helpers import escape_text
from badges.components.status_badge import StatusBadge
from badges.constants import Category


def group_statuses(badge: StatusBadge) -> dict[Category, list[str]]:
    """Return the badge's known statuses grouped by category, sorted by name."""
    groups: dict[Category, list[str]] = {c: [] for c in StatusBadge.categories()}
    for status, category in badge.get_map().items():
        groups[category].append(status)
    for statuses in groups.values():
        statuses.sort()
    return groups


def render_badge_legend(badge: StatusBadge) -> str:
    """Render a legend of all statuses, one group per category.

    Empty categories are left out.
    """
    sections = []
    for category, statuses in group_statuses(badge).items():
        if not statuses:
            continue
        items = "".join(f"<li>{badge.render(s)}</li>" for s in statuses)
        sections.append(
            f'<div class="badge-legend-group">'
            f"<h4>{escape_text(category.value)} ({len(statuses)})</h4>"
            f"<ul>{items}</ul>"
            f"</div>"
        )
    return f'<div class="badge-legend">{"".join(sections)}</div>'
