"""Category lookup.

Compiled-in default categories and user-defined custom categories are merged
into one table at read time, so every caller resolves a category the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from remindpro_cli.models.core import Category


@dataclass(frozen=True)
class CategoryInfo:
    """Display information for a category."""

    id: str
    name: str
    color: str
    emoji: str | None = None
    is_default: bool = False


DEFAULT_CATEGORIES: dict[str, CategoryInfo] = {
    "work": CategoryInfo("work", "Work", "#3f51b5", "💼", True),
    "health": CategoryInfo("health", "Health", "#4caf50", "💪", True),
    "study": CategoryInfo("study", "Study", "#ff9800", "📚", True),
    "personal": CategoryInfo("personal", "Personal", "#9c27b0", "🏠", True),
}

UNKNOWN_CATEGORY = CategoryInfo("unknown", "Unknown", "#9e9e9e", "❓", False)


def build_category_lookup(
    custom_categories: Iterable[Category] = (),
) -> dict[str, CategoryInfo]:
    """Merge default and custom categories into one id-keyed table.

    Defaults come first; a custom category never replaces a default id.
    """
    lookup = dict(DEFAULT_CATEGORIES)
    for category in custom_categories:
        lookup.setdefault(
            category.id,
            CategoryInfo(
                id=category.id,
                name=category.name,
                color=category.color,
                emoji=category.emoji,
                is_default=category.is_default,
            ),
        )
    return lookup


def find_category(lookup: dict[str, CategoryInfo], key: str) -> CategoryInfo | None:
    """Find a category by id, or by name ignoring case."""
    if key in lookup:
        return lookup[key]
    lowered = key.strip().lower()
    for info in lookup.values():
        if info.name.lower() == lowered:
            return info
    return None


def resolve_category(lookup: dict[str, CategoryInfo], key: str) -> CategoryInfo:
    """Like ``find_category`` but falls back to ``UNKNOWN_CATEGORY``."""
    return find_category(lookup, key) or UNKNOWN_CATEGORY
