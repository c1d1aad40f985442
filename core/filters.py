"""
core/filters.py -- Response shaping for upstream collections.

Pure functions. No I/O, no logging, no mutation of the input.
"""

from collections.abc import Iterable

from core.models import TodoItem, is_deleted


def filter_deleted(items: Iterable[TodoItem]) -> list[TodoItem]:
    """Return the items whose soft-delete flag is not set, in upstream order.

    The returned list is new; the item dicts themselves are passed through
    unchanged so every upstream field survives.
    """
    return [item for item in items if not is_deleted(item)]
