"""Paging and sort helpers for the user table."""

from __future__ import annotations

ITEMS_PER_PAGE = 20
DEFAULT_SORT_FIELD = "id"


def sort_param(field: str, ascending: bool = True) -> str:
    """Build the API's sort value, e.g. "id,asc"."""
    return f"{field},{'asc' if ascending else 'desc'}"


def parse_sort(sort: str | None) -> tuple[str, bool]:
    """Inverse of sort_param. Blank input gives ("id", True)."""
    if not sort or not sort.strip():
        return DEFAULT_SORT_FIELD, True
    field, _, order = sort.strip().partition(",")
    return (field.strip() or DEFAULT_SORT_FIELD), order.strip().lower() != "desc"


def page_count(total_items: int, size: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed for total_items; an empty collection still has one page."""
    if size <= 0:
        raise ValueError("size must be positive")
    if total_items <= 0:
        return 1
    return -(-total_items // size)


__all__ = ["DEFAULT_SORT_FIELD", "ITEMS_PER_PAGE", "page_count", "parse_sort", "sort_param"]
