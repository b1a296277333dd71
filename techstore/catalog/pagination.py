"""Pagination windower.

Splits an ordered result sequence into fixed-size pages and computes the
page-number window shown by navigation controls.
"""

from collections.abc import Sequence
from typing import Final, TypeVar

from techstore.domain.exceptions import PageOutOfRangeError

T = TypeVar("T")

PAGE_SIZE: Final = 12
MAX_VISIBLE_PAGES: Final = 5


class _Ellipsis:
    """Marker for a collapsed run of page numbers."""

    _instance: "_Ellipsis | None" = None

    def __new__(cls) -> "_Ellipsis":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ELLIPSIS"


ELLIPSIS: Final = _Ellipsis()

PageWindowItem = int | _Ellipsis


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Calculate number of pages.

    Args:
        count: Number of items.
        page_size: Items per page.

    Returns:
        Page count, 0 for an empty sequence.
    """
    return (max(count, 0) + page_size - 1) // page_size


def clamp_page(page: int, pages: int) -> int:
    """Clamp a page number into ``[1, max(1, pages)]``."""
    return min(max(page, 1), max(pages, 1))


def slice_page(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Get the items of one page.

    Page 1 of an empty sequence is valid and empty.

    Args:
        items: Ordered items.
        page: Page number (1-based).
        page_size: Items per page.

    Returns:
        Items on the page.

    Raises:
        PageOutOfRangeError: If the page is outside ``[1, max(1, total_pages)]``.
    """
    pages = total_pages(len(items), page_size)
    if page < 1 or page > max(pages, 1):
        raise PageOutOfRangeError(page, pages)

    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def visible_page_window(
    current_page: int,
    pages: int,
    max_visible: int = MAX_VISIBLE_PAGES,
) -> list[PageWindowItem]:
    """Compute the page numbers to show in navigation controls.

    The window holds up to ``max_visible`` pages centered on the current
    page, shifted to stay full near either boundary. Page 1 and the last
    page are always shown; an ELLIPSIS stands for each skipped run.

    Args:
        current_page: Current page number.
        pages: Total number of pages.
        max_visible: Size of the central window.

    Returns:
        Page numbers and ELLIPSIS markers; empty when there are no pages.
    """
    if pages <= 0:
        return []

    start = max(1, current_page - max_visible // 2)
    end = min(pages, start + max_visible - 1)
    start = max(1, end - max_visible + 1)

    window: list[PageWindowItem] = []

    if start > 1:
        window.append(1)
        if start > 2:
            window.append(ELLIPSIS)

    window.extend(range(start, end + 1))

    if end < pages:
        if end < pages - 1:
            window.append(ELLIPSIS)
        window.append(pages)

    return window

