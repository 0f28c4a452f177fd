"""Application pagination – page window (``1 … 3 4 5 … 9``) computation."""
from __future__ import annotations

import dataclasses
from enum import Enum


class MarkerKind(str, Enum):
    PAGE = "page"
    GAP = "gap"


@dataclasses.dataclass(frozen=True)
class PageMarker:
    """One slot of a pagination control: a page link or an ellipsis."""

    kind: MarkerKind
    number: int | None = None
    current: bool = False
    first: bool = False
    last: bool = False

    @property
    def is_gap(self) -> bool:
        return self.kind is MarkerKind.GAP


GAP = PageMarker(MarkerKind.GAP)


def page_numbers(current_page: int, total_pages: int, delta: int = 1) -> list[int | None]:
    """Page numbers to display, ``None`` standing for a gap.

    >>> page_numbers(4, 9)
    [1, None, 3, 4, 5, None, 9]
    """
    if delta < 0:
        raise ValueError("delta must be >= 0")
    if total_pages <= 1:
        return []
    w_start = max(1, current_page - delta)
    w_end = min(total_pages, current_page + delta)

    out: list[int | None] = []
    for n in range(1, total_pages + 1):
        item = n if n in (1, total_pages) or w_start <= n <= w_end else None
        if item is None and out and out[-1] is None:
            continue
        out.append(item)
    return out


def page_window(current_page: int, total_pages: int, delta: int = 1) -> list[PageMarker]:
    """Markers for a pagination control, empty when there is a single page."""
    return [
        GAP
        if n is None
        else PageMarker(
            MarkerKind.PAGE,
            n,
            current=n == current_page,
            first=n == 1,
            last=n == total_pages,
        )
        for n in page_numbers(current_page, total_pages, delta)
    ]


__all__ = ["GAP", "MarkerKind", "PageMarker", "page_numbers", "page_window"]
