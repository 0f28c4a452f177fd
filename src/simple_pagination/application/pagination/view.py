"""Application pagination – render-model helpers for sort links, page-size selector and filter inputs."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from simple_pagination.application.pagination.state import PaginatorState, SortDirection

DEFAULT_ARROWS: Mapping[SortDirection, str] = {
    SortDirection.ASC: " (asc)",
    SortDirection.DESC: " (desc)",
}


@dataclasses.dataclass(frozen=True)
class PerPageOption:
    value: int
    label: str
    selected: bool = False


def order_indicator(
    state: PaginatorState,
    field: str,
    arrows: Mapping[SortDirection, str] | None = None,
) -> str:
    """Suffix shown next to a sortable column header; empty unless *field* is the sort column."""
    if state.order_by is None or state.order_by.field != field:
        return ""
    labels = {**DEFAULT_ARROWS, **(arrows or {})}
    return labels[SortDirection(state.order_by.direction)]


def per_page_options(state: PaginatorState, all_label: str = "All") -> list[PerPageOption]:
    current = state.effective_per_page_nb
    return [
        PerPageOption(value=n, label=all_label if n == 0 else str(n), selected=n == current)
        for n in state.per_page_items
    ]


def filter_inputs(state: PaginatorState) -> list[tuple[str, str]]:
    return list(state.filters.items())


__all__ = ["DEFAULT_ARROWS", "PerPageOption", "filter_inputs", "order_indicator", "per_page_options"]
