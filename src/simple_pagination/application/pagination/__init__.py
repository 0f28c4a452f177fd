"""Application pagination – state, transitions, paginate and page windows."""
from simple_pagination.application.pagination.state import DEFAULT_PER_PAGE, OrderBy, PaginatorState, SortDirection
from simple_pagination.application.pagination.transition import (
    change,
    change_filters,
    change_order,
    change_page,
    change_per_page_nb,
    parse_int,
)
from simple_pagination.application.pagination.executor import InMemoryQueryExecutor, MemoryQuery, QueryExecutor
from simple_pagination.application.pagination.window import GAP, MarkerKind, PageMarker, page_numbers, page_window
from simple_pagination.application.pagination.paginator import Paginator, clamp_page, compute_page_max, paginate
from simple_pagination.application.pagination.view import (
    PerPageOption,
    filter_inputs,
    order_indicator,
    per_page_options,
)

__all__ = [
    "DEFAULT_PER_PAGE",
    "GAP",
    "InMemoryQueryExecutor",
    "MarkerKind",
    "MemoryQuery",
    "OrderBy",
    "PageMarker",
    "Paginator",
    "PaginatorState",
    "PerPageOption",
    "QueryExecutor",
    "SortDirection",
    "change",
    "change_filters",
    "change_order",
    "change_page",
    "change_per_page_nb",
    "clamp_page",
    "compute_page_max",
    "filter_inputs",
    "order_indicator",
    "page_numbers",
    "page_window",
    "paginate",
    "parse_int",
]
