"""Application pagination – paginate() and the Paginator service."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from simple_pagination.application.pagination.executor import QueryExecutor
from simple_pagination.application.pagination.state import OrderBy, PaginatorState
from simple_pagination.application.pagination.transition import Params, change
from simple_pagination.application.pagination.window import PageMarker, page_window
from simple_pagination.config.settings import PaginationSettings
from simple_pagination.observability.logging import get_logger

Q = TypeVar("Q")

_log = get_logger(__name__)


def compute_page_max(record_count: int, per_page_nb: int) -> int:
    """Number of pages needed for *record_count* rows; never less than 1.

    A page size of ``0`` puts every record on one page.
    """
    if per_page_nb == 0 or record_count <= 0:
        return 1
    return 1 + (record_count - 1) // per_page_nb


def clamp_page(page: int, page_max: int) -> int:
    return max(1, min(page, page_max))


def paginate(
    query: Q,
    state: PaginatorState,
    executor: QueryExecutor[Q],
    *,
    expand: Sequence[str] | None = None,
) -> PaginatorState:
    """Run *state* against *query* and return the state with the page filled in.

    Non-empty filters become case-insensitive "contains" predicates, ANDed
    together. ``page_max`` is recomputed from the filtered count and
    ``page`` is clamped into ``[1, page_max]``. *expand* names relations to
    eager-load; it is handed to the executor untouched.

    Errors raised by the executor (unknown fields, unavailable data source)
    propagate to the caller.
    """
    per_page_nb = state.effective_per_page_nb

    filtered = query
    for field, value in state.active_filters.items():
        filtered = executor.filter(filtered, field, value)

    record_count = executor.count(filtered)
    page_max = compute_page_max(record_count, per_page_nb)
    page = clamp_page(state.page, page_max)

    paged = filtered
    if state.order_by is not None:
        direction, field = state.order_by
        paged = executor.order(paged, field, direction)
    if per_page_nb > 0:
        paged = executor.limit_offset(paged, per_page_nb, (page - 1) * per_page_nb)
    if expand:
        paged = executor.expand(paged, expand)

    data = executor.fetch(paged)
    _log.debug(
        "pagination.paginated",
        record_count=record_count,
        page=page,
        page_max=page_max,
        per_page_nb=per_page_nb,
    )
    return state.replace(per_page_nb=per_page_nb, page_max=page_max, page=page, data=data)


class Paginator(Generic[Q]):
    """Binds an executor and listing defaults for a single kind of listing.

    Usage::

        paginator = Paginator(SqlAlchemyQueryExecutor(session, Thing), filter_fields=["title"])
        state = paginator.paginate(select(Thing), paginator.initial_state())
        # on every user event
        state = paginator.handle(select(Thing), state, request.query_params)
    """

    def __init__(
        self,
        executor: QueryExecutor[Q],
        *,
        settings: PaginationSettings | None = None,
        filter_fields: Sequence[str] = (),
        order_by: OrderBy | None = None,
        expand: Sequence[str] | None = None,
    ) -> None:
        self._executor = executor
        self._settings = settings or PaginationSettings()
        self._filter_fields = tuple(filter_fields)
        self._order_by = order_by if order_by is not None else OrderBy.asc(self._settings.default_order_field)
        self._expand = tuple(expand) if expand else None

    @property
    def settings(self) -> PaginationSettings:
        return self._settings

    def initial_state(self) -> PaginatorState:
        items = tuple(self._settings.per_page_items)
        return PaginatorState.with_filter_fields(
            *self._filter_fields,
            order_by=self._order_by,
            per_page_items=items,
            per_page_nb=None if items else self._settings.default_per_page,
        )

    def change(self, state: PaginatorState, params: Params) -> PaginatorState:
        return change(state, params, strict=self._settings.strict_params)

    def paginate(self, query: Q, state: PaginatorState) -> PaginatorState:
        return paginate(query, state, self._executor, expand=self._expand)

    def handle(self, query: Q, state: PaginatorState, params: Params) -> PaginatorState:
        """Apply *params* to *state* then refresh the page from *query*."""
        return self.paginate(query, self.change(state, params))

    def window(self, state: PaginatorState) -> list[PageMarker]:
        return page_window(state.page, state.page_max, self._settings.window_delta)


__all__ = ["Paginator", "clamp_page", "compute_page_max", "paginate"]
