"""Application pagination – state transitions driven by user-submitted parameters.

Recognised keys::

    order_by      "title"            toggle/select the sort column
    per_page_nb   "25"               change page size (resets page to 1)
    page          "3"                jump to a page (clamped later by paginate)
    filters       {"title": "foo"}   replace all filters

Flattened form keys (``filters[title]=foo``) are accepted as well. Keys that
are absent leave the corresponding part of the state untouched.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from simple_pagination.application.pagination.state import OrderBy, PaginatorState, SortDirection
from simple_pagination.kernel.errors import InvalidParameterError
from simple_pagination.observability.logging import get_logger

_log = get_logger(__name__)

_FILTER_PREFIX = "filters["

Params = Mapping[str, Any]


def parse_int(name: str, raw: Any) -> int:
    """Parse an integer parameter, raising :class:`InvalidParameterError`."""
    if isinstance(raw, bool):
        raise InvalidParameterError(name, raw, "expected an integer")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise InvalidParameterError(name, raw, "expected an integer", cause=exc) from exc


def change_order(state: PaginatorState, params: Params) -> PaginatorState:
    field = params.get("order_by")
    if not isinstance(field, str) or not field:
        return state
    match state.order_by:
        case (SortDirection.ASC, f) if f == field:
            order_by = OrderBy.desc(field)
        case (SortDirection.DESC, f) if f == field:
            order_by = OrderBy.asc(field)
        case _:
            order_by = OrderBy.asc(field)
    return state.replace(order_by=order_by)


def change_per_page_nb(state: PaginatorState, params: Params) -> PaginatorState:
    if params.get("per_page_nb") is None:
        return state
    per_page_nb = parse_int("per_page_nb", params["per_page_nb"])
    if per_page_nb < 0:
        raise InvalidParameterError("per_page_nb", per_page_nb, "must be >= 0")
    # a new page size invalidates the current offset
    return state.replace(per_page_nb=per_page_nb, page=1)


def change_page(state: PaginatorState, params: Params) -> PaginatorState:
    if params.get("page") is None:
        return state
    page = parse_int("page", params["page"])
    if page < 1:
        raise InvalidParameterError("page", page, "must be >= 1")
    return state.replace(page=page)


def change_filters(state: PaginatorState, params: Params) -> PaginatorState:
    filters = _extract_filters(params)
    if filters is None:
        return state
    return state.replace(filters=filters)


def _extract_filters(params: Params) -> dict[str, str] | None:
    nested = params.get("filters")
    flat = {
        key[len(_FILTER_PREFIX):-1]: value
        for key, value in params.items()
        if isinstance(key, str)
        and key.startswith(_FILTER_PREFIX)
        and key.endswith("]")
        and len(key) > len(_FILTER_PREFIX) + 1
    }
    if not isinstance(nested, Mapping) and not flat:
        return None
    merged: dict[str, Any] = dict(nested) if isinstance(nested, Mapping) else {}
    merged.update(flat)
    return {str(k): "" if v is None else str(v) for k, v in merged.items()}


_STEPS: tuple[tuple[str, Callable[[PaginatorState, Params], PaginatorState]], ...] = (
    ("order_by", change_order),
    ("per_page_nb", change_per_page_nb),
    ("page", change_page),
    ("filters", change_filters),
)


def change(state: PaginatorState, params: Params, *, strict: bool = False) -> PaginatorState:
    """Apply every recognised parameter in *params* to *state*.

    Steps run in a fixed order so that a page-size change resets the page
    before an explicit ``page`` in the same request is applied.

    With ``strict=False`` an :class:`InvalidParameterError` skips only the
    offending field; with ``strict=True`` it propagates.
    """
    for name, step in _STEPS:
        try:
            state = step(state, params)
        except InvalidParameterError as exc:
            if strict:
                raise
            _log.warning("pagination.param_ignored", parameter=name, value=exc.value, reason=exc.reason)
    return state


__all__ = [
    "change",
    "change_filters",
    "change_order",
    "change_page",
    "change_per_page_nb",
    "parse_int",
]
