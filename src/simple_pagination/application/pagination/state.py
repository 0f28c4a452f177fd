"""Application pagination – PaginatorState, OrderBy, SortDirection."""
from __future__ import annotations

import dataclasses
import types
from enum import Enum
from typing import Any, Mapping, NamedTuple, Sequence

DEFAULT_PER_PAGE = 10


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class OrderBy(NamedTuple):
    """Active sort: a direction paired with a field identifier."""
    direction: SortDirection
    field: str

    @classmethod
    def asc(cls, field: str) -> "OrderBy":
        return cls(SortDirection.ASC, field)

    @classmethod
    def desc(cls, field: str) -> "OrderBy":
        return cls(SortDirection.DESC, field)


@dataclasses.dataclass(frozen=True)
class PaginatorState:
    """Pagination, sort and filter intent for one listing, plus the last page fetched.

    Instances are never mutated: transitions and :func:`paginate` return a
    replacement built with :func:`dataclasses.replace`.

    ``per_page_nb`` of ``0`` means "all records on a single page"; ``None``
    means no size was chosen yet (see :attr:`effective_per_page_nb`).
    ``filters`` maps a field identifier to the text typed for it; an empty
    string is kept as state but places no constraint on the query.
    """

    order_by: OrderBy | None = OrderBy(SortDirection.ASC, "id")
    filters: Mapping[str, str] = dataclasses.field(default_factory=dict)
    page: int = 1
    page_max: int = 1
    per_page_nb: int | None = None
    per_page_items: tuple[int, ...] = (5, 10, 20, 0)
    data: Sequence[Any] = ()

    def __post_init__(self) -> None:
        # each snapshot holds its own read-only copy of the filters
        object.__setattr__(self, "filters", types.MappingProxyType(dict(self.filters)))
        object.__setattr__(self, "per_page_items", tuple(self.per_page_items))

    def __hash__(self) -> int:
        return hash(
            (
                self.order_by,
                frozenset(self.filters.items()),
                self.page,
                self.page_max,
                self.per_page_nb,
                self.per_page_items,
            )
        )

    @classmethod
    def with_filter_fields(cls, *fields: str, **kwargs: Any) -> "PaginatorState":
        """Build a state exposing an empty filter input for each of *fields*."""
        return cls(filters={f: "" for f in fields}, **kwargs)

    @property
    def effective_per_page_nb(self) -> int:
        if self.per_page_nb is not None:
            return self.per_page_nb
        return self.per_page_items[0] if self.per_page_items else DEFAULT_PER_PAGE

    @property
    def active_filters(self) -> dict[str, str]:
        return {k: v for k, v in self.filters.items() if v != ""}

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_max

    def replace(self, **changes: Any) -> "PaginatorState":
        return dataclasses.replace(self, **changes)


__all__ = ["DEFAULT_PER_PAGE", "OrderBy", "PaginatorState", "SortDirection"]
