"""Application pagination – QueryExecutor Protocol and InMemoryQueryExecutor."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, Protocol, Sequence, TypeVar, runtime_checkable

from simple_pagination.application.pagination.state import SortDirection
from simple_pagination.kernel.errors import QueryError

Q = TypeVar("Q")
T = TypeVar("T")


@runtime_checkable
class QueryExecutor(Protocol[Q]):
    """Capabilities :func:`paginate` needs from a data source.

    ``Q`` is the executor's own query type; paginate treats it as opaque and
    only threads it through these calls. Implementations must reject field
    names that do not map to a real column with :class:`QueryError`.
    """

    def count(self, query: Q) -> int: ...
    def filter(self, query: Q, field: str, substring: str) -> Q: ...
    def order(self, query: Q, field: str, direction: SortDirection) -> Q: ...
    def limit_offset(self, query: Q, limit: int, offset: int) -> Q: ...
    def fetch(self, query: Q) -> Sequence[Any]: ...
    def expand(self, query: Q, relations: Sequence[str]) -> Q: ...


@dataclasses.dataclass(frozen=True)
class MemoryQuery(Generic[T]):
    """Declarative query over an in-memory sequence.

    Clauses accumulate and are only evaluated by
    :meth:`InMemoryQueryExecutor.fetch` / :meth:`~InMemoryQueryExecutor.count`
    in SQL order (filter, order, offset/limit), whatever order they were added in.
    """

    records: tuple[T, ...]
    filters: tuple[tuple[str, str], ...] = ()
    order_by: tuple[str, SortDirection] | None = None
    limit: int | None = None
    offset: int = 0
    relations: tuple[str, ...] = ()


class InMemoryQueryExecutor(Generic[T]):
    """Query executor over a list of dicts or plain objects."""

    def __init__(
        self,
        fields: Iterable[str] | None = None,
        key_fn: Callable[[T], dict[str, Any]] | None = None,
    ) -> None:
        self._fields = frozenset(fields) if fields is not None else None
        self._key_fn: Callable[[T], dict[str, Any]] = key_fn or (lambda x: x if isinstance(x, dict) else vars(x))

    def query(self, records: Iterable[T]) -> MemoryQuery[T]:
        return MemoryQuery(records=tuple(records))

    def _check_field(self, query: MemoryQuery[T], field: str) -> None:
        known = self._fields
        if known is None:
            if not query.records:
                return
            known = frozenset(k for r in query.records for k in self._key_fn(r))
        if field not in known:
            raise QueryError.unknown_field(field, "in-memory records")

    def count(self, query: MemoryQuery[T]) -> int:
        return len(self._matching(query))

    def filter(self, query: MemoryQuery[T], field: str, substring: str) -> MemoryQuery[T]:
        self._check_field(query, field)
        return dataclasses.replace(query, filters=query.filters + ((field, substring),))

    def order(self, query: MemoryQuery[T], field: str, direction: SortDirection) -> MemoryQuery[T]:
        self._check_field(query, field)
        return dataclasses.replace(query, order_by=(field, SortDirection(direction)))

    def limit_offset(self, query: MemoryQuery[T], limit: int, offset: int) -> MemoryQuery[T]:
        return dataclasses.replace(query, limit=limit, offset=offset)

    def expand(self, query: MemoryQuery[T], relations: Sequence[str]) -> MemoryQuery[T]:
        # related objects are already in memory; only the names are checked
        for relation in relations:
            self._check_field(query, relation)
        return dataclasses.replace(query, relations=query.relations + tuple(relations))

    def fetch(self, query: MemoryQuery[T]) -> list[T]:
        rows = self._matching(query)
        if query.order_by is not None:
            field, direction = query.order_by
            rows.sort(
                key=lambda r: _sort_key(self._key_fn(r).get(field)),
                reverse=direction == SortDirection.DESC,
            )
        end = None if query.limit is None else query.offset + query.limit
        return rows[query.offset:end]

    def _matching(self, query: MemoryQuery[T]) -> list[T]:
        return [r for r in query.records if self._matches(self._key_fn(r), query.filters)]

    @staticmethod
    def _matches(row: dict[str, Any], filters: tuple[tuple[str, str], ...]) -> bool:
        for field, substring in filters:
            value = row.get(field)
            if value is None or substring.casefold() not in str(value).casefold():
                return False
        return True


def _sort_key(value: Any) -> tuple[bool, Any]:
    # NULLs sort first when ascending, as in SQLite and MySQL
    return (value is not None, value)


__all__ = ["InMemoryQueryExecutor", "MemoryQuery", "QueryExecutor"]
