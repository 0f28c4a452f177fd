"""SQLAlchemy adapter – SqlAlchemyQueryExecutor."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import Select, String, cast, func, inspect, select
from sqlalchemy.orm import Session, selectinload

from simple_pagination.application.pagination.state import SortDirection
from simple_pagination.kernel.errors import QueryError

_LIKE_ESCAPE = "\\"


def select_all(model: type[Any]) -> Select[Any]:
    return select(model)


def _contains_pattern(substring: str) -> str:
    escaped = (
        substring.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class SqlAlchemyQueryExecutor:
    """Runs :func:`~simple_pagination.application.pagination.paginate` against a mapped model.

    Only the names in *fields* can be filtered or sorted on. By default these
    are the mapped column attributes of *model*; pass an explicit mapping of
    name to column expression to narrow or rename them.
    """

    def __init__(
        self,
        session: Session,
        model: type[Any],
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        mapper = inspect(model)
        if fields is None:
            fields = {attr.key: getattr(model, attr.key) for attr in mapper.column_attrs}
        self._fields = dict(fields)
        self._relations = {rel.key: getattr(model, rel.key) for rel in mapper.relationships}

    def _column(self, field: str) -> Any:
        try:
            return self._fields[field]
        except KeyError:
            raise QueryError.unknown_field(field, self._model.__name__) from None

    def count(self, query: Select[Any]) -> int:
        stmt = select(func.count()).select_from(query.order_by(None).subquery())
        return int(self._session.scalar(stmt) or 0)

    def filter(self, query: Select[Any], field: str, substring: str) -> Select[Any]:
        column = self._column(field)
        if not isinstance(getattr(column, "type", None), String):
            # numbers, dates etc. are matched on their text form
            column = cast(column, String)
        return query.where(column.ilike(_contains_pattern(substring), escape=_LIKE_ESCAPE))

    def order(self, query: Select[Any], field: str, direction: SortDirection) -> Select[Any]:
        column = self._column(field)
        clause = column.desc() if SortDirection(direction) is SortDirection.DESC else column.asc()
        return query.order_by(clause)

    def limit_offset(self, query: Select[Any], limit: int, offset: int) -> Select[Any]:
        return query.limit(limit).offset(offset)

    def expand(self, query: Select[Any], relations: Sequence[str]) -> Select[Any]:
        options = []
        for name in relations:
            try:
                options.append(selectinload(self._relations[name]))
            except KeyError:
                raise QueryError(
                    f"Unknown relationship '{name}' on {self._model.__name__}", field=name
                ) from None
        return query.options(*options)

    def fetch(self, query: Select[Any]) -> list[Any]:
        return list(self._session.scalars(query).all())


__all__ = ["SqlAlchemyQueryExecutor", "select_all"]
