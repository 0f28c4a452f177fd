"""Infrastructure errors — failures at the query executor boundary."""

from __future__ import annotations

from typing import Any

from simple_pagination.kernel.errors.root import PaginationError


class InfrastructureError(PaginationError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class QueryError(InfrastructureError):
    """The executor refused to build a query.

    Typically an unknown field or relationship name; ``field`` carries the
    offending identifier when there is one.
    """

    default_code = "query_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        if field is not None:
            kwargs.setdefault("detail", {"field": field})
        super().__init__(message, **kwargs)
        self.field = field

    def _context(self) -> dict[str, Any]:
        return {} if self.field is None else {"field": self.field}

    @classmethod
    def unknown_field(cls, field: str, source: str) -> "QueryError":
        return cls(f"Unknown field '{field}' on {source}", field=field)


__all__ = ["InfrastructureError", "QueryError"]
