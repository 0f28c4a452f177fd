"""PaginationError – root of every error raised by simple_pagination."""

from __future__ import annotations

import json
from typing import Any


class PaginationError(Exception):
    """Root of the error hierarchy.

    Errors surface at two boundaries: parameter parsing, where the caller may
    skip the bad field, and the query executor, where they propagate. Both
    serialise the same way so a listing view can render or log them
    uniformly.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "pagination_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def _context(self) -> dict[str, Any]:
        """Top-level keys naming what the error is about (parameter, field, …)."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialise for a log event or an error response.

        ``error`` is the class name; subclasses lift the offending parameter
        or field to the top level via :meth:`_context`.
        """
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            **self._context(),
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["PaginationError"]
