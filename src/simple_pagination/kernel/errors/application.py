"""Application-layer errors — bad input reaching a pagination use case."""

from __future__ import annotations

from typing import Any

from simple_pagination.kernel.errors.root import PaginationError


class ApplicationError(PaginationError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidParameterError(ApplicationError):
    """A user-submitted parameter could not be turned into state.

    Raised for malformed integers in ``page`` / ``per_page_nb`` and for
    values outside their domain (``page < 1``, ``per_page_nb < 0``).
    """

    default_code = "invalid_parameter"

    def __init__(
        self,
        parameter: str,
        value: Any,
        reason: str,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"parameter": parameter, "value": value})
        super().__init__(f"Invalid value {value!r} for '{parameter}': {reason}", **kwargs)
        self.parameter = parameter
        self.value = value
        self.reason = reason

    def _context(self) -> dict[str, Any]:
        return {"parameter": self.parameter, "reason": self.reason}


__all__ = ["ApplicationError", "InvalidParameterError"]
