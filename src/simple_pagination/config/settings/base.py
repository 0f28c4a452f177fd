"""Config settings – Settings base class and PaginationSettings."""
from __future__ import annotations

import dataclasses

from simple_pagination.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class PaginationSettings(Settings):
    """Defaults applied to every listing built by a :class:`Paginator`.

    Read from ``PAGINATION_*`` environment variables, e.g.
    ``PAGINATION_PER_PAGE_ITEMS=5,25,0``.
    """

    _prefix = "PAGINATION"

    per_page_items: list[int] = dataclasses.field(default_factory=lambda: [5, 10, 20, 0])
    default_per_page: int = 10
    window_delta: int = 1
    strict_params: bool = False
    default_order_field: str = "id"

    def _validate(self) -> None:
        for item in self.per_page_items:
            if item < 0:
                raise InvalidSettingValueError("per_page_items", self.per_page_items, "sizes must be >= 0")
        if self.default_per_page < 0:
            raise InvalidSettingValueError("default_per_page", self.default_per_page, "must be >= 0")
        if self.window_delta < 0:
            raise InvalidSettingValueError("window_delta", self.window_delta, "must be >= 0")


__all__ = ["PaginationSettings", "Settings"]
