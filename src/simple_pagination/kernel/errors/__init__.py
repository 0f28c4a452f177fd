"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    PaginationError
    ├── ApplicationError       (application.py)
    │   └── InvalidParameterError
    └── InfrastructureError    (infrastructure.py)
        └── QueryError
"""

from simple_pagination.kernel.errors.application import ApplicationError, InvalidParameterError
from simple_pagination.kernel.errors.root import PaginationError
from simple_pagination.kernel.errors.infrastructure import InfrastructureError, QueryError

__all__ = [
    "ApplicationError",
    "PaginationError",
    "InfrastructureError",
    "InvalidParameterError",
    "QueryError",
]
