"""
simple_pagination – server-side pagination, sorting and filtering helper.

Import path convention::

    from simple_pagination.application.pagination import PaginatorState, change, paginate
    from simple_pagination.application.pagination import page_window
    from simple_pagination.adapters.sqlalchemy import SqlAlchemyQueryExecutor
    from simple_pagination.kernel.errors import InvalidParameterError, QueryError
"""

__version__ = "0.2.1"
__all__ = ["__version__"]
