"""SQLAlchemy adapter – QueryExecutor over ``Select`` statements."""
from simple_pagination.adapters.sqlalchemy.executor import SqlAlchemyQueryExecutor, select_all

__all__ = ["SqlAlchemyQueryExecutor", "select_all"]
