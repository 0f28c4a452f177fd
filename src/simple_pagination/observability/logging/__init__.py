"""Observability – structured logging helpers."""
from simple_pagination.observability.logging.factory import configure_logging
from simple_pagination.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
