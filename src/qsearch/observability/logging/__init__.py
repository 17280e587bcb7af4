"""Observability – structured logging helpers."""
from qsearch.observability.logging.factory import LoggerFactory, configure_logging
from qsearch.observability.logging.processors import get_logger

__all__ = ["LoggerFactory", "configure_logging", "get_logger"]
