"""Observability – logging."""

from qsearch.observability.logging import LoggerFactory, configure_logging, get_logger

__all__ = ["LoggerFactory", "configure_logging", "get_logger"]
