"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from qsearch.config.settings import SearchSettings


class LoggerFactory:
    """Configure structlog on top of the stdlib root logger."""

    @staticmethod
    def configure(level: int | str = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> None:
        cls.configure(settings.log_level.upper(), json=settings.log_json)


def configure_logging(level: int | str = logging.INFO, *, json: bool = True) -> None:
    LoggerFactory.configure(level, json=json)


__all__ = ["LoggerFactory", "configure_logging"]
