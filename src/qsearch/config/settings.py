"""Config – SearchSettings, read from ``QSEARCH_*`` variables.

Variables::

    QSEARCH_DATABASE_URL    SQLAlchemy URL of the store     (sqlite:///:memory:)
    QSEARCH_LOG_LEVEL       stdlib logging level name       (INFO)
    QSEARCH_LOG_JSON        JSON log lines, else console    (true)
    QSEARCH_ECHO_SQL        log every statement the store runs (false)

Values from the process environment win over a ``.env`` file.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from qsearch.kernel.errors import InvalidSettingValueError

ENV_PREFIX = "QSEARCH_"

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def env_name(field_name: str) -> str:
    """``"echo_sql"`` -> ``"QSEARCH_ECHO_SQL"``."""
    return ENV_PREFIX + field_name.upper()


@dataclasses.dataclass
class SearchSettings:
    """Where the search store lives and how searches are logged."""

    database_url: str = "sqlite:///:memory:"
    log_level: str = "INFO"
    log_json: bool = True
    echo_sql: bool = False

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                env_name("log_level"),
                self.log_level,
                "search logging needs a stdlib level name such as DEBUG or WARNING",
            )
        if not self.database_url.strip():
            raise InvalidSettingValueError(
                env_name("database_url"),
                self.database_url,
                "the search store needs a SQLAlchemy database URL",
            )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        env_file: str | Path | None = None,
    ) -> SearchSettings:
        """Build settings from *environ* (default ``os.environ``) and *env_file*.

        Unset variables keep their defaults.

        Raises:
            InvalidSettingValueError: a flag is not a recognised boolean, or
                a value fails validation.
        """
        source: dict[str, str | None] = {}
        if env_file is not None:
            source.update(dotenv_values(env_file))
        source.update(os.environ if environ is None else environ)

        values: dict[str, str | bool] = {}
        for name in ("database_url", "log_level"):
            raw = source.get(env_name(name))
            if raw is not None:
                values[name] = raw
        for name in ("log_json", "echo_sql"):
            raw = source.get(env_name(name))
            if raw is not None:
                values[name] = _flag(env_name(name), raw)
        return cls(**values)  # type: ignore[arg-type]


def _flag(variable: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise InvalidSettingValueError(variable, raw, "expected a boolean such as true/false or 1/0")


__all__ = ["ENV_PREFIX", "SearchSettings", "env_name"]
