from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Mapping

LOG_LEVEL_ENV = "ONE_RING_FUTURES_LOG_LEVEL"
LOG_JSON_ENV = "ONE_RING_FUTURES_LOG_JSON"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_level(raw: str) -> int:
    """Parses a level name ("debug") or number ("10") into a logging level."""
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)

    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        msg = f"Unknown log level {raw!r}"
        raise ValueError(msg)

    return level


@dataclass(slots=True, kw_only=True, frozen=True)
class Settings:
    """Runtime settings for one-ring-futures."""

    """Minimum level of emitted log events."""
    log_level: int = field(default=logging.WARNING)

    """Render log events as JSON instead of for the console."""
    json_logs: bool = field(default=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Builds settings from environment variables.

        Args:
            environ: mapping to read from, defaults to os.environ
        """
        env = os.environ if environ is None else environ

        kwargs: dict[str, int | bool] = {}
        if (level := env.get(LOG_LEVEL_ENV)) is not None:
            kwargs["log_level"] = _parse_level(level)
        if (json_logs := env.get(LOG_JSON_ENV)) is not None:
            kwargs["json_logs"] = json_logs.strip().lower() in _TRUTHY

        return cls(**kwargs)  # pyrefly: ignore
