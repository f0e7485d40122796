"""Library settings and logging setup.

Nothing here is read implicitly. ``Settings.from_env`` is an opt-in
convenience for applications that want the ``DOTGRAPH_LOG_LEVEL`` variable
to control the verbosity of the ``dotgraph`` logger; it affects nothing else.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotgraph.errors import ConfigurationError

LOGGER_NAME = "dotgraph"
LOG_LEVEL_ENV = "DOTGRAPH_LOG_LEVEL"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(slots=True, frozen=True)
class Settings:
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str):
            raise ConfigurationError(
                f"Log level must be a level name, got {type(self.log_level).__name__}"
            )
        level = self.log_level.strip().upper()
        if level not in _LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.log_level!r}; expected one of {', '.join(_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``DOTGRAPH_*`` environment variables."""
        env = os.environ if environ is None else environ
        log_level = env.get(LOG_LEVEL_ENV)
        if not log_level:
            return cls()
        return cls(log_level=log_level)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Set the ``dotgraph`` logger level. Handlers are left to the application."""
    active = settings if settings is not None else Settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(active.log_level)
    return logger
