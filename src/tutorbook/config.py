"""
Runtime configuration for TutorBook.

Settings are read from environment variables prefixed with `TUTORBOOK_`
(for example `TUTORBOOK_LOG_LEVEL=DEBUG`) or from a `.env` file.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "tutorbook"

_handler: logging.Handler | None = None


class TutorBookSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TUTORBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> TutorBookSettings:
    return TutorBookSettings()


def configure_logging(settings: TutorBookSettings | None = None) -> logging.Logger:
    """
    Apply logging settings to the `tutorbook` logger.

    Only the package logger is touched; the root logger is left to the
    application. Calling this again replaces the handler it installed before.

    Params:
        settings: Settings to apply, defaults to `get_settings()`

    Returns:
        The configured package logger
    """
    global _handler
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(_handler)
    return logger
