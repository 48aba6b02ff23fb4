"""Configuration management for Task List."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Literal

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TASK_LIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    renderer: Literal["plain", "csv"] = "plain"
    id_start: int = Field(default=0, ge=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Configure structlog to write filtered events to stderr.

    Task output goes to stdout, so log lines are kept off it.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    logger.debug("logging_configured", level=level.upper(), format=fmt)
