# -*- coding: utf-8 -*-
"""
Settings for the bascalc command-line adapter.

Settings only affect presentation (placeholder text, output format,
default filling, logging). Calculator results never depend on them.
"""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bascalc.exceptions import ConfigurationError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BasCalcSettings(BaseSettings):
    """Environment-backed settings (BASCALC_ prefix)."""

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI"
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="logging.basicConfig format string"
    )
    blank_placeholder: str = Field(
        default="—",
        description="Text shown in place of a blank output"
    )
    fill_defaults: bool = Field(
        default=True,
        description="Use declared input defaults for inputs not supplied on the command line"
    )
    output_format: Literal["table", "json"] = Field(
        default="table",
        description="Result rendering for `bascalc run`"
    )

    model_config = SettingsConfigDict(env_prefix="BASCALC_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Accept any case, reject names the logging module does not know."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> BasCalcSettings:
    """
    Cached settings read from the environment.

    Raises:
        ConfigurationError: If a BASCALC_ variable holds an invalid value
    """
    try:
        return BasCalcSettings()
    except ValidationError as e:
        keys = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid bascalc settings: {', '.join(keys)}",
            config_key=keys[0] if keys else None,
            context={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def reload_settings() -> BasCalcSettings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[BasCalcSettings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
    )
