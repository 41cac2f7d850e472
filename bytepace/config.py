"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from bytepace.domain import DEFAULT_INTERVAL_MS, MBps, RateLimitConfig, parse_rate
from bytepace.infrastructure.config import YAMLConfigLoader

CONFIG_PATH_ENV = "BYTEPACE_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "bytepace.yaml"
DEFAULT_RATE = 1 * MBps

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ThrottleSettings(BaseModel):
    """Throttle configuration."""

    rate: int = Field(default=DEFAULT_RATE, gt=0)
    interval_ms: int = Field(default=DEFAULT_INTERVAL_MS, ge=1)

    @field_validator("rate", mode="before")
    @classmethod
    def parse_rate_string(cls, v: object) -> object:
        """Accept rate strings such as "2MBps"."""
        if isinstance(v, str):
            return parse_rate(v)
        return v

    def to_rate_limit_config(self) -> RateLimitConfig:
        """Build the domain value object.

        Raises:
            InvalidRateError: If the rate gives no budget for one interval.
        """
        return RateLimitConfig(rate=self.rate, interval_ms=self.interval_ms)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseModel):
    """Application configuration."""

    throttle: ThrottleSettings = Field(default_factory=ThrottleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to ``$BYTEPACE_CONFIG_PATH``,
            then ``bytepace.yaml``. A missing file yields the defaults.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)

    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)
