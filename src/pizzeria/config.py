"""
Runtime settings for the simulator.

Settings come only from command-line flags (see cli.py). There are no
environment variables or config files.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CURRENCY = "Bs"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Immutable session settings."""

    model_config = ConfigDict(frozen=True)

    currency: str = Field(DEFAULT_CURRENCY, min_length=1)  # Prefix for printed amounts
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def format_amount(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Render an amount the way every console message shows it, e.g. ``Bs108``."""
    return f"{currency}{amount}"
