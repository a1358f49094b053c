"""Mini README: Runtime configuration for the budget tracker.

Structure:
    * BudgetTrackerSettings - Pydantic settings read from the environment.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    Values are read from ``BUDGET_TRACKER_*`` environment variables or a local
    ``.env`` file. Only the presentation layer and the CLI consult settings;
    the ledger itself is configuration free.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

# levels understood by both the root logger and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class BudgetTrackerSettings(BaseSettings):
    """Runtime configuration for the budget tracker service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface the dashboard binds to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard listens on.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts rendered on the dashboard.",
    )
    seed_demo_data: bool = Field(
        False,
        description="Start the dashboard with a handful of example transactions.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logger level name (DEBUG, INFO, WARNING, ...).",
    )

    class Config:
        env_prefix = "BUDGET_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept level names in any casing and reject unknown ones."""

        number = logging.getLevelName(str(value).strip().upper())
        # canonical spelling, so "warn" becomes "WARNING"
        level = logging.getLevelName(number) if isinstance(number, int) else None
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache()
def get_settings() -> BudgetTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetTrackerSettings()
