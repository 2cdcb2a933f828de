"""Mini README: Centralised configuration models and helpers for Budget Desk.

Structure:
    * BudgetDeskSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Every field can be overridden with a ``BUDGETDESK_`` prefixed environment
    variable or a ``.env`` file, e.g. ``BUDGETDESK_ID_POLICY=monotonic``.
    The configuration is cached so validation happens once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .budget.ledger import IdPolicy


class BudgetDeskSettings(BaseSettings):
    """Runtime configuration for the Budget Desk service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    app_title: str = Field(
        "Budget Desk",
        description="Title shown in the browser tab and the API schema.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied when the service starts.",
    )
    id_policy: IdPolicy = Field(
        IdPolicy.LAST_ENTRY,
        description=(
            "How new entry ids are chosen. 'last_entry' follows the last row of"
            " the list; 'monotonic' never hands out an id twice."
        ),
    )
    seed_demo_entries: bool = Field(
        False,
        description="Populate the ledger with a few sample entries on start-up.",
    )

    class Config:
        env_prefix = "BUDGETDESK_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but only names the logging module knows."""

        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


@lru_cache()
def get_settings() -> BudgetDeskSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetDeskSettings()
