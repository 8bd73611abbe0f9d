"""Mini README: Centralised configuration models and helpers for PizzaDronz.

Structure:
    * PizzaDronzSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``PIZZADRONZ_*`` environment variables
    (or a local ``.env`` file) for the data source URL, service ports and the
    planner's step budget. The configuration is cached so validation happens
    only once per process.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .constants import DEFAULT_MAX_PLANNING_STEPS


class PizzaDronzSettings(BaseSettings):
    """Runtime configuration for the PizzaDronz dispatch service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8080,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    data_source_url: str = Field(
        "https://ilp-rest-2024.azurewebsites.net",
        description="Base URL of the service publishing restaurants and flight regions.",
    )
    request_timeout_seconds: float = Field(
        10.0,
        description="Timeout applied to each data source request.",
        gt=0,
    )
    max_planning_steps: int = Field(
        DEFAULT_MAX_PLANNING_STEPS,
        description="Upper bound on drone moves before path planning gives up.",
        ge=1,
    )
    service_identifier: str = Field(
        "s2190304",
        description="Identifier returned by the /uuid endpoint.",
    )

    class Config:
        env_prefix = "PIZZADRONZ_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_source_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        """Normalise the base URL so endpoint paths can be appended directly."""

        return value.rstrip("/")


@lru_cache()
def get_settings() -> PizzaDronzSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PizzaDronzSettings()
