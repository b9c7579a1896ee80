"""Library configuration via environment variables with UTILKIT_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """utilkit configuration.

    Only the ambient concerns are configurable here; none of the helpers read
    settings implicitly.
    """

    model_config = SettingsConfigDict(env_prefix="UTILKIT_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    json_logs: bool = Field(default=True)
