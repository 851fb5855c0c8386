"""
Application configuration using Pydantic Settings.
Values can be overridden through ``QUOTE_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.costs import CostRatios


class Settings(BaseSettings):
    """Runtime settings for the quote service."""

    app_name: str = "Quote Engine"
    debug: bool = False
    log_level: str = "INFO"

    # ── DRE cost ratios (fractions of total revenue) ─────
    direct_cost_pct: float = Field(0.30, ge=0)
    operational_cost_pct: float = Field(0.20, ge=0)
    tax_pct: float = Field(0.10, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="QUOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def cost_ratios(self) -> CostRatios:
        return CostRatios(
            direct_cost_pct=self.direct_cost_pct,
            operational_cost_pct=self.operational_cost_pct,
            tax_pct=self.tax_pct,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
