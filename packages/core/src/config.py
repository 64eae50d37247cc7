"""Panel Engine Configuration Management."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class PanelConfig(BaseSettings):
    """Central configuration for the expert panel engine."""

    model_config = SettingsConfigDict(
        env_prefix="PANEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment",
    )

    # Catalog
    catalog_path: Path | None = Field(
        default=None,
        description="Expert catalog JSON file (bundled catalog when unset)",
    )

    # Panel sizing defaults
    default_panel_size: int = Field(
        default=5, ge=0, description="Experts per panel when the caller gives no size"
    )
    default_team_size: int = Field(
        default=3, ge=0, description="Blue Team size for three-panel reviews"
    )
    quick_panel_size: int = Field(
        default=3, ge=0, description="Experts in a search-driven quick panel"
    )

    def validate_production_requirements(self) -> list[str]:
        """Validate all production requirements are met.

        Returns:
            List of validation errors (empty if all valid)
        """
        errors = []

        if not self.is_production:
            return errors

        if self.catalog_path is None:
            errors.append("PANEL_CATALOG_PATH is required in production")
        elif not self.catalog_path.is_file():
            errors.append(f"PANEL_CATALOG_PATH does not point to a file: {self.catalog_path}")

        return errors

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_config() -> PanelConfig:
    """Get cached configuration instance."""
    return PanelConfig()


def clear_config_cache() -> None:
    """Clear the config cache. Use when config needs to be reloaded."""
    get_config.cache_clear()
