"""Panel Engine Core Package - Types, Config, and Errors."""

from .config import Environment, PanelConfig, clear_config_cache, get_config
from .errors import (
    CatalogError,
    CatalogNotFoundError,
    CatalogValidationError,
    ConfigurationError,
    DuplicateExpertIdError,
    PanelError,
    UnknownPanelTypeError,
)
from .types import (
    # Enums
    Category,
    # Catalog
    Expert,
    ExpertStatus,
    PanelStats,
    PanelType,
    # Panels
    PanelTypeInfo,
    PhaseComposition,
    ThreePanelTeam,
)

__all__ = [
    # Config
    "Environment",
    "PanelConfig",
    "get_config",
    "clear_config_cache",
    # Errors
    "PanelError",
    "UnknownPanelTypeError",
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogValidationError",
    "DuplicateExpertIdError",
    "ConfigurationError",
    # Enums
    "Category",
    "PanelType",
    "ExpertStatus",
    # Catalog
    "Expert",
    # Panels
    "PanelTypeInfo",
    "ThreePanelTeam",
    "PhaseComposition",
    "PanelStats",
]
