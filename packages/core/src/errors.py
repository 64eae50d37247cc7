"""Panel Engine Error Hierarchy.

All custom errors inherit from PanelError for consistent handling.
"""

from __future__ import annotations

from typing import Any


class PanelError(Exception):
    """Base exception for all panel engine errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Caller Errors
class UnknownPanelTypeError(PanelError):
    """Caller passed a value that is not a PanelType."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Unknown panel type: {value!r}",
            code="UNKNOWN_PANEL_TYPE",
            details={"value": repr(value)},
        )


# Catalog Errors
class CatalogError(PanelError):
    """Expert catalog could not be loaded."""

    pass


class CatalogNotFoundError(CatalogError):
    """Catalog file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Expert catalog not found at '{path}'",
            code="CATALOG_NOT_FOUND",
            details={"path": path},
        )


class CatalogValidationError(CatalogError):
    """Catalog records failed schema validation."""

    def __init__(self, errors: list[dict[str, Any]], cause: Exception | None = None) -> None:
        super().__init__(
            f"Catalog validation failed with {len(errors)} error(s)",
            code="CATALOG_VALIDATION_ERROR",
            details={"validation_errors": errors},
            cause=cause,
        )


class DuplicateExpertIdError(CatalogError):
    """Two catalog records share the same id."""

    def __init__(self, expert_ids: list[str]) -> None:
        super().__init__(
            f"Duplicate expert id(s) in catalog: {', '.join(expert_ids)}",
            code="DUPLICATE_EXPERT_ID",
            details={"expert_ids": expert_ids},
        )


# Configuration Errors
class ConfigurationError(PanelError):
    """Configuration error."""

    pass
