"""Schema validation utilities."""

from gridlayout.validation.lib import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    is_valid,
    validate_schema,
)

__all__ = [
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    "validate_schema",
    "is_valid",
]
