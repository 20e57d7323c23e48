"""Semantic validation for parsed signal libraries."""

from irfile.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from irfile.validation.validator import (
    SignalLibraryValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "SignalLibraryValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
