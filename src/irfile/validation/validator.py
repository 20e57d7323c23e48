"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from irfile.converters.errors import IRFileError
from irfile.validation.base import CompositeValidator
from irfile.validation.consistency_validators import (
    FiletypeValidator,
    RawSignalValidator,
    SignalTypeValidator,
    UniqueNameValidator,
)
from irfile.validation.errors import ValidationResult

if TYPE_CHECKING:
    from irfile.models.library import SignalLibrary


class SignalLibraryValidator:
    """Semantic checks for a parsed signal library.

    None of these checks affect parsing: the file format accepts every
    library they complain about.
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors in validate_and_raise.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                FiletypeValidator(),
                UniqueNameValidator(),
                SignalTypeValidator(),
                RawSignalValidator(),
            ]
        )

    def validate(self, library: SignalLibrary) -> ValidationResult:
        """Validate a signal library.

        Args:
        ----
            library: The library to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(library, result)
        return result

    def validate_and_raise(self, library: SignalLibrary) -> ValidationResult:
        """Validate and raise exception if invalid.

        Raises
        ------
            ValidationError: If there are errors, or warnings in strict mode.

        """
        result = self.validate(library)

        if not result.is_valid or (self.strict and result.warnings):
            raise ValidationError(result)

        return result


class ValidationError(IRFileError):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result

        parts = []
        if result.errors:
            parts.append(f"{len(result.errors)} error(s)")
        if result.warnings:
            parts.append(f"{len(result.warnings)} warning(s)")

        super().__init__(f"Validation failed: {', '.join(parts)}")

    def format_issues(self) -> str:
        """Format errors and warnings, one per line."""
        lines = [f"ERROR: {issue}" for issue in self.result.errors]
        lines.extend(f"WARNING: {issue}" for issue in self.result.warnings)
        return "\n".join(lines)
