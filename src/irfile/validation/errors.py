"""Validation issue types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationLocation:
    """Where in the library an issue was found."""

    path: str
    """Dotted path to the field (e.g., 'signals.3.duty_cycle')."""

    signal: str | None = None
    """Name of the signal the field belongs to, if any."""

    def __str__(self) -> str:
        """Format location as string."""
        if self.signal is not None:
            return f"{self.path} ({self.signal!r})"
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique issue code (e.g., 'E001', 'W001')."""

    message: str
    """Human-readable message."""

    severity: ValidationSeverity

    location: ValidationLocation | None = None

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return self._by_severity(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return self._by_severity(ValidationSeverity.WARNING)

    @property
    def infos(self) -> list[ValidationIssue]:
        return self._by_severity(ValidationSeverity.INFO)

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return not self.errors

    def _by_severity(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    def add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        path: str,
        signal: str | None = None,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Record an issue at the given path."""
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                location=ValidationLocation(path=path, signal=signal),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_error(self, code: str, message: str, path: str, **kwargs: Any) -> None:
        """Add an error issue."""
        self.add(ValidationSeverity.ERROR, code, message, path, **kwargs)

    def add_warning(self, code: str, message: str, path: str, **kwargs: Any) -> None:
        """Add a warning issue."""
        self.add(ValidationSeverity.WARNING, code, message, path, **kwargs)

    def add_info(self, code: str, message: str, path: str, **kwargs: Any) -> None:
        """Add an informational issue."""
        self.add(ValidationSeverity.INFO, code, message, path, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard validation issue codes."""

    # E0xx - Raw signal errors
    E001_ZERO_SAMPLE = "E001"
    E002_INVALID_FREQUENCY = "E002"

    # W0xx - Warnings
    W001_UNRECOGNIZED_TYPE = "W001"
    W002_DUPLICATE_NAME = "W002"
    W003_DUTY_CYCLE_RANGE = "W003"
    W004_EMPTY_SAMPLES = "W004"

    # I0xx - Informational
    I001_UNCONVENTIONAL_FILETYPE = "I001"
