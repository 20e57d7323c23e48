"""Base validator classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from irfile.validation.errors import ValidationResult

if TYPE_CHECKING:
    from irfile.models.library import SignalLibrary
    from irfile.models.signal import Signal


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        library: SignalLibrary,
        result: ValidationResult,
    ) -> None:
        """Validate the library and add issues to result.

        Args:
        ----
            library: The signal library to validate.
            result: The result object to add issues to.

        """
        ...


class SignalValidator(BaseValidator):
    """Validator that looks at one signal at a time."""

    def validate(
        self,
        library: SignalLibrary,
        result: ValidationResult,
    ) -> None:
        for index, signal in enumerate(library.signals):
            self.validate_signal(signal, f"signals.{index}", result)

    @abstractmethod
    def validate_signal(self, signal: Signal, path: str, result: ValidationResult) -> None:
        """Validate a single signal located at ``path``."""
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator."""
        self.validators.append(validator)

    def validate(
        self,
        library: SignalLibrary,
        result: ValidationResult,
    ) -> None:
        """Run all validators in order."""
        for validator in self.validators:
            validator.validate(library, result)
