"""Validators for signal content checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from irfile.models.library import FileKind
from irfile.validation.base import BaseValidator, SignalValidator
from irfile.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from irfile.models.library import SignalLibrary
    from irfile.models.signal import Signal


class FiletypeValidator(BaseValidator):
    """Notes a Filetype: header that is not one of the conventional values."""

    def validate(
        self,
        library: SignalLibrary,
        result: ValidationResult,
    ) -> None:
        known = {kind.value for kind in FileKind}
        if library.filetype not in known:
            result.add_info(
                code=ErrorCodes.I001_UNCONVENTIONAL_FILETYPE,
                message=f"Filetype {library.filetype!r} is not a conventional value",
                path="filetype",
                suggestion=" or ".join(repr(k) for k in sorted(known)),
            )


class UniqueNameValidator(BaseValidator):
    """Validates that signal names are unique within the file."""

    def validate(
        self,
        library: SignalLibrary,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate signal names."""
        seen: dict[str, int] = {}

        for index, signal in enumerate(library.signals):
            if signal.name in seen:
                result.add_warning(
                    code=ErrorCodes.W002_DUPLICATE_NAME,
                    message=(
                        f"Signal name {signal.name!r} is already used by "
                        f"signals.{seen[signal.name]}"
                    ),
                    path=f"signals.{index}.name",
                    signal=signal.name,
                    suggestion="Remotes look signals up by name; only the first match is used",
                )
            else:
                seen[signal.name] = index


class SignalTypeValidator(SignalValidator):
    """Flags type tags other than 'parsed' and 'raw'."""

    def validate_signal(self, signal: Signal, path: str, result: ValidationResult) -> None:
        if signal.is_recognized:
            return
        result.add_warning(
            code=ErrorCodes.W001_UNRECOGNIZED_TYPE,
            message=(
                f"Unrecognized signal type {signal.kind_tag!r}; "
                "only name and type will be written"
            ),
            path=f"{path}.type",
            signal=signal.name,
            suggestion="Use 'parsed' or 'raw'",
        )


class RawSignalValidator(SignalValidator):
    """Checks carrier settings and samples of raw signals."""

    def validate_signal(self, signal: Signal, path: str, result: ValidationResult) -> None:
        if not signal.is_raw:
            return

        if signal.frequency <= 0:
            result.add_error(
                code=ErrorCodes.E002_INVALID_FREQUENCY,
                message=f"Carrier frequency must be positive, got {signal.frequency}",
                path=f"{path}.frequency",
                signal=signal.name,
            )

        if not 0.0 <= signal.duty_cycle <= 1.0:
            result.add_warning(
                code=ErrorCodes.W003_DUTY_CYCLE_RANGE,
                message=f"Duty cycle {signal.duty_cycle:.6f} is outside 0-1",
                path=f"{path}.duty_cycle",
                signal=signal.name,
                suggestion="Duty cycle is a fraction, e.g. 0.33 for 33%",
            )

        if not signal.data:
            result.add_warning(
                code=ErrorCodes.W004_EMPTY_SAMPLES,
                message="Raw signal has no samples",
                path=f"{path}.data",
                signal=signal.name,
            )

        for i, sample in enumerate(signal.data):
            if sample == 0:
                result.add_error(
                    code=ErrorCodes.E001_ZERO_SAMPLE,
                    message=f"Sample {i} has zero duration",
                    path=f"{path}.data.{i}",
                    signal=signal.name,
                )
