"""
Settings validation system for cfgstore.

Validators are small composable predicates. A setting is valid when every
validator attached to it accepts the current value.
"""

import logging
import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .registry import Registry

logger = logging.getLogger(__name__)

DECIMAL_MAX_SCALE = 28
DECIMAL_MANTISSA_BITS = 96


@dataclass(frozen=True)
class Validator:
    """A validity predicate together with its human-readable description."""
    check: Callable[[Any], bool]
    description: str

    def __call__(self, value: Any) -> bool:
        try:
            return bool(self.check(value))
        except (TypeError, ValueError, ArithmeticError):
            return False


def _not_none(value: Any) -> bool:
    return value is not None


NOT_NONE = Validator(_not_none, "value must not be null!")


def integer_range(minimum: int, maximum: int) -> Validator:
    """Accept ints (not bools) in the closed interval [minimum, maximum]."""

    def check(value: Any) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and minimum <= value <= maximum
        )

    return Validator(check, f"value must be an integer between {minimum} and {maximum}")


def _single_byte_text(value: Any) -> bool:
    return isinstance(value, str) and all(ord(char) <= 0xFF for char in value)


SINGLE_BYTE_TEXT = Validator(
    _single_byte_text, "value must be a string of single-byte characters (U+0000..U+00FF)"
)

SINGLE_CHAR = Validator(
    lambda value: _single_byte_text(value) and len(value) == 1,
    "value must be exactly one single-byte character (U+0000..U+00FF)",
)


def _fits_single(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        struct.pack("<f", float(value))
    except OverflowError:
        return False
    return True


def _fits_double(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        float(value)
    except OverflowError:
        return False
    return True


SINGLE_PRECISION = Validator(_fits_single, "value must be a number within single precision range")
DOUBLE_PRECISION = Validator(_fits_double, "value must be a number within double precision range")


def _fits_decimal(value: Any) -> bool:
    if not isinstance(value, Decimal) or not value.is_finite():
        return False
    _, digits, exponent = value.as_tuple()
    mantissa = int("".join(map(str, digits)) or "0")
    if exponent > 0:
        mantissa *= 10 ** exponent
        exponent = 0
    return -exponent <= DECIMAL_MAX_SCALE and mantissa.bit_length() <= DECIMAL_MANTISSA_BITS


DECIMAL_RANGE = Validator(
    _fits_decimal,
    "value must be a finite Decimal with at most 28 decimal places and a 96-bit mantissa",
)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


BOOLEAN = Validator(_is_bool, "value must be a bool")


def _normalized(value: Any) -> bool:
    return 0 <= value <= 1


NORMALIZED = Validator(_normalized, "value must be between 0 and 1 (inclusive)")


class SettingsValidator:
    """Validates every setting of a registry without raising."""

    def __init__(self, registry: "Registry"):
        self.registry = registry

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        for name, setting in self.registry.items():
            if not setting.is_valid():
                errors.append(
                    f"{name}: {setting.value!r} does not match the requirement: "
                    f"{setting.validation_description}"
                )
            elif isinstance(setting.value, float) and math.isnan(setting.value):
                warnings.append(f"{name}: value is NaN")

        if errors:
            logger.warning(f"Settings validation found {len(errors)} invalid value(s)")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
