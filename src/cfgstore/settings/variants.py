"""
The setting catalog: one class per supported primitive type.

Text variants store one byte per character and therefore only accept
code points U+0000..U+00FF.
"""

from decimal import Decimal
from typing import Iterable

from .base import Setting
from .types import SettingKind
from .validation import (
    BOOLEAN,
    DECIMAL_RANGE,
    DOUBLE_PRECISION,
    NORMALIZED,
    NOT_NONE,
    SINGLE_BYTE_TEXT,
    SINGLE_CHAR,
    SINGLE_PRECISION,
    Validator,
    integer_range,
)


class CharSetting(Setting[str]):
    """A single character."""
    kind = SettingKind.CHAR
    validators = (NOT_NONE, SINGLE_CHAR)

    def __init__(self, default: str = "\0", validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class StringSetting(Setting[str]):
    """A string of single-byte characters."""
    kind = SettingKind.STRING
    validators = (NOT_NONE, SINGLE_BYTE_TEXT)

    def __init__(self, default: str = "", validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class _IntegerSetting(Setting[int]):
    def __init__(self, default: int = 0, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class ByteSetting(_IntegerSetting):
    """Unsigned 8-bit integer."""
    kind = SettingKind.BYTE
    validators = (NOT_NONE, integer_range(0, 0xFF))


class ShortSetting(_IntegerSetting):
    """Signed 16-bit integer."""
    kind = SettingKind.SHORT
    validators = (NOT_NONE, integer_range(-(2 ** 15), 2 ** 15 - 1))


class UShortSetting(_IntegerSetting):
    """Unsigned 16-bit integer."""
    kind = SettingKind.USHORT
    validators = (NOT_NONE, integer_range(0, 2 ** 16 - 1))


class IntSetting(_IntegerSetting):
    """Signed 32-bit integer."""
    kind = SettingKind.INT
    validators = (NOT_NONE, integer_range(-(2 ** 31), 2 ** 31 - 1))


class UIntSetting(_IntegerSetting):
    """Unsigned 32-bit integer."""
    kind = SettingKind.UINT
    validators = (NOT_NONE, integer_range(0, 2 ** 32 - 1))


class LongSetting(_IntegerSetting):
    """Signed 64-bit integer."""
    kind = SettingKind.LONG
    validators = (NOT_NONE, integer_range(-(2 ** 63), 2 ** 63 - 1))


class ULongSetting(_IntegerSetting):
    """Unsigned 64-bit integer."""
    kind = SettingKind.ULONG
    validators = (NOT_NONE, integer_range(0, 2 ** 64 - 1))


class FloatSetting(Setting[float]):
    """Single precision float. Values are stored with 32-bit precision."""
    kind = SettingKind.FLOAT
    validators = (NOT_NONE, SINGLE_PRECISION)

    def __init__(self, default: float = 0.0, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class DoubleSetting(Setting[float]):
    """Double precision float."""
    kind = SettingKind.DOUBLE
    validators = (NOT_NONE, DOUBLE_PRECISION)

    def __init__(self, default: float = 0.0, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class DecimalSetting(Setting[Decimal]):
    """128-bit decimal: 96-bit mantissa, scale 0..28 and a sign."""
    kind = SettingKind.DECIMAL
    validators = (NOT_NONE, DECIMAL_RANGE)

    def __init__(self, default: Decimal = Decimal(0), validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class BoolSetting(Setting[bool]):
    """Boolean stored as 0x00 / 0xFF."""
    kind = SettingKind.BOOL
    validators = (NOT_NONE, BOOLEAN)

    def __init__(self, default: bool, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


# === NORMALIZED VARIANTS ===


class NFloatSetting(Setting[float]):
    """Single precision float between 0 and 1 (inclusive)."""
    kind = SettingKind.FLOAT
    validators = FloatSetting.validators + (NORMALIZED,)

    def __init__(self, default: float, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class NDoubleSetting(Setting[float]):
    """Double precision float between 0 and 1 (inclusive)."""
    kind = SettingKind.DOUBLE
    validators = DoubleSetting.validators + (NORMALIZED,)

    def __init__(self, default: float, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


class NDecimalSetting(Setting[Decimal]):
    """Decimal between 0 and 1 (inclusive)."""
    kind = SettingKind.DECIMAL
    validators = DecimalSetting.validators + (NORMALIZED,)

    def __init__(self, default: Decimal, validators: Iterable[Validator] = ()):
        super().__init__(default, validators)


CATALOG = (
    CharSetting,
    StringSetting,
    ByteSetting,
    ShortSetting,
    UShortSetting,
    IntSetting,
    UIntSetting,
    LongSetting,
    ULongSetting,
    FloatSetting,
    DoubleSetting,
    DecimalSetting,
    BoolSetting,
    NFloatSetting,
    NDoubleSetting,
    NDecimalSetting,
)
