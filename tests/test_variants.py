"""Tests for the setting catalog."""

import struct
from decimal import Decimal
from typing import Any, Type

import pytest

from cfgstore.settings import (
    BoolSetting,
    ByteSetting,
    CharSetting,
    DecimalSetting,
    DecodeError,
    DoubleSetting,
    FloatSetting,
    IntSetting,
    LongSetting,
    NDecimalSetting,
    NDoubleSetting,
    NFloatSetting,
    Setting,
    SettingKind,
    ShortSetting,
    StringSetting,
    UIntSetting,
    ULongSetting,
    UShortSetting,
    ValidationError,
    Validator,
)

FLT_MAX = 3.4028234663852886e38

ROUND_TRIP_CASES = [
    (CharSetting, "\0", ["a", "\xff", "\n"]),
    (StringSetting, "", ["", "main", "a: b\nc\\d", "\xe9t\xe9"]),
    (ByteSetting, 0, [0, 255]),
    (ShortSetting, 0, [-32768, 0, 32767]),
    (UShortSetting, 0, [0, 65535]),
    (IntSetting, 0, [-(2 ** 31), -1, 2 ** 31 - 1]),
    (UIntSetting, 0, [0, 2 ** 32 - 1]),
    (LongSetting, 0, [-(2 ** 63), 2 ** 63 - 1]),
    (ULongSetting, 0, [0, 2 ** 64 - 1]),
    (FloatSetting, 0.0, [0.0, 0.5, -1.5, FLT_MAX, -FLT_MAX, float("inf")]),
    (DoubleSetting, 0.0, [0.0, 0.1, -2.5, 1e308]),
    (
        DecimalSetting,
        Decimal(0),
        [
            Decimal("0"),
            Decimal("-123.456"),
            Decimal("1E+3"),
            Decimal("79228162514264337593543950335"),
            Decimal("-79228162514264337593543950335"),
            Decimal("0.0000000000000000000000000001"),
        ],
    ),
    (BoolSetting, False, [True, False]),
    (NFloatSetting, 0.5, [0, 1, 0.25]),
    (NDoubleSetting, 0.5, [0.0, 1.0, 0.3]),
    (NDecimalSetting, Decimal("0.5"), [Decimal("0"), Decimal("1"), Decimal("0.333")]),
]


class TestRoundTrip:
    """Test that decode restores what encode produced."""

    @pytest.mark.parametrize("setting_cls,default,values", ROUND_TRIP_CASES)
    def test_round_trip(
        self, setting_cls: Type[Setting[Any]], default: Any, values: list
    ) -> None:
        """Decoding the encoded value yields the same value."""
        for value in values:
            source = setting_cls(default)
            source.value = value
            target = setting_cls(default)
            target.decode(source.encode())
            assert target.value == value
            assert target.is_valid()

    @pytest.mark.parametrize(
        "setting_cls,width",
        [
            (ByteSetting, 1),
            (ShortSetting, 2),
            (UShortSetting, 2),
            (IntSetting, 4),
            (UIntSetting, 4),
            (LongSetting, 8),
            (ULongSetting, 8),
            (FloatSetting, 4),
            (DoubleSetting, 8),
            (DecimalSetting, 16),
        ],
    )
    def test_fixed_width(self, setting_cls: Type[Setting[Any]], width: int) -> None:
        """Numeric variants encode to their fixed width and reject other lengths."""
        setting = setting_cls()
        assert len(setting.encode()) == width
        with pytest.raises(DecodeError) as excinfo:
            setting.decode(b"\x01" * (width + 1))
        assert excinfo.value.expected == width
        assert excinfo.value.actual == width + 1

    def test_little_endian(self) -> None:
        """Integers are written least significant byte first."""
        assert IntSetting(1).encode() == b"\x01\x00\x00\x00"
        assert UShortSetting(0x1234).encode() == b"\x34\x12"
        assert FloatSetting(0.5).encode() == struct.pack("<f", 0.5)

    def test_text_uses_one_byte_per_character(self) -> None:
        """Strings and chars are written as Latin-1."""
        assert StringSetting("h\xe9").encode() == b"h\xe9"
        assert CharSetting("\xff").encode() == b"\xff"


class TestBoolSetting:
    """Test the boolean wire sentinel."""

    def test_encode_sentinels(self) -> None:
        """True is 0xFF and False is 0x00."""
        assert BoolSetting(True).encode() == b"\xff"
        assert BoolSetting(False).encode() == b"\x00"

    def test_any_nonzero_byte_is_true(self) -> None:
        """Decoding any nonzero byte yields True."""
        for byte in (b"\x01", b"\x7f", b"\xff"):
            setting = BoolSetting(False)
            setting.decode(byte)
            assert setting.value is True

    def test_zero_byte_is_false(self) -> None:
        """Decoding a zero byte yields False."""
        setting = BoolSetting(True)
        setting.decode(b"\x00")
        assert setting.value is False

    def test_rejects_non_bool(self) -> None:
        """Only real bools are accepted."""
        with pytest.raises(ValidationError):
            BoolSetting(1)  # type: ignore[arg-type]


class TestDecimalSetting:
    """Test the four-word decimal layout."""

    def test_word_layout(self) -> None:
        """Mantissa words come first, followed by the scale and sign flags."""
        assert DecimalSetting(Decimal("1.5")).encode() == struct.pack("<4I", 15, 0, 0, 1 << 16)
        assert DecimalSetting(Decimal("-1")).encode() == struct.pack("<4I", 1, 0, 0, 0x80000000)

    def test_large_mantissa_spans_words(self) -> None:
        """A mantissa above 32 bits continues into the mid and hi words."""
        value = Decimal(2 ** 64 + 2 ** 32 + 1)
        assert DecimalSetting(value).encode() == struct.pack("<4I", 1, 1, 1, 0)

    def test_rejects_unrepresentable(self) -> None:
        """Too many decimal places or a mantissa above 96 bits are invalid."""
        with pytest.raises(ValidationError):
            DecimalSetting(Decimal("1E-29"))
        with pytest.raises(ValidationError):
            DecimalSetting(Decimal(2 ** 96))
        with pytest.raises(ValidationError):
            DecimalSetting(Decimal("NaN"))

    def test_rejects_invalid_flags(self) -> None:
        """Scale above 28 or reserved flag bits fail to decode."""
        setting = DecimalSetting(Decimal("2"))
        with pytest.raises(DecodeError):
            setting.decode(struct.pack("<4I", 1, 0, 0, 29 << 16))
        with pytest.raises(DecodeError):
            setting.decode(struct.pack("<4I", 1, 0, 0, 1))
        assert setting.value == Decimal("2")


class TestNormalizedSettings:
    """Test the 0..1 constraint of normalized variants."""

    @pytest.mark.parametrize(
        "setting_cls,make",
        [
            (NFloatSetting, float),
            (NDoubleSetting, float),
            (NDecimalSetting, lambda v: Decimal(str(v))),
        ],
    )
    def test_bounds(self, setting_cls: Type[Setting[Any]], make: Any) -> None:
        """Values outside [0, 1] raise, the bounds themselves are accepted."""
        setting = setting_cls(make(0.5))
        for bad in (-0.1, 1.1):
            with pytest.raises(ValidationError) as excinfo:
                setting.value = make(bad)
            assert excinfo.value.description == "value must be between 0 and 1 (inclusive)"
            assert setting.value == make(0.5)
        for good in (0, 1):
            setting.value = make(good)
            assert setting.is_valid()

    def test_description(self) -> None:
        """Normalized variants describe their range."""
        assert NFloatSetting(0.5).validation_description == "value must be between 0 and 1 (inclusive)"
        assert FloatSetting().validation_description != NFloatSetting(0.5).validation_description

    def test_shares_base_codec(self) -> None:
        """Normalized variants use the wire format of their base type."""
        assert NFloatSetting(0.5).kind is SettingKind.FLOAT
        assert NFloatSetting(0.5).encode() == FloatSetting(0.5).encode()
        assert NDoubleSetting(0.5).encode() == DoubleSetting(0.5).encode()
        assert NDecimalSetting(Decimal("0.5")).encode() == DecimalSetting(Decimal("0.5")).encode()

    def test_decoded_value_out_of_range(self) -> None:
        """Decoding a value above 1 raises and keeps the previous value."""
        setting = NFloatSetting(0.5)
        with pytest.raises(ValidationError):
            setting.decode(struct.pack("<f", 2.0))
        assert setting.value == 0.5


class TestValidation:
    """Test validation of assignments and defaults."""

    def test_none_is_rejected(self) -> None:
        """Null values fail with the base description."""
        setting = IntSetting(1)
        with pytest.raises(ValidationError) as excinfo:
            setting.value = None  # type: ignore[assignment]
        assert "[NULL]" in str(excinfo.value)
        assert excinfo.value.description == "value must not be null!"
        assert setting.value == 1

    @pytest.mark.parametrize(
        "setting_cls,value",
        [
            (ByteSetting, 256),
            (ByteSetting, -1),
            (ShortSetting, 2 ** 15),
            (UShortSetting, -1),
            (IntSetting, 2 ** 31),
            (UIntSetting, 2 ** 32),
            (LongSetting, -(2 ** 63) - 1),
            (ULongSetting, 2 ** 64),
            (IntSetting, True),
            (IntSetting, 1.5),
            (FloatSetting, 1e39),
            (StringSetting, "日本"),
            (CharSetting, "ab"),
            (CharSetting, ""),
        ],
    )
    def test_invalid_defaults(self, setting_cls: Type[Setting[Any]], value: Any) -> None:
        """Constructing with an out-of-range default raises."""
        with pytest.raises(ValidationError) as excinfo:
            setting_cls(value)
        assert excinfo.value.value == value

    def test_error_message(self) -> None:
        """The message names the value and the requirement."""
        with pytest.raises(ValidationError) as excinfo:
            ByteSetting(300)
        assert str(excinfo.value) == (
            "Validation failed: 300 does not match the requirement: "
            "value must be an integer between 0 and 255"
        )

    def test_extra_validators(self) -> None:
        """Per-instance validators are checked after the variant's own."""
        multiple_of_five = Validator(lambda value: value % 5 == 0, "value must be a multiple of 5")
        setting = IntSetting(10, validators=[multiple_of_five])
        setting.set_value(15)
        assert setting.get_value() == 15
        with pytest.raises(ValidationError) as excinfo:
            setting.set_value(7)
        assert excinfo.value.description == "value must be a multiple of 5"
        assert setting.validation_description == "value must be a multiple of 5"

    def test_char_decode_needs_one_character(self) -> None:
        """A char consumes all bytes and fails unless there is exactly one."""
        setting = CharSetting("a")
        with pytest.raises(ValidationError):
            setting.decode(b"bc")
        setting.decode(b"z")
        assert setting.value == "z"

    def test_reset(self) -> None:
        """reset() restores the default value."""
        setting = StringSetting("main")
        setting.value = "other"
        assert setting.default == "main"
        setting.reset()
        assert setting.value == "main"

    def test_default_values(self) -> None:
        """Variants without a required default start at zero or empty."""
        assert CharSetting().value == "\0"
        assert StringSetting().value == ""
        assert IntSetting().value == 0
        assert DoubleSetting().value == 0.0
        assert DecimalSetting().value == Decimal(0)


def single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class TestFloatPrecision:
    """Test that float settings hold single-precision values."""

    def test_default_is_rounded(self) -> None:
        """A default that is not exact in 32 bits is stored rounded."""
        setting = FloatSetting(0.1)
        assert setting.value == single(0.1)
        assert setting.default == single(0.1)
        assert setting.value != 0.1

    def test_assignment_is_rounded(self) -> None:
        """Assigned values are rounded the same way."""
        setting = NFloatSetting(0.5)
        setting.value = 0.3
        assert setting.value == single(0.3)

    @pytest.mark.parametrize("value", [0.1, 0.3, 1 / 3, -123.456, 1e-40])
    def test_round_trip_of_rounded_values(self, value: float) -> None:
        """Decoding the encoded value gives back exactly the stored value."""
        source = FloatSetting(value)
        target = FloatSetting()
        target.decode(source.encode())
        assert target.value == source.value

    def test_value_rounding_into_range(self) -> None:
        """A value just above the largest single maps onto it."""
        setting = FloatSetting(3.4028235e38)
        assert setting.value == FLT_MAX

    def test_double_is_not_rounded(self) -> None:
        """Double settings keep full precision."""
        assert DoubleSetting(0.1).value == 0.1


class TestOversizedNumbers:
    """Test that integers too large for a float fail validation."""

    @pytest.mark.parametrize("setting_cls", [FloatSetting, DoubleSetting, NFloatSetting, NDoubleSetting])
    def test_constructor_rejects(self, setting_cls: Type[Setting[Any]]) -> None:
        """Construction raises ValidationError, not a struct error."""
        with pytest.raises(ValidationError) as excinfo:
            setting_cls(10 ** 400)
        assert excinfo.value.value == 10 ** 400

    def test_assignment_rejects(self) -> None:
        """Assignment raises and keeps the previous value."""
        setting = DoubleSetting(2.5)
        with pytest.raises(ValidationError):
            setting.value = 10 ** 400
        assert setting.value == 2.5
        assert setting.encode() == struct.pack("<d", 2.5)

    def test_large_finite_int(self) -> None:
        """Integers that fit a double are accepted and encoded."""
        setting = DoubleSetting(10 ** 20)
        assert setting.encode() == struct.pack("<d", 1e20)
