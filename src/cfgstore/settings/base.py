"""
Base setting type for cfgstore.
"""

from typing import Any, ClassVar, Generic, Iterable, Optional, Tuple, TypeVar

from .codecs import Codec, get_codec
from .types import SettingKind, ValidationError
from .validation import NOT_NONE, Validator

T = TypeVar("T")


class Setting(Generic[T]):
    """
    A typed, validated value slot with a binary representation.

    Variants pick a ``kind`` (which selects the codec) and a tuple of
    validators. Additional validators can be passed per instance and are
    checked after the variant's own.
    """

    kind: ClassVar[SettingKind]
    validators: ClassVar[Tuple[Validator, ...]] = (NOT_NONE,)

    def __init__(self, default: T, validators: Iterable[Validator] = ()):
        self._validators: Tuple[Validator, ...] = tuple(self.validators) + tuple(validators)
        default = self._accept(default)
        self._default: T = default
        self._value: T = default

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    @property
    def codec(self) -> Codec:
        """Binary codec of this setting's kind."""
        return get_codec(self.kind)

    @property
    def default(self) -> T:
        """Value used when the settings file has no line for this setting."""
        return self._default

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        """Assign a new value; raises ValidationError and keeps the old one if invalid."""
        self._value = self._accept(value)

    def get_value(self) -> T:
        return self._value

    def set_value(self, value: T) -> None:
        self.value = value

    def reset(self) -> None:
        """Restore the default value."""
        self._value = self._default

    # === VALIDATION ===

    def _failing(self, value: Any) -> Optional[Validator]:
        for validator in self._validators:
            if not validator(value):
                return validator
        return None

    def _check(self, value: Any) -> None:
        failed = self._failing(value)
        if failed is not None:
            raise ValidationError(value, failed.description)

    def _accept(self, value: Any) -> Any:
        """Validate a value and bring it to the precision of the wire format."""
        self._check(value)
        normalized = self.codec.normalize(value)
        if normalized is not value:
            self._check(normalized)
        return normalized

    def is_valid(self) -> bool:
        """Check whether the current value passes every validator."""
        return self._failing(self._value) is None

    @property
    def validation_description(self) -> str:
        """Explanation of what values are valid, taken from the most specific validator."""
        return self._validators[-1].description

    # === SERIALIZATION ===

    def encode(self) -> bytes:
        """Binary representation of the current value."""
        self._check(self._value)
        return self.codec.encode(self._value)

    def decode(self, data: bytes) -> None:
        """Restore the value from its binary representation.

        Raises DecodeError if ``data`` does not fit the wire format and
        ValidationError if the decoded value is invalid. The current value
        is kept in both cases.
        """
        value = self.codec.decode(data)
        self._check(value)
        self._value = value
