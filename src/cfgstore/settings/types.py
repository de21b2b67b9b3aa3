"""
Type definitions and exceptions for cfgstore settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class SettingKind(Enum):
    """Tag naming the wire format of a setting variant."""
    CHAR = "char"
    STRING = "string"
    BYTE = "byte"
    SHORT = "short"
    USHORT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BOOL = "bool"


class ManagerState(Enum):
    """Lifecycle state of a settings manager."""
    UNINITIALIZED = "uninitialized"
    CATALOG_BUILT = "catalog_built"
    FILE_MISSING = "file_missing"
    FILE_EXISTS = "file_exists"
    READY = "ready"


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


class ValidationError(ConfigError):
    """Raised when a setting value does not pass its validation."""

    def __init__(self, value: Any, description: str, name: Optional[str] = None):
        self.value = value
        self.description = description
        self.name = name
        shown = "[NULL]" if value is None else str(value)
        message = f"Validation failed: {shown} does not match the requirement: {description}"
        if name:
            message = f"{name}: {message}"
        super().__init__(message)


class DecodeError(ConfigError):
    """Raised when encoded bytes do not fit the setting's wire format."""

    def __init__(
        self,
        kind: Optional[SettingKind],
        expected: Optional[int],
        actual: int,
        reason: str = "",
    ):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        if not reason:
            reason = f"expected {expected} bytes, got {actual}"
        subject = f"{kind.value} setting" if kind is not None else "settings file"
        super().__init__(f"Cannot decode {subject}: {reason}")


class InvalidFileNameError(ConfigError):
    """Raised when the settings filename is not usable as a file name."""

    def __init__(self, filename: Optional[str]):
        self.filename = filename
        if not filename:
            message = "The string for a filename must not be null or empty."
        else:
            message = (
                f"The string '{filename}' is not valid for a filename. "
                "Prevent the usage of the following characters: \\, /, :, *, ?, <, >, |"
            )
        super().__init__(message)


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
