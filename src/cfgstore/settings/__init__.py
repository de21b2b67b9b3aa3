"""
Settings package for cfgstore.

This package provides typed, validated settings persisted to a
line-oriented ``.cfg`` file.

Usage:
    from cfgstore.settings import SettingsManager, NFloatSetting, StringSetting

    def catalog():
        return {"volume": NFloatSetting(0.5), "name": StringSetting("main")}

    settings = SettingsManager(catalog)
    settings.set("volume", 0.75)
    settings.save()
"""

from .base import Setting
from .core import SettingsManager
from .escaping import escape, unescape
from .hooks import AtexitHook, ExitHook, QtExitHook, SettingsSignals
from .paths import DEFAULT_FILENAME, SETTINGS_SUFFIX, settings_file_path, validate_filename
from .registry import DELIMITER, Registry, build_registry
from .store import load, save
from .types import (
    ConfigError,
    DecodeError,
    InvalidFileNameError,
    ManagerState,
    SettingKind,
    ValidationError,
    ValidationResult,
)
from .validation import NORMALIZED, Validator
from .variants import (
    BoolSetting,
    ByteSetting,
    CharSetting,
    DecimalSetting,
    DoubleSetting,
    FloatSetting,
    IntSetting,
    LongSetting,
    NDecimalSetting,
    NDoubleSetting,
    NFloatSetting,
    ShortSetting,
    StringSetting,
    UIntSetting,
    ULongSetting,
    UShortSetting,
)

__all__ = [
    "SettingsManager",
    "Setting",
    "SettingKind",
    "Validator",
    "NORMALIZED",
    "Registry",
    "build_registry",
    "load",
    "save",
    "escape",
    "unescape",
    "DELIMITER",
    "DEFAULT_FILENAME",
    "SETTINGS_SUFFIX",
    "settings_file_path",
    "validate_filename",
    "ExitHook",
    "AtexitHook",
    "QtExitHook",
    "SettingsSignals",
    "ManagerState",
    "ConfigError",
    "DecodeError",
    "InvalidFileNameError",
    "ValidationError",
    "ValidationResult",
    "CharSetting",
    "StringSetting",
    "ByteSetting",
    "ShortSetting",
    "UShortSetting",
    "IntSetting",
    "UIntSetting",
    "LongSetting",
    "ULongSetting",
    "FloatSetting",
    "DoubleSetting",
    "DecimalSetting",
    "BoolSetting",
    "NFloatSetting",
    "NDoubleSetting",
    "NDecimalSetting",
]
