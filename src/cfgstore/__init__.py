"""
cfgstore: typed settings persisted to flat text files

Settings are scalar values with a fixed binary representation, stored one
per line in a ``.cfg`` file.
"""

__version__ = "0.1.0"
__author__ = "cfgstore Contributors"

from .settings import SettingsManager, Registry, build_registry
from .utils.logging_config import setup_logging

__all__ = [
    'SettingsManager',
    'Registry',
    'build_registry',
    'setup_logging',
]
