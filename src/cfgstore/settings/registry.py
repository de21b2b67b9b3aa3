"""
Registry of named settings.
"""

import logging
from typing import Any, Callable, Dict, ItemsView, Iterator, List, Mapping

from .base import Setting
from .types import ConfigError, ValidationError

logger = logging.getLogger(__name__)

DELIMITER = ": "

Catalog = Callable[[], Mapping[str, Setting[Any]]]


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ConfigError(f"Setting names must be non-empty strings, got {name!r}")
    if DELIMITER in name or "\n" in name or "\r" in name:
        raise ConfigError(
            f"Setting name {name!r} must not contain {DELIMITER!r} or line breaks"
        )


class Registry:
    """
    Ordered mapping from setting name to setting.

    The set of names is fixed at construction; only the settings' values
    change afterwards.
    """

    def __init__(self, settings: Mapping[str, Setting[Any]]):
        seen: Dict[int, str] = {}
        for name, setting in settings.items():
            _check_name(name)
            if not isinstance(setting, Setting):
                raise ConfigError(f"Setting {name!r} is not a Setting instance: {setting!r}")
            if id(setting) in seen:
                raise ConfigError(
                    f"Settings {seen[id(setting)]!r} and {name!r} share the same instance"
                )
            seen[id(setting)] = name
        self._settings: Dict[str, Setting[Any]] = dict(settings)

    def __getitem__(self, name: str) -> Setting[Any]:
        return self._settings[name]

    def __contains__(self, name: object) -> bool:
        return name in self._settings

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __repr__(self) -> str:
        return f"Registry({self._settings!r})"

    def get(self, name: str) -> Any:
        """Current value of a setting. Raises KeyError for unknown names."""
        return self._settings[name].value

    def set(self, name: str, value: Any) -> None:
        """Assign a setting value. Raises KeyError or ValidationError."""
        setting = self._settings[name]
        try:
            setting.value = value
        except ValidationError as e:
            raise ValidationError(e.value, e.description, name) from e

    def items(self) -> ItemsView[str, Setting[Any]]:
        return self._settings.items()

    def names(self) -> List[str]:
        return list(self._settings)

    def snapshot(self) -> Dict[str, Any]:
        """Current values keyed by setting name."""
        return {name: setting.value for name, setting in self._settings.items()}

    def reset(self) -> None:
        """Restore every setting to its default."""
        for setting in self._settings.values():
            setting.reset()


def build_registry(catalog: Catalog) -> Registry:
    """Call the catalog function once and wrap its result in a Registry."""
    settings = catalog()
    if not isinstance(settings, Mapping):
        raise ConfigError(
            f"Catalog function must return a mapping of settings, got {type(settings).__name__}"
        )
    registry = Registry(settings)
    logger.debug(f"Registry built with {len(registry)} settings: {registry.names()}")
    return registry
