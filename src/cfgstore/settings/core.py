"""
Core settings management for cfgstore.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from . import store
from .hooks import AtexitHook, ExitHook, SettingsSignals
from .paths import DEFAULT_FILENAME, settings_file_path
from .registry import Catalog, Registry, build_registry
from .types import ConfigError, ManagerState, ValidationError, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Typed settings persisted to a ``.cfg`` file.

    The catalog function is called once to build the registry. The settings
    file is then loaded, or created with the default values when missing.
    Values are only accessible once the manager is READY.

    Not thread-safe: callers have to serialize access to one manager.
    """

    def __init__(
        self,
        catalog: Catalog,
        filename: str = DEFAULT_FILENAME,
        directory: Optional[Union[str, Path]] = None,
        exit_hook: Optional[ExitHook] = None,
        save_on_exit: bool = False,
    ):
        """Build the registry and load or create the settings file.

        Args:
            catalog: Function returning the name -> Setting mapping
            filename: Settings file name, with or without the .cfg suffix
            directory: Directory of the settings file (default: working directory)
            exit_hook: Facility used by save_on_exit (default: atexit)
            save_on_exit: Save automatically when the exit hook fires
        """
        self.state = ManagerState.UNINITIALIZED
        self.file_path = settings_file_path(filename, directory)
        self.signals = SettingsSignals()
        self._exit_hook: ExitHook = exit_hook if exit_hook is not None else AtexitHook()
        self._save_on_exit = False

        self._registry = build_registry(catalog)
        self.state = ManagerState.CATALOG_BUILT
        self._validator = SettingsValidator(self._registry)

        if self.file_path.exists():
            self.state = ManagerState.FILE_EXISTS
            self._load()
        else:
            self.state = ManagerState.FILE_MISSING
            logger.info(f"Settings file {self.file_path} not found, creating it with defaults")
            self._save()

        self.state = ManagerState.READY
        self.save_on_exit = save_on_exit

        logger.debug(
            f"Settings initialized with {len(self._registry)} entries, stored at: {self.file_path}"
        )

    # === REGISTRY ACCESS ===

    @property
    def registry(self) -> Registry:
        """The registry holding all settings."""
        return self._registry

    def _ensure_ready(self) -> None:
        if self.state is not ManagerState.READY:
            raise ConfigError(f"Settings are not ready yet (state: {self.state.value})")

    def get(self, name: str) -> Any:
        """Get the current value of a setting."""
        self._ensure_ready()
        return self._registry.get(name)

    def set(self, name: str, value: Any) -> None:
        """Set the value of a setting. Raises ValidationError for invalid values."""
        self._ensure_ready()
        try:
            self._registry.set(name, value)
        except ValidationError as e:
            logger.error(f"Rejected value for setting '{name}': {e}")
            raise
        self.signals.value_changed.emit(name, self._registry.get(name))

    def reset_defaults(self) -> None:
        """Restore every setting to its default value (not saved)."""
        self._ensure_ready()
        self._registry.reset()
        for name, value in self._registry.snapshot().items():
            self.signals.value_changed.emit(name, value)

    # === PERSISTENCE ===

    def _load(self) -> None:
        try:
            store.load(self.file_path, self._registry)
        except ConfigError as e:
            logger.error(f"Failed to load settings from {self.file_path}: {e}")
            raise
        self.signals.loaded.emit(str(self.file_path))

    def _save(self) -> None:
        try:
            store.save(self.file_path, self._registry)
        except (ConfigError, OSError) as e:
            logger.error(f"Failed to save settings to {self.file_path}: {e}")
            raise
        self.signals.saved.emit(str(self.file_path))

    def reload(self) -> None:
        """Re-read the settings file into the registry."""
        self._ensure_ready()
        self._load()

    def save(self) -> None:
        """Write all settings to the settings file."""
        self._ensure_ready()
        self._save()

    # === EXIT HOOK ===

    @property
    def save_on_exit(self) -> bool:
        """Whether save() is registered with the exit hook."""
        return self._save_on_exit

    @save_on_exit.setter
    def save_on_exit(self, value: bool) -> None:
        """Register or unregister save() with the exit hook."""
        if self._save_on_exit == value:
            return
        self._save_on_exit = value
        if value:
            self._exit_hook.register(self.save)
        else:
            self._exit_hook.unregister(self.save)

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return str(self.file_path)
