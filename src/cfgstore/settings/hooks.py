"""
Exit hooks and change notifications for settings managers.
"""

import atexit
import logging
from typing import Any, Callable, List, Protocol

from PySide6.QtCore import QObject, Signal, SignalInstance

logger = logging.getLogger(__name__)


class ExitHook(Protocol):
    """Anything callbacks can be registered with to run at shutdown."""

    def register(self, callback: Callable[[], Any]) -> Any: ...

    def unregister(self, callback: Callable[[], Any]) -> Any: ...


class AtexitHook:
    """Runs callbacks when the interpreter exits."""

    def register(self, callback: Callable[[], Any]) -> None:
        atexit.register(callback)

    def unregister(self, callback: Callable[[], Any]) -> None:
        atexit.unregister(callback)


class QtExitHook:
    """
    Runs callbacks when a Qt signal fires.

    Usually bound to ``QCoreApplication.instance().aboutToQuit`` so settings
    are saved as part of the application's own shutdown sequence.
    """

    def __init__(self, signal: SignalInstance):
        self.signal = signal
        self._connected: List[Callable[[], Any]] = []

    def register(self, callback: Callable[[], Any]) -> None:
        if callback not in self._connected:
            self.signal.connect(callback)
            self._connected.append(callback)

    def unregister(self, callback: Callable[[], Any]) -> None:
        if callback not in self._connected:
            logger.debug(f"Exit callback {callback!r} was not connected")
            return
        self._connected.remove(callback)
        self.signal.disconnect(callback)


class SettingsSignals(QObject):
    """Qt object for emitting settings change notifications."""

    value_changed = Signal(str, object)
    loaded = Signal(str)
    saved = Signal(str)
