"""
Reading and writing registries to line-oriented settings files.

File format, one line per setting in registry order::

    <name>: <escaped-value>
"""

import logging
from pathlib import Path
from typing import List, Union

from PySide6.QtCore import QIODevice, QSaveFile

from .escaping import escape, unescape
from .registry import DELIMITER, Registry
from .types import DecodeError, ValidationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def format_lines(registry: Registry) -> List[str]:
    """Encode and escape every setting. Raises ValidationError for invalid values."""
    return [
        f"{name}{DELIMITER}{escape(setting.encode())}"
        for name, setting in registry.items()
    ]


def load(path: PathLike, registry: Registry) -> int:
    """
    Load setting values from a settings file into the registry.

    Missing files are ignored. Lines without the delimiter or naming an
    unknown setting are skipped. Decode and validation errors propagate and
    abort the load.

    Returns:
        Number of lines applied to the registry
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Settings file {path} does not exist, nothing to load")
        return 0

    applied = 0
    with open(path, "rb") as handle:
        for line_no, raw in enumerate(handle, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(
                    None, None, len(raw),
                    reason=f"{path}:{line_no} is not valid UTF-8 ({e.reason})",
                ) from e

            parts = line.rstrip("\r\n").split(DELIMITER, 1)
            if len(parts) != 2 or parts[0] not in registry:
                logger.debug(f"{path}:{line_no}: skipping line {line.rstrip()!r}")
                continue

            name, escaped = parts
            setting = registry[name]
            try:
                data = unescape(escaped)
            except UnicodeEncodeError as e:
                raise DecodeError(
                    setting.kind, setting.codec.width, len(escaped),
                    reason=f"line {line_no} holds characters above U+00FF",
                ) from e
            try:
                setting.decode(data)
            except ValidationError as e:
                raise ValidationError(e.value, e.description, name) from e
            applied += 1

    logger.info(f"Loaded {applied} settings from {path}")
    return applied


def save(path: PathLike, registry: Registry) -> None:
    """
    Write every setting of the registry to a settings file.

    All values are encoded before the file is touched, and the file is
    replaced only when the whole content has been written.
    """
    path = Path(path)
    content = "".join(f"{line}\n" for line in format_lines(registry)).encode("utf-8")

    save_file = QSaveFile(str(path))
    if not save_file.open(QIODevice.OpenModeFlag.WriteOnly):
        raise OSError(f"Cannot open {path} for writing: {save_file.errorString()}")
    if save_file.write(content) != len(content):
        error = save_file.errorString()
        save_file.cancelWriting()
        raise OSError(f"Cannot write {path}: {error}")
    if not save_file.commit():
        raise OSError(f"Cannot replace {path}: {save_file.errorString()}")

    logger.info(f"Saved {len(registry)} settings to {path}")
