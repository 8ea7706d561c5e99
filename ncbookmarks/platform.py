"""Cross-platform paths for ncbookmarks.

Detects the runtime platform once at import time and resolves the
per-user configuration directory the bookmarks file lives in.

Supported platforms:
  - linux   (native Linux)
  - wsl     (Windows Subsystem for Linux)
  - macos   (macOS / Darwin)
  - windows (native Windows)
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

from .constants import APP_NAME, BOOKMARKS_FILENAME, PREFERENCES_FILENAME
from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

_system = platform.system()  # "Linux", "Darwin", "Windows"

try:
    _uname_release = platform.uname().release.lower()
except OSError:
    _uname_release = ""

IS_WINDOWS = _system == "Windows"
IS_MACOS = _system == "Darwin"
IS_LINUX = _system == "Linux"
IS_WSL = IS_LINUX and "microsoft" in _uname_release

if IS_WINDOWS:
    PLATFORM = "windows"
elif IS_WSL:
    PLATFORM = "wsl"
elif IS_MACOS:
    PLATFORM = "macos"
else:
    PLATFORM = "linux"


class ConfigDirError(RuntimeError):
    """The platform configuration directory cannot be determined."""


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigDirError("no home directory to derive config dir from") from exc


def config_home() -> Path:
    """Return the per-user configuration directory for this platform.

    ``%APPDATA%`` on Windows, ``~/Library/Application Support`` on macOS,
    ``$XDG_CONFIG_HOME`` or ``~/.config`` everywhere else.

    Raises :class:`ConfigDirError` when no directory can be resolved.
    """
    if IS_WINDOWS:
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise ConfigDirError("APPDATA is not set")
        return Path(appdata)
    if IS_MACOS:
        return _home() / "Library" / "Application Support"
    # Linux / WSL
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return _home() / ".config"


def app_config_dir() -> Path:
    """Return ``<config-home>/ncbookmarks``."""
    return config_home() / APP_NAME


def bookmarks_path() -> Path:
    """Return the default bookmarks file location."""
    path = app_config_dir() / BOOKMARKS_FILENAME
    logger.info("Looking for bookmarks file %s", path)
    return path


def preferences_path() -> Path:
    """Return the default preferences file location."""
    return app_config_dir() / PREFERENCES_FILENAME
