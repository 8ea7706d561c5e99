"""User preferences for ncbookmarks.

Loads settings from ``<config-dir>/ncbookmarks/preferences.yaml``.
Falls back to defaults if the file doesn't exist or is invalid.

Example file::

    storage:
      bookmarks_file: "~/sync/bookmarks"   # empty = platform default
    logging:
      level: info                          # debug, info, warning, error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import LOG_LEVELS, logger
from .platform import bookmarks_path, preferences_path


@dataclass
class StoragePreferences:
    """Where the bookmarks file lives."""

    bookmarks_file: str = ""  # Empty means the platform default


@dataclass
class LoggingPreferences:
    level: str = "warning"


@dataclass
class Preferences:
    """Top-level preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)

    def resolve_bookmarks_path(self) -> Path:
        """Return the configured bookmarks file, or the platform default."""
        if self.storage.bookmarks_file:
            return Path(self.storage.bookmarks_file).expanduser()
        return bookmarks_path()


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Unknown keys and values of the wrong type are ignored; a missing or
    unparsable file yields the defaults.
    """
    path = path or preferences_path()
    prefs = Preferences()

    if not path.exists():
        return prefs
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        logger.debug("failed to load preferences from %s", path, exc_info=True)
        return prefs
    if not isinstance(data, dict):
        return prefs

    if isinstance(data.get("storage"), dict):
        sdata = data["storage"]
        if isinstance(sdata.get("bookmarks_file"), str):
            prefs.storage.bookmarks_file = sdata["bookmarks_file"]
    if isinstance(data.get("logging"), dict):
        level = data["logging"].get("level")
        if isinstance(level, str) and level.lower() in LOG_LEVELS:
            prefs.logging.level = level.lower()

    return prefs
