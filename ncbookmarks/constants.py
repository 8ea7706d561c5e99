"""Application-wide constants."""

from __future__ import annotations

APP_NAME = "ncbookmarks"

# File names inside <config-dir>/<APP_NAME>/
BOOKMARKS_FILENAME = "bookmarks"
PREFERENCES_FILENAME = "preferences.yaml"

# Array-of-tables key holding the bookmark records
BOOKMARK_TABLE_KEY = "bookmark"

FILE_HEADER = f"# Automatically generated by {APP_NAME}.\n"
