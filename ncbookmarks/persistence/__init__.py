"""Persistence layer – the store owns its file path, data format, and I/O."""

from .bookmarks import (
    Bookmark,
    BookmarkStore,
    InvalidURLError,
    LoadResult,
    load_bookmarks,
    normalize_url,
)

__all__ = [
    "Bookmark",
    "BookmarkStore",
    "InvalidURLError",
    "LoadResult",
    "load_bookmarks",
    "normalize_url",
]
