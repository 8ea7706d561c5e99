"""Shared test fixtures for the ncbookmarks test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from ncbookmarks.persistence import Bookmark, BookmarkStore


@pytest.fixture
def bookmarks_file(tmp_path: Path) -> Path:
    """Path to a not-yet-existing bookmarks file inside a temp config dir."""
    return tmp_path / "ncbookmarks" / "bookmarks"


@pytest.fixture
def store(bookmarks_file: Path) -> BookmarkStore:
    return BookmarkStore(bookmarks_file)


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch) -> Path:
    """Point the Linux config-dir lookup at a temp directory."""
    import ncbookmarks.platform as plat

    home = tmp_path / "xdg"
    monkeypatch.setattr(plat, "IS_WINDOWS", False)
    monkeypatch.setattr(plat, "IS_MACOS", False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


# -- Sample bookmarks ---------------------------------------------------------


@pytest.fixture
def bm_a() -> Bookmark:
    return Bookmark(title="A", url="https://a.example/", tags=["x"])


@pytest.fixture
def bm_b() -> Bookmark:
    return Bookmark(title="B", url="https://b.example/", tags=[])


@pytest.fixture
def bm_a2() -> Bookmark:
    return Bookmark(title="A2", url="https://a.example/", tags=["y", "z"])
