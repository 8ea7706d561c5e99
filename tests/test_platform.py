"""Tests for ncbookmarks.platform config-dir resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

import ncbookmarks.platform as plat
from ncbookmarks.platform import (
    ConfigDirError,
    app_config_dir,
    bookmarks_path,
    config_home,
    preferences_path,
)


@pytest.fixture
def as_linux(monkeypatch):
    monkeypatch.setattr(plat, "IS_WINDOWS", False)
    monkeypatch.setattr(plat, "IS_MACOS", False)


class TestPlatformDetection:
    def test_platform_is_known(self):
        assert plat.PLATFORM in {"linux", "wsl", "macos", "windows"}

    def test_flags_are_exclusive(self):
        assert sum([plat.IS_WINDOWS, plat.IS_MACOS, plat.IS_LINUX]) <= 1


class TestConfigHome:
    def test_linux_xdg(self, as_linux, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config_home() == tmp_path

    def test_linux_relative_xdg_ignored(self, as_linux, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert config_home() == tmp_path / ".config"

    def test_linux_default(self, as_linux, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert config_home() == tmp_path / ".config"

    def test_macos(self, monkeypatch, tmp_path):
        monkeypatch.setattr(plat, "IS_WINDOWS", False)
        monkeypatch.setattr(plat, "IS_MACOS", True)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert config_home() == tmp_path / "Library" / "Application Support"

    def test_windows(self, monkeypatch, tmp_path):
        monkeypatch.setattr(plat, "IS_WINDOWS", True)
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert config_home() == tmp_path

    def test_windows_without_appdata(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", True)
        monkeypatch.delenv("APPDATA", raising=False)
        with pytest.raises(ConfigDirError):
            config_home()

    def test_no_home_directory(self, as_linux, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", classmethod(no_home))
        with pytest.raises(ConfigDirError):
            config_home()


class TestAppPaths:
    def test_app_dir(self, config_home):
        assert app_config_dir() == config_home / "ncbookmarks"

    def test_bookmarks_path(self, config_home):
        assert bookmarks_path() == config_home / "ncbookmarks" / "bookmarks"

    def test_preferences_path(self, config_home):
        assert preferences_path() == config_home / "ncbookmarks" / "preferences.yaml"
