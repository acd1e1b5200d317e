"""Pytest configuration for bookoptions tests."""

import pytest

from bookoptions.options import BookOptions


@pytest.fixture
def options():
    """A store built from the built-in schema."""
    return BookOptions()


@pytest.fixture
def isolated_user_config(tmp_path, monkeypatch):
    """Keep tests away from any real user defaults file."""
    monkeypatch.setenv("BOOKOPTIONS_CONFIG", str(tmp_path / "missing.ini"))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
