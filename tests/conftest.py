"""Shared test fixtures for config-selector tests."""

from pathlib import Path
from types import SimpleNamespace
import pytest


@pytest.fixture
def sandbox(tmp_path, monkeypatch):
    """Point HOME, the user config dir and the working directory at temp directories."""
    home = tmp_path / "home"
    user_config = home / ".config"
    work = tmp_path / "work"
    for directory in (home, user_config, work):
        directory.mkdir(parents=True, exist_ok=True)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(user_config))
    monkeypatch.delenv("CONFIG_SELECTOR_PROFILE", raising=False)
    monkeypatch.delenv("CONFIG_SELECTOR_PATH", raising=False)
    monkeypatch.chdir(work)

    return SimpleNamespace(root=tmp_path, home=home, user_config=user_config, work=work)


@pytest.fixture
def deny_stat(monkeypatch):
    """Make stat() raise PermissionError for the paths it is called with."""
    blocked = set()
    real_stat = Path.stat

    def fake_stat(self, *args, **kwargs):
        if Path(self) in blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", fake_stat)

    def block(*paths):
        blocked.update(Path(p) for p in paths)

    return block
