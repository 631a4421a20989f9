"""
tests/conftest.py
=================
Shared pytest fixtures: cheap bcrypt work factor, isolated configuration.
"""
import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from constants import ConfigKeys


_POLICY_KEYS = (
    ConfigKeys.GENERATE_LENGTH,
    ConfigKeys.INCLUDE_LOWERCASE,
    ConfigKeys.INCLUDE_UPPERCASE,
    ConfigKeys.INCLUDE_NUMBERS,
    ConfigKeys.INCLUDE_SPECIAL,
    ConfigKeys.EXCLUDE_SIMILAR,
)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost so hashing tests stay fast."""
    monkeypatch.setenv(ConfigKeys.BCRYPT_SALT_ROUNDS, "4")
    for key in _POLICY_KEYS + (ConfigKeys.LOG_DIR,):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """A Config singleton backed by an empty temp settings file."""
    from core.config import Config

    settings = tmp_path / "settings.json"
    settings.write_text("{}", encoding="utf-8")
    monkeypatch.setenv(ConfigKeys.CONFIG_FILE, str(settings))

    Config.clear_instance()
    yield Config.get_instance()
    Config.clear_instance()
