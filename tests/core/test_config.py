"""Settings — environment-driven configuration.

Tests cover:
    - Defaults work without any environment
    - Environment variables override defaults (case-insensitive)
    - Invalid port / blank host rejected
    - get_settings() is cached
"""

import pytest
from pydantic import ValidationError

from fnfun.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("ENTERPRISE_HOST", "ENTERPRISE_PORT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.enterprise_host == "localhost"
    assert settings.enterprise_port == 8080
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_overrides(clean_env):
    clean_env.setenv("enterprise_host", " directory.internal ")
    clean_env.setenv("ENTERPRISE_PORT", "9090")
    settings = Settings(_env_file=None)
    assert settings.enterprise_host == "directory.internal"
    assert settings.enterprise_port == 9090


@pytest.mark.parametrize("port", ["0", "70000", "-1"])
def test_invalid_port_rejected(clean_env, port):
    clean_env.setenv("ENTERPRISE_PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_host_rejected(clean_env):
    clean_env.setenv("ENTERPRISE_HOST", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
