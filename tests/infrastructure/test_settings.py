"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from ordersim.infrastructure.settings import DEFAULT_BACKEND_URL, Settings, load_settings

_VARS = (
    "ORDERSIM_DATA_DIR",
    "ORDERSIM_BACKEND_URL",
    "ORDERSIM_BACKEND_TIMEOUT",
    "ORDERSIM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _VARS:
        # setenv first so monkeypatch also undoes values load_dotenv writes.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a developer's .env out of the way.
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = load_settings()
    assert settings.data_dir == Path("data")
    assert settings.backend_url == DEFAULT_BACKEND_URL
    assert settings.backend_timeout_seconds == 5.0
    assert settings.log_level == "WARNING"
    assert settings.backend_enabled


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ORDERSIM_DATA_DIR", str(tmp_path / "store"))
    monkeypatch.setenv("ORDERSIM_BACKEND_URL", "")
    monkeypatch.setenv("ORDERSIM_BACKEND_TIMEOUT", "0.5")
    monkeypatch.setenv("ORDERSIM_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.data_dir == tmp_path / "store"
    assert not settings.backend_enabled
    assert settings.backend_timeout_seconds == 0.5
    assert settings.log_level == "debug"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("ORDERSIM_BACKEND_TIMEOUT=9\n", encoding="utf-8")
    assert load_settings().backend_timeout_seconds == 9.0


@pytest.mark.parametrize("value", ["0", "-1", "soon"])
def test_bad_timeout_fails_fast(monkeypatch, value):
    monkeypatch.setenv("ORDERSIM_BACKEND_TIMEOUT", value)
    with pytest.raises(ValueError, match="ORDERSIM_BACKEND_TIMEOUT"):
        load_settings()


def test_bad_log_level_fails_fast():
    with pytest.raises(ValueError, match="ORDERSIM_LOG_LEVEL"):
        Settings(data_dir=Path("data"), log_level="LOUD")
