"""shared.config の既定値と環境変数による上書きを確認するテスト。"""

from __future__ import annotations

from pathlib import Path

import pytest

from esi_client.shared.config import DEFAULT_USER_AGENT, get_settings
from esi_client.shared.exceptions import ConfigurationError

ENV_KEYS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "ESI__CONFIG_PATH",
    "ESI__FALLBACK_CONFIG_PATH",
    "ESI__USER_AGENT",
    "ESI__TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _cleanup_cache(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.environment == "local"
    assert settings.log_level == "INFO"
    assert settings.esi.config_path == Path("esi.json")
    assert settings.esi.fallback_config_path is None
    assert settings.esi.user_agent == DEFAULT_USER_AGENT
    assert settings.esi.timeout_seconds == 5.0


def test_settings_load_from_nested_env(monkeypatch) -> None:
    monkeypatch.setenv("ESI__CONFIG_PATH", "./conf/esi.json")
    monkeypatch.setenv("ESI__USER_AGENT", "my-tool/1.0")
    monkeypatch.setenv("ESI__TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.esi.config_path == Path("conf/esi.json")
    assert settings.esi.user_agent == "my-tool/1.0"
    assert settings.esi.timeout_seconds == 12.5
    assert settings.log_level == "debug"


def test_settings_load_from_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text("ESI__CONFIG_PATH=./from-dotenv.json\n", encoding="utf-8")

    assert get_settings().esi.config_path == Path("from-dotenv.json")


def test_settings_are_cached(monkeypatch) -> None:
    first = get_settings()
    monkeypatch.setenv("ESI__USER_AGENT", "changed")

    assert get_settings() is first


def test_settings_fail_on_invalid_timeout(monkeypatch) -> None:
    """不正な値は ConfigurationError に変換される。"""

    monkeypatch.setenv("ESI__TIMEOUT_SECONDS", "0")

    with pytest.raises(ConfigurationError):
        get_settings()
