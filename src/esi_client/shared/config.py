"""アプリケーション全体で共有する設定ローダー。"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from esi_client import __version__

from .exceptions import ConfigurationError

EnvName = Literal["local", "test", "staging", "production"]

DEFAULT_USER_AGENT = f"esi-client/{__version__}"


class ESIClientSettings(BaseModel):
    """ESI への接続とローカル設定ファイルの置き場所。"""

    config_path: Path = Field(Path("./esi.json"), description="永続化する ESI 設定ファイル")
    fallback_config_path: Path | None = Field(
        None,
        description="config_path が読めない場合の代替。未指定ならパッケージ同梱のデフォルト",
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent ヘッダの基本値")
    timeout_seconds: float = Field(5.0, gt=0, description="HTTP トランスポートのタイムアウト")


class AppSettings(BaseSettings):
    """共有設定。`.env` 読み込みと環境変数バリデーションを担う。"""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: EnvName = Field("local", description="実行環境識別子")
    log_level: str = Field("INFO", description="ルートロガーのログレベル")
    esi: ESIClientSettings = Field(default_factory=ESIClientSettings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """設定をロードし、再利用する。

    LRU キャッシュによりプロセス内での重複読み込みを防ぎ、
    `pytest` などから `get_settings.cache_clear()` を呼び出すことで再読込できる。
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "DEFAULT_USER_AGENT",
    "ESIClientSettings",
    "EnvName",
    "get_settings",
]
