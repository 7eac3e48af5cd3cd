"""設定とキャッシュを扱うユーティリティ。"""

from __future__ import annotations

import asyncio

from esi_client.core.settings import ESIRoute, ESISettings, SettingsUpdate
from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.cache import ETagCache
from esi_client.infra.esi.dto import CacheStats
from esi_client.infra.esi.settings_store import SettingsStore


class UtilityFunctions:
    """パイプラインが依存する設定ストアと、パイプラインが持つキャッシュへの窓口。"""

    def __init__(self, *, settings_store: SettingsStore, cache: ETagCache) -> None:
        self._settings_store = settings_store
        self._cache = cache

    def get_settings(self) -> ESISettings:
        return self._settings_store.get()

    def set_settings(
        self,
        *,
        route: ESIRoute | str | None = None,
        auth_token: str | None = None,
        language: str | None = None,
        project_name: str | None = None,
    ) -> ESISettings:
        """設定を部分更新して `esi.json` に書き戻す。

        Args:
            route: `latest`/`v1`/`legacy`/`dev` のいずれか。
            auth_token: 認証付きエンドポイント用のトークン。
            language: `en/us` 形式の言語タグ。
            project_name: User-Agent に付与するプロジェクト名。
        """

        return self._settings_store.set(
            SettingsUpdate(
                route=route,
                auth_token=auth_token,
                language=language,
                project_name=project_name,
            )
        )

    async def sleep(self, millis: float) -> None:
        validate(millis, ValueKind.NUMBER, "The function 'util.sleep' requires a delay in ms!")
        await asyncio.sleep(millis / 1000)

    def clear_etag_cache(self, key: str | None = None) -> bool | int:
        return self._cache.clear(key)

    def get_cache_stats(self) -> CacheStats:
        return self._cache.stats()


__all__ = ["UtilityFunctions"]
