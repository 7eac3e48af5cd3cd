"""ETag を用いた条件付きリクエストのためのインメモリキャッシュ。"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime

from esi_client.infra.esi.dto import CacheEntry, CacheEntryStats, CacheStats, ESIResponse
from esi_client.shared.logging import get_logger
from esi_client.shared.types import utc_now


class ETagCache:
    """フィンガープリント -> (ETag, 正規化済みレスポンス, 作成時刻) の対応表。

    自動失効はしない。プロセス終了で破棄される。
    単一エントリの操作はロックで保護するが、エントリ間の原子性は保証しない。
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None, logger=None) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock or utc_now
        self._logger = logger or get_logger(__name__)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, fingerprint: object) -> bool:
        with self._lock:
            return fingerprint in self._entries

    def lookup(self, fingerprint: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(fingerprint)

    def store(self, fingerprint: str, etag: str, response: ESIResponse) -> CacheEntry:
        entry = CacheEntry(etag=etag, response=response, created_at=self._clock())
        with self._lock:
            self._entries[fingerprint] = entry
        return entry

    def clear(self, fingerprint: str | None = None) -> bool | int:
        """エントリを削除する。

        キー指定時は存在したかどうか、省略時は削除件数を返す。
        """

        with self._lock:
            if fingerprint is not None:
                existed = self._entries.pop(fingerprint, None) is not None
                self._logger.info("esi_cache_cleared", key=fingerprint, found=existed)
                return existed
            removed = len(self._entries)
            self._entries.clear()
        self._logger.info("esi_cache_cleared", removed=removed)
        return removed

    def stats(self) -> CacheStats:
        now = self._clock()
        with self._lock:
            snapshot = list(self._entries.items())
        entries = tuple(
            CacheEntryStats(
                key=key,
                etag=entry.etag,
                created_at=entry.created_at,
                age_seconds=(now - entry.created_at).total_seconds(),
            )
            for key, entry in snapshot
        )
        return CacheStats(size=len(entries), entries=entries)


__all__ = ["ETagCache"]
