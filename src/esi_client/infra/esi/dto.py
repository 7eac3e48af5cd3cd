"""ESI レスポンスおよびキャッシュ関連の DTO。"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from esi_client.shared.types import DTO, JSONValue


class HttpMethod(str, Enum):
    """パイプラインが扱う HTTP メソッド。"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self is not HttpMethod.GET


@dataclass(slots=True)
class ESIResponse(DTO):
    """キャッシュヒット/ミスに関わらず呼び出し元へ返す正規化済みレスポンス。"""

    headers: dict[str, str] = field(default_factory=dict)
    data: JSONValue = None


@dataclass(slots=True)
class CacheEntry(DTO):
    """フィンガープリントに紐づく最後の ETag とレスポンス。"""

    etag: str
    response: ESIResponse
    created_at: datetime


@dataclass(slots=True)
class CacheEntryStats(DTO):
    key: str
    etag: str
    created_at: datetime
    age_seconds: float


@dataclass(slots=True)
class CacheStats(DTO):
    """キャッシュ統計。`entries` は呼び出し時点の経過時間を含む。"""

    size: int
    entries: tuple[CacheEntryStats, ...] = ()

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self.entries)


__all__ = [
    "CacheEntry",
    "CacheEntryStats",
    "CacheStats",
    "ESIResponse",
    "HttpMethod",
]
