"""共有型・ユーティリティ。"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

# ESI が返す JSON ボディ。オブジェクト・配列・スカラーのいずれもあり得る
JSONValue = Any


@dataclass(slots=True)
class DTO:
    """レイヤ間で受け渡す値の基底。"""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def utc_now() -> datetime:
    return datetime.now(UTC)


__all__ = ["DTO", "JSONValue", "utc_now"]
