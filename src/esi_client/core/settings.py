"""ESI 接続設定のレコードと、その純粋なマージ処理。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from esi_client.shared.exceptions import InvalidChannelError

ESI_SERVER = "esi.evetech.net"
DEFAULT_LANGUAGE = "en/us"


class ESIRoute(str, Enum):
    """ESI のリリースチャンネル。"""

    LATEST = "latest"
    V1 = "v1"
    LEGACY = "legacy"
    DEV = "dev"

    @property
    def base_url(self) -> str:
        return f"https://{ESI_SERVER}/{self.value}/"

    @classmethod
    def parse(cls, value: ESIRoute | str) -> ESIRoute:
        if isinstance(value, ESIRoute):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(route.value for route in cls)
            msg = f'The "route" setting must be one of these: {allowed} (got {value!r})'
            raise InvalidChannelError(msg) from exc

    @classmethod
    def from_link(cls, link: str) -> ESIRoute | None:
        """ベース URL からチャンネルを逆算する。判別できなければ None。"""

        parts = urlsplit(link)
        if parts.hostname != ESI_SERVER:
            return None
        segment = parts.path.strip("/").split("/", 1)[0]
        try:
            return cls(segment)
        except ValueError:
            return None


DEFAULT_ROUTE = ESIRoute.LATEST


class ESISettings(BaseModel):
    """`esi.json` に永続化される設定レコード。

    未知のフィールドは書き戻し時にそのまま保持する。
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    project_name: str = Field("", alias="projectName")
    link: str = Field(DEFAULT_ROUTE.base_url)
    auth_token: str = Field("", alias="authToken")
    language: str = Field(DEFAULT_LANGUAGE)

    @property
    def route(self) -> ESIRoute | None:
        return ESIRoute.from_link(self.link)

    @property
    def has_token(self) -> bool:
        return bool(self.auth_token)

    @property
    def query_language(self) -> str:
        """クエリパラメータ用の言語タグ (`en/us` -> `en-us`)。"""

        return "-".join(self.language.split("/"))

    def to_record(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


@dataclass(slots=True, frozen=True)
class SettingsUpdate:
    """部分更新。None のフィールドは既存値を引き継ぐ。"""

    route: ESIRoute | str | None = None
    auth_token: str | None = None
    language: str | None = None
    project_name: str | None = None


def merge_settings(current: ESISettings | None, update: SettingsUpdate) -> ESISettings:
    """現在値と部分更新から新しい完全なレコードを作る。

    明示された値が優先され、省略されたフィールドは現在値を保つ。
    組み込みデフォルトは現在値が存在しない (初回書き込み) 場合のみ使う。
    """

    if update.route is not None:
        link = ESIRoute.parse(update.route).base_url
    elif current is not None:
        # 既知のチャンネルに当てはまらない link もそのまま保持する
        link = current.link
    else:
        link = DEFAULT_ROUTE.base_url

    base = current.to_record() if current is not None else {}
    base.update(
        {
            "link": link,
            "authToken": _pick(update.auth_token, current.auth_token if current else None, ""),
            "language": _pick(
                update.language, current.language if current else None, DEFAULT_LANGUAGE
            ),
            "projectName": _pick(
                update.project_name, current.project_name if current else None, ""
            ),
        }
    )
    return ESISettings.model_validate(base)


def _pick(explicit: str | None, existing: str | None, default: str) -> str:
    if explicit is not None:
        return explicit
    if existing is not None:
        return existing
    return default


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_ROUTE",
    "ESIRoute",
    "ESISettings",
    "ESI_SERVER",
    "SettingsUpdate",
    "merge_settings",
]
