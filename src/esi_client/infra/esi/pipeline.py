"""全エンドポイントが通過するリクエストパイプライン。

設定ストア・ETag キャッシュ・HTTP トランスポートを組み合わせて
URL を組み立て、条件付きリクエストを送り、結果を正規化する。
リトライやバックオフは行わない。失敗は即座に呼び出し元へ伝える。
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from esi_client.core.settings import ESISettings
from esi_client.infra.esi.cache import ETagCache
from esi_client.infra.esi.dto import CacheEntry, ESIResponse, HttpMethod
from esi_client.infra.esi.settings_store import SettingsStore, build_settings_store
from esi_client.shared.config import DEFAULT_USER_AGENT, AppSettings, get_settings
from esi_client.shared.exceptions import (
    AuthRequiredError,
    InternalError,
    RemoteError,
    TransportError,
)
from esi_client.shared.logging import get_logger

DATASOURCE = "tranquility"
NOT_MODIFIED = 304

QueryValue = str | int | float | bool | Sequence[int | str] | None
Query = Mapping[str, QueryValue]

# `://` の直後以外で連続するスラッシュ
_DUPLICATE_SLASHES = re.compile(r"(?<!:)/{2,}")


@dataclass(slots=True, frozen=True)
class PreparedRequest:
    """送信直前のリクエスト。`public_url` はトークンを含まない。"""

    method: HttpMethod
    url: str
    public_url: str
    headers: dict[str, str]
    body: Any
    fingerprint: str


def serialize_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(serialize_query_value(item) for item in value)
    return str(value)


def normalize_query(query: Query | None) -> dict[str, QueryValue] | None:
    """None の値を落とし、キー順に並べ替える。空なら None。"""

    if not query:
        return None
    normalized = {key: query[key] for key in sorted(query) if query[key] is not None}
    return normalized or None


def build_url(
    base: str,
    path: str,
    *,
    query: Query | None = None,
    language: str | None = None,
) -> str:
    """`<base><path>/?datasource=tranquility&...` を組み立てる。"""

    target = _DUPLICATE_SLASHES.sub("/", f"{base}/{path}/")
    params: list[tuple[str, str]] = [("datasource", DATASOURCE)]
    for key, value in (query or {}).items():
        if value is None:
            continue
        params.append((key, serialize_query_value(value)))
    if language:
        params.append(("language", language))
    return f"{target}?{urlencode(params)}"


def compute_fingerprint(
    method: HttpMethod,
    url: str,
    *,
    needs_auth: bool,
    query: Query | None = None,
    body: Any = None,
) -> str:
    """リクエストの形を一意に表すキャッシュキー。

    クエリ・ボディはキー順を固定して直列化するため、論理的に同じリクエストは
    同じキーになる。
    """

    key = f"{method.value}_{url}_{'AUTH' if needs_auth else 'NOAUTH'}"
    if query:
        key += "_" + json.dumps(dict(query), sort_keys=True, default=list)
    if body is not None:
        key += "_" + json.dumps(body, sort_keys=True, default=list)
    return key


class ESIRequestPipeline:
    """ESI への HTTP 呼び出しを一手に引き受けるクライアント。"""

    def __init__(
        self,
        *,
        settings_store: SettingsStore,
        cache: ETagCache | None = None,
        http_client: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 5.0,
        logger=None,
    ) -> None:
        self._settings_store = settings_store
        self._cache = cache if cache is not None else ETagCache()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._user_agent = user_agent
        self._timeout = timeout
        self._logger = logger or get_logger(__name__)

    @property
    def cache(self) -> ETagCache:
        return self._cache

    @property
    def settings_store(self) -> SettingsStore:
        return self._settings_store

    async def execute(
        self,
        path: str,
        *,
        body: Any = None,
        query: Query | None = None,
        method: HttpMethod | str = HttpMethod.GET,
        needs_auth: bool = False,
    ) -> ESIResponse:
        prepared = self.prepare(path, body=body, query=query, method=method, needs_auth=needs_auth)
        cached = None
        if prepared.method is HttpMethod.GET:
            cached = self._cache.lookup(prepared.fingerprint)
        if cached is not None:
            prepared.headers["If-None-Match"] = cached.etag
            self._logger.debug("esi_cache_etag_attached", path=path, etag=cached.etag)

        self._logger.debug("esi_request", method=prepared.method.value, url=prepared.public_url)
        try:
            response = await self._client().request(
                prepared.method.value,
                prepared.url,
                headers=prepared.headers,
                json=prepared.body,
            )
        except httpx.HTTPError as exc:
            message = str(exc) or type(exc).__name__
            self._logger.error("esi_transport_error", url=prepared.public_url, message=message)
            raise TransportError(message, url=prepared.public_url) from exc

        return self._interpret(prepared, response, cached, path)

    def prepare(
        self,
        path: str,
        *,
        body: Any = None,
        query: Query | None = None,
        method: HttpMethod | str = HttpMethod.GET,
        needs_auth: bool = False,
    ) -> PreparedRequest:
        """設定を解決し、URL・ヘッダ・フィンガープリントを確定させる。"""

        http_method = _coerce_method(method)
        query = normalize_query(query)
        settings = self._settings_store.get()
        if needs_auth and not settings.has_token:
            msg = (
                "You used an authenticated function without a token. "
                f"Please set a token in {self._settings_store.config_path}."
            )
            raise AuthRequiredError(msg)

        public_url = build_url(
            settings.link,
            path,
            query=query,
            language=settings.query_language if settings.language else None,
        )
        headers = self._base_headers(settings)
        url = public_url
        if needs_auth:
            # ヘッダが落とされる経路に備えてクエリにも載せる
            headers["Authorization"] = f"Bearer {settings.auth_token}"
            url = f"{public_url}&{urlencode({'token': settings.auth_token})}"

        return PreparedRequest(
            method=http_method,
            url=url,
            public_url=public_url,
            headers=headers,
            body=body if http_method.sends_body else None,
            fingerprint=compute_fingerprint(
                http_method, public_url, needs_auth=needs_auth, query=query, body=body
            ),
        )

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_http_client = True
        return self._http_client

    def _base_headers(self, settings: ESISettings) -> dict[str, str]:
        user_agent = self._user_agent
        if settings.project_name:
            user_agent += f" (for: {settings.project_name})"
        headers = {"Accept": "application/json", "User-Agent": user_agent}
        if settings.language:
            headers["Accept-Language"] = settings.language
        return headers

    def _interpret(
        self,
        prepared: PreparedRequest,
        response: httpx.Response,
        cached: CacheEntry | None,
        path: str,
    ) -> ESIResponse:
        if response.is_success:
            normalized = ESIResponse(headers=dict(response.headers), data=_decode_body(response))
            etag = response.headers.get("etag")
            if prepared.method is HttpMethod.GET and etag:
                self._cache.store(prepared.fingerprint, etag, normalized)
                self._logger.debug("esi_cache_stored", path=path, etag=etag)
            return normalized

        if response.status_code == NOT_MODIFIED and prepared.method is HttpMethod.GET:
            if cached is not None:
                self._logger.debug("esi_cache_not_modified", path=path, etag=cached.etag)
                return cached.response
            # 送信後にキャッシュが消された場合。空の成功として扱う
            self._logger.warning("esi_cache_not_modified_without_entry", path=path)
            return ESIResponse(headers=dict(response.headers), data=None)

        message = _error_message(response)
        self._logger.error(
            "esi_remote_error",
            url=prepared.public_url,
            status_code=response.status_code,
            message=message,
        )
        raise RemoteError(message, status_code=response.status_code, url=prepared.public_url)


def _coerce_method(method: HttpMethod | str) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(str(method).upper())
    except ValueError as exc:
        msg = (
            f"Endpoint function not configured properly: unsupported method {method!r}. "
            "Please report this error."
        )
        raise InternalError(msg) from exc


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return response.reason_phrase or f"HTTP {response.status_code}"


def build_pipeline(
    *,
    settings: AppSettings | None = None,
    settings_store: SettingsStore | None = None,
    cache: ETagCache | None = None,
    http_client: httpx.AsyncClient | None = None,
    logger=None,
) -> ESIRequestPipeline:
    """共有設定からパイプラインを構築するファクトリ。"""

    app_settings = settings or get_settings()
    return ESIRequestPipeline(
        settings_store=settings_store
        or build_settings_store(settings=app_settings, logger=logger),
        cache=cache,
        http_client=http_client,
        user_agent=app_settings.esi.user_agent,
        timeout=app_settings.esi.timeout_seconds,
        logger=logger,
    )


__all__ = [
    "DATASOURCE",
    "ESIRequestPipeline",
    "PreparedRequest",
    "Query",
    "build_pipeline",
    "build_url",
    "compute_fingerprint",
    "normalize_query",
    "serialize_query_value",
]
