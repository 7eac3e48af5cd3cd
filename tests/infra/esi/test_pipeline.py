from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import pytest

from esi_client.infra.esi.cache import ETagCache
from esi_client.infra.esi.dto import HttpMethod
from esi_client.infra.esi.pipeline import (
    ESIRequestPipeline,
    build_url,
    compute_fingerprint,
    normalize_query,
    serialize_query_value,
)
from esi_client.infra.esi.settings_store import SettingsStore
from esi_client.shared.exceptions import (
    AuthRequiredError,
    InternalError,
    RemoteError,
    TransportError,
)

BASE = "https://esi.evetech.net/latest/"


class RecordingCache(ETagCache):
    def __init__(self) -> None:
        super().__init__()
        self.store_calls = 0

    def store(self, fingerprint, etag, response):
        self.store_calls += 1
        return super().store(fingerprint, etag, response)


def _store(tmp_path: Path, **record: str) -> SettingsStore:
    payload = {"link": BASE, "authToken": "", "language": "en/us", "projectName": ""}
    payload.update(record)
    path = tmp_path / "esi.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return SettingsStore(config_path=path, fallback_path=tmp_path / "missing.json")


def _pipeline(tmp_path: Path, handler, *, cache: ETagCache | None = None, **record: str):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ESIRequestPipeline(
        settings_store=_store(tmp_path, **record),
        cache=cache,
        http_client=client,
        user_agent="esi-client/test",
    )


def test_build_url_collapses_duplicate_slashes() -> None:
    url = build_url(BASE, "/characters/1//contracts/", language="en-us")

    assert url == (
        "https://esi.evetech.net/latest/characters/1/contracts/"
        "?datasource=tranquility&language=en-us"
    )


def test_build_url_serializes_query_in_order() -> None:
    url = build_url(
        BASE,
        "route/1/2",
        query={"avoid": [3, 4], "flag": "secure", "skip": None, "include": True},
    )

    assert url == (
        "https://esi.evetech.net/latest/route/1/2/"
        "?datasource=tranquility&avoid=3%2C4&flag=secure&include=true"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "true"), (False, "false"), (0, "0"), ([1, 2, 3], "1,2,3"), ("buy", "buy")],
)
def test_serialize_query_value(value, expected: str) -> None:
    assert serialize_query_value(value) == expected


def test_normalize_query_drops_none_and_sorts_keys() -> None:
    assert normalize_query({"page": 1, "order_type": "buy", "type_id": None}) == {
        "order_type": "buy",
        "page": 1,
    }
    assert list(normalize_query({"b": 2, "a": 1}) or {}) == ["a", "b"]
    assert normalize_query({"type_id": None}) is None
    assert normalize_query(None) is None


def test_logically_identical_queries_share_cache_entry(tmp_path: Path) -> None:
    """キー順の違いや None の値は同じリクエストとして扱われる。"""

    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.headers.get("If-None-Match") == '"e"':
            return httpx.Response(304)
        return httpx.Response(200, json=[{"order_id": 1}], headers={"ETag": '"e"'})

    pipeline = _pipeline(tmp_path, handler)

    async def scenario():
        await pipeline.execute("markets/1/orders", query={"order_type": "buy", "page": 1})
        reordered = await pipeline.execute(
            "markets/1/orders", query={"page": 1, "order_type": "buy"}
        )
        await pipeline.execute("markets/1/history", query={"type_id": None})
        without_query = await pipeline.execute("markets/1/history")
        return reordered, without_query

    reordered, without_query = asyncio.run(scenario())

    assert seen[1].headers["If-None-Match"] == '"e"'
    assert str(seen[0].url) == str(seen[1].url)
    assert reordered.data == [{"order_id": 1}]
    assert seen[3].headers["If-None-Match"] == '"e"'
    assert without_query.data == [{"order_id": 1}]
    assert pipeline.cache.stats().size == 2


def test_concurrent_calls_to_same_request_leave_one_entry(tmp_path: Path) -> None:
    calls: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        await asyncio.sleep(0)
        return httpx.Response(
            200, json={"players": len(calls)}, headers={"ETag": f'"v{len(calls)}"'}
        )

    pipeline = _pipeline(tmp_path, handler)

    async def scenario():
        return await asyncio.gather(*(pipeline.execute("status") for _ in range(5)))

    responses = asyncio.run(scenario())

    assert len(responses) == 5
    stats = pipeline.cache.stats()
    assert stats.size == 1
    assert stats.entries[0].etag in {f'"v{n}"' for n in range(1, 6)}


def test_fingerprint_distinguishes_method_auth_and_body() -> None:
    base = compute_fingerprint(HttpMethod.GET, "u", needs_auth=False)

    assert base == "GET_u_NOAUTH"
    assert compute_fingerprint(HttpMethod.GET, "u", needs_auth=True) != base
    assert compute_fingerprint(HttpMethod.POST, "u", needs_auth=False) != base
    assert compute_fingerprint(HttpMethod.POST, "u", needs_auth=False, body=[1]) != (
        compute_fingerprint(HttpMethod.POST, "u", needs_auth=False, body=[2])
    )


def test_conditional_request_flow(tmp_path: Path) -> None:
    """2 回目は If-None-Match を送り、304 ならキャッシュ済みのデータを返す。"""

    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.headers.get("If-None-Match") == '"v1"':
            return httpx.Response(304)
        return httpx.Response(200, json={"players": 21000}, headers={"ETag": '"v1"'})

    cache = RecordingCache()
    pipeline = _pipeline(tmp_path, handler, cache=cache)

    async def scenario():
        first = await pipeline.execute("status")
        stats = pipeline.cache.stats()
        second = await pipeline.execute("status")
        await pipeline.aclose()
        return first, stats, second

    first, stats, second = asyncio.run(scenario())

    assert first.data == {"players": 21000}
    assert first.headers["etag"] == '"v1"'
    assert stats.size == 1
    assert stats.entries[0].etag == '"v1"'
    assert second.data == first.data
    assert cache.store_calls == 1
    assert "If-None-Match" not in seen[0].headers
    assert seen[1].headers["If-None-Match"] == '"v1"'
    assert str(seen[0].url) == (
        "https://esi.evetech.net/latest/status/?datasource=tranquility&language=en-us"
    )
    assert seen[0].headers["User-Agent"] == "esi-client/test"
    assert seen[0].headers["Accept-Language"] == "en/us"


def test_response_without_etag_is_not_cached(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[1, 2, 3])

    pipeline = _pipeline(tmp_path, handler)

    response = asyncio.run(pipeline.execute("alliances"))

    assert response.data == [1, 2, 3]
    assert len(pipeline.cache) == 0


def test_post_sends_body_and_skips_cache(tmp_path: Path) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}], headers={"ETag": '"p"'})

    pipeline = _pipeline(tmp_path, handler)

    asyncio.run(pipeline.execute("universe/names", method="post", body=[1, 2]))

    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == [1, 2]
    assert len(pipeline.cache) == 0


def test_project_name_is_appended_to_user_agent(tmp_path: Path) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    pipeline = _pipeline(tmp_path, handler, projectName="Fleet Tool")

    asyncio.run(pipeline.execute("status"))

    assert seen[0].headers["User-Agent"] == "esi-client/test (for: Fleet Tool)"


def test_auth_required_without_token_sends_nothing(tmp_path: Path) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    pipeline = _pipeline(tmp_path, handler)

    with pytest.raises(AuthRequiredError) as exc_info:
        asyncio.run(pipeline.execute("characters/1/wallet", needs_auth=True))

    assert exc_info.value.code == "NO_AUTH_TOKEN"
    assert calls == []


def test_auth_token_is_sent_and_excluded_from_fingerprint(tmp_path: Path) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=1000.5, headers={"ETag": '"w"'})

    pipeline = _pipeline(tmp_path, handler, authToken="secret-token")

    asyncio.run(pipeline.execute("characters/1/wallet", needs_auth=True))

    assert seen[0].url.params["token"] == "secret-token"
    assert seen[0].headers["Authorization"] == "Bearer secret-token"
    (key,) = pipeline.cache.stats().keys
    assert "secret-token" not in key
    assert key.endswith("_AUTH")


def test_remote_error_carries_status_and_redacted_url(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": "token not valid for scope"})

    pipeline = _pipeline(tmp_path, handler, authToken="secret-token")

    with pytest.raises(RemoteError) as exc_info:
        asyncio.run(pipeline.execute("characters/1/wallet", needs_auth=True))

    error = exc_info.value
    assert error.status_code == 403
    assert error.code == "ESI_ERROR"
    assert str(error) == "token not valid for scope"
    assert error.url is not None
    assert "secret-token" not in error.url


def test_remote_error_without_json_body_uses_reason(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    pipeline = _pipeline(tmp_path, handler)

    with pytest.raises(RemoteError) as exc_info:
        asyncio.run(pipeline.execute("status"))

    assert exc_info.value.status_code == 502
    assert str(exc_info.value) == "Bad Gateway"


def test_transport_error(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    pipeline = _pipeline(tmp_path, handler)

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(pipeline.execute("status"))

    assert exc_info.value.code == "TRANSPORT_ERROR"
    assert "connection refused" in str(exc_info.value)


def test_unknown_method_is_internal_error(tmp_path: Path) -> None:
    pipeline = _pipeline(tmp_path, lambda request: httpx.Response(200))

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(pipeline.execute("status", method="PATCH"))

    assert exc_info.value.code == "ESI_CLIENT_ERROR"


def test_not_modified_without_entry_returns_empty(tmp_path: Path) -> None:
    pipeline = _pipeline(tmp_path, lambda request: httpx.Response(304))

    response = asyncio.run(pipeline.execute("status"))

    assert response.data is None


def test_cleared_cache_forces_full_request(tmp_path: Path) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True}, headers={"ETag": '"e"'})

    pipeline = _pipeline(tmp_path, handler)

    async def scenario():
        await pipeline.execute("status")
        pipeline.cache.clear()
        await pipeline.execute("status")

    asyncio.run(scenario())

    assert "If-None-Match" not in seen[1].headers
