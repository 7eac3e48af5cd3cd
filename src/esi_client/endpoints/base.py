"""エンドポイント群の共通基底。"""

from __future__ import annotations

from typing import Any, Protocol

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse, HttpMethod
from esi_client.infra.esi.pipeline import Query


class RequestExecutor(Protocol):
    """エンドポイントから利用するパイプラインのプロトコル。"""

    async def execute(
        self,
        path: str,
        *,
        body: Any = None,
        query: Query | None = None,
        method: HttpMethod | str = HttpMethod.GET,
        needs_auth: bool = False,
    ) -> ESIResponse:
        """リクエストを送り正規化済みレスポンスを返す。"""


class EndpointGroup:
    """パイプラインを明示的に受け取るエンドポイント群。"""

    def __init__(self, pipeline: RequestExecutor) -> None:
        self._pipeline = pipeline

    async def _request(
        self,
        path: str,
        *,
        body: Any = None,
        query: Query | None = None,
        method: HttpMethod = HttpMethod.GET,
        needs_auth: bool = False,
    ) -> ESIResponse:
        return await self._pipeline.execute(
            path, body=body, query=query, method=method, needs_auth=needs_auth
        )


def require_id(value: Any, function: str, what: str) -> None:
    """数値 ID 引数の検証。"""

    validate(value, ValueKind.NUMBER, f"The function '{function}' requires {what}!")


def require_page(value: Any, function: str) -> None:
    validate(value, ValueKind.NUMBER, f"The input page for '{function}' needs to be a number!")


def require_array(value: Any, function: str, what: str) -> None:
    validate(value, ValueKind.STRUCTURED, f"The function '{function}' requires an array of {what}!")


__all__ = [
    "EndpointGroup",
    "RequestExecutor",
    "require_array",
    "require_id",
    "require_page",
]
