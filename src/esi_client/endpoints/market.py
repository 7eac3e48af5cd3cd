"""マーケット エンドポイント。"""

from __future__ import annotations

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id, require_page

ORDER_TYPES = ("all", "sell", "buy")


class MarketGroups(EndpointGroup):
    async def group_info(self, group_id: int) -> ESIResponse:
        require_id(group_id, "market.groups.group_info", "a group ID")
        return await self._request(f"markets/groups/{group_id}")

    async def groups(self) -> ESIResponse:
        return await self._request("markets/groups")


class MarketEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.groups = MarketGroups(pipeline)

    async def history(self, region_id: int, type_id: int) -> ESIResponse:
        """リージョン内のタイプ別の日次統計。"""

        require_id(region_id, "market.history", "a region ID")
        require_id(type_id, "market.history", "a type ID")
        return await self._request(f"markets/{region_id}/history", query={"type_id": type_id})

    async def orders(
        self,
        region_id: int,
        type_id: int | None = None,
        order_type: str = "all",
        page: int = 1,
    ) -> ESIResponse:
        require_id(region_id, "market.orders", "a region ID")
        require_page(page, "market.orders")
        validate(
            order_type,
            ValueKind.TEXT,
            "The function 'market.orders' order_type input must be 'all', 'sell', or 'buy'!",
            ORDER_TYPES,
        )
        validate(
            type_id,
            ValueKind.NUMBER,
            "The function 'market.orders' type ID must be a number!",
            optional=True,
        )
        return await self._request(
            f"markets/{region_id}/orders",
            query={"order_type": order_type, "page": page, "type_id": type_id},
        )

    async def prices(self) -> ESIResponse:
        return await self._request("markets/prices")

    async def types(self, region_id: int, page: int = 1) -> ESIResponse:
        """リージョンで注文が出ているタイプ ID の一覧。"""

        require_id(region_id, "market.types", "a region ID")
        require_page(page, "market.types")
        return await self._request(f"markets/{region_id}/types", query={"page": page})


__all__ = ["MarketEndpoints", "MarketGroups", "ORDER_TYPES"]
