"""戦争 (War) エンドポイント。"""

from __future__ import annotations

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, require_id, require_page


class WarsEndpoints(EndpointGroup):
    async def war_info(self, war_id: int) -> ESIResponse:
        require_id(war_id, "wars.war_info", "a war ID")
        return await self._request(f"wars/{war_id}")

    async def war_kills(self, war_id: int, page: int = 1) -> ESIResponse:
        require_id(war_id, "wars.war_kills", "a war ID")
        require_page(page, "wars.war_kills")
        return await self._request(f"wars/{war_id}/killmails", query={"page": page})

    async def wars(self, max_war_id: int | None = None) -> ESIResponse:
        """直近の戦争 ID。`max_war_id` 未満に絞り込める。"""

        validate(
            max_war_id,
            ValueKind.NUMBER,
            "The input max_war_id for 'wars.wars' must be a number!",
            optional=True,
        )
        return await self._request("wars", query={"max_war_id": max_war_id})


__all__ = ["WarsEndpoints"]
