"""ファクションウォーフェア エンドポイント。"""

from __future__ import annotations

from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id


class FWLeaderboards(EndpointGroup):
    async def characters(self) -> ESIResponse:
        return await self._request("fw/leaderboards/characters")

    async def corps(self) -> ESIResponse:
        return await self._request("fw/leaderboards/corporations")

    async def leaderboard(self) -> ESIResponse:
        return await self._request("fw/leaderboards")


class FWStats(EndpointGroup):
    async def stats(self) -> ESIResponse:
        return await self._request("fw/stats")

    async def character_stats(self, character_id: int) -> ESIResponse:
        require_id(character_id, "fw.stats.character_stats", "a character ID")
        return await self._request(f"characters/{character_id}/fw/stats", needs_auth=True)

    async def corporation_stats(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "fw.stats.corporation_stats", "a corporation ID")
        return await self._request(f"corporations/{corporation_id}/fw/stats", needs_auth=True)


class FactionWarfareEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.leaderboards = FWLeaderboards(pipeline)
        self.stats = FWStats(pipeline)

    async def systems(self) -> ESIResponse:
        return await self._request("fw/systems")

    async def wars(self) -> ESIResponse:
        return await self._request("fw/wars")


__all__ = ["FWLeaderboards", "FWStats", "FactionWarfareEndpoints"]
