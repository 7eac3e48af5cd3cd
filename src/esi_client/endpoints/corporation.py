"""コーポレーション関連エンドポイント。"""

from __future__ import annotations

from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id, require_page

_CORPORATION = "a corporation ID"


class CorporationMedals(EndpointGroup):
    async def medals(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.medals.medals", _CORPORATION)
        require_page(page, "corporation.medals.medals")
        return await self._request(
            f"corporations/{corporation_id}/medals", query={"page": page}, needs_auth=True
        )

    async def issued(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.medals.issued", _CORPORATION)
        require_page(page, "corporation.medals.issued")
        return await self._request(
            f"corporations/{corporation_id}/medals/issued",
            query={"page": page},
            needs_auth=True,
        )


class CorporationMembers(EndpointGroup):
    async def members(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.members.members", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}/members", needs_auth=True)

    async def limit(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.members.limit", _CORPORATION)
        return await self._request(
            f"corporations/{corporation_id}/members/limit", needs_auth=True
        )

    async def titles(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.members.titles", _CORPORATION)
        return await self._request(
            f"corporations/{corporation_id}/members/titles", needs_auth=True
        )

    async def tracking(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.members.tracking", _CORPORATION)
        return await self._request(
            f"corporations/{corporation_id}/membertracking", needs_auth=True
        )


class CorporationRoles(EndpointGroup):
    async def roles(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.roles.roles", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}/roles", needs_auth=True)

    async def history(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.roles.history", _CORPORATION)
        require_page(page, "corporation.roles.history")
        return await self._request(
            f"corporations/{corporation_id}/roles/history",
            query={"page": page},
            needs_auth=True,
        )


class CorporationEndpoints(EndpointGroup):
    """`corporations/*`"""

    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.medals = CorporationMedals(pipeline)
        self.members = CorporationMembers(pipeline)
        self.roles = CorporationRoles(pipeline)

    async def alliance_history(self, corporation_id: int) -> ESIResponse:
        """コーポレーションが所属したアライアンスの履歴。"""

        require_id(corporation_id, "corporation.alliance_history", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}/alliancehistory")

    async def icons(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.icons", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}/icons")

    async def info(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.info", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}")

    async def npc_corps(self) -> ESIResponse:
        return await self._request("corporations/npccorps")

    async def blueprints(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.blueprints", _CORPORATION)
        require_page(page, "corporation.blueprints")
        return await self._request(
            f"corporations/{corporation_id}/blueprints", query={"page": page}, needs_auth=True
        )

    async def secure_container_logs(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.secure_container_logs", _CORPORATION)
        require_page(page, "corporation.secure_container_logs")
        return await self._request(
            f"corporations/{corporation_id}/containers/logs",
            query={"page": page},
            needs_auth=True,
        )

    async def divisions(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.divisions", _CORPORATION)
        return await self._request(f"corporations/{corporation_id}/divisions", needs_auth=True)

    async def facilities(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "corporation.facilities", _CORPORATION)
        return await self._request(
            f"corporations/{corporation_id}/facilities", needs_auth=True
        )

    async def standings(self, corporation_id: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "corporation.standings", _CORPORATION)
        require_page(page, "corporation.standings")
        return await self._request(
            f"corporations/{corporation_id}/standings", query={"page": page}, needs_auth=True
        )


__all__ = [
    "CorporationEndpoints",
    "CorporationMedals",
    "CorporationMembers",
    "CorporationRoles",
]
