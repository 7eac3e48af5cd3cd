"""アライアンス関連エンドポイント。"""

from __future__ import annotations

from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id


class AllianceContacts(EndpointGroup):
    async def contacts(self, alliance_id: int) -> ESIResponse:
        require_id(alliance_id, "alliance.contacts.contacts", "an alliance ID")
        return await self._request(f"alliances/{alliance_id}/contacts", needs_auth=True)

    async def labels(self, alliance_id: int) -> ESIResponse:
        require_id(alliance_id, "alliance.contacts.labels", "an alliance ID")
        return await self._request(f"alliances/{alliance_id}/contacts/labels", needs_auth=True)


class AllianceEndpoints(EndpointGroup):
    """`alliances/*`"""

    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.contacts = AllianceContacts(pipeline)

    async def alliances(self) -> ESIResponse:
        """活動中の全アライアンス ID を取得する。"""

        return await self._request("alliances")

    async def corps(self, alliance_id: int) -> ESIResponse:
        require_id(alliance_id, "alliance.corps", "an alliance ID")
        return await self._request(f"alliances/{alliance_id}/corporations")

    async def icon(self, alliance_id: int) -> ESIResponse:
        require_id(alliance_id, "alliance.icon", "an alliance ID")
        return await self._request(f"alliances/{alliance_id}/icons")

    async def info(self, alliance_id: int) -> ESIResponse:
        require_id(alliance_id, "alliance.info", "an alliance ID")
        return await self._request(f"alliances/{alliance_id}")


__all__ = ["AllianceContacts", "AllianceEndpoints"]
