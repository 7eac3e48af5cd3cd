"""引数をほとんど取らない小さなドメイン群。"""

from __future__ import annotations

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, require_id


class IncursionsEndpoints(EndpointGroup):
    async def incursions(self) -> ESIResponse:
        return await self._request("incursions")


class IndustryEndpoints(EndpointGroup):
    async def facilities(self) -> ESIResponse:
        return await self._request("industry/facilities")

    async def systems(self) -> ESIResponse:
        """ソーラーシステムごとのインダストリーコスト指数。"""

        return await self._request("industry/systems")


class InsuranceEndpoints(EndpointGroup):
    async def prices(self) -> ESIResponse:
        return await self._request("insurance/prices")


class KillmailsEndpoints(EndpointGroup):
    async def killmail_info(self, kill_id: int, kill_hash: str) -> ESIResponse:
        require_id(kill_id, "killmails.killmail_info", "a kill ID")
        validate(
            kill_hash,
            ValueKind.TEXT,
            "The function 'killmails.killmail_info' requires a kill hash!",
        )
        return await self._request(f"killmails/{kill_id}/{kill_hash}")


class LocationEndpoints(EndpointGroup):
    async def location(self, character_id: int) -> ESIResponse:
        require_id(character_id, "location.location", "a character ID")
        return await self._request(f"characters/{character_id}/location/", needs_auth=True)

    async def ship(self, character_id: int) -> ESIResponse:
        require_id(character_id, "location.ship", "a character ID")
        return await self._request(f"characters/{character_id}/ship/", needs_auth=True)

    async def online(self, character_id: int) -> ESIResponse:
        require_id(character_id, "location.online", "a character ID")
        return await self._request(f"characters/{character_id}/online/", needs_auth=True)


class LoyaltyEndpoints(EndpointGroup):
    async def offers(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "loyalty.offers", "a corporation ID")
        return await self._request(f"loyalty/stores/{corporation_id}/offers")


class OpportunitiesEndpoints(EndpointGroup):
    async def group_info(self, group_id: int) -> ESIResponse:
        require_id(group_id, "opportunities.group_info", "a group ID")
        return await self._request(f"opportunities/groups/{group_id}")

    async def groups(self) -> ESIResponse:
        return await self._request("opportunities/groups")

    async def task_info(self, task_id: int) -> ESIResponse:
        require_id(task_id, "opportunities.task_info", "a task ID")
        return await self._request(f"opportunities/tasks/{task_id}")

    async def tasks(self) -> ESIResponse:
        return await self._request("opportunities/tasks")


class PlanetaryInteractionEndpoints(EndpointGroup):
    async def schematic_info(self, schematic_id: int) -> ESIResponse:
        require_id(schematic_id, "pi.schematic_info", "a schematic ID")
        return await self._request(f"universe/schematics/{schematic_id}")


class SkillsEndpoints(EndpointGroup):
    async def skills(self, character_id: int) -> ESIResponse:
        require_id(character_id, "skills.skills", "a character ID")
        return await self._request(f"characters/{character_id}/skills/", needs_auth=True)

    async def queue(self, character_id: int) -> ESIResponse:
        require_id(character_id, "skills.queue", "a character ID")
        return await self._request(f"characters/{character_id}/skillqueue/", needs_auth=True)

    async def attributes(self, character_id: int) -> ESIResponse:
        require_id(character_id, "skills.attributes", "a character ID")
        return await self._request(f"characters/{character_id}/attributes/", needs_auth=True)


class SovereigntyEndpoints(EndpointGroup):
    async def campaigns(self) -> ESIResponse:
        return await self._request("sovereignty/campaigns")

    async def map(self) -> ESIResponse:
        return await self._request("sovereignty/map")

    async def structures(self) -> ESIResponse:
        return await self._request("sovereignty/structures")


class StatusEndpoints(EndpointGroup):
    async def status(self) -> ESIResponse:
        """EVE サーバーの稼働状況。"""

        return await self._request("status")


__all__ = [
    "IncursionsEndpoints",
    "IndustryEndpoints",
    "InsuranceEndpoints",
    "KillmailsEndpoints",
    "LocationEndpoints",
    "LoyaltyEndpoints",
    "OpportunitiesEndpoints",
    "PlanetaryInteractionEndpoints",
    "SkillsEndpoints",
    "SovereigntyEndpoints",
    "StatusEndpoints",
]
