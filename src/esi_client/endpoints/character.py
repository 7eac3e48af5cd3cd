"""キャラクター関連エンドポイント。

`needs_auth=True` のものは対応する ESI スコープを持つトークンが必要。
"""

from __future__ import annotations

from collections.abc import Sequence

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse, HttpMethod

from .base import EndpointGroup, RequestExecutor, require_array, require_id, require_page

_CHARACTER = "a character ID"


class CharacterAssets(EndpointGroup):
    async def assets(self, character_id: int, page: int = 1) -> ESIResponse:
        require_id(character_id, "character.assets.assets", _CHARACTER)
        require_page(page, "character.assets.assets")
        return await self._request(
            f"characters/{character_id}/assets", query={"page": page}, needs_auth=True
        )

    async def locations(self, character_id: int, item_ids: Sequence[int] = ()) -> ESIResponse:
        """アイテムの座標を取得する。"""

        require_id(character_id, "character.assets.locations", _CHARACTER)
        require_array(item_ids, "character.assets.locations", "item IDs")
        return await self._request(
            f"characters/{character_id}/assets/locations",
            method=HttpMethod.POST,
            body=list(item_ids),
            needs_auth=True,
        )

    async def names(self, character_id: int, item_ids: Sequence[int]) -> ESIResponse:
        require_id(character_id, "character.assets.names", _CHARACTER)
        require_array(item_ids, "character.assets.names", "item IDs")
        return await self._request(
            f"characters/{character_id}/assets/names",
            method=HttpMethod.POST,
            body=list(item_ids),
            needs_auth=True,
        )


class CharacterBookmarks(EndpointGroup):
    async def bookmarks(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.bookmarks.bookmarks", _CHARACTER)
        return await self._request(f"characters/{character_id}/bookmarks", needs_auth=True)

    async def folders(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.bookmarks.folders", _CHARACTER)
        return await self._request(
            f"characters/{character_id}/bookmarks/folders", needs_auth=True
        )


class CharacterCalendar(EndpointGroup):
    RESPONSES = ("accepted", "declined", "tentative")

    async def calendar(self, character_id: int, from_event: int | None = None) -> ESIResponse:
        """直近 50 件のイベント。`from_event` 以降に絞り込める。"""

        require_id(character_id, "character.calendar.calendar", _CHARACTER)
        validate(
            from_event,
            ValueKind.NUMBER,
            "The parameter 'from_event' in 'character.calendar.calendar' must be an event ID!",
            optional=True,
        )
        return await self._request(
            f"characters/{character_id}/calendar",
            query={"from_event": from_event},
            needs_auth=True,
        )

    async def get_event(self, character_id: int, event_id: int) -> ESIResponse:
        require_id(character_id, "character.calendar.get_event", _CHARACTER)
        require_id(event_id, "character.calendar.get_event", "an event ID")
        return await self._request(
            f"characters/{character_id}/calendar/{event_id}", needs_auth=True
        )

    async def respond(
        self, character_id: int, event_id: int, response: str = "accepted"
    ) -> ESIResponse:
        require_id(character_id, "character.calendar.respond", _CHARACTER)
        require_id(event_id, "character.calendar.respond", "an event ID")
        validate(
            response,
            ValueKind.TEXT,
            "The response for 'character.calendar.respond' must be "
            "'accepted', 'declined' or 'tentative'!",
            self.RESPONSES,
        )
        return await self._request(
            f"characters/{character_id}/calendar/{event_id}",
            method=HttpMethod.PUT,
            body={"response": response},
            needs_auth=True,
        )

    async def get_attendees(self, character_id: int, event_id: int) -> ESIResponse:
        require_id(character_id, "character.calendar.get_attendees", _CHARACTER)
        require_id(event_id, "character.calendar.get_attendees", "an event ID")
        return await self._request(
            f"characters/{character_id}/calendar/{event_id}/attendees", needs_auth=True
        )


class CharacterClones(EndpointGroup):
    async def clones(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.clones.clones", _CHARACTER)
        return await self._request(f"characters/{character_id}/clones", needs_auth=True)

    async def implants(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.clones.implants", _CHARACTER)
        return await self._request(f"characters/{character_id}/implants", needs_auth=True)


class CharacterContacts(EndpointGroup):
    async def contacts(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.contacts.contacts", _CHARACTER)
        return await self._request(f"characters/{character_id}/contacts", needs_auth=True)

    async def add_contacts(
        self, character_id: int, contacts: Sequence[int], standing: float = 0.0
    ) -> ESIResponse:
        require_id(character_id, "character.contacts.add_contacts", _CHARACTER)
        require_array(contacts, "character.contacts.add_contacts", "one or more contact IDs")
        validate(standing, ValueKind.NUMBER, "The standing for new contacts must be a number!")
        return await self._request(
            f"characters/{character_id}/contacts",
            method=HttpMethod.POST,
            query={"standing": standing},
            body=list(contacts),
            needs_auth=True,
        )

    async def delete_contacts(self, character_id: int, contacts: Sequence[int]) -> ESIResponse:
        require_id(character_id, "character.contacts.delete_contacts", _CHARACTER)
        require_array(contacts, "character.contacts.delete_contacts", "one or more contact IDs")
        return await self._request(
            f"characters/{character_id}/contacts",
            method=HttpMethod.DELETE,
            query={"contact_ids": list(contacts)},
            needs_auth=True,
        )

    async def edit_contacts(
        self, character_id: int, contacts: Sequence[int], standing: float = 0.0
    ) -> ESIResponse:
        require_id(character_id, "character.contacts.edit_contacts", _CHARACTER)
        require_array(contacts, "character.contacts.edit_contacts", "one or more contact IDs")
        validate(standing, ValueKind.NUMBER, "The standing for edited contacts must be a number!")
        return await self._request(
            f"characters/{character_id}/contacts",
            method=HttpMethod.PUT,
            query={"standing": standing},
            body=list(contacts),
            needs_auth=True,
        )


class CharacterContracts(EndpointGroup):
    async def contracts(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.contracts.contracts", _CHARACTER)
        return await self._request(f"/characters/{character_id}/contracts/", needs_auth=True)

    async def bids(self, character_id: int, contract_id: int) -> ESIResponse:
        require_id(character_id, "character.contracts.bids", _CHARACTER)
        require_id(contract_id, "character.contracts.bids", "a contract ID")
        return await self._request(
            f"/characters/{character_id}/contracts/{contract_id}/bids", needs_auth=True
        )

    async def items(self, character_id: int, contract_id: int) -> ESIResponse:
        require_id(character_id, "character.contracts.items", _CHARACTER)
        require_id(contract_id, "character.contracts.items", "a contract ID")
        return await self._request(
            f"/characters/{character_id}/contracts/{contract_id}/items", needs_auth=True
        )


class CharacterIndustry(EndpointGroup):
    async def jobs(self, character_id: int, include_completed: bool = False) -> ESIResponse:
        require_id(character_id, "character.industry.jobs", _CHARACTER)
        validate(
            include_completed,
            ValueKind.BOOLEAN,
            "The input include_completed for 'character.industry.jobs' must be a boolean!",
        )
        return await self._request(
            f"characters/{character_id}/industry/jobs",
            query={"include_completed": include_completed},
            needs_auth=True,
        )

    async def ledger(self, character_id: int, page: int = 1) -> ESIResponse:
        """採掘レジャー (直近 30 日)。"""

        require_id(character_id, "character.industry.ledger", _CHARACTER)
        require_page(page, "character.industry.ledger")
        return await self._request(
            f"characters/{character_id}/mining", query={"page": page}, needs_auth=True
        )


class CharacterEndpoints(EndpointGroup):
    """`characters/*`"""

    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.assets = CharacterAssets(pipeline)
        self.bookmarks = CharacterBookmarks(pipeline)
        self.calendar = CharacterCalendar(pipeline)
        self.clones = CharacterClones(pipeline)
        self.contacts = CharacterContacts(pipeline)
        self.contracts = CharacterContracts(pipeline)
        self.industry = CharacterIndustry(pipeline)

    async def affiliation(self, character_ids: Sequence[int]) -> ESIResponse:
        """キャラクター ID 群から所属コーポレーション・アライアンス・派閥を一括取得する。

        全 ID が存在しない場合は何も返らない。
        """

        require_array(character_ids, "character.affiliation", "character IDs")
        return await self._request(
            "characters/affiliation", method=HttpMethod.POST, body=list(character_ids)
        )

    async def corp_history(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.corp_history", _CHARACTER)
        return await self._request(f"characters/{character_id}/corporationhistory")

    async def portrait(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.portrait", _CHARACTER)
        return await self._request(f"characters/{character_id}/portrait")

    async def info(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.info", _CHARACTER)
        return await self._request(f"characters/{character_id}")

    async def agents_research(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.agents_research", _CHARACTER)
        return await self._request(
            f"characters/{character_id}/agents_research", needs_auth=True
        )

    async def blueprints(self, character_id: int, page: int = 1) -> ESIResponse:
        require_id(character_id, "character.blueprints", _CHARACTER)
        require_page(page, "character.blueprints")
        return await self._request(
            f"characters/{character_id}/blueprints", query={"page": page}, needs_auth=True
        )

    async def cspa(self, character_id: int, characters: Sequence[int] = ()) -> ESIResponse:
        """CSPA (CONCORD Spam Prevention Act) の課金額を計算する。"""

        require_id(character_id, "character.cspa", _CHARACTER)
        require_array(characters, "character.cspa", "character IDs")
        return await self._request(
            f"characters/{character_id}/cspa",
            method=HttpMethod.POST,
            body=list(characters),
            needs_auth=True,
        )

    async def fatigue(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.fatigue", _CHARACTER)
        return await self._request(f"characters/{character_id}/fatigue", needs_auth=True)

    async def medals(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.medals", _CHARACTER)
        return await self._request(f"characters/{character_id}/medals", needs_auth=True)

    async def notifications(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.notifications", _CHARACTER)
        return await self._request(
            f"characters/{character_id}/notifications", needs_auth=True
        )

    async def roles(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.roles", _CHARACTER)
        return await self._request(f"characters/{character_id}/roles", needs_auth=True)

    async def standings(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.standings", _CHARACTER)
        return await self._request(f"characters/{character_id}/standings", needs_auth=True)

    async def stats(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.stats", _CHARACTER)
        return await self._request(f"characters/{character_id}/stats", needs_auth=True)

    async def titles(self, character_id: int) -> ESIResponse:
        require_id(character_id, "character.titles", _CHARACTER)
        return await self._request(f"characters/{character_id}/titles", needs_auth=True)


__all__ = [
    "CharacterAssets",
    "CharacterBookmarks",
    "CharacterCalendar",
    "CharacterClones",
    "CharacterContacts",
    "CharacterContracts",
    "CharacterEndpoints",
    "CharacterIndustry",
]
