from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from esi_client.client import ESIClient
from esi_client.endpoints import (
    CharacterEndpoints,
    MailEndpoints,
    MarketEndpoints,
    RoutesEndpoints,
    UniverseEndpoints,
    UserInterfaceEndpoints,
    WarsEndpoints,
)
from esi_client.infra.esi.dto import ESIResponse, HttpMethod
from esi_client.shared.exceptions import (
    InvalidChoiceError,
    MissingInputError,
    TypeMismatchError,
)


@dataclass
class RecordedCall:
    path: str
    body: Any
    query: Any
    method: HttpMethod
    needs_auth: bool


@dataclass
class StubExecutor:
    calls: list[RecordedCall] = field(default_factory=list)

    async def execute(
        self,
        path: str,
        *,
        body: Any = None,
        query: Any = None,
        method: HttpMethod | str = HttpMethod.GET,
        needs_auth: bool = False,
    ) -> ESIResponse:
        self.calls.append(RecordedCall(path, body, query, method, needs_auth))
        return ESIResponse(data={"path": path})

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture()
def executor() -> StubExecutor:
    return StubExecutor()


def test_character_public_info(executor: StubExecutor) -> None:
    response = asyncio.run(CharacterEndpoints(executor).info(95465499))

    assert response.data == {"path": "characters/95465499"}
    assert executor.last.method is HttpMethod.GET
    assert executor.last.needs_auth is False


def test_character_asset_locations_posts_ids(executor: StubExecutor) -> None:
    asyncio.run(CharacterEndpoints(executor).assets.locations(1, [10, 20]))

    call = executor.last
    assert call.path == "characters/1/assets/locations"
    assert call.method is HttpMethod.POST
    assert call.body == [10, 20]
    assert call.needs_auth is True


def test_character_contacts_send_their_data(executor: StubExecutor) -> None:
    contacts = CharacterEndpoints(executor).contacts

    asyncio.run(contacts.add_contacts(1, [5, 6], standing=5.0))
    added = executor.last
    asyncio.run(contacts.delete_contacts(1, [5]))
    deleted = executor.last

    assert added.method is HttpMethod.POST
    assert added.body == [5, 6]
    assert added.query == {"standing": 5.0}
    assert deleted.method is HttpMethod.DELETE
    assert deleted.query == {"contact_ids": [5]}


def test_calendar_respond_uses_put(executor: StubExecutor) -> None:
    asyncio.run(CharacterEndpoints(executor).calendar.respond(1, 2, "tentative"))

    assert executor.last.method is HttpMethod.PUT
    assert executor.last.body == {"response": "tentative"}
    assert executor.last.path == "characters/1/calendar/2"


def test_calendar_respond_rejects_unknown_answer(executor: StubExecutor) -> None:
    with pytest.raises(InvalidChoiceError):
        asyncio.run(CharacterEndpoints(executor).calendar.respond(1, 2, "maybe"))

    assert executor.calls == []


def test_industry_ledger_sends_page(executor: StubExecutor) -> None:
    asyncio.run(CharacterEndpoints(executor).industry.ledger(1, page=3))

    assert executor.last.path == "characters/1/mining"
    assert executor.last.query == {"page": 3}


def test_industry_jobs_accepts_false(executor: StubExecutor) -> None:
    asyncio.run(CharacterEndpoints(executor).industry.jobs(1, include_completed=False))

    assert executor.last.query == {"include_completed": False}


def test_missing_id_is_rejected_before_request(executor: StubExecutor) -> None:
    with pytest.raises(MissingInputError) as exc_info:
        asyncio.run(CharacterEndpoints(executor).portrait(None))  # type: ignore[arg-type]

    assert str(exc_info.value) == "The function 'character.portrait' requires a character ID!"
    assert executor.calls == []


def test_id_type_is_checked(executor: StubExecutor) -> None:
    with pytest.raises(TypeMismatchError):
        asyncio.run(CharacterEndpoints(executor).info("95465499"))  # type: ignore[arg-type]


def test_market_orders(executor: StubExecutor) -> None:
    asyncio.run(MarketEndpoints(executor).orders(10000002, order_type="sell", page=2))

    assert executor.last.path == "markets/10000002/orders"
    assert executor.last.query == {"order_type": "sell", "page": 2, "type_id": None}


def test_market_orders_rejects_unknown_order_type(executor: StubExecutor) -> None:
    with pytest.raises(InvalidChoiceError):
        asyncio.run(MarketEndpoints(executor).orders(10000002, order_type="both"))


def test_plan_route(executor: StubExecutor) -> None:
    asyncio.run(RoutesEndpoints(executor).plan_route(30000142, 30002187, "shortest", [30000144]))

    assert executor.last.path == "route/30000142/30002187"
    assert executor.last.query == {"avoid": [30000144], "flag": "shortest"}


def test_plan_route_without_avoid(executor: StubExecutor) -> None:
    asyncio.run(RoutesEndpoints(executor).plan_route(1, 2))

    assert executor.last.query == {"avoid": None, "flag": "secure"}


def test_mail_headers_optional_query(executor: StubExecutor) -> None:
    mail = MailEndpoints(executor)

    asyncio.run(mail.headers(1))
    assert executor.last.query is None

    asyncio.run(mail.headers(1, labels=[1, 3], last_mail_id=0))
    assert executor.last.query == {"labels": [1, 3], "last_mail_id": 0}


def test_universe_bulk_names(executor: StubExecutor) -> None:
    asyncio.run(UniverseEndpoints(executor).bulk.names_to_ids(["Jita", "Amarr"]))

    assert executor.last.path == "universe/ids"
    assert executor.last.method is HttpMethod.POST
    assert executor.last.body == ["Jita", "Amarr"]
    assert executor.last.needs_auth is False


def test_ui_waypoint_is_authenticated_post(executor: StubExecutor) -> None:
    asyncio.run(UserInterfaceEndpoints(executor).autopilot.waypoint(30000142, True))

    call = executor.last
    assert call.method is HttpMethod.POST
    assert call.needs_auth is True
    assert call.query == {
        "add_to_beginning": True,
        "clear_other_waypoints": False,
        "destination_id": 30000142,
    }


def test_wars_optional_max_war_id(executor: StubExecutor) -> None:
    asyncio.run(WarsEndpoints(executor).wars())

    assert executor.last.path == "wars"
    assert executor.last.query == {"max_war_id": None}


def test_client_exposes_all_domains() -> None:
    class StubPipeline(StubExecutor):
        settings_store = None
        cache = None

    client = ESIClient(StubPipeline())  # type: ignore[arg-type]

    for name in (
        "alliance",
        "character",
        "contracts",
        "corporation",
        "dogma",
        "fw",
        "incursions",
        "industry",
        "insurance",
        "killmails",
        "location",
        "loyalty",
        "mail",
        "market",
        "opportunities",
        "pi",
        "routes",
        "skills",
        "sov",
        "status",
        "universe",
        "ui",
        "wallet",
        "wars",
        "util",
    ):
        assert hasattr(client, name)
