"""ゲームクライアントの UI を操作するエンドポイント。すべて認証が必要。"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse, HttpMethod

from .base import EndpointGroup, RequestExecutor, require_id


class Autopilot(EndpointGroup):
    async def waypoint(
        self,
        destination_id: int,
        add_to_beginning: bool = False,
        clear_other_waypoints: bool = False,
    ) -> ESIResponse:
        require_id(destination_id, "ui.autopilot.waypoint", "a destination ID")
        validate(
            add_to_beginning,
            ValueKind.BOOLEAN,
            "The input add_to_beginning for 'ui.autopilot.waypoint' must be a boolean!",
        )
        validate(
            clear_other_waypoints,
            ValueKind.BOOLEAN,
            "The input clear_other_waypoints for 'ui.autopilot.waypoint' must be a boolean!",
        )
        return await self._request(
            "ui/autopilot/waypoint",
            method=HttpMethod.POST,
            query={
                "add_to_beginning": add_to_beginning,
                "clear_other_waypoints": clear_other_waypoints,
                "destination_id": destination_id,
            },
            needs_auth=True,
        )


class OpenWindow(EndpointGroup):
    async def contract(self, contract_id: int) -> ESIResponse:
        require_id(contract_id, "ui.open_window.contract", "a contract ID")
        return await self._request(
            "ui/openwindow/contract",
            method=HttpMethod.POST,
            query={"contract_id": contract_id},
            needs_auth=True,
        )

    async def information(self, target_id: int) -> ESIResponse:
        require_id(target_id, "ui.open_window.information", "a target ID")
        return await self._request(
            "ui/openwindow/information",
            method=HttpMethod.POST,
            query={"target_id": target_id},
            needs_auth=True,
        )

    async def market_details(self, type_id: int) -> ESIResponse:
        require_id(type_id, "ui.open_window.market_details", "a type ID")
        return await self._request(
            "ui/openwindow/marketdetails",
            method=HttpMethod.POST,
            query={"type_id": type_id},
            needs_auth=True,
        )

    async def new_mail(self, mail: Mapping[str, Any]) -> ESIResponse:
        validate(
            mail,
            ValueKind.STRUCTURED,
            "The function 'ui.open_window.new_mail' requires a mail object!",
        )
        return await self._request(
            "ui/openwindow/newmail",
            method=HttpMethod.POST,
            body=dict(mail),
            needs_auth=True,
        )


class UserInterfaceEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.autopilot = Autopilot(pipeline)
        self.open_window = OpenWindow(pipeline)


__all__ = ["Autopilot", "OpenWindow", "UserInterfaceEndpoints"]
