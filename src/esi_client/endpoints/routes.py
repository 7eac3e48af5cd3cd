"""航路計画エンドポイント。"""

from __future__ import annotations

from collections.abc import Sequence

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, require_array, require_id

ROUTE_FLAGS = ("shortest", "secure", "insecure")


class RoutesEndpoints(EndpointGroup):
    async def plan_route(
        self,
        origin: int,
        destination: int,
        flag: str = "secure",
        avoid: Sequence[int] = (),
    ) -> ESIResponse:
        """出発地から目的地までのソーラーシステム ID 列を取得する。"""

        require_id(origin, "routes.plan_route", "an origin")
        require_id(destination, "routes.plan_route", "a destination")
        validate(
            flag,
            ValueKind.TEXT,
            "The input flag for 'routes.plan_route' must be 'shortest', 'secure' or 'insecure'!",
            ROUTE_FLAGS,
        )
        require_array(avoid, "routes.plan_route", "system IDs to avoid")
        return await self._request(
            f"route/{origin}/{destination}",
            query={"avoid": list(avoid) or None, "flag": flag},
        )


__all__ = ["ROUTE_FLAGS", "RoutesEndpoints"]
