"""Dogma (属性・効果) エンドポイント。"""

from __future__ import annotations

from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, require_id


class DogmaEndpoints(EndpointGroup):
    async def attr_info(self, attribute_id: int) -> ESIResponse:
        require_id(attribute_id, "dogma.attr_info", "an attribute ID")
        return await self._request(f"dogma/attributes/{attribute_id}")

    async def attrs(self) -> ESIResponse:
        return await self._request("dogma/attributes")

    async def dynamic_item_info(self, item_id: int, type_id: int) -> ESIResponse:
        """変異モジュールなど動的アイテムの情報。"""

        require_id(item_id, "dogma.dynamic_item_info", "an item ID")
        require_id(type_id, "dogma.dynamic_item_info", "a type ID")
        return await self._request(f"dogma/dynamic/items/{type_id}/{item_id}")

    async def effect_info(self, effect_id: int) -> ESIResponse:
        require_id(effect_id, "dogma.effect_info", "an effect ID")
        return await self._request(f"dogma/effects/{effect_id}")

    async def effects(self) -> ESIResponse:
        return await self._request("dogma/effects")


__all__ = ["DogmaEndpoints"]
