"""ユニバース (静的データ・星図) エンドポイント。"""

from __future__ import annotations

from collections.abc import Sequence

from esi_client.infra.esi.dto import ESIResponse, HttpMethod

from .base import EndpointGroup, RequestExecutor, require_array, require_id, require_page


class Ancestries(EndpointGroup):
    async def ancestries(self) -> ESIResponse:
        return await self._request("universe/ancestries")


class Belts(EndpointGroup):
    async def belt_info(self, belt_id: int) -> ESIResponse:
        require_id(belt_id, "universe.belts.belt_info", "a belt ID")
        return await self._request(f"universe/asteroid_belts/{belt_id}")


class Bloodlines(EndpointGroup):
    async def bloodlines(self) -> ESIResponse:
        return await self._request("universe/bloodlines")


class Bulk(EndpointGroup):
    async def ids_to_names(self, ids: Sequence[int]) -> ESIResponse:
        """ID 群を名前とカテゴリに解決する。"""

        require_array(ids, "universe.bulk.ids_to_names", "IDs")
        return await self._request("universe/names", method=HttpMethod.POST, body=list(ids))

    async def names_to_ids(self, names: Sequence[str]) -> ESIResponse:
        """名前 (完全一致) を ID に解決する。"""

        require_array(names, "universe.bulk.names_to_ids", "names")
        return await self._request("universe/ids", method=HttpMethod.POST, body=list(names))


class Categories(EndpointGroup):
    async def categories(self) -> ESIResponse:
        return await self._request("universe/categories")

    async def category_info(self, category_id: int) -> ESIResponse:
        require_id(category_id, "universe.categories.category_info", "a category ID")
        return await self._request(f"universe/categories/{category_id}")


class Constellations(EndpointGroup):
    async def constellation_info(self, constellation_id: int) -> ESIResponse:
        require_id(
            constellation_id, "universe.constellations.constellation_info", "a constellation ID"
        )
        return await self._request(f"universe/constellations/{constellation_id}")

    async def constellations(self) -> ESIResponse:
        return await self._request("universe/constellations")


class Factions(EndpointGroup):
    async def factions(self) -> ESIResponse:
        return await self._request("universe/factions")


class Graphics(EndpointGroup):
    async def graphic_info(self, graphic_id: int) -> ESIResponse:
        require_id(graphic_id, "universe.graphics.graphic_info", "a graphic ID")
        return await self._request(f"universe/graphics/{graphic_id}")

    async def graphics(self) -> ESIResponse:
        return await self._request("universe/graphics")


class Groups(EndpointGroup):
    async def group_info(self, group_id: int) -> ESIResponse:
        require_id(group_id, "universe.groups.group_info", "a group ID")
        return await self._request(f"universe/groups/{group_id}")

    async def groups(self, page: int = 1) -> ESIResponse:
        require_page(page, "universe.groups.groups")
        return await self._request("universe/groups", query={"page": page})


class Moons(EndpointGroup):
    async def moon_info(self, moon_id: int) -> ESIResponse:
        require_id(moon_id, "universe.moons.moon_info", "a moon ID")
        return await self._request(f"universe/moons/{moon_id}")


class Planets(EndpointGroup):
    async def planet_info(self, planet_id: int) -> ESIResponse:
        require_id(planet_id, "universe.planets.planet_info", "a planet ID")
        return await self._request(f"universe/planets/{planet_id}")


class Races(EndpointGroup):
    async def races(self) -> ESIResponse:
        return await self._request("universe/races")


class Regions(EndpointGroup):
    async def region_info(self, region_id: int) -> ESIResponse:
        require_id(region_id, "universe.regions.region_info", "a region ID")
        return await self._request(f"universe/regions/{region_id}")

    async def regions(self) -> ESIResponse:
        return await self._request("universe/regions")


class Stargates(EndpointGroup):
    async def stargate_info(self, stargate_id: int) -> ESIResponse:
        require_id(stargate_id, "universe.stargates.stargate_info", "a stargate ID")
        return await self._request(f"universe/stargates/{stargate_id}")


class Stars(EndpointGroup):
    async def star_info(self, star_id: int) -> ESIResponse:
        require_id(star_id, "universe.stars.star_info", "a star ID")
        return await self._request(f"universe/stars/{star_id}")


class Stations(EndpointGroup):
    async def station_info(self, station_id: int) -> ESIResponse:
        require_id(station_id, "universe.stations.station_info", "a station ID")
        return await self._request(f"universe/stations/{station_id}")


class Structures(EndpointGroup):
    async def structures(self) -> ESIResponse:
        """公開されているプレイヤーストラクチャの ID 一覧。"""

        return await self._request("universe/structures")

    async def structure_info(self, structure_id: int) -> ESIResponse:
        require_id(structure_id, "universe.structures.structure_info", "a structure ID")
        return await self._request(f"universe/structures/{structure_id}", needs_auth=True)


class Systems(EndpointGroup):
    async def system_info(self, system_id: int) -> ESIResponse:
        require_id(system_id, "universe.systems.system_info", "a system ID")
        return await self._request(f"universe/systems/{system_id}")

    async def system_jumps(self) -> ESIResponse:
        return await self._request("universe/system_jumps")

    async def system_kills(self) -> ESIResponse:
        return await self._request("universe/system_kills")

    async def systems(self) -> ESIResponse:
        return await self._request("universe/systems")


class Types(EndpointGroup):
    async def type_info(self, type_id: int) -> ESIResponse:
        require_id(type_id, "universe.types.type_info", "a type ID")
        return await self._request(f"universe/types/{type_id}")

    async def types(self, page: int = 1) -> ESIResponse:
        require_page(page, "universe.types.types")
        return await self._request("universe/types", query={"page": page})


class UniverseEndpoints(EndpointGroup):
    """`universe/*` のサブグループを束ねる。"""

    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.ancestries = Ancestries(pipeline)
        self.belts = Belts(pipeline)
        self.bloodlines = Bloodlines(pipeline)
        self.bulk = Bulk(pipeline)
        self.categories = Categories(pipeline)
        self.constellations = Constellations(pipeline)
        self.factions = Factions(pipeline)
        self.graphics = Graphics(pipeline)
        self.groups = Groups(pipeline)
        self.moons = Moons(pipeline)
        self.planets = Planets(pipeline)
        self.races = Races(pipeline)
        self.regions = Regions(pipeline)
        self.stargates = Stargates(pipeline)
        self.stars = Stars(pipeline)
        self.stations = Stations(pipeline)
        self.structures = Structures(pipeline)
        self.systems = Systems(pipeline)
        self.types = Types(pipeline)


__all__ = ["UniverseEndpoints"]
