"""公開契約エンドポイント。"""

from __future__ import annotations

from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id, require_page


class PublicContracts(EndpointGroup):
    async def bids(self, contract_id: int, page: int = 1) -> ESIResponse:
        require_id(contract_id, "contracts.public.bids", "a contract ID")
        require_page(page, "contracts.public.bids")
        return await self._request(f"contracts/public/bids/{contract_id}", query={"page": page})

    async def contracts(self, region_id: int, page: int = 1) -> ESIResponse:
        require_id(region_id, "contracts.public.contracts", "a region ID")
        require_page(page, "contracts.public.contracts")
        return await self._request(f"contracts/public/{region_id}", query={"page": page})

    async def items(self, contract_id: int, page: int = 1) -> ESIResponse:
        require_id(contract_id, "contracts.public.items", "a contract ID")
        require_page(page, "contracts.public.items")
        return await self._request(f"contracts/public/items/{contract_id}", query={"page": page})


class ContractsEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.public = PublicContracts(pipeline)


__all__ = ["ContractsEndpoints", "PublicContracts"]
