"""ウォレット エンドポイント。すべて認証が必要。"""

from __future__ import annotations

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse

from .base import EndpointGroup, RequestExecutor, require_id, require_page


def _optional_from_id(from_id: int | None, function: str) -> None:
    validate(
        from_id,
        ValueKind.NUMBER,
        f"The input from_id for '{function}' must be a number!",
        optional=True,
    )


class CharacterWallet(EndpointGroup):
    async def balance(self, character_id: int) -> ESIResponse:
        require_id(character_id, "wallet.character.balance", "a character ID")
        return await self._request(f"characters/{character_id}/wallet/", needs_auth=True)

    async def journal(self, character_id: int, page: int = 1) -> ESIResponse:
        require_id(character_id, "wallet.character.journal", "a character ID")
        require_page(page, "wallet.character.journal")
        return await self._request(
            f"characters/{character_id}/wallet/journal/", query={"page": page}, needs_auth=True
        )

    async def transactions(self, character_id: int, from_id: int | None = None) -> ESIResponse:
        require_id(character_id, "wallet.character.transactions", "a character ID")
        _optional_from_id(from_id, "wallet.character.transactions")
        return await self._request(
            f"characters/{character_id}/wallet/transactions/",
            query={"from_id": from_id} if from_id is not None else None,
            needs_auth=True,
        )


class CorporationWallet(EndpointGroup):
    async def wallets(self, corporation_id: int) -> ESIResponse:
        require_id(corporation_id, "wallet.corporation.wallets", "a corporation ID")
        return await self._request(f"corporations/{corporation_id}/wallets/", needs_auth=True)

    async def journal(self, corporation_id: int, division: int, page: int = 1) -> ESIResponse:
        require_id(corporation_id, "wallet.corporation.journal", "a corporation ID")
        require_id(division, "wallet.corporation.journal", "a division")
        require_page(page, "wallet.corporation.journal")
        return await self._request(
            f"corporations/{corporation_id}/wallets/{division}/journal/",
            query={"page": page},
            needs_auth=True,
        )

    async def transactions(
        self, corporation_id: int, division: int, from_id: int | None = None
    ) -> ESIResponse:
        require_id(corporation_id, "wallet.corporation.transactions", "a corporation ID")
        require_id(division, "wallet.corporation.transactions", "a division")
        _optional_from_id(from_id, "wallet.corporation.transactions")
        return await self._request(
            f"corporations/{corporation_id}/wallets/{division}/transactions/",
            query={"from_id": from_id} if from_id is not None else None,
            needs_auth=True,
        )


class WalletEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.character = CharacterWallet(pipeline)
        self.corporation = CorporationWallet(pipeline)


__all__ = ["CharacterWallet", "CorporationWallet", "WalletEndpoints"]
