"""全ドメインのエンドポイントを束ねるクライアント。"""

from __future__ import annotations

import httpx

from esi_client.endpoints import (
    AllianceEndpoints,
    CharacterEndpoints,
    ContractsEndpoints,
    CorporationEndpoints,
    DogmaEndpoints,
    FactionWarfareEndpoints,
    IncursionsEndpoints,
    IndustryEndpoints,
    InsuranceEndpoints,
    KillmailsEndpoints,
    LocationEndpoints,
    LoyaltyEndpoints,
    MailEndpoints,
    MarketEndpoints,
    OpportunitiesEndpoints,
    PlanetaryInteractionEndpoints,
    RoutesEndpoints,
    SkillsEndpoints,
    SovereigntyEndpoints,
    StatusEndpoints,
    UniverseEndpoints,
    UserInterfaceEndpoints,
    UtilityFunctions,
    WalletEndpoints,
    WarsEndpoints,
)
from esi_client.infra.esi.cache import ETagCache
from esi_client.infra.esi.pipeline import ESIRequestPipeline, build_pipeline
from esi_client.infra.esi.settings_store import SettingsStore
from esi_client.shared.config import AppSettings


class ESIClient:
    """ESI クライアント。

    各ドメインはパイプラインを明示的に受け取る。キャッシュはパイプラインが所有し、
    クライアントごとに独立している。

        async with build_esi_client() as client:
            response = await client.character.assets.locations(90000001, [1, 2])
    """

    def __init__(self, pipeline: ESIRequestPipeline) -> None:
        self.pipeline = pipeline
        self.alliance = AllianceEndpoints(pipeline)
        self.character = CharacterEndpoints(pipeline)
        self.contracts = ContractsEndpoints(pipeline)
        self.corporation = CorporationEndpoints(pipeline)
        self.dogma = DogmaEndpoints(pipeline)
        self.fw = FactionWarfareEndpoints(pipeline)
        self.incursions = IncursionsEndpoints(pipeline)
        self.industry = IndustryEndpoints(pipeline)
        self.insurance = InsuranceEndpoints(pipeline)
        self.killmails = KillmailsEndpoints(pipeline)
        self.location = LocationEndpoints(pipeline)
        self.loyalty = LoyaltyEndpoints(pipeline)
        self.mail = MailEndpoints(pipeline)
        self.market = MarketEndpoints(pipeline)
        self.opportunities = OpportunitiesEndpoints(pipeline)
        self.pi = PlanetaryInteractionEndpoints(pipeline)
        self.routes = RoutesEndpoints(pipeline)
        self.skills = SkillsEndpoints(pipeline)
        self.sov = SovereigntyEndpoints(pipeline)
        self.status = StatusEndpoints(pipeline)
        self.universe = UniverseEndpoints(pipeline)
        self.ui = UserInterfaceEndpoints(pipeline)
        self.wallet = WalletEndpoints(pipeline)
        self.wars = WarsEndpoints(pipeline)
        self.util = UtilityFunctions(settings_store=pipeline.settings_store, cache=pipeline.cache)

    async def aclose(self) -> None:
        await self.pipeline.aclose()

    async def __aenter__(self) -> ESIClient:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()


def build_esi_client(
    *,
    settings: AppSettings | None = None,
    settings_store: SettingsStore | None = None,
    cache: ETagCache | None = None,
    http_client: httpx.AsyncClient | None = None,
    token: str | None = None,
    bootstrap_config: bool = False,
    logger=None,
) -> ESIClient:
    """共有設定から ESI クライアントを構築するファクトリ。

    `bootstrap_config` を指定すると設定ファイルが無い場合に同梱デフォルトから作成する。
    `token` を渡すと設定ファイルへ保存してから利用する。
    """

    pipeline = build_pipeline(
        settings=settings,
        settings_store=settings_store,
        cache=cache,
        http_client=http_client,
        logger=logger,
    )
    if bootstrap_config:
        pipeline.settings_store.bootstrap()
    client = ESIClient(pipeline)
    if token:
        client.util.set_settings(auth_token=token)
    return client


__all__ = ["ESIClient", "build_esi_client"]
