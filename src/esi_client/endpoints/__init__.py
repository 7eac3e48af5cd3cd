"""ドメインごとのエンドポイント群。"""

from .alliance import AllianceEndpoints
from .base import EndpointGroup, RequestExecutor
from .character import CharacterEndpoints
from .contracts import ContractsEndpoints
from .corporation import CorporationEndpoints
from .dogma import DogmaEndpoints
from .faction_warfare import FactionWarfareEndpoints
from .mail import MailEndpoints
from .market import MarketEndpoints
from .misc import (
    IncursionsEndpoints,
    IndustryEndpoints,
    InsuranceEndpoints,
    KillmailsEndpoints,
    LocationEndpoints,
    LoyaltyEndpoints,
    OpportunitiesEndpoints,
    PlanetaryInteractionEndpoints,
    SkillsEndpoints,
    SovereigntyEndpoints,
    StatusEndpoints,
)
from .routes import RoutesEndpoints
from .universe import UniverseEndpoints
from .user_interface import UserInterfaceEndpoints
from .utility import UtilityFunctions
from .wallet import WalletEndpoints
from .wars import WarsEndpoints

__all__ = [
    "AllianceEndpoints",
    "CharacterEndpoints",
    "ContractsEndpoints",
    "CorporationEndpoints",
    "DogmaEndpoints",
    "EndpointGroup",
    "FactionWarfareEndpoints",
    "IncursionsEndpoints",
    "IndustryEndpoints",
    "InsuranceEndpoints",
    "KillmailsEndpoints",
    "LocationEndpoints",
    "LoyaltyEndpoints",
    "MailEndpoints",
    "MarketEndpoints",
    "OpportunitiesEndpoints",
    "PlanetaryInteractionEndpoints",
    "RequestExecutor",
    "RoutesEndpoints",
    "SkillsEndpoints",
    "SovereigntyEndpoints",
    "StatusEndpoints",
    "UniverseEndpoints",
    "UserInterfaceEndpoints",
    "UtilityFunctions",
    "WalletEndpoints",
    "WarsEndpoints",
]
