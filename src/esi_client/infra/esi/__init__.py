"""ESI API 向け infra 層パッケージ。"""

from .cache import ETagCache
from .dto import CacheEntry, CacheEntryStats, CacheStats, ESIResponse, HttpMethod
from .pipeline import (
    DATASOURCE,
    ESIRequestPipeline,
    PreparedRequest,
    Query,
    build_pipeline,
    build_url,
    compute_fingerprint,
    normalize_query,
)
from .settings_store import BUNDLED_DEFAULT_CONFIG, SettingsStore, build_settings_store

__all__ = [
    "BUNDLED_DEFAULT_CONFIG",
    "CacheEntry",
    "CacheEntryStats",
    "CacheStats",
    "DATASOURCE",
    "ESIRequestPipeline",
    "ESIResponse",
    "ETagCache",
    "HttpMethod",
    "PreparedRequest",
    "Query",
    "SettingsStore",
    "build_pipeline",
    "build_settings_store",
    "build_url",
    "compute_fingerprint",
    "normalize_query",
]
