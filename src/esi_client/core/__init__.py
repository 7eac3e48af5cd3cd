"""ドメインロジック層: 入力検証と設定レコード。"""

from .settings import (
    DEFAULT_LANGUAGE,
    DEFAULT_ROUTE,
    ESIRoute,
    ESISettings,
    SettingsUpdate,
    merge_settings,
)
from .validation import ValueKind, validate

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_ROUTE",
    "ESIRoute",
    "ESISettings",
    "SettingsUpdate",
    "ValueKind",
    "merge_settings",
    "validate",
]
