"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, ESIClientSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError, ESIError
from .logging import configure_logging, get_logger, redact_secrets
from .types import DTO, JSONValue, utc_now

__all__ = [
    "AppSettings",
    "ESIClientSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "redact_secrets",
    "BaseAppError",
    "ConfigurationError",
    "ESIError",
    "DTO",
    "JSONValue",
    "utc_now",
]
