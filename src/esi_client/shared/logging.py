"""構造化ロギングのセットアップとヘルパー。"""

from __future__ import annotations

import logging
import re
from collections.abc import MutableMapping
from typing import Any

import structlog

DEFAULT_LOG_LEVEL = "INFO"
LOGGER_NAMESPACE = "esi_client"

_SECRET_KEYS = frozenset({"token", "auth_token", "authorization", "access_token"})
_TOKEN_QUERY = re.compile(r"([?&]token=)[^&]*")


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    normalized = level.upper()
    mapping = logging.getLevelNamesMapping()
    if normalized in mapping:
        return mapping[normalized]
    msg = f"Unsupported log level: {level}"
    raise ValueError(msg)


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """トークン類をログ出力前にマスクする structlog プロセッサ。"""

    for key, value in list(event_dict.items()):
        if key.lower() in _SECRET_KEYS and value:
            event_dict[key] = "***"
        elif isinstance(value, str) and "token=" in value:
            event_dict[key] = _TOKEN_QUERY.sub(r"\1***", value)
    return event_dict


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL, *, json_output: bool = False) -> None:
    """structlog を用いたロギング設定を行う。

    Args:
        level: 文字列または数値で表現したログレベル。
        json_output: True の場合 JSON 形式で出力する。
    """

    log_level = _coerce_level(level)
    logging.basicConfig(level=log_level, format="%(message)s")

    processors: list[structlog.types.Processor] = [
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.add_log_level,
        redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """共有ロガーを取得し、必要に応じて初期バインド値を設定。"""

    logger = structlog.stdlib.get_logger(name or LOGGER_NAMESPACE)
    if initial_values:
        return logger.bind(**initial_values)
    return logger


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOGGER_NAMESPACE",
    "configure_logging",
    "get_logger",
    "redact_secrets",
]
