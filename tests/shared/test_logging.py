from __future__ import annotations

import logging

import pytest

from esi_client.shared.logging import _coerce_level, redact_secrets


def test_redact_secrets_masks_token_keys() -> None:
    event = redact_secrets(
        None,
        "info",
        {"event": "x", "token": "abc", "Authorization": "Bearer abc", "auth_token": ""},
    )

    assert event["token"] == "***"
    assert event["Authorization"] == "***"
    assert event["auth_token"] == ""


def test_redact_secrets_masks_token_query() -> None:
    event = redact_secrets(
        None,
        "error",
        {"url": "https://esi.evetech.net/latest/x/?datasource=tranquility&token=abc&page=2"},
    )

    assert event["url"] == (
        "https://esi.evetech.net/latest/x/?datasource=tranquility&token=***&page=2"
    )


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_coerce_level(level, expected: int) -> None:
    assert _coerce_level(level) == expected


def test_coerce_level_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        _coerce_level("loud")
