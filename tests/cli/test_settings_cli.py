from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from esi_client.cli.app import app
from esi_client.shared.config import get_settings


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def config_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    path = tmp_path / "esi.json"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ESI__CONFIG_PATH", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


def _payload(stdout: str) -> dict:
    return json.loads(stdout[stdout.find("{\n") :])


def test_show_masks_token(runner: CliRunner, config_path: Path) -> None:
    config_path.write_text(
        json.dumps(
            {
                "projectName": "Fleet",
                "link": "https://esi.evetech.net/v1/",
                "authToken": "abcdefghijkl",
                "language": "en/us",
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["settings", "show"])

    assert result.exit_code == 0
    payload = _payload(result.stdout)
    assert payload["link"] == "https://esi.evetech.net/v1/"
    assert payload["authToken"] == "abcd***"
    assert "abcdefghijkl" not in result.stdout


def test_show_falls_back_to_bundled_default(runner: CliRunner, config_path: Path) -> None:
    result = runner.invoke(app, ["settings", "show"])

    assert result.exit_code == 0
    assert _payload(result.stdout)["link"] == "https://esi.evetech.net/latest/"


def test_set_updates_file(runner: CliRunner, config_path: Path) -> None:
    result = runner.invoke(
        app, ["settings", "set", "--route", "legacy", "--token", "tok", "-p", "Mining Ops"]
    )

    assert result.exit_code == 0
    assert "設定を更新しました" in result.stdout
    on_disk = json.loads(config_path.read_text(encoding="utf-8"))
    assert on_disk["link"] == "https://esi.evetech.net/legacy/"
    assert on_disk["authToken"] == "tok"
    assert on_disk["projectName"] == "Mining Ops"
    assert on_disk["language"] == "en/us"


def test_set_rejects_unknown_route(runner: CliRunner, config_path: Path) -> None:
    result = runner.invoke(app, ["settings", "set", "--route", "nightly"])

    assert result.exit_code != 0
    assert not config_path.exists()
