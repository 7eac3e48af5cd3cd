from __future__ import annotations

import json
from typing import Annotated

import typer

from esi_client.core.settings import ESIRoute, SettingsUpdate
from esi_client.infra.esi.settings_store import build_settings_store
from esi_client.shared.exceptions import ESIError
from esi_client.shared.logging import get_logger

app = typer.Typer(help="esi.json の参照と更新")


def _mask(token: str) -> str:
    if not token:
        return ""
    return f"{token[:4]}***" if len(token) > 8 else "***"


@app.command()
def show() -> None:
    """解決済みの設定を表示する (トークンはマスク)。"""

    logger = get_logger("cli.settings.show")
    store = build_settings_store(logger=logger)
    try:
        current = store.get()
    except ESIError as exc:
        logger.error("設定の読み込みに失敗", error=str(exc), code=exc.code)
        typer.echo(f"設定を読み込めませんでした: {exc}")
        raise typer.Exit(code=1) from exc

    record = current.to_record()
    record["authToken"] = _mask(current.auth_token)
    typer.echo(json.dumps(record, ensure_ascii=False, indent=2))


@app.command("set")
def set_(
    route: Annotated[
        ESIRoute | None,
        typer.Option("--route", "-r", case_sensitive=False, help="latest/v1/legacy/dev"),
    ] = None,
    token: Annotated[str | None, typer.Option("--token", "-t", help="認証トークン")] = None,
    language: Annotated[
        str | None, typer.Option("--language", "-l", help="言語タグ (例: en/us)")
    ] = None,
    project_name: Annotated[
        str | None, typer.Option("--project-name", "-p", help="User-Agent に付与する名前")
    ] = None,
) -> None:
    """設定を部分更新する。省略した項目は現在値を保つ。"""

    logger = get_logger("cli.settings.set")
    store = build_settings_store(logger=logger)
    try:
        updated = store.set(
            SettingsUpdate(
                route=route,
                auth_token=token,
                language=language,
                project_name=project_name,
            )
        )
    except ESIError as exc:
        logger.error("設定の更新に失敗", error=str(exc), code=exc.code)
        typer.echo(f"設定を更新できませんでした: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(f"設定を更新しました: {store.config_path}")
    typer.echo(f"link={updated.link} language={updated.language}")
