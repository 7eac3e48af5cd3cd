from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from esi_client.client import ESIClient, build_esi_client
from esi_client.infra.esi.dto import ESIResponse
from esi_client.shared.exceptions import AuthRequiredError, ESIError, ValidationFailure
from esi_client.shared.logging import get_logger


class OutputFormat(str, Enum):
    """出力形式。"""

    TABLE = "table"
    JSON = "json"


def _parse_query(pairs: Sequence[str]) -> dict[str, str]:
    query: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"クエリは key=value 形式で指定してください: {pair}"
            raise typer.BadParameter(msg)
        query[key] = value
    return query


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return "-" if value is None else str(value)


def _render_table(title: str, data: Any) -> None:
    console = Console(force_terminal=False, color_system=None)
    table = Table(title=title)
    if isinstance(data, dict):
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(str(key), _format_value(value))
    elif isinstance(data, list) and data and all(isinstance(item, dict) for item in data):
        columns = list(dict.fromkeys(key for item in data for key in item))
        for column in columns:
            table.add_column(column)
        for item in data:
            table.add_row(*(_format_value(item.get(column)) for column in columns))
    else:
        table.add_column("Value")
        for item in data if isinstance(data, list) else [data]:
            table.add_row(_format_value(item))
    console.print(table)


def _render(title: str, response: ESIResponse, output: OutputFormat) -> None:
    if output is OutputFormat.JSON:
        typer.echo(json.dumps(response.data, ensure_ascii=False, indent=2))
    else:
        _render_table(title, response.data)


async def _call(action: Callable[[ESIClient], Awaitable[ESIResponse]]) -> ESIResponse:
    async with build_esi_client() as client:
        return await action(client)


def _run(
    logger,
    title: str,
    action: Callable[[ESIClient], Awaitable[ESIResponse]],
    output: OutputFormat,
) -> None:
    try:
        response = asyncio.run(_call(action))
    except (AuthRequiredError, ValidationFailure) as exc:
        logger.warning("ESI 呼び出しの前提を満たしていません", error=str(exc), code=exc.code)
        typer.echo(f"実行できません: {exc}")
        raise typer.Exit(code=2) from exc
    except ESIError as exc:
        logger.error("ESI 呼び出しに失敗", error=str(exc), code=exc.code, url=exc.url)
        typer.echo(f"ESI 呼び出しに失敗しました: {exc}")
        raise typer.Exit(code=1) from exc

    _render(title, response, output)


def status(
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Tranquility サーバーの稼働状況を表示する。"""

    logger = get_logger("cli.esi.status")
    _run(logger, "ESI Status", lambda client: client.status.status(), output)


def get(
    path: Annotated[str, typer.Argument(help="ESI のパス (例: universe/types/587)")],
    query: Annotated[
        list[str] | None,
        typer.Option("--query", "-q", help="key=value 形式のクエリ。複数指定可"),
    ] = None,
    auth: Annotated[bool, typer.Option("--auth", help="認証トークンを付与する")] = False,
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """任意のパスへ GET リクエストを送る。"""

    logger = get_logger("cli.esi.get", path=path)
    parsed = _parse_query(query or [])
    _run(
        logger,
        path,
        lambda client: client.pipeline.execute(path, query=parsed or None, needs_auth=auth),
        output,
    )
