from __future__ import annotations

import typer

from esi_client.cli.commands import api, settings
from esi_client.shared.config import get_settings
from esi_client.shared.logging import configure_logging

app = typer.Typer(help="EVE Swagger Interface クライアントの CLI")

app.add_typer(settings.app, name="settings", help="esi.json の参照と更新")
app.command("status")(api.status)
app.command("get")(api.get)


def main() -> None:
    """エントリポイント。"""

    configure_logging(get_settings().log_level)
    app()


if __name__ == "__main__":  # pragma: no cover - CLI エントリ
    main()
