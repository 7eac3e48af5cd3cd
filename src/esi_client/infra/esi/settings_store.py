"""`esi.json` を読み書きする設定ストア。

永続化された設定に触れるのはこのモジュールだけ。
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from esi_client.core.settings import ESISettings, SettingsUpdate, merge_settings
from esi_client.shared.config import AppSettings, get_settings
from esi_client.shared.exceptions import ConfigUnavailableError, PersistFailureError
from esi_client.shared.logging import get_logger

BUNDLED_DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "data" / "esi.json"


class SettingsStore:
    """主設定ファイルと同梱デフォルトから設定を解決する。

    初回の `get()` で読み込み、以降はメモリ上の値を返す。
    変更は `set()` によるファイル全体の置き換えのみ。
    """

    def __init__(
        self,
        *,
        config_path: Path,
        fallback_path: Path | None = None,
        logger=None,
    ) -> None:
        self._config_path = Path(config_path)
        self._fallback_path = Path(fallback_path) if fallback_path else BUNDLED_DEFAULT_CONFIG
        self._logger = logger or get_logger(__name__)
        self._current: ESISettings | None = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self) -> ESISettings:
        if self._current is None:
            self._current = self._resolve()
        return self._current

    def reload(self) -> ESISettings:
        self._current = None
        return self.get()

    def set(self, update: SettingsUpdate) -> ESISettings:
        """部分更新をマージして主設定ファイルへ書き戻す。

        チャンネルが不正なら `InvalidChannelError` を送出し、ファイルは変更しない。
        """

        try:
            current: ESISettings | None = self._read(self._config_path)
        except (OSError, ValueError):
            current = None
        if current is None:
            try:
                current = self._read(self._fallback_path)
            except (OSError, ValueError):
                current = None

        merged = merge_settings(current, update)
        self._write(merged)
        self._current = merged
        self._logger.info(
            "esi_settings_updated",
            path=str(self._config_path),
            link=merged.link,
            language=merged.language,
            project_name=merged.project_name,
            has_token=merged.has_token,
        )
        return merged

    def bootstrap(self) -> bool:
        """主設定ファイルが無ければ同梱デフォルトから作成する。

        作成した場合は True。書き込めなければ `PersistFailureError`。
        """

        if self._config_path.exists():
            return False
        try:
            defaults = self._read(self._fallback_path)
        except (OSError, ValueError) as exc:
            msg = f"Default configuration at {self._fallback_path} is unreadable"
            raise ConfigUnavailableError(msg) from exc
        self._write(defaults)
        self._logger.info("esi_settings_bootstrapped", path=str(self._config_path))
        return True

    def _resolve(self) -> ESISettings:
        try:
            return self._read(self._config_path)
        except (OSError, ValueError) as exc:
            self._logger.warning(
                "esi_settings_fallback",
                path=str(self._config_path),
                fallback=str(self._fallback_path),
                error=str(exc),
            )
        try:
            return self._read(self._fallback_path)
        except (OSError, ValueError) as exc:
            msg = (
                f"Neither {self._config_path} nor {self._fallback_path} "
                "contains a readable ESI configuration"
            )
            raise ConfigUnavailableError(msg) from exc

    @staticmethod
    def _read(path: Path) -> ESISettings:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            msg = f"{path} must contain a JSON object"
            raise ValueError(msg)
        try:
            return ESISettings.model_validate(raw)
        except ValidationError as exc:
            raise ValueError(str(exc)) from exc

    def _write(self, settings: ESISettings) -> None:
        payload = json.dumps(settings.to_record(), ensure_ascii=False, indent=2) + "\n"
        directory = self._config_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._config_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._config_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            msg = f"Couldn't write config file {self._config_path}: {exc}"
            raise PersistFailureError(msg) from exc


def build_settings_store(*, settings: AppSettings | None = None, logger=None) -> SettingsStore:
    """共有設定から設定ストアを構築するファクトリ。"""

    app_settings = settings or get_settings()
    return SettingsStore(
        config_path=app_settings.esi.config_path,
        fallback_path=app_settings.esi.fallback_config_path,
        logger=logger,
    )


__all__ = ["BUNDLED_DEFAULT_CONFIG", "SettingsStore", "build_settings_store"]
