"""エンドポイント引数の入力検証。"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from enum import Enum
from typing import Any

from esi_client.shared.exceptions import (
    InvalidChoiceError,
    MissingInputError,
    TypeMismatchError,
)


class ValueKind(str, Enum):
    """検証対象として期待するプリミティブ種別。"""

    TEXT = "string"
    NUMBER = "number"
    STRUCTURED = "object"
    BOOLEAN = "boolean"

    def matches(self, value: Any) -> bool:
        # bool は int のサブクラスなので NUMBER からは明示的に除外する
        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is ValueKind.TEXT:
            return isinstance(value, str)
        return isinstance(value, Mapping) or (
            isinstance(value, Sequence) and not isinstance(value, (str, bytes))
        )


def validate(
    value: Any,
    kind: ValueKind,
    message: str,
    options: Collection[Any] | None = None,
    *,
    optional: bool = False,
) -> None:
    """単一の値を検証し、不正なら検証系の例外を送出する。

    `None` だけを「未指定」とみなす。`0`、`False`、`""` は有効な入力であり、
    欠損として扱ってはならない。
    """

    if value is None:
        if optional:
            return
        raise MissingInputError(message)
    if not kind.matches(value):
        raise TypeMismatchError(message)
    if options is not None and value not in options:
        raise InvalidChoiceError(message)


__all__ = ["ValueKind", "validate"]
