"""共通例外。"""

from __future__ import annotations


class BaseAppError(Exception):
    """全レイヤで共有するベース例外。"""

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(BaseAppError):
    """設定読み込みや不足を示すエラー。"""

    default_message = "Configuration is invalid or missing"


class ESIError(BaseAppError):
    """ESI クライアントが送出する例外の基底。

    `code` は機械判定用の識別子、`url` はトークンを除去したリクエスト先。
    """

    default_message = "ESI client error"
    default_code = "NO_CODE_DEFINED"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.url = url


class ValidationFailure(ESIError):
    """入力検証レイヤの失敗。"""

    default_message = "Invalid input"


class MissingInputError(ValidationFailure):
    default_code = "INPUT_UNDEFINED"


class TypeMismatchError(ValidationFailure):
    default_code = "INPUT_NOT_EQUAL_TO_REQUIRED_TYPE"


class InvalidChoiceError(ValidationFailure):
    default_code = "GIVEN_OPTION_NOT_VALID_OPTION"


class ConfigUnavailableError(ESIError):
    """永続設定・同梱デフォルトのどちらも読めない。"""

    default_message = "ESI configuration could not be read"
    default_code = "CONFIG_UNAVAILABLE"


class InvalidChannelError(ESIError):
    """未知のリリースチャンネルが指定された。"""

    default_message = "Unknown ESI route"
    default_code = "INVALID_ROUTE"


class PersistFailureError(ESIError):
    """設定ファイルへの書き込みに失敗した。"""

    default_message = "Could not write ESI configuration"
    default_code = "CONFIG_WRITE_FAILED"


class AuthRequiredError(ESIError):
    """認証が必要なエンドポイントでトークンが未設定。"""

    default_message = "This endpoint requires an auth token"
    default_code = "NO_AUTH_TOKEN"


class RemoteError(ESIError):
    """ESI が非成功ステータスを返した。"""

    default_message = "ESI returned an error"
    default_code = "ESI_ERROR"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        code: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, code=code, url=url)
        self.status_code = status_code


class TransportError(ESIError):
    """レスポンスを受け取れなかった (ネットワーク障害・タイムアウト)。"""

    default_message = "ESI request could not be completed"
    default_code = "TRANSPORT_ERROR"


class InternalError(ESIError):
    """エンドポイント定義の不備。利用者側の条件ではない。"""

    default_message = "Endpoint function not configured properly"
    default_code = "ESI_CLIENT_ERROR"


__all__ = [
    "AuthRequiredError",
    "BaseAppError",
    "ConfigUnavailableError",
    "ConfigurationError",
    "ESIError",
    "InternalError",
    "InvalidChannelError",
    "InvalidChoiceError",
    "MissingInputError",
    "PersistFailureError",
    "RemoteError",
    "TransportError",
    "TypeMismatchError",
    "ValidationFailure",
]
