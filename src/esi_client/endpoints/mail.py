"""EVE メール エンドポイント。すべて認証が必要。"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from esi_client.core.validation import ValueKind, validate
from esi_client.infra.esi.dto import ESIResponse, HttpMethod

from .base import EndpointGroup, RequestExecutor, require_id

_CHARACTER = "a character ID"


class MailLabels(EndpointGroup):
    async def labels(self, character_id: int) -> ESIResponse:
        require_id(character_id, "mail.labels.labels", _CHARACTER)
        return await self._request(
            f"characters/{character_id}/mail/labels/", needs_auth=True
        )

    async def create_label(self, character_id: int, label: Mapping[str, Any]) -> ESIResponse:
        """`{"name": ..., "color": "#ffffff"}` 形式のラベルを作成する。"""

        require_id(character_id, "mail.labels.create_label", _CHARACTER)
        validate(
            label,
            ValueKind.STRUCTURED,
            "The function 'mail.labels.create_label' requires a label object!",
        )
        return await self._request(
            f"characters/{character_id}/mail/labels/",
            method=HttpMethod.POST,
            body=dict(label),
            needs_auth=True,
        )

    async def delete_label(self, character_id: int, label_id: int) -> ESIResponse:
        require_id(character_id, "mail.labels.delete_label", _CHARACTER)
        require_id(label_id, "mail.labels.delete_label", "a label ID")
        return await self._request(
            f"characters/{character_id}/mail/labels/{label_id}/",
            method=HttpMethod.DELETE,
            needs_auth=True,
        )


class MailLists(EndpointGroup):
    async def lists(self, character_id: int) -> ESIResponse:
        require_id(character_id, "mail.lists.lists", _CHARACTER)
        return await self._request(f"characters/{character_id}/mail/lists/", needs_auth=True)


class MailEndpoints(EndpointGroup):
    def __init__(self, pipeline: RequestExecutor) -> None:
        super().__init__(pipeline)
        self.labels = MailLabels(pipeline)
        self.lists = MailLists(pipeline)

    async def headers(
        self,
        character_id: int,
        labels: Sequence[int] | None = None,
        last_mail_id: int | None = None,
    ) -> ESIResponse:
        """受信メールのヘッダ一覧 (最大 50 件)。"""

        require_id(character_id, "mail.headers", _CHARACTER)
        validate(
            labels,
            ValueKind.STRUCTURED,
            "The labels for 'mail.headers' must be an array of label IDs!",
            optional=True,
        )
        validate(
            last_mail_id,
            ValueKind.NUMBER,
            "The last_mail_id for 'mail.headers' must be a number!",
            optional=True,
        )
        query: dict[str, Any] = {}
        if labels is not None:
            query["labels"] = list(labels)
        if last_mail_id is not None:
            query["last_mail_id"] = last_mail_id
        return await self._request(
            f"characters/{character_id}/mail/", query=query or None, needs_auth=True
        )

    async def send(self, character_id: int, mail: Mapping[str, Any]) -> ESIResponse:
        """メールを送信する。

        `mail` は `subject`、`body`、`recipients` (`recipient_id` と `recipient_type`) を持つ。
        """

        require_id(character_id, "mail.send", _CHARACTER)
        validate(mail, ValueKind.STRUCTURED, "The function 'mail.send' requires a mail object!")
        return await self._request(
            f"characters/{character_id}/mail/",
            method=HttpMethod.POST,
            body=dict(mail),
            needs_auth=True,
        )

    async def delete_mail(self, character_id: int, mail_id: int) -> ESIResponse:
        require_id(character_id, "mail.delete_mail", _CHARACTER)
        require_id(mail_id, "mail.delete_mail", "a mail ID")
        return await self._request(
            f"characters/{character_id}/mail/{mail_id}/",
            method=HttpMethod.DELETE,
            needs_auth=True,
        )

    async def mail(self, character_id: int, mail_id: int) -> ESIResponse:
        require_id(character_id, "mail.mail", _CHARACTER)
        require_id(mail_id, "mail.mail", "a mail ID")
        return await self._request(
            f"characters/{character_id}/mail/{mail_id}/", needs_auth=True
        )

    async def update_metadata(
        self, character_id: int, mail_id: int, metadata: Mapping[str, Any]
    ) -> ESIResponse:
        require_id(character_id, "mail.update_metadata", _CHARACTER)
        require_id(mail_id, "mail.update_metadata", "a mail ID")
        validate(
            metadata,
            ValueKind.STRUCTURED,
            "The function 'mail.update_metadata' requires a metadata object!",
        )
        return await self._request(
            f"characters/{character_id}/mail/{mail_id}/",
            method=HttpMethod.PUT,
            body=dict(metadata),
            needs_auth=True,
        )


__all__ = ["MailEndpoints", "MailLabels", "MailLists"]
