"""Mock email sender for testing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any
from uuid import uuid4

from mailgun_sender.base import EmailSender
from mailgun_sender.config import validate_recipient
from mailgun_sender.models import Attachment, SendResult


class MockEmailSender(EmailSender):
    """Records sent emails for verification in tests."""

    def __init__(self, default_from: str = "noreply@example.com") -> None:
        self._default_from = default_from
        self.sent: list[dict[str, Any]] = []
        self.closed = False

    @property
    def default_from(self) -> str:
        return self._default_from

    async def send_email(self, subject: str | None, text: str | None, to: str) -> SendResult:
        validate_recipient(to).raise_for_error()
        self.sent.append(
            {
                "kind": "text",
                "from": self._default_from,
                "to": to,
                "subject": subject or "",
                "text": text or "",
            }
        )
        return self._accepted()

    async def send_rich_email(
        self,
        from_: str,
        to: str,
        subject: str | None = None,
        text: str | None = None,
        html: str | None = None,
        reply_to: str | None = None,
        additional_recipients: Sequence[str] | None = None,
        cc: Sequence[str] | None = None,
        bcc: Sequence[str] | None = None,
        attachments: Iterable[Attachment] | None = None,
    ) -> SendResult:
        self.sent.append(
            {
                "kind": "rich",
                "from": from_,
                "to": to,
                "subject": subject or "",
                "text": text or "",
                "html": html,
                "reply_to": reply_to,
                "additional_recipients": list(additional_recipients or []),
                "cc": list(cc or []),
                "bcc": list(bcc or []),
                "attachments": list(attachments or []),
            }
        )
        return self._accepted()

    @staticmethod
    def _accepted() -> SendResult:
        message_id = f"<{uuid4().hex}@mock>"
        return SendResult(
            status_code=200,
            success=True,
            body=f'{{"id": "{message_id}", "message": "Queued. Thank you."}}',
            provider_message_id=message_id,
        )

    async def close(self) -> None:
        self.closed = True
