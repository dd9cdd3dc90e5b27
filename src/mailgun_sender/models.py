"""Message, attachment and result models."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    """An email attachment.

    Attributes:
        name: The attachment's name. Not sent on the wire; every attachment
            part is submitted under the ``attachment`` field.
        file_name: File name shown to the recipient.
        file: Raw file bytes.
        content_type: Optional MIME type. Ignored when it does not parse as
            a media type.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    file_name: str
    file: bytes
    content_type: str | None = None


class OutboundMessage(BaseModel):
    """An email to send, as accepted by :meth:`EmailSender.send`."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str | None = Field(default=None, alias="from")
    to: str
    subject: str = ""
    text: str = ""
    html: str | None = None
    reply_to: str | None = None
    additional_recipients: list[str] = Field(default_factory=list)
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)

    @property
    def is_rich(self) -> bool:
        """Whether the message needs the multipart send path."""
        return bool(
            self.from_
            or self.html
            or self.reply_to
            or self.additional_recipients
            or self.cc
            or self.bcc
            or self.attachments
        )


class SendResult(BaseModel):
    """Outcome of a single send call.

    Provider-reported failures (non-2xx statuses) are carried here with
    ``success=False`` rather than raised; the caller decides what a given
    status means.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int
    success: bool
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    provider_message_id: str | None = None
    error: str | None = None
    response: httpx.Response | None = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_response(cls, resp: httpx.Response) -> SendResult:
        success = resp.is_success
        body = resp.text
        return cls(
            status_code=resp.status_code,
            success=success,
            body=body,
            headers=dict(resp.headers),
            provider_message_id=_message_id(resp) if success else None,
            error=None if success else body,
            response=resp,
        )


def _message_id(resp: httpx.Response) -> str | None:
    try:
        data: Any = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message_id = data.get("id")
        return str(message_id) if message_id is not None else None
    return None
