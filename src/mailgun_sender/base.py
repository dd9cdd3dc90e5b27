"""Abstract base class for email senders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from mailgun_sender.models import Attachment, OutboundMessage, SendResult


class EmailSender(ABC):
    """Sends transactional email."""

    @property
    def name(self) -> str:
        """Sender name (e.g. 'MailgunEmailSender')."""
        return self.__class__.__name__

    @property
    @abstractmethod
    def default_from(self) -> str:
        """Sender address used when a message does not name one."""
        ...

    @abstractmethod
    async def send_email(self, subject: str | None, text: str | None, to: str) -> SendResult:
        """Send a plain-text email to a single recipient from the default sender.

        Args:
            subject: The email's subject. ``None`` is sent as an empty string.
            text: The email's text body. ``None`` is sent as an empty string.
            to: The recipient's email address.

        Returns:
            The provider's response. Non-2xx statuses are returned, not raised.

        Raises:
            InvalidArgumentError: If ``to`` is empty or not an email address.
        """
        ...

    @abstractmethod
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
        """Send an email with text and HTML bodies, extra recipients and attachments.

        Addressing several recipients directly lets each of them see the
        others' addresses. Prefer one email per recipient, or ``bcc``.

        Args:
            from_: Sender address, raw (``info@example.com``) or with a
                display name (``"Info <info@example.com>"``).
            to: Primary recipient address.
            subject: The email's subject.
            text: Text-only body.
            html: HTML body. Omitted when empty.
            reply_to: Custom ``Reply-To`` address. Omitted when empty.
            additional_recipients: More directly addressed recipients.
            cc: Carbon copy recipients.
            bcc: Blind carbon copy recipients.
            attachments: Files to attach.

        Returns:
            The provider's response. Non-2xx statuses are returned, not raised.
        """
        ...

    async def send(self, message: OutboundMessage) -> SendResult:
        """Send an :class:`OutboundMessage` through the simple or rich path."""
        if not message.is_rich:
            return await self.send_email(message.subject, message.text, message.to)
        return await self.send_rich_email(
            message.from_ or self.default_from,
            message.to,
            subject=message.subject,
            text=message.text,
            html=message.html,
            reply_to=message.reply_to,
            additional_recipients=message.additional_recipients,
            cc=message.cc,
            bcc=message.bcc,
            attachments=message.attachments,
        )

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""

    async def __aenter__(self) -> EmailSender:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
