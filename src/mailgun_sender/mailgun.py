"""Mailgun email sender, sending email via the Mailgun messages API."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import httpx

from mailgun_sender.base import EmailSender
from mailgun_sender.config import (
    MailgunConfig,
    MailgunRegion,
    validate_recipient,
    validate_settings,
)
from mailgun_sender.models import Attachment, SendResult
from mailgun_sender.wire import build_multipart_parts, build_text_form

logger = logging.getLogger("mailgun_sender.mailgun")


class MailgunEmailSender(EmailSender):
    """Email sender using the Mailgun ``/v3/{domain}/messages`` endpoint.

    The sender owns the ``httpx.AsyncClient`` it creates and closes it in
    :meth:`close`. A client passed in through ``client`` stays owned by the
    caller and is never closed here.

    Example::

        async with MailgunEmailSender("key-...", "mg.example.com", "info@example.com") as sender:
            result = await sender.send_email("Hi", "Body", "a@b.com")
            if not result.success:
                ...
    """

    def __init__(
        self,
        api_key: str,
        domain: str,
        default_from: str,
        region: MailgunRegion = MailgunRegion.US,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        validate_settings(api_key, domain, default_from).raise_for_error()
        config = MailgunConfig(
            api_key=api_key,
            domain=domain,
            default_from=default_from,
            region=region,
            timeout=timeout,
        )
        self._config = config
        self._auth = httpx.BasicAuth("api", api_key)
        self._owns_client = client is None
        self._client: httpx.AsyncClient | None = client
        if client is None:
            self._client = httpx.AsyncClient(
                base_url=config.base_url,
                auth=self._auth,
                timeout=config.timeout,
            )

    @classmethod
    def from_config(
        cls,
        config: MailgunConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> MailgunEmailSender:
        return cls(
            config.api_key.get_secret_value(),
            config.domain,
            config.default_from,
            config.region,
            timeout=config.timeout,
            client=client,
        )

    @property
    def config(self) -> MailgunConfig:
        return self._config

    @property
    def default_from(self) -> str:
        return self._config.default_from

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("MailgunEmailSender is closed")
        return self._client

    async def send_email(self, subject: str | None, text: str | None, to: str) -> SendResult:
        validate_recipient(to).raise_for_error()
        client = self._require_client()
        data = build_text_form(self._config.default_from, to, subject, text)
        logger.debug("POST %s (form, to=%s)", self._config.endpoint, to)
        resp = await client.post(self._config.messages_url, data=data, auth=self._auth)
        return self._result(resp)

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
        client = self._require_client()
        parts = build_multipart_parts(
            from_,
            to,
            subject=subject,
            text=text,
            html=html,
            reply_to=reply_to,
            additional_recipients=additional_recipients,
            cc=cc,
            bcc=bcc,
            attachments=attachments,
        )
        logger.debug("POST %s (multipart, %d parts)", self._config.endpoint, len(parts))
        resp = await client.post(self._config.messages_url, files=parts, auth=self._auth)
        return self._result(resp)

    def _result(self, resp: httpx.Response) -> SendResult:
        result = SendResult.from_response(resp)
        if result.success:
            logger.info(
                "Mailgun accepted message (status=%d, id=%s)",
                result.status_code,
                result.provider_message_id,
            )
        else:
            logger.warning("Mailgun returned status %d: %s", result.status_code, result.body)
        return result

    async def close(self) -> None:
        client, self._client = self._client, None
        if client is not None and self._owns_client:
            await client.aclose()
