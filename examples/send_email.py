"""Mailgun example — send a text email and a rich email with an attachment.

Run with:
    MAILGUN_API_KEY=... MAILGUN_DOMAIN=mg.example.com uv run python examples/send_email.py
"""

from __future__ import annotations

import asyncio
import logging
import os

from mailgun_sender import Attachment, MailgunEmailSender, MailgunRegion


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # --- Configuration -------------------------------------------------------
    api_key = os.environ.get("MAILGUN_API_KEY", "")
    domain = os.environ.get("MAILGUN_DOMAIN", "")
    if not api_key or not domain:
        print("Set MAILGUN_API_KEY and MAILGUN_DOMAIN to run this example.")
        return
    region = MailgunRegion(os.environ.get("MAILGUN_REGION", "us"))
    recipient = os.environ.get("MAILGUN_TO", "recipient@example.com")

    async with MailgunEmailSender(
        api_key,
        domain,
        f"Demo <noreply@{domain}>",
        region,
    ) as sender:
        # --- Simple send -----------------------------------------------------
        result = await sender.send_email("Hello", "Sent with mailgun-sender.", recipient)
        print(f"text: status={result.status_code} id={result.provider_message_id}")

        # --- Rich send -------------------------------------------------------
        result = await sender.send_rich_email(
            f"Demo <noreply@{domain}>",
            recipient,
            subject="Hello again",
            text="Plain-text fallback.",
            html="<h1>Hello again</h1><p>See the attached notes.</p>",
            attachments=[
                Attachment(
                    name="notes",
                    file_name="notes.txt",
                    file=b"Some notes.\n",
                    content_type="text/plain; charset=utf-8",
                )
            ],
        )
        if not result.success:
            print(f"rich: failed with {result.status_code}: {result.error}")
        else:
            print(f"rich: status={result.status_code} id={result.provider_message_id}")


if __name__ == "__main__":
    asyncio.run(main())
