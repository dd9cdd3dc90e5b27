"""Tests for the mock email sender."""

from __future__ import annotations

import pytest

from mailgun_sender import Attachment, InvalidArgumentError, MockEmailSender, OutboundMessage


class TestMockEmailSender:
    @pytest.mark.asyncio
    async def test_records_text_email(self) -> None:
        sender = MockEmailSender(default_from="info@example.com")
        result = await sender.send_email("Hi", None, "a@b.com")

        assert result.success is True
        assert result.status_code == 200
        assert result.provider_message_id
        assert sender.sent == [
            {
                "kind": "text",
                "from": "info@example.com",
                "to": "a@b.com",
                "subject": "Hi",
                "text": "",
            }
        ]

    @pytest.mark.asyncio
    async def test_text_email_validates_recipient(self) -> None:
        sender = MockEmailSender()
        with pytest.raises(InvalidArgumentError):
            await sender.send_email("Hi", "Body", "")
        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_records_rich_email(self) -> None:
        sender = MockEmailSender()
        attachment = Attachment(name="a", file_name="a.txt", file=b"A")
        await sender.send_rich_email(
            "me@example.com",
            "a@b.com",
            html="<p>x</p>",
            cc=("c@a.com",),
            attachments=[attachment],
        )

        record = sender.sent[0]
        assert record["kind"] == "rich"
        assert record["from"] == "me@example.com"
        assert record["cc"] == ["c@a.com"]
        assert record["bcc"] == []
        assert record["attachments"] == [attachment]

    @pytest.mark.asyncio
    async def test_send_dispatch(self) -> None:
        sender = MockEmailSender(default_from="info@example.com")
        await sender.send(OutboundMessage(to="a@b.com", text="plain"))
        await sender.send(OutboundMessage(to="a@b.com", bcc=["b@a.com"]))

        assert [r["kind"] for r in sender.sent] == ["text", "rich"]
        assert sender.sent[1]["from"] == "info@example.com"

    @pytest.mark.asyncio
    async def test_unique_message_ids(self) -> None:
        sender = MockEmailSender()
        first = await sender.send_email("a", "b", "a@b.com")
        second = await sender.send_email("a", "b", "a@b.com")
        assert first.provider_message_id != second.provider_message_id

    @pytest.mark.asyncio
    async def test_context_manager_closes(self) -> None:
        async with MockEmailSender() as sender:
            assert sender.name == "MockEmailSender"
        assert sender.closed is True
