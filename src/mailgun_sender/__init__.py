"""mailgun-sender: send transactional email through the Mailgun messages API."""

from mailgun_sender.base import EmailSender
from mailgun_sender.config import (
    MailgunConfig,
    MailgunRegion,
    Validation,
    validate_recipient,
    validate_settings,
)
from mailgun_sender.errors import InvalidArgumentError, MailgunSenderError
from mailgun_sender.mailgun import MailgunEmailSender
from mailgun_sender.mock import MockEmailSender
from mailgun_sender.models import Attachment, OutboundMessage, SendResult
from mailgun_sender.wire import build_multipart_parts, build_text_form, parse_media_type

__version__ = "1.0.0"

__all__ = [
    "Attachment",
    "EmailSender",
    "InvalidArgumentError",
    "MailgunConfig",
    "MailgunEmailSender",
    "MailgunRegion",
    "MailgunSenderError",
    "MockEmailSender",
    "OutboundMessage",
    "SendResult",
    "Validation",
    "__version__",
    "build_multipart_parts",
    "build_text_form",
    "parse_media_type",
    "validate_recipient",
    "validate_settings",
]
