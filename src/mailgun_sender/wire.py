"""Mailgun messages API wire format.

Builds the request bodies posted to ``/v3/{domain}/messages``. The simple
send uses URL-encoded form fields; the rich send uses multipart form data
whose part order is significant:

1. ``from``, ``to``, ``subject``, ``text``
2. ``html`` and ``h:Reply-To`` when given
3. extra ``to``, ``cc`` and ``bcc`` parts, each list emitted last entry first
4. one ``attachment`` part per attachment, in list order

The last-entry-first order of step 3 matches the requests produced by
earlier releases of this client and is kept for wire compatibility.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from mailgun_sender.models import Attachment

logger = logging.getLogger("mailgun_sender.wire")

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_MEDIA_TYPE_RE = re.compile(
    rf"^(?P<type>{_TOKEN})/(?P<subtype>{_TOKEN})"
    rf"(?P<params>(?:[ \t]*;[ \t]*{_TOKEN}=(?:{_TOKEN}|{_QUOTED}))*)$"
)
_PARAM_RE = re.compile(rf"({_TOKEN})=({_TOKEN}|{_QUOTED})")

# (field name, (file name, content, content type)) as accepted by httpx ``files=``
MultipartPart = tuple[str, tuple[str | None, str | bytes, str | None]]


def parse_media_type(value: str | None) -> str | None:
    """Parse a ``Content-Type`` value.

    Args:
        value: A media type such as ``"application/pdf"`` or
            ``"text/plain; charset=utf-8"``.

    Returns:
        The media type with its type and subtype lowercased, or ``None`` if
        ``value`` is empty or not a valid media type.

    Example:
        >>> parse_media_type("Text/Plain; charset=utf-8")
        'text/plain; charset=utf-8'
        >>> parse_media_type("not/a/type/at/all???") is None
        True
    """
    if not value:
        return None
    match = _MEDIA_TYPE_RE.match(value.strip())
    if match is None:
        return None
    params = match.group("params")
    media_type = f"{match.group('type').lower()}/{match.group('subtype').lower()}"
    if params:
        media_type += "".join(f"; {key}={val}" for key, val in _PARAM_RE.findall(params))
    return media_type


def build_text_form(from_: str, to: str, subject: str | None, text: str | None) -> dict[str, str]:
    """Return the URL-encoded fields of a simple text email, in wire order."""
    return {
        "from": from_,
        "to": to,
        "subject": subject or "",
        "text": text or "",
    }


def _field(name: str, value: str) -> MultipartPart:
    # No file name and no content type: httpx renders a plain form field.
    return (name, (None, value, None))


def _reversed_fields(name: str, values: Sequence[str] | None) -> list[MultipartPart]:
    if not values:
        return []
    return [_field(name, value) for value in reversed(values)]


def _attachment_part(attachment: Attachment) -> MultipartPart:
    content_type = parse_media_type(attachment.content_type)
    if attachment.content_type and content_type is None:
        logger.debug(
            "Ignoring unparsable content type %r for attachment %r",
            attachment.content_type,
            attachment.file_name,
        )
    return ("attachment", (attachment.file_name, attachment.file, content_type))


def build_multipart_parts(
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
) -> list[MultipartPart]:
    """Return the multipart parts of a rich email, in wire order."""
    parts: list[MultipartPart] = [
        _field("from", from_),
        _field("to", to),
        _field("subject", subject or ""),
        _field("text", text or ""),
    ]
    if html:
        parts.append(_field("html", html))
    if reply_to:
        parts.append(_field("h:Reply-To", reply_to))

    parts.extend(_reversed_fields("to", additional_recipients))
    parts.extend(_reversed_fields("cc", cc))
    parts.extend(_reversed_fields("bcc", bcc))

    for attachment in attachments or ():
        parts.append(_attachment_part(attachment))
    return parts
