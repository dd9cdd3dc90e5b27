"""Shared test fixtures and helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

import httpx
import pytest

API_KEY = "key-3ax6xnjp29jd6fds4gc373sgvjxteol0"
DOMAIN = "mg.example.com"
DEFAULT_FROM = "Example <info@example.com>"


@dataclass
class FormPart:
    name: str
    value: bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def text(self) -> str:
        return self.value.decode()


class RecordingTransport(httpx.AsyncBaseTransport):
    """Captures requests and returns a canned Mailgun response."""

    def __init__(
        self,
        status_code: int = 200,
        json: object | None = None,
        text: str | None = None,
    ) -> None:
        self._status_code = status_code
        self._json = json
        self._text = text
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        if self._text is not None:
            return httpx.Response(self._status_code, text=self._text, request=request)
        body = self._json
        if body is None:
            body = {"id": "<20240101.1@mg.example.com>", "message": "Queued. Thank you."}
        return httpx.Response(self._status_code, json=body, request=request)


class TimeoutTransport(httpx.AsyncBaseTransport):
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise httpx.ReadTimeout("timed out", request=request)


_NAME_RE = re.compile(rb'; name="([^"]*)"')
_FILENAME_RE = re.compile(rb'; filename="([^"]*)"')


def multipart_parts(request: httpx.Request) -> list[FormPart]:
    """Split a captured multipart request body into its parts, in order."""
    content_type = request.headers["content-type"]
    assert content_type.startswith("multipart/form-data")
    boundary = content_type.split("boundary=", 1)[1].encode()
    chunks = request.content.split(b"--" + boundary)
    parts: list[FormPart] = []
    for chunk in chunks[1:-1]:
        head, _, value = chunk.removeprefix(b"\r\n").partition(b"\r\n\r\n")
        value = value.removesuffix(b"\r\n")
        name = _NAME_RE.search(head)
        filename = _FILENAME_RE.search(head)
        part_type = None
        for line in head.split(b"\r\n"):
            key, _, header_value = line.partition(b":")
            if key.strip().lower() == b"content-type":
                part_type = header_value.strip().decode()
        assert name is not None
        parts.append(
            FormPart(
                name=name.group(1).decode(),
                value=value,
                filename=filename.group(1).decode() if filename else None,
                content_type=part_type,
            )
        )
    return parts


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport)
