"""Mailgun sender configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, unique

from pydantic import BaseModel, ConfigDict, SecretStr, model_validator

from mailgun_sender.errors import InvalidArgumentError


@unique
class MailgunRegion(StrEnum):
    US = "us"
    EU = "eu"

    @property
    def base_url(self) -> str:
        if self is MailgunRegion.EU:
            return "https://api.eu.mailgun.net"
        return "https://api.mailgun.net"


@dataclass(frozen=True)
class Validation:
    """Outcome of :func:`validate_settings`.

    ``ok`` is true when every setting passed; otherwise ``parameter`` names
    the first offending setting and ``message`` describes the problem.
    """

    ok: bool
    parameter: str | None = None
    message: str | None = None

    def raise_for_error(self) -> None:
        if not self.ok:
            raise InvalidArgumentError(self.parameter or "", self.message or "")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_settings(
    api_key: str | None,
    domain: str | None,
    default_from: str | None,
) -> Validation:
    """Check the sender settings without building anything.

    Checks run in order: ``api_key``, then ``domain``, then
    ``default_from``. Only the first failure is reported.
    """
    if _blank(api_key):
        return Validation(
            ok=False,
            parameter="api_key",
            message="The passed api_key string is either None or empty",
        )
    if _blank(domain) or "." not in domain:  # type: ignore[operator]
        return Validation(
            ok=False,
            parameter="domain",
            message="The passed domain string is either None, empty or invalid",
        )
    if _blank(default_from) or "@" not in default_from:  # type: ignore[operator]
        return Validation(
            ok=False,
            parameter="default_from",
            message=(
                "The passed default_from string is either None, empty "
                "or not a valid email address"
            ),
        )
    return Validation(ok=True)


def validate_recipient(to: str | None) -> Validation:
    """Check a single recipient address for the simple send path."""
    if _blank(to) or "@" not in to:  # type: ignore[operator]
        return Validation(
            ok=False,
            parameter="to",
            message=(
                "The 'to' email address argument is either None, empty or invalid. "
                "Please only send email to valid addresses."
            ),
        )
    return Validation(ok=True)


class MailgunConfig(BaseModel):
    """Mailgun email sender configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    domain: str
    default_from: str
    region: MailgunRegion = MailgunRegion.US
    timeout: float = 30.0

    @model_validator(mode="after")
    def _check_settings(self) -> MailgunConfig:
        result = validate_settings(
            self.api_key.get_secret_value(),
            self.domain,
            self.default_from,
        )
        if not result.ok:
            raise ValueError(f"{result.parameter}: {result.message}")
        return self

    @property
    def base_url(self) -> str:
        return self.region.base_url

    @property
    def endpoint(self) -> str:
        return f"v3/{self.domain}/messages"

    @property
    def messages_url(self) -> str:
        return f"{self.base_url}/{self.endpoint}"
