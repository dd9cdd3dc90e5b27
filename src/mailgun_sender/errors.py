"""Exceptions raised by mailgun-sender."""

from __future__ import annotations


class MailgunSenderError(Exception):
    """Base class for mailgun-sender errors."""


class InvalidArgumentError(MailgunSenderError, ValueError):
    """A required argument is missing or malformed.

    Raised before any network activity takes place.

    Attributes:
        parameter: Name of the offending argument.
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter
