"""Failure kinds raised by the estimation and chat services."""

from __future__ import annotations


class SolarServiceError(Exception):
    """Base class for failures talking to the AI service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestFailure(SolarServiceError):
    """The AI service could not be reached, rejected the credential, or is not configured."""


class SchemaViolation(SolarServiceError):
    """A response arrived but could not be parsed into the expected shape."""
