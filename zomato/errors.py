"""Exception types raised by the Zomato client."""

from __future__ import annotations

from typing import Mapping, Optional

import httpx


class ZomatoError(Exception):
    """Base exception for every client failure.

    ``operation`` names the client call that failed (e.g. ``"restaurant"``);
    the client fills it in before the error reaches the caller.
    """

    def __init__(self, message: str = "", operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"zomato: {self.operation}: {self.message}"
        return f"zomato: {self.message}"


class MissingCredential(ZomatoError):
    """No authenticator configured for the client."""

    def __init__(self, message: str = "no authenticator in client", operation: Optional[str] = None):
        super().__init__(message, operation)


class ValidationError(ZomatoError, ValueError):
    """A required request field holds its zero value."""

    def __init__(self, field: str, message: Optional[str] = None, operation: Optional[str] = None):
        super().__init__(message or f"invalid request: {field} is required", operation)
        self.field = field


class RequestBuildError(ZomatoError):
    """Query string construction failed."""

    def __init__(self, field: str, message: str, operation: Optional[str] = None):
        super().__init__(f"encoding query params failed: {field}: {message}", operation)
        self.field = field


class TransportError(ZomatoError):
    """Network level failure while talking to the API."""


class Cancelled(TransportError):
    """The call was cancelled by the caller or ran out of time."""


class APIError(ZomatoError):
    """The API answered with a status other than 200."""

    def __init__(
        self,
        status_code: int,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
        operation: Optional[str] = None,
    ):
        self.status_code = status_code
        self.url = url
        self.headers = dict(headers or {})
        self.body = body
        super().__init__(self._describe(), operation)

    def _describe(self) -> str:
        reason = httpx.codes.get_reason_phrase(self.status_code)
        text = f"request to {self.url} returned {self.status_code} ({reason})"
        if self.body is not None:
            text += f", response:`{self.body.decode('utf-8', errors='replace')}`"
        return text


class DecodeError(ZomatoError, ValueError):
    """Response body could not be turned into the expected record."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        endpoint: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        if field:
            message = f"parse {field} failed: {message}"
        super().__init__(message, operation)
        self.field = field
        self.endpoint = endpoint
