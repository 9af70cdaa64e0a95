"""Errors returned by the engine API, with their HTTP representation."""

from __future__ import annotations

from http import HTTPStatus


class EngineApiError(Exception):
    """An error that maps to an HTTP response."""

    _status = HTTPStatus.INTERNAL_SERVER_ERROR
    _body = "internal"

    def status_code(self) -> int:
        """HTTP status of the response."""
        return int(self._status)

    def body(self) -> str:
        """Text of the response body."""
        return self._body

    def __str__(self) -> str:
        return type(self).__name__


class InternalServerError(EngineApiError):
    """Unexpected failure inside the daemon."""


class BadRequest(EngineApiError):
    """The request could not be honoured; the message explains why."""

    _status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def body(self) -> str:
        return self.message

    def __str__(self) -> str:
        return f"BadRequest({self.message!r})"


class ServiceUnavailable(EngineApiError):
    """The daemon did not answer in time."""

    _status = HTTPStatus.GATEWAY_TIMEOUT
    _body = "unavailable"