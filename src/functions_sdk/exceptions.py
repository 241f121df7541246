"""SDK-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class FunctionsError(Exception):
    """Base exception for all function invocation failures."""

    kind = "FunctionsError"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
        body: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = dict(headers) if headers is not None else {}
        self.body = body
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class FunctionsFetchError(FunctionsError):
    """Raised for transport failures and undecodable response bodies."""

    kind = "FetchError"


class FunctionsHttpError(FunctionsError):
    """Raised when the function endpoint answers with a non-2xx status."""

    kind = "HttpError"


class FunctionsRelayError(FunctionsError):
    """Raised when the relay in front of the function flags the response as failed."""

    kind = "RelayError"


class FunctionsValidationError(FunctionsError, ValueError):
    """Raised when invocation arguments are invalid before anything is sent."""

    kind = "ValidationError"
