"""ZEBEDEE client exceptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zebedee_client.response import ApiErrorBody

NO_MESSAGE_RETURNED = "No Message Returned"


class ErrorKind(str, enum.Enum):
    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"
    API = "api"
    VALIDATION = "validation"


class ZebedeeError(Exception):
    """Base exception for zebedee-client.

    The client only raises the subclasses below, each of which sets
    ``kind``. The base class is for ``except`` clauses and carries no kind.
    """

    kind: ErrorKind | None = None


class TransportError(ZebedeeError):
    """The HTTP request could not be completed (DNS, refused, TLS, timeout)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class MalformedResponseError(ZebedeeError):
    """The response body was not JSON, or did not match the expected shape."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, status_code: int, body: str, cause: Exception):
        self.status_code = status_code
        self.body = body
        self.cause = cause
        super().__init__(
            f"Unable to parse response (status {status_code}): {cause}\n"
            f"text from API: {body}"
        )


class ApiError(ZebedeeError):
    """The API answered with a non-2xx status and an error body."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, body: ApiErrorBody):
        self.status_code = status_code
        self.body = body
        self.message = body.message if body.message is not None else NO_MESSAGE_RETURNED
        super().__init__(self.message)


@dataclass(frozen=True)
class Violation:
    """A single failed local validation rule."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class PayloadValidationError(ZebedeeError):
    """A request payload failed local validation; nothing was sent."""

    kind = ErrorKind.VALIDATION

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        details = "; ".join(str(v) for v in self.violations)
        super().__init__(f"Invalid payload: {details}")
