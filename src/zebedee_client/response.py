"""Turn raw ZEBEDEE HTTP responses into typed results or typed errors.

Every endpoint answers ``{"success": ..., "data": ..., "message": ...}`` on
2xx and ``{"success": false, "message": ...}`` otherwise. ``parse_response``
decides which of the two shapes applies and raises one of:

    MalformedResponseError  body is not JSON, or the JSON does not fit the shape
    ApiError                non-2xx with a readable error body
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar, get_args

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from zebedee_client.exceptions import ApiError, MalformedResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


def _admits_none(annotation: Any) -> bool:
    return annotation is None or type(None) in get_args(annotation)


class StdResponse(BaseModel, Generic[T]):
    """Success envelope shared by every endpoint.

    Endpoints parametrized with an optional payload (``StdResponse[Optional[X]]``)
    may omit ``data`` entirely; it is then read as ``None``.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool
    data: T
    message: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _absent_data_is_null(cls, value: Any) -> Any:
        if (
            isinstance(value, dict)
            and "data" not in value
            and _admits_none(cls.model_fields["data"].annotation)
        ):
            return {**value, "data": None}
        return value


class ApiErrorBody(BaseModel):
    """Error body returned with non-2xx statuses. Both fields are optional."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: Optional[str] = None


def _read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        logger.debug("Response body is not JSON (status %d)", response.status_code)
        raise MalformedResponseError(response.status_code, response.text, e) from e


def parse_response(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Parse an HTTP response into ``model``.

    Args:
        response: A fully received httpx response.
        model: The endpoint's declared success type, usually a
            ``StdResponse[...]`` parametrization.

    Returns:
        The validated success payload.

    Raises:
        MalformedResponseError: The body is not JSON, or does not match
            ``model`` (2xx) or ``ApiErrorBody`` (non-2xx).
        ApiError: Non-2xx status with a well-formed error body.
    """
    body = _read_json(response)

    if response.is_success:
        try:
            return model.model_validate(body)
        except ValidationError as e:
            logger.debug(
                "Status %d but body does not match %s: %s",
                response.status_code,
                model.__name__,
                e,
            )
            raise MalformedResponseError(response.status_code, response.text, e) from e

    try:
        error_body = ApiErrorBody.model_validate(body)
    except ValidationError as e:
        logger.debug("Status %d with unreadable error body", response.status_code)
        raise MalformedResponseError(response.status_code, response.text, e) from e

    logger.debug(
        "API error (status %d): %s", response.status_code, error_body.message
    )
    raise ApiError(response.status_code, error_body)
