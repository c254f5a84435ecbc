"""Generic API response envelope model.

Every endpoint answers with the same wrapper:
{ data: T | None, error: {code, message} | None, pagination: {...} | None }

The target shape of ``data`` is supplied per call, so one parser serves every
endpoint.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class ApiErrorBody(BaseModel):
    """Error information carried by an envelope or an error response."""

    status_code: int | None = None
    code: int | None = None
    message: str | None = None


class PageInfo(BaseModel):
    """Pagination information returned by paged endpoints."""

    has_more: bool | None = None
    page_number: int | None = Field(default=None, ge=0)
    page_size: int | None = Field(default=None, ge=0)
    total_count: int | None = Field(default=None, ge=0)


class PageLinks(BaseModel):
    """Cursor links returned by newer endpoints."""

    prev: str | None = None
    next: str | None = None


class ResponseEnvelope(BaseModel, Generic[T]):
    """JSON envelope for all API responses.

    ``data`` and ``error`` are normally mutually exclusive but neither is
    required, and both being present is tolerated.
    """

    data: T | None = None
    error: ApiErrorBody | None = None
    pagination: PageInfo | None = None
    links: PageLinks | None = None
    meta: dict | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalise_error_flag(cls, value: Any) -> Any:
        # Older endpoints send "error": false plus error_code/error_message
        # siblings instead of an error object.
        if isinstance(value, dict) and isinstance(value.get("error"), bool):
            value = dict(value)
            if value["error"]:
                value["error"] = {
                    "code": value.get("error_code"),
                    "message": value.get("error_message"),
                }
            else:
                value["error"] = None
        return value


def parse_envelope(content: bytes | str, data_type: Any = None) -> ResponseEnvelope:
    """Parse a raw response body into an envelope whose data has ``data_type``.

    Raises
    ------
    pydantic.ValidationError
        If the body is not JSON or does not match the expected shape.
    """
    model = ResponseEnvelope[Any if data_type is None else data_type]
    return model.model_validate_json(content)


def parse_error_body(content: bytes, status_code: int) -> ApiErrorBody:
    """Best-effort extraction of error details from a non-2xx body.

    Falls back to the raw text as the message when the body is not an
    envelope.
    """
    try:
        envelope = ResponseEnvelope[Any].model_validate_json(content)
    except ValueError:
        envelope = None

    if envelope is not None and envelope.error is not None:
        return envelope.error.model_copy(update={"status_code": status_code})

    text = content.decode("utf-8", errors="replace").strip()
    return ApiErrorBody(status_code=status_code, message=text or None)
