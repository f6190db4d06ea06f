"""
Success/error envelope around every Brickset response.

Every response is a JSON object tagged by ``status``:

    {"status": "success", "matches": 1, "sets": [...]}
    {"status": "error", "message": "Invalid API key"}

On success the remaining keys form the method's payload; on error the
``message`` key describes the problem. An Envelope holds exactly one of the
two.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from brickset.errors import (
    DecodeError,
    DecodeErrorKind,
    RemoteError,
    decode_error_from_validation,
)
from brickset.models.responses import ResponseModel

T = TypeVar("T", bound=ResponseModel)
V = TypeVar("V")
E = TypeVar("E")


class Status(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class RemoteErrorPayload(BaseModel):
    """Body of an ``status: "error"`` response."""

    model_config = ConfigDict(strict=True, frozen=True)

    message: str

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> RemoteError:
        return RemoteError(self.message)


# =============================================================================
# PLAIN RESULT
# =============================================================================


@dataclass(frozen=True, slots=True)
class Ok(Generic[V]):
    value: V


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result = Ok[V] | Err[E]


# =============================================================================
# ENVELOPE
# =============================================================================


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """
    A decoded response: either a payload or a remote error, never both.

    Build one with Envelope.success() / Envelope.failure() or decode_envelope().
    """

    status: Status
    payload: T | None = None
    error: RemoteErrorPayload | None = None

    def __post_init__(self) -> None:
        if self.status is Status.SUCCESS and (self.payload is None or self.error is not None):
            raise ValueError("success envelope must carry a payload and no error")
        if self.status is Status.ERROR and (self.error is None or self.payload is not None):
            raise ValueError("error envelope must carry an error and no payload")

    @classmethod
    def success(cls, payload: T) -> "Envelope[T]":
        return cls(status=Status.SUCCESS, payload=payload)

    @classmethod
    def failure(cls, message: str) -> "Envelope[T]":
        return cls(status=Status.ERROR, error=RemoteErrorPayload(message=message))

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    def get(self) -> T | None:
        """The payload, or None if this is an error."""
        return self.payload

    def get_error(self) -> RemoteErrorPayload | None:
        """The remote error, or None if this is a success."""
        return self.error

    def unwrap(self) -> T:
        """
        The payload.

        Raises:
            RemoteError: If the envelope holds an error
        """
        if self.payload is None:
            assert self.error is not None
            raise self.error.to_exception()
        return self.payload

    def unwrap_error(self) -> RemoteErrorPayload:
        """
        The remote error.

        Raises:
            ValueError: If the envelope holds a payload
        """
        if self.error is None:
            raise ValueError(f"unwrap_error on a success envelope: {self.payload!r}")
        return self.error

    def into_result(self) -> Result[T, RemoteErrorPayload]:
        """Convert to a plain two-outcome result."""
        if self.payload is not None:
            return Ok(self.payload)
        assert self.error is not None
        return Err(self.error)


def decode_envelope(text: str | bytes, payload_type: type[T]) -> Envelope[T]:
    """
    Decode a raw response body.

    Args:
        text: Response body
        payload_type: Model for the success payload

    Returns:
        Envelope holding either the payload or the remote error

    Raises:
        DecodeError: If the body is not JSON, has no valid ``status``, or the
            payload does not match its model
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(DecodeErrorKind.INVALID_JSON, str(e)) from e

    if not isinstance(raw, dict):
        raise DecodeError(
            DecodeErrorKind.SCHEMA_MISMATCH,
            f"expected a JSON object, got {type(raw).__name__}",
        )

    status = raw.get("status")
    if status == Status.SUCCESS.value:
        model: type[BaseModel] = payload_type
    elif status == Status.ERROR.value:
        model = RemoteErrorPayload
    else:
        raise DecodeError(
            DecodeErrorKind.SCHEMA_MISMATCH,
            f"unknown status {status!r}",
            path="status",
            token=status,
        )

    # Strict mode needs the JSON validator so dates can come from strings
    try:
        decoded = model.model_validate_json(text)
    except ValidationError as e:
        raise decode_error_from_validation(e) from e

    if isinstance(decoded, RemoteErrorPayload):
        return Envelope(status=Status.ERROR, error=decoded)
    return Envelope(status=Status.SUCCESS, payload=decoded)  # type: ignore[arg-type]
