"""
Brickset client error taxonomy.

Every failure raised by this package derives from BricksetError, so callers
can catch one type. Nothing here retries or recovers: each error is raised
to the immediate caller.

Advisory conditions (oversized page size, owned/wanted filter without a
user hash) are NOT errors. See EncodedRequest.warnings.
"""

from enum import Enum
from typing import Any

import httpx
from pydantic import ValidationError


class DecodeErrorKind(str, Enum):
    """Classification of decode failures."""

    INVALID_JSON = "invalid_json"
    INVALID_FLAG_VALUE = "invalid_flag_value"
    INVALID_INTEGER_LIST = "invalid_integer_list"
    SCHEMA_MISMATCH = "schema_mismatch"


class BricksetError(Exception):
    """Base class for all errors raised by the Brickset client."""


class EncodeError(BricksetError):
    """A parameter bag could not be serialized."""


class TransportError(BricksetError):
    """
    The HTTP transport failed (network, IO, timeout).

    The underlying httpx exception is kept unchanged as ``__cause__``.
    """


class HttpStatusError(BricksetError):
    """The service answered with a non-2xx HTTP status."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.status_code = response.status_code
        super().__init__(f"HTTP request failed with status code {response.status_code}")


class DecodeError(BricksetError):
    """
    A response (or parameter JSON) could not be decoded.

    Attributes:
        kind: What went wrong
        path: Dotted field path, when known (e.g. "sets.0.year")
        token: The offending value, when known (e.g. "19a9")
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        path: str | None = None,
        token: Any = None,
    ):
        self.kind = kind
        self.message = message
        self.path = path
        self.token = token
        super().__init__(f"{path}: {message}" if path else message)


class RemoteError(BricksetError):
    """The envelope decoded fine but reported ``status: "error"``."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotAuthenticatedError(BricksetError):
    """A call that needs a user hash was made while not logged in."""

    def __init__(self, operation: str | None = None):
        self.operation = operation
        message = "Not logged in"
        if operation:
            message = f"Not logged in: {operation} requires a user hash"
        super().__init__(message)


_DECODE_KINDS = {kind.value: kind for kind in DecodeErrorKind}


def decode_error_from_validation(exc: ValidationError) -> DecodeError:
    """
    Convert a pydantic ValidationError into a DecodeError.

    Only the first reported problem is kept. Codec failures keep their own
    kind (see brickset.codecs); every other pydantic error is a schema
    mismatch, except malformed JSON text.
    """
    errors = exc.errors()
    if not errors:
        return DecodeError(DecodeErrorKind.SCHEMA_MISMATCH, str(exc))

    first = errors[0]
    error_type = first.get("type", "")
    ctx = first.get("ctx") or {}
    path = ".".join(str(part) for part in first.get("loc", ())) or None

    if error_type == "json_invalid":
        kind = DecodeErrorKind.INVALID_JSON
    else:
        kind = _DECODE_KINDS.get(error_type, DecodeErrorKind.SCHEMA_MISMATCH)

    token = ctx.get("token", first.get("input"))
    return DecodeError(kind, first.get("msg", str(exc)), path=path, token=token)
