"""
Scalar codecs for Brickset's JSON quirks.

The service encodes several values in ways that do not map cleanly onto
Python types. Each quirk is handled by a pair of pure functions (decode,
encode), and each pair is exposed as a pydantic ``Annotated`` type so models
apply it per field:

- Flag: "set" is the literal integer 1, "unset" is an absent key.
- NotSpecifiedStr: the string "{Not specified}" stands in for absent.
- ZeroNone: the integer 0 stands in for absent.
- IntList: a list of integers travels as a ", "-joined string, or as a
  bare integer when there is only one.
"""

import re
from collections.abc import Callable, Sequence
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, ValidationInfo
from pydantic_core import PydanticCustomError

from brickset.errors import DecodeError, DecodeErrorKind

NOT_SPECIFIED = "{Not specified}"

FLAG_VALUE = 1

INT_LIST_SEPARATOR = ", "

_INT_TOKEN = re.compile(r"^[+-]?\d+$")

# List items are 32-bit signed integers on the service side
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _is_int(value: Any) -> bool:
    # bool is an int subclass, but JSON true/false is not a number
    return isinstance(value, int) and not isinstance(value, bool)


def _mismatch(expected: str, value: Any) -> DecodeError:
    return DecodeError(
        DecodeErrorKind.SCHEMA_MISMATCH,
        f"expected {expected}, got {type(value).__name__}",
        token=value,
    )


# =============================================================================
# FLAG
# =============================================================================


def decode_flag(value: Any) -> bool:
    """Decode a flag field. Only the integer 1 is valid."""
    if not _is_int(value):
        raise _mismatch("integer flag", value)
    if value != FLAG_VALUE:
        raise DecodeError(
            DecodeErrorKind.INVALID_FLAG_VALUE,
            f"flag must be 1, was {value}",
            token=value,
        )
    return True


def encode_flag(value: bool) -> int:
    """Encode a set flag. Unset flags are omitted, never encoded."""
    return FLAG_VALUE


# =============================================================================
# "{Not specified}" STRINGS
# =============================================================================


def decode_not_specified(value: Any) -> str | None:
    """Decode a string where "{Not specified}" (or null) means absent."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise _mismatch("string", value)
    return None if value == NOT_SPECIFIED else value


def encode_not_specified(value: str | None) -> str:
    return NOT_SPECIFIED if value is None else value


# =============================================================================
# ZERO AS ABSENT
# =============================================================================


def decode_zero_none(value: Any) -> int | None:
    """Decode an integer where 0 means absent."""
    if not _is_int(value):
        raise _mismatch("integer", value)
    return None if value == 0 else value


def encode_zero_none(value: int | None) -> int:
    return 0 if value is None else value


# =============================================================================
# COMMA-SEPARATED INTEGER LISTS
# =============================================================================


def decode_int_list(value: Any) -> list[int]:
    """
    Decode a comma-separated list of integers.

    Accepts a bare integer (a one-element list) or a string such as
    "1999, 2001,2004". Tokens are trimmed before parsing and must fit in a
    32-bit signed integer.

    Raises:
        DecodeError: INVALID_INTEGER_LIST carrying the first bad token
    """
    if _is_int(value):
        return [_check_int_range(value, value)]
    if not isinstance(value, str):
        raise _mismatch("integer or comma-separated string", value)

    result: list[int] = []
    for raw in value.split(","):
        token = raw.strip()
        if not _INT_TOKEN.match(token):
            raise DecodeError(
                DecodeErrorKind.INVALID_INTEGER_LIST,
                f"invalid integer {token!r} in list {value!r}",
                token=token,
            )
        result.append(_check_int_range(int(token), token))
    return result


def _check_int_range(number: int, token: Any) -> int:
    if not INT_MIN <= number <= INT_MAX:
        raise DecodeError(
            DecodeErrorKind.INVALID_INTEGER_LIST,
            f"integer {token!r} is out of range",
            token=token,
        )
    return number


def encode_int_list(values: Sequence[int]) -> str:
    return INT_LIST_SEPARATOR.join(str(v) for v in values)


# =============================================================================
# PYDANTIC BINDINGS
# =============================================================================


def _python_flag(value: Any) -> bool:
    """Accept a set flag as built in Python: True, or the wire value 1."""
    if value is True:
        return True
    return decode_flag(value)


def _python_int_list(value: Any) -> list[int]:
    """Accept an integer list as built in Python, or any wire form."""
    if not isinstance(value, (list, tuple)):
        return decode_int_list(value)
    if not value:
        raise DecodeError(DecodeErrorKind.INVALID_INTEGER_LIST, "empty integer list", token=value)
    for item in value:
        if not _is_int(item):
            raise DecodeError(
                DecodeErrorKind.INVALID_INTEGER_LIST,
                f"invalid integer {item!r} in list",
                token=item,
            )
        _check_int_range(item, item)
    return list(value)


def _field_validator(
    decode: Callable[[Any], Any],
    python_decode: Callable[[Any], Any] | None = None,
) -> Callable[[Any, ValidationInfo], Any]:
    """
    Adapt a codec decoder for pydantic.

    JSON input always goes through ``decode``. Python input (constructors,
    ``model_validate``) goes through ``python_decode`` when given, so a field
    also accepts its in-memory form.

    DecodeError is re-raised as a PydanticCustomError whose type is the
    DecodeErrorKind value, so the envelope can rebuild the original error
    with the field path attached.
    """

    def validate(value: Any, info: ValidationInfo) -> Any:
        decoder = decode
        if python_decode is not None and info.mode == "python":
            decoder = python_decode
        try:
            return decoder(value)
        except DecodeError as e:
            raise PydanticCustomError(
                e.kind.value,
                "{message}",
                {"message": e.message, "token": e.token},
            ) from e

    return validate


Flag = Annotated[
    bool,
    PlainValidator(_field_validator(decode_flag, _python_flag)),
    PlainSerializer(encode_flag, return_type=int),
]

NotSpecifiedStr = Annotated[
    str | None,
    PlainValidator(_field_validator(decode_not_specified)),
    PlainSerializer(encode_not_specified, return_type=str),
]

ZeroNone = Annotated[
    int | None,
    PlainValidator(_field_validator(decode_zero_none)),
    PlainSerializer(encode_zero_none, return_type=int),
]

IntList = Annotated[
    list[int],
    PlainValidator(_field_validator(decode_int_list, _python_int_list)),
    PlainSerializer(encode_int_list, return_type=str),
]
