"""Tests for the success/error response envelope."""

import pytest

from brickset.errors import DecodeError, DecodeErrorKind, RemoteError
from brickset.models.envelope import (
    Envelope,
    Err,
    Ok,
    RemoteErrorPayload,
    Status,
    decode_envelope,
)
from brickset.models.responses import CheckKeyResponse, GetThemesResponse, LoginResponse


class TestDecodeEnvelope:
    """Decoding the status-tagged union."""

    def test_success_with_empty_payload(self) -> None:
        envelope = decode_envelope('{"status":"success"}', CheckKeyResponse)

        assert envelope.is_success
        assert isinstance(envelope.get(), CheckKeyResponse)
        assert envelope.get_error() is None

    def test_error_message(self) -> None:
        envelope = decode_envelope(
            '{"status":"error","message":"Invalid API key"}', CheckKeyResponse
        )

        assert not envelope.is_success
        assert envelope.get() is None
        assert envelope.unwrap_error().message == "Invalid API key"

    def test_success_payload_fields(self) -> None:
        envelope = decode_envelope('{"status":"success","hash":"abc123"}', LoginResponse)
        assert envelope.unwrap().hash == "abc123"

    def test_accepts_bytes(self) -> None:
        envelope = decode_envelope(b'{"status": "success", "hash": "abc123"}', LoginResponse)
        assert envelope.unwrap().hash == "abc123"

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope("<html>Service Unavailable</html>", CheckKeyResponse)

        assert exc_info.value.kind == DecodeErrorKind.INVALID_JSON

    def test_missing_status(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope('{"hash":"abc"}', LoginResponse)

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.path == "status"

    def test_unknown_status(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope('{"status":"pending"}', CheckKeyResponse)

        assert exc_info.value.token == "pending"

    def test_not_an_object(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope("[1, 2, 3]", CheckKeyResponse)

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH

    def test_error_without_message(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope('{"status":"error"}', CheckKeyResponse)

        assert exc_info.value.path == "message"

    def test_success_payload_mismatch(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_envelope('{"status":"success","matches":"many"}', GetThemesResponse)

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.path == "matches"


class TestEnvelopeAccessors:
    """Extracting the payload or the error."""

    def test_unwrap_error_raises_remote_error(self) -> None:
        envelope: Envelope[CheckKeyResponse] = Envelope.failure("Invalid API key")

        with pytest.raises(RemoteError, match="Invalid API key"):
            envelope.unwrap()

    def test_unwrap_error_on_success(self) -> None:
        envelope = Envelope.success(CheckKeyResponse())

        with pytest.raises(ValueError, match="success envelope"):
            envelope.unwrap_error()

    def test_into_result_success(self) -> None:
        payload = LoginResponse(hash="abc")
        assert Envelope.success(payload).into_result() == Ok(payload)

    def test_into_result_error(self) -> None:
        result = Envelope.failure("Invalid user hash").into_result()

        assert isinstance(result, Err)
        assert result.error == RemoteErrorPayload(message="Invalid user hash")

    def test_exactly_one_side(self) -> None:
        """An envelope cannot be both or neither."""
        with pytest.raises(ValueError):
            Envelope(status=Status.SUCCESS)
        with pytest.raises(ValueError):
            Envelope(
                status=Status.ERROR,
                payload=CheckKeyResponse(),
                error=RemoteErrorPayload(message="x"),
            )
