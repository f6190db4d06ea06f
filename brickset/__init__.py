"""
Brickset v3 API client.

Low-level request builders and response models, plus an httpx-based
session client.
"""

from brickset.client import BricksetClient
from brickset.errors import (
    BricksetError,
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    HttpStatusError,
    NotAuthenticatedError,
    RemoteError,
    TransportError,
)
from brickset.models import (
    Envelope,
    GetMinifigCollectionParameters,
    GetSetsParameters,
    OrderBy,
    SetCollectionParameters,
    SetMinifigCollectionParameters,
    decode_envelope,
)
from brickset.request import ENDPOINT, BricksetRequest, EncodedRequest

__all__ = [
    "BricksetClient",
    "ENDPOINT",
    "BricksetRequest",
    "EncodedRequest",
    "Envelope",
    "decode_envelope",
    "GetMinifigCollectionParameters",
    "GetSetsParameters",
    "OrderBy",
    "SetCollectionParameters",
    "SetMinifigCollectionParameters",
    # Errors
    "BricksetError",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    "HttpStatusError",
    "NotAuthenticatedError",
    "RemoteError",
    "TransportError",
]
