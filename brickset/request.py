"""
Request builders for the Brickset v3 API.

Each remote method is a small frozen dataclass holding exactly the
parameters that method takes. ``encode()`` turns it into an EncodedRequest:
the method name plus an ordered list of key/value strings, ``apiKey``
always first. Methods that take a parameter bag carry it as one ``params``
value holding the bag's compact JSON.

Nothing here touches the network. The wire format is:

    POST https://brickset.com/api/v3.asmx/<methodName>
    Content-Type: application/x-www-form-urlencoded

    apiKey=...&params=...

Policy problems the service will not honor (page size above 500 or zero,
owned/wanted filtering without a user hash) never stop a request from being
built. They are logged and returned in EncodedRequest.warnings.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar
from urllib.parse import urlencode

from brickset.models.params import (
    GetMinifigCollectionParameters,
    GetSetsParameters,
    SetCollectionParameters,
    SetMinifigCollectionParameters,
)
from brickset.models.responses import (
    CheckKeyResponse,
    CheckUserHashResponse,
    GetAdditionalImagesResponse,
    GetInstructionsResponse,
    GetKeyUsageStatsResponse,
    GetMinifigCollectionResponse,
    GetMinifigUserNotesResponse,
    GetReviewsResponse,
    GetSetsResponse,
    GetSubthemesResponse,
    GetThemesResponse,
    GetUserNotesResponse,
    GetYearsResponse,
    LoginResponse,
    ResponseModel,
    SetCollectionResponse,
    SetMinifigCollectionResponse,
)

logger = logging.getLogger(__name__)

ENDPOINT = "https://brickset.com/api/v3.asmx/"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class EncodedRequest:
    """
    A fully encoded Brickset call.

    Attributes:
        method_name: Remote method, e.g. "getSets"
        pairs: Ordered (key, value) parameters
        warnings: Advisory messages; the request is still valid
    """

    method_name: str
    pairs: tuple[tuple[str, str], ...]
    warnings: tuple[str, ...] = ()

    def url(self, endpoint: str = ENDPOINT) -> str:
        """URL to POST to. Parameters go in the body."""
        return f"{endpoint.rstrip('/')}/{self.method_name}"

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": FORM_CONTENT_TYPE}

    def form_body(self) -> str:
        """Parameters URL-form-encoded for the POST body."""
        return urlencode(self.pairs)

    def request_url(self, endpoint: str = ENDPOINT) -> str:
        """
        Equivalent URL with every parameter in the query string.

        Useful for diagnostics. Sending parameters in the body is preferred,
        since the URL exposes the API key and password.
        """
        return f"{self.url(endpoint)}?{self.form_body()}"

    def as_dict(self) -> dict[str, str]:
        return dict(self.pairs)


class BricksetRequest(ABC):
    """Base for all Brickset method calls."""

    method_name: ClassVar[str]
    response_type: ClassVar[type[ResponseModel]]

    @abstractmethod
    def _pairs(self) -> list[tuple[str, str]]:
        """Key/value parameters in the order the method declares them."""

    def _warnings(self) -> list[str]:
        return []

    def encode(self) -> EncodedRequest:
        """
        Encode this call.

        Raises:
            EncodeError: If a parameter bag cannot be serialized
        """
        warnings = self._warnings()
        for message in warnings:
            logger.warning("%s: %s", self.method_name, message)
        return EncodedRequest(
            method_name=self.method_name,
            pairs=tuple(self._pairs()),
            warnings=tuple(warnings),
        )

    def to_request_url(self, endpoint: str = ENDPOINT) -> str:
        return self.encode().request_url(endpoint)

    def to_form_body(self) -> str:
        return self.encode().form_body()


# =============================================================================
# KEYS AND SESSIONS
# =============================================================================


@dataclass(frozen=True)
class CheckKey(BricksetRequest):
    method_name: ClassVar[str] = "checkKey"
    response_type: ClassVar[type[ResponseModel]] = CheckKeyResponse

    api_key: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key)]


@dataclass(frozen=True)
class Login(BricksetRequest):
    method_name: ClassVar[str] = "login"
    response_type: ClassVar[type[ResponseModel]] = LoginResponse

    api_key: str
    username: str
    password: str = field(repr=False)

    def _pairs(self) -> list[tuple[str, str]]:
        return [
            ("apiKey", self.api_key),
            ("username", self.username),
            ("password", self.password),
        ]


@dataclass(frozen=True)
class CheckUserHash(BricksetRequest):
    method_name: ClassVar[str] = "checkUserHash"
    response_type: ClassVar[type[ResponseModel]] = CheckUserHashResponse

    api_key: str
    user_hash: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("userHash", self.user_hash)]


@dataclass(frozen=True)
class GetKeyUsageStats(BricksetRequest):
    method_name: ClassVar[str] = "getKeyUsageStats"
    response_type: ClassVar[type[ResponseModel]] = GetKeyUsageStatsResponse

    api_key: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key)]


# =============================================================================
# CATALOG
# =============================================================================


@dataclass(frozen=True)
class GetSets(BricksetRequest):
    """
    Paginated set search.

    ``userHash`` is always sent, as an empty string when not logged in.
    Owned/wanted filters are ignored by the service without one.
    """

    method_name: ClassVar[str] = "getSets"
    response_type: ClassVar[type[ResponseModel]] = GetSetsResponse

    api_key: str
    user_hash: str | None = None
    params: GetSetsParameters = field(default_factory=GetSetsParameters)

    def _pairs(self) -> list[tuple[str, str]]:
        return [
            ("apiKey", self.api_key),
            ("params", self.params.to_json()),
            ("userHash", self.user_hash or ""),
        ]

    def _warnings(self) -> list[str]:
        warnings: list[str] = []
        page_size_warning = self.params.page_size_warning()
        if page_size_warning:
            warnings.append(page_size_warning)
        if self.params.filters_by_user and not self.user_hash:
            warnings.append("User hash is required when wanted/owned parameters are used in GetSets")
        return warnings


@dataclass(frozen=True)
class GetAdditionalImages(BricksetRequest):
    method_name: ClassVar[str] = "getAdditionalImages"
    response_type: ClassVar[type[ResponseModel]] = GetAdditionalImagesResponse

    api_key: str
    set_id: int

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("setID", str(self.set_id))]


@dataclass(frozen=True)
class GetInstructions(BricksetRequest):
    """Instructions by numeric set ID."""

    method_name: ClassVar[str] = "getInstructions"
    response_type: ClassVar[type[ResponseModel]] = GetInstructionsResponse

    api_key: str
    set_id: int

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("setID", str(self.set_id))]


@dataclass(frozen=True)
class GetInstructions2(BricksetRequest):
    """Instructions by set number, e.g. "6876-1"."""

    method_name: ClassVar[str] = "getInstructions2"
    response_type: ClassVar[type[ResponseModel]] = GetInstructionsResponse

    api_key: str
    set_number: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("setNumber", self.set_number)]


@dataclass(frozen=True)
class GetReviews(BricksetRequest):
    method_name: ClassVar[str] = "getReviews"
    response_type: ClassVar[type[ResponseModel]] = GetReviewsResponse

    api_key: str
    set_id: int

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("setID", str(self.set_id))]


@dataclass(frozen=True)
class GetThemes(BricksetRequest):
    method_name: ClassVar[str] = "getThemes"
    response_type: ClassVar[type[ResponseModel]] = GetThemesResponse

    api_key: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key)]


@dataclass(frozen=True)
class GetSubthemes(BricksetRequest):
    method_name: ClassVar[str] = "getSubthemes"
    response_type: ClassVar[type[ResponseModel]] = GetSubthemesResponse

    api_key: str
    theme: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("theme", self.theme)]


@dataclass(frozen=True)
class GetYears(BricksetRequest):
    method_name: ClassVar[str] = "getYears"
    response_type: ClassVar[type[ResponseModel]] = GetYearsResponse

    api_key: str
    theme: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("theme", self.theme)]


# =============================================================================
# USER COLLECTION
# =============================================================================


@dataclass(frozen=True)
class SetCollection(BricksetRequest):
    method_name: ClassVar[str] = "setCollection"
    response_type: ClassVar[type[ResponseModel]] = SetCollectionResponse

    api_key: str
    user_hash: str
    set_id: int
    params: SetCollectionParameters = field(default_factory=SetCollectionParameters)

    def _pairs(self) -> list[tuple[str, str]]:
        return [
            ("apiKey", self.api_key),
            ("userHash", self.user_hash),
            ("setID", str(self.set_id)),
            ("params", self.params.to_json()),
        ]


@dataclass(frozen=True)
class GetUserNotes(BricksetRequest):
    method_name: ClassVar[str] = "getUserNotes"
    response_type: ClassVar[type[ResponseModel]] = GetUserNotesResponse

    api_key: str
    user_hash: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("userHash", self.user_hash)]


@dataclass(frozen=True)
class GetMinifigCollection(BricksetRequest):
    method_name: ClassVar[str] = "getMinifigCollection"
    response_type: ClassVar[type[ResponseModel]] = GetMinifigCollectionResponse

    api_key: str
    user_hash: str
    params: GetMinifigCollectionParameters = field(
        default_factory=GetMinifigCollectionParameters
    )

    def _pairs(self) -> list[tuple[str, str]]:
        return [
            ("apiKey", self.api_key),
            ("userHash", self.user_hash),
            ("params", self.params.to_json()),
        ]


@dataclass(frozen=True)
class SetMinifigCollection(BricksetRequest):
    method_name: ClassVar[str] = "setMinifigCollection"
    response_type: ClassVar[type[ResponseModel]] = SetMinifigCollectionResponse

    api_key: str
    user_hash: str
    minifig_number: str
    params: SetMinifigCollectionParameters = field(
        default_factory=SetMinifigCollectionParameters
    )

    def _pairs(self) -> list[tuple[str, str]]:
        return [
            ("apiKey", self.api_key),
            ("userHash", self.user_hash),
            ("minifigNumber", self.minifig_number),
            ("params", self.params.to_json()),
        ]


@dataclass(frozen=True)
class GetUserMinifigNotes(BricksetRequest):
    method_name: ClassVar[str] = "getUserMinifigNotes"
    response_type: ClassVar[type[ResponseModel]] = GetMinifigUserNotesResponse

    api_key: str
    user_hash: str

    def _pairs(self) -> list[tuple[str, str]]:
        return [("apiKey", self.api_key), ("userHash", self.user_hash)]
