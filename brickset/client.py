"""
Brickset session client.

Wraps an httpx.AsyncClient with one coroutine per Brickset method plus
rudimentary session handling: after log_in() (or reuse_login()) the user
hash is remembered and sent with every user-scoped call until log_out().

Each call builds one request, sends it once, and decodes the envelope. There
are no retries.

Example:
    client = BricksetClient(api_key)
    await client.log_in(username, password)
    wanted = await client.get_wanted_sets(order_by=OrderBy.PIECES_DESC, page_size=500)
    for s in wanted.sets:
        print(s.full_number, s.name or "(Unknown)")
"""

import logging
from typing import Any

import httpx

from brickset.config import settings
from brickset.errors import HttpStatusError, NotAuthenticatedError, TransportError
from brickset.models.envelope import Envelope, decode_envelope
from brickset.models.params import (
    GetMinifigCollectionParameters,
    GetSetsParameters,
    OrderBy,
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
    SetCollectionResponse,
    SetMinifigCollectionResponse,
)
from brickset.request import (
    BricksetRequest,
    CheckKey,
    CheckUserHash,
    EncodedRequest,
    GetAdditionalImages,
    GetInstructions,
    GetInstructions2,
    GetKeyUsageStats,
    GetMinifigCollection,
    GetReviews,
    GetSets,
    GetSubthemes,
    GetThemes,
    GetUserMinifigNotes,
    GetUserNotes,
    GetYears,
    Login,
    SetCollection,
    SetMinifigCollection,
)

logger = logging.getLogger(__name__)


class BricksetClient:
    """
    Client for the Brickset v3 API.

    Calls that need a logged-in user raise NotAuthenticatedError before any
    request is sent when no user hash is held.
    """

    def __init__(
        self,
        api_key: str,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the Brickset client.

        Args:
            api_key: Brickset API key
            client: Optional httpx client for connection reuse. When omitted a
                short-lived client is opened per call.
            base_url: API endpoint. Defaults to settings.endpoint.
            timeout: Request timeout in seconds. Defaults to settings.timeout.
        """
        self.api_key = api_key
        self.base_url = base_url or settings.endpoint
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_hash: str | None = None
        self._client = client

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient | None = None) -> "BricksetClient":
        """
        Build a client from BRICKSET_* settings.

        Raises:
            ValueError: If no API key is configured
        """
        if not settings.api_key:
            raise ValueError("BRICKSET_API_KEY is not set")
        return cls(settings.api_key, client=client)

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    async def _post(self, encoded: EncodedRequest) -> httpx.Response:
        url = encoded.url(self.base_url)
        body = encoded.form_body()

        if self._client:
            return await self._client.post(url, content=body, headers=encoded.headers)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, content=body, headers=encoded.headers)

    async def execute(self, request: BricksetRequest) -> Envelope[Any]:
        """
        Send one request and decode its envelope.

        Returns:
            Envelope holding the payload or the remote error

        Raises:
            EncodeError: If the request cannot be encoded
            TransportError: If the HTTP request fails
            HttpStatusError: On a non-2xx response
            DecodeError: If the body does not match the expected payload
        """
        logger.debug("Executing Brickset API request: %s", request.method_name)

        encoded = request.encode()

        try:
            response = await self._post(encoded)
        except httpx.RequestError as e:
            raise TransportError(f"{request.method_name} request failed: {e}") from e

        if not response.is_success:
            raise HttpStatusError(response)

        return decode_envelope(response.text, request.response_type)

    async def _call(self, request: BricksetRequest) -> Any:
        envelope = await self.execute(request)
        return envelope.unwrap()

    def _require_user_hash(self, operation: str) -> str:
        if self.user_hash is None:
            raise NotAuthenticatedError(operation)
        return self.user_hash

    # =========================================================================
    # KEYS AND SESSIONS
    # =========================================================================

    async def check_key(self) -> CheckKeyResponse:
        """Check that the API key is valid. Works without logging in."""
        return await self._call(CheckKey(self.api_key))

    async def get_key_usage_stats(self) -> GetKeyUsageStatsResponse:
        return await self._call(GetKeyUsageStats(self.api_key))

    async def log_in(self, username: str, password: str) -> LoginResponse:
        """
        Log in with a username and password.

        The returned user hash is used for later calls until log_out().
        """
        result: LoginResponse = await self._call(Login(self.api_key, username, password))
        self.user_hash = result.hash
        logger.info("Logged into Brickset as %s", username)
        return result

    async def reuse_login(self, user_hash: str) -> CheckUserHashResponse:
        """Log in with a saved user hash, after checking it is still valid."""
        result = await self.check_user_hash(user_hash)
        self.force_reuse_login(user_hash)
        return result

    def force_reuse_login(self, user_hash: str) -> None:
        """Adopt a user hash without checking it. Prefer reuse_login()."""
        self.user_hash = user_hash

    async def check_user_hash(self, user_hash: str) -> CheckUserHashResponse:
        """Validate any user hash. Works without logging in."""
        return await self._call(CheckUserHash(self.api_key, user_hash))

    async def validate_login(self) -> CheckUserHashResponse:
        """Validate the user hash this client currently holds."""
        user_hash = self._require_user_hash("validate_login")
        return await self.check_user_hash(user_hash)

    def log_out(self) -> None:
        """Forget the user hash. No effect when not logged in."""
        self.user_hash = None

    @property
    def is_logged_in(self) -> bool:
        return self.user_hash is not None

    # =========================================================================
    # CATALOG
    # =========================================================================

    async def get_sets(self, params: GetSetsParameters | None = None) -> GetSetsResponse:
        """
        Search sets.

        Sends the user hash when logged in, which enables owned/wanted
        filtering and per-user collection fields.
        """
        request = GetSets(self.api_key, self.user_hash, params or GetSetsParameters())
        return await self._call(request)

    def _user_sets_params(
        self,
        params: GetSetsParameters,
        order_by: OrderBy | None,
        page_size: int | None,
        page_number: int | None,
        extended_data: bool,
    ) -> GetSetsParameters:
        params = params.with_extended_data(extended_data)
        if order_by is not None:
            params = params.with_order_by(order_by)
        if page_size is not None:
            params = params.with_page_size(page_size)
        if page_number is not None:
            params = params.with_page_number(page_number)
        return params

    async def get_wanted_sets(
        self,
        order_by: OrderBy | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
        extended_data: bool = False,
    ) -> GetSetsResponse:
        """The user's wanted sets. Use get_sets() for more filters."""
        self._require_user_hash("get_wanted_sets")
        params = self._user_sets_params(
            GetSetsParameters().with_wanted_by_user(True),
            order_by,
            page_size,
            page_number,
            extended_data,
        )
        return await self.get_sets(params)

    async def get_owned_sets(
        self,
        order_by: OrderBy | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
        extended_data: bool = False,
    ) -> GetSetsResponse:
        """The user's owned sets. Use get_sets() for more filters."""
        self._require_user_hash("get_owned_sets")
        params = self._user_sets_params(
            GetSetsParameters().with_owned_by_user(True),
            order_by,
            page_size,
            page_number,
            extended_data,
        )
        return await self.get_sets(params)

    async def get_additional_images(self, set_id: int) -> GetAdditionalImagesResponse:
        return await self._call(GetAdditionalImages(self.api_key, set_id))

    async def get_instructions(self, set_id: int) -> GetInstructionsResponse:
        """Instructions for a set, by set ID."""
        return await self._call(GetInstructions(self.api_key, set_id))

    async def get_instructions_2(self, set_number: str) -> GetInstructionsResponse:
        """Instructions for a set, by set number (e.g. "6876-1")."""
        return await self._call(GetInstructions2(self.api_key, set_number))

    async def get_reviews(self, set_id: int) -> GetReviewsResponse:
        return await self._call(GetReviews(self.api_key, set_id))

    async def get_themes(self) -> GetThemesResponse:
        """All themes with their set counts."""
        return await self._call(GetThemes(self.api_key))

    async def get_subthemes(self, theme: str) -> GetSubthemesResponse:
        return await self._call(GetSubthemes(self.api_key, theme))

    async def get_years(self, theme: str) -> GetYearsResponse:
        """Years a theme has sets in, with the set count per year."""
        return await self._call(GetYears(self.api_key, theme))

    # =========================================================================
    # USER COLLECTION
    # =========================================================================

    async def set_collection(
        self, set_id: int, params: SetCollectionParameters
    ) -> SetCollectionResponse:
        """
        Change one set in the user's collection.

        See also set_wanted(), set_owned(), set_notes(), set_rating().
        """
        user_hash = self._require_user_hash("set_collection")
        return await self._call(SetCollection(self.api_key, user_hash, set_id, params))

    async def set_wanted(self, set_id: int, wanted: bool) -> SetCollectionResponse:
        return await self.set_collection(set_id, SetCollectionParameters().with_wanted(wanted))

    async def set_owned(self, set_id: int, qty_owned: int) -> SetCollectionResponse:
        """Set the owned quantity. Zero removes the set from the owned list."""
        return await self.set_collection(set_id, SetCollectionParameters().with_owned(qty_owned))

    async def set_notes(self, set_id: int, notes: str) -> SetCollectionResponse:
        return await self.set_collection(set_id, SetCollectionParameters().with_notes(notes))

    async def set_rating(self, set_id: int, rating: int) -> SetCollectionResponse:
        return await self.set_collection(set_id, SetCollectionParameters().with_rating(rating))

    async def get_notes(self) -> GetUserNotesResponse:
        """The user's notes on sets."""
        user_hash = self._require_user_hash("get_notes")
        return await self._call(GetUserNotes(self.api_key, user_hash))

    async def get_minifig_collection(
        self, params: GetMinifigCollectionParameters
    ) -> GetMinifigCollectionResponse:
        user_hash = self._require_user_hash("get_minifig_collection")
        return await self._call(GetMinifigCollection(self.api_key, user_hash, params))

    async def get_owned_minifigs(self, query: str | None = None) -> GetMinifigCollectionResponse:
        """Minifigs the user owns, optionally filtered by number or name."""
        params = GetMinifigCollectionParameters.for_owned().with_query(query)
        return await self.get_minifig_collection(params)

    async def get_wanted_minifigs(self, query: str | None = None) -> GetMinifigCollectionResponse:
        """Minifigs the user wants, optionally filtered by number or name."""
        params = GetMinifigCollectionParameters.for_wanted().with_query(query)
        return await self.get_minifig_collection(params)

    async def set_minifig_collection(
        self, minifig_number: str, params: SetMinifigCollectionParameters
    ) -> SetMinifigCollectionResponse:
        user_hash = self._require_user_hash("set_minifig_collection")
        request = SetMinifigCollection(self.api_key, user_hash, minifig_number, params)
        return await self._call(request)

    async def set_minifig_owned(
        self, minifig_number: str, qty_owned: int
    ) -> SetMinifigCollectionResponse:
        params = SetMinifigCollectionParameters().with_owned(qty_owned)
        return await self.set_minifig_collection(minifig_number, params)

    async def set_minifig_wanted(
        self, minifig_number: str, wanted: bool
    ) -> SetMinifigCollectionResponse:
        params = SetMinifigCollectionParameters().with_wanted(wanted)
        return await self.set_minifig_collection(minifig_number, params)

    async def set_minifig_notes(self, minifig_number: str, notes: str) -> SetMinifigCollectionResponse:
        params = SetMinifigCollectionParameters().with_notes(notes)
        return await self.set_minifig_collection(minifig_number, params)

    async def get_minifig_notes(self) -> GetMinifigUserNotesResponse:
        user_hash = self._require_user_hash("get_minifig_notes")
        return await self._call(GetUserMinifigNotes(self.api_key, user_hash))
