"""
Typed payloads for successful Brickset responses.

Models are decoded in pydantic strict mode straight from the response text:
a field with the wrong JSON kind is a schema mismatch, unknown keys are
ignored, and fields the service may leave out fall back to None or an
empty default. Field-level quirks are handled by the codecs in
brickset.codecs ("{Not specified}" strings, zero ratings).

JSON keys are camelCase; the handful of upper-case keys (setID, LEGOCom,
URL, ...) are given explicitly.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from brickset.codecs import NotSpecifiedStr, ZeroNone


class ResponseModel(BaseModel):
    """Base for all response payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
    )


# =============================================================================
# NESTED RECORDS
# =============================================================================


class Image(ResponseModel):
    thumbnail_url: str | None = Field(default=None, alias="thumbnailURL")
    image_url: str | None = Field(default=None, alias="imageURL")


class Collection(ResponseModel):
    """The logged-in user's relationship to a set."""

    is_owned: bool | None = Field(default=None, alias="owned")
    is_wanted: bool | None = Field(default=None, alias="wanted")
    qty_owned: int | None = None
    rating: float | None = None
    notes: str | None = None


class Collections(ResponseModel):
    """How many Brickset members own or want a set."""

    owned_by: int | None = None
    wanted_by: int | None = None


class LegoComDetails(ResponseModel):
    retail_price: float | None = None
    date_first_available: datetime | None = None
    date_last_available: datetime | None = None


class LegoCom(ResponseModel):
    """LEGO.com pricing and availability per region."""

    united_states: LegoComDetails = Field(default_factory=LegoComDetails, alias="US")
    united_kingdom: LegoComDetails = Field(default_factory=LegoComDetails, alias="UK")
    canada: LegoComDetails = Field(default_factory=LegoComDetails, alias="CA")
    germany: LegoComDetails = Field(default_factory=LegoComDetails, alias="DE")


class AgeRange(ResponseModel):
    min: float | None = None
    max: float | None = None


class Dimensions(ResponseModel):
    height: float | None = None
    width: float | None = None
    depth: float | None = None
    weight: float | None = None


class Barcode(ResponseModel):
    upc: str | None = Field(default=None, alias="UPC")
    ean: str | None = Field(default=None, alias="EAN")


class ExtendedData(ResponseModel):
    """Only populated when getSets is called with extendedData."""

    description: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)


class Set(ResponseModel):
    """
    One set from getSets.

    Text fields the service reports as "{Not specified}" decode to None.
    """

    set_id: int = Field(alias="setID")
    number: str
    number_variant: int | None = None
    name: NotSpecifiedStr = None
    year: int | None = None
    theme: NotSpecifiedStr = None
    theme_group: NotSpecifiedStr = None
    subtheme: NotSpecifiedStr = None
    category: NotSpecifiedStr = None
    released: bool | None = None
    pieces: int | None = None
    minifigs: int | None = None
    image: Image = Field(default_factory=Image)
    brickset_url: str | None = Field(default=None, alias="bricksetURL")
    collection: Collection = Field(default_factory=Collection)
    collections: Collections = Field(default_factory=Collections)
    lego_com: LegoCom = Field(default_factory=LegoCom, alias="LEGOCom")
    rating: float = 0.0
    review_count: int = 0
    packaging_type: NotSpecifiedStr = None
    availability: NotSpecifiedStr = None
    instructions_count: int = 0
    additional_image_count: int = 0
    age_range: AgeRange = Field(default_factory=AgeRange)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    barcode: Barcode = Field(default_factory=Barcode)
    extended_data: ExtendedData = Field(default_factory=ExtendedData)
    last_updated: datetime | None = None

    @property
    def full_number(self) -> str:
        """Set number with its variant, e.g. "6876-1"."""
        if self.number_variant is None:
            return self.number
        return f"{self.number}-{self.number_variant}"


class ApiKeyUsage(ResponseModel):
    date_stamp: datetime
    count: int


class Instructions(ResponseModel):
    url: str = Field(alias="URL")
    description: str = ""


class Rating(ResponseModel):
    """
    A review's rating breakdown.

    Sub-ratings the reviewer skipped are sent as 0 and decode to None.
    """

    overall: int
    parts: ZeroNone = None
    building_experience: ZeroNone = None
    playability: ZeroNone = None
    value_for_money: ZeroNone = None


class Review(ResponseModel):
    author: str
    date_posted: datetime
    rating: Rating
    title: str
    review: str
    html: bool = Field(default=False, alias="HTML")


class Theme(ResponseModel):
    name: str = Field(alias="theme")
    set_count: int
    subtheme_count: int
    year_from: int
    year_to: int


class Subtheme(ResponseModel):
    theme: str
    name: str = Field(alias="subtheme")
    set_count: int
    year_from: int
    year_to: int


class Year(ResponseModel):
    theme: str
    year: int
    set_count: int


class UserNote(ResponseModel):
    set_id: int = Field(alias="setID")
    notes: str


class MinifigCollection(ResponseModel):
    minifig_number: str
    name: str
    category: str
    owned_in_sets: int
    owned_loose: int
    owned_total: int
    wanted: bool


class UserMinifigNote(ResponseModel):
    minifig_number: str
    notes: str


# =============================================================================
# PER-METHOD PAYLOADS
# =============================================================================


class CheckKeyResponse(ResponseModel):
    pass


class LoginResponse(ResponseModel):
    hash: str


class CheckUserHashResponse(ResponseModel):
    pass


class GetKeyUsageStatsResponse(ResponseModel):
    matches: int = 0
    api_key_usage: list[ApiKeyUsage] = Field(default_factory=list)


class GetSetsResponse(ResponseModel):
    matches: int = 0
    sets: list[Set] = Field(default_factory=list)


class GetAdditionalImagesResponse(ResponseModel):
    matches: int = 0
    additional_images: list[Image] = Field(default_factory=list)


class GetInstructionsResponse(ResponseModel):
    """Payload for both getInstructions and getInstructions2."""

    matches: int = 0
    instructions: list[Instructions] = Field(default_factory=list)


class GetReviewsResponse(ResponseModel):
    matches: int = 0
    reviews: list[Review] = Field(default_factory=list)


class GetThemesResponse(ResponseModel):
    matches: int = 0
    themes: list[Theme] = Field(default_factory=list)


class GetSubthemesResponse(ResponseModel):
    matches: int = 0
    subthemes: list[Subtheme] = Field(default_factory=list)


class GetYearsResponse(ResponseModel):
    matches: int = 0
    years: list[Year] = Field(default_factory=list)


class SetCollectionResponse(ResponseModel):
    pass


class GetUserNotesResponse(ResponseModel):
    matches: int = 0
    user_notes: list[UserNote] = Field(default_factory=list)


class GetMinifigCollectionResponse(ResponseModel):
    matches: int = 0
    minifigs: list[MinifigCollection] = Field(default_factory=list)


class SetMinifigCollectionResponse(ResponseModel):
    pass


class GetMinifigUserNotesResponse(ResponseModel):
    matches: int = 0
    user_minifig_notes: list[UserMinifigNote] = Field(default_factory=list)
