"""
Parameter bags for Brickset methods that take a JSON ``params`` argument.

Bags are immutable. Every ``with_*`` call returns a new, validated bag with
one field changed; passing None clears the field, and a value that does not
fit its field raises EncodeError. Unset fields are left out of the
serialized JSON entirely.

Example:
    params = (
        GetSetsParameters()
        .with_query("fire truck")
        .with_theme("City")
        .with_order_by(OrderBy.PIECES.reversed())
    )
    params.to_json()
    # '{"query":"fire truck","theme":"City","orderBy":"PiecesDESC"}'
"""

from collections.abc import Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from brickset.codecs import Flag, IntList
from brickset.errors import EncodeError, decode_error_from_validation

# Service-side page size limit for getSets
MAX_PAGE_SIZE = 500


class OrderBy(str, Enum):
    """Sort orders accepted by getSets. Each has a descending mirror."""

    NUMBER = "Number"
    YEAR_FROM = "YearFrom"
    PIECES = "Pieces"
    MINIFIGS = "Minifigs"
    RATING = "Rating"
    US_RETAIL_PRICE = "USRetailPrice"
    UK_RETAIL_PRICE = "UKRetailPrice"
    CA_RETAIL_PRICE = "CARetailPrice"
    DE_RETAIL_PRICE = "DERetailPrice"
    FR_RETAIL_PRICE = "FRRetailPrice"
    US_PRICE_PER_PIECE = "USPricePerPiece"
    UK_PRICE_PER_PIECE = "UKPricePerPiece"
    CA_PRICE_PER_PIECE = "CAPricePerPiece"
    DE_PRICE_PER_PIECE = "DEPricePerPiece"
    FR_PRICE_PER_PIECE = "FRPricePerPiece"
    THEME = "Theme"
    SUBTHEME = "Subtheme"
    NAME = "Name"
    RANDOM = "Random"
    QTY_OWNED = "QtyOwned"
    OWN_COUNT = "OwnCount"
    WANT_COUNT = "WantCount"
    USER_RATING = "UserRating"
    COLLECTION_ID = "CollectionID"

    NUMBER_DESC = "NumberDESC"
    YEAR_FROM_DESC = "YearFromDESC"
    PIECES_DESC = "PiecesDESC"
    MINIFIGS_DESC = "MinifigsDESC"
    RATING_DESC = "RatingDESC"
    US_RETAIL_PRICE_DESC = "USRetailPriceDESC"
    UK_RETAIL_PRICE_DESC = "UKRetailPriceDESC"
    CA_RETAIL_PRICE_DESC = "CARetailPriceDESC"
    DE_RETAIL_PRICE_DESC = "DERetailPriceDESC"
    FR_RETAIL_PRICE_DESC = "FRRetailPriceDESC"
    US_PRICE_PER_PIECE_DESC = "USPricePerPieceDESC"
    UK_PRICE_PER_PIECE_DESC = "UKPricePerPieceDESC"
    CA_PRICE_PER_PIECE_DESC = "CAPricePerPieceDESC"
    DE_PRICE_PER_PIECE_DESC = "DEPricePerPieceDESC"
    FR_PRICE_PER_PIECE_DESC = "FRPricePerPieceDESC"
    THEME_DESC = "ThemeDESC"
    SUBTHEME_DESC = "SubthemeDESC"
    NAME_DESC = "NameDESC"
    RANDOM_DESC = "RandomDESC"
    QTY_OWNED_DESC = "QtyOwnedDESC"
    OWN_COUNT_DESC = "OwnCountDESC"
    WANT_COUNT_DESC = "WantCountDESC"
    USER_RATING_DESC = "UserRatingDESC"
    COLLECTION_ID_DESC = "CollectionIDDESC"

    def reversed(self) -> "OrderBy":
        """
        The same ordering in the opposite direction.

        ``OrderBy.NUMBER.reversed()`` is ``OrderBy.NUMBER_DESC`` and vice versa.
        """
        return _REVERSED[self]

    @property
    def is_descending(self) -> bool:
        return self in _DESCENDING


# (ascending, descending) pairs. reversed() is derived from this table only.
ORDER_BY_PAIRS: tuple[tuple[OrderBy, OrderBy], ...] = (
    (OrderBy.NUMBER, OrderBy.NUMBER_DESC),
    (OrderBy.YEAR_FROM, OrderBy.YEAR_FROM_DESC),
    (OrderBy.PIECES, OrderBy.PIECES_DESC),
    (OrderBy.MINIFIGS, OrderBy.MINIFIGS_DESC),
    (OrderBy.RATING, OrderBy.RATING_DESC),
    (OrderBy.US_RETAIL_PRICE, OrderBy.US_RETAIL_PRICE_DESC),
    (OrderBy.UK_RETAIL_PRICE, OrderBy.UK_RETAIL_PRICE_DESC),
    (OrderBy.CA_RETAIL_PRICE, OrderBy.CA_RETAIL_PRICE_DESC),
    (OrderBy.DE_RETAIL_PRICE, OrderBy.DE_RETAIL_PRICE_DESC),
    (OrderBy.FR_RETAIL_PRICE, OrderBy.FR_RETAIL_PRICE_DESC),
    (OrderBy.US_PRICE_PER_PIECE, OrderBy.US_PRICE_PER_PIECE_DESC),
    (OrderBy.UK_PRICE_PER_PIECE, OrderBy.UK_PRICE_PER_PIECE_DESC),
    (OrderBy.CA_PRICE_PER_PIECE, OrderBy.CA_PRICE_PER_PIECE_DESC),
    (OrderBy.DE_PRICE_PER_PIECE, OrderBy.DE_PRICE_PER_PIECE_DESC),
    (OrderBy.FR_PRICE_PER_PIECE, OrderBy.FR_PRICE_PER_PIECE_DESC),
    (OrderBy.THEME, OrderBy.THEME_DESC),
    (OrderBy.SUBTHEME, OrderBy.SUBTHEME_DESC),
    (OrderBy.NAME, OrderBy.NAME_DESC),
    (OrderBy.RANDOM, OrderBy.RANDOM_DESC),
    (OrderBy.QTY_OWNED, OrderBy.QTY_OWNED_DESC),
    (OrderBy.OWN_COUNT, OrderBy.OWN_COUNT_DESC),
    (OrderBy.WANT_COUNT, OrderBy.WANT_COUNT_DESC),
    (OrderBy.USER_RATING, OrderBy.USER_RATING_DESC),
    (OrderBy.COLLECTION_ID, OrderBy.COLLECTION_ID_DESC),
)

_REVERSED: dict[OrderBy, OrderBy] = {
    **{asc: desc for asc, desc in ORDER_BY_PAIRS},
    **{desc: asc for asc, desc in ORDER_BY_PAIRS},
}

_DESCENDING = frozenset(desc for _, desc in ORDER_BY_PAIRS)


# =============================================================================
# BASE
# =============================================================================


class _Parameters(BaseModel):
    """Shared serialization for parameter bags."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> str:
        """
        Compact JSON as sent in the ``params`` argument.

        Raises:
            EncodeError: If a field value cannot be serialized
        """
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"Could not serialize {type(self).__name__}: {e}") from e

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """
        Decode a bag from its JSON form, applying the same field codecs.

        Raises:
            DecodeError: If the JSON is malformed or a field is invalid
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise decode_error_from_validation(e) from e

    def _with(self, **changes: Any) -> Self:
        """
        Copy with some fields changed, validating the result.

        Raises:
            EncodeError: If a new value does not fit its field
        """
        try:
            return type(self).model_validate({**dict(self), **changes})
        except ValidationError as e:
            raise EncodeError(f"Invalid {type(self).__name__} value: {e}") from e


def _check_quantity(qty_owned: int) -> int:
    if qty_owned < 0:
        raise ValueError(f"qty_owned must not be negative, got {qty_owned}")
    return qty_owned


# =============================================================================
# getSets
# =============================================================================


class GetSetsParameters(_Parameters):
    """Filters, sorting and paging for getSets."""

    set_id: int | None = Field(default=None, alias="setID")
    query: str | None = None
    theme: str | None = None
    subtheme: str | None = None
    full_set_number: str | None = Field(default=None, alias="setNumber")
    year: IntList | None = None
    tag: str | None = None
    owned: Flag | None = None
    wanted: Flag | None = None
    updated_since: date | None = Field(default=None, alias="updatedSince")
    order_by: OrderBy | None = Field(default=None, alias="orderBy")
    page_size: int | None = Field(default=None, alias="pageSize")
    page_number: int | None = Field(default=None, alias="pageNumber")
    extended_data: Flag | None = Field(default=None, alias="extendedData")

    def with_set_id(self, set_id: int | None) -> Self:
        """Only return a single set ID."""
        return self._with(set_id=set_id)

    def with_query(self, query: str | None) -> Self:
        """Search set number, name, theme and subtheme."""
        return self._with(query=query)

    def with_theme(self, theme: str | None) -> Self:
        return self._with(theme=theme)

    def with_subtheme(self, subtheme: str | None) -> Self:
        return self._with(subtheme=subtheme)

    def with_full_set_number(self, full_set_number: str | None) -> Self:
        """Full set number including the variant, e.g. "6876-1"."""
        return self._with(full_set_number=full_set_number)

    def with_year(self, year: int | None) -> Self:
        """Only return sets from a single year. Replaces any previous years."""
        return self._with(year=None if year is None else [year])

    def with_years(self, years: Sequence[int] | None) -> Self:
        """Only return sets from any of several years. An empty list clears the filter."""
        return self._with(year=list(years) if years else None)

    def with_tag(self, tag: str | None) -> Self:
        return self._with(tag=tag)

    def with_owned_by_user(self, owned: bool) -> Self:
        """Only return sets the user owns. Needs a user hash."""
        return self._with(owned=True if owned else None)

    def with_wanted_by_user(self, wanted: bool) -> Self:
        """Only return sets the user wants. Needs a user hash."""
        return self._with(wanted=True if wanted else None)

    def with_extended_data(self, extended_data: bool) -> Self:
        """Include tags, description and notes in each set."""
        return self._with(extended_data=True if extended_data else None)

    def with_updated_since(self, updated_since: date | None) -> Self:
        if isinstance(updated_since, datetime):
            updated_since = updated_since.date()
        return self._with(updated_since=updated_since)

    def with_order_by(self, order_by: OrderBy | None) -> Self:
        return self._with(order_by=order_by)

    def with_page_size(self, page_size: int | None) -> Self:
        """
        Number of sets per page. The service maximum is 500, its default 20.

        Out-of-range values are kept as given; the encoder reports them as
        warnings rather than rejecting them.
        """
        return self._with(page_size=page_size)

    def with_page_number(self, page_number: int | None) -> Self:
        """Page to fetch, starting at 1. Use with with_page_size()."""
        return self._with(page_number=page_number)

    @property
    def filters_by_user(self) -> bool:
        """True if owned/wanted filtering is requested."""
        return self.owned is not None or self.wanted is not None

    def page_size_warning(self) -> str | None:
        """Advisory message for a page size the service will not honor."""
        if self.page_size is None:
            return None
        if self.page_size > MAX_PAGE_SIZE:
            return f"Given page_size was {self.page_size}, but the maximum is {MAX_PAGE_SIZE}"
        if self.page_size == 0:
            return "Zero page size is not valid"
        return None


# =============================================================================
# setCollection
# =============================================================================


class SetCollectionParameters(_Parameters):
    """
    Changes to one set in the user's collection.

    An empty bag changes nothing. Each ``with_*`` call adds one change.
    """

    own: int | None = None
    want: int | None = None
    qty_owned: int | None = Field(default=None, alias="qtyOwned")
    notes: str | None = None
    rating: int | None = None

    def with_owned(self, qty_owned: int) -> Self:
        """
        Record how many of this set the user owns.

        Zero removes the set from the owned list: ``own`` is left unset and
        ``qtyOwned`` is sent as 0.
        """
        _check_quantity(qty_owned)
        own = None if qty_owned == 0 else 1
        return self._with(own=own, qty_owned=qty_owned)

    def with_wanted(self, wanted: bool) -> Self:
        return self._with(want=1 if wanted else 0)

    def with_notes(self, notes: str | None) -> Self:
        return self._with(notes=notes)

    def with_rating(self, rating: int | None) -> Self:
        return self._with(rating=rating)


# =============================================================================
# getMinifigCollection / setMinifigCollection
# =============================================================================


class GetMinifigCollectionParameters(_Parameters):
    """Which of the user's minifigs to list."""

    owned: Flag | None = None
    wanted: Flag | None = None
    query: str | None = None

    @classmethod
    def for_owned(cls) -> Self:
        """Minifigs the user owns."""
        return cls(owned=True)

    @classmethod
    def for_wanted(cls) -> Self:
        """Minifigs the user wants."""
        return cls(wanted=True)

    def with_query(self, query: str | None) -> Self:
        """Filter by minifig number and name."""
        return self._with(query=query)


class SetMinifigCollectionParameters(_Parameters):
    """Changes to one minifig in the user's collection."""

    own: int | None = None
    want: int | None = None
    qty_owned: int | None = Field(default=None, alias="qtyOwned")
    notes: str | None = None

    def with_owned(self, qty_owned: int) -> Self:
        """
        Record how many loose copies of this minifig the user owns.

        Zero removes it from the owned list: ``own`` is sent as 0 and
        ``qtyOwned`` is left unset.
        """
        _check_quantity(qty_owned)
        if qty_owned == 0:
            return self._with(own=0, qty_owned=None)
        return self._with(own=None, qty_owned=qty_owned)

    def with_wanted(self, wanted: bool) -> Self:
        return self._with(want=1 if wanted else 0)

    def with_notes(self, notes: str | None) -> Self:
        return self._with(notes=notes)
