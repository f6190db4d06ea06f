from brickset.models.envelope import (
    Envelope,
    Err,
    Ok,
    RemoteErrorPayload,
    Result,
    Status,
    decode_envelope,
)
from brickset.models.params import (
    MAX_PAGE_SIZE,
    ORDER_BY_PAIRS,
    GetMinifigCollectionParameters,
    GetSetsParameters,
    OrderBy,
    SetCollectionParameters,
    SetMinifigCollectionParameters,
)
from brickset.models.responses import (
    AgeRange,
    ApiKeyUsage,
    Barcode,
    CheckKeyResponse,
    CheckUserHashResponse,
    Collection,
    Collections,
    Dimensions,
    ExtendedData,
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
    Image,
    Instructions,
    LegoCom,
    LegoComDetails,
    LoginResponse,
    MinifigCollection,
    Rating,
    ResponseModel,
    Review,
    Set,
    SetCollectionResponse,
    SetMinifigCollectionResponse,
    Subtheme,
    Theme,
    UserMinifigNote,
    UserNote,
    Year,
)

__all__ = [
    # Envelope
    "Envelope",
    "Err",
    "Ok",
    "RemoteErrorPayload",
    "Result",
    "Status",
    "decode_envelope",
    # Parameter bags
    "MAX_PAGE_SIZE",
    "ORDER_BY_PAIRS",
    "GetMinifigCollectionParameters",
    "GetSetsParameters",
    "OrderBy",
    "SetCollectionParameters",
    "SetMinifigCollectionParameters",
    # Responses
    "AgeRange",
    "ApiKeyUsage",
    "Barcode",
    "CheckKeyResponse",
    "CheckUserHashResponse",
    "Collection",
    "Collections",
    "Dimensions",
    "ExtendedData",
    "GetAdditionalImagesResponse",
    "GetInstructionsResponse",
    "GetKeyUsageStatsResponse",
    "GetMinifigCollectionResponse",
    "GetMinifigUserNotesResponse",
    "GetReviewsResponse",
    "GetSetsResponse",
    "GetSubthemesResponse",
    "GetThemesResponse",
    "GetUserNotesResponse",
    "GetYearsResponse",
    "Image",
    "Instructions",
    "LegoCom",
    "LegoComDetails",
    "LoginResponse",
    "MinifigCollection",
    "Rating",
    "ResponseModel",
    "Review",
    "Set",
    "SetCollectionResponse",
    "SetMinifigCollectionResponse",
    "Subtheme",
    "Theme",
    "UserMinifigNote",
    "UserNote",
    "Year",
]
