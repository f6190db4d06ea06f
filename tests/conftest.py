from typing import Any

import pytest

API_KEY = "12345678"


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def sample_set() -> dict[str, Any]:
    """One set as returned by getSets with extendedData."""
    return {
        "setID": 28890,
        "number": "60214",
        "numberVariant": 1,
        "name": "Burger Bar Fire Rescue",
        "year": 2019,
        "theme": "City",
        "themeGroup": "Modern day",
        "subtheme": "Fire",
        "category": "Normal",
        "released": True,
        "pieces": 327,
        "minifigs": 3,
        "image": {
            "thumbnailURL": "https://images.brickset.com/sets/small/60214-1.jpg",
            "imageURL": "https://images.brickset.com/sets/images/60214-1.jpg",
        },
        "bricksetURL": "https://brickset.com/sets/60214-1",
        "collection": {"owned": True, "wanted": False, "qtyOwned": 1, "rating": 4, "notes": ""},
        "collections": {"ownedBy": 5410, "wantedBy": 512},
        "LEGOCom": {
            "US": {
                "retailPrice": 39.99,
                "dateFirstAvailable": "2019-01-01T00:00:00Z",
                "dateLastAvailable": "2020-12-31T00:00:00Z",
            },
            "UK": {"retailPrice": 34.99},
            "CA": {},
            "DE": {},
        },
        "rating": 3.9,
        "reviewCount": 2,
        "packagingType": "Box",
        "availability": "{Not specified}",
        "instructionsCount": 2,
        "additionalImageCount": 11,
        "ageRange": {"min": 5},
        "dimensions": {"height": 26.2, "width": 28.2, "depth": 6.1, "weight": 0.6},
        "barcode": {"EAN": "5702016369687", "UPC": "673419303736"},
        "extendedData": {"tags": ["Fire Station", "Burger"], "description": "Save the burger bar!"},
        "lastUpdated": "2023-03-14T10:41:22.05",
    }
