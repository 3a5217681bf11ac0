"""Fixed lookup tables used when rendering component docs."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

GLOBAL_STYLE_TOKENS: frozenset[str] = frozenset(
    {
        "--gmpx-color-surface",
        "--gmpx-color-on-surface",
        "--gmpx-color-on-surface-variant",
        "--gmpx-color-primary",
        "--gmpx-color-on-primary",
        "--gmpx-font-family-base",
        "--gmpx-font-family-headings",
        "--gmpx-font-size-base",
    }
)

CSS_CUSTOM_PROPERTY_DEFAULTS: Mapping[str, str] = MappingProxyType(
    {
        "--gmpx-color-surface": "#fff",
        "--gmpx-color-on-surface": "#212121",
        "--gmpx-color-on-surface-variant": "#757575",
        "--gmpx-color-primary": "#1e88e5",
        "--gmpx-color-on-primary": "#fff",
        "--gmpx-font-family-base": "'Google Sans Text', sans-serif",
        "--gmpx-font-family-headings": "--gmpx-font-family-base",
        "--gmpx-font-size-base": "0.875rem",
        "--gmpx-rating-color": "#ffb300",
        "--gmpx-rating-color-empty": "#e0e0e0",
    }
)

COMPONENTS_STYLED_AS_TEXT: frozenset[str] = frozenset(
    {
        "PlaceAttribution",
        "PlaceFieldLink",
        "PlaceFieldText",
        "PlaceOpeningHours",
        "PlacePriceLevel",
    }
)

FRIENDLY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "APILoader": "API Loader",
        "IconButton": "Icon Button",
        "OverlayLayout": "Overlay Layout",
        "PlaceOverview": "Place Overview",
        "PlacePicker": "Place Picker",
        "SplitLayout": "Split Layout",
        "PlaceDataProvider": "Place Data Provider",
        "PlaceAttribution": "Attribution",
        "PlaceDirectionsButton": "Directions Button",
        "PlaceFieldBoolean": "Boolean Place Field",
        "PlaceFieldLink": "Place Link",
        "PlaceFieldText": "Textual Place Field",
        "PlaceOpeningHours": "Opening Hours",
        "PlacePhotoGallery": "Photo Gallery",
        "PlacePriceLevel": "Price Level",
        "PlaceRating": "Rating",
        "PlaceReviews": "Reviews",
    }
)

REFLECTS_GLYPH = "✅"
NOT_REFLECTS_GLYPH = "❌"
GLOBAL_TOKEN_MARKER = "🌎"
DEFAULT_SLOT_LABEL = "*(default)*"
INVENTORY_HEADER: tuple[str, str] = ("Component", "Description")


__all__ = [
    "COMPONENTS_STYLED_AS_TEXT",
    "CSS_CUSTOM_PROPERTY_DEFAULTS",
    "DEFAULT_SLOT_LABEL",
    "FRIENDLY_NAMES",
    "GLOBAL_STYLE_TOKENS",
    "GLOBAL_TOKEN_MARKER",
    "INVENTORY_HEADER",
    "NOT_REFLECTS_GLYPH",
    "REFLECTS_GLYPH",
]
