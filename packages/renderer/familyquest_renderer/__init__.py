"""Renderer package for FamilyQuest shareable milestone cards."""

from .catalog import (
    CARD_COLOR_SCHEMES,
    CARD_TEMPLATES,
    DEFAULT_COLOR_SCHEME_NAME,
    get_color_scheme,
    get_template,
    list_color_schemes,
    list_templates,
)
from .colors import Color
from .composers import COMPOSERS, composer_for
from .encoding import decode_data_uri, encode
from .errors import (
    CardEngineError,
    ClipboardError,
    InvalidCardDataError,
    InvalidColorError,
    InvalidDataUriError,
    RenderFailure,
    SurfaceUnavailableError,
)
from .models import (
    CardCanvasOptions,
    CardColorScheme,
    CardDimensions,
    CardGenerationData,
    CardLayout,
    CardTemplate,
    FamilyData,
    MilestoneData,
    TemplateId,
)
from .primitives import PrimitiveRenderer, TextLine, wrap_text
from .renderer import CardRenderer
from .surface import CardSurface, create_surface

__all__ = [
    "CARD_COLOR_SCHEMES",
    "CARD_TEMPLATES",
    "COMPOSERS",
    "DEFAULT_COLOR_SCHEME_NAME",
    "CardCanvasOptions",
    "CardColorScheme",
    "CardDimensions",
    "CardEngineError",
    "CardGenerationData",
    "CardLayout",
    "CardRenderer",
    "CardSurface",
    "CardTemplate",
    "ClipboardError",
    "Color",
    "FamilyData",
    "InvalidCardDataError",
    "InvalidColorError",
    "InvalidDataUriError",
    "MilestoneData",
    "PrimitiveRenderer",
    "RenderFailure",
    "SurfaceUnavailableError",
    "TemplateId",
    "TextLine",
    "composer_for",
    "create_surface",
    "decode_data_uri",
    "encode",
    "get_color_scheme",
    "get_template",
    "list_color_schemes",
    "list_templates",
    "wrap_text",
]
