"""Built-in card color schemes and template catalog."""

from __future__ import annotations

from .models import CardColorScheme, CardDimensions, CardLayout, CardTemplate

DEFAULT_COLOR_SCHEME_NAME = "mint_celebration"
DEFAULT_TEMPLATE_ID = "celebration"

CARD_COLOR_SCHEMES: dict[str, CardColorScheme] = {
    "mint_celebration": CardColorScheme.from_dict(
        {
            "primary": "#B9F5D0",
            "secondary": "#A7F3D0",
            "accent": "#C4B5FD",
            "background": "#ECFDF5",
            "text": "#121212",
            "text_secondary": "#717171",
        }
    ),
    "lavender_dream": CardColorScheme.from_dict(
        {
            "primary": "#E2D7FB",
            "secondary": "#C4B5FD",
            "accent": "#F7E1F5",
            "background": "#F6F6FF",
            "text": "#121212",
            "text_secondary": "#717171",
        }
    ),
    "sunny_achievement": CardColorScheme.from_dict(
        {
            "primary": "#FFE9A7",
            "secondary": "#F7E1F5",
            "accent": "#B9F5D0",
            "background": "#FFF8E7",
            "text": "#121212",
            "text_secondary": "#717171",
        }
    ),
    "family_warmth": CardColorScheme.from_dict(
        {
            "primary": "#F7E1F5",
            "secondary": "#E2D7FB",
            "accent": "#FFE9A7",
            "background": "#F7FAFC",
            "text": "#121212",
            "text_secondary": "#717171",
        }
    ),
}

# Schemes offered per template, in display order.
TEMPLATE_COLOR_SCHEMES: dict[str, tuple[str, ...]] = {
    "celebration": ("mint_celebration", "lavender_dream", "sunny_achievement"),
    "progress": ("mint_celebration", "lavender_dream", "family_warmth"),
    "achievement": ("sunny_achievement", "mint_celebration", "lavender_dream"),
    "family": ("family_warmth", "lavender_dream", "mint_celebration"),
}

CARD_TEMPLATES: dict[str, CardTemplate] = {
    "celebration": CardTemplate(
        id="celebration",
        name="Milestone Celebration",
        description="Perfect for celebrating achieved milestones",
        is_premium=False,
        layout=CardLayout(type="vertical", dimensions=CardDimensions(400, 400)),
    ),
    "progress": CardTemplate(
        id="progress",
        name="Progress Update",
        description="Show off your family's progress towards a goal",
        is_premium=False,
        layout=CardLayout(type="horizontal", dimensions=CardDimensions(320, 300)),
    ),
    "achievement": CardTemplate(
        id="achievement",
        name="Achievement Unlocked",
        description="Gamified achievement card for major milestones",
        is_premium=True,
        layout=CardLayout(type="square", dimensions=CardDimensions(320, 320)),
    ),
    "family": CardTemplate(
        id="family",
        name="Family Together",
        description="Celebrate the whole family pulling towards one goal",
        is_premium=False,
        layout=CardLayout(type="square", dimensions=CardDimensions(400, 400)),
    ),
}


def list_templates() -> list[str]:
    return list(CARD_TEMPLATES.keys())


def get_template(template_id: str | None) -> CardTemplate:
    if not template_id:
        return CARD_TEMPLATES[DEFAULT_TEMPLATE_ID]
    return CARD_TEMPLATES.get(template_id, CARD_TEMPLATES[DEFAULT_TEMPLATE_ID])


def list_color_schemes() -> list[str]:
    return sorted(CARD_COLOR_SCHEMES.keys())


def get_color_scheme(name: str | None) -> CardColorScheme:
    if not name:
        return CARD_COLOR_SCHEMES[DEFAULT_COLOR_SCHEME_NAME]
    return CARD_COLOR_SCHEMES.get(name, CARD_COLOR_SCHEMES[DEFAULT_COLOR_SCHEME_NAME])
