"""Typed card models consumed by the composers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .colors import Color
from .errors import InvalidCardDataError

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400

COLOR_SLOTS = ("background", "text", "text_secondary", "primary", "secondary", "accent")


def _pick(raw: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _section(raw: Any, name: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidCardDataError(f"{name} must be a mapping, got {type(raw).__name__}")
    return raw


def clamp_percentage(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCardDataError(f"progress percentage must be numeric, got {value!r}") from exc
    if math.isnan(number):
        raise InvalidCardDataError("progress percentage must not be NaN")
    return max(0.0, min(100.0, number))


@dataclass(frozen=True)
class CardColorScheme:
    background: Color
    text: Color
    text_secondary: Color
    primary: Color
    secondary: Color
    accent: Color

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CardColorScheme:
        if not isinstance(raw, dict):
            raise InvalidCardDataError("color scheme must be a mapping")
        missing = [slot for slot in COLOR_SLOTS if slot not in raw]
        if "text_secondary" in missing and "textSecondary" in raw:
            missing.remove("text_secondary")
        if missing:
            raise InvalidCardDataError(f"color scheme is missing slots: {', '.join(missing)}")
        return cls(
            background=Color.parse(raw["background"]),
            text=Color.parse(raw["text"]),
            text_secondary=Color.parse(_pick(raw, "text_secondary", "textSecondary")),
            primary=Color.parse(raw["primary"]),
            secondary=Color.parse(raw["secondary"]),
            accent=Color.parse(raw["accent"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {slot: getattr(self, slot).to_hex() for slot in COLOR_SLOTS}


@dataclass(frozen=True)
class CardDimensions:
    width: int
    height: int

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise InvalidCardDataError(f"card dimensions must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class CardLayout:
    type: str = "square"
    dimensions: CardDimensions | None = None


@dataclass(frozen=True)
class CardTemplate:
    id: str
    name: str
    description: str = ""
    is_premium: bool = False
    layout: CardLayout = field(default_factory=CardLayout)

    @property
    def dimensions(self) -> CardDimensions | None:
        return self.layout.dimensions


@dataclass(frozen=True)
class MilestoneData:
    title: str
    achieved_at: str
    goal_title: str
    progress_percentage: float

    def __post_init__(self) -> None:
        # Composers draw this value as-is; keep it inside [0, 100] from here on.
        object.__setattr__(self, "progress_percentage", clamp_percentage(self.progress_percentage))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> MilestoneData:
        raw = _section(raw, "milestone data")
        return cls(
            title=str(_pick(raw, "title", default="")),
            achieved_at=str(_pick(raw, "achievedAt", "achieved_at", default="")),
            goal_title=str(_pick(raw, "goalTitle", "goal_title", default="")),
            progress_percentage=_pick(raw, "progressPercentage", "progress_percentage", default=0),
        )


@dataclass(frozen=True)
class FamilyData:
    name: str
    member_count: int
    avatars: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if int(self.member_count) < 0:
            raise InvalidCardDataError(f"member count must be >= 0, got {self.member_count}")
        object.__setattr__(self, "avatars", tuple(self.avatars))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> FamilyData:
        raw = _section(raw, "family data")
        avatars = _pick(raw, "avatars", default=[])
        if not isinstance(avatars, (list, tuple)):
            raise InvalidCardDataError(f"avatars must be a list, got {type(avatars).__name__}")
        try:
            member_count = int(_pick(raw, "memberCount", "member_count", default=0))
        except (TypeError, ValueError) as exc:
            raise InvalidCardDataError("member count must be an integer") from exc
        return cls(
            name=str(_pick(raw, "name", default="")),
            member_count=member_count,
            avatars=tuple(str(a) for a in avatars),
        )


@dataclass(frozen=True)
class CardGenerationData:
    title: str
    milestone_data: MilestoneData
    family_data: FamilyData
    color_scheme: CardColorScheme
    subtitle: str | None = None
    description: str | None = None
    custom_text: str | None = None

    def __post_init__(self) -> None:
        for name in ("subtitle", "description", "custom_text"):
            object.__setattr__(self, name, _optional_text(getattr(self, name)))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CardGenerationData:
        """Build from either the UI's camelCase shape or the API's snake_case shape."""
        if not isinstance(raw, dict):
            raise InvalidCardDataError("card data must be a mapping")
        title = raw.get("title")
        if not isinstance(title, str):
            raise InvalidCardDataError("card data requires a string title")
        scheme = _pick(raw, "colorScheme", "color_scheme")
        if scheme is None:
            raise InvalidCardDataError("card data requires a color scheme")
        return cls(
            title=title,
            subtitle=_pick(raw, "subtitle"),
            description=_pick(raw, "description"),
            custom_text=_pick(raw, "customText", "custom_text"),
            milestone_data=MilestoneData.from_dict(_pick(raw, "milestoneData", "milestone_data", default={})),
            family_data=FamilyData.from_dict(_pick(raw, "familyData", "family_data", default={})),
            color_scheme=scheme if isinstance(scheme, CardColorScheme) else CardColorScheme.from_dict(scheme),
        )


@dataclass(frozen=True)
class CardCanvasOptions:
    width: int
    height: int
    background_color: Color
    text_color: Color
    primary_color: Color
    secondary_color: Color
    accent_color: Color

    @classmethod
    def for_card(
        cls,
        data: CardGenerationData,
        template: CardTemplate,
        default_width: int = DEFAULT_WIDTH,
        default_height: int = DEFAULT_HEIGHT,
    ) -> CardCanvasOptions:
        dims = template.dimensions
        scheme = data.color_scheme
        return cls(
            width=int(dims.width) if dims else default_width,
            height=int(dims.height) if dims else default_height,
            background_color=scheme.background,
            text_color=scheme.text,
            primary_color=scheme.primary,
            secondary_color=scheme.secondary,
            accent_color=scheme.accent,
        )


class TemplateId(str, Enum):
    CELEBRATION = "celebration"
    PROGRESS = "progress"
    ACHIEVEMENT = "achievement"
    FAMILY = "family"

    @classmethod
    def resolve(cls, value: str | None) -> TemplateId:
        """Map a catalog template id onto a layout, defaulting to celebration."""
        try:
            return cls(value)
        except ValueError:
            return cls.CELEBRATION
