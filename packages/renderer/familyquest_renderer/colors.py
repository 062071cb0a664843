"""Structured RGBA colors parsed from CSS-style tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass

from PIL import ImageColor

from .errors import InvalidColorError

_CSS_RGBA_RE = re.compile(
    r"^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d*\.?\d+)(%?)\s*\)$",
    re.IGNORECASE,
)


def _channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, token: str | Color) -> Color:
        """Parse hex, rgb()/rgba(), hsl(), named colors and ``transparent``.

        ``rgba()`` alpha follows CSS: a number clamped to [0, 1] or a
        percentage.
        """
        if isinstance(token, Color):
            return token
        if not isinstance(token, str) or not token.strip():
            raise InvalidColorError(f"Invalid color token: {token!r}")

        text = token.strip()
        if text.lower() == "transparent":
            return cls(0, 0, 0, 0)

        match = _CSS_RGBA_RE.match(text)
        if match:
            r, g, b = (int(match.group(i)) for i in (1, 2, 3))
            alpha = float(match.group(4))
            if match.group(5):
                alpha /= 100
            alpha = max(0.0, min(1.0, alpha))
            return cls(_channel(r), _channel(g), _channel(b), round(alpha * 255))

        try:
            rgb = ImageColor.getrgb(text)
        except ValueError as exc:
            raise InvalidColorError(f"Invalid color token: {token!r}") from exc
        if len(rgb) == 4:
            return cls(*rgb)
        return cls(rgb[0], rgb[1], rgb[2], 255)

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.r, self.g, self.b, _channel(alpha))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    def to_hex(self) -> str:
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return base if self.is_opaque else f"{base}{self.a:02x}"

    def flatten(self, under: Color) -> Color:
        """Composite this color over an opaque ``under`` color."""
        alpha = self.a / 255
        return Color(
            round(self.r * alpha + under.r * (1 - alpha)),
            round(self.g * alpha + under.g * (1 - alpha)),
            round(self.b * alpha + under.b * (1 - alpha)),
            255,
        )


WHITE = Color(255, 255, 255)
