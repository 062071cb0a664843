"""Stateless drawing primitives over a card surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from PIL import Image

from .colors import Color
from .fonts import DEFAULT_FONT_FAMILY, EMOJI_FONT_FAMILY, load_font
from .surface import CardSurface

LINE_HEIGHT = 1.2

# Canvas-style alignment on the alphabetic baseline.
_ANCHORS = {"left": "ls", "center": "ms", "right": "rs"}


@dataclass(frozen=True)
class TextLine:
    text: str
    x: float
    y: float
    width: float


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """Greedy word wrap: a word moves to a new line only when the buffer is non-empty."""
    lines: list[str] = []
    buffer = ""
    for word in text.split():
        candidate = f"{buffer} {word}" if buffer else word
        if buffer and measure(candidate) > max_width:
            lines.append(buffer)
            buffer = word
        else:
            buffer = candidate
    lines.append(buffer)
    return lines


class PrimitiveRenderer:
    """Draws text, circles, bars and gradient washes onto one surface.

    Operations never read application state; the only side effect is on the
    surface pixels.
    """

    def __init__(self, surface: CardSurface, font_family: str = DEFAULT_FONT_FAMILY) -> None:
        self.surface = surface
        self.font_family = font_family

    @property
    def width(self) -> int:
        return self.surface.width

    @property
    def height(self) -> int:
        return self.surface.height

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font_size: float,
        color: Color,
        font_family: str | None = None,
        font_weight: str = "400",
        align: str = "left",
        max_width: float | None = None,
    ) -> list[TextLine]:
        if align not in _ANCHORS:
            raise ValueError(f"Unsupported text alignment: {align}")
        font = load_font(font_size, font_family or self.font_family, font_weight)
        lines = wrap_text(text, max_width, font.getlength) if max_width else [text]

        emitted: list[TextLine] = []
        baseline = y
        for line in lines:
            if line:
                self.surface.context.text((x, baseline), line, font=font, fill=color.rgba, anchor=_ANCHORS[align])
            emitted.append(TextLine(text=line, x=x, y=baseline, width=font.getlength(line)))
            baseline += font_size * LINE_HEIGHT
        return emitted

    def draw_glyph(self, glyph: str, x: float, y: float, *, font_size: float, color: Color) -> None:
        font = load_font(font_size, EMOJI_FONT_FAMILY)
        self.surface.context.text((x, y), glyph, font=font, fill=color.rgba, anchor="ms", embedded_color=True)

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        fill: Color,
        stroke: Color | None = None,
        stroke_width: float | None = None,
    ) -> None:
        if radius <= 0:
            return
        box = (x - radius, y - radius, x + radius, y + radius)
        self.surface.context.ellipse(box, fill=fill.rgba)
        if stroke is not None and stroke_width:
            self.surface.context.ellipse(box, outline=stroke.rgba, width=max(1, round(stroke_width)))

    def draw_progress_bar(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        progress: float,
        background: Color,
        fill: Color,
    ) -> None:
        """Full-width background, then a left-aligned fill of ``width * progress / 100``.

        ``progress`` is expected in [0, 100] already.
        """
        self._fill_rect(x, y, width, height, background)
        self._fill_rect(x, y, width * (progress / 100), height, fill)

    def fill_linear_gradient(self, x0: float, y0: float, x1: float, y1: float, start: Color, end: Color) -> None:
        dx, dy = x1 - x0, y1 - y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return
        xs, ys = self._pixel_centers()
        t = ((xs - x0) * dx + (ys - y0) * dy) / length_sq
        self._composite(self._interpolate(np.clip(t, 0.0, 1.0), start, end))

    def fill_radial_gradient(self, cx: float, cy: float, radius: float, inner: Color, outer: Color) -> None:
        if radius <= 0:
            return
        xs, ys = self._pixel_centers()
        t = np.hypot(xs - cx, ys - cy) / radius
        self._composite(self._interpolate(np.clip(t, 0.0, 1.0), inner, outer))

    def _fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        x0, y0 = round(x), round(y)
        x1, y1 = round(x + width), round(y + height)
        if x1 <= x0 or y1 <= y0:
            return
        self.surface.context.rectangle((x0, y0, x1 - 1, y1 - 1), fill=color.rgba)

    def _pixel_centers(self) -> tuple[np.ndarray, np.ndarray]:
        ys, xs = np.mgrid[0 : self.height, 0 : self.width].astype(np.float32)
        return xs + 0.5, ys + 0.5

    @staticmethod
    def _interpolate(t: np.ndarray, start: Color, end: Color) -> np.ndarray:
        # Premultiplied, so fading to "transparent" does not darken the color.
        a = np.array([start.r * start.a, start.g * start.a, start.b * start.a, start.a], dtype=np.float32) / 255.0
        b = np.array([end.r * end.a, end.g * end.a, end.b * end.a, end.a], dtype=np.float32) / 255.0
        return a + (b - a) * t[..., None]

    def _composite(self, overlay: np.ndarray) -> None:
        base = np.asarray(self.surface.image, dtype=np.float32)
        out = overlay[..., :3] + base * (1.0 - overlay[..., 3:4])
        pixels = np.clip(np.rint(out), 0, 255).astype(np.uint8)
        self.surface.image.paste(Image.fromarray(pixels))
