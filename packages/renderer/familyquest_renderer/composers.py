"""Per-template card layouts built only from primitive renderer calls."""

from __future__ import annotations

import math
from typing import Callable

from .models import CardGenerationData, CardTemplate, TemplateId
from .primitives import PrimitiveRenderer

Composer = Callable[[PrimitiveRenderer, CardGenerationData, CardTemplate], None]

GLOW_ALPHA = 0x20
WASH_ALPHA = 0x10

CELEBRATION_GLYPH = "\U0001F389"
TROPHY_GLYPH = "\U0001F3C6"
FAMILY_GLYPH = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"

AVATAR_SIZE = 24
AVATAR_SPACING = 8


def format_percentage(value: float) -> str:
    # Truncate so the label never reads higher than the bar fill.
    shown = math.floor(round(float(value) * 10, 6)) / 10
    if shown.is_integer():
        return f"{int(shown)}%"
    return f"{shown:.1f}%"


def compose_celebration(r: PrimitiveRenderer, data: CardGenerationData, _template: CardTemplate) -> None:
    w, h = r.width, r.height
    scheme = data.color_scheme
    wrap = w * 0.8

    r.fill_radial_gradient(w * 0.2, h * 0.8, w * 0.6, scheme.primary.with_alpha(GLOW_ALPHA), scheme.primary.with_alpha(0))

    r.draw_text(data.title, w / 2, h * 0.2, font_size=32, font_weight="600", color=scheme.text, align="center", max_width=wrap)
    if data.subtitle:
        r.draw_text(
            data.subtitle, w / 2, h * 0.3, font_size=18, font_weight="500", color=scheme.text_secondary, align="center", max_width=wrap
        )

    badge_x, badge_y = w / 2, h * 0.5
    r.draw_circle(badge_x, badge_y, 40, scheme.primary)
    r.draw_glyph(CELEBRATION_GLYPH, badge_x, badge_y + 10, font_size=32, color=scheme.text)

    if data.description:
        r.draw_text(data.description, w / 2, h * 0.7, font_size=16, color=scheme.text, align="center", max_width=wrap)
    if data.custom_text:
        r.draw_text(
            data.custom_text, w / 2, h * 0.8, font_size=14, font_weight="600", color=scheme.accent, align="center", max_width=wrap
        )


def compose_progress(r: PrimitiveRenderer, data: CardGenerationData, _template: CardTemplate) -> None:
    w, h = r.width, r.height
    scheme = data.color_scheme
    progress = data.milestone_data.progress_percentage

    r.fill_linear_gradient(0, 0, w, h, scheme.primary.with_alpha(WASH_ALPHA), scheme.secondary.with_alpha(WASH_ALPHA))

    r.draw_text(data.title, 20, 40, font_size=24, font_weight="600", color=scheme.text, max_width=w - 40)
    if data.subtitle:
        r.draw_text(data.subtitle, 20, 70, font_size=16, color=scheme.text_secondary, max_width=w - 40)

    bar_y = h * 0.4
    r.draw_progress_bar(20, bar_y, w - 40, 20, progress, scheme.secondary, scheme.primary)
    r.draw_text(format_percentage(progress), w - 20, bar_y + 15, font_size=14, font_weight="600", color=scheme.text, align="right")

    if data.description:
        r.draw_text(data.description, 20, h * 0.6, font_size=14, color=scheme.text, max_width=w - 40)

    avatars = data.family_data.avatars
    if not avatars:
        return
    row_width = len(avatars) * AVATAR_SIZE + (len(avatars) - 1) * AVATAR_SPACING
    start_x = (w - row_width) / 2
    avatar_y = h - 40
    for index, _avatar in enumerate(avatars):
        x = start_x + index * (AVATAR_SIZE + AVATAR_SPACING)
        r.draw_circle(x + AVATAR_SIZE / 2, avatar_y + AVATAR_SIZE / 2, AVATAR_SIZE / 2, scheme.accent)


def compose_achievement(r: PrimitiveRenderer, data: CardGenerationData, _template: CardTemplate) -> None:
    w, h = r.width, r.height
    scheme = data.color_scheme
    cx, cy = w / 2, h / 2
    wrap = w * 0.8

    r.fill_radial_gradient(cx, cy, min(w, h) / 2, scheme.primary.with_alpha(GLOW_ALPHA), scheme.primary.with_alpha(0))

    r.draw_circle(cx, cy - 20, 60, scheme.primary)
    r.draw_glyph(TROPHY_GLYPH, cx, cy - 10, font_size=48, color=scheme.text)

    r.draw_text(data.title, cx, cy + 80, font_size=20, font_weight="600", color=scheme.text, align="center", max_width=wrap)
    if data.subtitle:
        r.draw_text(data.subtitle, cx, cy + 110, font_size=14, color=scheme.text_secondary, align="center", max_width=wrap)
    if data.description:
        r.draw_text(data.description, cx, cy + 140, font_size=12, color=scheme.text, align="center", max_width=wrap)
    if data.custom_text:
        r.draw_text(
            data.custom_text, cx, cy + 170, font_size=12, font_weight="600", color=scheme.accent, align="center", max_width=wrap
        )


def compose_family(r: PrimitiveRenderer, data: CardGenerationData, _template: CardTemplate) -> None:
    w, h = r.width, r.height
    scheme = data.color_scheme
    wrap = w * 0.8

    r.fill_radial_gradient(w / 2, h / 2, w / 2, scheme.primary.with_alpha(GLOW_ALPHA), scheme.primary.with_alpha(0))

    r.draw_text(data.title, w / 2, h * 0.2, font_size=28, font_weight="600", color=scheme.text, align="center", max_width=wrap)
    if data.subtitle:
        r.draw_text(data.subtitle, w / 2, h * 0.3, font_size=16, color=scheme.text_secondary, align="center", max_width=wrap)

    cx, cy = w / 2, h * 0.5
    r.draw_circle(cx, cy, 60, scheme.primary)
    r.draw_glyph(FAMILY_GLYPH, cx, cy + 10, font_size=36, color=scheme.text)
    r.draw_circle(cx + 40, cy - 40, 15, scheme.secondary)
    r.draw_circle(cx - 40, cy + 40, 15, scheme.accent)

    if data.description:
        r.draw_text(data.description, w / 2, h * 0.75, font_size=14, color=scheme.text, align="center", max_width=wrap)
    if data.custom_text:
        r.draw_text(
            data.custom_text, w / 2, h * 0.85, font_size=12, font_weight="600", color=scheme.accent, align="center", max_width=wrap
        )


COMPOSERS: dict[TemplateId, Composer] = {
    TemplateId.CELEBRATION: compose_celebration,
    TemplateId.PROGRESS: compose_progress,
    TemplateId.ACHIEVEMENT: compose_achievement,
    TemplateId.FAMILY: compose_family,
}

_unmapped = set(TemplateId) - set(COMPOSERS)
if _unmapped:
    raise RuntimeError(f"Templates without a composer: {sorted(t.value for t in _unmapped)}")


def composer_for(template_id: str | None) -> Composer:
    return COMPOSERS[TemplateId.resolve(template_id)]
