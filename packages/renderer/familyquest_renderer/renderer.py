"""Template dispatch: card data + template in, encoded image out."""

from __future__ import annotations

import asyncio
import logging
import time

from PIL import Image

from .composers import composer_for
from .encoding import encode
from .errors import RenderFailure
from .fonts import DEFAULT_FONT_FAMILY
from .models import DEFAULT_HEIGHT, DEFAULT_WIDTH, CardCanvasOptions, CardGenerationData, CardTemplate, TemplateId
from .primitives import PrimitiveRenderer
from .surface import create_surface

logger = logging.getLogger("familyquest.renderer")


class CardRenderer:
    """Renders shareable milestone cards.

    Every call allocates its own surface, so one instance can serve concurrent
    renders without locking.
    """

    def __init__(
        self,
        default_width: int = DEFAULT_WIDTH,
        default_height: int = DEFAULT_HEIGHT,
        font_family: str = DEFAULT_FONT_FAMILY,
        image_format: str = "PNG",
    ) -> None:
        self.default_width = default_width
        self.default_height = default_height
        self.font_family = font_family
        self.image_format = image_format

    def build_options(self, data: CardGenerationData, template: CardTemplate) -> CardCanvasOptions:
        return CardCanvasOptions.for_card(data, template, self.default_width, self.default_height)

    def render(self, data: CardGenerationData, template: CardTemplate) -> str:
        started = time.perf_counter()
        try:
            image = self._compose(data, template)
            data_uri = encode(image, self.image_format)
        except Exception as exc:
            raise self._failure(template, exc) from exc

        duration_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.debug(
            f"rendered card template={template.id} size={image.width}x{image.height} ms={duration_ms}",
            extra={
                "event": "card_rendered",
                "template_id": template.id,
                "layout": TemplateId.resolve(template.id).value,
                "duration_ms": duration_ms,
                "size_bytes": len(data_uri),
            },
        )
        return data_uri

    def render_image(self, data: CardGenerationData, template: CardTemplate) -> Image.Image:
        try:
            return self._compose(data, template)
        except Exception as exc:
            raise self._failure(template, exc) from exc

    async def render_async(self, data: CardGenerationData, template: CardTemplate) -> str:
        return await asyncio.to_thread(self.render, data, template)

    def _compose(self, data: CardGenerationData, template: CardTemplate) -> Image.Image:
        surface = create_surface(self.build_options(data, template))
        renderer = PrimitiveRenderer(surface, font_family=self.font_family)
        composer = composer_for(template.id)
        composer(renderer, data, template)
        return surface.image

    @staticmethod
    def _failure(template: CardTemplate, exc: Exception) -> RenderFailure:
        layout = TemplateId.resolve(template.id).value
        logger.warning(
            f"card render failed template={template.id} layout={layout} error={exc!r}",
            extra={"event": "card_render_failed", "template_id": template.id, "layout": layout},
        )
        return RenderFailure(f"Failed to render card with template '{template.id}': {exc}", cause=exc, template_id=template.id)
