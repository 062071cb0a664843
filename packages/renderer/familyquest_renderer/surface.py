"""Off-screen raster surface allocation."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image, ImageDraw

from .colors import WHITE
from .errors import SurfaceUnavailableError
from .models import CardCanvasOptions

MAX_SURFACE_PIXELS = 16_000_000


@dataclass
class CardSurface:
    image: Image.Image
    context: ImageDraw.ImageDraw
    options: CardCanvasOptions

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def create_surface(options: CardCanvasOptions) -> CardSurface:
    """Allocate a ``width x height`` RGB surface filled with the background color.

    The drawing context blends RGBA fills into the surface the way a 2D canvas
    does. A translucent background is flattened over white so the encoded image
    never depends on what a viewer draws underneath it.
    """
    width, height = int(options.width), int(options.height)
    if width <= 0 or height <= 0:
        raise SurfaceUnavailableError(f"Surface dimensions must be positive, got {width}x{height}")
    if width * height > MAX_SURFACE_PIXELS:
        raise SurfaceUnavailableError(f"Surface {width}x{height} exceeds {MAX_SURFACE_PIXELS} pixels")

    background = options.background_color.flatten(WHITE)
    try:
        image = Image.new("RGB", (width, height), background.rgb)
        context = ImageDraw.Draw(image, "RGBA")
    except (MemoryError, OSError, ValueError) as exc:
        raise SurfaceUnavailableError(f"Failed to allocate {width}x{height} drawing surface") from exc
    return CardSurface(image=image, context=context, options=options)
