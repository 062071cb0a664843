"""Error taxonomy shared by the renderer and export packages."""

from __future__ import annotations


class CardEngineError(Exception):
    """Base class for every failure surfaced by the card engine."""


class SurfaceUnavailableError(CardEngineError):
    """The host could not provide a raster surface or drawing context."""


class RenderFailure(CardEngineError):
    def __init__(self, message: str, cause: BaseException | None = None, template_id: str | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        self.template_id = template_id


class ClipboardError(CardEngineError):
    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidCardDataError(CardEngineError, ValueError):
    pass


class InvalidColorError(CardEngineError, ValueError):
    pass


class InvalidDataUriError(CardEngineError, ValueError):
    pass
