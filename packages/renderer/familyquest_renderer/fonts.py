"""Font family resolution with TrueType fallbacks."""

from __future__ import annotations

from PIL import ImageFont

DEFAULT_FONT_FAMILY = "Inter, system-ui, sans-serif"
EMOJI_FONT_FAMILY = "Noto Emoji, Segoe UI Emoji, Symbola, sans-serif"

# family name -> (regular file candidates, bold file candidates)
_FAMILY_FILES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "inter": (("Inter-Regular.ttf", "Inter.ttf"), ("Inter-SemiBold.ttf", "Inter-Bold.ttf")),
    "dejavu sans": (("DejaVuSans.ttf",), ("DejaVuSans-Bold.ttf",)),
    "liberation sans": (("LiberationSans-Regular.ttf",), ("LiberationSans-Bold.ttf",)),
    "arial": (("Arial.ttf", "arial.ttf"), ("Arial Bold.ttf", "arialbd.ttf")),
    "helvetica": (("Helvetica.ttc",), ("Helvetica.ttc",)),
    "noto emoji": (("NotoEmoji-Regular.ttf",), ("NotoEmoji-Bold.ttf", "NotoEmoji-Regular.ttf")),
    "segoe ui emoji": (("seguiemj.ttf",), ("seguiemj.ttf",)),
    "symbola": (("Symbola.ttf",), ("Symbola.ttf",)),
}

_GENERIC_FAMILIES: dict[str, tuple[str, ...]] = {
    "system-ui": ("dejavu sans", "liberation sans", "arial", "helvetica"),
    "sans-serif": ("dejavu sans", "liberation sans", "arial", "helvetica"),
}


def is_bold(weight: str | int | None) -> bool:
    if weight is None:
        return False
    text = str(weight).strip().lower()
    if text in ("bold", "bolder"):
        return True
    try:
        return int(text) >= 600
    except ValueError:
        return False


def _expand_families(family: str) -> list[str]:
    names: list[str] = []
    for part in family.split(","):
        name = part.strip().strip("'\"").lower()
        if not name:
            continue
        names.extend(_GENERIC_FAMILIES.get(name, (name,)))
    return names


def _candidate_files(family: str, bold: bool) -> list[str]:
    files: list[str] = []
    for name in _expand_families(family):
        known = _FAMILY_FILES.get(name)
        if known is None:
            files.append(f"{name}.ttf")
            continue
        regular, heavy = known
        files.extend(heavy + regular if bold else regular)
    return files


def load_font(size: float, family: str | None = None, weight: str | int | None = None) -> ImageFont.FreeTypeFont:
    """Return the first installed face of ``family``, or Pillow's scalable default."""
    for filename in _candidate_files(family or DEFAULT_FONT_FAMILY, is_bold(weight)):
        try:
            return ImageFont.truetype(filename, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def font_path(font: ImageFont.FreeTypeFont) -> str | None:
    path = getattr(font, "path", None)
    return path if isinstance(path, str) else None
