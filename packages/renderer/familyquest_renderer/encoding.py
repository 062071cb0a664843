"""PNG data URI encoding for finished card images."""

from __future__ import annotations

import base64
import binascii
import re
from io import BytesIO

from PIL import Image

from .errors import InvalidDataUriError

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[\w.+-]+=[\w.+-]+)*)(?P<b64>;base64)?,(?P<data>.*)$", re.DOTALL)

_MIME_TYPES = {"PNG": "image/png", "JPEG": "image/jpeg", "WEBP": "image/webp"}


def encode(image: Image.Image, format: str = "PNG") -> str:
    """Encode ``image`` as a self-contained data URI.

    Identical pixels give an identical string: no timestamps or text chunks are
    written.
    """
    fmt = format.upper()
    if fmt not in _MIME_TYPES:
        raise ValueError(f"Unsupported image format: {format}")
    buf = BytesIO()
    image.save(buf, format=fmt)
    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:{_MIME_TYPES[fmt]};base64,{b64}"


def decode_data_uri(data_uri: str) -> tuple[str, bytes]:
    match = _DATA_URI_RE.match(data_uri.strip()) if isinstance(data_uri, str) else None
    if match is None:
        raise InvalidDataUriError("Not a data URI")
    mime = match.group("mime") or "text/plain"
    if not match.group("b64"):
        raise InvalidDataUriError("Only base64 data URIs are supported")
    try:
        payload = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidDataUriError("Malformed base64 payload") from exc
    return mime, payload
