from __future__ import annotations

import base64
import binascii
import io
import re
from dataclasses import dataclass
from pathlib import Path

from reportlab.lib.utils import ImageReader


_DATA_URL_RE = re.compile(r'^data:image/(?P<kind>png|jpe?g);base64,(?P<payload>.+)$', re.IGNORECASE | re.DOTALL)


class ImageEmbedError(ValueError):
    pass


@dataclass(frozen=True, eq=False)
class EmbeddedImage:
    reader: ImageReader
    width: float
    height: float
    label: str = ''

    @property
    def aspect_ratio(self) -> float:
        if self.height <= 0:
            return 1.0
        return self.width / self.height


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    match = _DATA_URL_RE.match(str(data_url or '').strip())
    if match is None:
        raise ImageEmbedError('unsupported image data: expected a base64 PNG or JPEG data URL')
    kind = match.group('kind').lower()
    try:
        raw = base64.b64decode(match.group('payload'), validate=False)
    except (binascii.Error, ValueError) as exc:
        raise ImageEmbedError(f'invalid base64 image payload: {exc}') from exc
    if not raw:
        raise ImageEmbedError('empty image payload')
    return ('jpeg' if kind in {'jpg', 'jpeg'} else 'png'), raw


def _reader_from_bytes(raw: bytes, *, label: str) -> EmbeddedImage:
    try:
        reader = ImageReader(io.BytesIO(raw))
        width, height = reader.getSize()
    except Exception as exc:
        raise ImageEmbedError(f'failed to decode image {label}: {exc}') from exc
    if width <= 0 or height <= 0:
        raise ImageEmbedError(f'image {label} has no pixels')
    return EmbeddedImage(reader=reader, width=float(width), height=float(height), label=label)


def embed_image(data_url: str, *, label: str = 'image') -> EmbeddedImage:
    _, raw = decode_data_url(data_url)
    return _reader_from_bytes(raw, label=label)


def embed_image_file(path: Path, *, label: str | None = None) -> EmbeddedImage:
    token = label or path.name
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ImageEmbedError(f'failed to read image {path}: {exc}') from exc
    return _reader_from_bytes(raw, label=token)


def fit_within(
    width: float,
    height: float,
    *,
    max_width: float,
    max_height: float,
) -> tuple[float, float]:
    if width <= 0 or height <= 0:
        return 0.0, 0.0
    scale = min(max_width / width, max_height / height)
    return width * scale, height * scale


def fit_cover(
    width: float,
    height: float,
    *,
    box_width: float,
    box_height: float,
) -> tuple[float, float, float, float]:
    """Scale to cover the box, centered; returns (dx, dy, width, height)."""
    if width <= 0 or height <= 0:
        return 0.0, 0.0, box_width, box_height
    scale = max(box_width / width, box_height / height)
    scaled_width = width * scale
    scaled_height = height * scale
    return (box_width - scaled_width) / 2, (box_height - scaled_height) / 2, scaled_width, scaled_height
