from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont


logger = logging.getLogger(__name__)

# (role, registered name, file name) in the configured fonts directory
FONT_FILE_CANDIDATES = (
    ('heading', 'TS-Jost', 'Jost-Regular.ttf'),
    ('heading_bold', 'TS-Jost-Bold', 'Jost-Bold.ttf'),
    ('heading_italic', 'TS-Jost-Italic', 'Jost-Italic.ttf'),
    ('body', 'TS-Inter', 'Inter-Regular.ttf'),
    ('body_bold', 'TS-Inter-Bold', 'Inter-Bold.ttf'),
    ('body_italic', 'TS-Inter-Italic', 'Inter-Italic.ttf'),
)

STANDARD_FONT_NAMES = {
    'heading': 'Times-Roman',
    'heading_bold': 'Times-Bold',
    'heading_italic': 'Times-Italic',
    'body': 'Helvetica',
    'body_bold': 'Helvetica-Bold',
    'body_italic': 'Helvetica-Oblique',
}


@dataclass(frozen=True)
class FontHandle:
    name: str

    def width(self, text: str, size: float) -> float:
        if not text:
            return 0.0
        return float(pdfmetrics.stringWidth(text, self.name, size))


@dataclass(frozen=True)
class FontFamily:
    heading: FontHandle
    heading_bold: FontHandle
    heading_italic: FontHandle
    body: FontHandle
    body_bold: FontHandle
    body_italic: FontHandle


STANDARD_FONTS = FontFamily(**{role: FontHandle(name) for role, name in STANDARD_FONT_NAMES.items()})

_FONTS_CACHE: dict[str, FontFamily] = {}


def _safe_file(path: Path | None) -> Path | None:
    if path is None:
        return None
    if path.exists() and path.is_file():
        return path
    return None


def _register_ttf_font(font_name: str, font_path: Path) -> bool:
    if font_name in pdfmetrics.getRegisteredFontNames():
        return True

    try:
        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        return True
    except Exception as exc:
        logger.warning('Failed to register PDF font %s from %s: %s', font_name, font_path, exc)
        return False


def resolve_fonts(fonts_dir: Path | None = None) -> FontFamily:
    if fonts_dir is None:
        return STANDARD_FONTS

    cache_key = str(fonts_dir)
    cached = _FONTS_CACHE.get(cache_key)
    if cached is not None:
        return cached

    names = dict(STANDARD_FONT_NAMES)
    for role, font_name, file_name in FONT_FILE_CANDIDATES:
        font_path = _safe_file(fonts_dir / file_name)
        if font_path is None:
            continue
        if _register_ttf_font(font_name, font_path):
            names[role] = font_name

    if names == STANDARD_FONT_NAMES:
        logger.info('No custom fonts found in %s; using standard PDF fonts', fonts_dir)

    family = FontFamily(**{role: FontHandle(name) for role, name in names.items()})
    _FONTS_CACHE[cache_key] = family
    return family


def safe_canvas_font(canvas, font_name: str, size: float) -> None:
    for candidate in (str(font_name or '').strip(), 'Helvetica'):
        if not candidate:
            continue
        try:
            canvas.setFont(candidate, size)
            return
        except Exception:
            continue
