from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Union

from reportlab.lib import colors
from reportlab.pdfgen import canvas as pdf_canvas

from .fonts import safe_canvas_font
from .images import EmbeddedImage


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font_name: str
    size: float
    color: colors.Color


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: colors.Color | None = None
    stroke: colors.Color | None = None
    stroke_width: float = 1.0
    opacity: float = 1.0


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: colors.Color
    thickness: float = 1.0


@dataclass(frozen=True)
class CircleOp:
    cx: float
    cy: float
    radius: float
    fill: colors.Color | None = None
    stroke: colors.Color | None = None
    stroke_width: float = 1.0


@dataclass(frozen=True)
class ImageOp:
    image: EmbeddedImage
    x: float
    y: float
    width: float
    height: float


DrawOp = Union[TextOp, RectOp, LineOp, CircleOp, ImageOp]


@dataclass
class Page:
    index: int
    width: float
    height: float
    ops: list[DrawOp] = field(default_factory=list)

    def draw_text(self, text: str, *, x: float, y: float, font, size: float, color: colors.Color) -> None:
        if not text:
            return
        self.ops.append(TextOp(text=text, x=x, y=y, font_name=font.name, size=size, color=color))

    def draw_rect(
        self,
        *,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: colors.Color | None = None,
        stroke: colors.Color | None = None,
        stroke_width: float = 1.0,
        opacity: float = 1.0,
    ) -> None:
        self.ops.append(
            RectOp(
                x=x,
                y=y,
                width=width,
                height=height,
                fill=fill,
                stroke=stroke,
                stroke_width=stroke_width,
                opacity=opacity,
            )
        )

    def draw_line(
        self,
        *,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: colors.Color,
        thickness: float = 1.0,
    ) -> None:
        self.ops.append(LineOp(x1=x1, y1=y1, x2=x2, y2=y2, color=color, thickness=thickness))

    def draw_circle(
        self,
        *,
        cx: float,
        cy: float,
        radius: float,
        fill: colors.Color | None = None,
        stroke: colors.Color | None = None,
        stroke_width: float = 1.0,
    ) -> None:
        self.ops.append(
            CircleOp(cx=cx, cy=cy, radius=radius, fill=fill, stroke=stroke, stroke_width=stroke_width)
        )

    def draw_image(self, image: EmbeddedImage, *, x: float, y: float, width: float, height: float) -> None:
        self.ops.append(ImageOp(image=image, x=x, y=y, width=width, height=height))

    def ops_of(self, kind: type) -> list:
        return [op for op in self.ops if isinstance(op, kind)]

    def texts(self) -> list[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


class Composition:
    def __init__(self, *, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.pages: list[Page] = []

    def add_page(self) -> Page:
        page = Page(index=len(self.pages), width=self.width, height=self.height)
        self.pages.append(page)
        return page

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self):
        return iter(self.pages)


def _replay_op(canvas, op: DrawOp) -> None:
    if isinstance(op, TextOp):
        canvas.setFillColor(op.color)
        safe_canvas_font(canvas, op.font_name, op.size)
        canvas.drawString(op.x, op.y, op.text)
        return

    if isinstance(op, RectOp):
        canvas.saveState()
        if op.fill is not None:
            canvas.setFillColor(op.fill)
            canvas.setFillAlpha(op.opacity)
        if op.stroke is not None:
            canvas.setStrokeColor(op.stroke)
            canvas.setLineWidth(op.stroke_width)
        canvas.rect(
            op.x,
            op.y,
            op.width,
            op.height,
            stroke=1 if op.stroke is not None else 0,
            fill=1 if op.fill is not None else 0,
        )
        canvas.restoreState()
        return

    if isinstance(op, LineOp):
        canvas.saveState()
        canvas.setStrokeColor(op.color)
        canvas.setLineWidth(op.thickness)
        canvas.line(op.x1, op.y1, op.x2, op.y2)
        canvas.restoreState()
        return

    if isinstance(op, CircleOp):
        canvas.saveState()
        if op.fill is not None:
            canvas.setFillColor(op.fill)
        if op.stroke is not None:
            canvas.setStrokeColor(op.stroke)
            canvas.setLineWidth(op.stroke_width)
        canvas.circle(
            op.cx,
            op.cy,
            op.radius,
            stroke=1 if op.stroke is not None else 0,
            fill=1 if op.fill is not None else 0,
        )
        canvas.restoreState()
        return

    if isinstance(op, ImageOp):
        try:
            canvas.drawImage(op.image.reader, op.x, op.y, width=op.width, height=op.height, mask='auto')
        except Exception as exc:
            logger.warning('Failed to draw image %s: %s', op.image.label, exc)
        return

    raise TypeError(f'unsupported draw operation: {op!r}')


def write_pdf(
    composition: Composition,
    *,
    title: str = '',
    author: str = '',
    subject: str = '',
    producer: str = '',
) -> bytes:
    buffer = io.BytesIO()
    canvas = pdf_canvas.Canvas(buffer, pagesize=(composition.width, composition.height))
    canvas.setTitle(title)
    canvas.setAuthor(author)
    canvas.setSubject(subject)
    if producer:
        canvas.setProducer(producer)

    for page in composition.pages:
        for op in page.ops:
            _replay_op(canvas, op)
        canvas.showPage()

    canvas.save()
    return buffer.getvalue()
