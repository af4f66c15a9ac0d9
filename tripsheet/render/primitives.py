from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib import colors

from .fonts import FontHandle
from .geometry import BulletStyle
from .surface import Page
from .text import measure_wrapped_height, wrap_to_width


@dataclass(frozen=True)
class SectionHeaderSpec:
    title: str
    font: FontHandle
    size: float
    color: colors.Color
    spacing: float
    x: float
    continued_title: str | None = None

    def title_for(self, *, continued: bool) -> str:
        if continued and self.continued_title:
            return self.continued_title
        return self.title


def aligned_x(text: str, *, x: float, width: float, font: FontHandle, size: float, align: str) -> float:
    if align == 'center':
        return x + (width - font.width(text, size)) / 2
    if align == 'right':
        return x + width - font.width(text, size)
    return x


def draw_rectangle(
    page: Page,
    *,
    x: float,
    y: float,
    width: float,
    height: float,
    fill: colors.Color | None = None,
    stroke: colors.Color | None = None,
    stroke_width: float = 1.0,
    opacity: float = 1.0,
) -> float:
    page.draw_rect(
        x=x,
        y=y - height,
        width=width,
        height=height,
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width,
        opacity=opacity,
    )
    return y - height


def draw_line(
    page: Page,
    *,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: colors.Color,
    thickness: float = 1.0,
) -> float:
    page.draw_line(x1=x1, y1=y1, x2=x2, y2=y2, color=color, thickness=thickness)
    return min(y1, y2)


def draw_bullet(page: Page, *, x: float, y: float, size: float, color: colors.Color) -> None:
    radius = size / 2
    # Centered on the x-height of the line whose baseline is y.
    page.draw_circle(cx=x + radius, cy=y + radius * 0.6, radius=radius, fill=color)


def draw_text_line(
    page: Page,
    text: str,
    *,
    x: float,
    y: float,
    font: FontHandle,
    size: float,
    color: colors.Color,
    width: float = 0.0,
    align: str = 'left',
) -> None:
    start_x = aligned_x(text, x=x, width=width, font=font, size=size, align=align)
    page.draw_text(text, x=start_x, y=y, font=font, size=size, color=color)


def draw_wrapped_paragraph(
    page: Page,
    text: str | None,
    *,
    x: float,
    y: float,
    max_width: float,
    font: FontHandle,
    font_size: float,
    color: colors.Color,
    line_height: float = 1.4,
    align: str = 'left',
    min_y: float | None = None,
) -> float:
    lines = wrap_to_width(text, font, font_size, max_width)
    spacing = font_size * line_height
    for index, line in enumerate(lines):
        line_y = y - index * spacing
        if min_y is not None and line_y <= min_y:
            continue
        draw_text_line(
            page,
            line,
            x=x,
            y=line_y,
            font=font,
            size=font_size,
            color=color,
            width=max_width,
            align=align,
        )
    return y - len(lines) * spacing


def bullet_item_height(item: str, *, max_width: float, font: FontHandle, style: BulletStyle) -> float:
    if not item.strip():
        return 0.0
    text_height = measure_wrapped_height(
        item,
        font,
        style.font_size,
        max_width - style.indent,
        style.line_height,
    )
    return text_height + style.item_spacing


def draw_bullet_item(
    page: Page,
    item: str,
    *,
    x: float,
    y: float,
    max_width: float,
    font: FontHandle,
    style: BulletStyle,
    color: colors.Color,
    bullet_color: colors.Color,
) -> float:
    if not item.strip():
        return y
    draw_bullet(page, x=x, y=y, size=style.bullet_size, color=bullet_color)
    next_y = draw_wrapped_paragraph(
        page,
        item,
        x=x + style.indent,
        y=y,
        max_width=max_width - style.indent,
        font=font,
        font_size=style.font_size,
        color=color,
        line_height=style.line_height,
    )
    return next_y - style.item_spacing


def draw_bullet_list(
    page: Page,
    items: list[str],
    *,
    x: float,
    y: float,
    max_width: float,
    font: FontHandle,
    style: BulletStyle,
    color: colors.Color,
    bullet_color: colors.Color,
) -> float:
    current_y = y
    for item in items:
        current_y = draw_bullet_item(
            page,
            item,
            x=x,
            y=current_y,
            max_width=max_width,
            font=font,
            style=style,
            color=color,
            bullet_color=bullet_color,
        )
    return current_y


def draw_section_title(page: Page, spec: SectionHeaderSpec, *, y: float, continued: bool = False) -> float:
    page.draw_text(
        spec.title_for(continued=continued),
        x=spec.x,
        y=y,
        font=spec.font,
        size=spec.size,
        color=spec.color,
    )
    return y - spec.spacing


def draw_placeholder(
    page: Page,
    text: str,
    *,
    x: float,
    y: float,
    font: FontHandle,
    size: float,
    color: colors.Color,
    spacing: float = 20.0,
) -> float:
    page.draw_text(text, x=x, y=y, font=font, size=size, color=color)
    return y - spacing
