from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib import colors

from ..fonts import FontFamily
from ..geometry import PageGeometry, Theme
from ..images import EmbeddedImage, fit_cover
from ..primitives import draw_rectangle, draw_text_line, draw_wrapped_paragraph
from ..surface import Page


BAND_BOTTOM = 60.0
BAND_HEIGHT = 230.0
BAND_OPACITY = 0.55


@dataclass(frozen=True)
class CoverText:
    company_name: str
    destination: str
    date_range: str
    client_name: str
    booking_ref: str


def draw_full_page_image(page: Page, image: EmbeddedImage, *, geometry: PageGeometry) -> None:
    dx, dy, width, height = fit_cover(
        image.width,
        image.height,
        box_width=geometry.width,
        box_height=geometry.height,
    )
    page.draw_image(image, x=dx, y=dy, width=width, height=height)


def render_hero(
    page: Page,
    cover: CoverText,
    *,
    image: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    geometry: PageGeometry,
) -> float:
    if image is not None:
        draw_full_page_image(page, image, geometry=geometry)

    band_top = BAND_BOTTOM + BAND_HEIGHT
    draw_rectangle(
        page,
        x=0,
        y=band_top,
        width=geometry.width,
        height=BAND_HEIGHT,
        fill=colors.black,
        opacity=BAND_OPACITY,
    )

    inner_x = geometry.left
    inner_width = geometry.content_width
    y = band_top - 40
    draw_text_line(
        page,
        cover.company_name.upper(),
        x=inner_x,
        y=y,
        font=fonts.heading_bold,
        size=14,
        color=theme.accent,
        width=inner_width,
        align='center',
    )
    y = draw_wrapped_paragraph(
        page,
        cover.destination,
        x=inner_x,
        y=y - 50,
        max_width=inner_width,
        font=fonts.heading_bold,
        font_size=36,
        color=colors.white,
        line_height=1.1,
        align='center',
        min_y=BAND_BOTTOM + 60,
    )
    for text, size, color in (
        (cover.date_range, 13.0, colors.white),
        (f'Prepared for {cover.client_name}' if cover.client_name else '', 11.0, colors.white),
        (f'Booking Ref: {cover.booking_ref}' if cover.booking_ref else '', 10.0, theme.muted),
    ):
        if not text:
            continue
        y -= 6
        draw_text_line(
            page,
            text,
            x=inner_x,
            y=y,
            font=fonts.body,
            size=size,
            color=color,
            width=inner_width,
            align='center',
        )
        y -= size * 1.4
    return y
