from __future__ import annotations

import logging
from dataclasses import dataclass

from reportlab.lib import colors

from ...types import HotelStay
from ..cursor import PageCursor
from ..fonts import FontFamily
from ..formatting import format_date
from ..geometry import CARD_PLACEHOLDER_FILL, TABLE_BORDER, CardLayout, Theme
from ..images import EmbeddedImage, fit_within
from ..primitives import SectionHeaderSpec, draw_placeholder, draw_rectangle, draw_text_line, draw_wrapped_paragraph
from ..surface import Page


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardSlot:
    hotel_index: int
    page_index: int
    x: float
    y: float


def stays_header(fonts: FontFamily, theme: Theme, *, x: float, layout: CardLayout) -> SectionHeaderSpec:
    return SectionHeaderSpec(
        title='Our Stays',
        font=fonts.heading_bold,
        size=layout.header_size,
        color=theme.accent,
        spacing=layout.header_gap,
        x=x,
    )


def _hotel_info_lines(hotel: HotelStay) -> list[str]:
    return [
        f'Check In: {format_date(hotel.check_in)}',
        f'Check Out: {format_date(hotel.check_out)}',
        f'No. Of Room: {hotel.number_of_rooms}',
        f'Meal Plan: {hotel.meal_plan}',
        f'Room Category: {hotel.room_category}',
    ]


def render_hotel_card(
    page: Page,
    hotel: HotelStay,
    *,
    image: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    layout: CardLayout,
    x: float,
    y: float,
) -> float:
    bottom = y - layout.height
    draw_rectangle(page, x=x, y=y, width=layout.width, height=layout.height, stroke=TABLE_BORDER)

    if image is not None:
        width, height = fit_within(
            image.width,
            image.height,
            max_width=layout.width,
            max_height=layout.image_height,
        )
        page.draw_image(
            image,
            x=x + (layout.width - width) / 2,
            y=y - layout.image_height + (layout.image_height - height) / 2,
            width=width,
            height=height,
        )
    else:
        draw_rectangle(page, x=x, y=y, width=layout.width, height=layout.image_height, fill=CARD_PLACEHOLDER_FILL)
        draw_text_line(
            page,
            'No Image',
            x=x,
            y=y - layout.image_height / 2,
            font=fonts.body_italic,
            size=layout.info_size,
            color=theme.muted,
            width=layout.width,
            align='center',
        )

    info_top = y - layout.image_height
    draw_rectangle(
        page,
        x=x,
        y=info_top,
        width=layout.width,
        height=layout.height - layout.image_height,
        fill=theme.accent,
    )

    text_y = info_top - layout.padding - layout.name_size
    text_y = draw_wrapped_paragraph(
        page,
        hotel.name,
        x=x + layout.padding,
        y=text_y,
        max_width=layout.width - 2 * layout.padding,
        font=fonts.heading_bold,
        font_size=layout.name_size,
        color=colors.white,
        line_height=layout.name_leading / layout.name_size,
        min_y=bottom + layout.padding,
    )
    text_y -= 10

    for line in _hotel_info_lines(hotel):
        if text_y <= bottom + layout.padding / 2:
            break
        page.draw_text(line, x=x + layout.padding, y=text_y, font=fonts.body, size=layout.info_size, color=colors.white)
        text_y -= layout.info_leading

    return bottom


def render_stays(
    cursor: PageCursor,
    hotels: list[HotelStay],
    *,
    images: dict[int, EmbeddedImage],
    fonts: FontFamily,
    theme: Theme,
    layout: CardLayout,
    x: float,
    width: float,
) -> list[CardSlot]:
    if not hotels:
        cursor.y = draw_placeholder(
            cursor.page,
            'No hotels added',
            x=x,
            y=cursor.y,
            font=fonts.body_italic,
            size=layout.info_size,
            color=theme.muted,
        )
        return []

    columns = layout.columns_for(width)
    row_height = layout.height + layout.spacing
    slots: list[CardSlot] = []
    row_top = cursor.y

    for index, hotel in enumerate(hotels):
        column = index % columns
        if column == 0:
            if index > 0:
                cursor.move_down(row_height)
            if cursor.ensure_page(row_height):
                logger.debug('Hotel row starting at card %d moved to page %d', index, cursor.page_index)
            row_top = cursor.y

        card_x = x + column * (layout.width + layout.spacing)
        render_hotel_card(
            cursor.page,
            hotel,
            image=images.get(index),
            fonts=fonts,
            theme=theme,
            layout=layout,
            x=card_x,
            y=row_top,
        )
        slots.append(CardSlot(hotel_index=index, page_index=cursor.page_index, x=card_x, y=row_top))

    cursor.move_down(row_height)
    cursor.move_down(layout.trailing_gap)
    return slots
