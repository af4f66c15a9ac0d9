from __future__ import annotations

from ...types import BasicDetails
from ..fonts import FontFamily
from ..geometry import FactsGridLayout, PageGeometry, Theme
from ..images import EmbeddedImage, fit_within
from ..primitives import draw_rectangle, draw_text_line
from ..surface import Page
from .hero import draw_full_page_image


def _fit_text(text: str, *, font, size: float, max_width: float) -> str:
    if font.width(text, size) <= max_width:
        return text
    trimmed = text
    while trimmed and font.width(f'{trimmed}...', size) > max_width:
        trimmed = trimmed[:-1]
    return f'{trimmed.rstrip()}...'


def facts_for(details: BasicDetails) -> list[tuple[str, str]]:
    return [
        ('Customer', details.customer_details),
        ('Total People', details.total_people),
        ('Adults', details.adults),
        ('Children', details.children),
        ('Infants', details.infants),
        ('Travel Dates', details.travel_dates),
    ]


def render_basic_details(
    page: Page,
    details: BasicDetails,
    *,
    destination_image: EmbeddedImage | None,
    template_image: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    geometry: PageGeometry,
    layout: FactsGridLayout,
    y: float,
) -> float:
    if template_image is not None:
        draw_full_page_image(page, template_image, geometry=geometry)

    x = geometry.left
    width = geometry.content_width
    page.draw_text('Trip Details', x=x, y=y, font=fonts.heading, size=layout.header_size, color=theme.accent)
    current_y = y - layout.header_gap

    box_width = (width - (layout.columns - 1) * layout.gap) / layout.columns
    facts = facts_for(details)
    for index, (label, value) in enumerate(facts):
        column = index % layout.columns
        if column == 0 and index > 0:
            current_y -= layout.box_height + layout.gap
        box_x = x + column * (box_width + layout.gap)
        draw_rectangle(
            page,
            x=box_x,
            y=current_y,
            width=box_width,
            height=layout.box_height,
            stroke=theme.accent,
        )
        draw_text_line(
            page,
            label.upper(),
            x=box_x,
            y=current_y - 22,
            font=fonts.body_bold,
            size=layout.label_size,
            color=theme.accent,
            width=box_width,
            align='center',
        )
        text = _fit_text(
            str(value or '').strip() or '-',
            font=fonts.body,
            size=layout.value_size,
            max_width=box_width - 10,
        )
        draw_text_line(
            page,
            text,
            x=box_x,
            y=current_y - 44,
            font=fonts.body,
            size=layout.value_size,
            color=theme.text,
            width=box_width,
            align='center',
        )
    current_y -= layout.box_height + layout.photo_gap

    if destination_image is not None:
        box_height = min(layout.photo_max_height, current_y - geometry.margin_bottom)
        if box_height > 0:
            image_width, image_height = fit_within(
                destination_image.width,
                destination_image.height,
                max_width=width,
                max_height=box_height,
            )
            page.draw_image(
                destination_image,
                x=x + (width - image_width) / 2,
                y=current_y - image_height,
                width=image_width,
                height=image_height,
            )
            current_y -= image_height
    return current_y
