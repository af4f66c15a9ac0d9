from __future__ import annotations

import logging
from dataclasses import dataclass

from reportlab.lib import colors

from ...types import ItineraryDay
from ..cursor import PageCursor
from ..fonts import FontFamily, FontHandle
from ..geometry import DIVIDER_GRAY, ItineraryLayout, Theme
from ..images import EmbeddedImage, fit_within
from ..primitives import SectionHeaderSpec, draw_line, draw_placeholder, draw_rectangle
from ..text import LineBreaker, measure_wrapped_height, split_words


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayPlacement:
    day_number: int
    start_page: int
    end_page: int
    badge_top: float
    end_y: float

    @property
    def spans_pages(self) -> bool:
        return self.end_page > self.start_page


def itinerary_header(fonts: FontFamily, theme: Theme, *, x: float, layout: ItineraryLayout) -> SectionHeaderSpec:
    return SectionHeaderSpec(
        title='Itinerary',
        continued_title='Itinerary (continued)',
        font=fonts.heading_bold,
        size=layout.header_size,
        color=theme.accent,
        spacing=layout.header_gap,
        x=x,
    )


def continuation_marker(
    day_number: int,
    fonts: FontFamily,
    theme: Theme,
    *,
    x: float,
    layout: ItineraryLayout,
) -> SectionHeaderSpec:
    return SectionHeaderSpec(
        title=f'Day {day_number} (continued)',
        font=fonts.body_bold,
        size=layout.font_size,
        color=theme.accent,
        spacing=layout.marker_gap,
        x=x,
    )


def day_head_height(layout: ItineraryLayout, *, has_image: bool = False) -> float:
    # Badge, title line and the first body line, or the whole image box.
    text_height = layout.title_gap + layout.line_spacing
    if has_image:
        text_height = max(text_height, layout.image_box_height)
    return layout.bar_height + layout.badge_gap + text_height


class ColumnFlow:
    """Word-at-a-time writer for the left column of a day block.

    The width budget is recomputed before every word: narrow while the cursor
    is beside the image, full width once it is below the image bottom or on a
    later page. Each line is checked against the floor before it is drawn.
    """

    def __init__(
        self,
        cursor: PageCursor,
        *,
        x: float,
        narrow_width: float,
        full_width: float,
        image_page: int,
        image_bottom: float,
    ) -> None:
        self.cursor = cursor
        self.x = x
        self.narrow_width = narrow_width
        self.full_width = full_width
        self.image_page = image_page
        self.image_bottom = image_bottom
        self.lines_written = 0

    def width_budget(self) -> float:
        if self.cursor.page_index == self.image_page and self.cursor.y > self.image_bottom:
            return self.narrow_width
        return self.full_width

    def measure(self, text: str | None, *, font: FontHandle, size: float, spacing: float) -> float:
        return measure_wrapped_height(text, font, size, self.width_budget(), spacing / size)

    def write(
        self,
        text: str | None,
        *,
        font: FontHandle,
        size: float,
        color: colors.Color,
        spacing: float,
    ) -> float:
        breaker = LineBreaker(font, size)
        for word in split_words(text):
            committed = breaker.offer(word, self.width_budget())
            if committed is not None:
                self._emit(committed, font=font, size=size, color=color, spacing=spacing)
        tail = breaker.flush()
        if tail is not None:
            self._emit(tail, font=font, size=size, color=color, spacing=spacing)
        return self.cursor.y

    def _emit(self, line: str, *, font: FontHandle, size: float, color: colors.Color, spacing: float) -> None:
        self.cursor.ensure_page(spacing)
        self.cursor.page.draw_text(line, x=self.x, y=self.cursor.y, font=font, size=size, color=color)
        self.cursor.move_down(spacing)
        self.lines_written += 1


def _draw_accent_rule(
    cursor: PageCursor,
    *,
    x: float,
    start_page: int,
    start_y: float,
    end_page: int,
    end_y: float,
    color: colors.Color,
    thickness: float,
) -> None:
    pages = cursor.composition.pages
    for index in range(start_page, end_page + 1):
        top = start_y if index == start_page else cursor.content_top(index)
        bottom = end_y if index == end_page else cursor.bottom_margin
        if top <= bottom:
            continue
        draw_line(pages[index], x1=x, y1=top, x2=x, y2=bottom, color=color, thickness=thickness)


def render_itinerary_day(
    cursor: PageCursor,
    day: ItineraryDay,
    *,
    image: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    layout: ItineraryLayout,
    x: float,
    is_first: bool,
    is_last: bool,
) -> DayPlacement:
    if not is_first and layout.day_per_page:
        cursor.new_page()
    else:
        cursor.ensure_page(day_head_height(layout, has_image=image is not None))

    bar_x = x + layout.bar_indent
    left_x = x + layout.text_indent
    right_x = left_x + layout.left_column_width + layout.column_gap

    badge_page = cursor.page
    start_page = cursor.page_index
    badge_top = cursor.y
    badge_bottom = draw_rectangle(
        badge_page,
        x=bar_x,
        y=badge_top,
        width=layout.bar_width,
        height=layout.bar_height,
        fill=theme.accent,
    )
    label = f'Day {day.day_number}'
    label_width = fonts.body_bold.width(label, layout.badge_font_size)
    badge_page.draw_text(
        label,
        x=bar_x + (layout.bar_width - label_width) / 3,
        y=badge_bottom + 7,
        font=fonts.body_bold,
        size=layout.badge_font_size,
        color=colors.white,
    )
    cursor.move_down(layout.bar_height + layout.badge_gap)

    image_top = cursor.y
    image_bottom = image_top - layout.image_box_height if image is not None else image_top
    flow = ColumnFlow(
        cursor,
        x=left_x,
        narrow_width=layout.left_column_width,
        full_width=layout.full_text_width,
        image_page=start_page,
        image_bottom=image_bottom,
    )
    marker = continuation_marker(day.day_number, fonts, theme, x=left_x, layout=layout)

    with cursor.continuation(marker):
        flow.write(day.title, font=fonts.body_bold, size=layout.font_size, color=theme.text, spacing=layout.title_gap)

        if day.has_subheadings:
            for subheading in day.subheadings:
                block_height = (
                    flow.measure(
                        subheading.title,
                        font=fonts.body_bold,
                        size=layout.font_size,
                        spacing=layout.subheading_title_gap,
                    )
                    + flow.measure(
                        subheading.description,
                        font=fonts.body,
                        size=layout.font_size,
                        spacing=layout.line_spacing,
                    )
                    + layout.subheading_gap
                )
                if cursor.ensure_page(block_height):
                    logger.debug('Day %d subheading moved to page %d', day.day_number, cursor.page_index)
                flow.write(
                    subheading.title,
                    font=fonts.body_bold,
                    size=layout.font_size,
                    color=theme.text,
                    spacing=layout.subheading_title_gap,
                )
                flow.write(
                    subheading.description,
                    font=fonts.body,
                    size=layout.font_size,
                    color=theme.text,
                    spacing=layout.line_spacing,
                )
                cursor.move_down(layout.subheading_gap)
        else:
            flow.write(
                day.activities,
                font=fonts.body,
                size=layout.font_size,
                color=theme.text,
                spacing=layout.line_spacing,
            )

        cursor.move_down(layout.hotel_gap)

        hotel = str(day.hotel or '').strip()
        if hotel:
            cursor.ensure_page(layout.hotel_reserve)
            cursor.page.draw_text(
                hotel.upper(),
                x=left_x,
                y=cursor.y,
                font=fonts.body_bold,
                size=layout.font_size,
                color=theme.text,
            )
            cursor.move_down(layout.hotel_line)

    if image is not None:
        width, height = fit_within(
            image.width,
            image.height,
            max_width=layout.image_box_width,
            max_height=layout.image_box_height,
        )
        badge_page.draw_image(image, x=right_x, y=image_top - height, width=width, height=height)

    if cursor.page_index == start_page and cursor.y > image_bottom:
        cursor.y = image_bottom

    cursor.move_down(layout.content_gap)
    if cursor.y < cursor.bottom_margin:
        cursor.y = cursor.bottom_margin
    divider_y = cursor.y

    if not is_last:
        draw_line(
            cursor.page,
            x1=left_x - 2,
            y1=divider_y,
            x2=left_x + layout.full_text_width,
            y2=divider_y,
            color=DIVIDER_GRAY,
            thickness=layout.divider_thickness,
        )

    cursor.move_down(layout.divider_gap)

    end_page = cursor.page_index
    _draw_accent_rule(
        cursor,
        x=bar_x,
        start_page=start_page,
        start_y=badge_bottom,
        end_page=end_page,
        end_y=divider_y,
        color=theme.accent,
        thickness=layout.rule_thickness,
    )
    if end_page > start_page:
        logger.debug('Day %d spans pages %d-%d', day.day_number, start_page, end_page)

    return DayPlacement(
        day_number=day.day_number,
        start_page=start_page,
        end_page=end_page,
        badge_top=badge_top,
        end_y=cursor.y,
    )


def render_itinerary(
    cursor: PageCursor,
    days: list[ItineraryDay],
    *,
    images: dict[int, EmbeddedImage],
    fonts: FontFamily,
    theme: Theme,
    layout: ItineraryLayout,
    x: float,
) -> list[DayPlacement]:
    if not days:
        cursor.y = draw_placeholder(
            cursor.page,
            'No itinerary days added',
            x=x + layout.text_indent,
            y=cursor.y,
            font=fonts.body_italic,
            size=layout.font_size,
            color=theme.muted,
        )
        return []

    placements: list[DayPlacement] = []
    for index, day in enumerate(days):
        placements.append(
            render_itinerary_day(
                cursor,
                day,
                image=images.get(index),
                fonts=fonts,
                theme=theme,
                layout=layout,
                x=x,
                is_first=index == 0,
                is_last=index == len(days) - 1,
            )
        )
    return placements
