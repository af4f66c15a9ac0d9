from __future__ import annotations

from reportlab.lib import colors

from ...types import FlightDetails
from ..fonts import FontFamily
from ..formatting import format_date, format_time
from ..geometry import TABLE_BORDER, TABLE_HEADER_FILL, TEXT_DARK, FlightTableLayout, Theme
from ..images import EmbeddedImage, fit_within
from ..primitives import draw_placeholder, draw_rectangle
from ..surface import Page


ROW_FILLS = (colors.Color(1, 1, 1), colors.Color(0.98, 0.98, 0.98))
DETAIL_GRAY = colors.Color(0.5, 0.5, 0.5)
ARROW_GRAY = colors.Color(0.6, 0.6, 0.6)
HEADER_LABELS = ('Departure & Arrivals', 'Departure', '', 'Duration', 'Arrival')
LOGO_SIZE = 22.0


def flights_table_height(count: int, layout: FlightTableLayout) -> float:
    if count <= 0:
        return layout.header_gap + 40.0
    return layout.header_gap + layout.header_row_height + count * layout.row_height + layout.trailing_gap


def _column_starts(x: float, layout: FlightTableLayout) -> list[float]:
    starts: list[float] = []
    cursor_x = x + layout.cell_padding
    for width in layout.column_widths:
        starts.append(cursor_x)
        cursor_x += width
    return starts


def _endpoint_detail(date: str, time: str) -> str:
    return f'{format_date(date)} {format_time(time)}'.strip()


def render_flights(
    page: Page,
    flights: list[FlightDetails],
    *,
    logos: dict[int, EmbeddedImage],
    fonts: FontFamily,
    theme: Theme,
    layout: FlightTableLayout,
    x: float,
    y: float,
) -> float:
    page.draw_text('Flights', x=x, y=y, font=fonts.heading, size=layout.header_size, color=theme.accent)
    current_y = y - layout.header_gap

    if not flights:
        draw_placeholder(
            page,
            'No flights added',
            x=x + 20,
            y=current_y,
            font=fonts.body_italic,
            size=layout.font_size,
            color=theme.muted,
        )
        return current_y - 40.0

    table_width = layout.width
    columns = _column_starts(x, layout)

    header_bottom = draw_rectangle(
        page,
        x=x,
        y=current_y,
        width=table_width,
        height=layout.header_row_height,
        fill=TABLE_HEADER_FILL,
        stroke=TABLE_BORDER,
    )
    for label, column_x in zip(HEADER_LABELS, columns):
        page.draw_text(
            label,
            x=column_x,
            y=current_y - 20,
            font=fonts.body_bold,
            size=layout.font_size,
            color=TEXT_DARK,
        )
    current_y = header_bottom

    for index, flight in enumerate(flights):
        row_bottom = draw_rectangle(
            page,
            x=x,
            y=current_y,
            width=table_width,
            height=layout.row_height,
            fill=ROW_FILLS[index % 2],
            stroke=TABLE_BORDER,
        )
        text_y = current_y - 18
        number_x, departure_x, arrow_x, duration_x, arrival_x = columns

        page.draw_text(flight.flight_number, x=number_x, y=text_y, font=fonts.body_bold, size=11, color=TEXT_DARK)
        page.draw_text(flight.cabin, x=number_x, y=text_y - 15, font=fonts.body, size=9, color=DETAIL_GRAY)
        logo = logos.get(index)
        if logo is not None:
            width, height = fit_within(logo.width, logo.height, max_width=LOGO_SIZE, max_height=LOGO_SIZE)
            page.draw_image(
                logo,
                x=departure_x - layout.cell_padding * 2 - width,
                y=text_y - 12,
                width=width,
                height=height,
            )

        page.draw_text(
            flight.departure.airport,
            x=departure_x,
            y=text_y,
            font=fonts.body_bold,
            size=layout.font_size,
            color=TEXT_DARK,
        )
        page.draw_text(
            _endpoint_detail(flight.departure.date, flight.departure.time),
            x=departure_x,
            y=text_y - 15,
            font=fonts.body,
            size=9,
            color=DETAIL_GRAY,
        )

        page.draw_text('->', x=arrow_x, y=text_y - 8, font=fonts.body, size=14, color=ARROW_GRAY)
        page.draw_text(
            flight.duration,
            x=duration_x,
            y=text_y - 8,
            font=fonts.body,
            size=layout.font_size,
            color=TEXT_DARK,
        )

        page.draw_text(
            flight.arrival.airport,
            x=arrival_x,
            y=text_y,
            font=fonts.body_bold,
            size=layout.font_size,
            color=TEXT_DARK,
        )
        page.draw_text(
            _endpoint_detail(flight.arrival.date, flight.arrival.time),
            x=arrival_x,
            y=text_y - 15,
            font=fonts.body,
            size=9,
            color=DETAIL_GRAY,
        )
        current_y = row_bottom

    return current_y - layout.trailing_gap
