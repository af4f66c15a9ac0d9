from __future__ import annotations

from reportlab.lib import colors

from ..fonts import FontFamily
from ..geometry import FooterLayout, PageGeometry, Theme
from ..images import EmbeddedImage, fit_within
from ..primitives import draw_line, draw_rectangle, draw_text_line
from ..surface import Composition, Page


def render_call_to_action(
    page: Page,
    *,
    company_name: str,
    fonts: FontFamily,
    theme: Theme,
    geometry: PageGeometry,
    layout: FooterLayout,
) -> float:
    y = layout.cta_y
    left = geometry.left
    right = geometry.width - geometry.margin_x

    page.draw_text(company_name.upper(), x=left, y=y, font=fonts.heading_bold, size=12, color=theme.accent)
    draw_text_line(
        page,
        'Ready to get started?',
        x=0,
        y=y,
        font=fonts.heading_italic,
        size=14,
        color=theme.text,
        width=geometry.width,
        align='center',
    )

    button_x = right - layout.button_width
    button_top = y + layout.button_height / 2 + 4
    draw_rectangle(
        page,
        x=button_x,
        y=button_top,
        width=layout.button_width,
        height=layout.button_height,
        fill=theme.accent,
    )
    draw_text_line(
        page,
        'Book with Us',
        x=button_x,
        y=button_top - layout.button_height / 2 - 4,
        font=fonts.body_bold,
        size=11,
        color=colors.white,
        width=layout.button_width,
        align='center',
    )

    social_y = y - layout.button_height
    diameter = layout.social_radius * 2
    social_x = right - len(layout.social_labels) * (diameter + 6) + 6
    for label in layout.social_labels:
        page.draw_circle(
            cx=social_x + layout.social_radius,
            cy=social_y,
            radius=layout.social_radius,
            stroke=theme.accent,
        )
        draw_text_line(
            page,
            label,
            x=social_x,
            y=social_y - 3,
            font=fonts.body_bold,
            size=8,
            color=theme.accent,
            width=diameter,
            align='center',
        )
        social_x += diameter + 6
    return social_y - layout.social_radius


def stamp_running_footer(
    composition: Composition,
    *,
    logo: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    geometry: PageGeometry,
    layout: FooterLayout,
    skip_first: bool = True,
) -> int:
    stamped = 0
    left = geometry.left
    right = geometry.width - geometry.margin_x
    for page in composition.pages:
        if skip_first and page.index == 0:
            continue
        draw_line(
            page,
            x1=left,
            y1=layout.line_y,
            x2=right,
            y2=layout.line_y,
            color=theme.accent,
            thickness=layout.line_thickness,
        )
        if logo is not None:
            width, height = fit_within(logo.width, logo.height, max_width=120, max_height=layout.logo_height)
            page.draw_image(logo, x=left, y=layout.logo_y, width=width, height=height)
        label = str(page.index + 1)
        draw_text_line(
            page,
            label,
            x=left,
            y=layout.page_number_y,
            font=fonts.body_bold,
            size=layout.page_number_size,
            color=theme.accent,
            width=right - left,
            align='right',
        )
        stamped += 1
    return stamped
