from __future__ import annotations

from ..fonts import FontFamily
from ..geometry import INCLUSION_BULLETS, PageGeometry, Theme
from ..images import EmbeddedImage
from ..primitives import draw_bullet_list, draw_wrapped_paragraph
from ..surface import Page
from .hero import draw_full_page_image


TITLE_SIZE = 36.0
TITLE_GAP = 60.0


def render_why_choose_us(
    page: Page,
    reasons: list[str],
    *,
    image: EmbeddedImage | None,
    fonts: FontFamily,
    theme: Theme,
    geometry: PageGeometry,
    y: float,
) -> float:
    if image is not None:
        draw_full_page_image(page, image, geometry=geometry)
        return geometry.margin_bottom

    page.draw_text('Why Choose Us', x=geometry.left, y=y, font=fonts.heading, size=TITLE_SIZE, color=theme.accent)
    current_y = y - TITLE_GAP
    if not any(reason.strip() for reason in reasons):
        return draw_wrapped_paragraph(
            page,
            'Why Choose Us details will be provided by your travel consultant.',
            x=geometry.left,
            y=current_y,
            max_width=geometry.content_width,
            font=fonts.body_italic,
            font_size=12,
            color=theme.muted,
        )
    return draw_bullet_list(
        page,
        reasons,
        x=geometry.left + 20,
        y=current_y,
        max_width=geometry.content_width - 40,
        font=fonts.body,
        style=INCLUSION_BULLETS,
        color=theme.text,
        bullet_color=theme.accent,
    )
