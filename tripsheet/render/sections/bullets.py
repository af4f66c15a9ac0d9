from __future__ import annotations

import logging

from ..cursor import PageCursor
from ..fonts import FontFamily
from ..geometry import BulletSectionLayout, Theme
from ..primitives import SectionHeaderSpec, bullet_item_height, draw_bullet_item, draw_placeholder


logger = logging.getLogger(__name__)


def bullet_section_header(
    title: str,
    fonts: FontFamily,
    theme: Theme,
    *,
    x: float,
    layout: BulletSectionLayout,
) -> SectionHeaderSpec:
    return SectionHeaderSpec(
        title=title,
        continued_title=f'{title} (continued)',
        font=fonts.heading,
        size=layout.header_size,
        color=theme.accent,
        spacing=layout.header_gap,
        x=x,
    )


def render_bullet_items(
    cursor: PageCursor,
    items: list[str],
    *,
    placeholder: str,
    fonts: FontFamily,
    theme: Theme,
    layout: BulletSectionLayout,
    x: float,
    width: float,
) -> float:
    """Draws items under the cursor's active header, paginating per item."""
    item_x = x + layout.inset
    item_width = width - 2 * layout.inset
    style = layout.style

    visible = [item for item in items if item.strip()]
    if not visible:
        cursor.y = draw_placeholder(
            cursor.page,
            placeholder,
            x=item_x,
            y=cursor.y,
            font=fonts.body_italic,
            size=style.font_size,
            color=theme.muted,
            spacing=style.font_size * style.line_height + style.item_spacing,
        )
        return cursor.y

    for item in visible:
        height = bullet_item_height(item, max_width=item_width, font=fonts.body, style=style)
        if cursor.ensure_page(height):
            logger.debug('Bullet item moved to page %d', cursor.page_index)
        cursor.y = draw_bullet_item(
            cursor.page,
            item,
            x=item_x,
            y=cursor.y,
            max_width=item_width,
            font=fonts.body,
            style=style,
            color=theme.text,
            bullet_color=theme.accent,
        )
    return cursor.y


def render_bullet_section(
    cursor: PageCursor,
    title: str,
    items: list[str],
    *,
    placeholder: str,
    fonts: FontFamily,
    theme: Theme,
    layout: BulletSectionLayout,
    x: float,
    width: float,
) -> float:
    cursor.start_section(bullet_section_header(title, fonts, theme, x=x, layout=layout))
    return render_bullet_items(
        cursor,
        items,
        placeholder=placeholder,
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        width=width,
    )


def render_inclusions_and_exclusions(
    cursor: PageCursor,
    inclusions: list[str],
    exclusions: list[str],
    *,
    fonts: FontFamily,
    theme: Theme,
    layout: BulletSectionLayout,
    x: float,
    width: float,
) -> float:
    render_bullet_section(
        cursor,
        'Inclusions',
        inclusions,
        placeholder='No inclusions specified',
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        width=width,
    )
    cursor.move_down(layout.section_gap)
    cursor.set_header(None)
    cursor.ensure_page(layout.section_reserve)
    return render_bullet_section(
        cursor,
        'Exclusions',
        exclusions,
        placeholder='No exclusions specified',
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        width=width,
    )
