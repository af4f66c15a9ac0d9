from __future__ import annotations

import logging

from ...types import BankDetails, ConsultantDetails, PricingDetails
from ..cursor import PageCursor
from ..fonts import FontFamily
from ..geometry import FooterLayout, KeyValueTableLayout, Theme
from ..primitives import draw_wrapped_paragraph
from .footer import render_call_to_action
from .tables import (
    BANK_TRAILING_GAP,
    bank_rows,
    consultant_rows,
    key_value_table_height,
    render_bank_table,
    render_consultant_table,
    render_pricing_table,
)


logger = logging.getLogger(__name__)

TABLE_GAP = 40.0
CONTACT_CLEARANCE = 50.0


def render_closing(
    cursor: PageCursor,
    *,
    pricing: PricingDetails,
    bank: BankDetails,
    consultant: ConsultantDetails,
    company_name: str,
    contact_info: str,
    fonts: FontFamily,
    theme: Theme,
    tables: KeyValueTableLayout,
    footer: FooterLayout,
    x: float,
    width: float,
) -> float:
    cursor.y = render_pricing_table(
        cursor.page,
        pricing,
        fonts=fonts,
        theme=theme,
        layout=tables,
        x=x,
        y=cursor.y,
        width=width,
    )
    cursor.move_down(TABLE_GAP)

    if bank.has_any:
        cursor.ensure_page(key_value_table_height(len(bank_rows(bank)), tables, trailing_gap=BANK_TRAILING_GAP))
        cursor.y = render_bank_table(
            cursor.page,
            bank,
            fonts=fonts,
            theme=theme,
            layout=tables,
            x=x,
            y=cursor.y,
            width=width,
        )

    if consultant.has_any:
        cursor.ensure_page(key_value_table_height(len(consultant_rows(consultant)), tables))
        cursor.y = render_consultant_table(
            cursor.page,
            consultant,
            fonts=fonts,
            theme=theme,
            layout=tables,
            x=x,
            y=cursor.y,
        )

    contact = contact_info.strip()
    if contact:
        floor = footer.cta_y + CONTACT_CLEARANCE
        if cursor.y - tables.font_size * 1.4 <= floor:
            logger.warning('Contact block does not fit above the call-to-action; it is truncated')
        cursor.y = draw_wrapped_paragraph(
            cursor.page,
            contact,
            x=x,
            y=cursor.y,
            max_width=width,
            font=fonts.body,
            font_size=tables.font_size,
            color=theme.text,
            min_y=floor,
        )

    render_call_to_action(
        cursor.page,
        company_name=company_name,
        fonts=fonts,
        theme=theme,
        geometry=cursor.geometry,
        layout=footer,
    )
    return cursor.y
