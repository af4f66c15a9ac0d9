from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib import colors

from ...types import BankDetails, ConsultantDetails, PricingDetails
from ..fonts import FontFamily
from ..formatting import format_currency
from ..geometry import TEXT_DARK, KeyValueTableLayout, Theme
from ..primitives import draw_rectangle, draw_text_line
from ..surface import Page


ROW_FILLS = (colors.Color(0.85, 0.85, 0.85), colors.Color(0.95, 0.95, 0.95))
CONSULTANT_TABLE_WIDTH = 412.0
BANK_TRAILING_GAP = 35.0


@dataclass(frozen=True)
class KeyValueRow:
    label: str
    value: str
    emphasized: bool = False


def key_value_table_height(row_count: int, layout: KeyValueTableLayout, *, trailing_gap: float | None = None) -> float:
    gap = layout.trailing_gap if trailing_gap is None else trailing_gap
    return layout.header_gap + layout.bar_height + row_count * layout.row_height + gap


def render_key_value_table(
    page: Page,
    title: str,
    rows: list[KeyValueRow],
    *,
    fonts: FontFamily,
    theme: Theme,
    layout: KeyValueTableLayout,
    x: float,
    y: float,
    width: float,
    trailing_gap: float | None = None,
) -> float:
    page.draw_text(title, x=x, y=y, font=fonts.heading_bold, size=layout.header_size, color=theme.accent)
    current_y = y - layout.header_gap
    current_y = draw_rectangle(page, x=x, y=current_y, width=width, height=layout.bar_height, fill=theme.accent)

    for index, row in enumerate(rows):
        size = layout.total_font_size if row.emphasized else layout.font_size
        font = fonts.body_bold if row.emphasized else fonts.body
        row_bottom = draw_rectangle(
            page,
            x=x,
            y=current_y,
            width=width,
            height=layout.row_height,
            fill=ROW_FILLS[index % 2],
        )
        text_y = current_y - layout.row_height / 2 - 5
        page.draw_text(row.label, x=x + layout.label_inset, y=text_y, font=font, size=size, color=TEXT_DARK)
        draw_text_line(
            page,
            row.value,
            x=x,
            y=text_y,
            font=font,
            size=size,
            color=theme.accent if row.emphasized else TEXT_DARK,
            width=width - layout.label_inset,
            align='right',
        )
        current_y = row_bottom

    return current_y - (layout.trailing_gap if trailing_gap is None else trailing_gap)


def pricing_rows(pricing: PricingDetails) -> list[KeyValueRow]:
    currency = pricing.currency
    return [
        KeyValueRow('Subtotal', format_currency(pricing.subtotal, currency)),
        KeyValueRow('Taxes', format_currency(pricing.taxes, currency)),
        KeyValueRow('Fees', format_currency(pricing.fees, currency)),
        KeyValueRow('Total Amount', format_currency(pricing.computed_total, currency), emphasized=True),
    ]


def bank_rows(bank: BankDetails) -> list[KeyValueRow]:
    rows = [
        KeyValueRow('Account Name', bank.account_name or '-'),
        KeyValueRow('Account Number', bank.account_number or '-'),
        KeyValueRow('Bank Name', bank.bank_name or '-'),
        KeyValueRow('SWIFT Code', bank.swift_code or '-'),
    ]
    if str(bank.iban or '').strip():
        rows.append(KeyValueRow('IBAN', str(bank.iban)))
    return rows


def consultant_rows(consultant: ConsultantDetails) -> list[KeyValueRow]:
    return [
        KeyValueRow('Name', consultant.name or '-'),
        KeyValueRow('Email', consultant.email or '-'),
        KeyValueRow('Phone', consultant.phone or '-'),
    ]


def render_pricing_table(
    page: Page,
    pricing: PricingDetails,
    *,
    fonts: FontFamily,
    theme: Theme,
    layout: KeyValueTableLayout,
    x: float,
    y: float,
    width: float,
) -> float:
    return render_key_value_table(
        page,
        'Pricing Summary',
        pricing_rows(pricing),
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        y=y,
        width=width,
    )


def render_bank_table(
    page: Page,
    bank: BankDetails,
    *,
    fonts: FontFamily,
    theme: Theme,
    layout: KeyValueTableLayout,
    x: float,
    y: float,
    width: float,
) -> float:
    return render_key_value_table(
        page,
        'Bank Details',
        bank_rows(bank),
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        y=y,
        width=width,
        trailing_gap=BANK_TRAILING_GAP,
    )


def render_consultant_table(
    page: Page,
    consultant: ConsultantDetails,
    *,
    fonts: FontFamily,
    theme: Theme,
    layout: KeyValueTableLayout,
    x: float,
    y: float,
) -> float:
    return render_key_value_table(
        page,
        'Consultant Details',
        consultant_rows(consultant),
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=x,
        y=y,
        width=CONSULTANT_TABLE_WIDTH,
    )
