from __future__ import annotations

from datetime import datetime


CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
}


def format_currency(amount: float, currency: str = 'USD') -> str:
    code = str(currency or 'USD').strip().upper() or 'USD'
    symbol = CURRENCY_SYMBOLS.get(code, f'{code} ')
    value = float(amount or 0.0)
    sign = '-' if value < 0 else ''
    return f'{sign}{symbol}{abs(value):,.2f}'


def _parse_date(value: str) -> datetime | None:
    token = str(value or '').strip()
    if not token:
        return None
    try:
        return datetime.fromisoformat(token.replace('Z', '+00:00'))
    except ValueError:
        pass
    for pattern in ('%Y-%m-%d', '%d/%m/%Y', '%m/%d/%Y', '%d-%m-%Y'):
        try:
            return datetime.strptime(token, pattern)
        except ValueError:
            continue
    return None


def format_date(value: str) -> str:
    parsed = _parse_date(value)
    if parsed is None:
        return str(value or '').strip()
    return f'{parsed:%b} {parsed.day}, {parsed.year}'


def format_time(value: str) -> str:
    token = str(value or '').strip()
    for pattern in ('%H:%M', '%H:%M:%S', '%I:%M %p'):
        try:
            parsed = datetime.strptime(token, pattern)
        except ValueError:
            continue
        hour = parsed.hour % 12 or 12
        return f'{hour}:{parsed:%M} {parsed:%p}'
    return token


def format_date_range(start: str, end: str) -> str:
    first = format_date(start)
    last = format_date(end)
    if first and last:
        return f'{first} - {last}'
    return first or last
