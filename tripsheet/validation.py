from __future__ import annotations

import re
from datetime import date
from typing import Any

from .types import ItineraryDocument


IMAGE_FIELDS = {'image', 'images', 'hero_image', 'logo', 'destination_image', 'airline_logo'}

_TYPOGRAPHIC_REPLACEMENTS = {
    '‘': "'",
    '’': "'",
    '‚': "'",
    '‛': "'",
    '“': '"',
    '”': '"',
    '„': '"',
    '–': '-',
    '—': '-',
    '−': '-',
    '…': '...',
    '\u00a0': ' ',
    '•': '-',
}
_WHITESPACE_CONTROL_RE = re.compile(r'[\r\n\t\f\v]+')
_CONTROL_RE = re.compile(r'[\x00-\x1f\x7f-\x9f\u200b-\u200f\u2028\u2029\ufeff]')
_SPACES_RE = re.compile(r' {2,}')


class ItineraryValidationError(ValueError):
    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        summary = '; '.join(f'{key}: {message}' for key, message in self.errors.items())
        super().__init__(f'Invalid itinerary data: {summary}')


def sanitize_text(value: str | None) -> str:
    text = str(value or '')
    for source, target in _TYPOGRAPHIC_REPLACEMENTS.items():
        text = text.replace(source, target)
    text = _WHITESPACE_CONTROL_RE.sub(' ', text)
    text = _CONTROL_RE.sub('', text)
    return _SPACES_RE.sub(' ', text).strip()


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, list):
        return [_sanitize_value(item) for item in value]
    if isinstance(value, dict):
        return {
            key: item if key in IMAGE_FIELDS else _sanitize_value(item)
            for key, item in value.items()
        }
    return value


def sanitize_itinerary(document: ItineraryDocument) -> ItineraryDocument:
    payload = _sanitize_value(document.model_dump())
    return ItineraryDocument.model_validate(payload)


def _parse_iso_date(value: str) -> date | None:
    token = str(value or '').strip()[:10]
    if not token:
        return None
    try:
        return date.fromisoformat(token)
    except ValueError:
        return None


def validate_itinerary(document: ItineraryDocument) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not document.client_name.strip():
        errors['clientName'] = 'Client name is required'
    if not document.destination.strip():
        errors['destination'] = 'Destination is required'
    if not document.booking_ref.strip():
        errors['bookingRef'] = 'Booking reference is required'

    start = _parse_iso_date(document.travel_dates.start)
    end = _parse_iso_date(document.travel_dates.end)
    if start is None:
        errors['travelDates.start'] = 'Start date is required'
    if end is None:
        errors['travelDates.end'] = 'End date is required'
    if start is not None and end is not None and end < start:
        errors['travelDates.end'] = 'End date must be on or after the start date'

    if not document.days:
        errors['days'] = 'At least one day is required'
    for index, day in enumerate(document.days):
        if not day.title.strip():
            errors[f'days.{index}.title'] = 'Day title is required'
        if not day.activities.strip() and not day.has_subheadings:
            errors[f'days.{index}.activities'] = 'Day activities are required'

    for index, flight in enumerate(document.flights):
        if not flight.flight_number.strip():
            errors[f'flights.{index}.flightNumber'] = 'Flight number is required'
        for side, endpoint in (('departure', flight.departure), ('arrival', flight.arrival)):
            if not endpoint.airport.strip():
                errors[f'flights.{index}.{side}.airport'] = 'Airport is required'
            if not endpoint.date.strip():
                errors[f'flights.{index}.{side}.date'] = 'Date is required'

    for index, hotel in enumerate(document.hotels):
        if not hotel.name.strip():
            errors[f'hotels.{index}.name'] = 'Hotel name is required'
        if not hotel.check_in.strip():
            errors[f'hotels.{index}.checkIn'] = 'Check-in date is required'
        if not hotel.check_out.strip():
            errors[f'hotels.{index}.checkOut'] = 'Check-out date is required'
        if hotel.number_of_rooms < 1:
            errors[f'hotels.{index}.numberOfRooms'] = 'At least one room is required'

    for field_name in ('subtotal', 'taxes', 'fees'):
        if getattr(document.pricing, field_name) < 0:
            errors[f'pricing.{field_name}'] = 'Amount cannot be negative'

    bank = document.bank_details
    required_bank = {
        'accountName': bank.account_name,
        'accountNumber': bank.account_number,
        'bankName': bank.bank_name,
        'swiftCode': bank.swift_code,
    }
    if bank.has_any:
        for key, value in required_bank.items():
            if not value.strip():
                errors[f'bankDetails.{key}'] = 'Required when bank details are provided'

    if not document.contact_info.strip():
        errors['contactInfo'] = 'Contact information is required'

    return errors


def ensure_valid(document: ItineraryDocument) -> ItineraryDocument:
    errors = validate_itinerary(document)
    if errors:
        raise ItineraryValidationError(errors)
    return document
