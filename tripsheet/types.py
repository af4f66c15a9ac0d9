from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


MAX_SUBHEADINGS = 5


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )


class TravelDates(_Record):
    start: str = ''
    end: str = ''


class DaySubheading(_Record):
    title: str = ''
    description: str = ''


class ItineraryDay(_Record):
    day_number: int = Field(default=1, ge=1)
    title: str = ''
    activities: str = ''
    subheadings: list[DaySubheading] = Field(default_factory=list)
    image: str | None = None
    hotel: str | None = None

    @field_validator('subheadings')
    @classmethod
    def _limit_subheadings(cls, value: list[DaySubheading]) -> list[DaySubheading]:
        if len(value) > MAX_SUBHEADINGS:
            raise ValueError(f'a day supports at most {MAX_SUBHEADINGS} subheadings')
        return value

    @property
    def has_subheadings(self) -> bool:
        return any(item.title.strip() or item.description.strip() for item in self.subheadings)


class FlightEndpoint(_Record):
    airport: str = ''
    date: str = ''
    time: str = ''


class FlightDetails(_Record):
    flight_number: str = ''
    departure: FlightEndpoint = Field(default_factory=FlightEndpoint)
    arrival: FlightEndpoint = Field(default_factory=FlightEndpoint)
    duration: str = ''
    cabin: str = ''
    airline_logo: str | None = None


class HotelStay(_Record):
    name: str = ''
    check_in: str = ''
    check_out: str = ''
    number_of_rooms: int = 1
    meal_plan: str = ''
    room_category: str = ''
    images: list[str] = Field(default_factory=list)


class PricingDetails(_Record):
    subtotal: float = 0.0
    taxes: float = 0.0
    fees: float = 0.0
    total: float | None = None
    currency: str = 'USD'

    @property
    def computed_total(self) -> float:
        return self.subtotal + self.taxes + self.fees


class BankDetails(_Record):
    account_name: str = ''
    account_number: str = ''
    bank_name: str = ''
    swift_code: str = ''
    iban: str | None = None

    @property
    def has_any(self) -> bool:
        values = (self.account_name, self.account_number, self.bank_name, self.swift_code, self.iban)
        return any(str(value or '').strip() for value in values)


class ConsultantDetails(_Record):
    name: str = ''
    email: str = ''
    phone: str = ''

    @property
    def has_any(self) -> bool:
        return any(value.strip() for value in (self.name, self.email, self.phone))


class TermsConditions(_Record):
    cancellation: str = ''
    payment: str = ''
    insurance: str = ''
    liability: str = ''

    def as_list(self) -> list[str]:
        values = (self.cancellation, self.payment, self.insurance, self.liability)
        return [value for value in values if value.strip()]


class BasicDetails(_Record):
    customer_details: str = ''
    total_people: str = ''
    adults: str = ''
    children: str = ''
    infants: str = ''
    travel_dates: str = ''
    destination_image: str | None = None

    @field_validator('total_people', 'adults', 'children', 'infants', mode='before')
    @classmethod
    def _coerce_count(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


class ItineraryDocument(_Record):
    client_name: str = ''
    destination: str = ''
    travel_dates: TravelDates = Field(default_factory=TravelDates)
    booking_ref: str = ''
    days: list[ItineraryDay] = Field(default_factory=list)
    flights: list[FlightDetails] = Field(default_factory=list)
    hotels: list[HotelStay] = Field(default_factory=list)
    inclusions: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    pricing: PricingDetails = Field(default_factory=PricingDetails)
    bank_details: BankDetails = Field(default_factory=BankDetails)
    terms: TermsConditions = Field(default_factory=TermsConditions)
    terms_list: list[str] = Field(default_factory=list)
    contact_info: str = ''
    consultant_details: ConsultantDetails = Field(default_factory=ConsultantDetails)
    company_name: str | None = None
    logo: str | None = None
    hero_image: str | None = None
    why_choose_us: list[str] = Field(default_factory=list)
    basic_details: BasicDetails | None = None
    tour_highlights: list[str] = Field(default_factory=list)

    def effective_terms(self) -> list[str]:
        listed = [item for item in self.terms_list if item.strip()]
        if listed:
            return listed
        return self.terms.as_list()


def renumber_days(days: list[ItineraryDay]) -> list[ItineraryDay]:
    return [day.model_copy(update={'day_number': index}) for index, day in enumerate(days, start=1)]


def append_day(days: list[ItineraryDay], *, title: str = '', activities: str = '') -> list[ItineraryDay]:
    day = ItineraryDay(day_number=len(days) + 1, title=title, activities=activities)
    return [*renumber_days(days), day]


def remove_day(days: list[ItineraryDay], index: int) -> list[ItineraryDay]:
    if index < 0 or index >= len(days):
        raise IndexError(f'day index out of range: {index}')
    return renumber_days([day for position, day in enumerate(days) if position != index])
