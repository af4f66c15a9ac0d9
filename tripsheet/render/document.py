from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ..config import Settings, get_settings
from ..types import (
    BankDetails,
    BasicDetails,
    ConsultantDetails,
    FlightDetails,
    HotelStay,
    ItineraryDay,
    ItineraryDocument,
    PricingDetails,
)
from .cursor import PageCursor
from .fonts import FontFamily, resolve_fonts
from .formatting import format_date_range
from .geometry import DARK_THEME, DEFAULT_LAYOUT, LIGHT_THEME, LayoutConfig, Theme
from .images import EmbeddedImage, ImageEmbedError, embed_image, embed_image_file
from .sections.basic_details import render_basic_details
from .sections.bullets import render_bullet_section, render_inclusions_and_exclusions
from .sections.closing import CONTACT_CLEARANCE, render_closing
from .sections.flights import flights_table_height, render_flights
from .sections.footer import stamp_running_footer
from .sections.hero import CoverText, render_hero
from .sections.itinerary import itinerary_header, render_itinerary
from .sections.stays import render_stays, stays_header
from .sections.why_choose_us import render_why_choose_us
from .surface import Composition, write_pdf


logger = logging.getLogger(__name__)


class ItineraryRenderError(RuntimeError):
    pass


@dataclass
class AssetBundle:
    hero: EmbeddedImage | None = None
    why_choose_us: EmbeddedImage | None = None
    basic_template: EmbeddedImage | None = None
    destination: EmbeddedImage | None = None
    footer_logo: EmbeddedImage | None = None
    day_images: dict[int, EmbeddedImage] = field(default_factory=dict)
    hotel_images: dict[int, EmbeddedImage] = field(default_factory=dict)
    airline_logos: dict[int, EmbeddedImage] = field(default_factory=dict)
    failures: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HeroSection:
    cover: CoverText
    image: EmbeddedImage | None


@dataclass(frozen=True)
class WhyChooseUsSection:
    reasons: list[str]
    image: EmbeddedImage | None


@dataclass(frozen=True)
class BasicDetailsSection:
    details: BasicDetails
    destination_image: EmbeddedImage | None
    template_image: EmbeddedImage | None


@dataclass(frozen=True)
class HighlightsSection:
    items: list[str]


@dataclass(frozen=True)
class ItinerarySection:
    days: list[ItineraryDay]
    images: dict[int, EmbeddedImage]


@dataclass(frozen=True)
class StaysSection:
    hotels: list[HotelStay]
    images: dict[int, EmbeddedImage]


@dataclass(frozen=True)
class FlightsSection:
    flights: list[FlightDetails]
    logos: dict[int, EmbeddedImage]


@dataclass(frozen=True)
class InclusionsSection:
    inclusions: list[str]
    exclusions: list[str]


@dataclass(frozen=True)
class TermsSection:
    terms: list[str]


@dataclass(frozen=True)
class ClosingSection:
    pricing: PricingDetails
    bank: BankDetails
    consultant: ConsultantDetails
    company_name: str
    contact_info: str


PageSection = Union[
    HeroSection,
    WhyChooseUsSection,
    BasicDetailsSection,
    HighlightsSection,
    ItinerarySection,
    StaysSection,
    FlightsSection,
    InclusionsSection,
    TermsSection,
    ClosingSection,
]


@dataclass
class RenderContext:
    composition: Composition
    fonts: FontFamily
    theme: Theme
    layout: LayoutConfig

    def open_cursor(self, *, header=None, bottom_margin: float | None = None) -> PageCursor:
        return PageCursor(
            self.composition,
            self.layout.page,
            background=self.theme.background,
            header=header,
            bottom_margin=bottom_margin,
        )


def _safe_embed(data_url: str | None, *, label: str, bundle: AssetBundle) -> EmbeddedImage | None:
    if not str(data_url or '').strip():
        return None
    try:
        return embed_image(str(data_url), label=label)
    except ImageEmbedError as exc:
        logger.warning('Failed to embed %s: %s', label, exc)
        bundle.failures.append(label)
        return None


def _safe_embed_file(path: Path | None, *, label: str, bundle: AssetBundle) -> EmbeddedImage | None:
    if path is None or not path.is_file():
        return None
    try:
        return embed_image_file(path, label=label)
    except ImageEmbedError as exc:
        logger.warning('Failed to embed %s from %s: %s', label, path, exc)
        bundle.failures.append(label)
        return None


def embed_assets(document: ItineraryDocument, settings: Settings) -> AssetBundle:
    bundle = AssetBundle()
    bundle.hero = _safe_embed(document.hero_image, label='hero image', bundle=bundle)
    bundle.why_choose_us = _safe_embed_file(
        settings.asset_path(settings.why_choose_us_image),
        label='why choose us image',
        bundle=bundle,
    )
    bundle.basic_template = _safe_embed_file(
        settings.asset_path(settings.basic_details_template),
        label='basic details template',
        bundle=bundle,
    )
    if document.basic_details is not None:
        bundle.destination = _safe_embed(
            document.basic_details.destination_image,
            label='destination image',
            bundle=bundle,
        )
    bundle.footer_logo = _safe_embed(document.logo, label='company logo', bundle=bundle)
    if bundle.footer_logo is None:
        bundle.footer_logo = _safe_embed_file(
            settings.asset_path(settings.footer_logo),
            label='footer logo',
            bundle=bundle,
        )

    for index, day in enumerate(document.days):
        image = _safe_embed(day.image, label=f'day {day.day_number} image', bundle=bundle)
        if image is not None:
            bundle.day_images[index] = image
    for index, hotel in enumerate(document.hotels):
        if not hotel.images:
            continue
        image = _safe_embed(hotel.images[0], label=f'hotel {index + 1} image', bundle=bundle)
        if image is not None:
            bundle.hotel_images[index] = image
    for index, flight in enumerate(document.flights):
        logo = _safe_embed(flight.airline_logo, label=f'flight {index + 1} airline logo', bundle=bundle)
        if logo is not None:
            bundle.airline_logos[index] = logo
    return bundle


def plan_sections(document: ItineraryDocument, assets: AssetBundle, *, company_name: str) -> list[PageSection]:
    sections: list[PageSection] = [
        HeroSection(
            cover=CoverText(
                company_name=company_name,
                destination=document.destination,
                date_range=format_date_range(document.travel_dates.start, document.travel_dates.end),
                client_name=document.client_name,
                booking_ref=document.booking_ref,
            ),
            image=assets.hero,
        )
    ]

    reasons = [item for item in document.why_choose_us if item.strip()]
    if assets.why_choose_us is not None or reasons:
        sections.append(WhyChooseUsSection(reasons=reasons, image=assets.why_choose_us))

    sections.append(
        BasicDetailsSection(
            details=document.basic_details or BasicDetails(
                customer_details=document.client_name,
                travel_dates=format_date_range(document.travel_dates.start, document.travel_dates.end),
            ),
            destination_image=assets.destination,
            template_image=assets.basic_template,
        )
    )

    highlights = [item for item in document.tour_highlights if item.strip()]
    if highlights:
        sections.append(HighlightsSection(items=highlights))

    sections.append(ItinerarySection(days=list(document.days), images=dict(assets.day_images)))

    if document.hotels:
        sections.append(StaysSection(hotels=list(document.hotels), images=dict(assets.hotel_images)))

    sections.append(FlightsSection(flights=list(document.flights), logos=dict(assets.airline_logos)))
    sections.append(InclusionsSection(inclusions=list(document.inclusions), exclusions=list(document.exclusions)))
    sections.append(TermsSection(terms=document.effective_terms()))
    sections.append(
        ClosingSection(
            pricing=document.pricing,
            bank=document.bank_details,
            consultant=document.consultant_details,
            company_name=company_name,
            contact_info=document.contact_info,
        )
    )
    return sections


def render_section(context: RenderContext, section: PageSection) -> None:
    fonts = context.fonts
    theme = context.theme
    layout = context.layout
    geometry = layout.page
    x = geometry.left
    width = geometry.content_width

    if isinstance(section, HeroSection):
        cursor = context.open_cursor()
        render_hero(cursor.page, section.cover, image=section.image, fonts=fonts, theme=theme, geometry=geometry)
        return

    if isinstance(section, WhyChooseUsSection):
        cursor = context.open_cursor()
        render_why_choose_us(
            cursor.page,
            section.reasons,
            image=section.image,
            fonts=fonts,
            theme=theme,
            geometry=geometry,
            y=cursor.y,
        )
        return

    if isinstance(section, BasicDetailsSection):
        cursor = context.open_cursor()
        render_basic_details(
            cursor.page,
            section.details,
            destination_image=section.destination_image,
            template_image=section.template_image,
            fonts=fonts,
            theme=theme,
            geometry=geometry,
            layout=layout.facts,
            y=cursor.y,
        )
        return

    if isinstance(section, HighlightsSection):
        cursor = context.open_cursor()
        render_bullet_section(
            cursor,
            'Tour Highlights',
            section.items,
            placeholder='No tour highlights specified',
            fonts=fonts,
            theme=theme,
            layout=layout.highlights,
            x=x,
            width=width,
        )
        return

    if isinstance(section, ItinerarySection):
        cursor = context.open_cursor(header=itinerary_header(fonts, theme, x=x, layout=layout.itinerary))
        render_itinerary(
            cursor,
            section.days,
            images=section.images,
            fonts=fonts,
            theme=theme,
            layout=layout.itinerary,
            x=x,
        )
        return

    if isinstance(section, StaysSection):
        cursor = context.open_cursor(header=stays_header(fonts, theme, x=x, layout=layout.cards))
        render_stays(
            cursor,
            section.hotels,
            images=section.images,
            fonts=fonts,
            theme=theme,
            layout=layout.cards,
            x=x,
            width=width,
        )
        return

    if isinstance(section, FlightsSection):
        cursor = context.open_cursor()
        if cursor.would_overflow(flights_table_height(len(section.flights), layout.flights)):
            logger.warning('Flights table with %d rows exceeds the page height', len(section.flights))
        render_flights(
            cursor.page,
            section.flights,
            logos=section.logos,
            fonts=fonts,
            theme=theme,
            layout=layout.flights,
            x=x,
            y=cursor.y,
        )
        return

    if isinstance(section, InclusionsSection):
        cursor = context.open_cursor()
        render_inclusions_and_exclusions(
            cursor,
            section.inclusions,
            section.exclusions,
            fonts=fonts,
            theme=theme,
            layout=layout.inclusions,
            x=x,
            width=width,
        )
        return

    if isinstance(section, TermsSection):
        cursor = context.open_cursor()
        render_bullet_section(
            cursor,
            'Terms and Conditions',
            section.terms,
            placeholder='No terms and conditions specified',
            fonts=fonts,
            theme=theme,
            layout=layout.terms,
            x=x,
            width=width,
        )
        return

    if isinstance(section, ClosingSection):
        cursor = context.open_cursor(bottom_margin=layout.footer.cta_y + CONTACT_CLEARANCE)
        render_closing(
            cursor,
            pricing=section.pricing,
            bank=section.bank,
            consultant=section.consultant,
            company_name=section.company_name,
            contact_info=section.contact_info,
            fonts=fonts,
            theme=theme,
            tables=layout.tables,
            footer=layout.footer,
            x=x,
            width=width,
        )
        return

    raise TypeError(f'unsupported page section: {section!r}')


def compose_itinerary(
    document: ItineraryDocument,
    *,
    dark_mode: bool | None = None,
    settings: Settings | None = None,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> Composition:
    settings = settings or get_settings()
    use_dark = settings.dark_mode if dark_mode is None else dark_mode
    company_name = str(document.company_name or '').strip() or settings.default_company_name

    fonts = resolve_fonts(settings.fonts_dir)
    theme = DARK_THEME if use_dark else LIGHT_THEME
    assets = embed_assets(document, settings)
    if assets.failures:
        logger.info('Rendering without %d image(s): %s', len(assets.failures), ', '.join(assets.failures))

    composition = Composition(width=layout.page.width, height=layout.page.height)
    context = RenderContext(composition=composition, fonts=fonts, theme=theme, layout=layout)
    for section in plan_sections(document, assets, company_name=company_name):
        render_section(context, section)

    stamp_running_footer(
        composition,
        logo=assets.footer_logo,
        fonts=fonts,
        theme=theme,
        geometry=layout.page,
        layout=layout.footer,
    )
    logger.info('Composed itinerary for %s: %d pages', document.client_name or '-', len(composition))
    return composition


def build_itinerary_pdf(
    document: ItineraryDocument,
    *,
    dark_mode: bool | None = None,
    settings: Settings | None = None,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> bytes:
    settings = settings or get_settings()
    try:
        composition = compose_itinerary(document, dark_mode=dark_mode, settings=settings, layout=layout)
        company_name = str(document.company_name or '').strip() or settings.default_company_name
        title_parts = [part for part in (document.destination, 'Itinerary') if part]
        title = ' '.join(title_parts)
        if document.client_name:
            title = f'{title} - {document.client_name}'
        return write_pdf(
            composition,
            title=title,
            author=company_name,
            subject=settings.pdf_subject,
            producer=settings.pdf_producer,
        )
    except Exception as exc:
        logger.warning('Failed to generate itinerary PDF: %s', exc)
        raise ItineraryRenderError(f'Failed to generate PDF: {exc}') from exc
