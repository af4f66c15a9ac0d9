import io
import logging

import pytest
from PIL import Image
from pypdf import PdfReader

from tripsheet.render import document as document_module
from tripsheet.render.document import (
    AssetBundle,
    BasicDetailsSection,
    ClosingSection,
    FlightsSection,
    HeroSection,
    HighlightsSection,
    InclusionsSection,
    ItineraryRenderError,
    ItinerarySection,
    RenderContext,
    StaysSection,
    TermsSection,
    WhyChooseUsSection,
    build_itinerary_pdf,
    compose_itinerary,
    embed_assets,
    plan_sections,
    render_section,
)
from tripsheet.render.fonts import STANDARD_FONTS
from tripsheet.render.geometry import DARK_THEME, DEFAULT_LAYOUT, LIGHT_THEME
from tripsheet.render.surface import Composition, LineOp, RectOp
from tripsheet.types import ItineraryDocument


@pytest.fixture
def document(itinerary_payload):
    return ItineraryDocument.model_validate(itinerary_payload)


def test_plan_skips_optional_sections_without_content(document):
    sections = plan_sections(document, AssetBundle(), company_name='THE LUXE TRAILS')
    assert [type(section) for section in sections] == [
        HeroSection,
        BasicDetailsSection,
        ItinerarySection,
        StaysSection,
        FlightsSection,
        InclusionsSection,
        TermsSection,
        ClosingSection,
    ]
    basic = sections[1]
    assert basic.details.customer_details == 'Ada Lovelace'
    assert basic.details.travel_dates == 'Apr 1, 2025 - Apr 5, 2025'


def test_plan_includes_why_choose_us_highlights_and_drops_empty_stays(itinerary_payload):
    itinerary_payload['whyChooseUs'] = ['Private guides', ' ']
    itinerary_payload['tourHighlights'] = ['Sunrise at Fushimi Inari']
    itinerary_payload['hotels'] = []
    sections = plan_sections(
        ItineraryDocument.model_validate(itinerary_payload),
        AssetBundle(),
        company_name='THE LUXE TRAILS',
    )
    kinds = [type(section) for section in sections]
    assert WhyChooseUsSection in kinds
    assert HighlightsSection in kinds
    assert StaysSection not in kinds
    why = sections[kinds.index(WhyChooseUsSection)]
    assert why.reasons == ['Private guides']


def test_composition_pages_follow_the_section_order(document, settings):
    composition = compose_itinerary(document, settings=settings)
    first_texts = [page.texts() for page in composition]

    assert 'THE LUXE TRAILS' in first_texts[0]
    assert 'Kyoto, Japan' in first_texts[0]
    assert first_texts[1][0] == 'Trip Details'
    assert first_texts[2][:2] == ['Itinerary', 'Day 1']
    assert first_texts[3][:2] == ['Itinerary', 'Day 2']
    assert first_texts[4][0] == 'Our Stays'
    assert first_texts[5][0] == 'Flights'
    assert first_texts[6][0] == 'Inclusions'
    assert first_texts[7][0] == 'Terms and Conditions'
    assert first_texts[8][0] == 'Pricing Summary'
    assert 'Book with Us' in first_texts[8]
    assert len(composition) == 9


def test_running_footer_skips_the_cover(document, settings):
    composition = compose_itinerary(document, settings=settings)

    cover = composition.pages[0]
    assert not [op for op in cover.ops_of(LineOp) if op.y1 == DEFAULT_LAYOUT.footer.line_y]
    for page in composition.pages[1:]:
        footer_lines = [
            op for op in page.ops_of(LineOp)
            if op.y1 == op.y2 == DEFAULT_LAYOUT.footer.line_y and op.color == DARK_THEME.accent
        ]
        assert len(footer_lines) == 1
        assert page.texts()[-1] == str(page.index + 1)


def test_light_mode_paints_white_backgrounds(document, settings):
    composition = compose_itinerary(document, dark_mode=False, settings=settings)
    background = composition.pages[1].ops[0]
    assert isinstance(background, RectOp)
    assert background.fill == LIGHT_THEME.background


def test_pdf_bytes_match_the_composition(document, settings):
    pdf_bytes = build_itinerary_pdf(document, settings=settings)
    assert pdf_bytes.startswith(b'%PDF')
    reader = PdfReader(io.BytesIO(pdf_bytes))
    assert len(reader.pages) == len(compose_itinerary(document, settings=settings))
    assert reader.metadata.title == 'Kyoto, Japan Itinerary - Ada Lovelace'
    assert reader.metadata.author == 'THE LUXE TRAILS'


def test_images_are_embedded_and_broken_ones_are_skipped(itinerary_payload, settings, caplog, make_png):
    itinerary_payload['days'][0]['image'] = make_png(400, 300)
    itinerary_payload['days'][1]['image'] = 'data:image/png;base64,AAAA'
    itinerary_payload['hotels'][0]['images'] = [make_png(300, 200)]
    document = ItineraryDocument.model_validate(itinerary_payload)

    with caplog.at_level(logging.WARNING, logger='tripsheet.render.document'):
        assets = embed_assets(document, settings)

    assert set(assets.day_images) == {0}
    assert set(assets.hotel_images) == {0}
    assert assets.failures == ['day 2 image']
    assert 'Failed to embed day 2 image' in caplog.text

    pdf_bytes = build_itinerary_pdf(document, settings=settings)
    assert pdf_bytes.startswith(b'%PDF')


def test_branding_assets_are_read_from_the_assets_dir(document, settings):
    settings.assets_dir.mkdir(parents=True)
    Image.new('RGB', (60, 20), (180, 140, 40)).save(settings.assets_dir / settings.footer_logo, format='PNG')
    assets = embed_assets(document, settings)
    assert assets.footer_logo is not None
    assert assets.why_choose_us is None
    assert assets.failures == []


def test_render_failures_are_wrapped(document, settings, monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError('canvas exploded')

    monkeypatch.setattr(document_module, 'write_pdf', _boom)
    with pytest.raises(ItineraryRenderError, match='Failed to generate PDF: canvas exploded'):
        build_itinerary_pdf(document, settings=settings)


def test_unknown_section_is_rejected():
    context = RenderContext(
        composition=Composition(width=595.28, height=841.89),
        fonts=STANDARD_FONTS,
        theme=DARK_THEME,
        layout=DEFAULT_LAYOUT,
    )
    with pytest.raises(TypeError):
        render_section(context, object())
