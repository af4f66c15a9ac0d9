import pytest

from tripsheet.render.geometry import CardLayout, PageGeometry
from tripsheet.render.images import embed_image
from tripsheet.render.sections.stays import render_hotel_card, render_stays, stays_header
from tripsheet.render.surface import ImageOp
from tripsheet.types import HotelStay

LAYOUT = CardLayout()
GEOMETRY = PageGeometry()


def _hotel(index):
    return HotelStay(
        name=f'Hotel {index}',
        check_in='2025-04-01',
        check_out='2025-04-03',
        number_of_rooms=2,
        meal_plan='Half Board',
        room_category='Suite',
    )


@pytest.fixture
def stays_cursor(make_cursor, fonts, theme):
    return make_cursor(header=stays_header(fonts, theme, x=GEOMETRY.left, layout=LAYOUT))


def _render(cursor, hotels, fonts, theme, images=None):
    return render_stays(
        cursor,
        hotels,
        images=images or {},
        fonts=fonts,
        theme=theme,
        layout=LAYOUT,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )


def test_two_cards_share_a_row(stays_cursor, composition, fonts, theme):
    slots = _render(stays_cursor, [_hotel(1), _hotel(2)], fonts, theme)

    assert len(composition) == 1
    assert [slot.x for slot in slots] == [GEOMETRY.left, GEOMETRY.left + LAYOUT.width + LAYOUT.spacing]
    assert slots[0].y == slots[1].y
    texts = composition.pages[0].texts()
    assert 'Hotel 1' in texts and 'Hotel 2' in texts
    assert 'Check In: Apr 1, 2025' in texts
    assert 'No. Of Room: 2' in texts
    assert texts.count('No Image') == 2


def test_rows_that_do_not_fit_move_to_a_new_page_with_header(stays_cursor, composition, fonts, theme):
    slots = _render(stays_cursor, [_hotel(index) for index in range(1, 6)], fonts, theme)

    assert [slot.page_index for slot in slots] == [0, 0, 0, 0, 1]
    assert slots[2].y == pytest.approx(slots[0].y - LAYOUT.height - LAYOUT.spacing)
    second = composition.pages[1].texts()
    assert second[0] == 'Our Stays'
    assert 'Hotel 5' in second
    assert stays_cursor.pagination_count == 1
    for slot in slots:
        assert slot.y - LAYOUT.height >= stays_cursor.bottom_margin


def test_empty_hotels_draw_placeholder(stays_cursor, composition, fonts, theme):
    assert _render(stays_cursor, [], fonts, theme) == []
    assert composition.pages[0].texts() == ['Our Stays', 'No hotels added']


def test_card_image_is_contained_in_the_top_half(composition, fonts, theme, make_png):
    page = composition.add_page()
    image = embed_image(make_png(800, 200), label='hotel')
    bottom = render_hotel_card(page, _hotel(1), image=image, fonts=fonts, theme=theme, layout=LAYOUT, x=40, y=700)

    assert bottom == 700 - LAYOUT.height
    drawn = page.ops_of(ImageOp)[0]
    assert drawn.width == pytest.approx(LAYOUT.width)
    assert drawn.height == pytest.approx(LAYOUT.width / 4)
    assert drawn.y >= 700 - LAYOUT.image_height
    assert drawn.y + drawn.height <= 700
    assert 'No Image' not in page.texts()


def test_long_hotel_name_stays_inside_the_card(composition, fonts, theme):
    page = composition.add_page()
    hotel = HotelStay(name='Grand Palace Residence ' * 20)
    bottom = render_hotel_card(page, hotel, image=None, fonts=fonts, theme=theme, layout=LAYOUT, x=40, y=700)

    for op in page.ops:
        if hasattr(op, 'text'):
            assert op.y > bottom
