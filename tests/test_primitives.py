import pytest

from tripsheet.render.fonts import FontHandle
from tripsheet.render.geometry import INCLUSION_BULLETS, WHITE
from tripsheet.render.primitives import (
    bullet_item_height,
    draw_bullet_list,
    draw_line,
    draw_rectangle,
    draw_wrapped_paragraph,
)
from tripsheet.render.surface import CircleOp, LineOp, Page, RectOp, TextOp
from tripsheet.render.text import measure_wrapped_height, wrap_to_width

BODY = FontHandle('Helvetica')
TEXT = (
    'Morning departure along the coast road with stops at hidden coves, a seafood lunch '
    'in a fishing village and an afternoon at leisure before dinner on the terrace.'
)


def _page():
    return Page(index=0, width=595.28, height=841.89)


def test_paragraph_consumes_exactly_the_measured_height():
    page = _page()
    end_y = draw_wrapped_paragraph(
        page,
        TEXT,
        x=40,
        y=700,
        max_width=200,
        font=BODY,
        font_size=10,
        color=WHITE,
        line_height=1.99,
    )
    assert 700 - end_y == pytest.approx(measure_wrapped_height(TEXT, BODY, 10, 200, 1.99))
    drawn = [op.text for op in page.ops_of(TextOp)]
    assert drawn == wrap_to_width(TEXT, BODY, 10, 200)


def test_paragraph_lines_are_spaced_by_line_height():
    page = _page()
    draw_wrapped_paragraph(page, TEXT, x=40, y=700, max_width=150, font=BODY, font_size=10, color=WHITE, line_height=1.5)
    ys = [op.y for op in page.ops_of(TextOp)]
    assert ys[0] == 700
    assert all(ys[i] - ys[i + 1] == pytest.approx(15) for i in range(len(ys) - 1))


def test_min_y_floor_skips_lines_without_changing_the_cursor():
    page = _page()
    lines = wrap_to_width(TEXT, BODY, 10, 120)
    assert len(lines) > 3
    end_y = draw_wrapped_paragraph(
        page,
        TEXT,
        x=40,
        y=100,
        max_width=120,
        font=BODY,
        font_size=10,
        color=WHITE,
        line_height=2.0,
        min_y=60,
    )
    ys = [op.y for op in page.ops_of(TextOp)]
    assert ys == [100, 80]
    assert end_y == 100 - len(lines) * 20


def test_right_alignment_ends_at_box_edge():
    page = _page()
    draw_wrapped_paragraph(page, 'Total', x=40, y=500, max_width=200, font=BODY, font_size=12, color=WHITE, align='right')
    op = page.ops_of(TextOp)[0]
    assert op.x + BODY.width('Total', 12) == pytest.approx(240)


def test_rectangle_and_line_report_their_height():
    page = _page()
    assert draw_rectangle(page, x=10, y=300, width=75, height=20, fill=WHITE) == 280
    rect = page.ops_of(RectOp)[0]
    assert (rect.x, rect.y, rect.width, rect.height) == (10, 280, 75, 20)
    assert draw_line(page, x1=10, y1=280, x2=10, y2=60, color=WHITE) == 60
    assert len(page.ops_of(LineOp)) == 1


def test_bullet_list_draws_one_bullet_per_item_and_skips_blank_items():
    page = _page()
    items = ['Airport transfers', '   ', TEXT]
    end_y = draw_bullet_list(
        page,
        items,
        x=60,
        y=600,
        max_width=475,
        font=BODY,
        style=INCLUSION_BULLETS,
        color=WHITE,
        bullet_color=WHITE,
    )
    assert len(page.ops_of(CircleOp)) == 2
    expected = sum(bullet_item_height(item, max_width=475, font=BODY, style=INCLUSION_BULLETS) for item in items)
    assert 600 - end_y == pytest.approx(expected)
    first_text = page.ops_of(TextOp)[0]
    assert first_text.x == 60 + INCLUSION_BULLETS.indent
