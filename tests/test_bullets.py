from tripsheet.render.geometry import BulletSectionLayout, TERMS_BULLETS, PageGeometry
from tripsheet.render.sections.bullets import render_bullet_section, render_inclusions_and_exclusions
from tripsheet.render.surface import CircleOp, TextOp

GEOMETRY = PageGeometry()
LAYOUT = BulletSectionLayout()


def test_empty_inclusions_show_placeholders(make_cursor, composition, fonts, theme):
    cursor = make_cursor()
    render_inclusions_and_exclusions(
        cursor,
        ['   ', ''],
        [],
        fonts=fonts,
        theme=theme,
        layout=LAYOUT,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )
    assert composition.pages[0].texts() == [
        'Inclusions',
        'No inclusions specified',
        'Exclusions',
        'No exclusions specified',
    ]
    assert composition.pages[0].ops_of(CircleOp) == []


def test_each_item_gets_an_accent_bullet(make_cursor, composition, fonts, theme):
    cursor = make_cursor()
    render_bullet_section(
        cursor,
        'Tour Highlights',
        ['Sunrise at Fushimi Inari', 'Private tea ceremony'],
        placeholder='No highlights',
        fonts=fonts,
        theme=theme,
        layout=LAYOUT,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )
    bullets = composition.pages[0].ops_of(CircleOp)
    assert len(bullets) == 2
    assert all(bullet.fill == theme.accent for bullet in bullets)
    item_texts = [op for op in composition.pages[0].ops_of(TextOp) if op.text.startswith(('Sunrise', 'Private'))]
    assert all(op.x == GEOMETRY.left + LAYOUT.inset + LAYOUT.style.indent for op in item_texts)


def test_long_terms_paginate_with_continued_header(make_cursor, composition, fonts, theme):
    layout = BulletSectionLayout(header_gap=70.0, style=TERMS_BULLETS)
    items = [
        f'Clause {index}: cancellations made within thirty days of departure forfeit the deposit '
        'and any supplier charges already incurred on behalf of the traveller.'
        for index in range(1, 41)
    ]
    cursor = make_cursor()
    render_bullet_section(
        cursor,
        'Terms & Conditions',
        items,
        placeholder='No terms specified',
        fonts=fonts,
        theme=theme,
        layout=layout,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )

    assert len(composition) > 1
    assert cursor.pagination_count == len(composition) - 1
    for page in composition.pages[1:]:
        assert page.texts()[0] == 'Terms & Conditions (continued)'
    for page in composition:
        for op in page.ops_of(TextOp):
            assert op.y >= GEOMETRY.margin_bottom

    # Items are never split across pages.
    clause_starts = [
        (page.index, op.text.split(':')[0])
        for page in composition
        for op in page.ops_of(TextOp)
        if op.text.startswith('Clause ')
    ]
    assert [label for _, label in clause_starts] == [f'Clause {index}' for index in range(1, 41)]
    bullets_per_page = [len(page.ops_of(CircleOp)) for page in composition]
    starts_per_page = [sum(1 for index, _ in clause_starts if index == page.index) for page in composition]
    assert bullets_per_page == starts_per_page


def test_exclusions_do_not_redraw_the_inclusions_header(make_cursor, composition, fonts, theme):
    cursor = make_cursor()
    cursor.y = 200
    render_inclusions_and_exclusions(
        cursor,
        ['Airport transfers'],
        ['Visa fees'],
        fonts=fonts,
        theme=theme,
        layout=LAYOUT,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )
    assert len(composition) == 2
    assert composition.pages[1].texts()[0] == 'Exclusions'
    assert 'Inclusions (continued)' not in composition.pages[1].texts()


def test_oversized_first_item_stays_under_the_title(make_cursor, composition, fonts, theme):
    cursor = make_cursor()
    render_bullet_section(
        cursor,
        'Terms and Conditions',
        ['Every booking is subject to supplier availability and local regulations. ' * 120],
        placeholder='No terms',
        fonts=fonts,
        theme=theme,
        layout=LAYOUT,
        x=GEOMETRY.left,
        width=GEOMETRY.content_width,
    )
    assert len(composition) == 1
    assert cursor.pagination_count == 0
    texts = composition.pages[0].texts()
    assert texts[0] == 'Terms and Conditions'
    assert len(texts) > 1
