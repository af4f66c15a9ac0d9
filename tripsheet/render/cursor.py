from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from reportlab.lib import colors

from .geometry import PageGeometry
from .primitives import SectionHeaderSpec, draw_section_title
from .surface import Composition, Page


logger = logging.getLogger(__name__)


class PageCursor:
    """Current page plus the vertical write position on it.

    Renderers receive the cursor explicitly, draw at ``cursor.y`` and move it
    down. Overflow checks run before drawing; a new page repaints the
    background and redraws the active section header and continuation
    markers, all of which are plain data.
    """

    def __init__(
        self,
        composition: Composition,
        geometry: PageGeometry,
        *,
        background: colors.Color | None = None,
        header: SectionHeaderSpec | None = None,
        bottom_margin: float | None = None,
        start_page: bool = True,
    ) -> None:
        self.composition = composition
        self.geometry = geometry
        self.background = background
        self.header = header
        self.top = geometry.top
        self.bottom_margin = geometry.margin_bottom if bottom_margin is None else bottom_margin
        self.pagination_count = 0
        self._markers: list[SectionHeaderSpec] = []
        self._content_tops: dict[int, float] = {}
        self._page: Page | None = None
        self._y = self.top
        if start_page:
            self.new_page()

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError('cursor has no current page')
        return self._page

    @property
    def page_index(self) -> int:
        return self.page.index

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)

    def move_down(self, amount: float) -> float:
        self._y -= amount
        return self._y

    def would_overflow(self, required_height: float) -> bool:
        return self._y - required_height < self.bottom_margin

    def content_top(self, page_index: int | None = None) -> float:
        index = self.page_index if page_index is None else page_index
        return self._content_tops.get(index, self.top)

    @property
    def at_page_top(self) -> bool:
        return self._page is not None and self._y >= self.content_top()

    def ensure_page(self, required_height: float) -> bool:
        if not self.would_overflow(required_height):
            return False
        if self.at_page_top:
            logger.debug(
                'Block of %.1fpt does not fit an empty page %d; drawing in place',
                required_height,
                self.page_index,
            )
            return False
        self.new_page(continued=True)
        self.pagination_count += 1
        return True

    def new_page(self, *, continued: bool = False) -> Page:
        page = self.composition.add_page()
        self._page = page
        self._y = self.top
        if self.background is not None:
            page.draw_rect(x=0, y=0, width=page.width, height=page.height, fill=self.background)
        if self.header is not None:
            self._y = draw_section_title(page, self.header, y=self._y, continued=continued)
        if continued:
            for marker in self._markers:
                self._y = draw_section_title(page, marker, y=self._y, continued=True)
        self._content_tops[page.index] = self._y
        logger.debug('Started page %d (continued=%s)', page.index, continued)
        return page

    def set_header(self, spec: SectionHeaderSpec | None) -> None:
        self.header = spec

    def start_section(self, spec: SectionHeaderSpec) -> None:
        opens_page = self.at_page_top
        self.header = spec
        self._y = draw_section_title(self.page, spec, y=self._y)
        if opens_page:
            # Content on this page starts below the title.
            self._content_tops[self.page_index] = self._y

    @contextmanager
    def continuation(self, marker: SectionHeaderSpec) -> Iterator[SectionHeaderSpec]:
        self._markers.append(marker)
        try:
            yield marker
        finally:
            self._markers.remove(marker)
