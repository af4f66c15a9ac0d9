from __future__ import annotations

from dataclasses import dataclass, field

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4


PAGE_WIDTH, PAGE_HEIGHT = A4

GOLD = colors.Color(0.72, 0.53, 0.18)
DARK_BACKGROUND = colors.Color(0.08, 0.08, 0.08)
WHITE = colors.Color(1, 1, 1)
TEXT_DARK = colors.Color(0.2, 0.2, 0.2)
TEXT_MUTED = colors.Color(0.6, 0.6, 0.6)
DIVIDER_GRAY = colors.Color(0.8, 0.8, 0.8)
TABLE_BORDER = colors.Color(0.8, 0.8, 0.8)
TABLE_HEADER_FILL = colors.Color(0.95, 0.95, 0.95)
CARD_PLACEHOLDER_FILL = colors.Color(0.9, 0.9, 0.9)


@dataclass(frozen=True)
class Theme:
    name: str
    background: colors.Color
    text: colors.Color
    muted: colors.Color = TEXT_MUTED
    accent: colors.Color = GOLD


DARK_THEME = Theme(name='dark', background=DARK_BACKGROUND, text=WHITE)
LIGHT_THEME = Theme(name='light', background=WHITE, text=TEXT_DARK)


@dataclass(frozen=True)
class PageGeometry:
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    margin_x: float = 40.0
    margin_top: float = 50.0
    # Content floor; the running footer lives below it.
    margin_bottom: float = 60.0

    @property
    def top(self) -> float:
        return self.height - self.margin_top

    @property
    def left(self) -> float:
        return self.margin_x

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin_x


@dataclass(frozen=True)
class ItineraryLayout:
    bar_width: float = 75.0
    bar_height: float = 20.0
    bar_indent: float = 10.0
    badge_font_size: float = 9.0
    badge_gap: float = 25.0
    text_indent: float = 27.0
    left_column_width: float = 216.0
    column_gap: float = 26.0
    image_box_width: float = 225.0
    image_box_height: float = 223.0
    font_size: float = 10.0
    line_height: float = 1.99
    title_gap: float = 20.0
    subheading_title_gap: float = 15.0
    subheading_gap: float = 15.0
    hotel_gap: float = 10.0
    hotel_line: float = 15.0
    hotel_reserve: float = 30.0
    content_gap: float = 31.0
    divider_gap: float = 35.0
    divider_thickness: float = 0.5
    rule_thickness: float = 1.0
    marker_gap: float = 25.0
    header_size: float = 22.0
    header_gap: float = 40.0
    day_per_page: bool = True

    @property
    def full_text_width(self) -> float:
        return self.left_column_width + self.column_gap + self.image_box_width

    @property
    def line_spacing(self) -> float:
        return self.font_size * self.line_height


@dataclass(frozen=True)
class CardLayout:
    width: float = 250.0
    height: float = 300.0
    spacing: float = 15.0
    padding: float = 15.0
    name_size: float = 14.0
    name_leading: float = 18.0
    info_size: float = 10.0
    info_leading: float = 12.0
    header_size: float = 36.0
    header_gap: float = 60.0
    trailing_gap: float = 30.0

    @property
    def image_height(self) -> float:
        return self.height / 2

    def columns_for(self, available_width: float) -> int:
        return max(1, int((available_width + self.spacing) // (self.width + self.spacing)))


@dataclass(frozen=True)
class FlightTableLayout:
    header_size: float = 36.0
    header_gap: float = 30.0
    column_widths: tuple[float, ...] = (140.0, 120.0, 40.0, 100.0, 115.28)
    header_row_height: float = 30.0
    row_height: float = 60.0
    cell_padding: float = 10.0
    font_size: float = 10.0
    trailing_gap: float = 30.0

    @property
    def width(self) -> float:
        return sum(self.column_widths)


@dataclass(frozen=True)
class KeyValueTableLayout:
    header_size: float = 18.0
    header_gap: float = 30.0
    bar_height: float = 28.0
    row_height: float = 28.0
    label_inset: float = 20.0
    font_size: float = 11.0
    total_font_size: float = 12.0
    trailing_gap: float = 20.0


@dataclass(frozen=True)
class BulletStyle:
    font_size: float
    bullet_size: float
    indent: float
    line_height: float
    item_spacing: float


INCLUSION_BULLETS = BulletStyle(font_size=11, bullet_size=6, indent=15, line_height=1.5, item_spacing=10)
TERMS_BULLETS = BulletStyle(font_size=12, bullet_size=8, indent=30, line_height=1.64, item_spacing=18)


@dataclass(frozen=True)
class BulletSectionLayout:
    header_size: float = 36.0
    header_gap: float = 60.0
    inset: float = 20.0
    section_gap: float = 40.0
    section_reserve: float = 100.0
    style: BulletStyle = INCLUSION_BULLETS


@dataclass(frozen=True)
class FooterLayout:
    line_y: float = 20.0
    line_thickness: float = 1.0
    logo_y: float = 27.0
    logo_height: float = 14.0
    page_number_y: float = 29.0
    page_number_size: float = 12.0
    cta_y: float = 80.0
    button_width: float = 100.0
    button_height: float = 28.0
    social_radius: float = 9.0
    social_labels: tuple[str, ...] = ('f', 'in', 'P', 'O')


@dataclass(frozen=True)
class FactsGridLayout:
    columns: int = 3
    box_height: float = 64.0
    gap: float = 15.0
    label_size: float = 9.0
    value_size: float = 12.0
    header_size: float = 30.0
    header_gap: float = 50.0
    photo_gap: float = 30.0
    photo_max_height: float = 388.0


@dataclass(frozen=True)
class LayoutConfig:
    page: PageGeometry = field(default_factory=PageGeometry)
    itinerary: ItineraryLayout = field(default_factory=ItineraryLayout)
    cards: CardLayout = field(default_factory=CardLayout)
    flights: FlightTableLayout = field(default_factory=FlightTableLayout)
    tables: KeyValueTableLayout = field(default_factory=KeyValueTableLayout)
    inclusions: BulletSectionLayout = field(default_factory=BulletSectionLayout)
    terms: BulletSectionLayout = field(
        default_factory=lambda: BulletSectionLayout(header_gap=70.0, style=TERMS_BULLETS)
    )
    highlights: BulletSectionLayout = field(
        default_factory=lambda: BulletSectionLayout(header_size=22.0, header_gap=40.0)
    )
    footer: FooterLayout = field(default_factory=FooterLayout)
    facts: FactsGridLayout = field(default_factory=FactsGridLayout)


DEFAULT_LAYOUT = LayoutConfig()
