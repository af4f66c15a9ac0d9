import base64
import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure the repository root is on sys.path for direct pytest runs
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tripsheet.config import Settings  # noqa: E402
from tripsheet.render.cursor import PageCursor  # noqa: E402
from tripsheet.render.fonts import STANDARD_FONTS  # noqa: E402
from tripsheet.render.geometry import DARK_THEME, PageGeometry  # noqa: E402
from tripsheet.render.surface import Composition  # noqa: E402


class MonoFont:
    """Every character is half the font size wide."""

    name = 'Helvetica'

    def width(self, text, size):
        return len(text) * size * 0.5


def png_data_url(width=40, height=30, color=(200, 120, 40)):
    buffer = io.BytesIO()
    Image.new('RGB', (width, height), color).save(buffer, format='PNG')
    return 'data:image/png;base64,' + base64.b64encode(buffer.getvalue()).decode('ascii')


@pytest.fixture
def make_png():
    return png_data_url


@pytest.fixture
def mono_font():
    return MonoFont()


@pytest.fixture
def fonts():
    return STANDARD_FONTS


@pytest.fixture
def theme():
    return DARK_THEME


@pytest.fixture
def geometry():
    return PageGeometry()


@pytest.fixture
def composition(geometry):
    return Composition(width=geometry.width, height=geometry.height)


@pytest.fixture
def make_cursor(composition, geometry, theme):
    def _make(**kwargs):
        kwargs.setdefault('background', theme.background)
        return PageCursor(composition, geometry, **kwargs)

    return _make


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        assets_dir=tmp_path / 'assets',
        fonts_dir=None,
        output_dir=tmp_path / 'output',
        dark_mode=True,
    )


@pytest.fixture
def itinerary_payload():
    return {
        'clientName': 'Ada Lovelace',
        'destination': 'Kyoto, Japan',
        'travelDates': {'start': '2025-04-01', 'end': '2025-04-05'},
        'bookingRef': 'TLT-2025-001',
        'days': [
            {
                'dayNumber': 1,
                'title': 'Arrival in Kyoto',
                'activities': 'Private transfer to the hotel followed by a relaxed evening walk in Gion.',
                'hotel': 'The Ritz-Carlton Kyoto',
            },
            {
                'dayNumber': 2,
                'title': 'Temples and gardens',
                'subheadings': [
                    {'title': 'Morning', 'description': 'Fushimi Inari before the crowds arrive.'},
                    {'title': 'Afternoon', 'description': 'Tea ceremony in a machiya townhouse.'},
                ],
            },
        ],
        'flights': [
            {
                'flightNumber': 'JL 006',
                'departure': {'airport': 'JFK', 'date': '2025-04-01', 'time': '13:25'},
                'arrival': {'airport': 'HND', 'date': '2025-04-02', 'time': '16:40'},
                'duration': '14h 15m',
                'cabin': 'Business',
            }
        ],
        'hotels': [
            {
                'name': 'The Ritz-Carlton Kyoto',
                'checkIn': '2025-04-01',
                'checkOut': '2025-04-05',
                'numberOfRooms': 1,
                'mealPlan': 'Breakfast',
                'roomCategory': 'Deluxe River View',
            }
        ],
        'inclusions': ['Airport transfers', 'Daily breakfast'],
        'exclusions': ['International flights'],
        'pricing': {'subtotal': 2500, 'taxes': 250, 'fees': 50, 'total': 2800, 'currency': 'USD'},
        'bankDetails': {
            'accountName': 'The Luxe Trails Ltd',
            'accountNumber': '12345678',
            'bankName': 'First Bank',
            'swiftCode': 'FBNKUS33',
        },
        'termsList': ['A 30% deposit confirms the booking.'],
        'contactInfo': 'concierge@luxetrails.example | +1 555 0100',
        'consultantDetails': {'name': 'Kenji Sato', 'email': 'kenji@luxetrails.example', 'phone': '+1 555 0101'},
    }
