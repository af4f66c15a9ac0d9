import base64
import io

import pytest
from PIL import Image

from tripsheet.render.images import (
    ImageEmbedError,
    decode_data_url,
    embed_image,
    embed_image_file,
    fit_cover,
    fit_within,
)


def test_png_data_url_is_decoded_with_pixel_size(make_png):
    image = embed_image(make_png(40, 30), label='day 1 image')
    assert (image.width, image.height) == (40, 30)
    assert image.label == 'day 1 image'
    assert image.aspect_ratio == pytest.approx(4 / 3)


def test_jpeg_data_url_is_accepted():
    buffer = io.BytesIO()
    Image.new('RGB', (20, 10), (10, 20, 30)).save(buffer, format='JPEG')
    data_url = 'data:image/jpg;base64,' + base64.b64encode(buffer.getvalue()).decode('ascii')
    kind, raw = decode_data_url(data_url)
    assert kind == 'jpeg'
    assert raw == buffer.getvalue()
    assert (embed_image(data_url).width, embed_image(data_url).height) == (20, 10)


@pytest.mark.parametrize(
    'value',
    [
        '',
        'https://example.com/photo.png',
        'data:image/gif;base64,R0lGODlhAQABAAAAACw=',
        'data:image/png;base64,AAAA',
    ],
)
def test_unusable_image_data_raises(value):
    with pytest.raises(ImageEmbedError):
        embed_image(value)


def test_embed_image_file(tmp_path):
    path = tmp_path / 'logo-small.png'
    Image.new('RGBA', (120, 40), (255, 255, 255, 0)).save(path, format='PNG')
    image = embed_image_file(path)
    assert (image.width, image.height) == (120, 40)
    assert image.label == 'logo-small.png'

    with pytest.raises(ImageEmbedError):
        embed_image_file(tmp_path / 'missing.png')


def test_fit_within_preserves_aspect_ratio():
    assert fit_within(400, 300, max_width=225, max_height=223) == pytest.approx((225, 168.75))
    assert fit_within(300, 600, max_width=225, max_height=223) == pytest.approx((111.5, 223))
    assert fit_within(0, 10, max_width=100, max_height=100) == (0.0, 0.0)


def test_fit_cover_fills_and_centers():
    dx, dy, width, height = fit_cover(200, 100, box_width=100, box_height=100)
    assert (width, height) == pytest.approx((200, 100))
    assert (dx, dy) == pytest.approx((-50, 0))
