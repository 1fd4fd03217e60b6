import pytest
from PIL import Image

from photo_strip import STRIP_WIDTH


@pytest.fixture
def photos():
    original = Image.new("RGB", (STRIP_WIDTH, STRIP_WIDTH), (120, 130, 140))
    stylized = Image.new("RGB", (STRIP_WIDTH, STRIP_WIDTH), (200, 100, 50))
    return original, stylized


@pytest.fixture
def red_logo():
    # 100x37 keeps the scaled height off a whole number
    return Image.new("RGBA", (100, 37), (255, 0, 0, 255))
