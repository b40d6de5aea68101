import numpy as np

from weight_ocr.crop import crop_rgb
from weight_ocr.models import Box, RgbImage


def _ramp(width=4, height=3):
    arr = np.arange(width * height * 3, dtype=np.uint8).reshape(height, width, 3)
    return arr, RgbImage.from_array(arr)

def test_crop_copies_region():
    arr, image = _ramp()
    crop = crop_rgb(image, Box(x1=1, y1=1, x2=3, y2=3))
    assert (crop.width, crop.height) == (2, 2)
    assert np.array_equal(crop.to_array(), arr[1:3, 1:3])

def test_crop_floors_fractional_corners():
    arr, image = _ramp()
    crop = crop_rgb(image, Box(x1=0.7, y1=0.2, x2=2.9, y2=2.5))
    assert np.array_equal(crop.to_array(), arr[0:2, 0:2])

def test_crop_clamps_to_image():
    arr, image = _ramp()
    crop = crop_rgb(image, Box(x1=-5, y1=-5, x2=100, y2=100))
    assert np.array_equal(crop.to_array(), arr)

def test_crop_empty_returns_none():
    _, image = _ramp()
    assert crop_rgb(image, Box(x1=3.2, y1=0, x2=3.8, y2=2)) is None
    assert crop_rgb(image, Box(x1=10, y1=10, x2=20, y2=20)) is None

def test_crop_owns_its_buffer():
    _, image = _ramp()
    crop = crop_rgb(image, Box(x1=0, y1=0, x2=4, y2=3))
    assert crop.data == image.data
    assert crop.data is not image.data
