"""Buffer builders shared by the tests."""

import numpy as np

from models.pixel import YCCPixel
from models.pixel_buffer import PixelBuffer


def rgb_buffer(rows):
    """RGB buffer from a nested list of (r, g, b) triplets, one list per row."""
    return PixelBuffer.from_rgba(np.array(rows, dtype=np.uint8))


def ycc_buffer(width, height, y, cb, cr):
    """YCC buffer in raster order from flat component lists."""
    pixels = [
        YCCPixel(y[i], cb[i], cr[i], i // width, i % width)
        for i in range(width * height)
    ]
    return PixelBuffer(pixels, width, height, 'YCC')


class RecordingWriter:
    """Write port that remembers every call."""

    def __init__(self):
        self.calls = []

    def write_pixels(self, raster, x, y):
        self.calls.append((raster.copy(), x, y))
