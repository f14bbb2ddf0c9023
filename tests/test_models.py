"""Tests for pixel records and buffers."""

import dataclasses

import numpy as np
import pytest

from models.errors import DimensionMismatch, ModeMismatch
from models.pixel import RGBPixel, YCCPixel
from models.pixel_buffer import PixelBuffer


def test_from_rgba_raster_order():
    """Buffers read from an array are raster ordered with alpha dropped."""
    image = np.array([
        [[1, 2, 3, 255], [4, 5, 6, 255]],
        [[7, 8, 9, 0], [10, 11, 12, 128]],
    ], dtype=np.uint8)
    buffer = PixelBuffer.from_rgba(image)

    assert buffer.color_mode == 'RGB'
    assert (buffer.width, buffer.height) == (2, 2)
    assert [(p.row, p.col) for p in buffer] == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert buffer.pixel_at(1, 0).components == (7, 8, 9)


def test_to_array_uses_positions():
    pixels = [RGBPixel(9, 9, 9, 0, 1), RGBPixel(1, 1, 1, 0, 0)]
    array = PixelBuffer(pixels, 2, 1, 'RGB').to_array()
    assert array.tolist() == [[[1, 1, 1], [9, 9, 9]]]


def test_wrong_length_rejected():
    with pytest.raises(DimensionMismatch):
        PixelBuffer([RGBPixel(0, 0, 0, 0, 0)], 2, 1, 'RGB')


def test_mixed_modes_rejected():
    pixels = [RGBPixel(0, 0, 0, 0, 0), YCCPixel(0.0, 128.0, 128.0, 0, 1)]
    with pytest.raises(ModeMismatch):
        PixelBuffer(pixels, 2, 1, 'RGB')


def test_duplicate_position_rejected():
    pixels = [RGBPixel(0, 0, 0, 0, 0), RGBPixel(1, 1, 1, 0, 0)]
    with pytest.raises(DimensionMismatch):
        PixelBuffer(pixels, 2, 1, 'RGB')


def test_out_of_range_position_rejected():
    pixels = [RGBPixel(0, 0, 0, 0, 0), RGBPixel(1, 1, 1, 0, 2)]
    with pytest.raises(DimensionMismatch):
        PixelBuffer(pixels, 2, 1, 'RGB')


def test_bad_array_shape_rejected():
    with pytest.raises(DimensionMismatch):
        PixelBuffer.from_rgba(np.zeros((2, 2), dtype=np.uint8))


def test_pixels_are_frozen():
    pixel = YCCPixel(1.0, 2.0, 3.0, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pixel.cb = 5.0
    assert pixel.channels == ('y', 'cb', 'cr')


def test_missing_pixel_lookup():
    buffer = PixelBuffer([RGBPixel(0, 0, 0, 0, 0)], 1, 1, 'RGB')
    with pytest.raises(IndexError):
        buffer.pixel_at(3, 3)
