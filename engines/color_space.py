"""Color space conversion between RGB and YCbCr."""

import numpy as np

from models.pixel import ColorMode, RGBPixel, YCCPixel
from models.pixel_buffer import PixelBuffer
from models.errors import ModeMismatch


def rgb_to_ycbcr(rgb: np.ndarray) -> np.ndarray:
    """RGB to YCbCr using full-range ITU-R BT.601. Works on any (..., 3) array."""
    R, G, B = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    Y = 0.299 * R + 0.587 * G + 0.114 * B
    Cb = -0.168736 * R - 0.331264 * G + 0.5 * B + 128.0
    Cr = 0.5 * R - 0.418688 * G - 0.081312 * B + 128.0
    return np.stack([Y, Cb, Cr], axis=-1)


def ycbcr_to_rgb(ycbcr: np.ndarray) -> np.ndarray:
    """YCbCr to RGB using full-range ITU-R BT.601. Results are not clipped."""
    Y, Cb, Cr = ycbcr[..., 0], ycbcr[..., 1], ycbcr[..., 2]
    R = Y + 1.402 * (Cr - 128.0)
    G = Y - 0.34414 * (Cb - 128.0) - 0.71414 * (Cr - 128.0)
    B = Y + 1.772 * (Cb - 128.0)
    return np.stack([R, G, B], axis=-1)


def convert(buffer: PixelBuffer, target_mode: ColorMode) -> PixelBuffer:
    """
    Convert a whole buffer to target_mode.

    Returns the input object itself when it is already in target_mode, so
    no-op conversions are exact. Sequence order and (row, col) are kept.
    """
    if buffer.color_mode == target_mode:
        return buffer

    if target_mode == 'YCC':
        formula, pixel_type = rgb_to_ycbcr, YCCPixel
    elif target_mode == 'RGB':
        formula, pixel_type = ycbcr_to_rgb, RGBPixel
    else:
        raise ModeMismatch(f"Unknown color mode: {target_mode}")

    if len(buffer) == 0:
        return buffer.with_pixels((), target_mode)

    values = np.array([p.components for p in buffer.pixels], dtype=np.float64)
    converted = formula(values)

    pixels = [
        pixel_type(float(c0), float(c1), float(c2), p.row, p.col)
        for p, (c0, c1, c2) in zip(buffer.pixels, converted)
    ]
    return buffer.with_pixels(pixels, target_mode)
