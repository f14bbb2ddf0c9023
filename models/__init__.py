"""Data models for pixels, buffers and view settings."""

from .errors import (
    ChromaLabError, InvalidChannel, ModeMismatch, DimensionMismatch,
    InvalidScheme, InvalidTarget,
)
from .pixel import RGBPixel, YCCPixel, RGB_COMPONENTS, YCC_COMPONENTS
from .pixel_buffer import PixelBuffer
from .view_config import ViewConfig, TRANSFORMATION_TARGETS, SUBSAMPLING_SCHEMES

__all__ = [
    'ChromaLabError',
    'InvalidChannel',
    'ModeMismatch',
    'DimensionMismatch',
    'InvalidScheme',
    'InvalidTarget',
    'RGBPixel',
    'YCCPixel',
    'RGB_COMPONENTS',
    'YCC_COMPONENTS',
    'PixelBuffer',
    'ViewConfig',
    'TRANSFORMATION_TARGETS',
    'SUBSAMPLING_SCHEMES',
]
