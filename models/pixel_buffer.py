"""Pixel buffer: tagged pixels plus raster dimensions."""

from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple, Union

import numpy as np

from models.errors import DimensionMismatch, ModeMismatch
from models.pixel import ColorMode, PIXEL_TYPES, RGBPixel, YCCPixel

Pixel = Union[RGBPixel, YCCPixel]


@dataclass(frozen=True)
class PixelBuffer:
    """
    Immutable sequence of same-mode pixels covering a width x height raster.

    Sequence order is not raster order once a buffer has been through
    4:2:0 subsampling. Anything that needs a specific pixel must look it up
    by (row, col).
    """

    pixels: Tuple[Pixel, ...]
    width: int
    height: int
    color_mode: ColorMode

    def __post_init__(self):
        # Accept lists and generators but store a tuple
        object.__setattr__(self, 'pixels', tuple(self.pixels))

        if self.color_mode not in PIXEL_TYPES:
            raise ModeMismatch(f"Unknown color mode: {self.color_mode}")
        if len(self.pixels) != self.width * self.height:
            raise DimensionMismatch(
                f"Expected {self.width * self.height} pixels for "
                f"{self.width}x{self.height}, got {len(self.pixels)}"
            )

        pixel_type = PIXEL_TYPES[self.color_mode]
        seen = set()
        for pixel in self.pixels:
            if not isinstance(pixel, pixel_type):
                raise ModeMismatch(
                    f"{type(pixel).__name__} in a {self.color_mode} buffer"
                )
            if not (0 <= pixel.row < self.height and 0 <= pixel.col < self.width):
                raise DimensionMismatch(
                    f"Pixel at ({pixel.row}, {pixel.col}) outside "
                    f"{self.width}x{self.height} raster"
                )
            position = (pixel.row, pixel.col)
            if position in seen:
                raise DimensionMismatch(f"Duplicate pixel at {position}")
            seen.add(position)

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @classmethod
    def from_rgba(cls, image: np.ndarray) -> 'PixelBuffer':
        """Build a raster-order RGB buffer from an (H, W, 3|4) array. Alpha is ignored."""
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise DimensionMismatch(f"Expected (H, W, 3|4) array, got shape {image.shape}")
        h, w = image.shape[:2]
        pixels = [
            RGBPixel(int(px[0]), int(px[1]), int(px[2]), row, col)
            for row in range(h)
            for col, px in enumerate(image[row])
        ]
        return cls(pixels, w, h, 'RGB')

    def with_pixels(self, pixels: Sequence[Pixel], color_mode: ColorMode = None) -> 'PixelBuffer':
        """New buffer with the same dimensions and different pixels."""
        return PixelBuffer(pixels, self.width, self.height, color_mode or self.color_mode)

    def index(self) -> Dict[Tuple[int, int], Pixel]:
        return {(p.row, p.col): p for p in self.pixels}

    def pixel_at(self, row: int, col: int) -> Pixel:
        for pixel in self.pixels:
            if pixel.row == row and pixel.col == col:
                return pixel
        raise IndexError(f"No pixel at ({row}, {col})")

    def to_array(self) -> np.ndarray:
        """Components as an (H, W, 3) float array, placed by (row, col)."""
        out = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for pixel in self.pixels:
            out[pixel.row, pixel.col] = pixel.components
        return out
