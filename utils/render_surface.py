"""Read/write ports the pipeline uses to reach a rendering surface."""

from typing import Protocol

import numpy as np

from models.pixel_buffer import PixelBuffer


class PixelReader(Protocol):
    def read_pixels(self) -> PixelBuffer:
        ...


class PixelWriter(Protocol):
    def write_pixels(self, raster: np.ndarray, x: int, y: int) -> None:
        ...


class RenderSurface(PixelReader, PixelWriter, Protocol):
    """A surface that can be both read from and painted on."""


class ArraySurface:
    """RGBA surface backed by an (H, W, 4) uint8 numpy array."""

    def __init__(self, width: int, height: int):
        self.rgba = np.zeros((height, width, 4), dtype=np.uint8)
        self.rgba[:, :, 3] = 255

    @classmethod
    def from_rgb(cls, image: np.ndarray) -> 'ArraySurface':
        h, w = image.shape[:2]
        surface = cls(w, h)
        surface.rgba[:, :, :3] = image[:, :, :3]
        return surface

    @classmethod
    def from_image(cls, path: str) -> 'ArraySurface':
        from utils.image_io import load_image
        return cls.from_rgb(load_image(path))

    @property
    def width(self) -> int:
        return self.rgba.shape[1]

    @property
    def height(self) -> int:
        return self.rgba.shape[0]

    def rgb(self) -> np.ndarray:
        return self.rgba[:, :, :3].copy()

    def read_pixels(self) -> PixelBuffer:
        return PixelBuffer.from_rgba(self.rgba)

    def write_pixels(self, raster: np.ndarray, x: int, y: int) -> None:
        """Blit an RGBA raster with its top-left corner at (x, y), cropped to bounds."""
        h, w = raster.shape[:2]
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x1 <= x0 or y1 <= y0:
            return
        self.rgba[y0:y1, x0:x1] = raster[y0 - y:y1 - y, x0 - x:x1 - x]
