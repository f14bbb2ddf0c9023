"""Pixel records: one variant per color mode."""

from dataclasses import dataclass
from typing import Literal, Tuple

ColorMode = Literal['RGB', 'YCC']

RGB_COMPONENTS = ('r', 'g', 'b')
YCC_COMPONENTS = ('y', 'cb', 'cr')


@dataclass(frozen=True)
class RGBPixel:
    r: float
    g: float
    b: float
    row: int
    col: int

    mode = 'RGB'
    channels = RGB_COMPONENTS

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class YCCPixel:
    y: float
    cb: float
    cr: float
    row: int
    col: int

    mode = 'YCC'
    channels = YCC_COMPONENTS

    @property
    def components(self) -> Tuple[float, float, float]:
        return (self.y, self.cb, self.cr)


PIXEL_TYPES = {'RGB': RGBPixel, 'YCC': YCCPixel}


def components_of(mode: ColorMode) -> Tuple[str, str, str]:
    """Component names carried by pixels of the given mode."""
    return PIXEL_TYPES[mode].channels
