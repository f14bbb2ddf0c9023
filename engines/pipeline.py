"""Visualization pipeline: subsampling, channel isolation, write-back."""

import logging
import math
from dataclasses import replace
from typing import Optional

import numpy as np

from models.errors import ModeMismatch
from models.pixel import YCC_COMPONENTS
from models.pixel_buffer import PixelBuffer
from models.view_config import ViewConfig
from engines.color_space import convert
from engines.channel_isolator import isolate
from engines.chroma_subsampler import subsample
from utils.render_surface import PixelReader, PixelWriter

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded towards +inf."""
    return int(math.floor(value + 0.5))


def round_buffer(buffer: PixelBuffer) -> PixelBuffer:
    """Round every component to an integer and clamp it to [0, 255]."""
    channels = buffer.pixels[0].channels if buffer.pixels else ()
    pixels = [
        replace(p, **{c: min(255, max(0, round_half_up(getattr(p, c)))) for c in channels})
        for p in buffer.pixels
    ]
    return buffer.with_pixels(pixels)


def pack(buffer: PixelBuffer) -> np.ndarray:
    """
    Pack a buffer into an (H, W, 4) uint8 RGBA raster.

    Each pixel lands at its (row, col), i.e. byte offset 4*(row*width+col)
    of the flattened raster, as (c0, c1, c2, 255). YCC buffers are written
    positionally as (y, cb, cr). Components are clipped to [0, 255].
    """
    raster = np.zeros((buffer.height, buffer.width, 4), dtype=np.uint8)
    raster[:, :, 3] = 255
    for pixel in buffer.pixels:
        raster[pixel.row, pixel.col, :3] = np.clip(np.rint(pixel.components), 0, 255)
    return raster


class PipelineOrchestrator:
    """
    Runs the pipeline for one view.

    generate() is a pure function of the source buffer and the current
    config; nothing is cached between calls.
    """

    def __init__(
        self,
        config: Optional[ViewConfig] = None,
        source: Optional[PixelBuffer] = None,
        writer: Optional[PixelWriter] = None
    ):
        self.config = config or ViewConfig()
        self.source = source
        self.writer = writer

    def load_source(self, reader: PixelReader) -> PixelBuffer:
        """Replace the source with a fresh read from the given port."""
        self.source = reader.read_pixels()
        return self.source

    def generate(self) -> PixelBuffer:
        """Run subsampling, isolation and rounding in order; return the final buffer."""
        if self.source is None:
            raise RuntimeError("No source buffer loaded")
        if self.source.color_mode != 'RGB':
            raise ModeMismatch(f"Source buffer must be RGB, got {self.source.color_mode}")

        target = self.config.transformation_target
        scheme = self.config.subsampling_scheme
        logger.debug(
            "Generating %dx%d view: target=%s scheme=%s",
            self.source.width, self.source.height, target, scheme
        )

        buffer = self.source

        # Subsampling must run before isolation so an isolated chroma plane
        # shows the averaged values
        if scheme is not None:
            buffer = subsample(convert(buffer, 'YCC'), scheme)

        if target != 'original':
            buffer = convert(buffer, 'YCC' if target in YCC_COMPONENTS else 'RGB')
            buffer = isolate(buffer, target)
        elif scheme is not None:
            buffer = convert(buffer, 'RGB')

        return round_buffer(buffer)

    def render(self) -> np.ndarray:
        """generate(), pack, and write the raster once to the write port at (0, 0)."""
        raster = pack(self.generate())
        if self.writer is not None:
            self.writer.write_pixels(raster, 0, 0)
        return raster
