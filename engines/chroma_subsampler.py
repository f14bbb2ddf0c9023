"""Chroma subsampling by block averaging."""

from dataclasses import replace
from typing import List, Sequence

from models.errors import InvalidScheme, ModeMismatch
from models.pixel import YCCPixel
from models.pixel_buffer import PixelBuffer
from models.view_config import SubsamplingScheme
from engines.block_processor import raster_order, split_into_chunks, split_into_squares


def blocks_for_scheme(
    pixels: Sequence[YCCPixel],
    scheme: SubsamplingScheme,
    width: int
) -> List[List[YCCPixel]]:
    """Partition pixels into averaging blocks for the given scheme."""
    ordered = raster_order(pixels)
    if scheme == '4:4:4':
        return split_into_chunks(ordered, 1)
    elif scheme == '4:2:2':
        return split_into_chunks(ordered, 2)
    elif scheme == '4:2:0':
        return split_into_squares(ordered, 2, width)
    raise InvalidScheme(f"Unknown subsampling scheme: {scheme}")


def average_chroma(block: Sequence[YCCPixel]) -> List[YCCPixel]:
    """New pixels carrying the block's mean Cb and Cr. Y is untouched."""
    avg_cb = sum(p.cb for p in block) / len(block)
    avg_cr = sum(p.cr for p in block) / len(block)
    return [replace(p, cb=avg_cb, cr=avg_cr) for p in block]


def subsample(buffer: PixelBuffer, scheme: SubsamplingScheme) -> PixelBuffer:
    """
    Average chroma over blocks of a YCC buffer.

    The output sequence is the blocks concatenated in formation order, which
    for 4:2:0 is not raster order.
    """
    if buffer.color_mode != 'YCC':
        raise ModeMismatch(f"Subsampling needs a YCC buffer, got {buffer.color_mode}")

    blocks = blocks_for_scheme(buffer.pixels, scheme, buffer.width)
    subsampled = []
    for block in blocks:
        subsampled.extend(average_chroma(block))
    return buffer.with_pixels(subsampled)
