"""Block partitioning of pixel sequences for chroma averaging."""

from typing import List, Sequence, TypeVar

T = TypeVar('T')


def raster_order(pixels: Sequence[T]) -> List[T]:
    """Pixels sorted row by row, left to right."""
    return sorted(pixels, key=lambda p: (p.row, p.col))


def split_into_chunks(pixels: Sequence[T], length: int) -> List[List[T]]:
    """
    Fixed-length chunks of a flat sequence.

    Chunk boundaries ignore row boundaries; the last chunk may be short.
    """
    if length < 1:
        raise ValueError(f"Chunk length must be >= 1, got {length}")
    return [list(pixels[i:i + length]) for i in range(0, len(pixels), length)]


def split_into_squares(pixels: Sequence[T], square_size: int, width: int) -> List[List[T]]:
    """
    Square blocks of a raster-order sequence.

    Rows are grouped into bands of square_size, and within each band columns
    into spans of square_size. Blocks come out band by band, span by span;
    edge blocks may hold fewer pixels.
    """
    if square_size < 1:
        raise ValueError(f"Square size must be >= 1, got {square_size}")
    if width < 1:
        return []

    bands: List[List[List[T]]] = []
    for row_index, row in enumerate(split_into_chunks(pixels, width)):
        if row_index % square_size == 0:
            bands.append([])
        band = bands[-1]
        for col_index, pixel in enumerate(row):
            span = col_index // square_size
            if span == len(band):
                band.append([])
            band[span].append(pixel)

    return [block for band in bands for block in band]
