"""Pixel engines - pure computation, no GUI dependencies."""

from .color_space import rgb_to_ycbcr, ycbcr_to_rgb, convert
from .channel_isolator import isolate
from .block_processor import raster_order, split_into_chunks, split_into_squares
from .chroma_subsampler import subsample, blocks_for_scheme, average_chroma
from .pipeline import PipelineOrchestrator, round_buffer, pack
from .controller import VisualizationController, DEFAULT_VIEWS

__all__ = [
    'rgb_to_ycbcr',
    'ycbcr_to_rgb',
    'convert',
    'isolate',
    'raster_order',
    'split_into_chunks',
    'split_into_squares',
    'subsample',
    'blocks_for_scheme',
    'average_chroma',
    'PipelineOrchestrator',
    'round_buffer',
    'pack',
    'VisualizationController',
    'DEFAULT_VIEWS',
]
