"""Shared utilities."""

from .render_surface import PixelReader, PixelWriter, RenderSurface, ArraySurface
from .metrics import compute_psnr_ssim
from .test_images import generate_demo_image, DEMO_IMAGES
from .image_io import load_image, save_image

__all__ = [
    'PixelReader',
    'PixelWriter',
    'RenderSurface',
    'ArraySurface',
    'compute_psnr_ssim',
    'generate_demo_image',
    'DEMO_IMAGES',
    'load_image',
    'save_image',
]
