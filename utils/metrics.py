"""Metrics: PSNR and SSIM of a rendered view against its source."""

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def luma(rgb: np.ndarray) -> np.ndarray:
    """BT.601 luma of an (H, W, 3) array."""
    rgb = rgb.astype(np.float64)
    return 0.299 * rgb[:, :, 0] + 0.587 * rgb[:, :, 1] + 0.114 * rgb[:, :, 2]


def _ssim(a: np.ndarray, b: np.ndarray, **kwargs) -> float:
    # skimage needs a window of at least 7 pixels unless win_size is given
    min_side = min(a.shape[0], a.shape[1])
    if min_side < 7:
        win_size = min_side if min_side % 2 == 1 else min_side - 1
        if win_size < 3:
            return 1.0 if np.array_equal(a, b) else float('nan')
        kwargs['win_size'] = win_size
    return float(structural_similarity(a, b, data_range=255, **kwargs))


def compute_psnr_ssim(original_rgb: np.ndarray, rendered_rgb: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on RGB and on the Y channel. Identical images give inf PSNR."""
    original_rgb = original_rgb[:, :, :3]
    rendered_rgb = rendered_rgb[:, :, :3]

    if np.array_equal(original_rgb, rendered_rgb):
        psnr_rgb = float('inf')
    else:
        psnr_rgb = peak_signal_noise_ratio(original_rgb, rendered_rgb, data_range=255)
    ssim_rgb = _ssim(original_rgb, rendered_rgb, channel_axis=2)

    original_y = luma(original_rgb)
    rendered_y = luma(rendered_rgb)
    if np.array_equal(original_y, rendered_y):
        psnr_y = float('inf')
    else:
        psnr_y = peak_signal_noise_ratio(original_y, rendered_y, data_range=255)
    ssim_y = _ssim(original_y, rendered_y)

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': ssim_rgb,
        'psnr_y': float(psnr_y),
        'ssim_y': ssim_y
    }
