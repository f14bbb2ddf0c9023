"""Synthetic source images for the subsampling and channel views."""

import numpy as np


def generate_color_bars(size: int = 256) -> np.ndarray:
    """Saturated primaries and secondaries - every channel view shows something distinct."""
    colors = [
        [255, 255, 255],  # White
        [255, 255, 0],    # Yellow
        [0, 255, 255],    # Cyan
        [0, 255, 0],      # Green
        [255, 0, 255],    # Magenta
        [255, 0, 0],      # Red
        [0, 0, 255],      # Blue
        [0, 0, 0],        # Black
    ]
    img = np.zeros((size, size, 3), dtype=np.uint8)
    bar_width = max(size // len(colors), 1)
    for i, color in enumerate(colors):
        x_start = i * bar_width
        x_end = (i + 1) * bar_width if i < len(colors) - 1 else size
        img[:, x_start:x_end] = color
    return img


def generate_hue_gradient(size: int = 256) -> np.ndarray:
    """Hue sweeps left to right, brightness top to bottom."""
    hue = np.linspace(0.0, 6.0, size, endpoint=False)
    # Piecewise-linear hue wheel
    r = np.clip(np.abs(hue - 3.0) - 1.0, 0.0, 1.0)
    g = np.clip(2.0 - np.abs(hue - 2.0), 0.0, 1.0)
    b = np.clip(2.0 - np.abs(hue - 4.0), 0.0, 1.0)
    row = np.stack([r, g, b], axis=-1)

    brightness = np.linspace(1.0, 0.2, size)[:, None, None]
    img = row[None, :, :] * brightness * 255.0
    return np.clip(np.rint(img), 0, 255).astype(np.uint8)


def generate_fine_checker(size: int = 256, cell: int = 1) -> np.ndarray:
    """Red/blue checkerboard at pixel scale - worst case for chroma averaging."""
    rows = np.arange(size)[:, None] // cell
    cols = np.arange(size)[None, :] // cell
    mask = (rows + cols) % 2 == 0
    img = np.zeros((size, size, 3), dtype=np.uint8)
    img[mask] = [255, 0, 0]
    img[~mask] = [0, 0, 255]
    return img


def generate_text_stripes(size: int = 256, stripe_width: int = 2) -> np.ndarray:
    """Thin colored stripes on a gray background, both orientations."""
    img = np.full((size, size, 3), 128, dtype=np.uint8)
    half = size // 2
    for j in range(0, size, stripe_width * 2):
        img[:half, j:j + stripe_width] = [220, 40, 40]
    for i in range(half, size, stripe_width * 2):
        img[i:i + stripe_width, :] = [40, 200, 60]
    return img


DEMO_IMAGES = {
    "color_bars": generate_color_bars,
    "hue_gradient": generate_hue_gradient,
    "fine_checker": generate_fine_checker,
    "stripes": generate_text_stripes,
}


def generate_demo_image(key: str, size: int = 256) -> np.ndarray | None:
    """Generate demo image by key."""
    generator = DEMO_IMAGES.get(key)
    if generator is None:
        return None
    return generator(size)
