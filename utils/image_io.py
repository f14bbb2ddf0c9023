"""Image I/O using OpenCV."""

import cv2
import numpy as np


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8. Transparency is dropped."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save an RGB or RGBA image."""
    if image.shape[2] == 4:
        converted = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    else:
        converted = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(path, converted):
        raise ValueError(f"Could not write image to {path}")
