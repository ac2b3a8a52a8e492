"""Pixel-wise operations on 8-bit images: grayscale, blur, difference, threshold."""

from __future__ import annotations

import numpy as np

from motionbox.tools import filter2d, gaussian_matrix


def _gray_image(src) -> np.ndarray:
    arr = np.asarray(src)
    if arr.ndim != 2:
        raise ValueError("expected a two-dimensional image")
    return arr


def grayscale(frame) -> np.ndarray:
    """Convert a BGR frame of shape (height, width, 3) to an 8-bit gray image.

    The weighted sum of the channels is truncated, not rounded.
    """
    arr = np.asarray(frame)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("expected a frame of shape (height, width, 3)")
    channels = arr.astype(np.float64)
    blue, green, red = channels[..., 0], channels[..., 1], channels[..., 2]
    gray = 0.2989 * red + 0.5870 * green + 0.1140 * blue
    return np.floor(gray).astype(np.uint8)


def blur(src, ksize: int, sigma: float) -> np.ndarray:
    """Smooth an image with a normalised ksize x ksize Gaussian kernel."""
    return filter2d(_gray_image(src), gaussian_matrix(ksize, sigma))


def diff(src1, src2) -> np.ndarray:
    """Return the absolute pixel-wise difference of two images of equal shape."""
    first = _gray_image(src1).astype(np.int16)
    second = _gray_image(src2).astype(np.int16)
    if first.shape != second.shape:
        raise ValueError("images must have the same shape")
    return np.abs(first - second).astype(np.uint8)


def threshold(src, thresh: int, maxval: int) -> np.ndarray:
    """Set pixels below thresh to 0 and every other pixel to maxval."""
    if not 0 <= maxval <= 255:
        raise ValueError("maxval must fit in 8 bits")
    image = _gray_image(src)
    return np.where(image < thresh, 0, maxval).astype(np.uint8)