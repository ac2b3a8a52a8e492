"""Convolution, structuring elements and bounding-box extraction."""

from __future__ import annotations

import math

import numpy as np

from motionbox.image import Box, Rect


def _square_kernel(kernel, dtype) -> np.ndarray:
    arr = np.asarray(kernel, dtype=dtype)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError("kernel must be a square two-dimensional array")
    if arr.shape[0] % 2 == 0:
        raise ValueError("kernel size must be odd")
    return arr


def _gray_image(src) -> np.ndarray:
    arr = np.asarray(src)
    if arr.ndim != 2:
        raise ValueError("expected a two-dimensional image")
    return arr


def filter2d(src, kernel) -> np.ndarray:
    """Correlate an 8-bit image with a square kernel, treating outside pixels as 0.

    Each result is rounded half away from zero and stored as an 8-bit value.
    """
    image = _gray_image(src).astype(np.float32)
    weights = _square_kernel(kernel, np.float32)
    ksize = weights.shape[0]
    radius = ksize // 2
    height, width = image.shape
    padded = np.pad(image, radius)
    acc = np.zeros((height, width), dtype=np.float32)
    for (di, dj), weight in np.ndenumerate(weights):
        if weight:
            acc += weight * padded[di:di + height, dj:dj + width]
    rounded = np.sign(acc) * np.floor(np.abs(acc) + 0.5)
    return np.clip(rounded, 0, 255).astype(np.uint8)


def circle_kernel(diameter: int) -> np.ndarray:
    """Return a disc-shaped binary structuring element of the given diameter."""
    if diameter < 0:
        raise ValueError("diameter must not be negative")
    radius = diameter // 2
    rows, cols = np.indices((diameter, diameter))
    distance = (rows - radius) ** 2 + (cols - radius) ** 2
    return (distance < radius * radius).astype(np.uint8)


def gaussian_matrix(ksize: int, sigma: float) -> np.ndarray:
    """Return a normalised ksize x ksize Gaussian kernel."""
    if ksize <= 0:
        raise ValueError("kernel size must be positive")
    if sigma <= 0:
        raise ValueError("sigma must be positive")
    radius = ksize // 2
    ys, xs = np.indices((ksize, ksize)) - radius
    two_sigma_sq = 2.0 * sigma * sigma
    values = np.exp(-(xs * xs + ys * ys) / two_sigma_sq) / (two_sigma_sq * math.pi)
    values = values.astype(np.float32)
    total = float(values.astype(np.float64).sum())
    return (values / total).astype(np.float32)


def bounding_boxes(labels) -> list[Rect]:
    """Return the bounding rectangle of every non-zero label.

    The rectangle of the label found last in a raster scan comes first.
    """
    arr = _gray_image(labels)
    ys, xs = np.nonzero(arr)
    if ys.size == 0:
        return []
    values = arr[ys, xs]
    order = np.argsort(values, kind="stable")
    sorted_values = values[order]
    sorted_xs = xs[order]
    sorted_ys = ys[order]
    starts = np.flatnonzero(np.r_[True, sorted_values[1:] != sorted_values[:-1]])

    boxes = [
        (int(first), Box(int(min_x), int(min_y), int(max_x), int(max_y)))
        for first, min_x, min_y, max_x, max_y in zip(
            order[starts],
            np.minimum.reduceat(sorted_xs, starts),
            np.minimum.reduceat(sorted_ys, starts),
            np.maximum.reduceat(sorted_xs, starts),
            np.maximum.reduceat(sorted_ys, starts),
        )
    ]
    boxes.sort(key=lambda item: item[0], reverse=True)
    return [box.to_rect() for _, box in boxes]