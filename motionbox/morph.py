"""Binary morphology with arbitrary square structuring elements."""

from __future__ import annotations

import numpy as np

from motionbox.tools import circle_kernel


def _gray_image(src) -> np.ndarray:
    arr = np.asarray(src)
    if arr.ndim != 2:
        raise ValueError("expected a two-dimensional image")
    return arr.astype(np.uint8)


def _structuring_element(kernel) -> np.ndarray:
    arr = np.asarray(kernel)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError("kernel must be a square two-dimensional array")
    if arr.shape[0] % 2 == 0:
        raise ValueError("kernel size must be odd")
    return arr.astype(np.uint8)


def _accumulate(src, kernel, dilate: bool) -> np.ndarray:
    """Combine (pixel & kernel value) over the kernel, outside pixels being 0.

    Dilation ORs the terms starting from 0; erosion ANDs them starting from 1.
    """
    image = _gray_image(src)
    weights = _structuring_element(kernel)
    radius = weights.shape[0] // 2
    height, width = image.shape
    padded = np.pad(image, radius)
    if dilate:
        acc = np.zeros((height, width), dtype=np.uint8)
    else:
        acc = np.ones((height, width), dtype=np.uint8)
    for (di, dj), weight in np.ndenumerate(weights):
        if not weight:
            continue
        term = padded[di:di + height, dj:dj + width] & weight
        if dilate:
            acc |= term
        else:
            acc &= term
    return acc


def _to_255(acc: np.ndarray) -> np.ndarray:
    return np.where(acc == 1, 255, 0).astype(np.uint8)


def dilate_binary255(src, kernel) -> np.ndarray:
    """Dilate an image whose foreground is 255; the result uses 0 and 255."""
    return _to_255(_accumulate(src, kernel, dilate=True))


def erode_binary255(src, kernel) -> np.ndarray:
    """Erode an image whose foreground is 255; the result uses 0 and 255."""
    return _to_255(_accumulate(src, kernel, dilate=False))


def dilate_binary1(src, kernel) -> np.ndarray:
    """Dilate an image whose foreground is 1; the result uses 0 and 1."""
    return _accumulate(src, kernel, dilate=True)


def erode_binary1(src, kernel) -> np.ndarray:
    """Erode an image whose foreground is 1; the result uses 0 and 1."""
    return _accumulate(src, kernel, dilate=False)


def morph_open(src, ksize: int) -> np.ndarray:
    """Dilate then erode a 0/255 image with a disc of diameter ksize."""
    kernel = circle_kernel(ksize)
    return erode_binary255(dilate_binary255(src, kernel), kernel)


def morph_close(src, ksize: int) -> np.ndarray:
    """Erode then dilate a 0/255 image with a disc of diameter ksize."""
    kernel = circle_kernel(ksize)
    return dilate_binary255(erode_binary255(src, kernel), kernel)