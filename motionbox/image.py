"""Basic image value types and helpers for single-channel 8-bit images."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class Box:
    """An inclusive bounding box given by its extreme pixel coordinates."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def to_rect(self) -> Rect:
        """Return the rectangle covering every pixel of the box."""
        return Rect(
            self.min_x,
            self.min_y,
            self.max_x - self.min_x + 1,
            self.max_y - self.min_y + 1,
        )

    def extend(self, x: int, y: int) -> None:
        """Grow the box so that it contains the pixel (x, y)."""
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)


def labels_to_image(labels) -> np.ndarray:
    """Convert an integer label map to an 8-bit image, keeping the low byte."""
    arr = np.asarray(labels, dtype=np.int64)
    return (arr & 0xFF).astype(np.uint8)


def format_image(image) -> str:
    """Render an image as rows of right-aligned three-character values."""
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValueError("expected a two-dimensional image")
    lines = ["".join(f"{int(value):>3} " for value in row) + "\n" for row in arr]
    return "".join(lines) + "\n"