"""Gray-image filtering, thresholding, binary morphology and bounding boxes for motion detection."""

__version__ = "1.0.0"