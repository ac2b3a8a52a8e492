# motionbox

Image-processing steps for spotting motion against a background frame.
All images are NumPy arrays. Gray images are two-dimensional `uint8`
arrays. Colour frames have shape `(height, width, 3)` and use BGR channel
order.

## Installation

```
pip install .
```

Run `pip install .[test]` to also install the test dependencies.

## What is here

### `motionbox.filters`

- `grayscale(frame)` converts a BGR frame to gray with
  `0.2989 R + 0.5870 G + 0.1140 B`. The result is truncated, not rounded.
- `blur(src, ksize, sigma)` smooths an image with a normalised
  `ksize × ksize` Gaussian kernel.
- `diff(src1, src2)` returns the absolute pixel-wise difference. It raises
  `ValueError` if the two shapes differ.
- `threshold(src, thresh, maxval)` sets pixels below `thresh` to 0 and every
  other pixel to `maxval`. It raises `ValueError` if `maxval` is outside 0–255.

### `motionbox.tools`

- `filter2d(src, kernel)` correlates an image with a square kernel of odd
  size. Pixels outside the image count as 0. Each sum is rounded half away
  from zero and clipped to 0–255.
- `gaussian_matrix(ksize, sigma)` returns a `float32` Gaussian kernel whose
  values sum to 1. It raises `ValueError` if `ksize` or `sigma` is not positive.
- `circle_kernel(diameter)` returns a 0/1 disc. A cell is set when its
  squared distance from the centre is strictly less than the squared radius.
- `bounding_boxes(labels)` takes an integer label map (0 means background).
  It returns one `Rect` per distinct non-zero label. Labels whose first pixel
  comes later in a raster scan are listed first.

### `motionbox.morph`

Every kernel must be square and of odd size. Pixels outside the image count
as 0.

- `dilate_binary1(src, kernel)` and `erode_binary1(src, kernel)` work on
  images whose foreground is 1, and return 0/1 images.
- `dilate_binary255(src, kernel)` and `erode_binary255(src, kernel)` do the
  same for images whose foreground is 255, and return 0/255 images.
- `morph_open(src, ksize)` dilates, then erodes, with a
  `circle_kernel(ksize)`.
- `morph_close(src, ksize)` erodes, then dilates, with the same kernel.

### `motionbox.image`

- `Rect(x, y, width, height)` is a frozen rectangle.
- `Box(min_x, min_y, max_x, max_y)` is an inclusive box. `extend(x, y)`
  grows it to cover a pixel, and `to_rect()` converts it to a `Rect`.
- `labels_to_image(labels)` keeps the low byte of each label as a `uint8`
  image.
- `format_image(image)` renders an image as text, with each value
  right-aligned in three characters.

## Example

```python
import numpy as np

from motionbox.filters import blur, diff, grayscale, threshold
from motionbox.morph import morph_open
from motionbox.tools import bounding_boxes

def changed_mask(background, frame):
    bgd = blur(grayscale(background), 15, 0.2)
    img = blur(grayscale(frame), 15, 0.2)
    return morph_open(threshold(diff(bgd, img), 20, 255), 15)

labels = np.array([[0, 0, 0],
                   [0, 1, 1],
                   [0, 1, 1]])
print(bounding_boxes(labels))  # [Rect(x=1, y=1, width=2, height=2)]
```

## What it does not do

motionbox does not label connected regions in a mask. `bounding_boxes`
needs a label map that you have already computed. The package also does not
read video files, show frames, or run a full detection loop, and it has no
command-line program.

## Tests

```
pytest
```