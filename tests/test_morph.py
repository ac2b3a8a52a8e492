import numpy as np
import pytest

from motionbox.morph import (
    dilate_binary1,
    dilate_binary255,
    erode_binary1,
    erode_binary255,
    morph_close,
    morph_open,
)
from motionbox.tools import circle_kernel


def grid(*rows, on=1):
    return np.array([[on if c == "1" else 0 for c in row] for row in rows], dtype=np.uint8)


SQUARE3 = np.ones((3, 3), dtype=np.uint8)

CIRCLE9 = grid(
    "001111100",
    "011111110",
    "111111111",
    "111111111",
    "111111111",
    "111111111",
    "111111111",
    "011111110",
    "001111100",
)

WIKI_DILATE_ROWS = (
    "00000000000",
    "01111001110",
    "01111001110",
    "01111111110",
    "01111111110",
    "01100011110",
    "01100011110",
    "01100011110",
    "01111111000",
    "01111111000",
    "00000000000",
)

WIKI_DILATE_EXPECTED_ROWS = (
    "11111111111",
    "11111111111",
    "11111111111",
    "11111111111",
    "11111111111",
    "11111111111",
    "11110111111",
    "11111111111",
    "11111111111",
    "11111111100",
    "11111111100",
)

OPEN_CLOSE_ROWS = (
    "0010000000000",
    "0111000000110",
    "1111100000110",
    "0111000000000",
    "0010000000000",
    "0000000000000",
    "0000000000000",
    "0000000000000",
    "0000000000000",
    "0001000000100",
    "0011100000000",
    "0001000000000",
    "0000000000000",
)


def _holed_square():
    image = np.ones((13, 13), dtype=np.uint8)
    image[1, 6] = 0
    return image


def _erosion_expected():
    expected = np.zeros((13, 13), dtype=np.uint8)
    expected[1:12, 1:12] = 1
    expected[1:3, 5:8] = 0
    return expected


def test_dilation_wikipedia():
    result = dilate_binary1(grid(*WIKI_DILATE_ROWS), SQUARE3)
    np.testing.assert_array_equal(result, grid(*WIKI_DILATE_EXPECTED_ROWS))


def test_erosion_wikipedia():
    result = erode_binary1(_holed_square(), SQUARE3)
    np.testing.assert_array_equal(result, _erosion_expected())


def test_dilation_cross():
    image = grid("00000", "01110", "01110", "01110", "00000")
    kernel = grid("010", "111", "010")
    expected = grid("01110", "11111", "11111", "11111", "01110")
    np.testing.assert_array_equal(dilate_binary1(image, kernel), expected)


def test_dilate_circle():
    result = dilate_binary1(_holed_square(), CIRCLE9)
    np.testing.assert_array_equal(result, np.ones((13, 13), dtype=np.uint8))


def test_erode_circle():
    expected = np.zeros((13, 13), dtype=np.uint8)
    expected[6:9, 4:9] = 1
    np.testing.assert_array_equal(erode_binary1(_holed_square(), CIRCLE9), expected)


def test_dilation_255():
    image = grid(*WIKI_DILATE_ROWS, on=255)
    expected = grid(*WIKI_DILATE_EXPECTED_ROWS, on=255)
    np.testing.assert_array_equal(dilate_binary255(image, SQUARE3), expected)


def test_erosion_255():
    image = _holed_square() * 255
    np.testing.assert_array_equal(erode_binary255(image, SQUARE3), _erosion_expected() * 255)


def test_morph_open_is_dilate_then_erode():
    image = grid(*OPEN_CLOSE_ROWS, on=255)
    kernel = circle_kernel(5)
    expected = erode_binary255(dilate_binary255(image, kernel), kernel)
    np.testing.assert_array_equal(morph_open(image, 5), expected)


def test_morph_close_is_erode_then_dilate():
    image = grid(*OPEN_CLOSE_ROWS, on=255)
    kernel = circle_kernel(5)
    expected = dilate_binary255(erode_binary255(image, kernel), kernel)
    np.testing.assert_array_equal(morph_close(image, 5), expected)


def test_binary255_ignores_pixels_with_low_bit_clear():
    image = np.full((3, 3), 254, dtype=np.uint8)
    assert not dilate_binary255(image, SQUARE3).any()


def test_even_kernel_is_rejected():
    with pytest.raises(ValueError):
        dilate_binary1(np.zeros((4, 4), dtype=np.uint8), np.ones((2, 2), dtype=np.uint8))


def test_non_square_kernel_is_rejected():
    with pytest.raises(ValueError):
        erode_binary1(np.zeros((4, 4), dtype=np.uint8), np.ones((3, 1), dtype=np.uint8))