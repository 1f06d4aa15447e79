"""Black-and-white test shapes for trying out distance field generators."""

from __future__ import annotations

import math
from collections.abc import Callable
from os import PathLike
from pathlib import Path

from PIL import Image

_WHITE = 255
_BLACK = 0


def _mask_image(width: int, height: int, inside: Callable[[int, int], bool]) -> Image.Image:
    """Build an 8-bit grayscale image, white where ``inside`` holds and black elsewhere."""
    image = Image.new("L", (width, height))
    image.putdata(
        [_WHITE if inside(x, y) else _BLACK for y in range(height) for x in range(width)]
    )
    return image


def circle_image(width: int, height: int, radius: float) -> Image.Image:
    """A white disc of ``radius`` centred in a black image."""
    cx, cy = width / 2.0, height / 2.0
    return _mask_image(width, height, lambda x, y: math.hypot(x - cx, y - cy) <= radius)


def square_image(width: int, height: int, size: int) -> Image.Image:
    """A white ``size`` x ``size`` square centred in a black image."""
    if size > width or size > height:
        raise ValueError(f"a square of {size} does not fit in a {width}x{height} image")
    left = (width - size) // 2
    top = (height - size) // 2
    right, bottom = left + size, top + size
    return _mask_image(
        width, height, lambda x, y: left <= x < right and top <= y < bottom
    )


def ring_image(
    width: int, height: int, outer_radius: float, inner_radius: float
) -> Image.Image:
    """A white ring between two radii centred in a black image."""
    cx, cy = width / 2.0, height / 2.0

    def inside(x: int, y: int) -> bool:
        distance = math.hypot(x - cx, y - cy)
        return inner_radius <= distance <= outer_radius

    return _mask_image(width, height, inside)


def circle_and_corners_image(size: int) -> Image.Image:
    """A square image with a central disc and a white square in each corner."""
    centre = size / 2.0
    radius = size / 4.0
    low, high = size // 4, 3 * size // 4

    def inside(x: int, y: int) -> bool:
        in_circle = math.hypot(x - centre, y - centre) <= radius
        in_corner = (x < low or x >= high) and (y < low or y >= high)
        return in_circle or in_corner

    return _mask_image(size, size, inside)


def write_test_images(directory: str | PathLike) -> list[Path]:
    """Write a 256x256 circle and square into ``directory`` and return their paths."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    size = 256

    circle_path = target / "test_circle.png"
    circle_image(size, size, size / 4.0).save(circle_path)

    square_path = target / "test_square.png"
    square_image(size, size, size // 3).save(square_path)

    return [circle_path, square_path]