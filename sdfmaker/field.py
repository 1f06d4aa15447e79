"""Signed distance field storage, image export and region analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike

from PIL import Image

from sdfmaker.errors import ImageLoadError


@dataclass
class Point2:
    """A point in image space."""

    x: float
    y: float


@dataclass
class Region:
    """A connected area of negative (inside) distances."""

    center: Point2
    pixel_count: int
    bounds: tuple[int, int, int, int]  # min_x, min_y, max_x, max_y


def _ratio(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 1.0) * 255.0)


@dataclass
class SDFData:
    """A row-major grid of signed distances.

    Without explicit data every cell starts at ``max_distance``.
    """

    width: int
    height: int
    max_distance: float
    data: list[float] | None = None

    def __post_init__(self) -> None:
        size = self.width * self.height
        if self.data is None:
            self.data = [float(self.max_distance)] * size
        elif len(self.data) != size:
            raise ValueError(
                f"expected {size} values for a {self.width}x{self.height} field, "
                f"got {len(self.data)}"
            )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} field")
        return y * self.width + x

    def get(self, x: int, y: int) -> float:
        return self.data[self._index(x, y)]

    def set(self, x: int, y: int, value: float) -> None:
        self.data[self._index(x, y)] = value

    def get_normalized(self, x: int, y: int) -> float:
        """Map the distance at (x, y) from [-max, max] to [0, 1]."""
        return _ratio(self.get(x, y) + self.max_distance, 2.0 * self.max_distance)

    def to_grayscale_image(self, normalize: bool) -> Image.Image:
        """Render the field as an 8-bit grayscale image."""
        if normalize:
            span = 2.0 * self.max_distance
            values = (_ratio(v + self.max_distance, span) for v in self.data)
        else:
            values = (_ratio(v, self.max_distance) for v in self.data)
        image = Image.new("L", (self.width, self.height))
        image.putdata([_to_byte(v) for v in values])
        return image

    def save_as_image(self, path: str | PathLike) -> None:
        """Save the normalized field as a grayscale image."""
        _save(self.to_grayscale_image(True), path)

    def analyze_regions(self) -> list[Region]:
        """Find 8-connected inside regions larger than ten pixels."""
        threshold = 0.0
        visited = [False] * len(self.data)
        regions = []
        for idx, value in enumerate(self.data):
            if visited[idx] or not value < threshold:
                continue
            y, x = divmod(idx, self.width)
            region = self._flood_fill_region(x, y, visited, threshold)
            if region.pixel_count > 10:
                regions.append(region)
        return regions

    def _flood_fill_region(
        self, start_x: int, start_y: int, visited: list[bool], threshold: float
    ) -> Region:
        stack = [(start_x, start_y)]
        count = 0
        sum_x = sum_y = 0.0
        min_x, min_y, max_x, max_y = start_x, start_y, start_x, start_y

        while stack:
            x, y = stack.pop()
            idx = y * self.width + x
            if visited[idx]:
                continue
            visited[idx] = True
            count += 1
            sum_x += x
            sum_y += y
            min_x, min_y = min(min_x, x), min(min_y, y)
            max_x, max_y = max(max_x, x), max(max_y, y)

            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < self.width and 0 <= ny < self.height:
                        nidx = ny * self.width + nx
                        if not visited[nidx] and self.data[nidx] < threshold:
                            stack.append((nx, ny))

        center = Point2(sum_x / count, sum_y / count) if count else Point2(0.0, 0.0)
        return Region(center=center, pixel_count=count, bounds=(min_x, min_y, max_x, max_y))


@dataclass
class SDFMetadata:
    """Information about how a field was produced."""

    source_file: str | None = None
    algorithm: str = "unknown"
    threshold: int = 128
    processing_time: float | None = None  # seconds


@dataclass
class SDF:
    """A distance field together with its metadata."""

    data: SDFData
    metadata: SDFMetadata = field(default_factory=SDFMetadata)

    @classmethod
    def from_raw_data(
        cls, data: list[float], width: int, height: int, max_distance: float
    ) -> SDF:
        return cls(SDFData(width, height, max_distance, list(data)))

    def save(self, path: str | PathLike, normalize: bool) -> None:
        _save(self.data.to_grayscale_image(normalize), path)


def _save(image: Image.Image, path: str | PathLike) -> None:
    try:
        image.save(path)
    except (OSError, ValueError) as exc:
        raise ImageLoadError(str(exc)) from exc