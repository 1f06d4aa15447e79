"""Distance field generators: brute force, jump flooding and feature-aware."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass
from typing import ClassVar

from PIL import Image

from sdfmaker.channels import MultiChannelInput
from sdfmaker.errors import ProcessingFailedError
from sdfmaker.field import SDFData

_Seed = tuple[int, int]


def _check_threshold(threshold: int) -> None:
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold must be between 0 and 255, got {threshold}")


def _luma(image: Image.Image) -> bytes:
    """Return the image as row-major 8-bit grayscale values."""
    gray = image if image.mode == "L" else image.convert("L")
    return gray.tobytes()


class SDFAlgorithm(abc.ABC):
    """A method of turning a channel set into a distance field."""

    name: ClassVar[str]

    @abc.abstractmethod
    def process(self, channels: MultiChannelInput) -> SDFData:
        """Generate a distance field from the primary channel of ``channels``."""


@dataclass
class BruteForce(SDFAlgorithm):
    """Exhaustive search for the nearest opposite pixel around every pixel.

    Distances are negative inside the shape and positive outside, capped at
    ``max_distance``.
    """

    name: ClassVar[str] = "brute-force"

    threshold: int = 128
    max_distance: float = 32.0

    def __post_init__(self) -> None:
        _check_threshold(self.threshold)

    def _offsets(self) -> list[tuple[float, int, int]]:
        # Offsets at or beyond max_distance cannot beat the cap, so they are dropped.
        radius = math.ceil(self.max_distance)
        span = range(-radius, radius + 1)
        candidates = (
            (math.sqrt(dx * dx + dy * dy), dx, dy) for dy in span for dx in span
        )
        return sorted(c for c in candidates if c[0] < self.max_distance)

    def process(self, channels: MultiChannelInput) -> SDFData:
        width, height = channels.dimensions()
        inside = [value > self.threshold for value in _luma(channels.primary_channel())]
        cap = float(self.max_distance)

        if all(inside) or not any(inside):
            values = [-cap if here else cap for here in inside]
            return SDFData(width, height, self.max_distance, values)

        offsets = self._offsets()
        values: list[float] = []
        for y in range(height):
            for x in range(width):
                here = inside[y * width + x]
                best = cap
                for distance, dx, dy in offsets:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and 0 <= ny < height and inside[ny * width + nx] != here:
                        best = distance
                        break
                values.append(-best if here else best)
        return SDFData(width, height, self.max_distance, values)


@dataclass
class JumpFloodingAlgorithm(SDFAlgorithm):
    """Jump flooding from the pixels on the shape's edge.

    The result is the unsigned distance to the nearest edge pixel, capped at
    ``max_distance``; pixels no seed reaches get ``max_distance``.
    """

    name: ClassVar[str] = "jump-flooding"

    threshold: int = 128
    max_distance: float = 32.0
    subpixel_precision: bool = False

    def __post_init__(self) -> None:
        _check_threshold(self.threshold)

    def process(self, channels: MultiChannelInput) -> SDFData:
        width, height = channels.dimensions()
        luma = _luma(channels.primary_channel())
        seeds = _edge_seeds(luma, self.threshold, width, height)
        nearest = _flood(seeds, width, height)
        cap = float(self.max_distance)
        values = [
            cap
            if seed is None
            else min(math.sqrt((seed[0] - x) ** 2 + (seed[1] - y) ** 2), cap)
            for (y, x), seed in zip(
                ((y, x) for y in range(height) for x in range(width)), nearest
            )
        ]
        return SDFData(width, height, self.max_distance, values)


def _edge_seeds(luma: bytes, threshold: int, width: int, height: int) -> list[_Seed | None]:
    """Mark every pixel with a 4-neighbour on the other side of the threshold."""
    inside = [value > threshold for value in luma]
    seeds: list[_Seed | None] = []
    for y in range(height):
        for x in range(width):
            here = inside[y * width + x]
            is_edge = any(
                0 <= nx < width and 0 <= ny < height and inside[ny * width + nx] != here
                for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
            )
            seeds.append((x, y) if is_edge else None)
    return seeds


def _flood(seeds: list[_Seed | None], width: int, height: int) -> list[_Seed | None]:
    """Propagate the nearest seed to every pixel with halving step sizes."""
    step = 1
    while step < max(width, height):
        step *= 2

    current = seeds
    while step >= 1:
        following: list[_Seed | None] = []
        for y in range(height):
            for x in range(width):
                best = current[y * width + x]
                best_distance = math.inf
                for dy in (-step, 0, step):
                    ny = y + dy
                    if not 0 <= ny < height:
                        continue
                    for dx in (-step, 0, step):
                        nx = x + dx
                        if not 0 <= nx < width:
                            continue
                        seed = current[ny * width + nx]
                        if seed is None:
                            continue
                        distance = (seed[0] - x) ** 2 + (seed[1] - y) ** 2
                        if distance < best_distance:
                            best_distance = distance
                            best = seed
                following.append(best)
        current = following
        step //= 2
    return current


@dataclass
class FeatureAwareJFA(SDFAlgorithm):
    """Jump flooding that is meant to take normal and curvature maps into account.

    The influence settings are kept with the algorithm; the field itself is
    currently produced by plain jump flooding.
    """

    name: ClassVar[str] = "feature-aware-jfa"

    threshold: int = 128
    max_distance: float = 32.0
    normal_influence: float = 0.5
    curvature_influence: float = 0.3

    def __post_init__(self) -> None:
        _check_threshold(self.threshold)

    def process(self, channels: MultiChannelInput) -> SDFData:
        base = JumpFloodingAlgorithm(threshold=self.threshold, max_distance=self.max_distance)
        return base.process(channels)


_ALGORITHMS: dict[str, type[SDFAlgorithm]] = {
    "brute": BruteForce,
    "brute-force": BruteForce,
    "jfa": JumpFloodingAlgorithm,
    "jump-flooding": JumpFloodingAlgorithm,
    "feature-aware": FeatureAwareJFA,
    "feature-aware-jfa": FeatureAwareJFA,
}


def create_algorithm(
    name: str, threshold: int = 128, max_distance: float = 32.0
) -> SDFAlgorithm:
    """Build an algorithm by name, ignoring case."""
    try:
        algorithm_cls = _ALGORITHMS[name.lower()]
    except KeyError:
        raise ProcessingFailedError(f"Unknown algorithm: {name}") from None
    return algorithm_cls(threshold=threshold, max_distance=max_distance)