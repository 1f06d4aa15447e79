"""Multi-channel image input: alpha, normal, AO, curvature, height and custom maps."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from PIL import Image

from sdfmaker.errors import DimensionMismatchError, ImageLoadError, ValidationError

_STANDARD_CHANNELS = ("alpha", "normal", "ao", "curvature", "height")

_CHANNEL_PATTERNS = (
    ("alpha", ("diffuse", "alpha", "mask")),
    ("normal", ("normal", "norm", "n")),
    ("ao", ("ao", "ambient", "occlusion")),
    ("curvature", ("curvature", "curve", "c")),
)

_EXTENSIONS = ("png", "jpg", "jpeg", "tga", "bmp")


@dataclass
class ChannelWeights:
    """Relative influence of each channel."""

    alpha: float = 1.0
    normal: float = 0.7
    ao: float = 0.5
    curvature: float = 0.3
    height: float = 0.4
    custom: dict[str, float] = field(default_factory=dict)


class BlendMode(enum.Enum):
    """How channels are combined."""

    MULTIPLY = "multiply"
    ADD = "add"
    SCREEN = "screen"
    OVERLAY = "overlay"
    SOFT_LIGHT = "soft_light"
    HARD_LIGHT = "hard_light"


def _open_image(path: str | PathLike) -> Image.Image:
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, ValueError) as exc:
        raise ImageLoadError(str(exc)) from exc


@dataclass
class MultiChannelInput:
    """A set of same-sized images feeding distance field generation."""

    alpha: Image.Image | None = None
    normal: Image.Image | None = None
    ao: Image.Image | None = None
    curvature: Image.Image | None = None
    height: Image.Image | None = None
    custom_channels: dict[str, Image.Image] = field(default_factory=dict)
    weights: ChannelWeights = field(default_factory=ChannelWeights)
    blend_mode: BlendMode = BlendMode.MULTIPLY

    @classmethod
    def from_alpha(cls, image: Image.Image) -> MultiChannelInput:
        return cls(alpha=image)

    def with_alpha(self, image: Image.Image) -> MultiChannelInput:
        """Return a copy of this input with the alpha channel replaced."""
        return dataclasses.replace(self, alpha=image)

    def _load(self, channel: str, path: str | PathLike) -> None:
        setattr(self, channel, _open_image(path))

    def load_alpha(self, path: str | PathLike) -> None:
        self._load("alpha", path)

    def load_normal(self, path: str | PathLike) -> None:
        self._load("normal", path)

    def load_ao(self, path: str | PathLike) -> None:
        self._load("ao", path)

    def load_curvature(self, path: str | PathLike) -> None:
        self._load("curvature", path)

    def iter_channels(self) -> Iterator[tuple[str, Image.Image]]:
        """Yield (name, image) for every present channel, standard ones first."""
        for name in _STANDARD_CHANNELS:
            image = getattr(self, name)
            if image is not None:
                yield name, image
        yield from self.custom_channels.items()

    def primary_channel(self) -> Image.Image:
        """Return the highest-priority channel present."""
        for _, image in self.iter_channels():
            return image
        raise ValidationError("No input channels available")

    def dimensions(self) -> tuple[int, int]:
        """Return (width, height) of the primary channel."""
        image = self.primary_channel()
        return image.width, image.height

    def validate(self) -> None:
        """Check that at least one channel exists and all sizes agree."""
        if next(self.iter_channels(), None) is None:
            raise ValidationError("At least one input channel is required")
        expected = self.dimensions()
        for _, image in self.iter_channels():
            actual = (image.width, image.height)
            if actual != expected:
                raise DimensionMismatchError(*expected, *actual)

    def has_alpha(self) -> bool:
        return self.alpha is not None

    def has_normal(self) -> bool:
        return self.normal is not None

    def has_ao(self) -> bool:
        return self.ao is not None

    def has_curvature(self) -> bool:
        return self.curvature is not None

    def has_height(self) -> bool:
        return self.height is not None

    @classmethod
    def auto_detect_channels(cls, directory: str | PathLike, basename: str) -> MultiChannelInput:
        """Load channels named like ``<basename>_<suffix>.<ext>`` from a directory.

        Every suffix of a channel is tried in order; a later match replaces an
        earlier one.
        """
        found = cls()
        directory = Path(directory)
        for channel, suffixes in _CHANNEL_PATTERNS:
            for suffix in suffixes:
                for ext in _EXTENSIONS:
                    candidate = directory / f"{basename}_{suffix}.{ext}"
                    if candidate.exists():
                        found._load(channel, candidate)
                        break
        return found