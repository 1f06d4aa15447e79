"""Exceptions raised while loading channels and building distance fields."""

from __future__ import annotations


class SDFError(Exception):
    """Base class for every error raised by the package."""

    def recovery_suggestion(self) -> str | None:
        """Return a hint on how to avoid the error, if one is known."""
        return None


class InvalidChannelConfigError(SDFError):
    """The set of input channels does not make sense."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid channel configuration: {message}")


class DimensionMismatchError(SDFError):
    """Two input channels have different sizes."""

    def __init__(self, expected_w: int, expected_h: int, actual_w: int, actual_h: int) -> None:
        self.expected_w = expected_w
        self.expected_h = expected_h
        self.actual_w = actual_w
        self.actual_h = actual_h
        super().__init__(
            f"Channel dimension mismatch: expected {expected_w}x{expected_h}, "
            f"got {actual_w}x{actual_h}"
        )

    def recovery_suggestion(self) -> str | None:
        return "Try resizing all input channels to the same dimensions"


class UnsupportedFormatError(SDFError):
    """An input image is stored in a format that cannot be used."""

    def __init__(self, image_format: str) -> None:
        self.image_format = image_format
        super().__init__(f"Unsupported image format: {image_format}")

    def recovery_suggestion(self) -> str | None:
        return f"Convert {self.image_format} to PNG, JPEG, or TGA format"


class ProcessingFailedError(SDFError):
    """Generating the distance field failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Processing failed: {reason}")


class OutOfMemoryError(SDFError):
    """A buffer of the requested size could not be allocated."""

    def __init__(self, requested: int) -> None:
        self.requested = requested
        super().__init__(f"Memory allocation failed: requested {requested} bytes")

    def recovery_suggestion(self) -> str | None:
        return "Try reducing the image size or using streaming processing"


class ValidationError(SDFError):
    """The channel set failed validation."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Channel validation failed: {details}")


class ImageLoadError(SDFError):
    """An image could not be read or written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Image error: {message}")