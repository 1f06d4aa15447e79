"""Generate 2D signed distance fields from grayscale images, with a command line."""

__version__ = "0.1.0"