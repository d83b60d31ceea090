"""Google Photos Frame: stream Google Photos albums to a photo frame."""

__version__ = "0.1.0"
