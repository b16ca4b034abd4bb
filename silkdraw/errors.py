"""Exceptions raised by the drawing routines."""


class SilkError(Exception):
    """Base class for every error raised by this package."""

    default_message = "Undefined behaviour."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidBufferError(SilkError, ValueError):
    """A pixel buffer is missing or unusable."""

    default_message = "Passed the invalid pixel buffer."


class OutOfBoundsError(SilkError, IndexError):
    """A position lies outside the pixel buffer."""

    default_message = "Trying to access the out-of-bounds buffer address."


class InvalidImageError(SilkError, ValueError):
    """An image is missing, unusable or could not be loaded."""

    default_message = "Passed the invalid image buffer."


class ImageSaveError(SilkError, OSError):
    """An image could not be written to disk."""

    default_message = "Couldn't save an image."