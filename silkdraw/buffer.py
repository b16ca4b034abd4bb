"""A mutable grid of packed 32-bit pixels that shapes are drawn into."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import NamedTuple

from .color import alpha_blend as _blend
from .color import channel_alpha
from .errors import InvalidBufferError, OutOfBoundsError


class Vec2i(NamedTuple):
    """An integer 2D vector used for positions and sizes."""

    x: int
    y: int


class PixelBuffer:
    """Pixels laid out row by row, ``stride`` pixels per row.

    ``width`` and ``height`` bound the drawable area; ``stride`` may be larger
    than ``width`` when rows carry padding.  When ``data`` is given it is used
    in place, so changes are visible to whoever supplied it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        stride: int | None = None,
        data: MutableSequence[int] | None = None,
        alpha_blend: bool = True,
    ) -> None:
        if width < 0 or height < 0:
            raise InvalidBufferError(f"negative buffer size: {width}x{height}")
        if stride is None:
            stride = width
        if stride < width:
            raise InvalidBufferError(f"stride {stride} is smaller than width {width}")

        needed = stride * height
        if data is None:
            data = [0] * needed
        elif len(data) < needed:
            raise InvalidBufferError(
                f"buffer holds {len(data)} pixels, {needed} are required"
            )

        self.width = width
        self.height = height
        self.stride = stride
        self.data = data
        self.alpha_blend = alpha_blend

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"stride={self.stride}, alpha_blend={self.alpha_blend})"
        )

    def _index(self, position: tuple[int, int]) -> int:
        x, y = position
        index = y * self.stride + x
        if x < 0 or y < 0 or index >= len(self.data):
            raise OutOfBoundsError()
        return index

    def get_pixel(self, position: tuple[int, int]) -> int:
        """Return the raw pixel stored at ``position``."""
        return self.data[self._index(position)]

    def set_pixel(self, position: tuple[int, int], pix: int) -> None:
        """Store ``pix`` at ``position`` without blending."""
        self.data[self._index(position)] = pix

    def clear(self, pix: int = 0) -> None:
        """Fill the whole buffer with ``pix``."""
        self.data[:] = [pix] * len(self.data)

    def clear_region(self, region: tuple[int, int], pix: int = 0) -> None:
        """Fill the ``region`` (width, height) starting at the origin with ``pix``."""
        region_w, region_h = region
        for y in range(region_h):
            for x in range(region_w):
                self.set_pixel((x, y), pix)

    def draw_pixel(self, position: tuple[int, int], pix: int) -> None:
        """Draw ``pix`` at ``position``, blending by its alpha when enabled.

        Raises OutOfBoundsError when the position lies outside the drawable area.
        """
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError()

        current = self.get_pixel(position)
        if current == pix:
            return
        if self.alpha_blend:
            pix = _blend(current, pix, channel_alpha(pix))
        self.set_pixel(position, pix)