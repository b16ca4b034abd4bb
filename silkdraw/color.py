"""Packed 32-bit pixels and their colour channels.

A pixel stores red in the lowest byte, then green, blue and alpha in the
highest byte.
"""

from __future__ import annotations

from dataclasses import dataclass

_PIXEL_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    @classmethod
    def from_pixel(cls, pix: int) -> Color:
        """Unpack a pixel into a colour."""
        return pixel_to_color(pix)

    def to_pixel(self) -> int:
        """Pack this colour into a pixel."""
        return color_to_pixel(self)


def pixel_to_color(pix: int) -> Color:
    """Split a packed pixel into its four channels."""
    pix &= _PIXEL_MASK
    return Color(
        r=pix & 0xFF,
        g=(pix >> 8) & 0xFF,
        b=(pix >> 16) & 0xFF,
        a=(pix >> 24) & 0xFF,
    )


def color_to_pixel(col: Color) -> int:
    """Pack a colour into a single pixel value."""
    return col.r | (col.g << 8) | (col.b << 16) | (col.a << 24)


def _to_channel(value: float) -> int:
    return max(0, min(255, int(value)))


def alpha_blend(base_pixel: int, return_pixel: int, value: int) -> int:
    """Blend ``return_pixel`` over ``base_pixel`` with opacity ``value`` (0..255).

    A fully transparent ``return_pixel`` leaves the base unchanged; the result
    carries ``value`` as its alpha.
    """
    base = pixel_to_color(base_pixel)
    top = pixel_to_color(return_pixel)

    if top.a == 0:
        return base_pixel
    if return_pixel == base_pixel:
        return return_pixel

    weight = value / 255.0
    return color_to_pixel(
        Color(
            r=_to_channel(base.r + (top.r - base.r) * weight),
            g=_to_channel(base.g + (top.g - base.g) * weight),
            b=_to_channel(base.b + (top.b - base.b) * weight),
            a=_to_channel(value),
        )
    )


def pixel_fade(pix: int, factor: float) -> int:
    """Return ``pix`` with its alpha replaced by ``factor`` (0.0..1.0) of full."""
    col = pixel_to_color(pix)
    return color_to_pixel(Color(col.r, col.g, col.b, _to_channel(factor * 255)))


def pixel_tint(pix: int, tint: int) -> int:
    """Multiply each channel of ``pix`` by the matching channel of ``tint``."""
    col = pixel_to_color(pix)
    tc = pixel_to_color(tint)
    return color_to_pixel(
        Color(
            r=col.r * tc.r // 255,
            g=col.g * tc.g // 255,
            b=col.b * tc.b // 255,
            a=col.a * tc.a // 255,
        )
    )


def channel_red(pix: int) -> int:
    """Red channel of a pixel."""
    return pix & 0xFF


def channel_green(pix: int) -> int:
    """Green channel of a pixel."""
    return (pix >> 8) & 0xFF


def channel_blue(pix: int) -> int:
    """Blue channel of a pixel."""
    return (pix >> 16) & 0xFF


def channel_alpha(pix: int) -> int:
    """Alpha channel of a pixel."""
    return (pix >> 24) & 0xFF