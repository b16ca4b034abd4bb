import pytest

from silkdraw.color import (
    Color,
    alpha_blend,
    channel_alpha,
    channel_blue,
    channel_green,
    channel_red,
    color_to_pixel,
    pixel_fade,
    pixel_tint,
    pixel_to_color,
)

SAMPLE_PIXELS = [0x11AA0033, 0xFF0000FF, 0xFF000000, 0x00000000, 0xFFFFFFFF, 0x12345678]


def test_red_opaque_pixel_layout():
    assert pixel_to_color(0xFF0000FF) == Color(255, 0, 0, 255)


@pytest.mark.parametrize("pix", SAMPLE_PIXELS)
def test_pixel_round_trip(pix):
    assert color_to_pixel(pixel_to_color(pix)) == pix


@pytest.mark.parametrize("col", [Color(1, 2, 3, 4), Color(255, 0, 128, 7), Color()])
def test_color_round_trip(col):
    assert pixel_to_color(color_to_pixel(col)) == col
    assert Color.from_pixel(col.to_pixel()) == col


@pytest.mark.parametrize("pix", SAMPLE_PIXELS)
def test_channels_match_color(pix):
    col = pixel_to_color(pix)
    assert (channel_red(pix), channel_green(pix), channel_blue(pix), channel_alpha(pix)) == (
        col.r,
        col.g,
        col.b,
        col.a,
    )


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0, 0)


def test_alpha_blend_transparent_top_keeps_base():
    base = 0x11AA0033
    top = color_to_pixel(Color(200, 100, 50, 0))
    assert alpha_blend(base, top, 128) == base


def test_alpha_blend_identical_pixels():
    assert alpha_blend(0x11AA0033, 0x11AA0033, 0x11) == 0x11AA0033


def test_alpha_blend_full_opacity_gives_top():
    base = 0x11AA0033
    top = 0xFF0000FF
    assert alpha_blend(base, top, channel_alpha(top)) == top


def test_alpha_blend_zero_opacity_keeps_base_rgb():
    base = color_to_pixel(Color(10, 20, 30, 255))
    top = color_to_pixel(Color(200, 100, 50, 255))
    result = pixel_to_color(alpha_blend(base, top, 0))
    assert result == Color(10, 20, 30, 0)


def test_alpha_blend_result_between_endpoints():
    base = color_to_pixel(Color(10, 200, 30, 255))
    top = color_to_pixel(Color(200, 100, 30, 255))
    result = pixel_to_color(alpha_blend(base, top, 128))
    assert 10 <= result.r <= 200
    assert 100 <= result.g <= 200
    assert result.b == 30
    assert result.a == 128


def test_pixel_fade_full_and_zero():
    pix = 0x11AA0033
    full = pixel_to_color(pixel_fade(pix, 1.0))
    none = pixel_to_color(pixel_fade(pix, 0.0))
    orig = pixel_to_color(pix)
    assert (full.r, full.g, full.b, full.a) == (orig.r, orig.g, orig.b, 255)
    assert (none.r, none.g, none.b, none.a) == (orig.r, orig.g, orig.b, 0)


@pytest.mark.parametrize("pix", SAMPLE_PIXELS)
def test_tint_with_white_is_identity(pix):
    assert pixel_tint(pix, 0xFFFFFFFF) == pix


@pytest.mark.parametrize("pix", SAMPLE_PIXELS)
def test_tint_with_zero_is_zero(pix):
    assert pixel_tint(pix, 0) == 0


def test_tint_is_symmetric():
    a, b = 0x11AA0033, 0x12345678
    assert pixel_tint(a, b) == pixel_tint(b, a)