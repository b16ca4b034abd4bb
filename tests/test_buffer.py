import pytest

from silkdraw.buffer import PixelBuffer, Vec2i
from silkdraw.errors import InvalidBufferError, OutOfBoundsError

OPAQUE_RED = 0xFF0000FF
TRANSPARENT_GREEN = 0x0000FF00


def test_new_buffer_is_zeroed():
    buf = PixelBuffer(4, 3)
    assert buf.data == [0] * 12
    assert buf.stride == 4


def test_set_get_round_trip():
    buf = PixelBuffer(4, 3)
    buf.set_pixel(Vec2i(2, 1), OPAQUE_RED)
    assert buf.get_pixel((2, 1)) == OPAQUE_RED
    assert buf.data.count(OPAQUE_RED) == 1


def test_stride_controls_row_layout():
    buf = PixelBuffer(3, 2, stride=5)
    buf.set_pixel((1, 1), OPAQUE_RED)
    assert buf.data.index(OPAQUE_RED) == buf.stride + 1


def test_external_data_is_shared():
    data = [0] * 6
    buf = PixelBuffer(3, 2, data=data)
    buf.set_pixel((0, 1), OPAQUE_RED)
    assert data[buf.stride] == OPAQUE_RED


def test_clear_fills_everything():
    buf = PixelBuffer(3, 3)
    buf.clear(OPAQUE_RED)
    assert set(buf.data) == {OPAQUE_RED}
    buf.clear()
    assert set(buf.data) == {0}


def test_clear_region_touches_only_region():
    buf = PixelBuffer(4, 4)
    buf.clear_region((2, 3), OPAQUE_RED)
    for y in range(4):
        for x in range(4):
            expected = OPAQUE_RED if x < 2 and y < 3 else 0
            assert buf.get_pixel((x, y)) == expected


def test_draw_opaque_pixel_replaces():
    buf = PixelBuffer(2, 2)
    buf.draw_pixel((1, 0), OPAQUE_RED)
    assert buf.get_pixel((1, 0)) == OPAQUE_RED


def test_draw_transparent_pixel_keeps_base_when_blending():
    buf = PixelBuffer(2, 2)
    buf.set_pixel((0, 0), OPAQUE_RED)
    buf.draw_pixel((0, 0), TRANSPARENT_GREEN)
    assert buf.get_pixel((0, 0)) == OPAQUE_RED


def test_draw_transparent_pixel_written_without_blending():
    buf = PixelBuffer(2, 2, alpha_blend=False)
    buf.set_pixel((0, 0), OPAQUE_RED)
    buf.draw_pixel((0, 0), TRANSPARENT_GREEN)
    assert buf.get_pixel((0, 0)) == TRANSPARENT_GREEN


@pytest.mark.parametrize("position", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_draw_pixel_out_of_bounds(position):
    buf = PixelBuffer(2, 2)
    with pytest.raises(OutOfBoundsError):
        buf.draw_pixel(position, OPAQUE_RED)


def test_draw_pixel_respects_width_not_stride():
    buf = PixelBuffer(2, 2, stride=4)
    with pytest.raises(OutOfBoundsError):
        buf.draw_pixel((3, 0), OPAQUE_RED)


def test_get_pixel_past_end_raises():
    buf = PixelBuffer(2, 2)
    with pytest.raises(OutOfBoundsError):
        buf.get_pixel((0, 2))


def test_data_too_short_rejected():
    with pytest.raises(InvalidBufferError):
        PixelBuffer(3, 3, data=[0] * 5)


def test_negative_size_rejected():
    with pytest.raises(InvalidBufferError):
        PixelBuffer(-1, 3)


def test_stride_smaller_than_width_rejected():
    with pytest.raises(InvalidBufferError):
        PixelBuffer(4, 2, stride=3)