"""Filled and outlined shapes drawn into a PixelBuffer.

Every shape is clipped against the buffer: pixels that fall outside the
drawable area are skipped silently.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from .buffer import PixelBuffer, Vec2i
from .errors import InvalidBufferError

_MAX_POLYGON_POINTS = 512
_PI_APPROX = 3.14


def _require(buffer: PixelBuffer | None) -> PixelBuffer:
    if buffer is None:
        raise InvalidBufferError()
    return buffer


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cround(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _vec(point: tuple[int, int]) -> Vec2i:
    return Vec2i(int(point[0]), int(point[1]))


def _plot(buffer: PixelBuffer, x: int, y: int, pix: int) -> None:
    if 0 <= x < buffer.width and 0 <= y < buffer.height:
        buffer.draw_pixel((x, y), pix)


def _line_points(start: Vec2i, end: Vec2i) -> Iterator[tuple[int, int]]:
    if start.x < end.x:
        start, end = end, start

    dx = float(end.x - start.x)
    dy = float(end.y - start.y)
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield start.x, start.y
        return

    dx /= steps
    dy /= steps
    x, y = float(start.x), float(start.y)
    for _ in range(int(steps) + 1):
        yield _cround(x), _cround(y)
        x += dx
        y += dy


def draw_line(buffer: PixelBuffer, start: tuple[int, int], end: tuple[int, int], pix: int) -> None:
    """Draw a straight line between two points, both ends included."""
    buffer = _require(buffer)
    for x, y in _line_points(_vec(start), _vec(end)):
        _plot(buffer, x, y, pix)


def _rotated_corners(
    position: Vec2i, size: Vec2i, angle: int, offset: Vec2i
) -> tuple[Vec2i, Vec2i, Vec2i, Vec2i]:
    """Top-left, top-right, bottom-left and bottom-right of a rotated rectangle."""
    radians = angle * _PI_APPROX / 180
    cos_a, sin_a = math.cos(radians), math.sin(radians)
    dx, dy = -offset.x, -offset.y

    def corner(cx: int, cy: int) -> Vec2i:
        return Vec2i(
            int(position.x + cx * cos_a - cy * sin_a),
            int(position.y + cx * sin_a + cy * cos_a),
        )

    return (
        corner(dx, dy),
        corner(dx + size.x, dy),
        corner(dx, dy + size.y),
        corner(dx + size.x, dy + size.y),
    )


def _axis_corners(
    position: Vec2i, size: Vec2i, offset: Vec2i
) -> tuple[Vec2i, Vec2i, Vec2i, Vec2i]:
    """Corners of an unrotated rectangle; the lower corners shift x by offset.y."""
    return (
        Vec2i(position.x - offset.x, position.y - offset.y),
        Vec2i(position.x + size.x - offset.x, position.y - offset.y),
        Vec2i(position.x - offset.y, position.y + size.y - offset.y),
        Vec2i(position.x + size.x - offset.y, position.y + size.y - offset.y),
    )


def draw_rect(buffer: PixelBuffer, position: tuple[int, int], size: tuple[int, int], pix: int) -> None:
    """Draw a filled, unrotated rectangle."""
    draw_rect_pro(buffer, position, size, 0, (0, 0), pix)


def draw_rect_pro(
    buffer: PixelBuffer,
    position: tuple[int, int],
    size: tuple[int, int],
    angle: int,
    offset: tuple[int, int],
    pix: int,
) -> None:
    """Draw a filled rectangle rotated by ``angle`` degrees around ``position``."""
    buffer = _require(buffer)
    position, size, offset = _vec(position), _vec(size), _vec(offset)
    if angle == 0:
        corners = _axis_corners(position, size, offset)
    else:
        corners = _rotated_corners(position, size, angle, offset)

    top_left, top_right, bottom_left, bottom_right = corners
    draw_triangle(buffer, top_left, top_right, bottom_left, pix)
    draw_triangle(buffer, top_right, bottom_left, bottom_right, pix)


def draw_rect_lines(
    buffer: PixelBuffer,
    position: tuple[int, int],
    size: tuple[int, int],
    angle: int,
    offset: tuple[int, int],
    pix: int,
) -> None:
    """Draw the outline of a rectangle rotated by ``angle`` degrees."""
    buffer = _require(buffer)
    position, size, offset = _vec(position), _vec(size), _vec(offset)
    if angle == 0:
        corners = _axis_corners(position, size, offset)
    else:
        corners = _rotated_corners(position, size, angle, offset)

    top_left, top_right, bottom_left, bottom_right = corners
    outline = [top_left, top_right, bottom_right, bottom_left]
    for current, following in zip(outline, outline[1:] + outline[:1]):
        draw_line(buffer, current, following, pix)


def draw_circle(buffer: PixelBuffer, position: tuple[int, int], radius: int, pix: int) -> None:
    """Draw a filled circle centred on ``position``."""
    buffer = _require(buffer)
    cx, cy = _vec(position)
    limit = radius * radius
    for y in range(cy - radius, cy + radius):
        for x in range(cx - radius, cx + radius):
            if (x - cx) ** 2 + (y - cy) ** 2 <= limit:
                _plot(buffer, x, y, pix)


def draw_circle_lines(buffer: PixelBuffer, position: tuple[int, int], radius: int, pix: int) -> None:
    """Draw a circle outline with the midpoint (Bresenham) algorithm."""
    buffer = _require(buffer)
    cx, cy = _vec(position)

    def plot_octants(x: int, y: int) -> None:
        for px, py in (
            (cx + x, cy + y), (cx - x, cy + y), (cx + x, cy - y), (cx - x, cy - y),
            (cx + y, cy + x), (cx - y, cy + x), (cx + y, cy - x), (cx - y, cy - x),
        ):
            _plot(buffer, px, py, pix)

    x, y = 0, radius
    d = 3 - 2 * radius
    plot_octants(x, y)
    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        plot_octants(x, y)


def _span(y: int, anchor: Vec2i, delta: Vec2i) -> int:
    if delta.y == 0:
        return anchor.x
    return _cdiv((y - anchor.y) * delta.x, delta.y) + anchor.x


def _sorted_by_y(a: Vec2i, b: Vec2i, c: Vec2i) -> tuple[Vec2i, Vec2i, Vec2i]:
    if a.y > b.y:
        a, b = b, a
    if a.y > c.y:
        a, c = c, a
    if b.y > c.y:
        b, c = c, b
    return a, b, c


def draw_triangle(
    buffer: PixelBuffer,
    point_a: tuple[int, int],
    point_b: tuple[int, int],
    point_c: tuple[int, int],
    pix: int,
) -> None:
    """Draw a filled triangle by horizontal scanlines.

    Rows are filled from the top vertex down to, but not including, the bottom
    vertex; row 0 of the buffer is never filled.
    """
    buffer = _require(buffer)
    a, b, c = _sorted_by_y(_vec(point_a), _vec(point_b), _vec(point_c))

    ab = Vec2i(b.x - a.x, b.y - a.y)
    ac = Vec2i(c.x - a.x, c.y - a.y)
    cb = Vec2i(b.x - c.x, b.y - c.y)
    ca = Vec2i(a.x - c.x, a.y - c.y)

    def fill_rows(rows: range, anchor: Vec2i, first: Vec2i, second: Vec2i) -> None:
        for y in rows:
            if not 0 < y < buffer.height:
                continue
            left, right = sorted((_span(y, anchor, first), _span(y, anchor, second)))
            for x in range(left, right + 1):
                _plot(buffer, x, y, pix)

    fill_rows(range(a.y, b.y), a, ab, ac)
    fill_rows(range(b.y, c.y), c, cb, ca)


def draw_triangle_lines(
    buffer: PixelBuffer,
    point_a: tuple[int, int],
    point_b: tuple[int, int],
    point_c: tuple[int, int],
    pix: int,
) -> None:
    """Draw the outline of a triangle."""
    buffer = _require(buffer)
    a, b, c = _sorted_by_y(_vec(point_a), _vec(point_b), _vec(point_c))
    draw_line(buffer, a, b, pix)
    draw_line(buffer, b, c, pix)
    draw_line(buffer, a, c, pix)


def _equilateral_points(position: Vec2i, radius: int, angle: int) -> list[Vec2i]:
    half_side = math.sqrt(3) * radius / 2
    half_radius = _cdiv(radius, 2)
    points = [
        Vec2i(position.x, position.y - radius),
        Vec2i(int(position.x - half_side), position.y + half_radius),
        Vec2i(int(position.x + half_side), position.y + half_radius),
    ]

    radians = angle * _PI_APPROX / 180.0
    x_right, y_right = math.cos(radians), math.sin(radians)
    x_up, y_up = -y_right, x_right

    rotated = []
    for point in points:
        dx = float(point.x - position.x)
        dy = float(point.y - position.y)
        rotated.append(
            Vec2i(
                int(position.x + (x_right * dx + x_up * dy)),
                int(position.y + (y_right * dx + y_up * dy)),
            )
        )
    return rotated


def draw_triangle_equilateral(
    buffer: PixelBuffer, position: tuple[int, int], radius: int, angle: int, pix: int
) -> None:
    """Draw a filled equilateral triangle inscribed in a circle of ``radius``."""
    buffer = _require(buffer)
    draw_triangle(buffer, *_equilateral_points(_vec(position), radius, angle), pix)


def draw_triangle_equilateral_lines(
    buffer: PixelBuffer, position: tuple[int, int], radius: int, angle: int, pix: int
) -> None:
    """Draw the outline of an equilateral triangle inscribed in a circle."""
    buffer = _require(buffer)
    draw_triangle_lines(buffer, *_equilateral_points(_vec(position), radius, angle), pix)


def _on_circle(centre: Vec2i, radius: float, degrees: float) -> Vec2i:
    radians = degrees * _PI_APPROX / 180
    return Vec2i(
        int(centre.x + radius * math.cos(radians)),
        int(centre.y + radius * math.sin(radians)),
    )


def draw_polygon(
    buffer: PixelBuffer, position: tuple[int, int], radius: int, angle: int, n: int, pix: int
) -> None:
    """Draw a filled regular polygon with ``n`` sides (at least 3, at most 512)."""
    buffer = _require(buffer)
    n = max(n, 3)
    if n > _MAX_POLYGON_POINTS:
        raise ValueError(f"polygon may have at most {_MAX_POLYGON_POINTS} sides, got {n}")

    centre = _vec(position)
    theta = 360 // n
    points = [_on_circle(centre, radius, theta * i + angle) for i in range(n)]
    for current, following in zip(points, points[1:] + points[:1]):
        draw_triangle(buffer, centre, current, following, pix)


def draw_star(
    buffer: PixelBuffer, position: tuple[int, int], radius: int, angle: int, n: int, pix: int
) -> None:
    """Draw a filled star with ``n`` spikes (at least 3)."""
    buffer = _require(buffer)
    n = max(n, 3)
    centre = _vec(position)
    theta = 360 // n
    inner = _cdiv(radius, n) * 2

    for i in range(n):
        base = theta * i + angle
        draw_triangle(
            buffer,
            _on_circle(centre, radius, base),
            _on_circle(centre, inner, base - 90),
            _on_circle(centre, inner, base + 90),
            pix,
        )