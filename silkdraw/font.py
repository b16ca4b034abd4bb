"""A built-in 3x5 bitmap font for drawing and measuring text."""

from __future__ import annotations

from .buffer import PixelBuffer, Vec2i
from .errors import InvalidBufferError
from .shapes import draw_rect

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5

Glyph = tuple[tuple[int, ...], ...]

# Each glyph is five rows of three cells, top to bottom.
_GLYPH_ROWS: dict[str, str] = {
    "A": "111 101 111 101 101",
    "B": "110 101 110 101 110",
    "C": "110 101 100 101 110",
    "D": "110 101 101 101 110",
    "E": "111 100 110 100 111",
    "F": "111 100 110 100 100",
    "G": "111 100 101 101 111",
    "H": "101 101 111 101 101",
    "I": "111 010 010 010 111",
    "J": "111 001 001 101 010",
    "K": "101 101 110 101 101",
    "L": "100 100 100 100 111",
    "M": "101 111 101 101 101",
    "N": "110 101 101 101 101",
    "O": "110 101 101 101 011",
    "P": "110 101 110 100 100",
    "Q": "111 101 101 111 001",
    "R": "110 101 110 101 101",
    "S": "111 100 111 001 111",
    "T": "111 010 010 010 010",
    "U": "101 101 101 101 111",
    "V": "101 101 101 101 010",
    "W": "101 101 101 111 101",
    "X": "101 101 010 101 101",
    "Y": "101 101 101 010 010",
    "Z": "111 001 010 100 111",
    "a": "000 011 101 111 101",
    "b": "100 110 101 101 010",
    "c": "000 011 100 100 011",
    "d": "001 011 101 101 011",
    "e": "000 111 111 100 111",
    "f": "011 010 111 010 010",
    "g": "000 111 100 101 111",
    "h": "100 110 101 101 101",
    "i": "010 000 010 010 010",
    "j": "000 111 001 001 010",
    "k": "100 101 110 101 101",
    "l": "010 010 010 010 001",
    "m": "000 101 111 101 101",
    "n": "000 110 101 101 101",
    "o": "000 110 101 101 011",
    "p": "000 110 101 110 100",
    "q": "000 011 101 011 001",
    "r": "000 101 110 100 100",
    "s": "000 011 100 001 110",
    "t": "010 111 010 010 010",
    "u": "000 101 101 101 111",
    "v": "000 101 101 101 010",
    "w": "000 101 101 111 101",
    "x": "000 101 010 101 101",
    "y": "000 101 111 010 010",
    "z": "000 111 001 010 111",
    "1": "110 010 010 010 111",
    "2": "111 001 111 100 111",
    "3": "111 001 011 001 111",
    "4": "100 101 111 001 001",
    "5": "111 100 111 001 111",
    "6": "111 100 111 101 111",
    "7": "111 001 011 001 001",
    "8": "111 101 111 101 111",
    "9": "111 101 111 001 111",
    "0": "111 101 101 101 111",
    ",": "000 000 000 010 010",
    ".": "000 000 000 000 010",
    "?": "111 001 011 000 010",
    "!": "010 010 010 000 010",
    " ": "000 000 000 000 000",
    "-": "000 000 111 000 000",
    "_": "000 000 000 000 111",
    "=": "000 111 000 111 000",
    "+": "000 010 111 010 000",
    "/": "001 010 010 010 100",
    "|": "010 010 010 010 010",
    "\\": "100 010 010 010 001",
    ";": "000 010 000 010 010",
    ":": "000 010 000 010 000",
    "(": "010 100 100 100 010",
    ")": "010 001 001 001 010",
    "{": "001 010 110 010 001",
    "}": "100 010 011 010 100",
    "[": "011 010 010 010 011",
    "]": "110 010 010 010 110",
    "<": "001 010 100 010 001",
    ">": "100 010 001 010 100",
    "^": "010 101 000 000 000",
    "'": "010 010 000 000 000",
    '"': "101 101 000 000 000",
    "#": "101 111 101 111 101",
    "%": "101 001 010 100 101",
    "*": "101 010 101 000 000",
    "`": "010 001 000 000 000",
    "~": "000 111 000 000 000",
    "@": "010 101 101 100 011",
    "&": "110 110 111 101 111",
}


def _parse(rows: str) -> Glyph:
    return tuple(tuple(int(cell) for cell in row) for row in rows.split())


_GLYPHS: dict[str, Glyph] = {char: _parse(rows) for char, rows in _GLYPH_ROWS.items()}
_BLANK: Glyph = tuple((0,) * GLYPH_WIDTH for _ in range(GLYPH_HEIGHT))


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def glyph(char: str) -> Glyph:
    """Return the 5-row, 3-column cell pattern of an ASCII character.

    ASCII characters without a glyph are blank; non-ASCII raises ValueError.
    """
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if ord(char) >= 128:
        raise ValueError(f"character outside the ASCII range: {char!r}")
    return _GLYPHS.get(char, _BLANK)


def measure_text(text: str, font_size: int, font_spacing: int) -> Vec2i:
    """Size in pixels of ``text`` drawn on a single line."""
    columns = len(text)
    rows = 1
    return Vec2i(
        GLYPH_WIDTH * font_size * columns + font_size * font_spacing * (columns - 1),
        GLYPH_HEIGHT * font_size * rows,
    )


def draw_text(
    buffer: PixelBuffer,
    text: str,
    position: tuple[int, int],
    font_size: int,
    font_spacing: int,
    pix: int,
) -> None:
    """Draw ``text`` with the built-in font, each cell a ``font_size`` square.

    The position is snapped down to the font's cell grid; ``font_spacing`` is
    the gap between glyphs in cells.
    """
    if buffer is None:
        raise InvalidBufferError()
    if font_size == 0:
        raise ValueError("font_size must not be zero")

    glyphs = [glyph(char) for char in text]
    gx = _cdiv(position[0], font_size)
    gy = _cdiv(position[1], font_size)

    for cells in glyphs:
        for y, row in enumerate(cells):
            for x, cell in enumerate(row):
                if cell:
                    draw_rect(
                        buffer,
                        ((gx + x) * font_size, (gy + y) * font_size),
                        (font_size, font_size),
                        pix,
                    )
        gx += GLYPH_WIDTH + font_spacing