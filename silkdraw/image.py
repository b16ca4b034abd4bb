"""In-memory images: generation, scaling, drawing, loading and saving."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image as _PILImage
from PIL import UnidentifiedImageError

from .buffer import PixelBuffer, Vec2i
from .color import pixel_tint, pixel_to_color
from .errors import ImageSaveError, InvalidBufferError, InvalidImageError
from .log import log_info

_NO_TINT = 0xFFFFFFFF


@dataclass
class Image:
    """A rectangular block of packed pixels, stored row by row."""

    data: list[int]
    size: Vec2i
    channels: int = 4
    _size: Vec2i = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.size = Vec2i(int(self.size[0]), int(self.size[1]))
        if self.size.x < 0 or self.size.y < 0:
            raise InvalidImageError(f"negative image size: {self.size.x}x{self.size.y}")
        if len(self.data) != self.size.x * self.size.y:
            raise InvalidImageError(
                f"image holds {len(self.data)} pixels, "
                f"{self.size.x * self.size.y} are required"
            )
        self._size = self.size

    def get_pixel(self, position: tuple[int, int]) -> int:
        """Return the pixel at ``position``."""
        x, y = position
        if not (0 <= x < self.size.x and 0 <= y < self.size.y):
            raise IndexError(f"position {position} outside image {self.size}")
        return self.data[y * self.size.x + x]


def file_extension(path: str | None) -> str | None:
    """Return the text from the last dot of ``path`` onward.

    Returns None when there is no dot or the only dot starts the path.
    """
    if path is None:
        return None
    index = path.rfind(".")
    if index <= 0:
        return None
    return path[index:]


def _size(size: tuple[int, int]) -> Vec2i:
    width, height = int(size[0]), int(size[1])
    if width < 0 or height < 0:
        raise ValueError(f"negative image size: {width}x{height}")
    return Vec2i(width, height)


def gen_image_color(size: tuple[int, int], pix: int) -> Image:
    """Create an image filled with a single pixel value."""
    dims = _size(size)
    return Image([pix] * (dims.x * dims.y), dims)


def gen_image_checkerboard(
    size: tuple[int, int], checker_size: int, a: int, b: int
) -> Image:
    """Create a checkerboard of ``checker_size`` squares alternating ``a`` and ``b``."""
    # Imported here: shapes depends on buffer only, but keeping the import local
    # avoids loading the rasteriser for images that never draw.
    from .shapes import draw_rect

    dims = _size(size)
    if checker_size <= 0:
        raise ValueError(f"checker_size must be positive, got {checker_size}")

    data = [0] * (dims.x * dims.y)
    canvas = PixelBuffer(dims.x, dims.y, dims.x, data)
    for y in range(0, dims.y, checker_size):
        row = y // checker_size
        for x in range(0, dims.x, checker_size):
            parity = (row * dims.y + x // checker_size) % 2
            if row % 2 == 0:
                colour = a if parity == 0 else b
            else:
                colour = a if parity == 1 else b
            draw_rect(canvas, (x, y), (checker_size, checker_size), colour)
    return Image(data, dims)


def _source_position(x: int, y: int, source: Vec2i, dest: Vec2i) -> tuple[int, int]:
    return x * source.x // dest.x, y * source.y // dest.y


def scale_image(source: Image, dest_size: tuple[int, int]) -> Image:
    """Resize ``source`` to ``dest_size`` with nearest-neighbour sampling."""
    if source is None:
        raise InvalidImageError()
    dest = _size(dest_size)
    data = [
        source.get_pixel(_source_position(x, y, source.size, dest))
        for y in range(dest.y)
        for x in range(dest.x)
    ]
    return Image(data, dest, source.channels)


def buffer_to_image(buffer: PixelBuffer | Sequence[int], size: tuple[int, int]) -> Image:
    """Copy the first ``size`` pixels of a buffer, taken contiguously, into an image."""
    if buffer is None:
        raise InvalidBufferError()
    dims = _size(size)
    pixels = buffer.data if isinstance(buffer, PixelBuffer) else buffer
    count = dims.x * dims.y
    if len(pixels) < count:
        raise InvalidBufferError(f"buffer holds {len(pixels)} pixels, {count} are required")
    return Image(list(pixels[:count]), dims, 4)


def _check(buffer: PixelBuffer | None, img: Image | None) -> None:
    if buffer is None:
        raise InvalidBufferError()
    if img is None:
        raise InvalidImageError()


def draw_image(buffer: PixelBuffer, img: Image, position: tuple[int, int]) -> None:
    """Draw ``img`` at its own size with its top-left corner at ``position``."""
    _check(buffer, img)
    draw_image_pro(buffer, img, position, (0, 0), img.size, _NO_TINT)


def draw_image_scaled(
    buffer: PixelBuffer, img: Image, position: tuple[int, int], size_dest: tuple[int, int]
) -> None:
    """Draw ``img`` stretched to ``size_dest``."""
    _check(buffer, img)
    draw_image_pro(buffer, img, position, (0, 0), size_dest, _NO_TINT)


def draw_image_pro(
    buffer: PixelBuffer,
    img: Image,
    position: tuple[int, int],
    offset: tuple[int, int],
    size_dest: tuple[int, int],
    tint: int,
) -> None:
    """Draw ``img`` stretched to ``size_dest``, shifted back by ``offset`` and tinted.

    Pixels that land outside the buffer are skipped.
    """
    _check(buffer, img)
    dest = Vec2i(int(size_dest[0]), int(size_dest[1]))
    origin_x = position[0] - offset[0]
    origin_y = position[1] - offset[1]

    for y in range(dest.y):
        for x in range(dest.x):
            tx, ty = origin_x + x, origin_y + y
            if not (0 <= tx < buffer.width and 0 <= ty < buffer.height):
                continue
            source = img.get_pixel(_source_position(x, y, img.size, dest))
            buffer.draw_pixel((tx, ty), pixel_tint(source, tint))


def _pack(img: Image) -> bytes:
    return b"".join(pix.to_bytes(4, "little") for pix in img.data)


def load_image(path: str | Path) -> Image:
    """Load an image file as RGBA pixels."""
    try:
        with _PILImage.open(path) as opened:
            rgba = opened.convert("RGBA")
    except (OSError, UnidentifiedImageError) as exc:
        raise InvalidImageError(f"Couldn't load an image: {exc}") from exc

    width, height = rgba.size
    data = [value for (value,) in struct.iter_unpack("<I", rgba.tobytes())]
    log_info("Image path: %s", str(path))
    log_info("Image resolution: x.%i, y.%i", width, height)
    log_info("Image memory size: %i", width * height * 4)
    return Image(data, Vec2i(width, height), 4)


def _write_ppm(path: str | Path, img: Image) -> None:
    header = f"P6\n{img.size.x} {img.size.y}\n255\n".encode("ascii")
    body = bytearray()
    for pix in img.data:
        col = pixel_to_color(pix)
        body += bytes((col.r, col.g, col.b))
    try:
        with open(path, "wb") as handle:
            handle.write(header)
            handle.write(body)
    except OSError as exc:
        raise ImageSaveError(f"Couldn't open the file: {exc}") from exc


_PIL_FORMATS = {".png": "PNG", ".jpg": "JPEG", ".bmp": "BMP", ".tga": "TGA"}


def save_image(path: str | Path, img: Image) -> None:
    """Save ``img`` as PNG, JPG, BMP, TGA or PPM, chosen by the file extension."""
    if img is None:
        raise InvalidImageError()

    extension = file_extension(str(path))
    if extension == ".ppm":
        _write_ppm(path, img)
    elif extension in _PIL_FORMATS:
        rgba = _PILImage.frombytes("RGBA", img.size, _pack(img))
        keep_alpha = img.channels == 4 and extension in (".png", ".tga")
        picture = rgba if keep_alpha else rgba.convert("RGB")
        options = {"quality": 100} if extension == ".jpg" else {}
        try:
            picture.save(path, format=_PIL_FORMATS[extension], **options)
        except OSError as exc:
            raise ImageSaveError(f"Couldn't save an image: {exc}") from exc
    else:
        raise ImageSaveError("Invalid file extension provided.")

    log_info("Image successfully saved to: %s", str(path))