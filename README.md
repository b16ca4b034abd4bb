# silkdraw

A small software rasteriser that draws into an in-memory buffer of 32-bit
pixels. It draws pixels, lines, rectangles (also rotated), circles, triangles,
regular polygons, stars, images and text in a built-in 3×5 bitmap font. Alpha
blending is on by default.

## Installation

```
pip install silkdraw
```

Loading and saving PNG, JPEG, BMP and TGA files uses Pillow, which is
installed with the package. PPM output is written directly.

## Pixels and colours

A pixel is an unsigned 32-bit integer with red in the lowest byte, then green,
blue, and alpha in the highest byte, so `0xff0000ff` is opaque red.

```python
from silkdraw.color import Color, pixel_to_color, color_to_pixel, pixel_tint

pixel_to_color(0xff0000ff)               # Color(r=255, g=0, b=0, a=255)
color_to_pixel(Color(0, 255, 0, 255))    # 0xff00ff00
pixel_tint(0xffffffff, 0x80808080)       # multiplies channel by channel
```

`Color` checks that every channel lies in 0..255 and has `from_pixel` and
`to_pixel`. The same module has `alpha_blend`, `pixel_fade` (replace the alpha
by a fraction of 255) and `channel_red`, `channel_green`, `channel_blue`,
`channel_alpha`.

## Buffers

`PixelBuffer(width, height, stride=None, data=None, alpha_blend=True)` holds
pixels row by row. `stride` defaults to `width`; when `data` is given, the
buffer writes into that sequence in place.

- `get_pixel(position)` / `set_pixel(position, pix)` read and write raw pixels.
- `clear(pix=0)` fills the whole buffer; `clear_region((w, h), pix=0)` fills
  a block starting at the origin.
- `draw_pixel(position, pix)` blends `pix` by its alpha (unless `alpha_blend`
  is off) and raises `OutOfBoundsError` outside the drawable area.

`Vec2i` is a named tuple `(x, y)`; plain tuples are accepted everywhere.

## Drawing shapes and text

```python
from silkdraw.buffer import PixelBuffer, Vec2i
from silkdraw.shapes import draw_rect, draw_circle, draw_line, draw_star
from silkdraw.font import draw_text, measure_text

buf = PixelBuffer(500, 500)
buf.clear(0x11AA0033)

draw_rect(buf, Vec2i(150, 100), Vec2i(200, 200), 0xff0000ff)
draw_circle(buf, Vec2i(250, 250), 40, 0xff00ff00)
draw_line(buf, Vec2i(0, 0), Vec2i(499, 499), 0xffffffff)
draw_star(buf, Vec2i(100, 400), 60, 0, 5, 0xff00ffff)

text = "Hello!"
size = measure_text(text, 8, 1)
draw_text(buf, text, Vec2i(250 - size.x // 2, 250), 8, 1, 0xff000000)
```

`silkdraw.shapes` also has `draw_rect_pro` and `draw_rect_lines` (rotation in
degrees and an offset), `draw_circle_lines`, `draw_triangle`,
`draw_triangle_lines`, `draw_triangle_equilateral`,
`draw_triangle_equilateral_lines` and `draw_polygon`.

Shapes are clipped: pixels outside the buffer are skipped. Some details of the
rasteriser worth knowing:

- Filled triangles, and so filled rectangles and polygons, are drawn by
  scanlines from the top vertex down to, but not including, the bottom one,
  and never touch row 0.
- Rotation uses 3.14 for π, so rotated shapes are very slightly off.
- `draw_polygon` and `draw_star` treat fewer than 3 sides as 3;
  `draw_polygon` raises `ValueError` for more than 512.

In `silkdraw.font`, `glyph(char)` returns the 5×3 cell pattern of an ASCII
character (blank when the font has none; non-ASCII raises `ValueError`).
`draw_text` snaps the position down to the `font_size` grid and puts
`font_spacing` cells between glyphs; it raises `ValueError` for a zero font
size. `measure_text` gives the single-line size in pixels.

## Images

```python
from silkdraw.image import (
    gen_image_checkerboard, scale_image, draw_image_scaled, save_image, load_image,
)

checker = gen_image_checkerboard(Vec2i(64, 64), 8, 0xffffffff, 0xff000000)
bigger = scale_image(checker, Vec2i(128, 128))
draw_image_scaled(buf, checker, Vec2i(10, 10), Vec2i(32, 32))
save_image("checker.png", bigger)
again = load_image("checker.png")
```

`Image(data, size, channels=4)` checks that `data` holds exactly
`width * height` pixels. Other helpers: `gen_image_color`, `buffer_to_image`
(copies the first pixels of a buffer or sequence), `draw_image`,
`draw_image_pro` (offset and tint), and `file_extension`.

`save_image` picks the format from the extension: `.png`, `.jpg` (quality
100), `.bmp`, `.tga` or `.ppm`. Alpha is kept for PNG and TGA only. Any other
extension, or a failed write, raises `ImageSaveError`. `load_image` converts
any file Pillow can read to RGBA and raises `InvalidImageError` when it cannot.

## Errors

`silkdraw.errors` defines `SilkError` and its subclasses `InvalidBufferError`
(also a `ValueError`), `OutOfBoundsError` (also an `IndexError`),
`InvalidImageError` (also a `ValueError`) and `ImageSaveError` (also an
`OSError`).

## Logging

`silkdraw.log` has `log_info`, `log_warn` and `log_err`. Each takes a
printf-style message and writes it to standard output behind an `[INFO]`,
`[WARN]` or `[ERR]` prefix, cut to 255 characters. `log_alpha_blend_status`
and `log_byte_order_status` report those settings; the latter raises
`SilkError` for a byte order other than `"little"` or `"big"`.

## What it does not do

silkdraw only draws into memory. It opens no window, shows nothing on screen
and reads no keyboard or mouse input; to see a buffer, save it as an image or
hand its `data` to a display library of your own. There is no command-line
tool.