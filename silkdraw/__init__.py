"""CPU rasteriser for 32-bit pixel buffers: shapes, bitmap text and images."""

__version__ = "1.0.0"

__all__ = ["buffer", "color", "errors", "font", "image", "log", "shapes"]