"""An off-screen 32-bit pixel buffer and colour conversion helpers."""

from __future__ import annotations

import struct

_PIXEL = struct.Struct("<I")


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Pack three channel values into a 0xRRGGBB integer."""
    return r * 256 * 256 + g * 256 + b


class Image:
    """A width x height image with 32 bits per pixel, little-endian rows."""

    bpp = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.line = width * (self.bpp // 8)
        self._data = bytearray(self.line * height)

    def _offset(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.line + x * (self.bpp // 8)
        return None

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); coordinates outside the image are ignored."""
        offset = self._offset(x, y)
        if offset is not None:
            _PIXEL.pack_into(self._data, offset, color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value at (x, y), or 0 outside the image."""
        offset = self._offset(x, y)
        if offset is None:
            return 0
        return _PIXEL.unpack_from(self._data, offset)[0]

    def fill_halves(self, ceiling: int, floor: int) -> None:
        """Paint the top half with ``ceiling`` and the bottom half with ``floor``."""
        half = self.height // 2 or self.height
        top = _PIXEL.pack(ceiling & 0xFFFFFFFF) * self.width
        bottom = _PIXEL.pack(floor & 0xFFFFFFFF) * self.width
        self._data[: half * self.line] = top * half
        self._data[half * self.line:] = bottom * (self.height - half)

    def to_bytes(self) -> bytes:
        """Return a copy of the raw pixel rows (B, G, R, X per pixel)."""
        return bytes(self._data)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour mask must be a positive bit mask")
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return offset, bits


def channel_shifts(red_mask: int, green_mask: int,
                   blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (offset, width) of the red, green and blue masks, flattened."""
    return (*_mask_shift(red_mask), *_mask_shift(green_mask),
            *_mask_shift(blue_mask))


def convert_color(color: int, depth: int,
                  shifts: tuple[int, int, int, int, int, int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of ``depth`` bits.

    Depths of 24 and above use the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    r_off, r_bits, g_off, g_bits, b_off, b_bits = shifts
    return (((red >> (16 - r_bits)) << r_off)
            + ((green >> (16 - g_bits)) << g_off)
            + ((blue >> (16 - b_bits)) << b_off))