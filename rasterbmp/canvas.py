"""32-bit bitmap pixel buffer with drawing primitives."""

import colorsys
from pathlib import Path

import numpy as np
from PIL import Image

from rasterbmp.blend import BlendMode, Color, blend_array, blend_pixel, to_bgr
from rasterbmp.bmpfile import read_file, write_file
from rasterbmp.header import BYTES_PER_PIXEL, Header, init_header
from rasterbmp.rotate import rotate_pixels

_OPAQUE = 255


class Bitmap:
    """Width x height BGRA pixel buffer paired with its file header.

    Pixels are stored as a flat bytearray in BGRA order: [B0,G0,R0,A0, B1,G1,R1,A1, ...]
    Row-major: pixel (x, y) is at index (y * width + x) * 4. Row 0 is the
    first row in the file and the bottom row of the picture.

    The buffer belongs to this object alone. Call close() (or use the bitmap
    as a context manager) to release it; any pixel access afterwards raises
    ValueError.
    """

    def __init__(self, width: int, height: int):
        self._header = init_header(width, height)
        self._buffer: bytearray | None = bytearray(self._header.image_size)
        self._buffer[3::BYTES_PER_PIXEL] = bytes([_OPAQUE]) * (width * height)

    @classmethod
    def _from_parts(cls, header: Header, data: bytearray) -> "Bitmap":
        bitmap = cls.__new__(cls)
        bitmap._header = header
        bitmap._buffer = data
        return bitmap

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "Bitmap":
        """Read a bitmap file written by save() (or any 32-bit BI_RGB BMP)."""
        header, data = read_file(path)
        return cls._from_parts(header, data)

    def save(self, path: str | Path) -> None:
        write_file(path, self._header, self.buffer)

    def close(self) -> None:
        self._buffer = None

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def __enter__(self) -> "Bitmap":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        state = " closed" if self.closed else ""
        return f"<Bitmap {self.width}x{self.height}{state}>"

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def header(self) -> Header:
        return self._header

    @property
    def width(self) -> int: return self._header.width

    @property
    def height(self) -> int: return self._header.height

    @property
    def image_size(self) -> int: return self._header.image_size

    @property
    def file_size(self) -> int: return self._header.file_size

    @property
    def center_x(self) -> float: return (self.width - 1) / 2

    @property
    def center_y(self) -> float: return (self.height - 1) / 2

    @property
    def buffer(self) -> bytearray:
        if self._buffer is None:
            raise ValueError("bitmap is closed")
        return self._buffer

    @property
    def pixels(self) -> np.ndarray:
        """Writable (height, width, 4) uint8 view of the buffer."""
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.height, self.width, 4)

    # ------------------------------------------------------------------
    # Pixels
    # ------------------------------------------------------------------

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns (0,0,0) for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 4
            buf = self.buffer
            return (buf[idx + 2], buf[idx + 1], buf[idx])
        return (0, 0, 0)

    def set(self, x: int, y: int, color: Color, mode: BlendMode = BlendMode.OVERWRITE) -> None:
        """Blend a single pixel. Out-of-bounds writes are silently ignored."""
        bgr = to_bgr(color)
        mode = BlendMode(mode)
        if 0 <= x < self.width and 0 <= y < self.height:
            blend_pixel(self.buffer, (y * self.width + x) * 4, bgr, mode)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def fill(self, color: Color) -> None:
        """Set every pixel to `color`, fully opaque."""
        b, g, r = to_bgr(color)
        self.buffer[:] = bytes((b, g, r, _OPAQUE)) * (self.width * self.height)

    def clear(self) -> None:
        """Fill with opaque black."""
        self.fill((0, 0, 0))

    def rect(self, left: int, right: int, bottom: int, top: int, color: Color,
             mode: BlendMode = BlendMode.OVERWRITE) -> None:
        """Blend the half-open box cols [left, right) x rows [bottom, top).

        Edges are clipped to the bitmap. Swapped edges are not reordered,
        they just draw nothing.
        """
        bgr = to_bgr(color)
        mode = BlendMode(mode)
        left, right = max(left, 0), min(right, self.width)
        bottom, top = max(bottom, 0), min(top, self.height)
        if left >= right or bottom >= top:
            return
        region = self.pixels[bottom:top, left:right, :3]
        region[...] = blend_array(region, bgr, mode)

    def circle(self, cx: int, cy: int, radius: int, color: Color,
               mode: BlendMode = BlendMode.OVERWRITE) -> None:
        """Blend every pixel strictly closer than `radius` to (cx, cy).

        Pixels at exactly `radius` are left alone.
        """
        bgr = to_bgr(color)
        mode = BlendMode(mode)
        # Bounding box, clipped the same way as rect()
        left, right = max(cx - radius, 0), min(cx + radius, self.width)
        bottom, top = max(cy - radius, 0), min(cy + radius, self.height)
        if left >= right or bottom >= top:
            return
        rows = np.arange(bottom, top)[:, None]
        cols = np.arange(left, right)[None, :]
        inside = (cols - cx) ** 2 + (rows - cy) ** 2 < radius * radius
        region = self.pixels[bottom:top, left:right, :3]
        region[inside] = blend_array(region[inside], bgr, mode)

    def line(self, x0: int, y0: int, x1: int, y1: int, color: Color,
             mode: BlendMode = BlendMode.OVERWRITE) -> None:
        """Draw a line by sampling a linear interpolation between the endpoints.

        Sample i of steps uses t = i / (steps - 1), so both endpoints are
        drawn. Sample coordinates are truncated toward zero, and samples
        that land outside the bitmap are skipped.
        """
        bgr = to_bgr(color)
        mode = BlendMode(mode)
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, self.width), min(y1, self.height)

        steps = max(abs(x1 - x0), abs(y1 - y0)) + 1
        span = max(steps - 1, 1)
        width, height, buf = self.width, self.height, self.buffer
        # Only visit samples that can land on the bitmap
        col_lo, col_hi = _samples_inside(x0, x1 - x0, span, width)
        row_lo, row_hi = _samples_inside(y0, y1 - y0, span, height)
        for i in range(max(0, col_lo, row_lo), min(steps, col_hi, row_hi)):
            # lerp with t = i / span, multiplied out first so whole pixels stay exact
            col = int(x0 + (x1 - x0) * i / span)
            row = int(y0 + (y1 - y0) * i / span)
            if 0 <= col < width and 0 <= row < height:
                blend_pixel(buf, (row * width + col) * 4, bgr, mode)

    def rotate(self, angle: float, cx: float | None = None, cy: float | None = None) -> None:
        """Rotate the image in place by `angle` radians around (cx, cy).

        The center defaults to the middle of the image. Anything rotated in
        from outside the bitmap comes out black, and alpha is reset to 255.
        """
        if cx is None:
            cx = self.center_x
        if cy is None:
            cy = self.center_y
        rotate_pixels(self.pixels, cx, cy, angle)

    # ------------------------------------------------------------------
    # Pillow interop
    # ------------------------------------------------------------------

    def to_image(self) -> Image.Image:
        """Return an RGBA Pillow image, top row first as viewers show it."""
        img = Image.frombytes("RGBA", (self.width, self.height), bytes(self.buffer), "raw", "BGRA")
        return img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    @classmethod
    def from_image(cls, image: Image.Image) -> "Bitmap":
        """Build an opaque bitmap from any Pillow image."""
        rgb = image.convert("RGB").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        bitmap = cls(*rgb.size)
        bitmap.buffer[:] = rgb.convert("RGBA").tobytes("raw", "BGRA")
        return bitmap

    # ------------------------------------------------------------------
    # Color helpers
    # ------------------------------------------------------------------

    @staticmethod
    def hsv(h: float, s: float = 1.0, v: float = 1.0) -> Color:
        """Convert HSV to RGB color tuple. h is 0-360, s and v are 0-1."""
        r, g, b = colorsys.hsv_to_rgb(h / 360.0, s, v)
        return (int(r * 255), int(g * 255), int(b * 255))

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        """Convenience: clamp and return an RGB tuple."""
        return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))

    @staticmethod
    def hex(color: int) -> Color:
        """Convert 0xRRGGBB integer to (R, G, B) tuple."""
        return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def load(path: str | Path) -> Bitmap:
    return Bitmap.load(path)


def save(bitmap: Bitmap, path: str | Path) -> None:
    bitmap.save(path)


def _samples_inside(start: int, delta: int, span: int, limit: int) -> tuple[int, int]:
    """Half-open range of i for which trunc(start + delta * i / span) is in [0, limit).

    Truncation toward zero keeps a value in [0, limit) exactly when it lies
    strictly between -1 and limit, i.e. lo < delta * i < hi below.
    """
    lo = -span * (start + 1)
    hi = span * (limit - start)
    if delta == 0:
        return (0, span + 1) if lo < 0 < hi else (0, 0)
    if delta < 0:
        delta, lo, hi = -delta, -hi, -lo
    return lo // delta + 1, -(-hi // delta)
