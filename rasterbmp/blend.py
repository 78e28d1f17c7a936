"""Blend modes for compositing a colour onto existing pixels.

Only the blue, green and red channels are blended; alpha is left alone.
Add and subtract saturate at 255 and 0 instead of wrapping.
"""

from enum import Enum

import numpy as np

# Type alias for RGB tuples
Color = tuple[int, int, int]


class BlendMode(Enum):
    OVERWRITE = "overwrite"
    ADD = "add"
    SUBTRACT = "subtract"


def to_bgr(color: Color) -> tuple[int, int, int]:
    """Validate an (r, g, b) colour and return it in buffer order (b, g, r)."""
    r, g, b = color
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"color channels must be 0-255, got {tuple(color)}")
    return (int(b), int(g), int(r))


def blend_channel(dst: int, src: int, mode: BlendMode) -> int:
    if mode is BlendMode.ADD:
        return min(255, dst + src)
    if mode is BlendMode.SUBTRACT:
        return max(0, dst - src)
    return src


def blend_pixel(buffer: bytearray, offset: int, bgr: tuple[int, int, int], mode: BlendMode) -> None:
    """Blend one pixel in place. `offset` is the index of its blue byte."""
    if mode is BlendMode.OVERWRITE:
        buffer[offset:offset + 3] = bytes(bgr)
        return
    for i in range(3):
        buffer[offset + i] = blend_channel(buffer[offset + i], bgr[i], mode)


def blend_array(dst: np.ndarray, bgr: tuple[int, int, int], mode: BlendMode) -> np.ndarray:
    """Vectorized blend of an (..., 3) uint8 BGR array. Returns a new array."""
    src = np.array(bgr, dtype=np.int16)
    if mode is BlendMode.OVERWRITE:
        return np.broadcast_to(src.astype(np.uint8), dst.shape).copy()
    wide = dst.astype(np.int16)
    if mode is BlendMode.ADD:
        wide += src
    else:
        wide -= src
    return np.clip(wide, 0, 255).astype(np.uint8)
