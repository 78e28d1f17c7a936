"""Rotation by inverse mapping.

Every destination pixel pulls its colour from the source location that
rotates onto it, so the output has no holes. Sources outside the image
leave the destination black. Coordinates are truncated toward zero, not
rounded.
"""

import math

import numpy as np

# Exact (sin, cos) for the axis-aligned angles, free of floating point drift
_EXACT = {
    0.0: (0.0, 1.0),
    math.pi / 2: (1.0, 0.0),
    math.pi: (0.0, -1.0),
    3 / 2 * math.pi: (-1.0, 0.0),
}


def sin_cos(angle: float) -> tuple[float, float]:
    if angle in _EXACT:
        return _EXACT[angle]
    return math.sin(angle), math.cos(angle)


def rotate_pixels(pixels: np.ndarray, cx: float, cy: float, angle: float) -> None:
    """Rotate a (height, width, 4) BGRA array in place around (cx, cy).

    `angle` is in radians. Alpha ends up 255 everywhere; only RGB is
    copied from the source.
    """
    if not math.isfinite(angle):
        raise ValueError(f"angle must be finite, got {angle}")
    height, width = pixels.shape[:2]
    source = pixels.copy()

    # Clear to opaque black
    pixels[..., :3] = 0
    pixels[..., 3] = 255

    if angle == 0:
        pixels[..., :3] = source[..., :3]
        return

    sin_a, cos_a = sin_cos(angle)
    rows, cols = np.mgrid[0:height, 0:width]
    dx = cols - cx
    dy = rows - cy
    # astype(int) truncates toward zero
    src_col = (cos_a * dx - sin_a * dy + cx).astype(np.int64)
    src_row = (sin_a * dx + cos_a * dy + cy).astype(np.int64)

    inside = (src_col >= 0) & (src_col < width) & (src_row >= 0) & (src_row < height)
    pixels[inside, :3] = source[src_row[inside], src_col[inside], :3]
