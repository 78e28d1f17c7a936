"""Additive circles - red, green and blue discs orbiting and mixing where they overlap."""

import math

from rasterbmp import Bitmap, BlendMode
from rasterbmp.run import run

COLORS = [(200, 0, 0), (0, 200, 0), (0, 0, 200)]


def render(bitmap: Bitmap, t: float, frame: int) -> None:
    bitmap.clear()
    cx, cy = bitmap.width // 2, bitmap.height // 2
    # Pulsing radius
    r = int(bitmap.width * 0.22 + 3 * math.sin(t * 2))
    orbit = bitmap.width * 0.14
    for i, color in enumerate(COLORS):
        a = t + i * 2 * math.pi / 3
        x = int(cx + orbit * math.cos(a))
        y = int(cy + orbit * math.sin(a))
        bitmap.circle(x, y, r, color, BlendMode.ADD)


if __name__ == "__main__":
    run(render, title="Circles")
