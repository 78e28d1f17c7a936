"""Starburst - rotating spokes subtracted out of a white background."""

import math

from rasterbmp import Bitmap, BlendMode
from rasterbmp.run import run

SPOKES = 24


def render(bitmap: Bitmap, t: float, frame: int) -> None:
    bitmap.fill((255, 255, 255))
    cx, cy = bitmap.width // 2, bitmap.height // 2
    length = max(bitmap.width, bitmap.height)
    for i in range(SPOKES):
        a = t * 0.5 + i * 2 * math.pi / SPOKES
        x = int(cx + length * math.cos(a))
        y = int(cy + length * math.sin(a))
        bitmap.line(cx, cy, x, y, bitmap.hsv(i * 360 / SPOKES), BlendMode.SUBTRACT)
    # Soft hub
    bitmap.circle(cx, cy, 4, (60, 60, 60), BlendMode.SUBTRACT)


if __name__ == "__main__":
    run(render, title="Starburst")
