"""Rainbow pinwheel - hue bands drawn as rectangles, then rotated about the center."""

from rasterbmp import Bitmap
from rasterbmp.run import run

BANDS = 8


def render(bitmap: Bitmap, t: float, frame: int) -> None:
    bitmap.clear()
    band = max(1, bitmap.height // BANDS)
    for i in range(BANDS):
        hue = (i * 360 / BANDS + t * 60) % 360
        bitmap.rect(0, bitmap.width, i * band, (i + 1) * band, bitmap.hsv(hue, 1.0, 0.8))
    bitmap.rotate(t * 0.8)


if __name__ == "__main__":
    run(render, title="Rainbow Pinwheel")
