"""Plasma effect - classic demoscene sine-based color plasma, computed with numpy."""

import numpy as np

from rasterbmp import Bitmap
from rasterbmp.run import run


def render(bitmap: Bitmap, t: float, frame: int) -> None:
    y, x = np.mgrid[0:bitmap.height, 0:bitmap.width].astype(np.float64)
    # Classic plasma formula with multiple sine waves
    v1 = np.sin(x * 0.1 + t)
    v2 = np.sin(y * 0.1 + t * 0.7)
    v3 = np.sin((x + y) * 0.1 + t * 0.5)
    v4 = np.sin(np.sqrt(x * x + y * y) * 0.1 + t * 1.3)
    v = (v1 + v2 + v3 + v4) / 4.0  # -1 to 1

    px = bitmap.pixels
    px[..., 2] = ((np.sin(v * np.pi) + 1) * 110).astype(np.uint8)  # red
    px[..., 1] = ((np.sin(v * np.pi + 2.1) + 1) * 110).astype(np.uint8)  # green
    px[..., 0] = ((np.sin(v * np.pi + 4.2) + 1) * 110).astype(np.uint8)  # blue
    px[..., 3] = 255


if __name__ == "__main__":
    run(render, fps=20, title="Plasma")
