"""Main run loop - ties together Bitmap and Simulator."""

import time
from collections.abc import Callable

from rasterbmp import config
from rasterbmp.canvas import Bitmap
from rasterbmp.simulator import Simulator

# Callback type: fn(bitmap, time_seconds, frame_number) -> None
RenderFn = Callable[[Bitmap, float, int], None]


def run(render: RenderFn, fps: int = config.FPS, title: str = "Bitmap Preview",
        scale: int = config.PREVIEW_SCALE, width: int = config.WIDTH,
        height: int = config.HEIGHT) -> None:
    """Main entry point. Runs the render loop with a live preview window.

    Args:
        render: Callback called each frame with (bitmap, elapsed_time, frame_number).
                Draw to the bitmap each frame. It is NOT auto-cleared between frames.
        fps: Target frames per second.
        title: Window title.
        scale: Pixel scale factor for the preview window.
        width: Bitmap width in pixels.
        height: Bitmap height in pixels.
    """
    bitmap = Bitmap(width, height)
    sim = Simulator(bitmap, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(bitmap, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
        bitmap.close()
