#!/usr/bin/env python3
"""Record animated GIFs from each demo app by rendering frames headlessly.

The last frame of each demo is also saved as a bitmap file, then read back
to check it survives the round trip.

Usage: python record_gifs.py [name ...]
Output: media/demo-*.gif, media/demo-*.bmp
"""

import sys
from pathlib import Path

# Add project root to path
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from PIL import Image

from rasterbmp import Bitmap, config

# GIF settings
SCALE = 4          # Upscale factor (64*4 = 256px)
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def bitmap_to_image(bitmap: Bitmap, scale: int = SCALE):
    """Convert a Bitmap to a scaled-up RGB Pillow image."""
    img = bitmap.to_image().convert("RGB")
    if scale > 1:
        img = img.resize((bitmap.width * scale, bitmap.height * scale), Image.Resampling.NEAREST)
    return img


def render_gif(name: str, render_fn, fps: float = GIF_FPS, duration: float = DURATION_S,
               media_dir: Path = config.MEDIA_DIR, width: int = config.WIDTH,
               height: int = config.HEIGHT) -> Path:
    """Render frames, save them as an animated GIF and the last one as a BMP."""
    media_dir.mkdir(parents=True, exist_ok=True)
    gif_path = media_dir / f"demo-{name}.gif"
    bmp_path = media_dir / f"demo-{name}.bmp"
    n_frames = max(1, int(duration * fps))
    dt = 1.0 / fps
    frames = []

    with Bitmap(width, height) as bitmap:
        for i in range(n_frames):
            render_fn(bitmap, i * dt, i)
            frames.append(bitmap_to_image(bitmap))
        bitmap.save(bmp_path)
        with Bitmap.load(bmp_path) as reloaded:
            if reloaded.buffer != bitmap.buffer:
                raise RuntimeError(f"{bmp_path} did not round-trip")

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        gif_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"  Saved {gif_path} ({len(frames)} frames, {duration}s) and {bmp_path.name}")
    return gif_path


# ---------------------------------------------------------------------------
# Demo apps: direct import + render
# ---------------------------------------------------------------------------

def record_circle():
    from apps.circle import render
    render_gif("circle", render)

def record_plasma():
    from apps.plasma import render
    render_gif("plasma", render, fps=15, duration=5.0)

def record_rainbow():
    from apps.rainbow import render
    render_gif("rainbow", render)

def record_starburst():
    from apps.starburst import render
    render_gif("starburst", render)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

RECORDINGS = [
    ("circle",    record_circle),
    ("plasma",    record_plasma),
    ("rainbow",   record_rainbow),
    ("starburst", record_starburst),
]


if __name__ == "__main__":
    wanted = set(sys.argv[1:])
    print(f"\nRecording demo GIFs to {config.MEDIA_DIR}/\n")

    for name, fn in RECORDINGS:
        if wanted and name not in wanted:
            continue
        try:
            print(f"  Recording {name}...")
            fn()
        except Exception as e:
            print(f"  ERROR recording {name}: {e}")
            import traceback
            traceback.print_exc()

    print(f"\nDone! GIFs saved to {config.MEDIA_DIR}/")
