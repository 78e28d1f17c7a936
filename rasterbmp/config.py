"""Settings for the preview, run loop and recorder, read from the environment.

A .env file in the working directory is loaded first, so any of these can
be set there:

    RASTERBMP_PREVIEW_SCALE=8
    RASTERBMP_FPS=30
    RASTERBMP_WIDTH=64
    RASTERBMP_HEIGHT=64
    RASTERBMP_MEDIA_DIR=media
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path.cwd() / ".env")

PREVIEW_SCALE = int(os.getenv("RASTERBMP_PREVIEW_SCALE", "8"))
FPS = int(os.getenv("RASTERBMP_FPS", "30"))
WIDTH = int(os.getenv("RASTERBMP_WIDTH", "64"))
HEIGHT = int(os.getenv("RASTERBMP_HEIGHT", "64"))
MEDIA_DIR = Path(os.getenv("RASTERBMP_MEDIA_DIR", "media"))
