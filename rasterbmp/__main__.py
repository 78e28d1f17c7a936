"""Command line tools for bitmap files.

Usage:
    python -m rasterbmp info FILE
    python -m rasterbmp convert SRC DST
    python -m rasterbmp new WIDTH HEIGHT FILE [RRGGBB]
    python -m rasterbmp preview FILE
"""

import sys
from dataclasses import fields
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from rasterbmp.canvas import Bitmap
from rasterbmp.header import FormatError

USAGE = __doc__.strip()


def _fail(message: str) -> None:
    print(f"ERROR: {message}")
    sys.exit(1)


def info(path: str) -> None:
    with Bitmap.load(path) as bitmap:
        print(f"{path}: {bitmap.width}x{bitmap.height}, {bitmap.file_size} bytes")
        for field in fields(bitmap.header):
            print(f"  {field.name:<22} {getattr(bitmap.header, field.name)!r}")


def convert(src: str, dst: str) -> None:
    """Convert between our .bmp files and anything Pillow can read or write."""
    if Path(src).suffix.lower() == ".bmp":
        with Bitmap.load(src) as bitmap:
            img = bitmap.to_image()
    else:
        img = Image.open(src)

    if Path(dst).suffix.lower() == ".bmp":
        with Bitmap.from_image(img) as bitmap:
            bitmap.save(dst)
    else:
        if Path(dst).suffix.lower() in (".jpg", ".jpeg"):
            img = img.convert("RGB")
        img.save(dst)
    print(f"Converted {src} -> {dst}")


def new(width: str, height: str, path: str, color: str = "000000") -> None:
    with Bitmap(int(width), int(height)) as bitmap:
        bitmap.fill(Bitmap.hex(int(color, 16)))
        bitmap.save(path)
    print(f"Wrote {path}")


def preview(path: str) -> None:
    # pygame is only needed here
    from rasterbmp.simulator import Simulator

    with Bitmap.load(path) as bitmap:
        sim = Simulator(bitmap, title=Path(path).name)
        try:
            while sim.update():
                sim.tick()
        except KeyboardInterrupt:
            pass
        finally:
            sim.close()


COMMANDS = {
    "info": (info, 1, 1),
    "convert": (convert, 2, 2),
    "new": (new, 3, 4),
    "preview": (preview, 1, 1),
}


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in COMMANDS:
        print(USAGE)
        sys.exit(1)

    fn, min_args, max_args = COMMANDS[args[0]]
    params = args[1:]
    if not min_args <= len(params) <= max_args:
        print(USAGE)
        sys.exit(1)

    try:
        fn(*params)
    except FormatError as e:
        _fail(f"not a supported bitmap: {e}")
    except UnidentifiedImageError as e:
        _fail(f"unrecognized image: {e}")
    except (OSError, ValueError) as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
