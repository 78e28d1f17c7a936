"""32-bit bitmap images: a BGRA pixel buffer, a BMP codec and drawing primitives.

The preview window and run loop need pygame and live in
`rasterbmp.simulator` and `rasterbmp.run`; they are not imported here.
"""

from rasterbmp.blend import BlendMode, Color
from rasterbmp.canvas import Bitmap, load, save
from rasterbmp.header import FormatError, Header, init_header, parse_header, serialize_header

__all__ = [
    "Bitmap",
    "BlendMode",
    "Color",
    "FormatError",
    "Header",
    "init_header",
    "load",
    "parse_header",
    "save",
    "serialize_header",
]
