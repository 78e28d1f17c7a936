"""54-byte BMP file + info header for 32-bit uncompressed images.

Layout (little-endian, no padding):
  - File header (14 bytes): identifier "BM", file size, two reserved
    shorts, pixel-data offset.
  - Info header (40 bytes): header size, width, height, colour planes,
    bits per pixel, compression, image size, horizontal/vertical
    resolution, palette colour count, important colour count.
"""

import struct
from dataclasses import dataclass

MAGIC = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE  # 54
BYTES_PER_PIXEL = 4
BITS_PER_PIXEL = 32
MAX_FILE_SIZE = 0xFFFFFFFF  # file size field is a uint32

_HEADER = struct.Struct("<2sIHHIIiiHHIIiiII")


class FormatError(ValueError):
    """Raised when bytes don't describe a bitmap this library can read."""


@dataclass
class Header:
    identifier: bytes = MAGIC
    file_size: int = HEADER_SIZE
    reserved1: int = 0
    reserved2: int = 0
    offset: int = HEADER_SIZE
    info_header_size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    colour_planes: int = 1
    bits_per_pixel: int = BITS_PER_PIXEL
    compression: int = 0
    image_size: int = 0
    horizontal_resolution: int = 0
    vertical_resolution: int = 0
    palette_colours: int = 0
    important_colours: int = 0


def image_size_for(width: int, height: int) -> int:
    return width * height * BYTES_PER_PIXEL


def init_header(width: int, height: int) -> Header:
    """Build the header for a width x height 32-bit image.

    Raises ValueError for non-positive dimensions or for an image too large
    for the 32-bit file size field.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"dimensions must be positive, got {width}x{height}")
    image_size = image_size_for(width, height)
    if image_size + HEADER_SIZE > MAX_FILE_SIZE:
        raise ValueError(f"{width}x{height} is too large for a bitmap file")
    return Header(
        file_size=image_size + HEADER_SIZE,
        width=width,
        height=height,
        image_size=image_size,
    )


def parse_header(data: bytes) -> Header:
    """Decode the first 54 bytes of `data`. Only the magic is checked."""
    if len(data) < HEADER_SIZE:
        raise FormatError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")
    header = Header(*_HEADER.unpack_from(data, 0))
    if header.identifier != MAGIC:
        raise FormatError(f"bad identifier {header.identifier!r}, expected {MAGIC!r}")
    return header


def serialize_header(header: Header) -> bytes:
    return _HEADER.pack(
        header.identifier,
        header.file_size,
        header.reserved1,
        header.reserved2,
        header.offset,
        header.info_header_size,
        header.width,
        header.height,
        header.colour_planes,
        header.bits_per_pixel,
        header.compression,
        header.image_size,
        header.horizontal_resolution,
        header.vertical_resolution,
        header.palette_colours,
        header.important_colours,
    )


def check_header(header: Header) -> None:
    """Reject headers whose fields disagree with each other or with the format.

    The stored image size is never trusted on its own: it has to match
    width * height * 4, and the file size has to match it plus the header.
    """
    if header.width <= 0 or header.height <= 0:
        raise FormatError(f"unsupported dimensions {header.width}x{header.height}")
    if header.info_header_size != INFO_HEADER_SIZE:
        raise FormatError(f"unsupported info header size {header.info_header_size}")
    if header.colour_planes != 1:
        raise FormatError(f"colour planes must be 1, got {header.colour_planes}")
    if header.bits_per_pixel != BITS_PER_PIXEL:
        raise FormatError(f"unsupported bit depth {header.bits_per_pixel}, only 32 is supported")
    if header.compression != 0:
        raise FormatError(f"unsupported compression method {header.compression}")
    if header.offset != HEADER_SIZE:
        raise FormatError(f"unexpected pixel data offset {header.offset}")
    expected = image_size_for(header.width, header.height)
    if header.image_size != expected:
        raise FormatError(
            f"image size {header.image_size} does not match "
            f"{header.width}x{header.height}x{BYTES_PER_PIXEL} = {expected}"
        )
    if header.file_size != expected + HEADER_SIZE:
        raise FormatError(f"file size {header.file_size} does not match {expected + HEADER_SIZE}")
