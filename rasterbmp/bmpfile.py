"""Read and write bitmap files: the 54-byte header followed by raw BGRA rows.

Rows are written in buffer order, first row first. A positive height in a
BMP header means bottom-up storage, so row 0 is the bottom row of the
picture for any other reader.
"""

from pathlib import Path

from rasterbmp.header import (
    HEADER_SIZE,
    FormatError,
    Header,
    check_header,
    parse_header,
    serialize_header,
)


def read_file(path: str | Path) -> tuple[Header, bytearray]:
    """Load a header and its pixel data.

    Raises:
        OSError: if the file can't be opened or read.
        FormatError: if the header is invalid or the pixel data is short.
    """
    with open(path, "rb") as f:
        header = parse_header(f.read(HEADER_SIZE))
        check_header(header)
        data = bytearray(f.read(header.image_size))
    if len(data) != header.image_size:
        raise FormatError(
            f"{path}: expected {header.image_size} bytes of pixel data, found {len(data)}"
        )
    return header, data


def write_file(path: str | Path, header: Header, data: bytes | bytearray) -> None:
    """Write the header followed by exactly `header.image_size` pixel bytes."""
    if len(data) != header.image_size:
        raise ValueError(f"pixel data is {len(data)} bytes, header says {header.image_size}")
    with open(path, "wb") as f:
        f.write(serialize_header(header))
        f.write(data)
