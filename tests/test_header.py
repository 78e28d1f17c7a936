import struct

import pytest

from rasterbmp.header import (
    HEADER_SIZE,
    FormatError,
    Header,
    check_header,
    init_header,
    parse_header,
    serialize_header,
)


def test_init_header_fields():
    h = init_header(3, 2)
    assert h.identifier == b"BM"
    assert h.image_size == 3 * 2 * 4
    assert h.file_size == 24 + 54
    assert h.offset == 54
    assert h.info_header_size == 40
    assert (h.width, h.height) == (3, 2)
    assert h.colour_planes == 1
    assert h.bits_per_pixel == 32
    assert h.compression == 0
    assert h.reserved1 == h.reserved2 == 0
    assert h.horizontal_resolution == h.vertical_resolution == 0
    assert h.palette_colours == h.important_colours == 0


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 4), (4, -3)])
def test_init_header_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        init_header(width, height)


def test_init_header_rejects_overflowing_size():
    with pytest.raises(ValueError):
        init_header(40000, 40000)


def test_serialized_layout():
    data = serialize_header(init_header(3, 2))
    assert len(data) == HEADER_SIZE
    assert data[0:2] == b"BM"
    assert struct.unpack_from("<I", data, 2)[0] == 78      # file size
    assert struct.unpack_from("<I", data, 10)[0] == 54     # pixel offset
    assert struct.unpack_from("<I", data, 14)[0] == 40     # info header size
    assert struct.unpack_from("<ii", data, 18) == (3, 2)   # width, height
    assert struct.unpack_from("<HH", data, 26) == (1, 32)  # planes, bpp
    assert struct.unpack_from("<I", data, 34)[0] == 24     # image size
    assert data[46:54] == bytes(8)


def test_parse_reads_serialized_header():
    h = init_header(17, 9)
    assert parse_header(serialize_header(h)) == h


def test_parse_ignores_trailing_bytes():
    h = init_header(2, 2)
    assert parse_header(serialize_header(h) + b"\xff" * 16) == h


def test_parse_rejects_bad_magic():
    data = b"MB" + serialize_header(init_header(2, 2))[2:]
    with pytest.raises(FormatError):
        parse_header(data)


def test_parse_rejects_short_input():
    with pytest.raises(FormatError):
        parse_header(b"BM" + bytes(10))


def test_format_error_is_a_value_error():
    assert issubclass(FormatError, ValueError)


def test_parse_accepts_inconsistent_header_but_check_rejects_it():
    h = init_header(4, 4)
    h.image_size = 12
    parsed = parse_header(serialize_header(h))
    assert parsed.image_size == 12
    with pytest.raises(FormatError, match="image size"):
        check_header(parsed)


@pytest.mark.parametrize("field,value", [
    ("bits_per_pixel", 24),
    ("compression", 3),
    ("width", 0),
    ("height", -4),
    ("file_size", 999),
    ("offset", 1078),
    ("colour_planes", 2),
    ("info_header_size", 108),
])
def test_check_header_rejects(field, value):
    h = init_header(4, 4)
    setattr(h, field, value)
    with pytest.raises(FormatError):
        check_header(h)


def test_check_header_accepts_fresh_header():
    check_header(init_header(5, 3))


def test_default_header_is_empty_image():
    h = Header()
    assert h.identifier == b"BM"
    assert h.file_size == 54
    assert h.image_size == 0
