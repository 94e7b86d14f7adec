"""Tests for header-only image dimension sniffing."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image as PilImage

from lenstrace.media.dimensions import (
    ImageFormat,
    ImageHeader,
    detect_format,
    sniff_dimensions,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_bytes(size: tuple[int, int]) -> bytes:
    img = PilImage.new("RGB", size, (255, 0, 0))
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _jpeg_bytes(size: tuple[int, int], *, progressive: bool = False) -> bytes:
    img = PilImage.new("RGB", size, (0, 128, 255))
    buf = BytesIO()
    img.save(buf, format="JPEG", quality=80, progressive=progressive)
    return buf.getvalue()


def _png_header(width: int, height: int, chunk_type: bytes = b"IHDR") -> bytes:
    return (
        PNG_SIGNATURE
        + (13).to_bytes(4, "big")
        + chunk_type
        + width.to_bytes(4, "big")
        + height.to_bytes(4, "big")
        + b"\x08\x02\x00\x00\x00"
    )


def _sof0(width: int, height: int) -> bytes:
    # Three components, three bytes each.
    return (
        b"\xff\xc0\x00\x11\x08"
        + height.to_bytes(2, "big")
        + width.to_bytes(2, "big")
        + b"\x03\x01\x22\x00\x02\x11\x01\x03\x11\x01"
    )


def _segment(marker: int, payload: bytes) -> bytes:
    return bytes([0xFF, marker]) + (len(payload) + 2).to_bytes(2, "big") + payload


JFIF_APP0 = _segment(0xE0, b"JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00")


def test_png_square_header() -> None:
    header = sniff_dimensions(_png_header(1024, 1024))
    assert header == ImageHeader(width=1024, height=1024, format=ImageFormat.PNG)


@pytest.mark.parametrize(
    ("width", "height"),
    [(1, 1), (1792, 1024), (640, 480), (2**31 - 1, 7)],
)
def test_png_header_dimensions(width: int, height: int) -> None:
    header = sniff_dimensions(_png_header(width, height))
    assert header is not None
    assert (header.width, header.height) == (width, height)
    assert header.format is ImageFormat.PNG


def test_png_real_file() -> None:
    header = sniff_dimensions(_png_bytes((320, 200)))
    assert header == ImageHeader(320, 200, ImageFormat.PNG)


def test_png_only_first_24_bytes_needed() -> None:
    data = _png_bytes((77, 55))
    assert sniff_dimensions(data[:24]) == ImageHeader(77, 55, ImageFormat.PNG)


def test_png_truncated_ihdr() -> None:
    data = _png_header(1024, 768)
    assert sniff_dimensions(data[:16]) is None
    assert sniff_dimensions(data[:23]) is None


def test_png_requires_ihdr_chunk_type() -> None:
    assert sniff_dimensions(_png_header(100, 100, chunk_type=b"tEXt")) is None


def test_png_zero_dimension_not_recognized() -> None:
    assert sniff_dimensions(_png_header(0, 100)) is None
    assert sniff_dimensions(_png_header(100, 0)) is None


def test_jpeg_scenario_after_app0() -> None:
    data = b"\xff\xd8" + JFIF_APP0 + _sof0(width=640, height=512) + b"\xff\xd9"
    assert sniff_dimensions(data) == ImageHeader(640, 512, ImageFormat.JPEG)


def test_jpeg_baseline_real_file() -> None:
    data = _jpeg_bytes((300, 150))
    assert b"\xff\xc0" in data
    assert sniff_dimensions(data) == ImageHeader(300, 150, ImageFormat.JPEG)


def test_jpeg_progressive_real_file() -> None:
    data = _jpeg_bytes((123, 456), progressive=True)
    assert b"\xff\xc2" in data
    assert sniff_dimensions(data) == ImageHeader(123, 456, ImageFormat.JPEG)


def test_jpeg_frame_behind_large_segment() -> None:
    exif = _segment(0xE1, b"Exif\x00\x00" + b"\x00" * 40_000)
    data = b"\xff\xd8" + exif + _sof0(width=1920, height=1080)
    assert sniff_dimensions(data) == ImageHeader(1920, 1080, ImageFormat.JPEG)


def test_jpeg_huffman_table_is_not_a_frame() -> None:
    dht = _segment(0xC4, b"\x00" * 20)
    data = b"\xff\xd8" + dht + _sof0(width=64, height=32)
    assert sniff_dimensions(data) == ImageHeader(64, 32, ImageFormat.JPEG)


def test_jpeg_fill_bytes_before_marker() -> None:
    data = b"\xff\xd8" + b"\xff\xff\xff" + _sof0(width=10, height=20)
    assert sniff_dimensions(data) == ImageHeader(10, 20, ImageFormat.JPEG)


def test_jpeg_restart_marker_has_no_length() -> None:
    data = b"\xff\xd8\xff\xd0" + _sof0(width=8, height=8)
    assert sniff_dimensions(data) == ImageHeader(8, 8, ImageFormat.JPEG)


def test_jpeg_garbage_after_segment() -> None:
    data = b"\xff\xd8" + _segment(0xE0, b"\x00\x00") + b"\x12" + _sof0(10, 10)
    assert sniff_dimensions(data) is None


def test_jpeg_segment_length_past_buffer() -> None:
    data = b"\xff\xd8\xff\xe1\xff\xff\x00\x00"
    assert sniff_dimensions(data) is None


def test_jpeg_invalid_segment_length() -> None:
    assert sniff_dimensions(b"\xff\xd8\xff\xe0\x00\x01" + _sof0(10, 10)) is None


def test_jpeg_frame_segment_too_short_for_dimensions() -> None:
    # A frame claiming no payload must not borrow bytes from the next segment.
    data = b"\xff\xd8\xff\xc0\x00\x02" + JFIF_APP0
    assert sniff_dimensions(data) is None
    short = b"\xff\xd8\xff\xc0\x00\x07\x08\x02\x00\x02\x80" + JFIF_APP0
    assert sniff_dimensions(short) is None


def test_jpeg_truncated_frame_header() -> None:
    data = b"\xff\xd8" + JFIF_APP0 + _sof0(width=640, height=512)[:8]
    assert sniff_dimensions(data) is None


def test_jpeg_scan_before_frame() -> None:
    data = b"\xff\xd8" + _segment(0xDA, b"\x00" * 10) + _sof0(10, 10)
    assert sniff_dimensions(data) is None


def test_jpeg_end_of_image_before_frame() -> None:
    assert sniff_dimensions(b"\xff\xd8\xff\xd9" + _sof0(10, 10)) is None


def test_jpeg_zero_height_not_recognized() -> None:
    assert sniff_dimensions(b"\xff\xd8" + _sof0(width=100, height=0)) is None


def test_jpeg_every_prefix_is_safe() -> None:
    data = _jpeg_bytes((50, 40))
    full = sniff_dimensions(data)
    assert full == ImageHeader(50, 40, ImageFormat.JPEG)

    results = [sniff_dimensions(data[:end]) for end in range(len(data) + 1)]

    assert all(result in (None, full) for result in results)
    # Once the frame header is complete every longer prefix is recognized.
    first = results.index(full)
    assert all(result == full for result in results[first:])


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x89",
        b"\xff",
        b"\x89P",
        b"\xff\xd8",
        b"\xff\xd8\xff",
        PNG_SIGNATURE,
        b"GIF89a\x01\x00\x01\x00\x00\x00\x00",
        b"RIFF\x24\x00\x00\x00WEBPVP8 ",
        b"BM" + b"\x00" * 30,
    ],
)
def test_unrecognized_inputs(data: bytes) -> None:
    assert sniff_dimensions(data) is None


def test_accepts_bytearray_and_memoryview() -> None:
    data = _png_header(12, 34)
    expected = ImageHeader(12, 34, ImageFormat.PNG)
    assert sniff_dimensions(bytearray(data)) == expected
    assert sniff_dimensions(memoryview(data)) == expected


def test_sniff_is_repeatable() -> None:
    data = b"\xff\xd8" + JFIF_APP0 + _sof0(width=640, height=512)
    assert sniff_dimensions(data) == sniff_dimensions(data)
    assert sniff_dimensions(b"") == sniff_dimensions(b"")


def test_detect_format() -> None:
    assert detect_format(_png_header(1, 1)) is ImageFormat.PNG
    assert detect_format(b"\xff\xd8\xff\xe0") is ImageFormat.JPEG
    assert detect_format(b"GIF89a") is ImageFormat.UNKNOWN
    assert detect_format(b"") is ImageFormat.UNKNOWN


def test_header_as_dict() -> None:
    header = ImageHeader(640, 512, ImageFormat.JPEG)
    assert header.as_dict() == {"width": 640, "height": 512, "format": "jpeg"}
