"""Read pixel dimensions straight from PNG and JPEG headers.

Only the leading header bytes are inspected; no pixel data is decoded and no
imaging library is required. Anything that cannot be read with confidence
(unsupported formats, truncated or malformed buffers) yields ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

Buffer = bytes | bytearray | memoryview

PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"
JPEG_SOI: Final[bytes] = b"\xff\xd8"

# IHDR chunk: length(4) type(4) width(4) height(4) after the 8-byte signature.
_PNG_IHDR_TYPE_OFFSET: Final[int] = 12
_PNG_WIDTH_OFFSET: Final[int] = 16
_PNG_HEIGHT_OFFSET: Final[int] = 20
_PNG_HEADER_SIZE: Final[int] = 24

# Start-Of-Frame codes. C4 (DHT), C8 (JPG) and CC (DAC) are not frames.
_JPEG_SOF_MARKERS: Final[frozenset[int]] = frozenset(
    {0xC0, 0xC1, 0xC2, 0xC3, 0xC5, 0xC6, 0xC7, 0xC9, 0xCA, 0xCB, 0xCD, 0xCE, 0xCF}
)
# Markers without a length field: TEM, RST0-RST7, SOI.
_JPEG_STANDALONE_MARKERS: Final[frozenset[int]] = frozenset(
    {0x01, *range(0xD0, 0xD8), 0xD8}
)
# length(2) precision(1) height(2) width(2) component count(1).
_JPEG_SOF_MIN_LENGTH: Final[int] = 8
_JPEG_EOI: Final[int] = 0xD9
_JPEG_SOS: Final[int] = 0xDA


class ImageFormat(str, Enum):
    """Image container formats the sniffer knows about."""

    PNG = "png"
    JPEG = "jpeg"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ImageHeader:
    """Dimensions read from an image header."""

    width: int
    height: int
    format: ImageFormat

    def as_dict(self) -> dict[str, int | str]:
        return {
            "width": self.width,
            "height": self.height,
            "format": self.format.value,
        }


def detect_format(data: Buffer) -> ImageFormat:
    """Classify a byte prefix by its magic bytes alone."""
    if bytes(data[: len(PNG_SIGNATURE)]) == PNG_SIGNATURE:
        return ImageFormat.PNG
    if bytes(data[: len(JPEG_SOI)]) == JPEG_SOI:
        return ImageFormat.JPEG
    return ImageFormat.UNKNOWN


def _read_uint(data: Buffer, offset: int, size: int) -> int | None:
    end = offset + size
    if offset < 0 or end > len(data):
        return None
    return int.from_bytes(data[offset:end], "big", signed=False)


def _sniff_png(data: Buffer) -> ImageHeader | None:
    if len(data) < _PNG_HEADER_SIZE:
        return None
    chunk_type = bytes(data[_PNG_IHDR_TYPE_OFFSET:_PNG_WIDTH_OFFSET])
    if chunk_type != b"IHDR":
        return None

    width = _read_uint(data, _PNG_WIDTH_OFFSET, 4)
    height = _read_uint(data, _PNG_HEIGHT_OFFSET, 4)
    if not width or not height:
        return None
    return ImageHeader(width=width, height=height, format=ImageFormat.PNG)


def _sniff_jpeg(data: Buffer) -> ImageHeader | None:
    size = len(data)
    pos = len(JPEG_SOI)

    while pos < size:
        if data[pos] != 0xFF:
            # Whatever follows a segment must be another marker.
            return None

        # Any number of 0xFF fill bytes may precede the marker code.
        while pos < size and data[pos] == 0xFF:
            pos += 1
        if pos >= size:
            return None

        marker = data[pos]
        pos += 1

        if marker in _JPEG_STANDALONE_MARKERS:
            continue
        if marker in (_JPEG_EOI, _JPEG_SOS):
            # Frame headers always precede the first scan.
            return None

        length = _read_uint(data, pos, 2)
        if length is None or length < 2:
            return None

        if marker in _JPEG_SOF_MARKERS:
            if length < _JPEG_SOF_MIN_LENGTH:
                return None
            # Payload: precision(1) height(2) width(2).
            height = _read_uint(data, pos + 3, 2)
            width = _read_uint(data, pos + 5, 2)
            if not width or not height:
                return None
            return ImageHeader(width=width, height=height, format=ImageFormat.JPEG)

        pos += length

    return None


def sniff_dimensions(data: Buffer) -> ImageHeader | None:
    """Return the image dimensions encoded in ``data``, or ``None``.

    ``data`` may be any prefix of a PNG or JPEG file. PNG needs the first 24
    bytes; JPEG needs everything up to the end of the Start-Of-Frame segment,
    which can sit behind large EXIF or ICC segments. The buffer is only read,
    never retained.

    Args:
        data: Leading bytes of an image file

    Returns:
        ImageHeader for recognized PNG/JPEG headers, None for anything else
        (unsupported formats, truncated or malformed headers, empty input)
    """
    image_format = detect_format(data)
    if image_format is ImageFormat.PNG:
        return _sniff_png(data)
    if image_format is ImageFormat.JPEG:
        return _sniff_jpeg(data)
    return None


__all__ = [
    "ImageFormat",
    "ImageHeader",
    "detect_format",
    "sniff_dimensions",
]
