import struct
from dataclasses import dataclass

from .errors import InvalidHeaderError

QOI_MAGIC = b"qoif"
QOI_HEADER_SIZE = 14
QOI_PIXELS_MAX = 400000000  # Safety limit (400MP)

# magic(4), width(4), height(4), channels(1), colorspace(1), big endian
QOI_HEADER_FORMAT = ">4sIIBB"


@dataclass(frozen=True)
class QOIHeader:
    width: int
    height: int
    channels: int
    colorspace: int


def parse_header(data: bytes) -> QOIHeader:
    """
    Validate and unpack the 14 header bytes of a QOI file.

    :param data: At least the first 14 bytes of the file.
    :return: The parsed header.
    """
    if len(data) < QOI_HEADER_SIZE:
        raise InvalidHeaderError("QOI.decode: File too short for header")

    magic, width, height, channels, colorspace = struct.unpack(
        QOI_HEADER_FORMAT, data[:QOI_HEADER_SIZE]
    )

    if magic != QOI_MAGIC:
        raise InvalidHeaderError("QOI.decode: Bad qoi header (incorrect magic)")

    if width == 0 or height == 0:
        raise InvalidHeaderError("QOI.decode: Image dimensions must be non-zero")

    if width * height > QOI_PIXELS_MAX:
        raise InvalidHeaderError("QOI.decode: Image has too many pixels")

    if not (3 <= channels <= 4):
        raise InvalidHeaderError(
            "QOI.decode: The number of channels declared in the file is invalid"
        )

    if colorspace > 1:
        raise InvalidHeaderError(
            "QOI.decode: The colorspace declared in the file is invalid"
        )

    return QOIHeader(width, height, channels, colorspace)


def read_header(stream) -> QOIHeader:
    """Read the header from a binary stream, leaving it positioned at the first chunk."""
    return parse_header(stream.read(QOI_HEADER_SIZE))
