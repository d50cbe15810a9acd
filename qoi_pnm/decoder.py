import io
from enum import Enum

from .errors import TruncatedStreamError, UnknownChunkError
from .header import QOI_HEADER_SIZE, parse_header
from .history import HistoryTable
from .image import Image
from .pixel import START_PIXEL, Pixel, wrapping_add

# QOI Constants
QOI_OP_INDEX = 0x00
QOI_OP_DIFF = 0x40
QOI_OP_LUMA = 0x80
QOI_OP_RUN = 0xC0
QOI_OP_RGB = 0xFE
QOI_OP_RGBA = 0xFF

QOI_MASK_2 = 0xC0


class ChunkTag(Enum):
    """Chunk kinds, each stored as the (value, mask) its tag byte must match."""

    RGB = (QOI_OP_RGB, 0xFF)
    RGBA = (QOI_OP_RGBA, 0xFF)
    INDEX = (QOI_OP_INDEX, QOI_MASK_2)
    DIFF = (QOI_OP_DIFF, QOI_MASK_2)
    LUMA = (QOI_OP_LUMA, QOI_MASK_2)
    RUN = (QOI_OP_RUN, QOI_MASK_2)

    def matches(self, byte: int) -> bool:
        value, mask = self.value
        return (byte & mask) == value


# The full-byte tags must be tried before the 2-bit ones they overlap with
TAG_PRIORITY = (
    ChunkTag.RGB,
    ChunkTag.RGBA,
    ChunkTag.INDEX,
    ChunkTag.DIFF,
    ChunkTag.LUMA,
    ChunkTag.RUN,
)


def classify_tag(byte: int, tags=TAG_PRIORITY):
    """Return the first tag in ``tags`` matching ``byte``, or None."""
    for tag in tags:
        if tag.matches(byte):
            return tag
    return None


class ChunkDecoder:
    """
    The chunk state machine turning a QOI byte stream into pixels.

    Holds the running array and the previous pixel between chunks. Both are
    reset at the start of every decode, so one instance can be reused.
    """

    def __init__(self, tags=TAG_PRIORITY):
        """
        :param tags: Chunk kinds accepted, in dispatch priority order.
        """
        self.tags = tuple(tags)
        self.history = HistoryTable()
        self.last_pix = START_PIXEL
        self.run_length = 0

    def reset(self):
        self.history.reset()
        self.last_pix = START_PIXEL
        self.run_length = 0

    def decode_into(self, image: Image, stream) -> Image:
        """
        Fill every position of ``image`` from ``stream`` and freeze it.

        :param image: Grid to populate, row-major.
        :param stream: Binary stream positioned at the first chunk.
        :return: The same image, frozen.
        """
        self.reset()

        for row in range(image.height):
            for col in range(image.width):
                if self.run_length > 0:
                    self.run_length -= 1
                    pixel = self.last_pix
                else:
                    pixel = self._read_chunk(stream, row, col)

                image.set(row, col, pixel)
                self.last_pix = pixel

        image.freeze()
        return image

    def _read(self, stream, count: int, row: int, col: int) -> bytes:
        data = stream.read(count)
        if len(data) < count:
            raise TruncatedStreamError(count, len(data), row, col)
        return data

    def _read_chunk(self, stream, row: int, col: int) -> Pixel:
        byte1 = self._read(stream, 1, row, col)[0]
        tag = classify_tag(byte1, self.tags)
        prev = self.last_pix

        if tag is ChunkTag.RGB:
            r, g, b = self._read(stream, 3, row, col)
            # Alpha remains unchanged from the previous pixel
            pixel = Pixel(r, g, b, prev.a)

        elif tag is ChunkTag.RGBA:
            pixel = Pixel(*self._read(stream, 4, row, col))

        elif tag is ChunkTag.INDEX:
            # Already in the running array, nothing to record
            return self.history[byte1 & 0x3F]

        elif tag is ChunkTag.DIFF:
            # 2-bit differences with a bias of 2
            pixel = Pixel(
                wrapping_add(prev.r, ((byte1 >> 4) & 0x03) - 2),
                wrapping_add(prev.g, ((byte1 >> 2) & 0x03) - 2),
                wrapping_add(prev.b, (byte1 & 0x03) - 2),
                prev.a,
            )

        elif tag is ChunkTag.LUMA:
            byte2 = self._read(stream, 1, row, col)[0]
            dg = (byte1 & 0x3F) - 32
            dr_dg = ((byte2 >> 4) & 0x0F) - 8
            db_dg = (byte2 & 0x0F) - 8
            pixel = Pixel(
                wrapping_add(prev.r, dr_dg + dg),
                wrapping_add(prev.g, dg),
                wrapping_add(prev.b, db_dg + dg),
                prev.a,
            )

        elif tag is ChunkTag.RUN:
            # Bias of 1; this position is the first of the run
            self.run_length = byte1 & 0x3F
            return prev

        else:
            raise UnknownChunkError(byte1, row, col)

        self.history.record(pixel)
        return pixel


def decode_image(width: int, height: int, stream) -> Image:
    """Decode the chunk stream following a header into a frozen image."""
    return ChunkDecoder().decode_into(Image(width, height), stream)


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into raw pixel data.
    """

    @staticmethod
    def decode(
        file_data: bytes,
        byte_offset: int = 0,
        byte_length: int = None,
        output_channels: int = None,
    ) -> dict:
        """
        Decode a QOI file given as a bytes/bytearray object.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param output_channels: Number of channels to include in the decoded data (3 or 4).
                                If None, uses the channels defined in the file header.
        :return: Dictionary containing width, height, colorspace, channels, data (bytes)
                 and the decoded image.
        """
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        data = file_data[byte_offset : byte_offset + byte_length]
        header = parse_header(data)

        if output_channels is None:
            output_channels = header.channels

        if not (3 <= output_channels <= 4):
            raise ValueError(
                "QOI.decode: The number of channels for the output is invalid"
            )

        stream = io.BytesIO(data)
        stream.seek(QOI_HEADER_SIZE)
        image = decode_image(header.width, header.height, stream)

        return {
            "width": header.width,
            "height": header.height,
            "colorspace": header.colorspace,
            "channels": output_channels,
            "data": image.to_bytes(output_channels),
            "image": image,
        }

    @classmethod
    def read(cls, path, output_channels: int = None) -> dict:
        with open(path, "rb") as f:
            content = f.read()
        return cls.decode(content, output_channels=output_channels)
