from .decoder import ChunkDecoder, ChunkTag, QOIDecoder, classify_tag, decode_image
from .errors import (
    InvalidHeaderError,
    QOIDecodeError,
    TruncatedStreamError,
    UnknownChunkError,
)
from .header import QOIHeader, parse_header, read_header
from .history import HistoryTable
from .image import Image
from .pixel import Pixel, qoi_hash
from .utils import load_image
from .writer import save_image, to_pil, write_ppm

__all__ = [
    "ChunkDecoder",
    "ChunkTag",
    "QOIDecoder",
    "classify_tag",
    "decode_image",
    "InvalidHeaderError",
    "QOIDecodeError",
    "TruncatedStreamError",
    "UnknownChunkError",
    "QOIHeader",
    "parse_header",
    "read_header",
    "HistoryTable",
    "Image",
    "Pixel",
    "qoi_hash",
    "load_image",
    "save_image",
    "to_pil",
    "write_ppm",
]
