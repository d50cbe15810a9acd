import struct

import pytest

END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"


@pytest.fixture
def make_qoi():
    """Build a QOI file from raw chunk bytes."""

    def _make(width, height, chunks, channels=4, colorspace=0, end_marker=True):
        header = b"qoif" + struct.pack(">IIBB", width, height, channels, colorspace)
        return header + bytes(chunks) + (END_MARKER if end_marker else b"")

    return _make
