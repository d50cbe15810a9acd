class QOIDecodeError(ValueError):
    """Base class for every failure while reading a QOI file."""


class InvalidHeaderError(QOIDecodeError):
    pass


class TruncatedStreamError(QOIDecodeError):
    """The stream ended before the current chunk was complete."""

    def __init__(self, needed: int, got: int, row: int, col: int):
        self.needed = needed
        self.got = got
        self.row = row
        self.col = col
        super().__init__(
            f"QOI.decode: Stream truncated at row {row}, column {col} "
            f"(needed {needed} bytes, got {got})"
        )


class UnknownChunkError(QOIDecodeError):
    """A tag byte matched none of the accepted chunk kinds."""

    def __init__(self, byte: int, row: int, col: int):
        self.byte = byte
        self.row = row
        self.col = col
        super().__init__(
            f"QOI.decode: Unknown chunk with starting byte 0x{byte:02x} "
            f"at row {row}, column {col}"
        )
