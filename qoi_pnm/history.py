from .pixel import HISTORY_SIZE, ZERO_PIXEL, Pixel, qoi_hash


class HistoryTable:
    """
    The running array of previously seen pixels.

    Slots are addressed by ``qoi_hash``; a pixel recorded into an occupied
    slot replaces whatever was there.
    """

    def __init__(self):
        self._slots = [ZERO_PIXEL] * HISTORY_SIZE

    def reset(self):
        self._slots = [ZERO_PIXEL] * HISTORY_SIZE

    def record(self, pixel: Pixel) -> int:
        """Store pixel at its hash slot and return the slot index."""
        pos = qoi_hash(pixel)
        self._slots[pos] = pixel
        return pos

    def snapshot(self) -> tuple:
        return tuple(self._slots)

    def __getitem__(self, index: int) -> Pixel:
        return self._slots[index]

    def __len__(self):
        return HISTORY_SIZE
