import numpy as np

from .pixel import Pixel


class Image:
    """
    An owned RGBA pixel grid backed by one contiguous buffer.

    Pixels are stored row-major, four bytes each, at ``(row * width + col) * 4``.
    Once ``freeze`` is called the grid can no longer be written.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image: Invalid dimensions {width}x{height}")

        self.width = width
        self.height = height
        self._data = bytearray(width * height * 4)
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        self._frozen = True

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"Image: Position ({row}, {col}) outside {self.width}x{self.height}"
            )
        return (row * self.width + col) * 4

    def get(self, row: int, col: int) -> Pixel:
        pos = self._offset(row, col)
        return Pixel(*self._data[pos : pos + 4])

    def set(self, row: int, col: int, pixel: Pixel):
        if self._frozen:
            raise ValueError("Image: Cannot write to a frozen image")
        pos = self._offset(row, col)
        self._data[pos : pos + 4] = bytes(pixel)

    def to_array(self) -> np.ndarray:
        """Return a (height, width, 4) uint8 copy of the grid."""
        return (
            np.frombuffer(bytes(self._data), dtype=np.uint8)
            .reshape(self.height, self.width, 4)
            .copy()
        )

    def to_bytes(self, channels: int = 4) -> bytes:
        """
        Pack the grid row-major.

        :param channels: 4 keeps alpha, 3 drops it.
        """
        if channels == 4:
            return bytes(self._data)
        if channels == 3:
            return self.to_array()[:, :, :3].tobytes()
        raise ValueError("Image: The number of channels for the output is invalid")
