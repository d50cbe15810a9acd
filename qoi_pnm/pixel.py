from typing import NamedTuple

HISTORY_SIZE = 64


class Pixel(NamedTuple):
    """A single RGBA pixel, each channel an unsigned 8-bit value."""

    r: int
    g: int
    b: int
    a: int


# Opaque black, the "previous pixel" every decode starts from
START_PIXEL = Pixel(0, 0, 0, 255)
ZERO_PIXEL = Pixel(0, 0, 0, 0)


def wrapping_add(channel: int, delta: int) -> int:
    """Add a signed delta to a channel with modulo-256 wraparound."""
    return (channel + delta) & 0xFF


def qoi_hash(pixel: Pixel) -> int:
    """Calculates the index position for the color array."""
    r, g, b, a = pixel
    return (r * 3 + g * 5 + b * 7 + a * 11) % HISTORY_SIZE
