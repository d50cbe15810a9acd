from pathlib import Path

from PIL import Image as PILImage

from .image import Image

PNM_SUFFIXES = (".ppm", ".pnm")


def to_pil(image: Image, mode: str = "RGBA") -> PILImage.Image:
    """Build a Pillow image from a decoded grid, dropping alpha for mode "RGB"."""
    img = PILImage.frombytes("RGBA", (image.width, image.height), image.to_bytes(4))
    if mode == "RGBA":
        return img
    return img.convert(mode)


def write_ppm(image: Image, fp):
    """
    Write a binary portable pixmap (P6, maxval 255) to a file object.

    Only the R, G and B channels are written.
    """
    to_pil(image, "RGB").save(fp, format="PPM")


def save_image(image: Image, path, channels: int = 4):
    """
    Save a decoded grid, choosing the format from the file extension.

    :param channels: 4 keeps alpha where the target format supports it.
    """
    path = Path(path)
    if path.suffix.lower() in PNM_SUFFIXES:
        with open(path, "wb") as f:
            write_ppm(image, f)
        return

    to_pil(image, "RGBA" if channels == 4 else "RGB").save(path)
