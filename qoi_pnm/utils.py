import numpy as np
from PIL import Image


def load_image(filepath) -> tuple[np.ndarray, dict]:
    """
    Load a reference raster laid out like ``Image.to_array``.

    :param filepath: Any image Pillow can open.
    :return: A (height, width, 4) uint8 array and a description. Sources without
             an alpha band come back opaque, with ``channels`` set to 3.
    """
    with Image.open(filepath) as img:
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8).copy()

    height, width = rgba.shape[:2]
    return rgba, {
        "width": width,
        "height": height,
        "channels": 4 if has_alpha else 3,
        "colorspace": 0,
    }
