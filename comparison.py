#! Our decoder is pure Python while the qoi package (https://pypi.org/project/qoi/) is a C extension,
#! so expect a large gap. This is mainly a sanity check that both agree on a real image.

import time

import numpy as np

import qoi as OfficialQOI
from qoi_pnm import QOIDecoder, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_QOI = "fruits.qoi"


def time_compare(pixel_data: np.ndarray):
    encoded = OfficialQOI.encode(pixel_data)
    print(f"Encoded QOI to {len(encoded)} bytes")

    start_time = time.time()
    official = OfficialQOI.decode(encoded)
    end_time = time.time()
    print(f"Decoded with the qoi package in {end_time - start_time:.2f} seconds")

    start_time = time.time()
    ours = QOIDecoder.decode(encoded)
    end_time = time.time()
    print(f"Decoded with qoi_pnm in {end_time - start_time:.2f} seconds")

    ours_array = np.frombuffer(ours["data"], dtype=np.uint8).reshape(official.shape)
    assert np.array_equal(official, ours_array), "Decoded data mismatch!"


if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )

    time_compare(np.ascontiguousarray(pixel_data[..., : desc["channels"]]))
