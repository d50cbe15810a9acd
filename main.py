from qoi_pnm import QOIDecoder, write_ppm

INPUT_QOI = "dice.qoi"
OUTPUT_PPM = "dice.ppm"

if __name__ == "__main__":
    decoded = QOIDecoder.read(INPUT_QOI)
    print(
        f"Loaded image {INPUT_QOI}: {decoded['width']}x{decoded['height']} Channels: {decoded['channels']}"
    )

    with open(OUTPUT_PPM, "wb") as f:
        write_ppm(decoded["image"], f)

    print(f"Decoded {INPUT_QOI} to {OUTPUT_PPM}")
