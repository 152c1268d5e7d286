#! Our TGA codec is pure Python while Pillow's TGA plugin packs pixels in C,
#! so the timings below are only a rough indication.

import time

import numpy as np
from PIL import Image

from tga import TGAImage, image_from_array, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_TGA = "fruits.tga"
OUTPUT_PILLOW_TGA = "fruits_pillow.tga"


def time_compare(pixel_data: np.ndarray):
    # Encode to TGA with our implementation
    start_time = time.time()
    image = image_from_array(pixel_data)
    encoded = image.encode()
    with open(OUTPUT_TGA, "wb") as f:
        f.write(encoded)
    end_time = time.time()
    print(f"Saved TGA to {OUTPUT_TGA} in {end_time - start_time:.2f} seconds")
    print(f"Encoded TGA to {len(encoded)} bytes")

    # Encode to TGA with Pillow
    start_time = time.time()
    Image.fromarray(pixel_data).save(OUTPUT_PILLOW_TGA, format="TGA")
    end_time = time.time()
    print(
        f"Saved TGA to {OUTPUT_PILLOW_TGA} with Pillow in "
        f"{end_time - start_time:.2f} seconds"
    )

    # Decode both files back
    start_time = time.time()
    ours = TGAImage.decode(encoded)
    end_time = time.time()
    print(f"Decoded {ours!r} in {end_time - start_time:.2f} seconds")

    start_time = time.time()
    with Image.open(OUTPUT_PILLOW_TGA) as img:
        img.load()
    end_time = time.time()
    print(f"Decoded {OUTPUT_PILLOW_TGA} with Pillow in {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )
    print(f"Original {INPUT_IMAGE} {pixel_data.nbytes} bytes")

    time_compare(pixel_data)
