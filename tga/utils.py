from dataclasses import replace

import numpy as np
from PIL import Image

from .errors import UnsupportedImageType
from .header import ImageType
from .image import TGAImage

# Descriptor bit 5: rows start at the top of the picture
TOP_LEFT_ORIGIN = 0x20


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in ("dng", "cr2", "nef", "arw", "raw"):
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        # Standard formats (PNG, JPEG, TGA, etc.)
        img = Image.open(filepath)

    # Greyscale stays single channel, everything else becomes RGB or RGBA
    if img.mode == "L":
        channels = 1
    elif img.mode == "RGBA":
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
    }


def image_from_array(pixels: np.ndarray) -> TGAImage:
    """
    Build a TGA image from an (h, w) greyscale or (h, w, 3|4) RGB(A) array.

    Rows are kept top to bottom (the descriptor marks a top-left origin) and
    color channels are swapped into the TGA order (BGR / BGRA).
    """
    pixels = np.asarray(pixels, dtype=np.uint8)

    if pixels.ndim == 2:
        image_type, bit_depth, descriptor = ImageType.BLACK_AND_WHITE, 8, 0
        raw = pixels
    elif pixels.ndim == 3 and pixels.shape[2] == 3:
        image_type, bit_depth, descriptor = ImageType.TRUE_COLOR, 24, 0
        raw = pixels[:, :, ::-1]
    elif pixels.ndim == 3 and pixels.shape[2] == 4:
        image_type, bit_depth, descriptor = ImageType.TRUE_COLOR, 32, 8  # 8 alpha bits
        raw = pixels[:, :, [2, 1, 0, 3]]
    else:
        raise ValueError(f"Unsupported pixel array shape {pixels.shape}")

    height, width = pixels.shape[:2]
    blank = TGAImage.new(image_type, width, height, bit_depth)
    header = replace(blank.header, descriptor=descriptor | TOP_LEFT_ORIGIN)
    return TGAImage(header, data=np.ascontiguousarray(raw).tobytes())


def image_to_array(image: TGAImage) -> np.ndarray:
    """
    Return the pixels of an uncompressed 8-bit greyscale or 24/32-bit true
    color image as a numpy array in L / RGB / RGBA channel order, first row
    at the top.
    """
    if image.image_type == ImageType.BLACK_AND_WHITE and image.bit_depth == 8:
        shape = (image.height, image.width)
        order = None
    elif image.image_type == ImageType.TRUE_COLOR and image.bit_depth == 24:
        shape = (image.height, image.width, 3)
        order = [2, 1, 0]
    elif image.image_type == ImageType.TRUE_COLOR and image.bit_depth == 32:
        shape = (image.height, image.width, 4)
        order = [2, 1, 0, 3]
    else:
        raise UnsupportedImageType(
            f"Cannot convert a {image.bit_depth}-bit {image.image_type.name} "
            "image to an array"
        )

    pixels = np.frombuffer(image.data, dtype=np.uint8).reshape(shape)
    if order is not None:
        pixels = pixels[:, :, order]
    if not image.header.descriptor & TOP_LEFT_ORIGIN:
        pixels = pixels[::-1]

    return np.ascontiguousarray(pixels)
