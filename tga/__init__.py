from .color import RGB16, RGB24, RGBA, Color, Greyscale, valid_color, valid_depth
from .errors import (
    InvalidColor,
    InvalidCoordinate,
    InvalidImageType,
    InvalidPixelDepth,
    InvalidSize,
    TGAError,
    UnsupportedImageType,
)
from .header import HEADER_SIZE, ImageType, TGAHeader
from .image import TGAImage
from .utils import image_from_array, image_to_array, load_image

__all__ = [
    "TGAImage",
    "TGAHeader",
    "ImageType",
    "HEADER_SIZE",
    "Color",
    "Greyscale",
    "RGB16",
    "RGB24",
    "RGBA",
    "valid_color",
    "valid_depth",
    "TGAError",
    "InvalidPixelDepth",
    "InvalidImageType",
    "InvalidSize",
    "InvalidCoordinate",
    "InvalidColor",
    "UnsupportedImageType",
    "load_image",
    "image_from_array",
    "image_to_array",
]
