import struct
from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidImageType, InvalidSize

# TGA Header is 18 bytes, all multi-byte fields little endian:
# id_length(1), color_map_type(1), image_type(1),
# color_map_first_index(2), color_map_length(2), color_map_entry_depth(1),
# x_origin(2), y_origin(2), width(2), height(2), pixel_depth(1), descriptor(1)
HEADER_STRUCT = "<BBBHHBHHHHBB"
HEADER_SIZE = struct.calcsize(HEADER_STRUCT)


class ImageType(IntEnum):
    NO_IMAGE = 0
    COLOR_MAPPED = 1
    TRUE_COLOR = 2
    BLACK_AND_WHITE = 3
    RLE_COLOR_MAPPED = 9
    RLE_TRUE_COLOR = 10
    RLE_BLACK_AND_WHITE = 11

    @property
    def is_rle(self) -> bool:
        return self in (
            ImageType.RLE_COLOR_MAPPED,
            ImageType.RLE_TRUE_COLOR,
            ImageType.RLE_BLACK_AND_WHITE,
        )


@dataclass(frozen=True)
class TGAHeader:
    """
    TGA file header (18 bytes).

    Instances are immutable: the pixel buffer of an image is sized from the
    header when the image is built, so a changed header means a new header
    (see `dataclasses.replace`).
    """

    image_type: ImageType
    width: int = 0
    height: int = 0
    image_bit_depth: int = 0
    id_length: int = 0
    has_color_map: bool = False
    color_map_first_index: int = 0
    color_map_length: int = 0
    color_map_entry_depth: int = 0
    x_origin: int = 0
    y_origin: int = 0
    descriptor: int = 0  # Opaque, carried through untouched

    @classmethod
    def decode(cls, data: bytes) -> "TGAHeader":
        """
        Decode the leading 18 bytes of a TGA file.

        :param data: Bytes-like object starting with a TGA header.
        :return: TGAHeader
        """
        if len(data) < HEADER_SIZE:
            raise InvalidSize(
                f"TGA.decode: {len(data)} bytes is too short for a header"
            )

        (
            id_length,
            color_map_type,
            type_code,
            color_map_first_index,
            color_map_length,
            color_map_entry_depth,
            x_origin,
            y_origin,
            width,
            height,
            image_bit_depth,
            descriptor,
        ) = struct.unpack(HEADER_STRUCT, bytes(data[:HEADER_SIZE]))

        try:
            image_type = ImageType(type_code)
        except ValueError:
            raise InvalidImageType(
                f"TGA.decode: Unknown image type {type_code}"
            ) from None

        return cls(
            image_type=image_type,
            width=width,
            height=height,
            image_bit_depth=image_bit_depth,
            id_length=id_length,
            has_color_map=color_map_type != 0,
            color_map_first_index=color_map_first_index,
            color_map_length=color_map_length,
            color_map_entry_depth=color_map_entry_depth,
            x_origin=x_origin,
            y_origin=y_origin,
            descriptor=descriptor,
        )

    def encode(self) -> bytes:
        return struct.pack(
            HEADER_STRUCT,
            self.id_length,
            1 if self.has_color_map else 0,
            self.image_type,
            self.color_map_first_index,
            self.color_map_length,
            self.color_map_entry_depth,
            self.x_origin,
            self.y_origin,
            self.width,
            self.height,
            self.image_bit_depth,
            self.descriptor,
        )

    @property
    def byte_depth(self) -> int:
        return self.image_bit_depth // 8

    @property
    def image_size(self) -> int:
        """Size of the pixel data in bytes."""
        return self.width * self.height * self.byte_depth

    @property
    def color_map_size(self) -> int:
        """Size of the raw color map in bytes (15-bit entries take 2 bytes)."""
        if not self.has_color_map:
            return 0
        return self.color_map_length * ((self.color_map_entry_depth + 7) // 8)

    @property
    def file_size(self) -> int:
        """Minimum length of a file carrying this header."""
        return HEADER_SIZE + self.id_length + self.color_map_size + self.image_size
