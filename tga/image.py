from dataclasses import replace

from .color import COLOR_BY_DEPTH, Color, valid_color, valid_depth
from .errors import (
    InvalidColor,
    InvalidCoordinate,
    InvalidImageType,
    InvalidPixelDepth,
    InvalidSize,
    UnsupportedImageType,
)
from .header import HEADER_SIZE, ImageType, TGAHeader

MAX_DIMENSION = 0xFFFF
MAX_ID_LENGTH = 0xFF


class TGAImage:
    """
    An uncompressed TGA image held in memory.

    The image owns three byte regions (id, color map, pixel data) whose sizes
    are fixed by the header. Pixels are stored row by row, left to right,
    each one `bit_depth // 8` bytes, with no row padding.
    """

    def __init__(self, header: TGAHeader, image_id=b"", color_map=b"", data=None):
        if data is None:
            data = bytes(header.image_size)

        image_id = bytearray(image_id)
        color_map = bytearray(color_map)
        data = bytearray(data)

        # --- Validation ---
        for name, region, expected in (
            ("id", image_id, header.id_length),
            ("color map", color_map, header.color_map_size),
            ("pixel data", data, header.image_size),
        ):
            if len(region) != expected:
                raise InvalidSize(
                    f"TGA: Header declares {expected} bytes of {name}, got {len(region)}"
                )

        self._header = header
        self._id = image_id
        self._color_map = color_map
        self._data = data

    @classmethod
    def new(
        cls, image_type: ImageType, width: int, height: int, bit_depth: int
    ) -> "TGAImage":
        """
        Create a blank (zero-filled) image.

        :param image_type: One of ImageType.
        :param width: Width in pixels (0..65535).
        :param height: Height in pixels (0..65535).
        :param bit_depth: Bits per pixel, must suit the image type.
        :return: TGAImage
        """
        try:
            image_type = ImageType(image_type)
        except ValueError:
            raise InvalidImageType(
                f"TGA.new: Unknown image type {image_type}"
            ) from None

        if not valid_depth(image_type, bit_depth):
            raise InvalidPixelDepth(
                f"TGA.new: Bit depth {bit_depth} is invalid for {image_type.name}"
            )

        if not (0 <= width <= MAX_DIMENSION):
            raise ValueError("TGA.new: Invalid width")

        if not (0 <= height <= MAX_DIMENSION):
            raise ValueError("TGA.new: Invalid height")

        header = TGAHeader(
            image_type=image_type,
            width=width,
            height=height,
            image_bit_depth=bit_depth,
        )
        return cls(header)

    @classmethod
    def decode(cls, data: bytes) -> "TGAImage":
        """
        Decode a TGA file given as a bytes/bytearray object.

        Bytes past the declared file size (e.g. a TGA 2.0 footer) are ignored.

        :param data: Bytes containing the TGA file.
        :return: TGAImage
        """
        # --- Header Parsing ---
        if len(data) < HEADER_SIZE:
            raise InvalidSize(
                f"TGA.decode: {len(data)} bytes is too short for a header"
            )

        header = TGAHeader.decode(data)

        # --- Validation ---
        if len(data) < header.file_size:
            raise InvalidSize(
                f"TGA.decode: Header declares {header.file_size} bytes, "
                f"got {len(data)}"
            )

        if not valid_depth(header.image_type, header.image_bit_depth):
            raise InvalidPixelDepth(
                f"TGA.decode: Bit depth {header.image_bit_depth} is invalid "
                f"for {header.image_type.name}"
            )

        # --- Slicing ---
        # id, then color map, then pixel data, back to back
        id_end = HEADER_SIZE + header.id_length
        color_map_end = id_end + header.color_map_size
        data_end = color_map_end + header.image_size

        return cls(
            header,
            image_id=data[HEADER_SIZE:id_end],
            color_map=data[id_end:color_map_end],
            data=data[color_map_end:data_end],
        )

    def encode(self) -> bytes:
        """
        Encode the image as a TGA file.

        :return: bytes object containing the TGA file content.
        """
        result = bytearray(self._header.file_size)

        offset = 0
        for chunk in (self._header.encode(), self._id, self._color_map, self._data):
            result[offset : offset + len(chunk)] = chunk
            offset += len(chunk)

        return bytes(result)

    @classmethod
    def from_file(cls, filepath) -> "TGAImage":
        with open(filepath, "rb") as f:
            content = f.read()
        return cls.decode(content)

    def to_file(self, filepath):
        with open(filepath, "wb") as f:
            f.write(self.encode())

    # --- Accessors ---

    @property
    def header(self) -> TGAHeader:
        return self._header

    @property
    def image_type(self) -> ImageType:
        return self._header.image_type

    @property
    def width(self) -> int:
        return self._header.width

    @property
    def height(self) -> int:
        return self._header.height

    @property
    def bit_depth(self) -> int:
        return self._header.image_bit_depth

    @property
    def id(self) -> bytes:
        return bytes(self._id)

    @property
    def color_map(self) -> bytes:
        return bytes(self._color_map)

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def set_id(self, image_id):
        """Replace the image id field (at most 255 bytes)."""
        image_id = bytes(image_id)
        if len(image_id) > MAX_ID_LENGTH:
            raise ValueError("TGA.set_id: Image id is longer than 255 bytes")

        self._header = replace(self._header, id_length=len(image_id))
        self._id = bytearray(image_id)

    # --- Pixels ---

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidCoordinate(
                f"TGA: ({x}, {y}) is outside {self.width}x{self.height}"
            )
        return (x + y * self.width) * self._header.byte_depth

    def _check_accessible(self, operation: str):
        if self.image_type.is_rle:
            raise UnsupportedImageType(
                f"TGA.{operation}: {self.image_type.name} pixel data is run-length "
                "encoded"
            )

    def set_pixel(self, x: int, y: int, color: Color):
        """
        Overwrite one pixel.

        Nothing is written unless every check passes.

        :param x: Column, 0 is the left edge.
        :param y: Row, 0 is the first row of the pixel data.
        :param color: Greyscale, RGB16, RGB24 or RGBA matching the image.
        """
        offset = self._offset(x, y)

        if not valid_color(self.image_type, color):
            raise InvalidColor(
                f"TGA.set_pixel: {type(color).__name__} cannot be stored "
                f"in {self.image_type.name}"
            )

        if (
            not valid_depth(self.image_type, color.bit_depth)
            or color.bit_depth != self.bit_depth
        ):
            raise InvalidPixelDepth(
                f"TGA.set_pixel: {color.bit_depth}-bit color in a "
                f"{self.bit_depth}-bit image"
            )

        self._check_accessible("set_pixel")

        self._data[offset : offset + color.byte_depth] = color.data

    def get_pixel(self, x: int, y: int) -> Color:
        offset = self._offset(x, y)
        self._check_accessible("get_pixel")

        color_cls = COLOR_BY_DEPTH.get(self.bit_depth)
        if color_cls is None:
            raise UnsupportedImageType(
                f"TGA.get_pixel: {self.image_type.name} has no pixels"
            )

        return color_cls(self._data[offset : offset + self._header.byte_depth])

    def __eq__(self, other):
        if not isinstance(other, TGAImage):
            return NotImplemented
        return (
            self._header == other._header
            and self._id == other._id
            and self._color_map == other._color_map
            and self._data == other._data
        )

    def __repr__(self):
        return (
            f"TGAImage({self.image_type.name}, {self.width}x{self.height}, "
            f"{self.bit_depth}-bit)"
        )
