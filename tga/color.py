from .header import ImageType


class Color:
    """
    A single pixel value, stored as the raw bytes written to the pixel data.

    Byte order is the TGA one (blue first for the RGB variants), nothing is
    reordered on write.
    """

    BIT_DEPTH = 0

    __slots__ = ("_data",)

    def __init__(self, data):
        data = bytes(data)
        if len(data) != self.byte_depth:
            raise ValueError(
                f"{type(self).__name__} needs {self.byte_depth} bytes, got {len(data)}"
            )
        self._data = data

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def bit_depth(self) -> int:
        return self.BIT_DEPTH

    @property
    def byte_depth(self) -> int:
        return self.BIT_DEPTH // 8

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash((type(self), self._data))

    def __repr__(self):
        return f"{type(self).__name__}({list(self._data)})"


class Greyscale(Color):
    BIT_DEPTH = 8


class RGB16(Color):
    BIT_DEPTH = 16


class RGB24(Color):
    BIT_DEPTH = 24


class RGBA(Color):
    BIT_DEPTH = 32


COLOR_BY_DEPTH = {cls.BIT_DEPTH: cls for cls in (Greyscale, RGB16, RGB24, RGBA)}

_TRUE_COLORS = frozenset((RGB16, RGB24, RGBA))
_TRUE_DEPTHS = frozenset((16, 24, 32))

ALLOWED_COLORS = {
    ImageType.NO_IMAGE: frozenset(),
    ImageType.COLOR_MAPPED: _TRUE_COLORS,
    ImageType.TRUE_COLOR: _TRUE_COLORS,
    ImageType.BLACK_AND_WHITE: frozenset((Greyscale,)),
    ImageType.RLE_COLOR_MAPPED: _TRUE_COLORS,
    ImageType.RLE_TRUE_COLOR: _TRUE_COLORS,
    ImageType.RLE_BLACK_AND_WHITE: frozenset((Greyscale,)),
}

ALLOWED_DEPTHS = {
    ImageType.NO_IMAGE: frozenset((0,)),
    ImageType.COLOR_MAPPED: _TRUE_DEPTHS,
    ImageType.TRUE_COLOR: _TRUE_DEPTHS,
    ImageType.BLACK_AND_WHITE: frozenset((8,)),
    ImageType.RLE_COLOR_MAPPED: _TRUE_DEPTHS,
    ImageType.RLE_TRUE_COLOR: _TRUE_DEPTHS,
    ImageType.RLE_BLACK_AND_WHITE: frozenset((8,)),
}


def valid_color(image_type: ImageType, color: Color) -> bool:
    return type(color) in ALLOWED_COLORS.get(image_type, frozenset())


def valid_depth(image_type: ImageType, bit_depth: int) -> bool:
    return bit_depth in ALLOWED_DEPTHS.get(image_type, frozenset())
