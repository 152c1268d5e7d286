import pytest

from tga import (
    RGB16,
    RGB24,
    RGBA,
    Greyscale,
    ImageType,
    InvalidColor,
    InvalidCoordinate,
    InvalidImageType,
    InvalidPixelDepth,
    InvalidSize,
    TGAError,
    TGAHeader,
    TGAImage,
    UnsupportedImageType,
)


def test_new_true_color():
    image = TGAImage.new(ImageType.TRUE_COLOR, 25, 25, 24)

    assert image.data == bytes(25 * 25 * 3)
    assert image.id == b""
    assert image.color_map == b""
    assert image.header == TGAHeader(
        image_type=ImageType.TRUE_COLOR, width=25, height=25, image_bit_depth=24
    )


@pytest.mark.parametrize("width, height", [(0, 0), (1, 65535), (65535, 1), (3, 7)])
def test_new_sizes(width, height):
    image = TGAImage.new(ImageType.TRUE_COLOR, width, height, 24)
    assert len(image.data) == width * height * 3
    assert image.data.count(0) == width * height * 3


def test_new_invalid_depth():
    with pytest.raises(InvalidPixelDepth):
        TGAImage.new(ImageType.BLACK_AND_WHITE, 10, 10, 24)
    with pytest.raises(InvalidPixelDepth):
        TGAImage.new(ImageType.TRUE_COLOR, 10, 10, 8)
    with pytest.raises(InvalidPixelDepth):
        TGAImage.new(ImageType.NO_IMAGE, 10, 10, 8)


def test_new_invalid_dimensions():
    with pytest.raises(ValueError):
        TGAImage.new(ImageType.TRUE_COLOR, 65536, 1, 24)
    with pytest.raises(ValueError):
        TGAImage.new(ImageType.TRUE_COLOR, 1, -1, 24)


def test_set_pixel():
    image = TGAImage.new(ImageType.TRUE_COLOR, 25, 25, 24)
    image.set_pixel(0, 0, RGB24([0, 0, 255]))

    assert image.data[:3] == b"\x00\x00\xff"
    assert image.data[3:] == bytes(25 * 25 * 3 - 3)


def test_set_pixel_offset():
    image = TGAImage.new(ImageType.TRUE_COLOR, 4, 3, 32)
    image.set_pixel(1, 2, RGBA([1, 2, 3, 4]))

    offset = (1 + 2 * 4) * 4
    assert image.data[offset : offset + 4] == b"\x01\x02\x03\x04"
    assert image.data.count(0) == 4 * 3 * 4 - 4
    assert image.get_pixel(1, 2) == RGBA([1, 2, 3, 4])
    assert image.get_pixel(0, 0) == RGBA([0, 0, 0, 0])


@pytest.mark.parametrize("x, y", [(25, 25), (25, 0), (0, 25), (-1, 0), (100, 3)])
def test_set_pixel_out_of_bounds(x, y):
    image = TGAImage.new(ImageType.TRUE_COLOR, 25, 25, 24)
    with pytest.raises(InvalidCoordinate):
        image.set_pixel(x, y, RGB24([255, 255, 255]))
    assert image.data == bytes(25 * 25 * 3)


def test_set_pixel_coordinate_checked_first():
    image = TGAImage.new(ImageType.TRUE_COLOR, 2, 2, 24)
    with pytest.raises(InvalidCoordinate):
        image.set_pixel(2, 0, Greyscale([1]))


def test_set_pixel_greyscale_in_true_color():
    image = TGAImage.new(ImageType.TRUE_COLOR, 2, 2, 24)
    with pytest.raises(InvalidColor):
        image.set_pixel(0, 0, Greyscale([1]))
    assert image.data == bytes(12)


def test_set_pixel_color_in_black_and_white():
    image = TGAImage.new(ImageType.BLACK_AND_WHITE, 2, 2, 8)
    with pytest.raises(InvalidColor):
        image.set_pixel(0, 0, RGB24([1, 2, 3]))

    image.set_pixel(1, 1, Greyscale([200]))
    assert image.data == b"\x00\x00\x00\xc8"
    assert image.get_pixel(1, 1) == Greyscale([200])


@pytest.mark.parametrize("color", [RGB16([1, 2]), RGBA([1, 2, 3, 4])])
def test_set_pixel_depth_mismatch(color):
    image = TGAImage.new(ImageType.TRUE_COLOR, 2, 2, 24)
    with pytest.raises(InvalidPixelDepth):
        image.set_pixel(0, 0, color)
    assert image.data == bytes(12)


def test_set_pixel_no_image():
    image = TGAImage.new(ImageType.NO_IMAGE, 2, 2, 0)
    with pytest.raises(InvalidColor):
        image.set_pixel(0, 0, RGB24([1, 2, 3]))
    with pytest.raises(UnsupportedImageType):
        image.get_pixel(0, 0)


def test_rle_pixels_unsupported():
    image = TGAImage.new(ImageType.RLE_TRUE_COLOR, 2, 2, 24)
    with pytest.raises(UnsupportedImageType):
        image.set_pixel(0, 0, RGB24([1, 2, 3]))
    with pytest.raises(UnsupportedImageType):
        image.get_pixel(0, 0)
    assert image.data == bytes(12)


def test_color_mapped_pixels():
    image = TGAImage.new(ImageType.COLOR_MAPPED, 2, 1, 16)
    image.set_pixel(1, 0, RGB16([0x34, 0x12]))
    assert image.data == b"\x00\x00\x34\x12"


def test_errors_are_value_errors():
    assert issubclass(TGAError, ValueError)
    for cls in (InvalidSize, InvalidColor, InvalidCoordinate, InvalidImageType):
        assert issubclass(cls, TGAError)


def test_encode_layout():
    image = TGAImage.new(ImageType.BLACK_AND_WHITE, 3, 2, 8)
    image.set_id(b"hello")
    image.set_pixel(2, 1, Greyscale([9]))
    encoded = image.encode()

    assert len(encoded) == 18 + 5 + 6
    assert encoded[0] == 5
    assert encoded[2] == 3
    assert encoded[12:16] == b"\x03\x00\x02\x00"
    assert encoded[16] == 8
    assert encoded[18:23] == b"hello"
    assert encoded[23:] == b"\x00\x00\x00\x00\x00\x09"


def test_set_id_too_long():
    image = TGAImage.new(ImageType.TRUE_COLOR, 1, 1, 24)
    with pytest.raises(ValueError):
        image.set_id(bytes(256))
    assert image.header.id_length == 0


def test_decode_round_trip_with_id_and_color_map():
    header = TGAHeader(
        image_type=ImageType.COLOR_MAPPED,
        width=3,
        height=2,
        image_bit_depth=16,
        id_length=4,
        has_color_map=True,
        color_map_length=2,
        color_map_entry_depth=24,
        x_origin=5,
        descriptor=0x20,
    )
    data = header.encode() + b"name" + bytes(range(6)) + bytes(range(100, 112))
    image = TGAImage.decode(data)

    assert image.header == header
    assert image.id == b"name"
    assert image.color_map == bytes(range(6))
    assert image.data == bytes(range(100, 112))
    assert image.encode() == data
    assert TGAImage.decode(image.encode()) == image


def test_decode_copies_input():
    data = bytearray(TGAImage.new(ImageType.BLACK_AND_WHITE, 2, 2, 8).encode())
    image = TGAImage.decode(data)
    data[18] = 0xFF
    assert image.data == bytes(4)


def test_decode_ignores_trailing_bytes():
    encoded = TGAImage.new(ImageType.TRUE_COLOR, 2, 2, 24).encode()
    footer = bytes(8) + b"TRUEVISION-XFILE.\x00"
    image = TGAImage.decode(encoded + footer)
    assert image.encode() == encoded


def test_decode_too_short():
    with pytest.raises(InvalidSize):
        TGAImage.decode(bytes(10))


def test_decode_truncated_pixels():
    encoded = TGAImage.new(ImageType.TRUE_COLOR, 4, 4, 24).encode()
    with pytest.raises(InvalidSize):
        TGAImage.decode(encoded[:-1])


def test_decode_unknown_type():
    encoded = bytearray(TGAImage.new(ImageType.TRUE_COLOR, 1, 1, 24).encode())
    encoded[2] = 5
    with pytest.raises(InvalidImageType):
        TGAImage.decode(bytes(encoded))


def test_decode_invalid_depth():
    header = TGAHeader(
        image_type=ImageType.BLACK_AND_WHITE, width=2, height=2, image_bit_depth=24
    )
    with pytest.raises(InvalidPixelDepth):
        TGAImage.decode(header.encode() + bytes(12))


def test_decode_rle_keeps_bytes():
    header = TGAHeader(
        image_type=ImageType.RLE_BLACK_AND_WHITE, width=2, height=2, image_bit_depth=8
    )
    data = header.encode() + b"\x01\x02\x03\x04"
    assert TGAImage.decode(data).encode() == data


def test_file_round_trip(tmp_path):
    path = tmp_path / "pixel.tga"
    image = TGAImage.new(ImageType.TRUE_COLOR, 25, 25, 24)
    image.set_pixel(0, 0, RGB24([0, 0, 255]))
    image.to_file(path)

    assert path.stat().st_size == 18 + 25 * 25 * 3
    assert TGAImage.from_file(path) == image


def test_missing_file_is_os_error(tmp_path):
    with pytest.raises(OSError) as excinfo:
        TGAImage.from_file(tmp_path / "missing.tga")
    assert not isinstance(excinfo.value, TGAError)


def test_full_hd_round_trip():
    image = TGAImage.new(ImageType.TRUE_COLOR, 1920, 1080, 24)
    encoded = image.encode()

    assert len(encoded) == 18 + 0 + 0 + 1920 * 1080 * 3
    decoded = TGAImage.decode(encoded)
    assert decoded.header == image.header
    assert (decoded.width, decoded.height, decoded.bit_depth) == (1920, 1080, 24)
    assert decoded.data == image.data


def test_new_unknown_type():
    with pytest.raises(InvalidImageType):
        TGAImage.new(5, 2, 2, 24)


def test_pixel_data_must_match_header():
    header = TGAHeader(
        image_type=ImageType.TRUE_COLOR, width=2, height=2, image_bit_depth=24
    )
    with pytest.raises(InvalidSize):
        TGAImage(header, data=bytes(100))
    with pytest.raises(InvalidSize):
        TGAImage(header, data=b"\x01\x02\x03")

    image = TGAImage(header, data=bytes(range(12)))
    assert len(image.encode()) == header.file_size == 30


def test_id_must_match_header():
    header = TGAHeader(
        image_type=ImageType.BLACK_AND_WHITE,
        width=1,
        height=1,
        image_bit_depth=8,
        id_length=3,
    )
    with pytest.raises(InvalidSize):
        TGAImage(header, image_id=b"ab")
    with pytest.raises(InvalidSize):
        TGAImage(header, image_id=b"abcd")


def test_color_map_must_match_header():
    header = TGAHeader(
        image_type=ImageType.COLOR_MAPPED,
        width=1,
        height=1,
        image_bit_depth=16,
        has_color_map=True,
        color_map_length=2,
        color_map_entry_depth=24,
    )
    with pytest.raises(InvalidSize):
        TGAImage(header, color_map=bytes(5))
    assert TGAImage(header, color_map=bytes(6)).color_map == bytes(6)


def test_decode_no_image_header():
    data = TGAHeader(ImageType.NO_IMAGE).encode()
    assert len(data) == 18

    image = TGAImage.decode(data)
    assert image.image_type is ImageType.NO_IMAGE
    assert image.bit_depth == 0
    assert image.header.file_size == 18
    assert image.data == b""
    assert image.encode() == data
