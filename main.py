from tga import RGB24, ImageType, TGAImage

OUTPUT_BLANK = "test0.tga"
OUTPUT_PIXEL = "test1.tga"

if __name__ == "__main__":
    # Blank full HD image
    image = TGAImage.new(ImageType.TRUE_COLOR, 1920, 1080, 24)
    image.to_file(OUTPUT_BLANK)
    print(f"Wrote {image!r} to {OUTPUT_BLANK} ({image.header.file_size} bytes)")

    # Small image with the first pixel set to red (TGA stores BGR)
    image = TGAImage.new(ImageType.TRUE_COLOR, 25, 25, 24)
    image.set_pixel(0, 0, RGB24([0, 0, 255]))
    image.to_file(OUTPUT_PIXEL)
    print(f"Wrote {image!r} to {OUTPUT_PIXEL} ({image.header.file_size} bytes)")
