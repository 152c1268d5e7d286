from PIL import Image

from tga import TGAImage, image_from_array, image_to_array, load_image

INPUT_IMAGE = "fruits.png"


def png_to_tga(png_path, tga_path):
    pixel_data, desc = load_image(png_path)

    image = image_from_array(pixel_data)
    image.to_file(tga_path)
    print(
        f"Converted {png_path} to {tga_path}: "
        f"{desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )


def tga_to_png(tga_path, png_path):
    image = TGAImage.from_file(tga_path)

    img = Image.fromarray(image_to_array(image))
    img.save(png_path)
    print(f"Converted {tga_path} to {png_path}")


if __name__ == "__main__":
    # Example conversions
    png_to_tga(INPUT_IMAGE, "fruits_converted.tga")
    tga_to_png("fruits_converted.tga", "fruits_reconverted.png")
    assert (
        Image.open(INPUT_IMAGE).convert("RGB").tobytes()
        == Image.open("fruits_reconverted.png").convert("RGB").tobytes()
    ), "Reconverted image does not match original!"
