class TGAError(ValueError):
    """Base class for every data error raised by the TGA codec."""


class InvalidPixelDepth(TGAError):
    """Bit depth not allowed for the image type, or not the image's depth."""


class InvalidImageType(TGAError):
    """Unrecognized image type code in a header."""


class InvalidSize(TGAError):
    """Buffer shorter than a header or than the header's declared file size."""


class InvalidCoordinate(TGAError):
    """Pixel coordinate outside the image."""


class InvalidColor(TGAError):
    """Color variant that the image type cannot store."""


class UnsupportedImageType(TGAError):
    """Image type that is understood as a tag but whose pixels cannot be accessed."""
