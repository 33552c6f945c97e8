"""Utility for detecting image formats from raw bytes."""

import enum


class ImageFormat(enum.Enum):
    """Raster formats recognised by their magic number signatures."""

    UNSPECIFIED = "unspecified"
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    BMP = "bmp"
    WEBP = "webp"
    TIFF = "tiff"

    @classmethod
    def from_pil(cls, pil_format: str | None) -> "ImageFormat":
        """Map a Pillow format name (``Image.format``) onto this enum."""
        if not pil_format:
            return cls.UNSPECIFIED
        name = pil_format.lower()
        # Multi-picture JPEGs from cameras open as MPO
        if name == "mpo":
            return cls.JPEG
        try:
            return cls(name)
        except ValueError:
            return cls.UNSPECIFIED


def detect_image_format(data: bytes) -> ImageFormat:
    """Detect image format from raw bytes using magic number signatures.

    Args:
        data: Raw image bytes to analyze

    Returns:
        ImageFormat enum value representing the detected format

    """
    if not data:
        return ImageFormat.UNSPECIFIED

    # PNG: starts with \x89PNG
    if len(data) >= 4 and data[:4] == b"\x89PNG":
        return ImageFormat.PNG

    # JPEG: starts with \xFF\xD8\xFF
    if len(data) >= 3 and data[:3] == b"\xff\xd8\xff":
        return ImageFormat.JPEG

    if len(data) >= 6 and data[:6] in (b"GIF87a", b"GIF89a"):
        return ImageFormat.GIF

    if len(data) >= 2 and data[:2] == b"BM":
        return ImageFormat.BMP

    # WebP: starts with RIFF....WEBP
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return ImageFormat.WEBP

    # TIFF: starts with II* or MM*
    if len(data) >= 4 and data[:4] in (b"II*\x00", b"MM\x00*"):
        return ImageFormat.TIFF

    return ImageFormat.UNSPECIFIED
