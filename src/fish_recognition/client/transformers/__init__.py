"""Image transformers applied before classification."""

from fish_recognition.client.transformers.jpeg_normalizer import (
    JpegNormalizer,
    normalize_image,
)
from fish_recognition.client.transformers.size_compressor import (
    CompressionOptions,
    SizeCompressor,
    compress_to_budget,
)
from fish_recognition.client.transformers.validator import validate_image

__all__ = [
    "CompressionOptions",
    "JpegNormalizer",
    "SizeCompressor",
    "compress_to_budget",
    "normalize_image",
    "validate_image",
]
