"""JPEG normalizer for validated images.

This module converts validated images into the canonical JPEG encoding sent
to the classifier. Every image goes through one decode/encode round trip,
which both converts PNG to JPEG and drops EXIF and other non-pixel chunks
from images that were already JPEG.
"""

import logging

from fish_recognition.client.consts import (
    MAX_QUALITY,
    MIN_QUALITY,
    NORMALIZE_QUALITY,
)
from fish_recognition.client.models import NormalizedImage, ValidatedImage
from fish_recognition.client.transformers.core import (
    decode_image,
    encode_jpeg,
)

logger = logging.getLogger(__name__)


class JpegNormalizer:
    """Re-encodes images as metadata-free JPEG at a fixed quality.

    Attributes:
        quality: JPEG quality setting (1-100, default 95). Kept high so the
            classifier sees close to the original pixels.

    """

    def __init__(self, *, quality: int = NORMALIZE_QUALITY) -> None:
        """Initialize the normalizer.

        Args:
            quality: JPEG quality setting from 1 (worst) to 100 (best).

        Raises:
            ValueError: If quality is not between 1 and 100.

        """
        if not MIN_QUALITY <= quality <= MAX_QUALITY:
            msg = "JPEG quality must be between 1 and 100"
            raise ValueError(msg)

        self.quality = quality

    def normalize(
        self, image: ValidatedImage | NormalizedImage
    ) -> NormalizedImage:
        """Re-encode an image as JPEG.

        Accepts already normalized images so normalizing twice is safe; the
        output is not byte-identical across passes but is always JPEG.

        Args:
            image: The image to normalize.

        Returns:
            NormalizedImage holding the JPEG bytes.

        Raises:
            DecodeError: If the image bytes cannot be decoded.
            EncodeError: If the JPEG cannot be written.

        """
        pixels = decode_image(image.data)
        data = encode_jpeg(pixels, self.quality)
        logger.debug(
            "Normalized image to JPEG: %d -> %d bytes",
            len(image.data),
            len(data),
        )
        return NormalizedImage(data=data)


def normalize_image(
    image: ValidatedImage | NormalizedImage,
    quality: int = NORMALIZE_QUALITY,
) -> NormalizedImage:
    """Normalize an image with a one-off JpegNormalizer."""
    return JpegNormalizer(quality=quality).normalize(image)
