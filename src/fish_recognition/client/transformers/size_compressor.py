"""Size compressor that fits normalized images into the transport budget."""

import logging
from dataclasses import dataclass

from fish_recognition.client.consts import (
    FLOOR_QUALITY,
    MAX_QUALITY,
    MIN_QUALITY,
    QUALITY_STEP,
    START_QUALITY,
    TARGET_IMAGE_BYTES,
    TRANSPORT_CEILING_BYTES,
)
from fish_recognition.client.models import CompressedImage, NormalizedImage
from fish_recognition.client.transformers.core import (
    base64_length,
    decode_image,
    encode_jpeg,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompressionOptions:
    """Options controlling the quality search.

    Attributes:
        start_quality: First JPEG quality tried. Defaults to 90.
        floor_quality: Lowest JPEG quality tried, inclusive. Defaults to 50.
        step: Amount the quality drops between attempts. Defaults to 5.
        target_bytes: Size an encoding must not exceed to be accepted.
            Defaults to 3.5 MiB, leaving headroom below the transport
            ceiling for form-encoding overhead.
        transport_ceiling: Hard limit on both the raw and the base64
            expanded size for an image to be passed through untouched.
            Defaults to 4 MiB.

    """

    start_quality: int = START_QUALITY
    floor_quality: int = FLOOR_QUALITY
    step: int = QUALITY_STEP
    target_bytes: int = TARGET_IMAGE_BYTES
    transport_ceiling: int = TRANSPORT_CEILING_BYTES

    def __post_init__(self) -> None:
        """Reject option combinations that make the search meaningless."""
        floor, start = self.floor_quality, self.start_quality
        if not MIN_QUALITY <= floor <= start <= MAX_QUALITY:
            msg = "Qualities must satisfy 1 <= floor <= start <= 100"
            raise ValueError(msg)
        if self.step < 1:
            msg = "Quality step must be positive"
            raise ValueError(msg)
        if self.target_bytes < 1 or self.transport_ceiling < 1:
            msg = "Byte budgets must be positive"
            raise ValueError(msg)

    @property
    def qualities(self) -> range:
        """Qualities tried, highest first."""
        return range(self.start_quality, self.floor_quality - 1, -self.step)


class SizeCompressor:
    """Re-encodes JPEG at decreasing quality until it fits a byte budget.

    The first quality from the top that fits is accepted, which favours
    speed over finding the highest quality that would fit. When even the
    floor quality is too big the last encoding is returned anyway; callers
    get a best effort image rather than an error.
    """

    def __init__(self, options: CompressionOptions | None = None) -> None:
        """Initialize the compressor.

        Args:
            options: Quality search configuration. Defaults to
                ``CompressionOptions()``.

        """
        self.options = options or CompressionOptions()

    def fits_transport(self, size: int) -> bool:
        """Check whether ``size`` bytes can be sent without compression."""
        return (
            size <= self.options.target_bytes
            and base64_length(size) <= self.options.transport_ceiling
        )

    def compress(self, image: NormalizedImage) -> CompressedImage:
        """Compress an image into the configured budget.

        Args:
            image: Normalized JPEG image.

        Returns:
            The input unchanged when it already fits, otherwise the first
            re-encoding within ``target_bytes``, or the smaller of the input
            and the floor-quality encoding when nothing fits.

        Raises:
            DecodeError: If the image bytes cannot be decoded.
            EncodeError: If a JPEG cannot be written.

        """
        if self.fits_transport(len(image.data)):
            return CompressedImage(data=image.data)

        pixels = decode_image(image.data)
        data = image.data
        quality = None
        for quality in self.options.qualities:
            data = encode_jpeg(pixels, quality)
            logger.debug(
                "Compressed at quality %d: %d bytes", quality, len(data)
            )
            if len(data) <= self.options.target_bytes:
                return CompressedImage(data=data, quality=quality)

        logger.warning(
            "Image still %d bytes at floor quality %d, budget is %d bytes",
            len(data),
            self.options.floor_quality,
            self.options.target_bytes,
        )
        if len(data) > len(image.data):
            return CompressedImage(data=image.data)
        return CompressedImage(data=data, quality=quality)


def compress_to_budget(
    image: NormalizedImage, budget_bytes: int = TARGET_IMAGE_BYTES
) -> CompressedImage:
    """Compress an image with the default quality search and given budget."""
    options = CompressionOptions(target_bytes=budget_bytes)
    return SizeCompressor(options).compress(image)
