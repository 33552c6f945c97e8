"""Module containing image models for each stage of the pipeline.

Each stage produces a new immutable object rather than modifying its input,
so a stage's output type states which checks the bytes have passed.
"""

from dataclasses import dataclass

from fish_recognition.client.image_format_detector import ImageFormat


@dataclass(frozen=True)
class RawImage:
    """Image bytes exactly as uploaded.

    Attributes:
        data: The uploaded bytes.
        filename: Original filename. Informational only, never used to
            decide the format.

    """

    data: bytes
    filename: str | None = None

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ValidatedImage:
    """Upload that passed size checks and decoded as JPEG or PNG."""

    data: bytes
    image_format: ImageFormat

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NormalizedImage:
    """JPEG re-encoding of a validated image, metadata stripped."""

    data: bytes

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class CompressedImage:
    """Normalized image that fits the transport budget.

    Attributes:
        data: JPEG bytes to send to the classifier.
        quality: The JPEG quality the bytes were re-encoded at, or None when
            the normalized image already fitted and was passed through.

    """

    data: bytes
    quality: int | None = None

    def __len__(self) -> int:
        return len(self.data)
