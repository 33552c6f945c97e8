"""Upload validation performed before any normalization work."""

import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from fish_recognition.client.consts import MAX_IMAGE_BYTES, MIN_IMAGE_BYTES
from fish_recognition.client.exceptions import (
    TooLargeError,
    TooSmallError,
    UnsupportedFormatError,
)
from fish_recognition.client.image_format_detector import (
    ImageFormat,
    detect_image_format,
)
from fish_recognition.client.models import RawImage, ValidatedImage

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = frozenset({ImageFormat.JPEG, ImageFormat.PNG})


def validate_image(
    raw: RawImage | bytes,
    *,
    min_bytes: int = MIN_IMAGE_BYTES,
    max_bytes: int = MAX_IMAGE_BYTES,
) -> ValidatedImage:
    """Check an upload's size and format.

    Size limits are enforced before anything is decoded. The magic number
    rejects obviously unsupported formats cheaply; a full decode then
    confirms the bytes are a usable JPEG or PNG.

    Args:
        raw: The uploaded image, as a RawImage or plain bytes.
        min_bytes: Smallest accepted upload, inclusive.
        max_bytes: Largest accepted upload, inclusive.

    Returns:
        A ValidatedImage tagged with the decoded format.

    Raises:
        TooSmallError: If the upload is shorter than ``min_bytes``.
        TooLargeError: If the upload is longer than ``max_bytes``.
        UnsupportedFormatError: If the upload is not a decodable JPEG or PNG.

    """
    data = raw.data if isinstance(raw, RawImage) else raw

    if len(data) < min_bytes:
        raise TooSmallError(TooSmallError.default_message)
    if len(data) > max_bytes:
        raise TooLargeError(TooLargeError.default_message)

    signature_format = detect_image_format(data)
    if signature_format not in SUPPORTED_FORMATS:
        msg = (
            f"{UnsupportedFormatError.default_message}, "
            f"got {signature_format.value}"
        )
        raise UnsupportedFormatError(msg)

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            image_format = ImageFormat.from_pil(img.format)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        msg = f"Invalid image data: {e}"
        raise UnsupportedFormatError(msg) from e

    if image_format not in SUPPORTED_FORMATS:
        msg = (
            f"{UnsupportedFormatError.default_message}, "
            f"got {image_format.value}"
        )
        raise UnsupportedFormatError(msg)

    logger.debug(
        "Validated %s image: %d bytes", image_format.value, len(data)
    )
    return ValidatedImage(data=data, image_format=image_format)
