"""Core codec functions shared by the image pipeline stages.

Decoding always yields an RGB pixel buffer, so any encoder downstream can
write JPEG without caring about the source mode.
"""

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from fish_recognition.client.exceptions import DecodeError, EncodeError


def base64_length(size: int) -> int:
    """Return the length of the padded base64 encoding of ``size`` bytes."""
    return 4 * ((size + 2) // 3)


def _to_rgb(image: Image.Image) -> Image.Image:
    """Convert any Pillow mode to RGB, compositing alpha on white."""
    if image.mode == "P" and "transparency" in image.info:
        image = image.convert("RGBA")

    if image.mode in ("RGBA", "LA"):
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.getchannel("A"))
        return background
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def decode_image(data: bytes) -> Image.Image:
    """Decode image bytes into an RGB pixel buffer.

    Args:
        data: Encoded image bytes in any Pillow-supported format.

    Returns:
        A fully loaded RGB image, detached from the input buffer.

    Raises:
        DecodeError: If the bytes cannot be decoded.

    """
    try:
        with Image.open(BytesIO(data)) as source_img:
            source_img.load()
            return _to_rgb(source_img).copy()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        msg = f"{DecodeError.default_message}: {e}"
        raise DecodeError(msg) from e


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    """Encode an RGB pixel buffer as baseline JPEG.

    No EXIF or ICC data is passed to the encoder, so the output carries
    pixels only.

    Args:
        image: RGB image to encode.
        quality: JPEG quality from 1 (worst) to 100 (best).

    Returns:
        The JPEG bytes.

    Raises:
        EncodeError: If Pillow fails to write the image.

    """
    buffer = BytesIO()
    try:
        image.save(buffer, format="JPEG", quality=quality, optimize=True)
    except (OSError, ValueError) as e:
        msg = f"{EncodeError.default_message}: {e}"
        raise EncodeError(msg) from e
    return buffer.getvalue()
