"""Base classes for all fish recognition exceptions."""


class FishRecognitionError(Exception):
    """Base class for all fish recognition exceptions."""


class TooSmallError(FishRecognitionError):
    """Raised when the uploaded image is below the minimum size."""

    default_message = "Image is too small (at least 1KB is required)"


class TooLargeError(FishRecognitionError):
    """Raised when the uploaded image exceeds the maximum size."""

    default_message = "Image is too large (at most 4MB is supported)"


class UnsupportedFormatError(FishRecognitionError):
    """Raised when the image is not a decodable JPEG or PNG."""

    default_message = "Only JPEG and PNG images are supported"


class DecodeError(FishRecognitionError):
    """Raised when image bytes cannot be decoded into pixels."""

    default_message = "Failed to decode image"


class EncodeError(FishRecognitionError):
    """Raised when pixels cannot be encoded as JPEG."""

    default_message = "Failed to encode image"


class CredentialError(FishRecognitionError):
    """Raised when an access credential cannot be obtained."""

    default_message = "Failed to obtain access credential"


class ClassifierUnavailableError(FishRecognitionError):
    """Raised when the classifier service cannot be reached."""

    default_message = "Classifier service is unavailable"


class ResponseParseError(FishRecognitionError):
    """Raised when the classifier response cannot be parsed."""

    default_message = "Failed to parse classifier response"


class ClassifierRejectedError(FishRecognitionError):
    """Raised when the classifier answers with a non-zero error code.

    The service was reachable but refused the request, which callers may
    want to treat differently from a transport failure.
    """

    default_message = "Classifier rejected the request"

    def __init__(self, code: int, message: str) -> None:
        """Initialize with the provider's error code and message.

        Args:
            code: The provider's ``error_code`` value.
            message: The provider's ``error_msg`` value.

        """
        super().__init__(f"{self.default_message}: {message} (code {code})")
        self.code = code
        self.message = message


class NoResultError(FishRecognitionError):
    """Raised when the classifier returned no candidate labels."""

    default_message = "No fish was recognized in the image"
