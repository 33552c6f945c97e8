"""Fish Recognition Client.

This module provides a client that prepares uploaded images for, and
interprets results from, a remote animal classification API.
"""

from fish_recognition.client.credentials import (
    AccessCredential,
    CredentialHelper,
    CredentialProvider,
)
from fish_recognition.client.exceptions import (
    ClassifierRejectedError,
    ClassifierUnavailableError,
    CredentialError,
    DecodeError,
    EncodeError,
    FishRecognitionError,
    NoResultError,
    ResponseParseError,
    TooLargeError,
    TooSmallError,
    UnsupportedFormatError,
)
from fish_recognition.client.fish_options import FishRecognitionOptions
from fish_recognition.client.result_selector import ResultSelector
from fish_recognition.client.transport import FormTransport, HttpxFormTransport

__all__ = [
    "AccessCredential",
    "ClassifierRejectedError",
    "ClassifierUnavailableError",
    "CredentialError",
    "CredentialHelper",
    "CredentialProvider",
    "DecodeError",
    "EncodeError",
    "FishRecognitionError",
    "FishRecognitionOptions",
    "FormTransport",
    "HttpxFormTransport",
    "NoResultError",
    "ResponseParseError",
    "ResultSelector",
    "TooLargeError",
    "TooSmallError",
    "UnsupportedFormatError",
]
