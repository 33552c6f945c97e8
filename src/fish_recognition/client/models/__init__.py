"""Package containing data models for the fish recognition client.

Image models track an upload through each pipeline stage; classification
models carry the classifier's candidates and the final result.
"""

from .classification_model import (
    CandidateLabel,
    ClassificationResult,
    parse_score,
)
from .image_model import (
    CompressedImage,
    NormalizedImage,
    RawImage,
    ValidatedImage,
)

__all__ = [
    "CandidateLabel",
    "ClassificationResult",
    "CompressedImage",
    "NormalizedImage",
    "RawImage",
    "ValidatedImage",
    "parse_score",
]
