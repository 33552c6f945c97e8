"""Options object for the fish recognition client."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from dotenv import load_dotenv

from fish_recognition.client.consts import (
    BAIKE_NUM,
    CLASSIFY_TIMEOUT,
    CLASSIFY_URL,
    MAX_IMAGE_BYTES,
    MIN_IMAGE_BYTES,
    NORMALIZE_QUALITY,
    TOKEN_TIMEOUT,
    TOKEN_URL,
    TOP_NUM,
)
from fish_recognition.client.transformers import CompressionOptions


@dataclass
class FishRecognitionOptions:
    """Options for configuring the fish recognition client.

    Attributes:
        token_url: OAuth token endpoint of the classifier provider.
        classify_url: Animal classification endpoint.
        token_timeout: Seconds to wait for the token endpoint.
            Defaults to 5.
        classify_timeout: Seconds to wait for the classification endpoint.
            Defaults to 15.
        top_num: Number of ranked labels requested. Defaults to 6.
        baike_num: Number of labels to request descriptions for.
            Defaults to 1.
        min_image_bytes: Smallest accepted upload. Defaults to 1 KiB.
        max_image_bytes: Largest accepted upload. Defaults to 4 MiB.
        normalize_quality: JPEG quality used for normalization.
            Defaults to 95.
        compression: Quality search used to fit the transport budget.

    """

    token_url: str = TOKEN_URL
    classify_url: str = CLASSIFY_URL
    token_timeout: float = TOKEN_TIMEOUT
    classify_timeout: float = CLASSIFY_TIMEOUT
    top_num: int = TOP_NUM
    baike_num: int = BAIKE_NUM
    min_image_bytes: int = MIN_IMAGE_BYTES
    max_image_bytes: int = MAX_IMAGE_BYTES
    normalize_quality: int = NORMALIZE_QUALITY
    compression: CompressionOptions = field(default_factory=CompressionOptions)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Self:
        """Build options from the environment, loading ``.env`` first.

        Recognised variables are ``FISH_TOKEN_URL``, ``FISH_CLASSIFY_URL``,
        ``FISH_TOKEN_TIMEOUT`` and ``FISH_CLASSIFY_TIMEOUT``; anything unset
        keeps its default. Variables already in the environment win over
        the file.

        Raises:
            ValueError: If a timeout variable is not a number.

        """
        _ = load_dotenv(env_file)
        return cls(
            token_url=os.getenv("FISH_TOKEN_URL", TOKEN_URL),
            classify_url=os.getenv("FISH_CLASSIFY_URL", CLASSIFY_URL),
            token_timeout=float(
                os.getenv("FISH_TOKEN_TIMEOUT", str(TOKEN_TIMEOUT))
            ),
            classify_timeout=float(
                os.getenv("FISH_CLASSIFY_TIMEOUT", str(CLASSIFY_TIMEOUT))
            ),
        )
