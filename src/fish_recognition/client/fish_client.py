"""The Fish Recognition Client Class."""

import logging
import time
import types
from pathlib import Path
from typing import Self

from fish_recognition.api_wrappers.classifier_service import (
    AnimalClassifierClient,
)
from fish_recognition.client.credentials import (
    CredentialHelper,
    CredentialProvider,
)
from fish_recognition.client.exceptions import CredentialError
from fish_recognition.client.fish_options import FishRecognitionOptions
from fish_recognition.client.models import ClassificationResult, RawImage
from fish_recognition.client.result_selector import ResultSelector
from fish_recognition.client.transformers import (
    JpegNormalizer,
    SizeCompressor,
    validate_image,
)
from fish_recognition.client.transport import FormTransport, HttpxFormTransport


class FishRecognitionClient:
    """The Fish Recognition Client Class.

    Runs an uploaded image through validation, JPEG normalization,
    compression to the transport budget, remote classification and label
    selection. Each stage fails fast with its own exception type and nothing
    is retried. The client holds no per-request state, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        options: FishRecognitionOptions | None = None,
        *,
        transport: FormTransport | None = None,
        selector: ResultSelector | None = None,
    ) -> None:
        """Initialize the Fish Recognition Client.

        Args:
            credential_provider: Source of classifier access credentials.
            options: Configuration options. Defaults to
                ``FishRecognitionOptions()``.
            transport: Transport for the classification call. An
                ``HttpxFormTransport`` owned by this client is created when
                omitted.
            selector: Label selector. Defaults to one using the built-in
                species data.

        """
        self.logger = logging.getLogger(__name__)
        self.options = options or FishRecognitionOptions()
        self._owns_transport = transport is None
        self.transport = (
            transport if transport is not None else HttpxFormTransport()
        )
        self.normalizer = JpegNormalizer(quality=self.options.normalize_quality)
        self.compressor = SizeCompressor(self.options.compression)
        self.classifier = AnimalClassifierClient(
            credential_provider,
            self.transport,
            classify_url=self.options.classify_url,
            timeout=self.options.classify_timeout,
            top_num=self.options.top_num,
            baike_num=self.options.baike_num,
        )
        self.selector = selector or ResultSelector()

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Self:
        """Create a client configured entirely from the environment.

        Raises:
            CredentialError: If the provider secrets are not configured.

        """
        options = FishRecognitionOptions.from_env(env_file)
        transport = HttpxFormTransport()
        try:
            credential_helper = CredentialHelper.from_env(
                transport=transport,
                token_url=options.token_url,
                timeout=options.token_timeout,
            )
        except CredentialError:
            transport.close()
            raise
        client = cls(credential_helper, options, transport=transport)
        client._owns_transport = True
        return client

    def recognize(
        self, image: RawImage | bytes, filename: str | None = None
    ) -> ClassificationResult:
        """Recognize the fish in an uploaded image.

        Args:
            image: The uploaded bytes, or a RawImage carrying them.
            filename: Original upload filename, used for logging only.

        Returns:
            The selected label, its score and a description.

        Raises:
            FishRecognitionError: The subclass raised by the failing stage.

        """
        raw = (
            image
            if isinstance(image, RawImage)
            else RawImage(image, filename)
        )
        start_time = time.monotonic()
        self.logger.info(
            "Recognizing %s (%d bytes)", raw.filename or "<upload>", len(raw)
        )

        validated = validate_image(
            raw,
            min_bytes=self.options.min_image_bytes,
            max_bytes=self.options.max_image_bytes,
        )
        normalized = self.normalizer.normalize(validated)
        compressed = self.compressor.compress(normalized)
        labels = self.classifier.classify(compressed)
        result = self.selector.select(labels)

        self.logger.info(
            "Recognized %r (score %.3f) in %.2fs",
            result.name,
            result.score,
            time.monotonic() - start_time,
        )
        return result

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(
            self.transport, HttpxFormTransport
        ):
            self.transport.close()

    def __enter__(self) -> Self:
        """Context manager entry point."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Context manager exit point."""
        self.close()
