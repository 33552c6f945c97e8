"""Low-level HTTP client for the animal classification API."""

import base64
import json
import logging

import httpx

from fish_recognition.client.consts import (
    BAIKE_NUM,
    CLASSIFY_TIMEOUT,
    CLASSIFY_URL,
    TOP_NUM,
)
from fish_recognition.client.credentials import CredentialProvider
from fish_recognition.client.exceptions import (
    ClassifierRejectedError,
    ClassifierUnavailableError,
    ResponseParseError,
)
from fish_recognition.client.models import CandidateLabel, CompressedImage
from fish_recognition.client.transport import FormTransport


class AnimalClassifierClient:
    """Submits images to the animal classification API.

    Each call obtains a fresh credential from the credential provider, then
    posts the base64 image as a form field. Nothing is retried.
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        transport: FormTransport,
        *,
        classify_url: str = CLASSIFY_URL,
        timeout: float = CLASSIFY_TIMEOUT,
        top_num: int = TOP_NUM,
        baike_num: int = BAIKE_NUM,
    ) -> None:
        """Initialize the client.

        Args:
            credential_provider: Source of access credentials.
            transport: Transport to post the classification form with.
            classify_url: Classification endpoint URL.
            timeout: Seconds to wait for the classification response.
            top_num: Number of ranked labels to request.
            baike_num: Number of labels to request descriptions for.

        """
        self.logger = logging.getLogger(__name__)
        self.credential_provider = credential_provider
        self.transport = transport
        self.classify_url = classify_url
        self.timeout = timeout
        self.top_num = top_num
        self.baike_num = baike_num

    def classify(self, image: CompressedImage) -> list[CandidateLabel]:
        """Classify an image.

        Args:
            image: The compressed JPEG to classify.

        Returns:
            Candidate labels in the provider's rank order. May be empty.

        Raises:
            CredentialError: If no access credential could be obtained.
            ClassifierUnavailableError: If the API could not be reached.
            ResponseParseError: If the response body is malformed.
            ClassifierRejectedError: If the API reported a non-zero error
                code.

        """
        credential = self.credential_provider.fetch()

        encoded = base64.b64encode(image.data).decode("ascii")
        self.logger.debug(
            "Submitting image: %d bytes, %d bytes base64",
            len(image.data),
            len(encoded),
        )

        form = {
            "image": encoded,
            "top_num": str(self.top_num),
            "baike_num": str(self.baike_num),
        }

        try:
            body = self.transport.post_form(
                self.classify_url,
                form,
                params={"access_token": credential.access_token},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            msg = f"{ClassifierUnavailableError.default_message}: {e}"
            raise ClassifierUnavailableError(msg) from e

        return self.parse_response(body)

    def parse_response(self, body: str) -> list[CandidateLabel]:
        """Parse a classification response body into ranked labels.

        Raises:
            ResponseParseError: If the body is not the expected JSON shape.
            ClassifierRejectedError: If ``error_code`` is non-zero.

        """
        try:
            raw = json.loads(body)
        except json.JSONDecodeError as e:
            msg = f"{ResponseParseError.default_message}: {e}"
            raise ResponseParseError(msg) from e

        if not isinstance(raw, dict):
            msg = f"{ResponseParseError.default_message}: expected an object"
            raise ResponseParseError(msg)

        self.logger.debug(
            "Classifier response log_id=%s error_code=%s",
            raw.get("log_id"),
            raw.get("error_code"),
        )

        try:
            code = int(raw.get("error_code") or 0)
        except (TypeError, ValueError) as e:
            msg = (
                f"{ResponseParseError.default_message}: "
                f"bad error_code {raw.get('error_code')!r}"
            )
            raise ResponseParseError(msg) from e
        if code:
            raise ClassifierRejectedError(code, str(raw.get("error_msg", "")))

        results = raw.get("result") or []
        if not isinstance(results, list):
            msg = f"{ResponseParseError.default_message}: result is not a list"
            raise ResponseParseError(msg)

        try:
            return [CandidateLabel.from_dict(item) for item in results]
        except (KeyError, TypeError, AttributeError) as e:
            msg = f"{ResponseParseError.default_message}: bad label {e}"
            raise ResponseParseError(msg) from e
