"""Module containing classification models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self


def parse_score(value: object) -> float:
    """Parse a provider confidence score, returning 0.0 when unparseable.

    The provider sends scores as decimal strings. The score is informative
    only, so a malformed value must not fail the classification.
    """
    try:
        return float(value)  # pyright: ignore[reportArgumentType]
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class CandidateLabel:
    """A single ranked label returned by the classifier.

    Attributes:
        name: Label name in the provider's language.
        score: Confidence score, 0.0 when the provider's value was not a
            number.
        description: Encyclopedia description supplied by the provider, if
            any.

    """

    name: str
    score: float
    description: str | None = None

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> Self:
        """Build a label from one entry of the provider's ``result`` list.

        Args:
            item: Mapping with ``name``, ``score`` and an optional
                ``baike_info`` mapping holding ``description``.

        Raises:
            KeyError: If ``name`` is missing.
            TypeError: If ``name`` is not a string.

        """
        name = item["name"]
        if not isinstance(name, str):
            msg = f"label name must be a string, got {type(name).__name__}"
            raise TypeError(msg)

        description = None
        baike_info = item.get("baike_info")
        if isinstance(baike_info, Mapping):
            text = baike_info.get("description")
            if isinstance(text, str) and text.strip():
                description = text

        return cls(
            name=name,
            score=parse_score(item.get("score")),
            description=description,
        )


@dataclass(frozen=True)
class ClassificationResult:
    """The single user-facing outcome of a recognition."""

    name: str
    score: float
    description: str

    def to_dict(self) -> dict[str, str | float]:
        """Return the result as a JSON-ready dictionary."""
        return {
            "name": self.name,
            "score": self.score,
            "description": self.description,
        }
