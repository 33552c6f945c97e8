"""Selection of the fish label among the classifier's candidates."""

import logging
from collections.abc import Iterable, Mapping, Sequence

from fish_recognition.client.exceptions import NoResultError
from fish_recognition.client.models import (
    CandidateLabel,
    ClassificationResult,
)
from fish_recognition.client.species import (
    DEFAULT_DESCRIPTION,
    FISH_DESCRIPTIONS,
    FISH_KEYWORDS,
)

logger = logging.getLogger(__name__)


class ResultSelector:
    """Picks the best label for a fish photo and describes it.

    The first candidate, in rank order, whose name contains a fish keyword
    wins even over higher-ranked candidates. If no candidate looks like a
    fish, the top candidate is returned; non-fish results are not rejected.

    Attributes:
        descriptions: Species name to description table. Shared, not
            copied.
        keywords: Substrings that mark a label as a fish.
        default_description: Text used when no description is found.

    """

    def __init__(
        self,
        descriptions: Mapping[str, str] = FISH_DESCRIPTIONS,
        keywords: Iterable[str] = FISH_KEYWORDS,
        default_description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        """Initialize the selector with species data."""
        self.descriptions = descriptions
        self.keywords = tuple(keywords)
        self.default_description = default_description

    def is_fish(self, name: str) -> bool:
        """Check whether a label name contains any fish keyword."""
        return any(keyword in name for keyword in self.keywords)

    def describe(self, label: CandidateLabel) -> str:
        """Resolve a description for a label.

        The provider's own description is preferred. Otherwise the table is
        searched by exact name, then for a species name contained in the
        label, which tolerates qualified names such as "红鲤鱼".
        """
        if label.description:
            return label.description

        exact = self.descriptions.get(label.name)
        if exact is not None:
            return exact

        for species, description in self.descriptions.items():
            if species in label.name:
                return description

        return self.default_description

    def select(self, labels: Sequence[CandidateLabel]) -> ClassificationResult:
        """Select one label and build the final result.

        Args:
            labels: Candidates in the provider's rank order.

        Returns:
            The chosen label with its score and description.

        Raises:
            NoResultError: If ``labels`` is empty.

        """
        if not labels:
            raise NoResultError(NoResultError.default_message)

        selected = next(
            (label for label in labels if self.is_fish(label.name)), None
        )
        if selected is None:
            selected = labels[0]
            logger.debug(
                "No fish among %d labels, using top label %r",
                len(labels),
                selected.name,
            )

        return ClassificationResult(
            name=selected.name,
            score=selected.score,
            description=self.describe(selected),
        )
