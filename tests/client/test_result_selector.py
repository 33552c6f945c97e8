"""Tests for fish label selection."""

from types import MappingProxyType

import pytest

from fish_recognition.client.exceptions import NoResultError
from fish_recognition.client.models import CandidateLabel
from fish_recognition.client.result_selector import ResultSelector
from fish_recognition.client.species import (
    DEFAULT_DESCRIPTION,
    FISH_DESCRIPTIONS,
    FISH_KEYWORDS,
)


def _labels(*items: dict[str, str]) -> list[CandidateLabel]:
    return [CandidateLabel.from_dict(item) for item in items]


@pytest.fixture
def selector() -> ResultSelector:
    """Selector with the built-in species data."""
    return ResultSelector()


def test_select_empty_raises(selector: ResultSelector) -> None:
    """Test that no labels means no result."""
    with pytest.raises(NoResultError):
        selector.select([])


def test_fish_overrides_higher_ranked_label(selector: ResultSelector) -> None:
    """Test that a lower-ranked fish beats a higher-ranked non-fish."""
    labels = _labels(
        {"name": "猫", "score": "0.9"}, {"name": "鲤鱼", "score": "0.5"}
    )

    result = selector.select(labels)

    assert result.name == "鲤鱼"
    assert result.score == 0.5  # noqa: PLR2004
    assert result.description == FISH_DESCRIPTIONS["鲤鱼"]


def test_fallback_to_top_label(selector: ResultSelector) -> None:
    """Test that without a fish the top label is used."""
    result = selector.select(_labels({"name": "猫", "score": "0.9"}))

    assert result.name == "猫"
    assert result.score == 0.9  # noqa: PLR2004
    assert result.description == DEFAULT_DESCRIPTION


def test_first_fish_in_rank_order_wins(selector: ResultSelector) -> None:
    """Test that the first fish found is chosen, not the best scored."""
    labels = _labels(
        {"name": "狗", "score": "0.6"},
        {"name": "草鱼", "score": "0.2"},
        {"name": "鲤鱼", "score": "0.9"},
    )

    assert selector.select(labels).name == "草鱼"


def test_generic_fish_keyword(selector: ResultSelector) -> None:
    """Test that unlisted fish are recognised by the generic keyword."""
    labels = _labels(
        {"name": "海葵", "score": "0.7"}, {"name": "小丑鱼", "score": "0.3"}
    )

    result = selector.select(labels)

    assert result.name == "小丑鱼"
    assert result.description == DEFAULT_DESCRIPTION


def test_provider_description_preferred(selector: ResultSelector) -> None:
    """Test that a provider description is used verbatim."""
    labels = [CandidateLabel("鲤鱼", 0.8, description="来自百科的描述")]

    assert selector.select(labels).description == "来自百科的描述"


def test_description_substring_match(selector: ResultSelector) -> None:
    """Test that qualified names find their species description."""
    result = selector.select([CandidateLabel("红鲤鱼", 0.8)])

    assert result.description == FISH_DESCRIPTIONS["鲤鱼"]


def test_description_exact_match_beats_substring() -> None:
    """Test that an exact key wins over an earlier substring key."""
    descriptions = {"鱼": "generic", "金鱼": "goldfish"}
    custom = ResultSelector(descriptions=descriptions)

    assert custom.describe(CandidateLabel("金鱼", 1.0)) == "goldfish"
    assert custom.describe(CandidateLabel("小金鱼", 1.0)) == "generic"


def test_unparseable_score_is_zero(selector: ResultSelector) -> None:
    """Test that a malformed score does not fail selection."""
    result = selector.select(_labels({"name": "鲫鱼", "score": "n/a"}))

    assert result.score == 0.0


def test_custom_keywords_and_default() -> None:
    """Test that selector data is injectable."""
    selector = ResultSelector(
        descriptions={},
        keywords=["shark"],
        default_description="none",
    )
    labels = [CandidateLabel("whale", 0.9), CandidateLabel("tiger shark", 0.4)]

    result = selector.select(labels)

    assert result.name == "tiger shark"
    assert result.description == "none"


def test_species_data_is_shared_and_read_only() -> None:
    """Test that the default tables are shared immutable mappings."""
    selector = ResultSelector()

    assert selector.descriptions is FISH_DESCRIPTIONS
    assert isinstance(FISH_DESCRIPTIONS, MappingProxyType)
    with pytest.raises(TypeError):
        FISH_DESCRIPTIONS["鲨鱼"] = "x"  # pyright: ignore[reportIndexIssue]
    assert set(FISH_DESCRIPTIONS) <= set(FISH_KEYWORDS)


def test_result_to_dict(selector: ResultSelector) -> None:
    """Test the JSON-ready form of a result."""
    result = selector.select([CandidateLabel("鲤鱼", 0.95)])

    assert result.to_dict() == {
        "name": "鲤鱼",
        "score": 0.95,
        "description": "鲤鱼是一种常见的淡水鱼，适应性强，生长迅速。",
    }
