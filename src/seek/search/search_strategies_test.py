import re

import pytest

from seek.data_models.search_options import SearchOptions
from seek.search.frequency_strategies import (
    AllFrequencyStrategy,
    EveryNthFrequencyStrategy,
    NthFrequencyStrategy,
)
from seek.search.search_strategies import (
    BetweenSearchStrategy,
    ExactSearchStrategy,
    RegexSearchStrategy,
    SearchStrategyType,
    make_search_strategy,
)

TEXT = "test1234567890tester1234567890retest1234567890test"
BETWEEN_TEXT = "start123endstart456endstart789end"


class _CountingAll(AllFrequencyStrategy):
    def __init__(self) -> None:
        self.calls = 0

    def matches_frequency(self) -> bool:
        self.calls += 1
        return True


class _CountingNth(NthFrequencyStrategy):
    def __init__(self, target: int) -> None:
        super().__init__(target)
        self.calls = 0

    def matches_frequency(self) -> bool:
        self.calls += 1
        return super().matches_frequency()


def _spans(hits):
    return [(h.value, h.position) for h in hits]


# --- Exact ---


def test_exact_finds_all_occurrences():
    hits = ExactSearchStrategy("test", AllFrequencyStrategy()).search(TEXT)
    assert _spans(hits) == [("test", 0), ("test", 14), ("test", 32), ("test", 46)]
    assert [h.end_position for h in hits] == [3, 17, 35, 49]


def test_exact_does_not_overlap():
    hits = ExactSearchStrategy("aa", AllFrequencyStrategy()).search("aaaaa")
    assert _spans(hits) == [("aa", 0), ("aa", 2)]


def test_exact_no_match():
    assert ExactSearchStrategy("zzz", AllFrequencyStrategy()).search(TEXT) == []


def test_exact_nth():
    hits = ExactSearchStrategy("test", NthFrequencyStrategy(3)).search(TEXT)
    assert _spans(hits) == [("test", 32)]


def test_exact_nth_beyond_count_returns_nothing():
    assert ExactSearchStrategy("test", NthFrequencyStrategy(9)).search(TEXT) == []


def test_exact_every_nth():
    hits = ExactSearchStrategy("test", EveryNthFrequencyStrategy(2)).search(TEXT)
    assert [h.position for h in hits] == [0, 32]


def test_exact_stops_when_done():
    frequency = _CountingNth(2)
    hits = ExactSearchStrategy("test", frequency).search(TEXT)
    assert [h.position for h in hits] == [14]
    assert frequency.calls == 2


def test_exact_consults_frequency_once_per_candidate():
    frequency = _CountingAll()
    ExactSearchStrategy("test", frequency).search(TEXT)
    assert frequency.calls == 4


# --- Regex ---


def test_regex_matches_finditer_spans():
    hits = RegexSearchStrategy(r"\d+", AllFrequencyStrategy()).search(TEXT)
    expected = [(m.group(0), m.start()) for m in re.finditer(r"\d+", TEXT)]
    assert _spans(hits) == expected
    assert [h.position for h in hits] == [4, 20, 36]


def test_regex_nth_second_numeric_run():
    hits = RegexSearchStrategy(r"\d+", NthFrequencyStrategy(2)).search(TEXT)
    assert _spans(hits) == [("1234567890", 20)]


def test_regex_invalid_pattern_yields_no_hits():
    assert RegexSearchStrategy("(unclosed", AllFrequencyStrategy()).search(TEXT) == []


def test_regex_stops_when_done():
    frequency = _CountingNth(1)
    RegexSearchStrategy(r"\d+", frequency).search(TEXT)
    assert frequency.calls == 1


# --- Between ---


def test_between_including_matches():
    strategy = BetweenSearchStrategy("start", "end", False, AllFrequencyStrategy())
    hits = strategy.search(BETWEEN_TEXT)
    assert _spans(hits) == [
        ("start123end", 0),
        ("start456end", 11),
        ("start789end", 22),
    ]


def test_between_excluding_matches():
    strategy = BetweenSearchStrategy("start", "end", True, AllFrequencyStrategy())
    hits = strategy.search(BETWEEN_TEXT)
    assert _spans(hits) == [("123", 5), ("456", 16), ("789", 27)]


def test_between_adjacent_delimiters_give_empty_interior():
    strategy = BetweenSearchStrategy(r"\[", r"\]", True, AllFrequencyStrategy())
    hits = strategy.search("a[]b[x]")
    assert _spans(hits) == [("", 2), ("x", 5)]


def test_between_unterminated_from_ends_scan():
    strategy = BetweenSearchStrategy("start", "end", False, AllFrequencyStrategy())
    hits = strategy.search("start1end start2 start3")
    assert _spans(hits) == [("start1end", 0)]


def test_between_to_after_later_from_spans_both():
    strategy = BetweenSearchStrategy("start", "end", False, AllFrequencyStrategy())
    hits = strategy.search("start1 start2end")
    assert _spans(hits) == [("start1 start2end", 0)]


def test_between_nth():
    strategy = BetweenSearchStrategy("start", "end", True, NthFrequencyStrategy(2))
    assert _spans(strategy.search(BETWEEN_TEXT)) == [("456", 16)]


def test_between_is_idempotent():
    first = BetweenSearchStrategy("start", "end", True, AllFrequencyStrategy())
    second = BetweenSearchStrategy("start", "end", True, AllFrequencyStrategy())
    assert first.search(BETWEEN_TEXT) == second.search(BETWEEN_TEXT)


def test_between_zero_length_patterns_terminate():
    strategy = BetweenSearchStrategy("", "", False, AllFrequencyStrategy())
    hits = strategy.search("abc")
    assert [h.position for h in hits] == [0, 1, 2, 3]
    assert all(h.value == "" for h in hits)


def test_between_zero_length_to():
    strategy = BetweenSearchStrategy("a", "b*", False, AllFrequencyStrategy())
    hits = strategy.search("aXa")
    assert _spans(hits) == [("a", 0), ("a", 2)]


@pytest.mark.parametrize("from_pattern,to_pattern", [("(", "end"), ("start", "[")])
def test_between_invalid_pattern_yields_no_hits(from_pattern, to_pattern):
    strategy = BetweenSearchStrategy(
        from_pattern, to_pattern, False, AllFrequencyStrategy()
    )
    assert strategy.search(BETWEEN_TEXT) == []


# --- Factory ---


def test_factory_exact():
    strategy = make_search_strategy(SearchOptions(exact="foo"), AllFrequencyStrategy())
    assert strategy.strategy_type == SearchStrategyType.exact


def test_factory_regex():
    strategy = make_search_strategy(SearchOptions(regex="fo+"), AllFrequencyStrategy())
    assert strategy.strategy_type == SearchStrategyType.regex


def test_factory_between_passes_exclude_matches():
    options = SearchOptions(between=("foo", "bar"), exclude_matches=True)
    strategy = make_search_strategy(options, AllFrequencyStrategy())
    assert strategy.strategy_type == SearchStrategyType.between
    assert isinstance(strategy, BetweenSearchStrategy)
    assert strategy.exclude_matches is True


def test_factory_without_search_strategy_raises():
    with pytest.raises(ValueError, match="A search strategy must be provided"):
        make_search_strategy(SearchOptions(), AllFrequencyStrategy())
