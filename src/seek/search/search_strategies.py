"""Search strategies: scan a text left to right and emit the hits a frequency keeps.

Each strategy owns one frequency strategy for the duration of a single search() call;
build a fresh pair per text (see seek.search.search.search).
"""

from abc import ABC, abstractmethod
from enum import Enum
import re

from seek.data_models.hit import Hit
from seek.data_models.search_options import SearchOptions
from seek.search.frequency_strategies import FrequencyStrategy


class SearchStrategyType(str, Enum):
    exact = "exact"
    regex = "regex"
    between = "between"


class SearchStrategy(ABC):
    def __init__(self, frequency_strategy: FrequencyStrategy) -> None:
        self.frequency_strategy = frequency_strategy

    @property
    @abstractmethod
    def strategy_type(self) -> SearchStrategyType: ...

    @abstractmethod
    def search(self, text: str) -> list[Hit]:
        """Return kept hits in strictly increasing position order."""


def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error:
        return None


class ExactSearchStrategy(SearchStrategy):
    strategy_type = SearchStrategyType.exact

    def __init__(self, exact: str, frequency_strategy: FrequencyStrategy) -> None:
        super().__init__(frequency_strategy)
        self.exact = exact

    def search(self, text: str) -> list[Hit]:
        hits: list[Hit] = []
        if not self.exact:
            return hits
        pos = 0
        while (position := text.find(self.exact, pos)) != -1:
            if self.frequency_strategy.matches_frequency():
                hits.append(Hit(value=self.exact, position=position))
            if self.frequency_strategy.is_done():
                break
            # rejected candidates still consume their span
            pos = position + len(self.exact)
        return hits


class RegexSearchStrategy(SearchStrategy):
    strategy_type = SearchStrategyType.regex

    def __init__(self, regex: str, frequency_strategy: FrequencyStrategy) -> None:
        super().__init__(frequency_strategy)
        self.regex = regex
        self.pattern = _compile(regex)

    def search(self, text: str) -> list[Hit]:
        hits: list[Hit] = []
        if self.pattern is None:
            return hits
        for m in self.pattern.finditer(text):
            if self.frequency_strategy.matches_frequency():
                hits.append(Hit(value=m.group(0), position=m.start()))
            if self.frequency_strategy.is_done():
                break
        return hits


class BetweenSearchStrategy(SearchStrategy):
    """Find spans delimited by a `from` match and the next `to` match after it.

    With exclude_matches the delimiters are dropped and only the interior (possibly
    empty) is emitted. A `from` with no later `to` ends the scan.
    """

    strategy_type = SearchStrategyType.between

    def __init__(
        self,
        from_pattern: str,
        to_pattern: str,
        exclude_matches: bool,
        frequency_strategy: FrequencyStrategy,
    ) -> None:
        super().__init__(frequency_strategy)
        self.from_pattern = from_pattern
        self.to_pattern = to_pattern
        self.exclude_matches = exclude_matches
        self._from_re = _compile(from_pattern)
        self._to_re = _compile(to_pattern)

    def search(self, text: str) -> list[Hit]:
        hits: list[Hit] = []
        if self._from_re is None or self._to_re is None:
            return hits

        pos = 0
        while pos <= len(text):
            start = pos
            from_match = self._from_re.search(text, pos)
            if from_match is None:
                break
            pos = from_match.end()

            to_match = self._to_re.search(text, pos)
            if to_match is None:
                break
            pos = to_match.end()

            if self.exclude_matches:
                hit_start, hit_end = from_match.end(), to_match.start()
            else:
                hit_start, hit_end = from_match.start(), to_match.end()

            if self.frequency_strategy.matches_frequency():
                hits.append(Hit(value=text[hit_start:hit_end], position=hit_start))
            if self.frequency_strategy.is_done():
                break

            # both delimiters matched empty at the cursor
            if pos <= start:
                pos = start + 1
        return hits


def make_search_strategy(
    options: SearchOptions, frequency_strategy: FrequencyStrategy
) -> SearchStrategy:
    if options.exact is not None:
        return ExactSearchStrategy(options.exact, frequency_strategy)
    if options.regex is not None:
        return RegexSearchStrategy(options.regex, frequency_strategy)
    if options.between is not None:
        from_pattern, to_pattern = options.between
        return BetweenSearchStrategy(
            from_pattern, to_pattern, options.exclude_matches, frequency_strategy
        )
    raise ValueError("A search strategy must be provided")
