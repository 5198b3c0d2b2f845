"""Frequency strategies: stateful filters over the ordinal of each candidate match.

A search strategy calls matches_frequency() once per candidate, in document order, and
checks is_done() right after; once it is true the scan may stop early.
"""

from abc import ABC, abstractmethod
from enum import Enum

from seek.data_models.search_options import SearchOptions


class FrequencyStrategyType(str, Enum):
    all = "all"
    nth = "nth"
    every_nth = "every_nth"


class FrequencyStrategy(ABC):
    @property
    @abstractmethod
    def strategy_type(self) -> FrequencyStrategyType: ...

    @abstractmethod
    def matches_frequency(self) -> bool:
        """Count one more candidate and return whether it should be kept."""

    @abstractmethod
    def is_done(self) -> bool:
        """True once no later candidate could be kept."""


class AllFrequencyStrategy(FrequencyStrategy):
    strategy_type = FrequencyStrategyType.all

    def matches_frequency(self) -> bool:
        return True

    def is_done(self) -> bool:
        return False


class NthFrequencyStrategy(FrequencyStrategy):
    """Keep only the candidate with 1-based ordinal `target`."""

    strategy_type = FrequencyStrategyType.nth

    def __init__(self, target: int) -> None:
        self.target = target
        self.seen = 0

    def matches_frequency(self) -> bool:
        self.seen += 1
        return self.seen == self.target

    def is_done(self) -> bool:
        return self.seen == self.target


class EveryNthFrequencyStrategy(FrequencyStrategy):
    """Keep every `interval`-th candidate, starting at 0-based index `offset`.

    With offset 0 the kept ordinals are 1, 1 + interval, 1 + 2 * interval, ...
    interval must be >= 1; zero is rejected before construction.
    """

    strategy_type = FrequencyStrategyType.every_nth

    def __init__(self, interval: int, offset: int = 0) -> None:
        self.interval = interval
        self.offset = offset
        self.seen = 0

    def matches_frequency(self) -> bool:
        self.seen += 1
        index = self.seen - 1
        if index < self.offset:
            return False
        return (index - self.offset) % self.interval == 0

    def is_done(self) -> bool:
        return False


def make_frequency_strategy(options: SearchOptions) -> FrequencyStrategy:
    """Pick nth, then every_nth, then all; with none selected, use only the first."""
    if options.nth is not None:
        return NthFrequencyStrategy(options.nth)
    if options.every_nth is not None:
        return EveryNthFrequencyStrategy(options.every_nth, 0)
    if options.all:
        return AllFrequencyStrategy()
    return NthFrequencyStrategy(1)
