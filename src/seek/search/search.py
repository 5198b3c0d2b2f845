"""Entry points for running a search over one text or many sources."""

from collections.abc import Iterable

from seek.data_models.hit import Hit
from seek.data_models.search_options import SearchOptions
from seek.data_models.source import Source
from seek.search.frequency_strategies import (
    AllFrequencyStrategy,
    EveryNthFrequencyStrategy,
    FrequencyStrategy,
    NthFrequencyStrategy,
    make_frequency_strategy,
)
from seek.search.search_strategies import make_search_strategy


def search(text: str, options: SearchOptions) -> list[Hit]:
    """Scan text once with a freshly built search/frequency strategy pair."""
    frequency_strategy = make_frequency_strategy(options)
    search_strategy = make_search_strategy(options, frequency_strategy)
    return search_strategy.search(text)


def search_sources(
    sources: Iterable[Source], options: SearchOptions
) -> dict[str, list[Hit]]:
    """Scan each source independently; keys follow input order."""
    return {source.name: search(source.text, options) for source in sources}


def apply_frequency(hits: list[Hit], options: SearchOptions) -> list[Hit]:
    """Filter an already-collected hit list by ordinal.

    nth keeps the nth hit (1-based); every_nth=n keeps hits n, 2n, 3n, ...; otherwise
    everything is kept.
    """
    strategy: FrequencyStrategy
    if options.nth is not None:
        strategy = NthFrequencyStrategy(options.nth)
    elif options.every_nth is not None:
        strategy = EveryNthFrequencyStrategy(
            options.every_nth, offset=options.every_nth - 1
        )
    else:
        strategy = AllFrequencyStrategy()

    kept = []
    for hit in hits:
        if strategy.matches_frequency():
            kept.append(hit)
        if strategy.is_done():
            break
    return kept
