"""Choose how many trailing phonemes a rhyme must share."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from tukant.config import DEFAULT_CONFIG, RhymeConfig

from .cache import PhoneticCache
from .corpus_index import CorpusIndex
from .grouping import script_suffix
from .matcher import find_rhymes


@dataclass(frozen=True)
class DepthOption:
    """A depth the caller may switch to, with its ending and match count."""

    depth: int
    suffix_text: str
    match_count: int


def depth_cap(query: str, cache: PhoneticCache, config: RhymeConfig = DEFAULT_CONFIG) -> int:
    """Largest usable depth: ``max_depth`` or the query's token count."""

    return min(config.max_depth, len(cache.get_phonetics(query).tokens))


def auto_detect_depth(
    query: str,
    index: CorpusIndex,
    cache: PhoneticCache,
    config: RhymeConfig = DEFAULT_CONFIG,
) -> int:
    """Return the deepest depth with enough rhymes, else ``min_depth``."""

    for depth in range(depth_cap(query, cache, config), config.min_depth - 1, -1):
        matches = find_rhymes(query, depth, index, cache, config)
        if len(matches) >= config.min_matches_for_depth:
            return depth
    return config.min_depth


def available_depths(
    query: str,
    index: CorpusIndex,
    cache: PhoneticCache,
    config: RhymeConfig = DEFAULT_CONFIG,
) -> List[DepthOption]:
    """List, shallowest first, every depth that yields at least one rhyme."""

    form = cache.get_phonetics(query)
    options: List[DepthOption] = []
    for depth in range(config.min_depth, depth_cap(query, cache, config) + 1):
        count = len(find_rhymes(query, depth, index, cache, config))
        if count:
            options.append(
                DepthOption(
                    depth=depth,
                    suffix_text=script_suffix(form, depth),
                    match_count=count,
                )
            )
    return options


__all__ = ["DepthOption", "auto_detect_depth", "available_depths", "depth_cap"]
