"""Suffix-depth rhyme matching over the corpus index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from tukant.config import DEFAULT_CONFIG, RhymeConfig

from .cache import PhoneticCache
from .corpus_index import CorpusIndex, DocumentRef


@dataclass(frozen=True)
class MatchCandidate:
    """A corpus word whose trailing phonemes equal the query's."""

    word: str
    refs: Tuple[DocumentRef, ...]
    suffix_key: str
    purity: float


def purity_ratio(depth: int, token_count: int) -> float:
    """Share of a word's phonemes covered by the rhyming suffix."""

    if token_count <= 0:
        return 0.0
    return depth / token_count


# Absorbs float noise such as 0.5 - 0.4 == 0.09999999999999998.
_EPSILON = 1e-9


def _purity_bands(
    candidates: Iterable[MatchCandidate],
    tolerance: float,
) -> List[List[MatchCandidate]]:
    """Split candidates into bands of near-equal purity, best band first.

    Each band is anchored on its highest ratio and takes every following
    candidate within ``tolerance`` of that anchor.
    """

    ordered = sorted(candidates, key=lambda candidate: (-candidate.purity, candidate.word))
    bands: List[List[MatchCandidate]] = []
    for candidate in ordered:
        if bands and bands[-1][0].purity - candidate.purity <= tolerance + _EPSILON:
            bands[-1].append(candidate)
        else:
            bands.append([candidate])
    return bands


def rank_candidates(
    candidates: Iterable[MatchCandidate],
    tolerance: float = DEFAULT_CONFIG.purity_tolerance,
) -> List[MatchCandidate]:
    """Order by descending purity, treating near-equal ratios as ties.

    Ties are broken by ascending code-point order of the word.  The result
    does not depend on the order ``candidates`` arrive in.
    """

    return [
        candidate
        for band in _purity_bands(candidates, tolerance)
        for candidate in sorted(band, key=lambda member: member.word)
    ]


def find_rhymes(
    query: str,
    depth: int,
    index: CorpusIndex,
    cache: PhoneticCache,
    config: RhymeConfig = DEFAULT_CONFIG,
) -> List[MatchCandidate]:
    """Return indexed words sharing ``query``'s last ``depth`` phoneme tokens.

    The query word itself is never returned.  A depth longer than the query's
    phonetic form yields no matches, as does a candidate shorter than
    ``depth``.
    """

    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    query_key = cache.get_phonetics(query).suffix_key(depth)
    if query_key is None:
        return []

    matches: List[MatchCandidate] = []
    for word, refs in index.items():
        if word == query:
            continue
        form = cache.get_phonetics(word)
        if form.suffix_key(depth) != query_key:
            continue
        matches.append(
            MatchCandidate(
                word=word,
                refs=refs,
                suffix_key=query_key,
                purity=purity_ratio(depth, len(form.tokens)),
            )
        )

    return rank_candidates(matches, config.purity_tolerance)


__all__ = ["MatchCandidate", "find_rhymes", "purity_ratio", "rank_candidates"]
