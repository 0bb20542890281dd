"""Split Devanagari words into syllable-like clusters."""

from __future__ import annotations

from typing import List, Tuple

from .script import NUKTA, TRAILING_MARKS, VIRAMA, is_consonant


def segment(word: str) -> Tuple[str, ...]:
    """Return the ordered clusters of ``word``.

    A cluster is a base code point with its nukta, any ``virama + consonant``
    links (conjuncts), and the vowel signs, nasal marks and visarga that
    follow.  A virama with no consonant after it closes the cluster it ends.
    Joining the clusters always gives back ``word``.
    """

    chars = list(word)
    length = len(chars)
    clusters: List[str] = []
    i = 0

    while i < length:
        start = i
        i += 1
        if i < length and chars[i] == NUKTA:
            i += 1

        while i + 1 < length and chars[i] == VIRAMA and is_consonant(chars[i + 1]):
            i += 2
            if i < length and chars[i] == NUKTA:
                i += 1

        while i < length and chars[i] in TRAILING_MARKS:
            i += 1

        if i < length and chars[i] == VIRAMA:
            # halant before a non-consonant (or at the end): no conjunct
            i += 1

        clusters.append("".join(chars[start:i]))

    return tuple(clusters)


__all__ = ["segment"]
