"""Map phoneme suffixes back to script text and group matches by ending."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .cache import PhoneticCache
from .encoder import PhoneticForm
from .matcher import MatchCandidate
from .script import CONSONANTS, NUKTA, VIRAMA


def _boundary_cluster(counts: Tuple[int, ...], depth: int) -> Tuple[int, int]:
    """Find the cluster holding the first suffix token.

    Returns ``(index, tokens_taken_from_it)``; ``index`` is ``-1`` when the
    word has fewer than ``depth`` tokens.
    """

    remaining = depth
    index = len(counts) - 1
    while index >= 0:
        if counts[index] >= remaining:
            return index, remaining
        remaining -= counts[index]
        index -= 1
    return -1, remaining


def _vowel_tail(cluster: str) -> str:
    position = 0
    while position < len(cluster) and (
        cluster[position] in CONSONANTS or cluster[position] in (NUKTA, VIRAMA)
    ):
        position += 1
    return cluster[position:]


def script_suffix(form: PhoneticForm, depth: int) -> str:
    """Return the script text spelling the last ``depth`` phoneme tokens.

    When the suffix starts on a cluster's vowel the text starts at its vowel
    sign ("नाम" at depth 2 gives "ाम"); when it starts inside the consonants
    the whole cluster is included.
    """

    if depth < 1 or not form.clusters:
        return ""

    index, taken = _boundary_cluster(form.cluster_token_counts, depth)
    if index < 0:
        return "".join(form.clusters)

    boundary = form.clusters[index]
    vowel_tokens = form.cluster_token_counts[index] - form.cluster_onsets[index]
    head = _vowel_tail(boundary) if taken <= vowel_tokens else boundary
    return head + "".join(form.clusters[index + 1:])


def group_by_ending(
    candidates: Iterable[MatchCandidate],
    depth: int,
    cache: PhoneticCache,
) -> Dict[str, List[MatchCandidate]]:
    """Partition ranked candidates by their script ending at ``depth``.

    Groups appear in the order their first member appears, so homophones
    spelled differently (ण and न) land in separate groups.
    """

    groups: Dict[str, List[MatchCandidate]] = {}
    for candidate in candidates:
        ending = script_suffix(cache.get_phonetics(candidate.word), depth)
        groups.setdefault(ending, []).append(candidate)
    return groups


def split_stem(word: str, ending: str) -> Tuple[str, str]:
    """Split ``word`` into ``(stem, ending)`` for highlighting the rhyme."""

    if not ending or not word.endswith(ending):
        return word, ""
    return word[: len(word) - len(ending)], ending


__all__ = ["group_by_ending", "script_suffix", "split_stem"]
