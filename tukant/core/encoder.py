"""Cluster to phoneme encoding for Devanagari rhyme matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .script import (
    CONSONANTS,
    INDEPENDENT_VOWELS,
    NASAL_MARKS,
    NUKTA,
    VIRAMA,
    VISARGA,
    VOWEL_SIGNS,
)
from .segmenter import segment

SCHWA = "a"
NASAL = "N"
ASPIRATE = "H"

# ---------------------------------------------------------------------------
# Phoneme tables
# ---------------------------------------------------------------------------

# Homophones collapse onto one symbol: the retroflex nasal sounds like the
# dental one in Braj recitation, and both palatal and retroflex sibilants are
# spoken as "sh".
CONSONANT_PHONEMES: Dict[str, str] = {
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "ङ": "ng",
    "च": "ch", "छ": "chh", "ज": "j", "झ": "jh", "ञ": "ny",
    "ट": "T", "ठ": "Th", "ड": "D", "ढ": "Dh", "ण": "n",
    "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n", "ऩ": "n",
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    "य": "y", "र": "r", "ऱ": "r", "ल": "l", "ळ": "L", "ऴ": "L", "व": "v",
    "श": "sh", "ष": "sh", "स": "s", "ह": "h",
}

NUKTA_PHONEMES: Dict[str, str] = {
    "क": "q", "ख": "x", "ग": "G", "ज": "z",
    "ड": "R", "ढ": "Rh", "फ": "f", "य": "y",
    "न": "n", "र": "r", "ळ": "L",
}

# Precomposed nukta letters U+0958..U+095F, for callers that skip NFC.
CONSONANT_PHONEMES.update(
    {chr(code): NUKTA_PHONEMES[base] for base, code in zip("कखगजडढफय", range(0x0958, 0x0960))}
)

# Independent vowels and their matras share a symbol.
VOWEL_PHONEMES: Dict[str, str] = {
    "अ": "a", "ऄ": "a",
    "आ": "aa", "ा": "aa",
    "इ": "i", "ि": "i",
    "ई": "ii", "ी": "ii",
    "उ": "u", "ु": "u",
    "ऊ": "uu", "ू": "uu",
    "ऋ": "ri", "ृ": "ri",
    "ॠ": "rii", "ॄ": "rii",
    "ऌ": "li", "ॢ": "li",
    "ॡ": "lii", "ॣ": "lii",
    "ऍ": "ae", "ॅ": "ae", "ॲ": "ae",
    "ऎ": "e", "ॆ": "e",
    "ए": "e", "े": "e",
    "ऐ": "ai", "ै": "ai",
    "ऑ": "aw", "ॉ": "aw",
    "ऒ": "o", "ॊ": "o",
    "ओ": "o", "ो": "o",
    "औ": "au", "ौ": "au",
}

# Code points that carry no sound of their own.
SILENT = frozenset({"ऽ"})


@dataclass(frozen=True)
class PhoneticForm:
    """Phoneme tokens of a word plus the per-cluster bookkeeping.

    ``cluster_token_counts[i]`` is how many tokens cluster ``i`` produced and
    ``cluster_onsets[i]`` how many of those precede its vowel.
    """

    tokens: Tuple[str, ...]
    cluster_token_counts: Tuple[int, ...]
    clusters: Tuple[str, ...]
    cluster_onsets: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def suffix_key(self, depth: int) -> Optional[str]:
        """Return the last ``depth`` tokens joined, or ``None`` if too short."""

        if depth < 1 or depth > len(self.tokens):
            return None
        return " ".join(self.tokens[-depth:])


def _encode_cluster(cluster: str, is_last: bool) -> Tuple[List[str], int]:
    onset: List[str] = []
    vowel: Optional[str] = None
    has_consonant = False
    nasal = False
    visarga = False

    chars = list(cluster)
    for index, char in enumerate(chars):
        following = chars[index + 1] if index + 1 < len(chars) else ""
        if char in CONSONANTS:
            has_consonant = True
            if following == NUKTA and char in NUKTA_PHONEMES:
                onset.append(NUKTA_PHONEMES[char])
            else:
                onset.append(CONSONANT_PHONEMES.get(char, char))
        elif char in VOWEL_SIGNS or char in INDEPENDENT_VOWELS:
            if vowel is None:
                vowel = VOWEL_PHONEMES.get(char, char)
        elif char in NASAL_MARKS:
            nasal = True
        elif char == VISARGA:
            visarga = True
        elif char in (NUKTA, VIRAMA) or char in SILENT:
            continue
        else:
            onset.append(char)

    tokens = list(onset)
    if vowel is not None:
        tokens.append(vowel)
    elif has_consonant and not is_last and not cluster.endswith(VIRAMA):
        # Inherent vowel; a word-final cluster without a vowel sign drops it
        # even when it carries a nasal mark or visarga.
        tokens.append(SCHWA)
    if nasal:
        tokens.append(NASAL)
    if visarga:
        tokens.append(ASPIRATE)
    return tokens, len(onset)


def encode(clusters: Sequence[str]) -> PhoneticForm:
    """Encode an ordered cluster sequence into a :class:`PhoneticForm`."""

    cluster_tuple = tuple(clusters)
    tokens: List[str] = []
    counts: List[int] = []
    onsets: List[int] = []
    last_index = len(cluster_tuple) - 1

    for index, cluster in enumerate(cluster_tuple):
        cluster_tokens, onset = _encode_cluster(cluster, index == last_index)
        tokens.extend(cluster_tokens)
        counts.append(len(cluster_tokens))
        onsets.append(onset)

    return PhoneticForm(
        tokens=tuple(tokens),
        cluster_token_counts=tuple(counts),
        clusters=cluster_tuple,
        cluster_onsets=tuple(onsets),
    )


def encode_word(word: str) -> PhoneticForm:
    return encode(segment(word))


__all__ = [
    "ASPIRATE",
    "CONSONANT_PHONEMES",
    "NASAL",
    "PhoneticForm",
    "SCHWA",
    "VOWEL_PHONEMES",
    "encode",
    "encode_word",
]
