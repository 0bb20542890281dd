"""Devanagari code-point classes and word cleaning."""

from __future__ import annotations

import re
import unicodedata
from typing import FrozenSet, List

SCRIPT_START = 0x0900
SCRIPT_END = 0x097F

VIRAMA = "\u094d"
NUKTA = "\u093c"
ANUSVARA = "\u0902"
CHANDRABINDU = "\u0901"
VISARGA = "\u0903"

NASAL_MARKS: FrozenSet[str] = frozenset({ANUSVARA, CHANDRABINDU})


def _span(start: int, end: int) -> FrozenSet[str]:
    return frozenset(chr(code) for code in range(start, end + 1))


def _chars(*codes: int) -> FrozenSet[str]:
    return frozenset(chr(code) for code in codes)


CONSONANTS: FrozenSet[str] = _span(0x0915, 0x0939) | _span(0x0958, 0x095F) | _span(0x0978, 0x097F)

INDEPENDENT_VOWELS: FrozenSet[str] = (
    _span(0x0904, 0x0914) | _chars(0x0960, 0x0961) | _span(0x0972, 0x0977)
)

VOWEL_SIGNS: FrozenSet[str] = (
    _chars(0x093A, 0x093B, 0x094E, 0x094F, 0x0962, 0x0963)
    | _span(0x093E, 0x094C)
    | _span(0x0955, 0x0957)
)

# Marks that attach to the end of a cluster after any conjunct chain.
TRAILING_MARKS: FrozenSet[str] = VOWEL_SIGNS | NASAL_MARKS | frozenset({VISARGA, NUKTA})

# Danda, double danda, ASCII and typographic quotes, dashes, joiners.
_PUNCTUATION_PATTERN = re.compile(
    "[\u0964\u0965|,.!?;:\"'\u201c\u201d\u2018\u2019\u2013\u2014\\-"
    "\u200b\u200c\u200d\ufeff]"
)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def is_script_char(char: str) -> bool:
    return SCRIPT_START <= ord(char) <= SCRIPT_END


def has_script_char(text: str) -> bool:
    """Return ``True`` when ``text`` holds at least one Devanagari code point."""

    return any(is_script_char(char) for char in text)


def is_consonant(char: str) -> bool:
    return char in CONSONANTS


def clean_word(word: str) -> str:
    """Normalise a raw token or query into a comparable word.

    Applies NFC (which decomposes precomposed nukta letters), strips the
    punctuation common in Braj verse and removes all whitespace.
    """

    normalized = unicodedata.normalize("NFC", word or "")
    stripped = _PUNCTUATION_PATTERN.sub("", normalized)
    return _WHITESPACE_PATTERN.sub("", stripped)


def is_indexable(word: str, min_length: int) -> bool:
    return len(word) >= min_length and has_script_char(word)


def tokenise(text: str, min_length: int = 2) -> List[str]:
    """Split ``text`` on whitespace and keep cleaned Devanagari words.

    Repeated words are kept; callers de-duplicate as they need.
    """

    words: List[str] = []
    for token in _WHITESPACE_PATTERN.split(text or ""):
        word = clean_word(token)
        if is_indexable(word, min_length):
            words.append(word)
    return words


__all__ = [
    "ANUSVARA",
    "CHANDRABINDU",
    "CONSONANTS",
    "INDEPENDENT_VOWELS",
    "NASAL_MARKS",
    "NUKTA",
    "TRAILING_MARKS",
    "VIRAMA",
    "VISARGA",
    "VOWEL_SIGNS",
    "clean_word",
    "has_script_char",
    "is_consonant",
    "is_indexable",
    "is_script_char",
    "tokenise",
]
