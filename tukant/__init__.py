"""Tukant: corpus-first rhyme dictionary for Devanagari verse."""

from tukant.app import QueryResult, QueryStatus, RhymeDictionary, RhymeResultFormatter
from tukant.config import RhymeConfig
from tukant.core import (
    DepthOption,
    DocumentRef,
    MatchCandidate,
    PhoneticForm,
    clean_word,
    encode_word,
    segment,
)
from tukant.errors import IndexNotBuiltError
from tukant.utils import configure_logging

__version__ = "0.1.0"

__all__ = [
    "DepthOption",
    "DocumentRef",
    "IndexNotBuiltError",
    "MatchCandidate",
    "PhoneticForm",
    "QueryResult",
    "QueryStatus",
    "RhymeConfig",
    "RhymeDictionary",
    "RhymeResultFormatter",
    "clean_word",
    "configure_logging",
    "encode_word",
    "segment",
]
