"""Core phonetic analysis and matching for Tukant."""

from .cache import PhoneticCache
from .corpus_index import CorpusIndex, DocumentRef, build_index, document_ref
from .depth import DepthOption, auto_detect_depth, available_depths, depth_cap
from .encoder import PhoneticForm, encode, encode_word
from .grouping import group_by_ending, script_suffix, split_stem
from .matcher import MatchCandidate, find_rhymes, purity_ratio, rank_candidates
from .script import clean_word, has_script_char, tokenise
from .segmenter import segment

__all__ = [
    "CorpusIndex",
    "DepthOption",
    "DocumentRef",
    "MatchCandidate",
    "PhoneticCache",
    "PhoneticForm",
    "auto_detect_depth",
    "available_depths",
    "build_index",
    "clean_word",
    "depth_cap",
    "document_ref",
    "encode",
    "encode_word",
    "find_rhymes",
    "group_by_ending",
    "has_script_char",
    "purity_ratio",
    "rank_candidates",
    "script_suffix",
    "segment",
    "split_stem",
    "tokenise",
]
