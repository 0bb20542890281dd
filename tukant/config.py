"""Tunable limits for rhyme matching."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from tukant.utils.observability import get_logger

_ENV_FIELDS: Dict[str, tuple[str, Callable[[str], Any]]] = {
    "TUKANT_MIN_WORD_LENGTH": ("min_word_length", int),
    "TUKANT_MAX_DEPTH": ("max_depth", int),
    "TUKANT_MIN_MATCHES": ("min_matches_for_depth", int),
    "TUKANT_PURITY_TOLERANCE": ("purity_tolerance", float),
    "TUKANT_QUERY_CACHE_SIZE": ("query_cache_size", int),
}

_logger = get_logger(__name__).bind(component="config")


@dataclass(frozen=True)
class RhymeConfig:
    """Limits shared by the index, matcher and depth selector.

    ``min_word_length`` is the shortest word (in code points) the corpus index
    keeps.  Depths run from ``min_depth`` to ``max_depth`` phoneme tokens;
    a depth is accepted automatically once it yields at least
    ``min_matches_for_depth`` rhymes.  Purity ratios closer than
    ``purity_tolerance`` rank as equal and fall back to alphabetical order.
    ``query_cache_size`` bounds the phonetic forms kept for words outside the
    corpus, such as queries; 0 disables caching them.
    """

    min_word_length: int = 2
    min_depth: int = 1
    max_depth: int = 8
    min_matches_for_depth: int = 2
    purity_tolerance: float = 0.1
    query_cache_size: int = 512

    def __post_init__(self) -> None:
        if self.min_word_length < 1:
            raise ValueError("min_word_length must be at least 1")
        if self.min_depth < 1:
            raise ValueError("min_depth must be at least 1")
        if self.max_depth < self.min_depth:
            raise ValueError("max_depth must not be smaller than min_depth")
        if self.min_matches_for_depth < 1:
            raise ValueError("min_matches_for_depth must be at least 1")
        if self.purity_tolerance < 0:
            raise ValueError("purity_tolerance must not be negative")
        if self.query_cache_size < 0:
            raise ValueError("query_cache_size must not be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RhymeConfig":
        """Build a config from ``TUKANT_*`` environment variables.

        Unparsable values are logged and skipped; if the parsed overrides
        describe an invalid config the defaults are used instead.
        """

        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for variable, (field_name, parse) in _ENV_FIELDS.items():
            raw = env.get(variable)
            if raw is None or not raw.strip():
                continue
            try:
                overrides[field_name] = parse(raw.strip())
            except ValueError:
                _logger.warning(
                    "Ignoring unparsable configuration value",
                    context={"variable": variable, "value": raw},
                )

        try:
            return cls(**overrides)
        except ValueError as exc:
            _logger.warning(
                "Ignoring out-of-range configuration overrides",
                context={"overrides": overrides, "error": str(exc)},
            )
            return cls()


DEFAULT_CONFIG = RhymeConfig()

__all__ = ["RhymeConfig", "DEFAULT_CONFIG"]
