"""Memoised phonetic forms for corpus and query words."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Container, Dict, Optional

from tukant.utils.observability import create_counter

from .encoder import PhoneticForm, encode_word

DEFAULT_TRANSIENT_ENTRIES = 512

_CACHE_HITS = create_counter(
    "tukant_phonetic_cache_hits_total",
    "Phonetic cache lookups answered from memory.",
)
_CACHE_MISSES = create_counter(
    "tukant_phonetic_cache_misses_total",
    "Phonetic cache lookups that had to segment and encode the word.",
)


class PhoneticCache:
    """Word → :class:`PhoneticForm` mapping filled on first use.

    Every engine snapshot owns one cache; rebuilding the corpus creates a new
    cache rather than clearing a shared one.  Words in ``resident`` (normally
    the snapshot's corpus index) stay cached for the life of the snapshot.
    Any other word, such as a query typed one keystroke at a time, goes into
    a least-recently-used area holding at most ``max_transient`` entries.
    Without ``resident`` every word is kept.  Lookups are guarded by a lock so
    concurrent queries may share the instance.
    """

    def __init__(
        self,
        encoder: Optional[Callable[[str], PhoneticForm]] = None,
        *,
        resident: Optional[Container[str]] = None,
        max_transient: int = DEFAULT_TRANSIENT_ENTRIES,
    ) -> None:
        self._encoder = encoder or encode_word
        self._resident = resident
        self._max_transient = max_transient
        self._lock = threading.RLock()
        self._forms: Dict[str, PhoneticForm] = {}
        self._transient: OrderedDict[str, PhoneticForm] = OrderedDict()
        self._hits = 0
        self._misses = 0

    def _is_resident(self, word: str) -> bool:
        return self._resident is None or word in self._resident

    def _trim_transient(self) -> None:
        if self._max_transient <= 0:
            self._transient.clear()
            return

        while len(self._transient) > self._max_transient:
            self._transient.popitem(last=False)

    def get_phonetics(self, word: str) -> PhoneticForm:
        with self._lock:
            form = self._forms.get(word)
            if form is None:
                form = self._transient.get(word)
                if form is not None:
                    self._transient.move_to_end(word)
            if form is not None:
                self._hits += 1
                _CACHE_HITS.inc()
                return form

            form = self._encoder(word)
            if self._is_resident(word):
                self._forms[word] = form
            else:
                self._transient[word] = form
                self._trim_transient()
            self._misses += 1
            _CACHE_MISSES.inc()
            return form

    def clear(self) -> None:
        with self._lock:
            self._forms.clear()
            self._transient.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "entries": len(self._forms) + len(self._transient),
                "transient": len(self._transient),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._forms) + len(self._transient)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._forms or word in self._transient


__all__ = ["DEFAULT_TRANSIENT_ENTRIES", "PhoneticCache"]
