"""Rhyme dictionary service composing indexing, depth selection and grouping."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from tukant.config import RhymeConfig
from tukant.core import (
    CorpusIndex,
    DepthOption,
    MatchCandidate,
    PhoneticCache,
    PhoneticForm,
    auto_detect_depth,
    available_depths,
    build_index,
    clean_word,
    depth_cap,
    find_rhymes,
    group_by_ending,
    has_script_char,
)
from tukant.errors import IndexNotBuiltError
from tukant.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


class QueryStatus(str, Enum):
    """Outcome of :meth:`RhymeDictionary.query`."""

    INVALID = "invalid"
    NO_MATCHES = "no_matches"
    OK = "ok"


@dataclass(frozen=True)
class QueryResult:
    """Everything a UI needs to render one rhyme lookup."""

    status: QueryStatus
    query: str
    depth: Optional[int] = None
    available_depths: Tuple[DepthOption, ...] = ()
    groups: Mapping[str, Tuple[MatchCandidate, ...]] = field(default_factory=dict)

    @classmethod
    def invalid(cls, query: str) -> "QueryResult":
        return cls(status=QueryStatus.INVALID, query=query)

    @property
    def matches(self) -> List[MatchCandidate]:
        return [candidate for members in self.groups.values() for candidate in members]

    @property
    def total(self) -> int:
        return sum(len(members) for members in self.groups.values())


@dataclass(frozen=True)
class _Snapshot:
    index: CorpusIndex
    cache: PhoneticCache


class RhymeDictionary:
    """Corpus-backed rhyme lookup for Devanagari verse.

    ``build_index`` (or ``reload``) prepares an index and a fresh phonetic
    cache and swaps both in together; queries read whichever snapshot was
    current when they started.  Every lookup before the first build raises
    :class:`~tukant.errors.IndexNotBuiltError`.
    """

    def __init__(
        self,
        documents: Optional[Iterable[Any]] = None,
        *,
        config: Optional[RhymeConfig] = None,
    ) -> None:
        self.config = config or RhymeConfig.from_env()
        self._snapshot: Optional[_Snapshot] = None
        self._build_lock = threading.Lock()
        self._logger = get_logger(__name__).bind(component="rhyme_dictionary")

        self._metric_queries = create_counter(
            "tukant_queries_total",
            "Rhyme queries answered, by outcome.",
            label_names=("outcome",),
        )
        self._metric_query_failures = create_counter(
            "tukant_query_failures_total",
            "Rhyme queries that raised an exception.",
        )
        self._metric_query_duration = create_histogram(
            "tukant_query_seconds",
            "Latency of composed rhyme queries.",
        )
        self._metric_index_builds = create_counter(
            "tukant_index_builds_total",
            "Corpus index builds completed.",
        )

        self._logger.info(
            "Rhyme dictionary initialised",
            context={
                "max_depth": self.config.max_depth,
                "min_matches_for_depth": self.config.min_matches_for_depth,
                "purity_tolerance": self.config.purity_tolerance,
                "query_cache_size": self.config.query_cache_size,
            },
        )

        if documents is not None:
            self.build_index(documents)

    # ------------------------------------------------------------------
    # Corpus lifecycle
    # ------------------------------------------------------------------
    def build_index(self, documents: Iterable[Any]) -> CorpusIndex:
        """Index ``documents`` and atomically replace the current snapshot."""

        with self._build_lock:
            with start_span("tukant.build_index") as span:
                index = build_index(documents, self.config)
                self._snapshot = _Snapshot(
                    index=index,
                    cache=PhoneticCache(
                        resident=index, max_transient=self.config.query_cache_size
                    ),
                )
                add_span_attributes(
                    span,
                    {"index.words": len(index), "index.documents": index.document_count},
                )
        self._metric_index_builds.inc()
        self._logger.info(
            "Corpus snapshot swapped in",
            context={"words": len(index), "documents": index.document_count},
        )
        return index

    reload = build_index

    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None

    @property
    def vocabulary_size(self) -> int:
        return len(self._require_snapshot("vocabulary_size").index)

    @property
    def document_count(self) -> int:
        return self._require_snapshot("document_count").index.document_count

    def _require_snapshot(self, operation: str) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is None:
            self._logger.error(
                "Rhyme dictionary used before indexing",
                context={"operation": operation},
            )
            raise IndexNotBuiltError(operation)
        return snapshot

    # ------------------------------------------------------------------
    # Individual operations
    # ------------------------------------------------------------------
    def phonetics(self, word: str) -> PhoneticForm:
        snapshot = self._require_snapshot("phonetics")
        return snapshot.cache.get_phonetics(clean_word(word))

    def find_rhymes(self, word: str, depth: int) -> List[MatchCandidate]:
        snapshot = self._require_snapshot("find_rhymes")
        cleaned = clean_word(word)
        if not has_script_char(cleaned):
            return []
        return find_rhymes(cleaned, depth, snapshot.index, snapshot.cache, self.config)

    def auto_detect_depth(self, word: str) -> int:
        snapshot = self._require_snapshot("auto_detect_depth")
        cleaned = clean_word(word)
        if not has_script_char(cleaned):
            return self.config.min_depth
        return auto_detect_depth(cleaned, snapshot.index, snapshot.cache, self.config)

    def available_depths(self, word: str) -> List[DepthOption]:
        snapshot = self._require_snapshot("available_depths")
        cleaned = clean_word(word)
        if not has_script_char(cleaned):
            return []
        return available_depths(cleaned, snapshot.index, snapshot.cache, self.config)

    def group_by_ending(
        self,
        candidates: Iterable[MatchCandidate],
        depth: int,
    ) -> Dict[str, List[MatchCandidate]]:
        snapshot = self._require_snapshot("group_by_ending")
        return group_by_ending(candidates, depth, snapshot.cache)

    # ------------------------------------------------------------------
    # Composed query
    # ------------------------------------------------------------------
    def query(self, word: Optional[str], depth: Optional[int] = None) -> QueryResult:
        """Look up rhymes for a raw query string.

        ``depth`` overrides the automatic choice and is clamped into the range
        the query supports.  Queries without Devanagari text come back as
        :attr:`QueryStatus.INVALID` rather than raising.
        """

        snapshot = self._require_snapshot("query")
        cleaned = clean_word(word or "")
        request_context: Dict[str, Any] = {"query": cleaned, "requested_depth": depth}

        if not cleaned or not has_script_char(cleaned):
            self._metric_queries.labels(outcome=QueryStatus.INVALID.value).inc()
            self._logger.debug("Query rejected", context=request_context)
            return QueryResult.invalid(cleaned)

        self._logger.info("Rhyme query received", context=request_context)

        with start_span("tukant.query", request_context) as span:
            try:
                with self._metric_query_duration.time():
                    result = self._query_internal(snapshot, cleaned, depth)
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._metric_query_failures.inc()
                self._logger.error("Rhyme query failed", context=failure_context)
                record_exception(span, exc)
                raise

            self._metric_queries.labels(outcome=result.status.value).inc()
            add_span_attributes(
                span,
                {
                    "query.depth": result.depth,
                    "result.total": result.total,
                    "result.groups": len(result.groups),
                },
            )
            self._logger.info(
                "Rhyme query completed",
                context={
                    "query": cleaned,
                    "status": result.status.value,
                    "depth": result.depth,
                    "total": result.total,
                    "groups": len(result.groups),
                },
            )
            return result

    def _query_internal(
        self,
        snapshot: _Snapshot,
        query: str,
        requested_depth: Optional[int],
    ) -> QueryResult:
        index, cache, config = snapshot.index, snapshot.cache, self.config

        if requested_depth is None:
            depth = auto_detect_depth(query, index, cache, config)
        else:
            upper = max(depth_cap(query, cache, config), config.min_depth)
            depth = min(max(int(requested_depth), config.min_depth), upper)

        options = available_depths(query, index, cache, config)
        matches = find_rhymes(query, depth, index, cache, config)
        groups = group_by_ending(matches, depth, cache)

        # An override may land on an empty depth while shallower ones rhyme.
        return QueryResult(
            status=QueryStatus.OK if options else QueryStatus.NO_MATCHES,
            query=query,
            depth=depth,
            available_depths=tuple(options),
            groups={ending: tuple(members) for ending, members in groups.items()},
        )


__all__ = ["QueryResult", "QueryStatus", "RhymeDictionary"]
