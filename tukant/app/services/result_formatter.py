"""Result formatting helpers for rhyme lookups."""

from __future__ import annotations

from typing import Any, Dict, Optional

from tukant.core import DocumentRef, MatchCandidate, segment, split_stem

from .rhyme_service import QueryResult, QueryStatus

TITLE_DISPLAY_LIMIT = 22


def truncate(text: str, limit: int = TITLE_DISPLAY_LIMIT) -> str:
    """Shorten ``text`` to ``limit`` characters plus an ellipsis."""

    if len(text) <= limit:
        return text
    return text[:limit] + "…"


class RhymeResultFormatter:
    """Turn :class:`QueryResult` objects into JSON-ready payloads.

    The payload carries no markup; rendering stays with the caller.
    """

    def __init__(self, title_limit: int = TITLE_DISPLAY_LIMIT) -> None:
        self.title_limit = title_limit

    def to_payload(self, result: QueryResult) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": result.status.value,
            "query": result.query,
            "depth": result.depth,
            "depths": [
                {
                    "depth": option.depth,
                    "suffix": option.suffix_text,
                    "count": option.match_count,
                }
                for option in result.available_depths
            ],
            "summary": None,
            "message": self._message(result),
            "groups": [],
        }
        if result.status is not QueryStatus.OK:
            return payload

        suffix = self._active_suffix(result)
        payload["summary"] = {
            "total": result.total,
            "suffix": suffix,
            "clusters": len(segment(suffix)) if suffix else 0,
        }
        payload["groups"] = [
            {
                "ending": ending,
                "count": len(members),
                "entries": [self._entry(candidate, ending) for candidate in members],
            }
            for ending, members in result.groups.items()
        ]
        return payload

    def _message(self, result: QueryResult) -> Optional[str]:
        if result.status is QueryStatus.INVALID:
            return "तुक खोजने के लिए कोई शब्द लिखें / Type a word to find rhymes."
        if result.status is QueryStatus.NO_MATCHES:
            return f'"{result.query}" की तुक नहीं मिली / No rhymes found.'
        total = result.total
        return f"{total} तुक मिली / {total} rhyme{'s' if total != 1 else ''} found"

    @staticmethod
    def _active_suffix(result: QueryResult) -> str:
        for option in result.available_depths:
            if option.depth == result.depth:
                return option.suffix_text
        return ""

    def _entry(self, candidate: MatchCandidate, ending: str) -> Dict[str, Any]:
        stem, highlighted = split_stem(candidate.word, ending)
        return {
            "word": candidate.word,
            "stem": stem,
            "ending": highlighted,
            "purity": round(candidate.purity, 3),
            "sources": [self._source(ref) for ref in candidate.refs],
        }

    def _source(self, ref: DocumentRef) -> Dict[str, Any]:
        return {
            "title": ref.title,
            "short_title": truncate(ref.title, self.title_limit),
            "url": ref.url,
            "author": ref.author,
        }


__all__ = ["RhymeResultFormatter", "TITLE_DISPLAY_LIMIT", "truncate"]
