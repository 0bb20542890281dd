"""Word → document index built once per corpus load."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from tukant.config import DEFAULT_CONFIG, RhymeConfig
from tukant.utils.observability import get_logger

from .script import tokenise

_logger = get_logger(__name__).bind(component="corpus_index")


@dataclass(frozen=True)
class DocumentRef:
    """Reference to a corpus document; two refs are equal when their urls are."""

    url: str
    title: str = field(default="", compare=False)
    author: Optional[str] = field(default=None, compare=False)


def _field(document: Any, name: str) -> Any:
    if isinstance(document, Mapping):
        return document.get(name)
    return getattr(document, name, None)


def document_ref(document: Any) -> DocumentRef:
    """Build a :class:`DocumentRef` from a mapping or attribute-style record.

    ``poet`` is accepted in place of ``author``; a missing or blank author is
    stored as ``None``.
    """

    author = _field(document, "author") or _field(document, "poet") or None
    return DocumentRef(
        url=str(_field(document, "url")),
        title=str(_field(document, "title") or ""),
        author=str(author) if author else None,
    )


class CorpusIndex:
    """Read-only mapping from cleaned words to the documents that use them."""

    def __init__(self, entries: Dict[str, Tuple[DocumentRef, ...]], document_count: int) -> None:
        self._entries: Mapping[str, Tuple[DocumentRef, ...]] = MappingProxyType(dict(entries))
        self._document_count = document_count

    @property
    def document_count(self) -> int:
        return self._document_count

    def words(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def refs(self, word: str) -> Tuple[DocumentRef, ...]:
        return self._entries.get(word, ())

    def items(self) -> Iterator[Tuple[str, Tuple[DocumentRef, ...]]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def build_index(documents: Iterable[Any], config: RhymeConfig = DEFAULT_CONFIG) -> CorpusIndex:
    """Index every qualifying word of ``documents`` (text and title).

    References are unique per word by url and kept in first-seen order.
    """

    entries: Dict[str, List[DocumentRef]] = {}
    seen_urls: Dict[str, set[str]] = {}
    document_count = 0

    for document in documents:
        document_count += 1
        ref = document_ref(document)
        text = f"{_field(document, 'text') or ''} {_field(document, 'title') or ''}"
        for word in tokenise(text, config.min_word_length):
            urls = seen_urls.setdefault(word, set())
            if ref.url in urls:
                continue
            urls.add(ref.url)
            entries.setdefault(word, []).append(ref)

    _logger.info(
        "Corpus index built",
        context={"documents": document_count, "words": len(entries)},
    )
    return CorpusIndex(
        {word: tuple(refs) for word, refs in entries.items()},
        document_count=document_count,
    )


__all__ = ["CorpusIndex", "DocumentRef", "build_index", "document_ref"]
