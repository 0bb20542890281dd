"""Exceptions raised by the rhyme engine."""

from __future__ import annotations


class IndexNotBuiltError(RuntimeError):
    """Raised when the engine is queried before a corpus has been indexed."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation}() called before build_index(); load a corpus first"
        )
        self.operation = operation


__all__ = ["IndexNotBuiltError"]
