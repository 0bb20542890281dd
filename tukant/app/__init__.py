"""Application layer wiring the rhyme engine for UI collaborators."""

from .services import QueryResult, QueryStatus, RhymeDictionary, RhymeResultFormatter

__all__ = ["QueryResult", "QueryStatus", "RhymeDictionary", "RhymeResultFormatter"]
