"""Service layer for Tukant."""

from .result_formatter import RhymeResultFormatter
from .rhyme_service import QueryResult, QueryStatus, RhymeDictionary

__all__ = ["QueryResult", "QueryStatus", "RhymeDictionary", "RhymeResultFormatter"]
