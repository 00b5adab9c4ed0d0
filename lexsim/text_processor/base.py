"""
Base Text Processor Interface

Defines the document Profile produced by the profiling stage and the abstract
interface every text processor implements.
"""
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List

from lexsim.config import AnalysisConfig


class Profile(Mapping):
    """
    Normalized frequency profile of a single document.

    Maps each retained term to its relative frequency (term count divided by
    the document's total word count). Profiles are read-only once built.

    Attributes:
        total_words (int): Number of non-empty tokens in the document,
                           stop-words included
    """
    __slots__ = ('_weights', 'total_words')

    def __init__(self, weights: Dict[str, float] = None, total_words: int = 0):
        self._weights = MappingProxyType(dict(weights or {}))
        self.total_words = total_words

    def __getitem__(self, term: str) -> float:
        return self._weights[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"Profile(terms={len(self)}, total_words={self.total_words})"

    def count(self, term: str) -> int:
        """Re-derive the raw occurrence count of a term from its weight."""
        if term not in self._weights:
            return 0
        return round(self._weights[term] * self.total_words)


class BaseTextProcessor(ABC):
    def __init__(self, config: AnalysisConfig = None):
        self.config = config or AnalysisConfig()

    @abstractmethod
    def tokenize(self, text: str) -> List[str]: ...

    @abstractmethod
    def profile_text(self, text: str) -> Profile: ...

    @abstractmethod
    def profile_file(self, filepath: str) -> Profile: ...
