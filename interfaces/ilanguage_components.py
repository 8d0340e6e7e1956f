"""
Abstract interfaces for language-analysis capabilities.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class ITokenizer(ABC):
    """Splits text into word tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        pass


class IStemmer(ABC):
    """Reduces a word to its stem."""

    @abstractmethod
    def stem(self, word: str) -> str:
        pass


class IStopwordFilter(ABC):
    """Decides whether a word is a stopword."""

    @abstractmethod
    def is_stopword(self, word: str) -> bool:
        pass

    def filter(self, words: Iterable[str]) -> List[str]:
        """Return the words that are not stopwords, in order."""
        return [w for w in words if not self.is_stopword(w)]
