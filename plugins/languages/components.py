"""
Basic language-analysis components used by the built-in language plugin.
"""

import re
from typing import Iterable, List, Sequence

from interfaces.ilanguage_components import IStemmer, IStopwordFilter, ITokenizer


class RegexTokenizer(ITokenizer):
    """Lower-cased word tokenizer."""

    _WORD = re.compile(r"\w+(?:['’]\w+)*", re.UNICODE)

    def tokenize(self, text: str) -> List[str]:
        return [m.group(0).lower() for m in self._WORD.finditer(text)]


class SuffixStemmer(IStemmer):
    """Strips the longest matching suffix, keeping a minimum stem length."""

    def __init__(self, suffixes: Sequence[str], min_stem_length: int = 3):
        self.suffixes = sorted(suffixes, key=len, reverse=True)
        self.min_stem_length = min_stem_length

    def stem(self, word: str) -> str:
        word = word.lower()
        for suffix in self.suffixes:
            if word.endswith(suffix) and len(word) - len(suffix) >= self.min_stem_length:
                return word[:-len(suffix)]
        return word


class SetStopwordFilter(IStopwordFilter):
    """Case-insensitive stopword filter over a fixed word set."""

    def __init__(self, words: Iterable[str]):
        self.words = frozenset(w.lower() for w in words)

    def is_stopword(self, word: str) -> bool:
        return word.lower() in self.words


def parse_stopwords(text: str) -> List[str]:
    """Parse a stopword resource: one word per line, '#' starts a comment."""
    words = []
    for line in text.splitlines():
        word = line.split("#", 1)[0].strip()
        if word:
            words.append(word)
    return words
