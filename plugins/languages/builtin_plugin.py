"""
Built-in language components plugin.
"""

from typing import Any, Callable, Dict, List, Optional

from core.capabilities import CapabilityKey, STEMMER, STOPWORDS, TOKENIZER
from core.resource_lookup import BundledResourceLookup
from interfaces import ILanguageComponentsProvider, IResourceLookup
from .components import RegexTokenizer, SetStopwordFilter, SuffixStemmer, parse_stopwords

# Suffixes stripped by the stemmer, per language
LANGUAGE_SUFFIXES: Dict[str, List[str]] = {
    "ENGLISH": ["ational", "ization", "fulness", "ousness", "ing", "ed", "ly", "es", "s"],
    "GERMAN": ["ungen", "heit", "keit", "ung", "en", "er", "es", "e"],
    "FRENCH": ["ement", "ation", "euse", "eux", "es", "er", "e", "s"],
    "SPANISH": ["amiento", "aciones", "ación", "mente", "es", "os", "as", "a", "o"],
}


def stopwords_resource_name(language: str) -> str:
    return f"{language.lower()}.stopwords.utf8"


class BuiltinLanguageComponentsProvider(ILanguageComponentsProvider):
    """Contributes a tokenizer, a stemmer and a stopword filter per language."""

    def __init__(self, languages: Optional[List[str]] = None):
        self._languages = list(languages or LANGUAGE_SUFFIXES.keys())
        self._defaults = BundledResourceLookup(f"{__package__}.resources")

    @property
    def name(self) -> str:
        return "builtin"

    def languages(self) -> List[str]:
        return list(self._languages)

    def load(self, language: str,
             resource_lookup: Optional[IResourceLookup] = None) -> Dict[CapabilityKey, Callable[[], Any]]:
        if language not in self._languages:
            return {}

        lookup = resource_lookup or self._defaults
        # Read eagerly so a missing resource fails the load, not the first use.
        stopwords = parse_stopwords(lookup.read_text(stopwords_resource_name(language)))
        suffixes = LANGUAGE_SUFFIXES.get(language, [])

        return {
            TOKENIZER: RegexTokenizer,
            STEMMER: lambda: SuffixStemmer(suffixes),
            STOPWORDS: lambda: SetStopwordFilter(stopwords),
        }


class BuiltinLanguagesPlugin:
    """Plugin for the built-in language components."""

    def __init__(self):
        """Initialize built-in languages plugin."""
        self.name = "builtin_languages"
        self.description = "Regex tokenizer, suffix stemmer and bundled stopwords"

    def create_providers(self) -> List[ILanguageComponentsProvider]:
        """
        Create language component providers.

        Returns:
            Providers contributed by this plugin
        """
        return [BuiltinLanguageComponentsProvider()]

    def is_available(self) -> bool:
        return True
