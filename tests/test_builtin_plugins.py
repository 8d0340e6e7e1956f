"""
Tests for the built-in language and algorithm plugins.
"""

import pytest

from core.capabilities import LanguageComponents, STEMMER, STOPWORDS, TOKENIZER
from core.resource_lookup import PathResourceLookup
from plugins.algorithms.builtin_plugin import (
    BisectingKMeansAlgorithm,
    BuiltinAlgorithmsPlugin,
    LingoAlgorithm,
)
from plugins.languages.builtin_plugin import BuiltinLanguageComponentsProvider
from plugins.languages.components import RegexTokenizer, SuffixStemmer, parse_stopwords


class TestComponents:
    """Test the basic language components."""

    def test_tokenizer(self):
        assert RegexTokenizer().tokenize("Hello, World! It's here.") == ["hello", "world", "it's", "here"]

    def test_stemmer_keeps_minimum_stem(self):
        stemmer = SuffixStemmer(["ing", "ed", "s"])

        assert stemmer.stem("Clustering") == "cluster"
        assert stemmer.stem("walked") == "walk"
        assert stemmer.stem("is") == "is"

    def test_parse_stopwords(self):
        assert parse_stopwords("# header\nthe\n\n  a  # article\n") == ["the", "a"]


class TestBuiltinLanguageComponentsProvider:
    """Test the built-in language provider."""

    def test_bundled_defaults(self):
        """Test loading with bundled resources."""
        provider = BuiltinLanguageComponentsProvider()

        factories = provider.load("GERMAN")
        bundle = LanguageComponents("GERMAN", factories)

        assert set(factories) == {TOKENIZER, STEMMER, STOPWORDS}
        assert bundle.get(STOPWORDS).filter(["der", "Baum", "und"]) == ["Baum"]

    def test_missing_custom_resource_raises(self, tmp_path):
        """Test that an absent resource fails the load with an I/O error."""
        provider = BuiltinLanguageComponentsProvider()

        with pytest.raises(FileNotFoundError):
            provider.load("FRENCH", PathResourceLookup([tmp_path]))

    def test_unknown_language_contributes_nothing(self):
        """Test that unlisted languages get no components."""
        assert BuiltinLanguageComponentsProvider(["ENGLISH"]).load("GERMAN") == {}


class TestBuiltinAlgorithms:
    """Test the built-in algorithms' language requirements."""

    def test_listing_order(self):
        names = [p.name for p in BuiltinAlgorithmsPlugin().create_providers()]

        assert names == ["Lingo", "STC", "Bisecting K-Means"]

    def test_supports_requires_every_component(self):
        partial = LanguageComponents("X", {TOKENIZER: object, STEMMER: object})

        assert BisectingKMeansAlgorithm().supports(partial)
        assert not LingoAlgorithm().supports(partial)

    def test_empty_bundle_unsupported(self):
        assert not BisectingKMeansAlgorithm().supports(LanguageComponents("X", {}))
