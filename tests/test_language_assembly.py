"""
Tests for per-language bundle assembly.
"""

import logging

import pytest

from core.capabilities import CapabilityKey, STEMMER, STOPWORDS, TOKENIZER
from core.exceptions import ComponentConflictError
from core.language_assembly import assemble_language_components
from core.resource_lookup import PathResourceLookup
from tests import FakeLanguageProvider, fake_factory


class TestAssembleLanguageComponents:
    """Test merging provider contributions into one bundle."""

    def test_merges_distinct_contributions(self):
        """Test that providers contributing different capabilities are merged."""
        p1 = FakeLanguageProvider("p1", {"ENGLISH": {TOKENIZER: fake_factory("p1-tok")}})
        p2 = FakeLanguageProvider("p2", {"ENGLISH": {STEMMER: fake_factory("p2-stem")}})

        bundle = assemble_language_components("ENGLISH", None, [p1, p2])

        assert bundle.language == "ENGLISH"
        assert list(bundle.keys()) == [TOKENIZER, STEMMER]
        assert bundle.get(TOKENIZER) == "p1-tok"
        assert bundle.get(STEMMER) == "p2-stem"

    def test_conflicting_contributions_fail(self):
        """Test that two providers of the same capability are a fatal conflict."""
        p1 = FakeLanguageProvider("p1", {"GERMAN": {STEMMER: fake_factory("a")}})
        p2 = FakeLanguageProvider("p2", {"GERMAN": {TOKENIZER: fake_factory("b"),
                                                    STEMMER: fake_factory("c")}})

        with pytest.raises(ComponentConflictError, match="multiple providers") as excinfo:
            assemble_language_components("GERMAN", None, [p1, p2])

        error = excinfo.value
        assert error.language == "GERMAN"
        assert error.capability == "stemmer"
        assert error.providers == ("p1", "p2")
        assert "p1, p2" in str(error)

    def test_same_name_with_different_interface_is_distinct_capability(self):
        """Test that capability identity includes the interface type."""
        other = CapabilityKey("stemmer", object)
        p1 = FakeLanguageProvider("p1", {"ENGLISH": {STEMMER: fake_factory("a")}})
        p2 = FakeLanguageProvider("p2", {"ENGLISH": {other: fake_factory("b")}})

        bundle = assemble_language_components("ENGLISH", None, [p1, p2])

        assert len(bundle) == 2

    def test_failing_provider_skipped_for_that_language_only(self, caplog):
        """Test that an I/O failure drops one provider for one language."""
        caplog.set_level(logging.WARNING)
        flaky = FakeLanguageProvider(
            "flaky",
            {"ENGLISH": {STOPWORDS: fake_factory("sw")}},
            failing=["GERMAN"]
        )
        steady = FakeLanguageProvider(
            "steady",
            {"ENGLISH": {TOKENIZER: fake_factory("tok")},
             "GERMAN": {TOKENIZER: fake_factory("tok")}}
        )

        german = assemble_language_components("GERMAN", None, [flaky, steady])
        english = assemble_language_components("ENGLISH", None, [flaky, steady])

        assert not german.has(STOPWORDS)
        assert german.has(TOKENIZER)
        assert english.has(STOPWORDS)
        assert "'GERMAN'" in caplog.text
        assert "'flaky'" in caplog.text

    def test_non_io_errors_propagate(self):
        """Test that only I/O-class failures are swallowed."""
        broken = FakeLanguageProvider("broken", {}, failing=["ENGLISH"], error=RuntimeError("bug"))

        with pytest.raises(RuntimeError, match="bug"):
            assemble_language_components("ENGLISH", None, [broken])

    def test_default_lookup_omits_resource_argument(self):
        """Test that providers are asked for defaults when no lookup exists."""
        provider = FakeLanguageProvider("p", {"ENGLISH": {}})

        assemble_language_components("ENGLISH", None, [provider])

        assert provider.calls == [("ENGLISH", None)]

    def test_custom_lookup_is_passed(self, tmp_path):
        """Test that a path lookup is handed to every provider."""
        lookup = PathResourceLookup([tmp_path])
        provider = FakeLanguageProvider("p", {"ENGLISH": {}})

        assemble_language_components("ENGLISH", lookup, [provider])

        assert provider.calls == [("ENGLISH", lookup)]

    def test_no_providers_yields_empty_bundle(self):
        """Test that an empty bundle is a valid result."""
        bundle = assemble_language_components("FRENCH", None, [])

        assert len(bundle) == 0
        assert bundle.language == "FRENCH"

    def test_factory_lookup(self):
        """Test that the raw factory is exposed per capability."""
        factory = fake_factory("tok")
        provider = FakeLanguageProvider("p", {"ENGLISH": {TOKENIZER: factory}})

        bundle = assemble_language_components("ENGLISH", None, [provider])

        assert bundle.factory(TOKENIZER) is factory
        with pytest.raises(KeyError):
            bundle.factory(STEMMER)

    def test_factories_are_deferred(self):
        """Test that factories are only invoked on access."""
        calls = []

        def factory():
            calls.append(1)
            return object()

        provider = FakeLanguageProvider("p", {"ENGLISH": {TOKENIZER: factory}})
        bundle = assemble_language_components("ENGLISH", None, [provider])

        assert calls == []
        first, second = bundle.get(TOKENIZER), bundle.get(TOKENIZER)
        assert len(calls) == 2
        assert first is not second
