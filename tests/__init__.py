"""
Test suite for the clustering registry.
Provides fake providers shared by the test modules.
"""

from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional

from core.capabilities import CapabilityKey
from interfaces import (
    IClusteringAlgorithm,
    IClusteringAlgorithmProvider,
    ILanguageComponentsProvider,
    IResourceLookup,
)


class FakeLanguageProvider(ILanguageComponentsProvider):
    """Language provider returning canned contributions and recording calls."""

    def __init__(self, name: str,
                 contributions: Dict[str, Dict[CapabilityKey, Callable[[], Any]]],
                 failing: Iterable[str] = (),
                 error: Exception = None):
        self._name = name
        self.contributions = contributions
        self.failing = set(failing)
        self.error = error
        self.calls: List[tuple] = []

    @property
    def name(self) -> str:
        return self._name

    def languages(self) -> List[str]:
        return list(self.contributions.keys()) + [l for l in self.failing if l not in self.contributions]

    def load(self, language: str, resource_lookup: Optional[IResourceLookup] = None):
        self.calls.append((language, resource_lookup))
        if language in self.failing:
            raise self.error or FileNotFoundError(f"{language} resources missing")
        return dict(self.contributions.get(language, {}))


class FakeAlgorithm(IClusteringAlgorithm):
    """Algorithm supporting an explicit set of language codes."""

    def __init__(self, languages: Iterable[str]):
        self.languages = set(languages)

    @property
    def required_components(self) -> FrozenSet[CapabilityKey]:
        return frozenset()

    def supports(self, components) -> bool:
        return components.language in self.languages


class FakeAlgorithmProvider(IClusteringAlgorithmProvider):
    """Provider wrapping a FakeAlgorithm."""

    def __init__(self, name: str, languages: Iterable[str]):
        self._name = name
        self._languages = list(languages)

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> IClusteringAlgorithm:
        return FakeAlgorithm(self._languages)


def fake_factory(label: str) -> Callable[[], str]:
    """Factory returning a label, handy for identifying which provider won."""
    return lambda: label
