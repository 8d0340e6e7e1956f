"""
Built-in clustering algorithms plugin.
"""

from typing import FrozenSet, List, Type

from core.capabilities import CapabilityKey, STEMMER, STOPWORDS, TOKENIZER
from interfaces import IClusteringAlgorithm, IClusteringAlgorithmProvider


class LingoAlgorithm(IClusteringAlgorithm):
    """Lingo: label-first clustering over frequent phrases."""

    @property
    def required_components(self) -> FrozenSet[CapabilityKey]:
        return frozenset({TOKENIZER, STEMMER, STOPWORDS})


class STCAlgorithm(IClusteringAlgorithm):
    """Suffix Tree Clustering."""

    @property
    def required_components(self) -> FrozenSet[CapabilityKey]:
        return frozenset({TOKENIZER, STEMMER, STOPWORDS})


class BisectingKMeansAlgorithm(IClusteringAlgorithm):
    """Bisecting k-means over term vectors."""

    @property
    def required_components(self) -> FrozenSet[CapabilityKey]:
        return frozenset({TOKENIZER, STEMMER})


class AlgorithmProvider(IClusteringAlgorithmProvider):
    """Provider creating a fresh algorithm instance on every call."""

    def __init__(self, name: str, algorithm_class: Type[IClusteringAlgorithm]):
        self._name = name
        self._algorithm_class = algorithm_class

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> IClusteringAlgorithm:
        return self._algorithm_class()

    def __repr__(self) -> str:
        return f"AlgorithmProvider({self._name!r})"


class BuiltinAlgorithmsPlugin:
    """Plugin for the built-in clustering algorithms."""

    def __init__(self):
        """Initialize built-in algorithms plugin."""
        self.name = "builtin_algorithms"
        self.description = "Lingo, STC and Bisecting K-Means"

    def create_providers(self) -> List[IClusteringAlgorithmProvider]:
        """
        Create algorithm providers, in listing order.

        Returns:
            Providers contributed by this plugin
        """
        return [
            AlgorithmProvider("Lingo", LingoAlgorithm),
            AlgorithmProvider("STC", STCAlgorithm),
            AlgorithmProvider("Bisecting K-Means", BisectingKMeansAlgorithm),
        ]

    def is_available(self) -> bool:
        return True
