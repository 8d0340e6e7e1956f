"""
Abstract interfaces for clustering algorithms and their providers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, FrozenSet

if TYPE_CHECKING:
    from core.capabilities import CapabilityKey, LanguageComponents


class IClusteringAlgorithm(ABC):
    """A clustering algorithm, seen only through its language requirements."""

    @property
    @abstractmethod
    def required_components(self) -> FrozenSet['CapabilityKey']:
        """Capabilities a language bundle must provide for this algorithm."""
        pass

    def supports(self, components: 'LanguageComponents') -> bool:
        """
        Check whether a language bundle provides everything this algorithm needs.

        Args:
            components: Assembled language bundle

        Returns:
            True if every required capability is present
        """
        return all(components.has(key) for key in self.required_components)


class IClusteringAlgorithmProvider(ABC):
    """Wraps one clustering algorithm."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm name used as the registry key."""
        pass

    @abstractmethod
    def get(self) -> IClusteringAlgorithm:
        """Return an algorithm instance."""
        pass
