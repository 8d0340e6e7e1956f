"""
Immutable snapshot of the resolved algorithm and language registries.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from interfaces.iclustering_algorithm import IClusteringAlgorithmProvider
from .capabilities import LanguageComponents


@dataclass(frozen=True)
class ClusteringRegistry:
    """Published result of a successful initialization; never mutated."""

    algorithms: Mapping[str, IClusteringAlgorithmProvider] = field(default_factory=dict)
    languages: Mapping[str, LanguageComponents] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "algorithms", MappingProxyType(dict(self.algorithms)))
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))

    def language_codes(self) -> List[str]:
        return list(self.languages.keys())

    def get_language_components(self, code: str) -> Optional[LanguageComponents]:
        return self.languages.get(code)

    def is_language_supported(self, code: str) -> bool:
        return code in self.languages
