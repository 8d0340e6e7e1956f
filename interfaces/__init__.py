"""
Abstract interfaces for the clustering provider registry.
Provides contracts for language component and clustering algorithm plugins.
"""

from .ilanguage_components import ITokenizer, IStemmer, IStopwordFilter
from .iresource_lookup import IResourceLookup
from .ilanguage_components_provider import ILanguageComponentsProvider
from .iclustering_algorithm import IClusteringAlgorithm, IClusteringAlgorithmProvider

__all__ = [
    'ITokenizer',
    'IStemmer',
    'IStopwordFilter',
    'IResourceLookup',
    'ILanguageComponentsProvider',
    'IClusteringAlgorithm',
    'IClusteringAlgorithmProvider'
]
