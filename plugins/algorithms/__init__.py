"""
Clustering algorithm plugins.
"""

from .builtin_plugin import AlgorithmProvider, BuiltinAlgorithmsPlugin

__all__ = ['AlgorithmProvider', 'BuiltinAlgorithmsPlugin']
