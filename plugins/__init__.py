"""
Plugin system for dynamic discovery of language and algorithm providers.
"""

from .registry import PluginRegistry

__all__ = ['PluginRegistry']
