"""
Language component plugins.
"""

from .builtin_plugin import BuiltinLanguagesPlugin, BuiltinLanguageComponentsProvider

__all__ = ['BuiltinLanguagesPlugin', 'BuiltinLanguageComponentsProvider']
