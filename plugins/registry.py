"""
Plugin registry for dynamic discovery of language and algorithm providers.
"""

import importlib
from collections import OrderedDict
from typing import Dict, Any, Optional, List, Tuple
import logging

from interfaces import IClusteringAlgorithmProvider, ILanguageComponentsProvider

logger = logging.getLogger(__name__)

# name -> (module path, plugin class name)
LANGUAGE_PLUGINS: Dict[str, Tuple[str, str]] = {
    'builtin': ('plugins.languages.builtin_plugin', 'BuiltinLanguagesPlugin'),
}

ALGORITHM_PLUGINS: Dict[str, Tuple[str, str]] = {
    'builtin': ('plugins.algorithms.builtin_plugin', 'BuiltinAlgorithmsPlugin'),
}


class PluginRegistry:
    """Registry for managing provider plugins and their discovery."""

    def __init__(self, discover: bool = True):
        """
        Initialize plugin registry.

        Args:
            discover: Whether to auto-discover the built-in plugin map
        """
        self._language_plugins: Dict[str, Any] = OrderedDict()
        self._algorithm_plugins: Dict[str, Any] = OrderedDict()

        if discover:
            self._discover_plugins()

    def _discover_plugins(self) -> None:
        """Auto-discover available plugins."""
        self._discover(LANGUAGE_PLUGINS, self._language_plugins, "language")
        self._discover(ALGORITHM_PLUGINS, self._algorithm_plugins, "algorithm")
        logger.info("Plugin discovery completed")

    def _discover(self, plugin_map: Dict[str, Tuple[str, str]],
                  target: Dict[str, Any], kind: str) -> None:
        for name, (module_path, class_name) in plugin_map.items():
            try:
                module = importlib.import_module(module_path)
                plugin = getattr(module, class_name)()
                if not plugin.is_available():
                    logger.debug(f"{kind.capitalize()} plugin not available: {name}")
                    continue
                target[name] = plugin
                logger.debug(f"Loaded {kind} plugin: {name}")
            except ImportError:
                logger.debug(f"{kind.capitalize()} plugin not available: {name}")
            except Exception as e:
                logger.warning(f"Failed to load {kind} plugin {name}: {e}")

    def register_language_plugin(self, name: str, plugin: Any) -> None:
        """
        Register a language components plugin.

        Args:
            name: Plugin name
            plugin: Plugin instance
        """
        self._language_plugins[name] = plugin
        logger.info(f"Registered language plugin: {name}")

    def register_algorithm_plugin(self, name: str, plugin: Any) -> None:
        """
        Register a clustering algorithm plugin.

        Args:
            name: Plugin name
            plugin: Plugin instance
        """
        self._algorithm_plugins[name] = plugin
        logger.info(f"Registered algorithm plugin: {name}")

    def get_language_plugin(self, name: str) -> Optional[Any]:
        return self._language_plugins.get(name)

    def get_algorithm_plugin(self, name: str) -> Optional[Any]:
        return self._algorithm_plugins.get(name)

    def list_language_plugins(self) -> List[str]:
        return list(self._language_plugins.keys())

    def list_algorithm_plugins(self) -> List[str]:
        return list(self._algorithm_plugins.keys())

    def language_component_providers(self) -> Dict[str, List[ILanguageComponentsProvider]]:
        """
        Group language component providers by the languages they serve.

        Returns:
            Language code -> providers, languages in first-seen order and
            providers in plugin registration order
        """
        by_language: Dict[str, List[ILanguageComponentsProvider]] = OrderedDict()
        for plugin in self._language_plugins.values():
            for provider in plugin.create_providers():
                for language in provider.languages():
                    by_language.setdefault(language, []).append(provider)
        return by_language

    def algorithm_providers(self) -> Dict[str, IClusteringAlgorithmProvider]:
        """
        Collect algorithm providers keyed by algorithm name.

        Returns:
            Algorithm name -> provider, in plugin registration order

        Raises:
            ValueError: If two providers use the same algorithm name
        """
        providers: Dict[str, IClusteringAlgorithmProvider] = OrderedDict()
        for plugin_name, plugin in self._algorithm_plugins.items():
            for provider in plugin.create_providers():
                if provider.name in providers:
                    raise ValueError(
                        f"Duplicate clustering algorithm '{provider.name}' in plugin {plugin_name}"
                    )
                providers[provider.name] = provider
        return providers
