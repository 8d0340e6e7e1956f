"""
Lifecycle facade holding the clustering algorithms and language components
initialized and ready for the lifetime of the host process.
"""

import logging
from collections import OrderedDict
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

from config.loader import PROP_RESOURCES, load_plugin_settings
from interfaces.iclustering_algorithm import IClusteringAlgorithmProvider
from interfaces.ilanguage_components_provider import ILanguageComponentsProvider
from .capabilities import LanguageComponents
from .compatibility import resolve_compatibility
from .exceptions import (
    ClusteringInitializationError,
    ContextNotStartedError,
    MissingConfigurationError,
)
from .language_assembly import assemble_language_components
from .registry import ClusteringRegistry
from .resource_discovery import discover_resource_lookup

logger = logging.getLogger(__name__)

DEFAULT_PLUGIN_NAME = "clustering"


class LifecycleState(Enum):
    """Lifecycle states of the clustering context."""
    INITIALIZED = "initialized"
    STARTED = "started"
    STOPPED = "stopped"
    CLOSED = "closed"


class ClusteringContext:
    """
    Builds the algorithm and language registries once at startup and serves
    read-only lookups afterwards.

    Nothing is published unless every initialization step succeeds.
    """

    def __init__(self,
                 config_dir: Union[str, Path],
                 algorithm_providers: Mapping[str, IClusteringAlgorithmProvider],
                 language_component_providers: Mapping[str, Sequence[ILanguageComponentsProvider]],
                 plugin_name: str = DEFAULT_PLUGIN_NAME):
        """
        Initialize the context.

        Args:
            config_dir: Host configuration directory
            algorithm_providers: Algorithm providers keyed by name, in registration order
            language_component_providers: Providers keyed by language code
            plugin_name: Name of the plugin configuration subdirectory
        """
        self.config_dir = Path(config_dir)
        self.plugin_name = plugin_name
        self._algorithm_providers = OrderedDict(algorithm_providers)
        self._language_component_providers = OrderedDict(
            (language, list(providers)) for language, providers in language_component_providers.items()
        )
        self._registry: Optional[ClusteringRegistry] = None
        self._state = LifecycleState.INITIALIZED

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def plugin_config_dir(self) -> Path:
        return self.config_dir / self.plugin_name

    def start(self) -> None:
        """
        Discover resources, assemble languages and resolve compatibility.

        Raises:
            ClusteringInitializationError: Wrapping the underlying fatal error
        """
        if self._state is LifecycleState.STARTED:
            return
        if self._state is LifecycleState.CLOSED:
            raise ClusteringInitializationError("Clustering context has been closed.")

        try:
            registry = self._initialize()
        except Exception as e:
            logger.error(f"Could not initialize clustering: {e}")
            raise ClusteringInitializationError("Could not initialize clustering.") from e

        self._registry = registry
        self._state = LifecycleState.STARTED

    def _initialize(self) -> ClusteringRegistry:
        plugin_config_dir = self.plugin_config_dir
        if not plugin_config_dir.is_dir():
            raise MissingConfigurationError(plugin_config_dir)

        plugin_settings = load_plugin_settings(plugin_config_dir)
        resource_lookup = discover_resource_lookup(
            self.config_dir, plugin_settings.get_as_list(PROP_RESOURCES)
        )

        languages: Dict[str, LanguageComponents] = OrderedDict()
        for language, providers in self._language_component_providers.items():
            languages[language] = assemble_language_components(language, resource_lookup, providers)

        languages, algorithms = resolve_compatibility(languages, self._algorithm_providers)
        return ClusteringRegistry(algorithms=algorithms, languages=languages)

    def stop(self) -> None:
        # Registries are owned whole; there is nothing to tear down per entry.
        if self._state is LifecycleState.STARTED:
            self._state = LifecycleState.STOPPED

    def close(self) -> None:
        self._registry = None
        self._state = LifecycleState.CLOSED

    def _published(self) -> ClusteringRegistry:
        if self._registry is None:
            raise ContextNotStartedError("Clustering context is not started.")
        return self._registry

    def get_algorithms(self) -> Mapping[str, IClusteringAlgorithmProvider]:
        """Return the read-only algorithm registry, in registration order."""
        return self._published().algorithms

    def get_languages(self) -> List[str]:
        """Return supported language codes, in registration order."""
        return self._published().language_codes()

    def get_language_components(self, language: str) -> Optional[LanguageComponents]:
        """Return the bundle for a language, or None if it is not supported."""
        return self._published().get_language_components(language)

    def is_language_supported(self, language: str) -> bool:
        return self._published().is_language_supported(language)
