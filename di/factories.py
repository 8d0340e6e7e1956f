"""
Component factories wiring settings and plugins into the clustering context.
"""

from pathlib import Path
from typing import Optional, Union

from config.settings import settings
from core.clustering_context import ClusteringContext
from plugins.registry import PluginRegistry


class ComponentFactory:
    """Factory for creating clustering components."""

    def __init__(self, plugin_registry: PluginRegistry = None):
        """
        Initialize component factory.

        Args:
            plugin_registry: Plugin registry for provider discovery
        """
        self.plugin_registry = plugin_registry or PluginRegistry()

    def create_clustering_context(self, config_dir: Optional[Union[str, Path]] = None,
                                  plugin_name: Optional[str] = None) -> ClusteringContext:
        """
        Create an unstarted clustering context over the registered plugins.

        Args:
            config_dir: Host configuration directory, defaults to settings
            plugin_name: Plugin configuration subdirectory, defaults to settings

        Returns:
            Clustering context
        """
        return ClusteringContext(
            config_dir or settings.CLUSTERING_CONFIG_DIR,
            self.plugin_registry.algorithm_providers(),
            self.plugin_registry.language_component_providers(),
            plugin_name=plugin_name or settings.CLUSTERING_PLUGIN_NAME,
        )
