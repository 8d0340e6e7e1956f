"""
Configuration: process settings and plugin configuration files.
"""

from .loader import ClusteringSettings, load_plugin_settings, PROP_RESOURCES

__all__ = ['ClusteringSettings', 'load_plugin_settings', 'PROP_RESOURCES']
