"""
Exception hierarchy for clustering registry initialization and access.
"""

from typing import Sequence


class ClusteringError(Exception):
    """Base class for all clustering registry errors."""


class MissingConfigurationError(ClusteringError):
    """The plugin configuration directory does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Missing configuration folder?: {path}")


class ConfigurationFileError(ClusteringError):
    """A plugin configuration file could not be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Could not parse configuration file {path}: {reason}")


class ComponentConflictError(ClusteringError):
    """Two providers contributed the same capability for one language."""

    def __init__(self, language: str, capability: str, providers: Sequence[str]):
        self.language = language
        self.capability = capability
        self.providers = tuple(providers)
        super().__init__(
            f"Language '{language}' has multiple providers of component "
            f"'{capability}': {', '.join(self.providers)}"
        )


class NoAlgorithmsAvailableError(ClusteringError):
    """No clustering algorithm survived compatibility resolution."""


class ClusteringInitializationError(ClusteringError):
    """Wraps any fatal failure raised while starting the clustering context."""


class ContextNotStartedError(ClusteringError):
    """Registry access attempted before a successful start (or after close)."""
