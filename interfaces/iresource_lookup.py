"""
Abstract interface for locating backing resources of language components.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class IResourceLookup(ABC):
    """Opens resources by relative name."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """
        Check whether a resource is available.

        Args:
            name: Relative resource name

        Returns:
            True if the resource can be opened
        """
        pass

    @abstractmethod
    def open(self, name: str) -> BinaryIO:
        """
        Open a resource for binary reading.

        Args:
            name: Relative resource name

        Returns:
            Binary stream, to be closed by the caller

        Raises:
            FileNotFoundError: If the resource does not exist
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of where resources are read from."""
        pass

    def read_text(self, name: str, encoding: str = "utf-8") -> str:
        """Read a whole resource as text."""
        with self.open(name) as stream:
            return stream.read().decode(encoding)
