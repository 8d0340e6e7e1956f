"""
Abstract interface for language component providers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from .iresource_lookup import IResourceLookup

if TYPE_CHECKING:
    from core.capabilities import CapabilityKey


class ILanguageComponentsProvider(ABC):
    """Contributes capability factories for the languages it knows."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier used in logs and conflict reports."""
        pass

    @abstractmethod
    def languages(self) -> List[str]:
        """
        Language codes this provider can contribute to.

        Returns:
            Ordered list of language codes
        """
        pass

    @abstractmethod
    def load(self, language: str,
             resource_lookup: Optional[IResourceLookup] = None) -> Dict['CapabilityKey', Callable[[], Any]]:
        """
        Load capability factories for a language.

        Args:
            language: Language code
            resource_lookup: Custom resource lookup, or None for bundled defaults

        Returns:
            Mapping of capability key to a factory producing the capability

        Raises:
            OSError: If a backing resource cannot be read
        """
        pass
