"""
Assembly of per-language component bundles from multiple providers.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from interfaces.ilanguage_components_provider import ILanguageComponentsProvider
from interfaces.iresource_lookup import IResourceLookup
from .capabilities import CapabilityKey, LanguageComponents
from .exceptions import ComponentConflictError

logger = logging.getLogger(__name__)


def assemble_language_components(language: str,
                                 resource_lookup: Optional[IResourceLookup],
                                 providers: Sequence[ILanguageComponentsProvider]) -> LanguageComponents:
    """
    Merge every provider's contribution for a language into one bundle.

    A provider that fails with an I/O error is skipped for this language
    only. The resulting bundle may be empty.

    Args:
        language: Language code
        resource_lookup: Custom resource lookup, or None for bundled defaults
        providers: Providers, in contribution order

    Returns:
        Assembled language bundle

    Raises:
        ComponentConflictError: If two providers contribute the same capability
    """
    factories: Dict[CapabilityKey, Callable[[], Any]] = {}
    owners: Dict[CapabilityKey, str] = {}

    for provider in providers:
        try:
            if resource_lookup is None:
                contributed = provider.load(language)
            else:
                contributed = provider.load(language, resource_lookup)
        except OSError as e:
            logger.warning(
                f"Could not load resources for language '{language}' of provider "
                f"'{provider.name}', provider ignored for this language: {e}"
            )
            continue

        _merge_contribution(language, provider.name, contributed, factories, owners)

    return LanguageComponents(language, factories)


def _merge_contribution(language: str,
                        provider_name: str,
                        contributed: Mapping[CapabilityKey, Callable[[], Any]],
                        factories: Dict[CapabilityKey, Callable[[], Any]],
                        owners: Dict[CapabilityKey, str]) -> None:
    for key, factory in contributed.items():
        if key in factories:
            raise ComponentConflictError(language, key.name, [owners[key], provider_name])
        factories[key] = factory
        owners[key] = provider_name
