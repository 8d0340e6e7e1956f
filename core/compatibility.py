"""
Compatibility resolution between assembled languages and clustering algorithms.

Pruning runs in exactly two passes:

1. languages no algorithm supports are removed, testing against the full,
   unpruned algorithm set;
2. algorithms supporting none of the remaining languages are removed.

No third pass is made, so the result is not a symmetric fixed point.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Mapping, Tuple

from interfaces.iclustering_algorithm import IClusteringAlgorithmProvider
from .capabilities import LanguageComponents
from .exceptions import NoAlgorithmsAvailableError

logger = logging.getLogger(__name__)


def _any_algorithm_supports(components: LanguageComponents,
                            algorithms: Mapping[str, IClusteringAlgorithmProvider]) -> bool:
    return any(provider.get().supports(components) for provider in algorithms.values())


def supported_languages(provider: IClusteringAlgorithmProvider,
                        languages: Mapping[str, LanguageComponents]) -> List[str]:
    """Language codes, in registry order, whose bundles the algorithm supports."""
    algorithm = provider.get()
    return [code for code, components in languages.items() if algorithm.supports(components)]


def prune_languages(languages: Mapping[str, LanguageComponents],
                    algorithms: Mapping[str, IClusteringAlgorithmProvider]) -> Dict[str, LanguageComponents]:
    """Keep languages supported by at least one algorithm."""
    kept = OrderedDict()
    for code, components in languages.items():
        if _any_algorithm_supports(components, algorithms):
            kept[code] = components
        else:
            logger.info(f"Language {code} is not supported by any clustering algorithm and will be ignored.")
    return kept


def prune_algorithms(algorithms: Mapping[str, IClusteringAlgorithmProvider],
                     languages: Mapping[str, LanguageComponents]) -> Dict[str, IClusteringAlgorithmProvider]:
    """Keep algorithms supporting at least one language."""
    kept = OrderedDict()
    for name, provider in algorithms.items():
        algorithm = provider.get()
        if any(algorithm.supports(components) for components in languages.values()):
            kept[name] = provider
        else:
            logger.info(f"Algorithm {name} does not support any of the loaded languages and will be ignored.")
    return kept


def resolve_compatibility(
        languages: Mapping[str, LanguageComponents],
        algorithms: Mapping[str, IClusteringAlgorithmProvider]
) -> Tuple[Dict[str, LanguageComponents], Dict[str, IClusteringAlgorithmProvider]]:
    """
    Prune languages and algorithms down to mutually supported entries.

    Inputs are not modified; insertion order is preserved in the results.

    Args:
        languages: Assembled bundles keyed by language code
        algorithms: Algorithm providers keyed by name

    Returns:
        Tuple of (pruned languages, pruned algorithms)

    Raises:
        NoAlgorithmsAvailableError: If no algorithm survives pruning
    """
    pruned_languages = prune_languages(languages, algorithms)
    pruned_algorithms = prune_algorithms(algorithms, pruned_languages)

    for name, provider in pruned_algorithms.items():
        codes = supported_languages(provider, pruned_languages)
        logger.info(
            f"Clustering algorithm {name} loaded with support for the following languages: "
            f"{', '.join(codes)}"
        )

    if not pruned_algorithms:
        raise NoAlgorithmsAvailableError(
            "No registered/available clustering algorithms? Check the logs for ignored "
            "languages and algorithms."
        )

    return pruned_languages, pruned_algorithms
