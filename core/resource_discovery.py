"""
Resolution of configured resource locations into a resource lookup.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .resource_lookup import PathResourceLookup

logger = logging.getLogger(__name__)


def resolve_resource_locations(config_dir: Union[str, Path], locations: Iterable[str]) -> List[Path]:
    """
    Resolve configured locations against the configuration directory.

    Locations that do not exist are logged and dropped; order is preserved.

    Args:
        config_dir: Host configuration directory
        locations: Configured location strings, absolute or relative

    Returns:
        Existing absolute paths
    """
    base = Path(config_dir)
    resolved = []
    for location in locations:
        path = (base / location).absolute()
        if not path.exists():
            logger.info(f"Clustering algorithm resource location does not exist, ignored: {path}")
            continue
        resolved.append(path)
    return resolved


def discover_resource_lookup(config_dir: Union[str, Path],
                             locations: Iterable[str]) -> Optional[PathResourceLookup]:
    """
    Build the resource lookup for language component providers.

    Args:
        config_dir: Host configuration directory
        locations: Configured location strings

    Returns:
        A path lookup over the existing locations, or None when none exist
        and providers should fall back to their bundled resources
    """
    resolved = resolve_resource_locations(config_dir, locations)
    if not resolved:
        logger.info("Resources read from defaults (bundled with providers).")
        return None

    for path in resolved:
        logger.info(f"Clustering algorithm resources loaded relative to: {path}")
    return PathResourceLookup(resolved)
