#!/usr/bin/env python3
"""
Command-line entry point for the clustering registry.
Initializes the registry and prints which algorithms support which languages.
"""

import argparse
import logging
import sys
from typing import List, Optional

from config.settings import settings
from core.exceptions import ClusteringInitializationError
from di.factories import ComponentFactory
from utils.helpers import algorithm_language_table, format_algorithm_table, setup_logging

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the resolved clustering registry.")
    parser.add_argument("--config-dir", default=settings.CLUSTERING_CONFIG_DIR,
                        help="Host configuration directory")
    parser.add_argument("--plugin-name", default=settings.CLUSTERING_PLUGIN_NAME,
                        help="Plugin configuration subdirectory")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging()

    context = ComponentFactory().create_clustering_context(args.config_dir, args.plugin_name)
    try:
        context.start()
    except ClusteringInitializationError as e:
        logger.error(f"{e} Cause: {e.__cause__}")
        return 1

    try:
        print(format_algorithm_table(algorithm_language_table(context)))
    finally:
        context.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
