"""
Utility functions and helpers for the clustering registry service.
Includes logging setup and registry summaries.
"""

import logging
import os
import sys
from typing import Dict, List

from config.settings import settings
from core.clustering_context import ClusteringContext
from core.compatibility import supported_languages

def setup_logging():
    """Set up logging configuration for the application."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    # Suppress some noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging system initialized")

def algorithm_language_table(context: ClusteringContext) -> Dict[str, List[str]]:
    """
    Map every registered algorithm to the languages it supports.

    Args:
        context: Started clustering context

    Returns:
        Algorithm name -> supported language codes, in registry order
    """
    languages = {code: context.get_language_components(code) for code in context.get_languages()}
    return {
        name: supported_languages(provider, languages)
        for name, provider in context.get_algorithms().items()
    }

def format_algorithm_table(table: Dict[str, List[str]]) -> str:
    """
    Format the algorithm/language table for display.

    Args:
        table: Output of algorithm_language_table

    Returns:
        Formatted string
    """
    if not table:
        return "No clustering algorithms available."

    width = max(len(name) for name in table)
    lines = ["Clustering algorithms:"]
    for name, codes in table.items():
        lines.append(f"  {name.ljust(width)}  {', '.join(codes)}")
    return "\n".join(lines)
