"""
Centralized configuration management for the clustering registry service.
Loads environment variables and provides default configurations.
"""

import logging
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings and configuration."""

    # Host configuration
    CLUSTERING_CONFIG_DIR: str = os.getenv("CLUSTERING_CONFIG_DIR", "config_files")
    CLUSTERING_PLUGIN_NAME: str = os.getenv("CLUSTERING_PLUGIN_NAME", "clustering")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    # API server
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    @classmethod
    def validate(cls) -> None:
        """Validate that settings hold usable values."""
        problems = []
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL}")
        if not 0 < cls.API_PORT < 65536:
            problems.append(f"API_PORT={cls.API_PORT}")
        if not cls.CLUSTERING_PLUGIN_NAME:
            problems.append("CLUSTERING_PLUGIN_NAME is empty")

        if problems:
            raise ValueError(f"Invalid settings: {', '.join(problems)}")

# Global settings instance
settings = Settings()
