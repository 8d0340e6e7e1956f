#!/usr/bin/env python3
"""
API server runner for the clustering registry.
Starts the clustering context, then the FastAPI server.
"""

import uvicorn
import logging
from apis import create_app
from config.settings import settings
from core.exceptions import ClusteringInitializationError
from di.factories import ComponentFactory
from utils.helpers import setup_logging

def main():
    """Main entry point for API server."""
    # Setup logging
    setup_logging()

    # Validate configuration
    try:
        settings.validate()
    except ValueError as e:
        logging.error(f"Configuration error: {e}")
        return

    # Initialize the clustering registry; refuse to serve without it
    context = ComponentFactory().create_clustering_context()
    try:
        context.start()
    except ClusteringInitializationError as e:
        logging.error(f"{e} Cause: {e.__cause__}")
        return

    # Create FastAPI app
    app = create_app(context)

    logging.info(f"Starting clustering registry API server on {settings.API_HOST}:{settings.API_PORT}")

    try:
        uvicorn.run(
            app,
            host=settings.API_HOST,
            port=settings.API_PORT,
            log_level="info",
            access_log=True
        )
    finally:
        context.stop()
        context.close()

if __name__ == "__main__":
    main()
