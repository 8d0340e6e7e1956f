"""
APIs module for the read-only HTTP surface over the clustering registry.
"""

from fastapi import FastAPI

from core.clustering_context import ClusteringContext

def create_app(context: ClusteringContext) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        context: Started clustering context served by the endpoints

    Returns:
        FastAPI application
    """
    from .routes import router
    app = FastAPI(
        title="Clustering Registry API",
        description="Clustering algorithms and language components",
        version="1.0.0"
    )
    app.state.clustering_context = context
    app.include_router(router)
    return app
