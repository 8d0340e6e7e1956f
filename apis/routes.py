"""
API routes for the clustering registry.
Provides read-only endpoints listing algorithms and supported languages.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from typing import List

from core.clustering_context import ClusteringContext
from core.compatibility import supported_languages

router = APIRouter()

# Pydantic models for responses
class AlgorithmListResponse(BaseModel):
    algorithms: List[str]

class LanguageListResponse(BaseModel):
    languages: List[str]

class LanguageDetailResponse(BaseModel):
    language: str
    components: List[str]
    algorithms: List[str]

def get_clustering_context(request: Request) -> ClusteringContext:
    return request.app.state.clustering_context

@router.get("/_algorithms", response_model=AlgorithmListResponse)
async def list_algorithms(context: ClusteringContext = Depends(get_clustering_context)):
    """List available clustering algorithms in registration order."""
    return AlgorithmListResponse(algorithms=list(context.get_algorithms().keys()))

@router.get("/_languages", response_model=LanguageListResponse)
async def list_languages(context: ClusteringContext = Depends(get_clustering_context)):
    """List supported language codes."""
    return LanguageListResponse(languages=context.get_languages())

@router.get("/_languages/{code}", response_model=LanguageDetailResponse)
async def get_language(code: str, context: ClusteringContext = Depends(get_clustering_context)):
    """
    Describe one supported language: its components and the algorithms supporting it.
    """
    if not context.is_language_supported(code):
        raise HTTPException(status_code=404, detail=f"Language not supported: {code}")

    components = context.get_language_components(code)
    algorithms = [
        name for name, provider in context.get_algorithms().items()
        if code in supported_languages(provider, {code: components})
    ]
    return LanguageDetailResponse(
        language=code,
        components=[key.name for key in components.keys()],
        algorithms=algorithms
    )
