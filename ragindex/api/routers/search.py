"""
Search API endpoints.

Routes: POST /search

Dependencies: ragindex.application.services, ragindex.models
System role: Semantic search HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ragindex.api.deps import get_rag_service
from ragindex.application.services import RagService
from ragindex.models import SearchRequest, SearchResponse, SearchResultItem

from .error_handling import handle_rag_errors

router = APIRouter(prefix="/search", tags=["search"])


@router.post("", response_model=SearchResponse)
@handle_rag_errors
async def search(
    request: SearchRequest,
    rag_service: RagService = Depends(get_rag_service),
) -> SearchResponse:
    """
    Semantic search over indexed chunks.

    An empty result list means nothing reached the similarity threshold.

    Raises:
        HTTPException(502): Query could not be embedded
    """
    results = await run_in_threadpool(
        rag_service.search,
        request.query,
        top_k=request.top_k,
        threshold=request.threshold,
    )
    items = [SearchResultItem.from_result(result) for result in results]
    return SearchResponse(query=request.query, results=items, total=len(items))
