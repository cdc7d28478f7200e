"""
Index API endpoints.

Routes:
- POST /index - Index a directory tree
- POST /index/file - Index one file (optionally forced)
- GET /index/stats - Document, chunk and embedding counts
- GET /index/documents - Indexed documents with progress
- DELETE /index - Clear the whole index

Blocking service calls run in the threadpool; the store serializes writers.

Dependencies: ragindex.application.services, ragindex.models
System role: Indexing HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ragindex.api.deps import get_rag_service
from ragindex.application.services import RagService
from ragindex.core.exceptions import PartialIndexingError
from ragindex.models import (
    DocumentSummary,
    FileIndexResult,
    IndexDirectoryRequest,
    IndexFileRequest,
    IndexingReport,
    IndexStatistics,
    MessageResponse,
)

from .error_handling import handle_rag_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/index", tags=["index"])


@router.post("", response_model=IndexingReport)
@handle_rag_errors
async def index_directory(
    request: IndexDirectoryRequest,
    rag_service: RagService = Depends(get_rag_service),
) -> IndexingReport:
    """
    Index every supported file below a directory.

    Already indexed paths are skipped; per-file failures are reported in
    the body, not as an error status.

    Raises:
        HTTPException(400): Directory does not exist
    """
    return await run_in_threadpool(rag_service.index, request.directory)


@router.post(
    "/file",
    response_model=FileIndexResult,
    responses={207: {"model": FileIndexResult, "description": "Partially indexed"}},
)
@handle_rag_errors
async def index_file(
    request: IndexFileRequest,
    rag_service: RagService = Depends(get_rag_service),
):
    """
    Index a single file.

    Returns 207 with the chunk accounting when some chunks failed to embed.

    Raises:
        HTTPException(400): File missing, unsupported or unparsable
    """
    try:
        return await run_in_threadpool(
            rag_service.index_file,
            request.path,
            force=request.force,
        )
    except PartialIndexingError as e:
        return JSONResponse(
            status_code=status.HTTP_207_MULTI_STATUS,
            content=e.result.model_dump(mode="json"),
        )


@router.get("/stats", response_model=IndexStatistics)
@handle_rag_errors
async def get_statistics(
    rag_service: RagService = Depends(get_rag_service),
) -> IndexStatistics:
    """Get document, chunk and embedding counts."""
    return await run_in_threadpool(rag_service.stats)


@router.get("/documents", response_model=list[DocumentSummary])
@handle_rag_errors
async def list_documents(
    incomplete_only: bool = False,
    rag_service: RagService = Depends(get_rag_service),
) -> list[DocumentSummary]:
    """
    List indexed documents.

    Args:
        incomplete_only: Only documents with chunks missing an embedding
    """
    if incomplete_only:
        return await run_in_threadpool(rag_service.incomplete_documents)
    return await run_in_threadpool(rag_service.list_documents)


@router.delete("", response_model=MessageResponse)
@handle_rag_errors
async def clear_index(
    rag_service: RagService = Depends(get_rag_service),
) -> MessageResponse:
    """Delete all documents, chunks and embeddings."""
    await run_in_threadpool(rag_service.clear)
    logger.info("Index cleared through API")
    return MessageResponse(message="Index cleared")
