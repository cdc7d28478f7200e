"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: ragindex.application
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from ragindex.api.deps import get_rag_service
from ragindex.application.services import RagService
from ragindex.core.exceptions import StoreError


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(
    rag_service: RagService = Depends(get_rag_service),
) -> HealthResponse:
    """
    Database health check.

    Raises:
        HTTPException(503): Database not reachable
    """
    try:
        await run_in_threadpool(rag_service.ping)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return HealthResponse(status="healthy", message="Database connection OK")
