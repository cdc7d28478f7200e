"""
Error handling for RAG API endpoints.

Maps the domain exception hierarchy onto HTTP status codes in one
decorator so routers stay free of try/except ladders.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from ragindex.core.exceptions import (
    DimensionMismatchError,
    DocumentNotFoundError,
    EmbeddingServiceError,
    ParseError,
    RagIndexError,
    StoreError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _detail(error: RagIndexError) -> dict:
    return {"error": error.message, "details": error.details}


def handle_rag_errors(func: F) -> F:
    """
    Decorator that turns RAG errors into HTTPExceptions.

    - ParseError, ValueError: 400
    - EmbeddingServiceError: 502
    - DimensionMismatchError, StoreError, DocumentNotFoundError: 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ParseError as e:
            logger.warning("Unparsable document", extra={"context": e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_detail(e))

        except ValueError as e:
            logger.warning("Invalid request", extra={"context": {"error": str(e)}})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except EmbeddingServiceError as e:
            logger.error("Embedding service failure", extra={"context": e.details})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=_detail(e))

        except (DimensionMismatchError, StoreError, DocumentNotFoundError) as e:
            logger.exception("Index failure", extra={"context": e.details})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_detail(e),
            )

    return wrapper  # type: ignore
