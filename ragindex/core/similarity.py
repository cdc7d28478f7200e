"""
Cosine similarity ranking.

Brute-force scoring of a query vector against stored chunk vectors,
threshold filtering and top-k selection with a deterministic tie-break
on (document_id, chunk_index, chunk id).

Dependencies: numpy, ragindex.models
System role: Similarity ranker for semantic search
"""

from collections.abc import Sequence

import numpy as np

from ragindex.core.exceptions import DimensionMismatchError
from ragindex.models import Chunk, Embedding


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1, 1]; 0.0 when either vector has zero magnitude

    Raises:
        DimensionMismatchError: When the vectors differ in length
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    similarity = np.dot(va, vb) / (norm_a * norm_b)
    return float(np.clip(similarity, -1.0, 1.0))


def _batch_similarities(query: Sequence[float], vectors: list[list[float]]) -> np.ndarray:
    """Cosine similarity of query against each row, zero rows scoring 0."""
    matrix = np.asarray(vectors, dtype=np.float64)
    q = np.asarray(query, dtype=np.float64)

    denominators = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    dots = matrix @ q
    similarities = np.zeros(len(vectors), dtype=np.float64)
    np.divide(dots, denominators, out=similarities, where=denominators > 0)
    return np.clip(similarities, -1.0, 1.0)


def rank_and_filter(
    query: Sequence[float],
    candidates: Sequence[tuple[Chunk, Embedding]],
    top_k: int,
    threshold: float,
) -> list[tuple[Chunk, float]]:
    """
    Score candidates, keep those at or above threshold, return the best top_k.

    Args:
        query: Query embedding
        candidates: (chunk, embedding) pairs from the store scan
        top_k: Maximum number of results
        threshold: Minimum similarity (inclusive)

    Returns:
        list[tuple[Chunk, float]]: Sorted by similarity descending

    Raises:
        ValueError: When top_k < 1
        DimensionMismatchError: When a stored vector differs in length from the query
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")
    if not candidates:
        return []

    for _, embedding in candidates:
        if embedding.dimension != len(query):
            raise DimensionMismatchError(
                len(query),
                embedding.dimension,
                details={"chunk_id": embedding.chunk_id},
            )

    similarities = _batch_similarities(query, [embedding.vector for _, embedding in candidates])

    matches = [
        (chunk, float(similarity))
        for (chunk, _), similarity in zip(candidates, similarities)
        if similarity >= threshold
    ]
    matches.sort(
        key=lambda match: (
            -match[1],
            match[0].document_id,
            match[0].chunk_index,
            match[0].id if match[0].id is not None else -1,
        )
    )
    return matches[:top_k]
