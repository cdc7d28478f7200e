"""
Embedding domain model.

Dependencies: pydantic
System role: Vector attached 1:1 to a stored chunk
"""

from pydantic import BaseModel, Field


class Embedding(BaseModel):
    """Embedding vector for one chunk."""

    chunk_id: int = Field(description="Owning chunk identifier")
    vector: list[float] = Field(description="Embedding values (float32 on disk)")

    @property
    def dimension(self) -> int:
        return len(self.vector)
