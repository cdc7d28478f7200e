"""
Index statistics model.

Dependencies: pydantic
System role: Counts over the three stored tables
"""

from pydantic import BaseModel, Field, computed_field


class IndexStatistics(BaseModel):
    """
    Row counts of the index.

    In the steady state embedding_count equals chunk_count; a shortfall
    means some file was only partially indexed.
    """

    document_count: int = Field(ge=0)
    chunk_count: int = Field(ge=0)
    embedding_count: int = Field(ge=0)

    @computed_field
    @property
    def missing_embeddings(self) -> int:
        return max(self.chunk_count - self.embedding_count, 0)
