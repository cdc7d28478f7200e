"""
Text chunking task using recursive boundary-aware splitting.

Splits document text into size-bounded chunks, preferring paragraph,
then line, then sentence, then word boundaries, and finally fixed-width
character slices. Consecutive chunks share a few words of overlap.

Dependencies: None
System role: Second stage of document ingestion pipeline
"""

SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", " ", "")


class ChunkingTask:
    """Split text into overlapping chunks on natural-language boundaries."""

    def __init__(self, chunk_size: int = 500, chunk_overlap: int = 50) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters, before overlap
            chunk_overlap: Number of trailing words of the previous chunk
                prepended to each following chunk

        Raises:
            ValueError: When chunk_size is not positive or chunk_overlap is negative
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0:
            raise ValueError(f"chunk_overlap must not be negative, got {chunk_overlap}")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks and apply word overlap.

        Text no longer than chunk_size comes back as a single chunk, so
        empty text yields [""].

        Args:
            text: Full document text

        Returns:
            list[str]: Chunks in document order
        """
        return self._apply_overlap(self.split(text))

    def split(self, text: str) -> list[str]:
        """
        Split text into chunks without overlap.

        Args:
            text: Full document text

        Returns:
            list[str]: Chunks of at most chunk_size characters, except when
                the text itself fits
        """
        return self._split(text, SEPARATORS)

    def _split(self, text: str, separators: tuple[str, ...]) -> list[str]:
        if len(text) <= self.chunk_size:
            return [text]

        separator, remaining = separators[0], separators[1:]
        if separator == "":
            return [
                text[start:start + self.chunk_size]
                for start in range(0, len(text), self.chunk_size)
            ]

        chunks: list[str] = []
        current = ""
        for part in text.split(separator):
            candidate = part if not current else f"{current}{separator}{part}"
            if len(candidate) <= self.chunk_size:
                current = candidate
                continue

            if current:
                chunks.append(current)
            if len(part) > self.chunk_size:
                # Oversized part: fall through to the finer separators
                chunks.extend(self._split(part, remaining))
                current = ""
            else:
                current = part

        if current:
            chunks.append(current)
        return chunks

    def _apply_overlap(self, chunks: list[str]) -> list[str]:
        if self.chunk_overlap == 0 or len(chunks) <= 1:
            return chunks

        overlapped = [chunks[0]]
        for previous, current in zip(chunks, chunks[1:]):
            carried = previous.split()[-self.chunk_overlap:]
            if carried:
                overlapped.append(" ".join(carried) + " " + current)
            else:
                overlapped.append(current)
        return overlapped
