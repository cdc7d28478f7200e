"""
Binary codec for embedding vectors.

Layout: a big-endian int32 element count followed by that many
big-endian float32 values. Used for both writing and reading blobs.

Dependencies: numpy
System role: Embedding blob serialization for the SQLite store
"""

import struct

import numpy as np

from ragindex.core.exceptions import StoreError

_COUNT = struct.Struct(">i")
_FLOAT32_BE = np.dtype(">f4")


def encode_vector(vector: list[float]) -> bytes:
    """
    Encode a vector into the blob layout.

    Args:
        vector: Embedding values

    Returns:
        bytes: Count header followed by float32 payload
    """
    values = np.asarray(vector, dtype=_FLOAT32_BE)
    return _COUNT.pack(values.size) + values.tobytes()


def decode_vector(blob: bytes) -> list[float]:
    """
    Decode a blob produced by encode_vector.

    Args:
        blob: Stored bytes

    Returns:
        list[float]: Embedding values

    Raises:
        StoreError: If the blob is truncated or its header disagrees with its length
    """
    if len(blob) < _COUNT.size:
        raise StoreError("Embedding blob is truncated", operation="decode_vector")

    (count,) = _COUNT.unpack_from(blob, 0)
    expected = _COUNT.size + count * _FLOAT32_BE.itemsize
    if count < 0 or len(blob) != expected:
        raise StoreError(
            "Embedding blob length does not match its header",
            operation="decode_vector",
            details={"count": count, "length": len(blob)},
        )

    values = np.frombuffer(blob, dtype=_FLOAT32_BE, count=count, offset=_COUNT.size)
    return values.astype(np.float64).tolist()
