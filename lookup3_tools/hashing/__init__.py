"""lookup3 hash functions."""

from __future__ import annotations

from lookup3_tools.hashing.jenkins import hashlittle, hashlittle2, hashlittle64
from lookup3_tools.hashing.mixer import HashLittle2, MultipleWritesError
from lookup3_tools.hashing.vectors import REFERENCE_VECTORS, check_vectors

__all__ = [
    "hashlittle",
    "hashlittle2",
    "hashlittle64",
    "HashLittle2",
    "MultipleWritesError",
    "REFERENCE_VECTORS",
    "check_vectors",
]
