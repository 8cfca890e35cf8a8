"""lookup3 Tools - Bob Jenkins' lookup3 hash as a 64-bit digest.

This package provides hashlittle2, the lookup3 hashlittle mixing function
with both 32-bit accumulators kept, as used to index entries in
journal-style binary logs.

Key modules:
- hashing: Hash functions, the hashlib-style object and reference vectors
- core: Shared functionality (config, types, utilities)
- commands: CLI command implementations
"""

__version__ = "0.1.0"
__author__ = "lookup3-tools contributors"

# Re-export commonly used types and functions
from lookup3_tools.hashing import (
    HashLittle2,
    MultipleWritesError,
    hashlittle,
    hashlittle2,
    hashlittle64,
)

__all__ = [
    "__version__",
    "__author__",
    "HashLittle2",
    "MultipleWritesError",
    "hashlittle",
    "hashlittle2",
    "hashlittle64",
]
