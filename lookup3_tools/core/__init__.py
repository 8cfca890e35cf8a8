"""Core functionality for lookup3_tools.

This module provides shared functionality used across the package:
- Configuration management
- Type definitions
- Utility functions
"""

from lookup3_tools.core.types import (
    DigestWidth,
    HashResult,
    OutputFormat,
    ReferenceVector,
    VectorCheck,
)
from lookup3_tools.core.utils import (
    format_digest,
    format_size,
    read_all,
    unhexlify,
)

__all__ = [
    # Types
    "DigestWidth",
    "HashResult",
    "OutputFormat",
    "ReferenceVector",
    "VectorCheck",
    # Utils
    "unhexlify",
    "read_all",
    "format_digest",
    "format_size",
]
