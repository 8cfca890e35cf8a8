"""CLI command implementations for lookup3_tools.

This module contains the command-line interface implementations:
- hash: Compute hashlittle2 digests of values, files or stdin
- verify: Check the implementation against reference vectors
"""

from lookup3_tools.commands.digest import hash_command
from lookup3_tools.commands.verify import verify

__all__ = ["hash_command", "verify"]
