"""Shared utilities for lookup3-tools."""

from __future__ import annotations

from typing import BinaryIO

from lookup3_tools.core.types import DigestWidth


def unhexlify(hex_str: str) -> bytes:
    """Convert hex string to bytes.

    Whitespace and an optional 0x prefix are ignored.

    Args:
        hex_str: Hex string to convert

    Returns:
        Binary data

    Raises:
        ValueError: If hex_str contains invalid hex characters

    Example:
        >>> unhexlify('0x6869')
        b'hi'
    """
    cleaned = "".join(hex_str.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid hex input: {hex_str!r}") from e


def read_all(stream: BinaryIO) -> bytes:
    """Read a stream to the end.

    The hash has to see the whole key at once, so this returns a single
    buffer rather than chunks.
    """
    return stream.read()


def format_digest(value: int, width: DigestWidth = DigestWidth.FULL, upper: bool = False) -> str:
    """Format a digest as zero-padded hex.

    Example:
        >>> format_digest(0xDEADBEEF, DigestWidth.LEGACY)
        'deadbeef'
    """
    digits = int(width) // 4
    result = f"{value:0{digits}x}"
    return result.upper() if upper else result


def format_size(size: int) -> str:
    """Format byte size in human-readable format.

    Args:
        size: Size in bytes

    Returns:
        Formatted size string

    Example:
        >>> format_size(1536)
        '1.5 KB'
    """
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB", "GB", "TB"):
        value /= 1024
        if value < 1024 or unit == "TB":
            return f"{value:.1f} {unit}"
    return f"{size} B"
