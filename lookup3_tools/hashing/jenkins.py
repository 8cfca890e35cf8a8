"""Bob Jenkins' lookup3 hashlittle, extended to 64 bits.

This module implements the lookup3 ``hashlittle`` mixing function and its
``hashlittle2`` variant, which keeps the second 32-bit accumulator that
``hashlittle`` throws away. Packing both accumulators gives the 64-bit hash
used to index entries in journal-style binary logs.

The hash depends on the total key length, so a key must always be hashed in
one call. Feeding two slices separately does not give the hash of their
concatenation.

Reference: http://burtleburtle.net/bob/c/lookup3.c
Public Domain implementation by Bob Jenkins, May 2006.
"""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_INIT = 0xDEADBEEF

# One full block: three little-endian 32-bit words
_BLOCK = struct.Struct("<3I")


def _rot(x: int, k: int) -> int:
    """Rotate x left by k bits (32-bit)."""
    return ((x << k) | (x >> (32 - k))) & _MASK32


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Mix 3 32-bit values reversibly.

    This is the core mixing function that provides avalanche behavior.
    """
    a = (a - c) & _MASK32
    a ^= _rot(c, 4)
    c = (c + b) & _MASK32

    b = (b - a) & _MASK32
    b ^= _rot(a, 6)
    a = (a + c) & _MASK32

    c = (c - b) & _MASK32
    c ^= _rot(b, 8)
    b = (b + a) & _MASK32

    a = (a - c) & _MASK32
    a ^= _rot(c, 16)
    c = (c + b) & _MASK32

    b = (b - a) & _MASK32
    b ^= _rot(a, 19)
    a = (a + c) & _MASK32

    c = (c - b) & _MASK32
    c ^= _rot(b, 4)
    b = (b + a) & _MASK32

    return a, b, c


def _final(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Final mixing of 3 32-bit values into c.

    Pairs of (a,b,c) values differing in only a few bits will usually
    produce values of c that look totally different.
    """
    c ^= b
    c = (c - _rot(b, 14)) & _MASK32

    a ^= c
    a = (a - _rot(c, 11)) & _MASK32

    b ^= a
    b = (b - _rot(a, 25)) & _MASK32

    c ^= b
    c = (c - _rot(b, 16)) & _MASK32

    a ^= c
    a = (a - _rot(c, 4)) & _MASK32

    b ^= a
    b = (b - _rot(a, 14)) & _MASK32

    c ^= b
    c = (c - _rot(b, 24)) & _MASK32

    return a, b, c


def _fold_tail(
    a: int, b: int, c: int, data: bytes, offset: int, length: int
) -> tuple[int, int, int]:
    """Add the last 1-12 bytes of the key into (a, b, c).

    Each guard includes every shorter length, so a 12-byte tail touches
    all three words and a 1-byte tail only the low byte of a.
    """
    if length >= 12:
        c = (c + (data[offset + 11] << 24)) & _MASK32
    if length >= 11:
        c = (c + (data[offset + 10] << 16)) & _MASK32
    if length >= 10:
        c = (c + (data[offset + 9] << 8)) & _MASK32
    if length >= 9:
        c = (c + data[offset + 8]) & _MASK32
    if length >= 8:
        b = (b + (data[offset + 7] << 24)) & _MASK32
    if length >= 7:
        b = (b + (data[offset + 6] << 16)) & _MASK32
    if length >= 6:
        b = (b + (data[offset + 5] << 8)) & _MASK32
    if length >= 5:
        b = (b + data[offset + 4]) & _MASK32
    if length >= 4:
        a = (a + (data[offset + 3] << 24)) & _MASK32
    if length >= 3:
        a = (a + (data[offset + 2] << 16)) & _MASK32
    if length >= 2:
        a = (a + (data[offset + 1] << 8)) & _MASK32
    if length >= 1:
        a = (a + data[offset]) & _MASK32
    return a, b, c


def as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return the raw bytes of a bytes-like object.

    Multi-byte buffers such as array("I") are taken byte for byte, so the
    result length is the buffer's nbytes, not its item count.

    Raises:
        TypeError: If data is a str or does not support the buffer protocol
    """
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    if isinstance(data, bytes):
        return data
    try:
        return memoryview(data).tobytes()
    except TypeError as e:
        raise TypeError(
            f"object supporting the buffer API required, not {type(data).__name__}"
        ) from e


def hashlittle2(
    data: bytes | bytearray | memoryview, pc: int = 0, pb: int = 0
) -> tuple[int, int]:
    """Return 2 32-bit hash values.

    This is identical to hashlittle(), except it returns two 32-bit hash
    values instead of just one. This is good enough for hash table lookup
    with 2^64 buckets.

    Args:
        data: The data to hash, supplied in full
        pc: Primary seed value, defaults to 0
        pb: Secondary seed value, defaults to 0

    Returns:
        Tuple of (primary_hash, secondary_hash), i.e. the final (c, b)

    Raises:
        TypeError: If data is a str or not bytes-like

    Example:
        >>> hashlittle2(b"hello", 0, 0)
        (885767278, 1543812985)
    """
    data = as_bytes(data)
    length = len(data)

    # Set up the internal state
    a = b = c = (_INIT + length + pc) & _MASK32
    c = (c + pb) & _MASK32

    # Process data in 12-byte chunks
    offset = 0
    while length > 12:
        k0, k1, k2 = _BLOCK.unpack_from(data, offset)
        a = (a + k0) & _MASK32
        b = (b + k1) & _MASK32
        c = (c + k2) & _MASK32

        a, b, c = _mix(a, b, c)

        length -= 12
        offset += 12

    if length == 0:
        return c, b  # Zero length strings require no mixing

    a, b, c = _fold_tail(a, b, c, data, offset, length)
    a, b, c = _final(a, b, c)
    return c, b


def hashlittle(data: bytes | bytearray | memoryview, initval: int = 0) -> int:
    """Hash a variable-length key into a 32-bit value.

    This is Bob Jenkins' hashlittle() function from lookup3.c.
    Every bit of the key affects every bit of the return value.

    Args:
        data: The data to hash
        initval: Initial value (seed) for the hash, defaults to 0

    Returns:
        32-bit hash value

    Example:
        >>> hashlittle(b"hello", 0)
        885767278
    """
    return hashlittle2(data, initval, 0)[0]


def hashlittle64(data: bytes | bytearray | memoryview) -> int:
    """Hash a key into a 64-bit value from a zero seed.

    The primary hash fills the upper 32 bits and matches hashlittle();
    the secondary hash fills the lower 32 bits.

    Example:
        >>> hex(hashlittle64(b"abc"))
        '0xe3976313c03be9e'
    """
    c, b = hashlittle2(data)
    return (c << 32) | b
