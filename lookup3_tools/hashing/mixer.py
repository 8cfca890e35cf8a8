"""hashlib-style object for the 64-bit hashlittle2 hash."""

from __future__ import annotations

import struct

import structlog

from lookup3_tools.hashing.jenkins import as_bytes, hashlittle2

logger = structlog.get_logger()

_DIGEST = struct.Struct(">Q")


class MultipleWritesError(ValueError):
    """Raised when a hash object is written to twice without a reset."""

    def __init__(self, message: str = "multiple writes not supported") -> None:
        super().__init__(message)


class HashLittle2:
    """Stateful wrapper around hashlittle2().

    The object follows the hashlib interface so it can stand in wherever a
    generic hash object is expected, but it only accepts a single write.
    hashlittle2 seeds itself with the key length, so hashing a key in two
    update() calls would give a different value than hashing it in one.
    A second update() before reset() raises MultipleWritesError.

    The digest is the primary hash in the high 32 bits and the secondary
    hash in the low 32 bits, laid out big-endian.

    Example:
        >>> h = HashLittle2(b"abc")
        >>> h.hexdigest()
        '0e3976313c03be9e'
        >>> h.reset()
        >>> h.update(b"a")
        1
        >>> hex(h.digest32())
        '0x58d68708'
    """

    name = "hashlittle2"
    digest_size = 8
    block_size = 1

    def __init__(self, data: bytes | bytearray | memoryview | None = None) -> None:
        self._c = 0
        self._b = 0
        self._computed = False
        if data is not None:
            self.update(data)

    @property
    def computed(self) -> bool:
        """Whether a write has been hashed since the last reset."""
        return self._computed

    def reset(self) -> None:
        """Clear the accumulators so the next write starts from a zero seed."""
        self._c = 0
        self._b = 0
        self._computed = False

    def update(self, data: bytes | bytearray | memoryview) -> int:
        """Hash the complete key.

        Args:
            data: The entire key, in one piece

        Returns:
            Number of bytes consumed, the buffer size in bytes

        Raises:
            MultipleWritesError: If the object already holds a result
            TypeError: If data is a str or not bytes-like
        """
        if self._computed:
            logger.warning("multiple_writes_rejected", hash=self.name)
            raise MultipleWritesError()

        key = as_bytes(data)
        c, b = hashlittle2(key, self._c, self._b)

        self._c, self._b = c, b
        self._computed = True
        return len(key)

    write = update

    def digest(self, existing: bytes = b"", append: bool = False) -> bytes:
        """Return the 8-byte big-endian digest.

        Args:
            existing: Buffer to extend when append is set
            append: Return existing followed by the digest

        Returns:
            The digest, or existing + digest
        """
        value = _DIGEST.pack(self.digest64())
        if append:
            return bytes(existing) + value
        return value

    def hexdigest(self) -> str:
        return self.digest().hex()

    def digest64(self) -> int:
        """Return the packed (c << 32) | b value."""
        return (self._c << 32) | self._b

    intdigest = digest64

    def digest32(self) -> int:
        """Return the primary hash, equal to the legacy 32-bit hashlittle()."""
        return self._c

    def copy(self) -> HashLittle2:
        clone = HashLittle2()
        clone._c = self._c
        clone._b = self._b
        clone._computed = self._computed
        return clone

    def __repr__(self) -> str:
        state = "computed" if self._computed else "idle"
        return f"<{self.name} {state} {self.hexdigest()}>"
