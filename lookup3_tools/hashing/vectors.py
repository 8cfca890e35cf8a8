"""Reference vectors for hashlittle and hashlittle2.

The 32-bit values are published lookup3 hashlittle() results with a zero
seed. Where a 64-bit value is given, the low 32 bits are the secondary
hash returned by hashlittle2().
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from lookup3_tools.core.types import ReferenceVector, VectorCheck
from lookup3_tools.hashing.jenkins import hashlittle, hashlittle64

logger = structlog.get_logger()


def _vector(text: str, hash32: int, hash64: int | None = None) -> ReferenceVector:
    return ReferenceVector(text=text, hash32=hash32, hash64=hash64)


REFERENCE_VECTORS: tuple[ReferenceVector, ...] = (
    _vector("", 0xDEADBEEF, 0xDEADBEEFDEADBEEF),
    _vector("a", 0x58D68708, 0x58D68708582647AC),
    _vector("ab", 0xFBB3A8DF, 0xFBB3A8DF6B79A0F2),
    _vector("abc", 0x0E397631, 0x0E3976313C03BE9E),
    _vector("C", 0xAABE02CB, 0xAABE02CBD7F25BA3),
    _vector("67", 0x33EAC7D8, 0x33EAC7D8E34A8133),
    _vector("hello", 0x34CBBC6E, 0x34CBBC6E5C04B779),
    _vector("7bTduA", 0xB5DAA21A, 0xB5DAA21AF6E12765),
    _vector("abcdefghijkl", 0x4012F87B, 0x4012F87B75B50EC0),
    _vector("J4b58TgCOdroAvWzHN1HFZQQ", 0xB083CCE3, 0xB083CCE39DD51106),
    _vector("sK2iisPVTchSsRXIBTPUSCWswVsWVB0s9Qsve", 0x496F819A, 0x496F819A03C68BA8),
    _vector("LbycZRyoRYqYtw9dzyBOuvQQByaOUcY", 0xCE4F0BB5),
    _vector("Sy2ZzcNt6avMfdQo4e2pQTjGs4hfAi7rQo", 0x93104249),
    _vector("DmsUiSW65STrO9MYz9UZEiHoA9W", 0x311D95FF),
    _vector("RL5", 0xDCF0ABFA),
    _vector("NJz02SkBRGkGn9d0nztLLSL9g8YW3p4d7xAfgB", 0x085D881A),
    _vector("6V0CbxRjAuvTgONMsMM4f", 0xBADDEBE8),
    _vector("UpAx2XrCe23Dupo4aePyuUFyIJMQTg", 0x7DE65CF8),
    _vector("yDVs38VovVv7qUbzOSzvSbbIwdeW4er", 0xA6ED363D),
    _vector("qfFZyU", 0x6572E63C),
    _vector("5Em2SulDbzArw6j", 0x2BD45651),
    _vector("kkscBEhp", 0x3B8E143E),
    _vector("Zg5yRgd6dsnz02zPeSi6a4PjaRzD8Qdgo", 0x492FC402),
    _vector("uSHMkV6Fvhcaald2j2RdYU96ctq", 0x4CD56137),
    _vector("7BakZCTxLR", 0xA2574D0B),
    _vector("URvZqDQRaPZMy3Fpi5nz", 0xB6BD8E51),
    _vector("M5qKA3vUAmOJ17wIeBa0c4U6iwuAaxRF8L", 0x3455693C),
    _vector("vvGwVWK2QDZRePcPhbEAZeNm6AB3oP0TCb", 0x936D8F36),
    _vector("IJZpZ2tJ4SaqNEz25oV6ceBxSCX4lqF8ElmwXfw", 0x5495F116),
    _vector("7LdX6NWCjkTeQbTYS4S2rzMrbNFPleXbGWeSQt", 0x98473079),
    _vector("9rbidzBNqzuqazhmkQENPnWrhJrxHiUQP", 0x4B752717),
    _vector("qjXQN28P42FmdNaHl6iQLFcKT", 0x5F9DFDE8),
    _vector("Q47POeCdVhRZjTX0", 0x467AE88E),
    _vector("UbyJd5VDvCaoKBJzdz7yE824h1dsAT4MpdZ", 0xA4126B0D),
    _vector("qE4P", 0xD9C5BEF7),
    _vector("t2062iRqkiOEc65V7GMtIbAHt", 0x4723CCEC),
)


def check_vector(vector: ReferenceVector) -> VectorCheck:
    """Hash a vector's text and record the computed values."""
    data = vector.text.encode("utf-8")
    return VectorCheck(
        vector=vector,
        computed32=hashlittle(data),
        computed64=hashlittle64(data),
    )


def check_vectors(
    vectors: Iterable[ReferenceVector] = REFERENCE_VECTORS,
) -> list[VectorCheck]:
    """Check every vector.

    Args:
        vectors: Vectors to check, defaults to REFERENCE_VECTORS

    Returns:
        One VectorCheck per vector, in input order
    """
    results = [check_vector(vector) for vector in vectors]
    failed = sum(1 for result in results if not result.passed)
    if failed:
        logger.warning("reference_vectors_failed", total=len(results), failed=failed)
    else:
        logger.debug("reference_vectors_passed", total=len(results))
    return results
