"""Core type definitions for lookup3_tools."""

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field


class DigestWidth(IntEnum):
    """Digest widths in bits."""
    LEGACY = 32
    FULL = 64


class OutputFormat(StrEnum):
    """CLI output formats."""
    RICH = "rich"
    JSON = "json"
    PLAIN = "plain"


class HashResult(BaseModel):
    """Hash of a single input."""
    source: str = Field(..., description="Input label (value, file path or stdin)")
    length: int = Field(..., ge=0, description="Input length in bytes")
    hash64: int = Field(..., ge=0, le=0xFFFFFFFFFFFFFFFF, description="Packed (c << 32) | b")
    width: DigestWidth = Field(DigestWidth.FULL, description="Digest width in bits")

    model_config = ConfigDict(frozen=True)

    @property
    def hash32(self) -> int:
        """Primary hash, equal to the legacy 32-bit hashlittle()."""
        return self.hash64 >> 32

    @property
    def value(self) -> int:
        """Digest value at the selected width."""
        return self.hash32 if self.width == DigestWidth.LEGACY else self.hash64


class ReferenceVector(BaseModel):
    """Published test vector."""
    text: str = Field(..., description="Input text, hashed as UTF-8")
    hash32: int = Field(..., ge=0, le=0xFFFFFFFF, description="Expected legacy 32-bit hash")
    hash64: int | None = Field(None, ge=0, le=0xFFFFFFFFFFFFFFFF, description="Expected 64-bit hash")

    model_config = ConfigDict(frozen=True)


class VectorCheck(BaseModel):
    """Outcome of checking one reference vector."""
    vector: ReferenceVector
    computed32: int = Field(..., description="Computed legacy 32-bit hash")
    computed64: int = Field(..., description="Computed 64-bit hash")

    @property
    def passed(self) -> bool:
        if self.computed32 != self.vector.hash32:
            return False
        if (self.computed64 >> 32) != self.computed32:
            return False
        return self.vector.hash64 is None or self.computed64 == self.vector.hash64
