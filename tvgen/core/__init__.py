"""Core value model, vectors and error types."""

from tvgen.core.kinds import ConcreteValue, Dialect, ValueKind, is_supported, kind_of
from tvgen.core.types import Endianness, GenerationConfig, SplitSpec
from tvgen.core.vectors import TestVector, TestVectorSet

__all__ = [
    "ConcreteValue",
    "Dialect",
    "ValueKind",
    "is_supported",
    "kind_of",
    "Endianness",
    "GenerationConfig",
    "SplitSpec",
    "TestVector",
    "TestVectorSet",
]
