"""
tvgen: constrained test-vector generation.

Draws concrete assignments satisfying a program's constraints by rejection
sampling and renders them as source text in one of several dialects.
"""

__version__ = "0.1.0"

# Core exports
from tvgen.core.kinds import ConcreteValue, Dialect, ValueKind
from tvgen.core.types import (
    Endianness,
    GenerationConfig,
    HeterogeneousKinds,
    MissingBinding,
    SamplingExhausted,
    SplitMismatch,
    SplitSpec,
    TVGenError,
    UnsupportedKind,
    UnsupportedProgram,
    ValidationError,
)
from tvgen.core.vectors import TestVector, TestVectorSet
from tvgen.generators.base import generate
from tvgen.generators.concrete import ConcreteProgram
from tvgen.renderers import render

__all__ = [
    "ConcreteValue",
    "Dialect",
    "ValueKind",
    "Endianness",
    "GenerationConfig",
    "SplitSpec",
    "TestVector",
    "TestVectorSet",
    "ConcreteProgram",
    "generate",
    "render",
    "TVGenError",
    "ValidationError",
    "HeterogeneousKinds",
    "MissingBinding",
    "SamplingExhausted",
    "SplitMismatch",
    "UnsupportedKind",
    "UnsupportedProgram",
]
