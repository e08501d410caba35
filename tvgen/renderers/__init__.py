"""
Renderers turning test vector sets into source text.

Example:
    >>> from tvgen.renderers import render
    >>> text = render("functional", "tv", vectors)
    >>> text = render(
    ...     "bit_vector", "tv", vectors,
    ...     endianness=Endianness.BIG, splits=SplitSpec((1, 8), (8,)),
    ... )
"""

from typing import Any

from tvgen.core.kinds import Dialect
from tvgen.core.vectors import TestVectorSet
from tvgen.renderers.base import Renderer, normalize_name
from tvgen.renderers.bitvector import BitVectorRenderer
from tvgen.renderers.functional import FunctionalRenderer
from tvgen.renderers.registry import DialectRegistry
from tvgen.renderers.struct_array import StructArrayRenderer

# Initialize global registry
registry = DialectRegistry()

# Register built-in dialects
registry.register(Dialect.FUNCTIONAL, FunctionalRenderer)
registry.register(Dialect.STRUCT_ARRAY, StructArrayRenderer)
registry.register(Dialect.BIT_VECTOR, BitVectorRenderer)


def render(
    dialect: Dialect | str, name: str, vectors: TestVectorSet, **options: Any
) -> str:
    """Render ``vectors`` in ``dialect`` using the global registry."""
    return registry.render(dialect, name, vectors, **options)


__all__ = [
    "Renderer",
    "FunctionalRenderer",
    "StructArrayRenderer",
    "BitVectorRenderer",
    "DialectRegistry",
    "normalize_name",
    "registry",
    "render",
]
