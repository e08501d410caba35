"""Test vectors and ordered collections of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, overload

from tvgen.core.kinds import ConcreteValue, ValueKind
from tvgen.core.types import HeterogeneousKinds

KindSignature = tuple[tuple[ValueKind, ...], tuple[ValueKind, ...]]


@dataclass(frozen=True)
class TestVector:
    """One accepted sample: its input bindings and computed outputs."""

    __test__ = False  # not a pytest test class

    inputs: tuple[ConcreteValue, ...]
    outputs: tuple[ConcreteValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def kinds(self) -> KindSignature:
        """The (input kinds, output kinds) signature of this vector."""
        return (
            tuple(v.kind for v in self.inputs),
            tuple(v.kind for v in self.outputs),
        )

    def values(self) -> tuple[list[Any], list[Any]]:
        """Plain payloads, without kinds."""
        return [v.payload for v in self.inputs], [v.payload for v in self.outputs]


class TestVectorSet(Sequence[TestVector]):
    """
    Immutable, ordered collection of test vectors.

    Iteration order is generation order: vector ``i`` is the ``i``-th
    accepted sample.
    """

    __test__ = False

    def __init__(self, vectors: Iterable[TestVector] = ()):
        self._vectors: tuple[TestVector, ...] = tuple(vectors)

    @overload
    def __getitem__(self, index: int) -> TestVector: ...

    @overload
    def __getitem__(self, index: slice) -> TestVectorSet: ...

    def __getitem__(self, index: int | slice) -> TestVector | TestVectorSet:
        if isinstance(index, slice):
            return TestVectorSet(self._vectors[index])
        return self._vectors[index]

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[TestVector]:
        return iter(self._vectors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestVectorSet):
            return NotImplemented
        return self._vectors == other._vectors

    def __hash__(self) -> int:
        return hash(self._vectors)

    def __repr__(self) -> str:
        return f"TestVectorSet({len(self._vectors)} vectors)"

    @property
    def first(self) -> TestVector | None:
        return self._vectors[0] if self._vectors else None

    def values(self) -> list[tuple[list[Any], list[Any]]]:
        """
        Retrieve the raw payloads for further processing.

        Useful where none of the rendering dialects fit and custom output
        (or further preprocessing) is needed.
        """
        return [v.values() for v in self._vectors]

    def check_homogeneous(self) -> None:
        """Raise HeterogeneousKinds unless every vector has the first one's kinds."""
        if not self._vectors:
            return

        expected = self._vectors[0].kinds()
        for index, vector in enumerate(self._vectors[1:], start=1):
            actual = vector.kinds()
            if actual != expected:
                raise HeterogeneousKinds(
                    index, _describe(expected), _describe(actual)
                )


def _describe(signature: KindSignature) -> str:
    inputs, outputs = signature
    return (
        "(" + ", ".join(map(str, inputs)) + ") -> (" + ", ".join(map(str, outputs)) + ")"
    )
