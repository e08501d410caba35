"""Concrete program: evaluates a Python body under random draws."""

from __future__ import annotations

import string
from collections.abc import Callable
from fractions import Fraction
from typing import Any

import numpy as np

from tvgen.core.kinds import KindTag, ValueKind
from tvgen.core.trace import Evaluation, Trace
from tvgen.core.types import UnsupportedKind

_LETTERS = string.ascii_letters
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class ConcreteProgram:
    """
    Program whose free variables are drawn uniformly at random.

    The body receives a fresh Trace on every run and uses it to declare free
    variables, constraints and outputs. Draws come from a numpy Generator
    owned by the program, so a given seed reproduces the same sequence of
    runs.

    Example:
        >>> def body(t):
        ...     x = t.free(WORD8)
        ...     t.constrain(x > 10)
        ...     t.output((x * 2) & 0xFF, WORD8)
        >>> program = ConcreteProgram(body, seed=42)
    """

    def __init__(self, body: Callable[[Trace], Any], seed: int | None = None):
        self.body = body
        self.seed = seed
        self.runs = 0
        self._rng = np.random.default_rng(seed)

    def reseed(self, seed: int | None = None) -> None:
        """Restart the draw sequence."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def run(self) -> Evaluation:
        """Run the body once under fresh draws."""
        self.runs += 1
        trace = Trace(self.draw)
        self.body(trace)
        return trace.evaluation()

    def draw(self, kind: ValueKind) -> Any:
        """Draw a random payload of ``kind``."""
        rng = self._rng
        tag = kind.tag

        if tag is KindTag.BOOL:
            return bool(rng.integers(0, 2))

        if tag is KindTag.BOUNDED:
            if kind.signed:
                low, high = -(1 << (kind.width - 1)), (1 << (kind.width - 1)) - 1
            else:
                low, high = 0, (1 << kind.width) - 1
            return _uniform_int(rng, low, high)

        if tag is KindTag.UNBOUNDED:
            return _uniform_int(rng, _INT64_MIN, _INT64_MAX)

        if tag is KindTag.FLOAT:
            return float(rng.random(dtype=np.float32))

        if tag is KindTag.DOUBLE:
            return float(rng.random())

        if tag is KindTag.REAL:
            numerator = int(rng.integers(-(1 << 31), 1 << 31))
            denominator = int(rng.integers(1, 1 << 16))
            return Fraction(numerator, denominator)

        if tag is KindTag.CHAR:
            return _LETTERS[int(rng.integers(0, len(_LETTERS)))]

        if tag is KindTag.STRING:
            length = int(rng.integers(0, 9))
            return "".join(
                _LETTERS[i] for i in rng.integers(0, len(_LETTERS), size=length)
            )

        raise UnsupportedKind(kind)

    def __repr__(self) -> str:
        name = getattr(self.body, "__name__", repr(self.body))
        return f"ConcreteProgram({name}, seed={self.seed})"


def _uniform_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in [low, high] for ranges up to 64 bits wide."""
    span = high - low
    if span < (1 << 63):
        return low + int(rng.integers(0, span, endpoint=True, dtype=np.int64))
    return low + int(rng.integers(0, span, endpoint=True, dtype=np.uint64))
