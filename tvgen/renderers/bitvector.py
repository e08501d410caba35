"""Bit-vector renderer: bit-blasted test vectors for hardware verification flows."""

from __future__ import annotations

from typing import Any

from tvgen.core.kinds import ConcreteValue, Dialect, KindTag, fixed_width_value
from tvgen.core.types import (
    Endianness,
    SplitMismatch,
    SplitSpec,
    UnsupportedKind,
    ValidationError,
)
from tvgen.core.vectors import TestVectorSet
from tvgen.renderers.base import BANNER, Renderer, mk_tuple

# Helper turning a sized literal such as "4'b1010" into a list of booleans.
READER = (
    "   let c s = val [_, r] = str_split s \"'\" in "
    'map (\\s. s == "1") (explode (string_tl r))'
)


def blast(value: ConcreteValue) -> str:
    """
    Bits of a value, most significant first.

    Booleans are a single bit; fixed-width integers use their two's
    complement pattern over the kind's width.
    """
    kind = value.kind
    if kind.tag is KindTag.BOOL:
        return "1" if value.payload else "0"
    if kind.is_bounded:
        pattern = fixed_width_value(value) & ((1 << kind.width) - 1)
        return format(pattern, f"0{kind.width}b")

    raise UnsupportedKind(kind, value.payload, Dialect.BIT_VECTOR)


def unblast(bits: str, signed: bool) -> int:
    """Read a big-endian bit string back as an integer."""
    pattern = int(bits, 2)
    if signed and bits[0] == "1":
        return pattern - (1 << len(bits))
    return pattern


def partition(bits: str, widths: tuple[int, ...], side: str = "") -> list[str]:
    """
    Regroup ``bits`` into tokens of the given widths.

    Width 1 yields ``T``/``F``; wider groups yield a sized binary literal.

    Raises:
        SplitMismatch: If the widths do not consume exactly all bits
    """
    tokens = []
    rest = bits
    for width in widths:
        if len(rest) < width:
            raise SplitMismatch(width, len(rest), side)
        chunk, rest = rest[:width], rest[width:]
        if width == 1:
            tokens.append("T" if chunk == "1" else "F")
        else:
            tokens.append(f"c \"{width}'b{chunk}\"")

    if rest:
        raise SplitMismatch(0, len(rest), side)
    return tokens


class BitVectorRenderer(Renderer):
    """
    Render test vectors as a list of bit-level input/output tuples.

    Options:
        endianness: Endianness.BIG (default) or Endianness.LITTLE; little
            endian reverses each side's whole bit string before regrouping
        splits: SplitSpec giving the token widths of the inputs and outputs
    """

    dialect = Dialect.BIT_VECTOR
    options = frozenset({"endianness", "splits"})

    def _validate_options(self, options: dict[str, Any]) -> dict[str, Any]:
        endianness = options.get("endianness", Endianness.BIG)
        if isinstance(endianness, str):
            try:
                endianness = Endianness(endianness.lower())
            except ValueError:
                raise ValidationError(f"Unknown endianness {endianness!r}") from None
        if not isinstance(endianness, Endianness):
            raise ValidationError(f"Unknown endianness {endianness!r}")

        splits = options.get("splits")
        if splits is None:
            raise ValidationError("The bit_vector dialect needs a SplitSpec")
        if not isinstance(splits, SplitSpec):
            try:
                inputs, outputs = splits
                inputs, outputs = tuple(inputs), tuple(outputs)
            except (TypeError, ValueError):
                raise ValidationError(
                    "splits must be a SplitSpec or an (inputs, outputs) pair, "
                    f"got {splits!r}"
                ) from None
            splits = SplitSpec(inputs, outputs)

        return {"endianness": endianness, "splits": splits}

    @property
    def endianness(self) -> Endianness:
        return self.parameters["endianness"]

    @property
    def splits(self) -> SplitSpec:
        return self.parameters["splits"]

    def side(
        self, values: tuple[ConcreteValue, ...], widths: tuple[int, ...], side: str
    ) -> str:
        bits = "".join(blast(v) for v in values)
        if self.endianness is Endianness.LITTLE:
            bits = bits[::-1]
        return mk_tuple(partition(bits, widths, side))

    def _render(self, name: str, vectors: TestVectorSet) -> list[str]:
        rows = []
        for index, vector in enumerate(vectors):
            ins = self.side(vector.inputs, self.splits.inputs, f"vector {index} inputs")
            outs = self.side(
                vector.outputs, self.splits.outputs, f"vector {index} outputs"
            )
            rows.append(f"({ins}, {outs})")

        lines = [
            f"// {BANNER}",
            f"let {name} =",
            READER,
        ]
        if rows:
            lines.append("   in [ " + "\n      , ".join(rows))
            lines.append("      ];")
        else:
            lines.append("   in [];")
        return lines
