"""Struct-array renderer: test vectors as a C array of records with a driver."""

from __future__ import annotations

from tvgen.core.kinds import (
    ConcreteValue,
    Dialect,
    KindTag,
    ValueKind,
    fixed_width_value,
)
from tvgen.core.types import UnsupportedKind
from tvgen.core.vectors import TestVectorSet
from tvgen.renderers.base import BANNER, Renderer
from tvgen.renderers.numfmt import C_SUFFIXES, bounded_hex, c_double, c_float

PRELUDE = [
    "#include <stdio.h>",
    "#include <inttypes.h>",
    "#include <stdint.h>",
    "#include <stdbool.h>",
    "#include <string.h>",
    "#include <math.h>",
    "",
    "/* The boolean type */",
    "typedef bool SBool;",
    "",
    "/* The float type */",
    "typedef float SFloat;",
    "",
    "/* The double type */",
    "typedef double SDouble;",
    "",
    "/* Unsigned bit-vectors */",
    "typedef uint8_t  SWord8;",
    "typedef uint16_t SWord16;",
    "typedef uint32_t SWord32;",
    "typedef uint64_t SWord64;",
    "",
    "/* Signed bit-vectors */",
    "typedef int8_t  SInt8;",
    "typedef int16_t SInt16;",
    "typedef int32_t SInt32;",
    "typedef int64_t SInt64;",
    "",
]

_SIMPLE_TYPES = {
    KindTag.BOOL: "SBool",
    KindTag.FLOAT: "SFloat",
    KindTag.DOUBLE: "SDouble",
}

# printf conversions per kind
_FORMATS = {
    (False, 8): '0x%02"PRIx8"',
    (False, 16): '0x%04"PRIx16"U',
    (False, 32): '0x%08"PRIx32"UL',
    (False, 64): '0x%016"PRIx64"ULL',
    (True, 8): '%"PRId8"',
    (True, 16): '%"PRId16"',
    (True, 32): '%"PRId32"L',
    (True, 64): '%"PRId64"LL',
}


def c_type(kind: ValueKind) -> str:
    if kind.is_bounded:
        return f"S{'Int' if kind.signed else 'Word'}{kind.width}"
    try:
        return _SIMPLE_TYPES[kind.tag]
    except KeyError:
        raise UnsupportedKind(kind, dialect=Dialect.STRUCT_ARRAY) from None


def c_value(value: ConcreteValue) -> str:
    kind = value.kind

    if kind.tag is KindTag.BOOL:
        return "true " if value.payload else "false"
    if kind.is_bounded:
        suffix = C_SUFFIXES.get((kind.signed, kind.width), "")
        return bounded_hex(fixed_width_value(value), kind.width, suffix)
    if kind.tag is KindTag.FLOAT:
        return c_float(value.payload)
    if kind.tag is KindTag.DOUBLE:
        return c_double(value.payload)

    raise UnsupportedKind(kind, value.payload, Dialect.STRUCT_ARRAY)


def c_format(kind: ValueKind) -> str:
    """printf conversion used by the driver for ``kind``."""
    if kind.tag is KindTag.BOOL:
        return "%s"
    if kind.tag in (KindTag.FLOAT, KindTag.DOUBLE):
        return "%f"
    try:
        return _FORMATS[(kind.signed, kind.width)]
    except KeyError:
        raise UnsupportedKind(kind, dialect=Dialect.STRUCT_ARRAY) from None


class StructArrayRenderer(Renderer):
    """
    Render test vectors as a C program.

    The record layout is taken from the first vector: inputs become fields
    ``i0, i1, ...`` and outputs ``o0, o1, ...``. The generated ``main`` is a
    stub that prints every record; replace it with code that uses the array.
    """

    dialect = Dialect.STRUCT_ARRAY

    def _render(self, name: str, vectors: TestVectorSet) -> list[str]:
        vectors.check_homogeneous()
        first = vectors.first
        inputs = first.inputs if first is not None else ()
        outputs = first.outputs if first is not None else ()

        lines = [f"/* {BANNER} */", ""]
        lines.extend(PRELUDE)
        lines.append("typedef struct {")
        lines.append("  struct {")
        lines.extend(
            f"    {c_type(v.kind)} i{i};" for i, v in enumerate(inputs)
        )
        lines.append("  } input;")
        lines.append("  struct {")
        lines.extend(
            f"    {c_type(v.kind)} o{i};" for i, v in enumerate(outputs)
        )
        lines.append("  } output;")
        lines.append(f"}} {name}TestVector;")
        lines.append("")
        lines.append(f"{name}TestVector {name}[] = {{")
        lines.append("      " + "\n    , ".join(self._row(v) for v in vectors))
        lines.append("};")
        lines.append("")
        lines.append(f"int {name}Length = {len(vectors)};")
        lines.append("")
        lines.append(
            "/* Stub driver showing the test values, "
            "replace with code that uses the test vectors. */"
        )
        lines.append("int main(void)")
        lines.append("{")
        lines.append("  int i;")
        lines.append(f"  for(i = 0; i < {name}Length; ++i)")
        lines.append("  {")
        lines.append("    " + self._print_line(name, vectors))
        lines.append("  }")
        lines.append("")
        lines.append("  return 0;")
        lines.append("}")
        return lines

    @staticmethod
    def _row(vector) -> str:
        ins = ", ".join(c_value(v) for v in vector.inputs)
        outs = ", ".join(c_value(v) for v in vector.outputs)
        return f"{{{{{ins}}}, {{{outs}}}}}"

    @staticmethod
    def _print_line(name: str, vectors: TestVectorSet) -> str:
        first = vectors.first
        if first is None:
            return 'printf("");'

        def arg(value: ConcreteValue, field: str) -> str:
            if value.kind.tag is KindTag.BOOL:
                return f'({field} == true) ? "true " : "false"'
            return field

        fmt = (
            " ".join(c_format(v.kind) for v in first.inputs)
            + " -> "
            + " ".join(c_format(v.kind) for v in first.outputs)
        )
        args = [arg(v, f"{name}[i].input.i{i}") for i, v in enumerate(first.inputs)]
        args += [
            arg(v, f"{name}[i].output.o{i}") for i, v in enumerate(first.outputs)
        ]
        index_width = len(str(len(vectors) - 1))

        return (
            f'printf("%*d. {fmt}\\n", {index_width}, i'
            + "".join(f"\n           , {a}" for a in args)
            + ");"
        )
