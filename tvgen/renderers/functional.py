"""Functional-module renderer: test vectors as a typed list in a standalone module."""

from __future__ import annotations

from itertools import groupby

from tvgen.core.kinds import (
    ConcreteValue,
    Dialect,
    KindTag,
    ValueKind,
    fixed_width_value,
)
from tvgen.core.types import UnsupportedKind
from tvgen.core.vectors import TestVectorSet
from tvgen.renderers.base import BANNER, Renderer, mk_tuple
from tvgen.renderers.numfmt import bounded_hex, hex_float, integer_hex

_SIMPLE_TYPES = {
    KindTag.BOOL: "Bool",
    KindTag.UNBOUNDED: "Integer",
    KindTag.FLOAT: "Float",
    KindTag.DOUBLE: "Double",
}


def type_name(kind: ValueKind) -> str:
    """Type token for a supported kind."""
    if kind.is_bounded:
        return f"{'Int' if kind.signed else 'Word'}{kind.width}"
    try:
        return _SIMPLE_TYPES[kind.tag]
    except KeyError:
        raise UnsupportedKind(kind, dialect=Dialect.FUNCTIONAL) from None


def value_text(value: ConcreteValue) -> str:
    """Literal text for a supported value."""
    tag = value.kind.tag

    if tag is KindTag.BOOL:
        return str(value.payload).ljust(5)
    if tag is KindTag.BOUNDED:
        return bounded_hex(fixed_width_value(value), value.kind.width)
    if tag is KindTag.UNBOUNDED:
        return integer_hex(value.payload)
    if tag in (KindTag.FLOAT, KindTag.DOUBLE):
        return hex_float(value.payload)

    raise UnsupportedKind(value.kind, value.payload, Dialect.FUNCTIONAL)


def _runs(values: tuple[ConcreteValue, ...]) -> list[list[ConcreteValue]]:
    """Split values into runs of consecutive equal kinds."""
    return [list(run) for _, run in groupby(values, key=lambda v: v.kind)]


def _run_type(run: list[ConcreteValue]) -> str:
    if len(run) == 1:
        return type_name(run[0].kind)
    return f"[{type_name(run[0].kind)}]"


def _run_value(run: list[ConcreteValue]) -> str:
    if len(run) == 1:
        return value_text(run[0])
    return "[" + ", ".join(value_text(v) for v in run) + "]"


def side_type(values: tuple[ConcreteValue, ...]) -> str:
    return mk_tuple([_run_type(run) for run in _runs(values)])


def side_value(values: tuple[ConcreteValue, ...]) -> str:
    return mk_tuple([_run_value(run) for run in _runs(values)])


def imports_for(vectors: TestVectorSet) -> list[str]:
    """
    Import lines needed by the module.

    Only the first vector is inspected; sets are kind-homogeneous.
    """
    first = vectors.first
    if first is None:
        return []

    kinds = [v.kind for v in first.inputs + first.outputs]
    lines = []
    if any(k.is_bounded and k.signed for k in kinds):
        lines.append("import Data.Int")
    if any(k.is_bounded and not k.signed and k.width > 1 for k in kinds):
        lines.append("import Data.Word")
    if any(k.tag is KindTag.REAL for k in kinds):
        lines.append("import Data.Ratio")

    if lines:
        lines.append("")
    return lines


class FunctionalRenderer(Renderer):
    """
    Render test vectors as a functional module.

    The module exports a single list of ``(inputs, outputs)`` tuples. Each
    side groups adjacent values of the same kind into a list, and integers
    are written in hexadecimal so values read the same regardless of sign.
    """

    dialect = Dialect.FUNCTIONAL

    def _render(self, name: str, vectors: TestVectorSet) -> list[str]:
        vectors.check_homogeneous()

        module = name[0].upper() + name[1:]
        pad = " " * (len(name) + 3)

        lines = [
            f"-- {BANNER}",
            "",
            f"module {module}({name}) where",
            "",
        ]
        lines.extend(imports_for(vectors))

        first = vectors.first
        if first is None:
            lines.append(f"{name} :: [a]")
            lines.append(f"{name} = []")
            return lines

        lines.append(
            f"{name} :: [({side_type(first.inputs)}, {side_type(first.outputs)})]"
        )
        rows = [
            f"({side_value(v.inputs)}, {side_value(v.outputs)})" for v in vectors
        ]
        lines.append(f"{name} = [ " + ("\n" + pad + ", ").join(rows))
        lines.append(pad + "]")
        return lines
