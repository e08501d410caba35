"""Value kind model: the closed set of concrete value shapes and their payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from fractions import Fraction
from typing import Any

import numpy as np

from tvgen.core.types import UnsupportedKind, ValidationError


class KindTag(Enum):
    """Tag identifying the shape of a value."""

    BOOL = auto()
    BOUNDED = auto()
    UNBOUNDED = auto()
    FLOAT = auto()
    DOUBLE = auto()
    REAL = auto()
    CHAR = auto()
    STRING = auto()
    LIST = auto()
    SET = auto()
    TUPLE = auto()
    MAYBE = auto()
    EITHER = auto()
    USER_SORT = auto()


STRUCTURAL_TAGS = frozenset(
    {
        KindTag.LIST,
        KindTag.SET,
        KindTag.TUPLE,
        KindTag.MAYBE,
        KindTag.EITHER,
        KindTag.USER_SORT,
    }
)

STANDARD_WIDTHS = (8, 16, 32, 64)


@dataclass(frozen=True)
class ValueKind:
    """
    Description of a value shape.

    Only bounded kinds use ``signed`` and ``width``; only structural kinds use
    ``elements``; only uninterpreted sorts use ``sort_name``.
    """

    tag: KindTag
    signed: bool = False
    width: int = 0
    elements: tuple[ValueKind, ...] = ()
    sort_name: str = ""

    @property
    def is_bounded(self) -> bool:
        return self.tag is KindTag.BOUNDED

    def __str__(self) -> str:
        tag = self.tag
        if tag is KindTag.BOUNDED:
            return f"{'Int' if self.signed else 'Word'}{self.width}"
        if tag is KindTag.LIST:
            return f"[{self.elements[0]}]"
        if tag is KindTag.SET:
            return f"{{{self.elements[0]}}}"
        if tag is KindTag.TUPLE:
            return "(" + ", ".join(str(e) for e in self.elements) + ")"
        if tag is KindTag.MAYBE:
            return f"Maybe {self.elements[0]}"
        if tag is KindTag.EITHER:
            return f"Either {self.elements[0]} {self.elements[1]}"
        if tag is KindTag.USER_SORT:
            return self.sort_name
        return _SIMPLE_NAMES[tag]


_SIMPLE_NAMES = {
    KindTag.BOOL: "Bool",
    KindTag.UNBOUNDED: "Integer",
    KindTag.FLOAT: "Float",
    KindTag.DOUBLE: "Double",
    KindTag.REAL: "Real",
    KindTag.CHAR: "Char",
    KindTag.STRING: "String",
}


def bounded(signed: bool, width: int) -> ValueKind:
    """Fixed-width integer kind."""
    if width <= 0:
        raise ValidationError(f"Bounded kinds need a positive width, got {width}")
    return ValueKind(KindTag.BOUNDED, signed=signed, width=width)


def list_of(element: ValueKind) -> ValueKind:
    return ValueKind(KindTag.LIST, elements=(element,))


def set_of(element: ValueKind) -> ValueKind:
    return ValueKind(KindTag.SET, elements=(element,))


def tuple_of(*elements: ValueKind) -> ValueKind:
    return ValueKind(KindTag.TUPLE, elements=elements)


def maybe_of(element: ValueKind) -> ValueKind:
    return ValueKind(KindTag.MAYBE, elements=(element,))


def either_of(left: ValueKind, right: ValueKind) -> ValueKind:
    return ValueKind(KindTag.EITHER, elements=(left, right))


def user_sort(name: str) -> ValueKind:
    return ValueKind(KindTag.USER_SORT, sort_name=name)


BOOL = ValueKind(KindTag.BOOL)
WORD8 = bounded(False, 8)
WORD16 = bounded(False, 16)
WORD32 = bounded(False, 32)
WORD64 = bounded(False, 64)
INT8 = bounded(True, 8)
INT16 = bounded(True, 16)
INT32 = bounded(True, 32)
INT64 = bounded(True, 64)
INTEGER = ValueKind(KindTag.UNBOUNDED)
FLOAT = ValueKind(KindTag.FLOAT)
DOUBLE = ValueKind(KindTag.DOUBLE)
REAL = ValueKind(KindTag.REAL)
CHAR = ValueKind(KindTag.CHAR)
STRING = ValueKind(KindTag.STRING)


@dataclass(frozen=True)
class ConcreteValue:
    """A concrete value: a kind together with a payload consistent with it."""

    kind: ValueKind
    payload: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", _check_payload(self.kind, self.payload))

    def __str__(self) -> str:
        return f"{self.payload!r} :: {self.kind}"


def _check_payload(kind: ValueKind, payload: Any) -> Any:
    """Validate (and normalise) a payload against its kind."""
    tag = kind.tag

    if tag is KindTag.BOOL:
        if isinstance(payload, np.bool_):
            payload = bool(payload)
        if not isinstance(payload, bool):
            raise ValidationError(f"{kind} value needs a bool payload, got {payload!r}")
        return payload

    if tag in (KindTag.BOUNDED, KindTag.UNBOUNDED):
        if isinstance(payload, np.integer):
            payload = int(payload)
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise ValidationError(
                f"{kind} value needs an integer payload, got {payload!r}"
            )
        return payload

    if tag in (KindTag.FLOAT, KindTag.DOUBLE):
        if isinstance(payload, (bool, np.bool_)) or not isinstance(
            payload, (float, np.floating)
        ):
            raise ValidationError(f"{kind} value needs a float payload, got {payload!r}")
        if tag is KindTag.FLOAT:
            return float(np.float32(payload))
        return float(payload)

    if tag is KindTag.REAL:
        if isinstance(payload, bool) or not isinstance(payload, (int, Fraction)):
            raise ValidationError(
                f"{kind} value needs a Fraction payload, got {payload!r}"
            )
        return Fraction(payload)

    if tag is KindTag.CHAR:
        if not isinstance(payload, str) or len(payload) != 1:
            raise ValidationError(
                f"{kind} value needs a single character, got {payload!r}"
            )
        return payload

    if tag is KindTag.STRING:
        if not isinstance(payload, str):
            raise ValidationError(f"{kind} value needs a str payload, got {payload!r}")
        return payload

    return payload


def kind_of(value: ConcreteValue) -> ValueKind:
    """The kind of a value, taken solely from its own tag."""
    return value.kind


def fixed_width_value(value: ConcreteValue) -> int:
    """Reinterpret a bounded payload in its kind's width and signedness."""
    kind = value.kind
    if not kind.is_bounded:
        raise UnsupportedKind(kind, value.payload)

    width = kind.width
    pattern = value.payload & ((1 << width) - 1)
    if kind.signed and pattern >> (width - 1):
        return pattern - (1 << width)
    return pattern


class Dialect(Enum):
    """Output text formats."""

    FUNCTIONAL = "functional"
    STRUCT_ARRAY = "struct_array"
    BIT_VECTOR = "bit_vector"

    def __str__(self) -> str:
        return self.value


_SUPPORTED_TAGS: dict[Dialect, frozenset[KindTag]] = {
    Dialect.FUNCTIONAL: frozenset(
        {
            KindTag.BOOL,
            KindTag.BOUNDED,
            KindTag.UNBOUNDED,
            KindTag.FLOAT,
            KindTag.DOUBLE,
        }
    ),
    Dialect.STRUCT_ARRAY: frozenset(
        {KindTag.BOOL, KindTag.BOUNDED, KindTag.FLOAT, KindTag.DOUBLE}
    ),
    Dialect.BIT_VECTOR: frozenset({KindTag.BOOL, KindTag.BOUNDED}),
}

# Dialects whose bounded kinds are limited to the standard machine widths.
_STANDARD_WIDTH_ONLY = frozenset({Dialect.FUNCTIONAL, Dialect.STRUCT_ARRAY})


def is_supported(kind: ValueKind, dialect: Dialect) -> bool:
    """Whether ``dialect`` has an encoding for values of ``kind``."""
    if kind.tag not in _SUPPORTED_TAGS[dialect]:
        return False
    if kind.is_bounded and dialect in _STANDARD_WIDTH_ONLY:
        return kind.width in STANDARD_WIDTHS
    return True


def require_supported(value: ConcreteValue, dialect: Dialect) -> ConcreteValue:
    """Return ``value`` unchanged, or raise UnsupportedKind for ``dialect``."""
    if not is_supported(value.kind, dialect):
        raise UnsupportedKind(value.kind, value.payload, dialect)
    return value
