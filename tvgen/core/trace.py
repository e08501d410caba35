"""Recording of one concrete run of a program."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from tvgen.core.constraints import ConstraintRecord
from tvgen.core.kinds import BOOL, ConcreteValue, ValueKind
from tvgen.core.types import ValidationError


@dataclass(frozen=True)
class Evaluation:
    """
    Everything a single concrete run of a program produced.

    Attributes:
        inputs: Free-variable bindings actually used, in declaration order
        bindings: Lookup from binding identifier to concrete value
        constraints: Declared constraints, each pointing at a boolean binding
        outputs: Binding identifiers of the computed outputs, in order
        definitions: Names of user-defined external functions the program uses
    """

    inputs: tuple[ConcreteValue, ...] = ()
    bindings: Mapping[str, ConcreteValue] = field(default_factory=dict)
    constraints: tuple[ConstraintRecord, ...] = ()
    outputs: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()


class Trace:
    """
    Recorder handed to a program body for one run.

    Provides a fluent interface mirroring how a symbolic program declares
    its inputs, constraints and outputs, except that every value is already
    concrete.

    Example:
        >>> def body(t):
        ...     x = t.free(WORD8)
        ...     y = t.free(WORD8)
        ...     t.constrain(x < y)            # Hard constraint
        ...     t.soft_constrain(x % 2 == 0)  # Recorded only
        ...     t.output(x + y, WORD8)
    """

    def __init__(self, draw: Callable[[ValueKind], Any]):
        self._draw = draw
        self._inputs: list[ConcreteValue] = []
        self._bindings: dict[str, ConcreteValue] = {}
        self._constraints: list[ConstraintRecord] = []
        self._outputs: list[str] = []
        self._definitions: list[str] = []

        # Names chosen by the body; generated ``s<n>`` ids give way to these
        self._named: set[str] = set()
        self._counter = 0

    def _fresh(self) -> str:
        """Next ``s<n>`` identifier not already bound."""
        while f"s{self._counter}" in self._bindings:
            self._counter += 1
        binding = f"s{self._counter}"
        self._counter += 1
        return binding

    def _relocate(self, binding: str) -> None:
        """Move a generated binding out of the way of a user-chosen name."""
        moved = self._fresh()
        self._bindings[moved] = self._bindings.pop(binding)
        self._constraints = [
            replace(c, binding=moved) if c.binding == binding else c
            for c in self._constraints
        ]
        self._outputs = [moved if b == binding else b for b in self._outputs]

    def _bind(self, value: ConcreteValue, name: str | None = None) -> str:
        if name is None:
            binding = self._fresh()
        else:
            if name in self._named:
                raise ValidationError(f"Binding {name!r} declared twice")
            if name in self._bindings:
                self._relocate(name)
            self._named.add(name)
            binding = name
        self._bindings[binding] = value
        return binding

    def free(self, kind: ValueKind, name: str | None = None) -> Any:
        """
        Draw a fresh value for a free variable.

        Args:
            kind: Kind of the variable
            name: Optional binding identifier (defaults to ``s<n>``)

        Returns:
            The raw payload, for use in the body's computation
        """
        value = ConcreteValue(kind, self._draw(kind))
        self._bind(value, name)
        self._inputs.append(value)
        return value.payload

    def constrain(self, condition: bool, label: str | None = None) -> Trace:
        """Add a hard constraint; the draw is rejected unless it holds."""
        binding = self._bind(ConcreteValue(BOOL, bool(condition)))
        self._constraints.append(ConstraintRecord(binding, True, label))
        return self

    def soft_constrain(self, condition: bool, label: str | None = None) -> Trace:
        """Add a soft constraint; recorded but ignored for acceptance."""
        binding = self._bind(ConcreteValue(BOOL, bool(condition)))
        self._constraints.append(ConstraintRecord(binding, False, label))
        return self

    def output(self, payload: Any, kind: ValueKind) -> Trace:
        """Record an output value."""
        self._outputs.append(self._bind(ConcreteValue(kind, payload)))
        return self

    def define(self, name: str) -> Trace:
        """Declare a user-defined external function."""
        self._definitions.append(name)
        return self

    def evaluation(self) -> Evaluation:
        """Freeze the recorded run."""
        return Evaluation(
            inputs=tuple(self._inputs),
            bindings=MappingProxyType(dict(self._bindings)),
            constraints=tuple(self._constraints),
            outputs=tuple(self._outputs),
            definitions=tuple(self._definitions),
        )

    def __repr__(self) -> str:
        hard = sum(1 for c in self._constraints if c.hard)
        soft = len(self._constraints) - hard
        return (
            f"Trace(inputs={len(self._inputs)}, hard={hard}, soft={soft}, "
            f"outputs={len(self._outputs)})"
        )
