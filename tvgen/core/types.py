"""Core type definitions: errors, configuration and rendering options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TVGenError(Exception):
    """Base class for all errors raised by tvgen."""

    pass


class ValidationError(TVGenError):
    """Raised when an argument, payload or configuration is invalid."""

    pass


class HeterogeneousKinds(ValidationError):
    """Raised when the vectors of a set do not share one kind signature."""

    def __init__(self, index: int, expected: Any, actual: Any):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Test vector {index} has kinds {actual}, expected {expected} "
            "(all vectors in a set must share the kinds of the first one)"
        )


class UnsupportedProgram(TVGenError):
    """Raised when a program declares external function definitions."""

    def __init__(self, definitions: tuple[str, ...]):
        self.definitions = definitions
        super().__init__(
            "Cannot generate tests in the presence of user-defined functions: "
            + ", ".join(definitions)
        )


class MissingBinding(TVGenError):
    """Raised when an evaluation references a binding it never produced."""

    def __init__(self, binding: str, role: str = "value"):
        self.binding = binding
        self.role = role
        super().__init__(f"No concrete binding for {role} {binding!r}")


class UnsupportedKind(TVGenError):
    """Raised when a value's kind has no encoding in the requested dialect."""

    def __init__(self, kind: Any, value: Any = None, dialect: Any = None):
        self.kind = kind
        self.value = value
        self.dialect = dialect
        where = f" in the {dialect} dialect" if dialect is not None else ""
        shown = f" (value: {value!r})" if value is not None else ""
        super().__init__(f"Unsupported kind {kind}{where}{shown}")


class SplitMismatch(TVGenError):
    """Raised when split widths do not exactly exhaust a blasted bit string."""

    def __init__(self, expected: int, remaining: int, side: str = ""):
        self.expected = expected
        self.remaining = remaining
        self.side = side
        prefix = f"{side}: " if side else ""
        if expected == 0:
            detail = f"extra {remaining} bit(s) remain"
        else:
            detail = (
                f"was looking for {expected} bit(s), but only {remaining} remain"
            )
        super().__init__(f"{prefix}Mismatched index in stream, {detail}")


class SamplingExhausted(TVGenError):
    """Raised when no draw was accepted within the configured attempt budget."""

    def __init__(self, index: int, attempts: int):
        self.index = index
        self.attempts = attempts
        super().__init__(
            f"Sample {index}: no draw satisfied the hard constraints "
            f"after {attempts} attempt(s)"
        )


@dataclass
class GenerationConfig:
    """Configuration for the sampling process with validation."""

    max_attempts: int | None = None
    log_progress_every: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValidationError(
                f"max_attempts must be positive, got {self.max_attempts}"
            )

        if self.log_progress_every < 0:
            raise ValidationError(
                f"log_progress_every must be non-negative, got {self.log_progress_every}"
            )


class Endianness(Enum):
    """Bit order used when regrouping blasted bit strings."""

    BIG = "big"
    LITTLE = "little"


@dataclass(frozen=True)
class SplitSpec:
    """Bit widths used to regroup the blasted inputs and outputs."""

    inputs: tuple[int, ...]
    outputs: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

        for side, widths in (("inputs", self.inputs), ("outputs", self.outputs)):
            for width in widths:
                if isinstance(width, bool) or not isinstance(width, int):
                    raise ValidationError(
                        f"{side} split widths must be integers, got {width!r}"
                    )
                if width <= 0:
                    raise ValidationError(
                        f"{side} split widths must be positive, got {width}"
                    )
