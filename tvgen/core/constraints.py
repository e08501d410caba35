"""Constraint records produced by one concrete evaluation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ConstraintRecord:
    """
    A declared constraint and where its truth value lives.

    Attributes:
        binding: Identifier of the boolean binding holding the constraint's value
        hard: Hard constraints must hold for a draw to be accepted; soft ones
            are only recorded
        label: Optional human-readable name used in log messages
    """

    binding: str
    hard: bool = True
    label: str | None = None

    def __repr__(self) -> str:
        kind = "hard" if self.hard else "soft"
        name = f", label={self.label!r}" if self.label else ""
        return f"ConstraintRecord({self.binding!r}, {kind}{name})"


def hard_constraints(records: Iterable[ConstraintRecord]) -> list[ConstraintRecord]:
    """Only the records that take part in acceptance."""
    return [r for r in records if r.hard]


def soft_constraints(records: Iterable[ConstraintRecord]) -> list[ConstraintRecord]:
    """Only the records that are traced but ignored for acceptance."""
    return [r for r in records if not r.hard]
