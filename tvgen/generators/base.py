"""Program interface and the rejection sampler that draws test vectors from it."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from tvgen.core.constraints import hard_constraints
from tvgen.core.kinds import ConcreteValue, KindTag
from tvgen.core.trace import Evaluation
from tvgen.core.types import (
    GenerationConfig,
    MissingBinding,
    SamplingExhausted,
    UnsupportedProgram,
    ValidationError,
)
from tvgen.core.vectors import TestVector, TestVectorSet
from tvgen.utils.metrics import SamplingStats

logger = logging.getLogger(__name__)


@runtime_checkable
class Program(Protocol):
    """
    Protocol for programs the sampler can draw from.

    Each call to ``run`` must perform a fresh, independent concrete
    evaluation: new values for every free variable, the truth value of each
    declared constraint, and the resulting outputs.
    """

    def run(self) -> Evaluation:
        """
        Evaluate the program once under a fresh concrete draw.

        Returns:
            The evaluation trace of this run
        """
        ...


class RejectionSampler:
    """
    Draws test vectors from a program by rejection sampling.

    A draw is accepted if and only if every hard constraint evaluates to
    true; otherwise the program is run again from scratch. No attempt is made
    to repair a rejected assignment.

    With the default configuration there is no bound on the number of draws:
    if the hard constraints cannot be met under the program's draw
    distribution, ``generate`` never returns. Set
    ``GenerationConfig.max_attempts`` to turn that into SamplingExhausted.
    """

    def __init__(self, program: Program, config: GenerationConfig | None = None):
        self.program = program
        self.config = config or GenerationConfig()
        self.stats = SamplingStats()

    def generate(self, count: int) -> TestVectorSet:
        """
        Collect exactly ``count`` accepted samples, in draw order.

        Args:
            count: Number of test vectors to produce

        Returns:
            The accepted vectors; the first accepted draw comes first

        Raises:
            ValidationError: If count is negative
            UnsupportedProgram: If a draw declares external function definitions
            MissingBinding: If a draw references a binding it did not produce
            SamplingExhausted: If max_attempts draws fail for a single sample
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(f"count must be an integer, got {count!r}")
        if count < 0:
            raise ValidationError(f"count must be non-negative, got {count}")

        self.stats.reset()
        vectors: list[TestVector] = []

        for index in range(count):
            vectors.append(self._sample(index))

            every = self.config.log_progress_every
            if every and (index + 1) % every == 0:
                logger.info("Accepted %d/%d samples", index + 1, count)

        summary = self.stats.to_dict()
        logger.info(
            "Generated %d test vectors from %d draws (acceptance rate %.3f)",
            summary["accepted"],
            summary["draws"],
            summary["acceptance_rate"],
        )
        return TestVectorSet(vectors)

    def _sample(self, index: int) -> TestVector:
        """Draw until one evaluation satisfies every hard constraint."""
        max_attempts = self.config.max_attempts
        attempts = 0

        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            self.stats.draws += 1

            evaluation = self.program.run()
            if accepts(evaluation):
                self.stats.record(attempts)
                return TestVector(evaluation.inputs, outputs_of(evaluation))

            self.stats.rejected += 1
            logger.debug("Sample %d: draw %d rejected", index, attempts)

        raise SamplingExhausted(index, attempts)


def accepts(evaluation: Evaluation) -> bool:
    """
    Decide whether one evaluation is an acceptable sample.

    Only hard constraints count; soft ones are traced but ignored.
    """
    if evaluation.definitions:
        raise UnsupportedProgram(tuple(evaluation.definitions))

    accepted = True
    for record in hard_constraints(evaluation.constraints):
        value = _lookup(evaluation, record.binding, "constraint")
        if value.kind.tag is not KindTag.BOOL:
            raise ValidationError(
                f"Constraint {record.label or record.binding!r} evaluated to a "
                f"{value.kind} value, expected Bool"
            )
        accepted = accepted and value.payload
    return accepted


def outputs_of(evaluation: Evaluation) -> tuple[ConcreteValue, ...]:
    """Resolve the output bindings of an evaluation to concrete values."""
    return tuple(_lookup(evaluation, b, "output") for b in evaluation.outputs)


def _lookup(evaluation: Evaluation, binding: str, role: str) -> ConcreteValue:
    try:
        return evaluation.bindings[binding]
    except KeyError:
        raise MissingBinding(binding, role) from None


def generate(
    count: int, program: Program, config: GenerationConfig | None = None
) -> TestVectorSet:
    """
    Generate ``count`` concrete test vectors from ``program``.

    Convenience wrapper around RejectionSampler.
    """
    return RejectionSampler(program, config).generate(count)
