"""Statistics about sampling runs and generated vector sets."""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from tvgen.core.vectors import TestVectorSet


@dataclass
class SamplingStats:
    """Counters kept by the rejection sampler."""

    draws: int = 0
    accepted: int = 0
    rejected: int = 0

    # Draws spent on each accepted sample, in order
    attempts_per_sample: list[int] = field(default_factory=list)

    def record(self, attempts: int) -> None:
        """Record an accepted sample that took ``attempts`` draws."""
        self.accepted += 1
        self.attempts_per_sample.append(attempts)

    def reset(self) -> None:
        self.draws = 0
        self.accepted = 0
        self.rejected = 0
        self.attempts_per_sample.clear()

    @property
    def acceptance_rate(self) -> float:
        """Fraction of draws that satisfied every hard constraint."""
        if self.draws == 0:
            return 0.0
        return self.accepted / self.draws

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to a dictionary for logging."""
        attempts = np.asarray(self.attempts_per_sample, dtype=np.int64)
        return {
            "draws": self.draws,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "acceptance_rate": self.acceptance_rate,
            "mean_attempts": float(attempts.mean()) if attempts.size else 0.0,
            "max_attempts": int(attempts.max()) if attempts.size else 0,
        }


def vector_set_metrics(vectors: TestVectorSet) -> dict[str, float]:
    """
    Summarise a generated vector set.

    Args:
        vectors: Vectors returned by the sampler

    Returns:
        Dictionary with the vector count, the fraction of distinct vectors and
        the fraction of distinct input assignments
    """
    count = len(vectors)
    if count == 0:
        return {"count": 0.0, "unique_vectors": 0.0, "unique_inputs": 0.0}

    # Structural payloads (lists, sets) are unhashable; compare by repr
    unique_vectors = {(_key(v.inputs), _key(v.outputs)) for v in vectors}
    unique_inputs = {_key(v.inputs) for v in vectors}

    return {
        "count": float(count),
        "unique_vectors": len(unique_vectors) / count,
        "unique_inputs": len(unique_inputs) / count,
    }


def _key(values) -> tuple[str, ...]:
    return tuple(repr(v) for v in values)
