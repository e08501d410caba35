"""Programs and the rejection sampler."""

from tvgen.generators.base import Program, RejectionSampler, generate
from tvgen.generators.concrete import ConcreteProgram

__all__ = ["Program", "RejectionSampler", "generate", "ConcreteProgram"]
