"""End-to-end tests: sample a program, then render it in every dialect."""

import logging

import pytest

from tvgen import (
    ConcreteProgram,
    ConcreteValue,
    Endianness,
    GenerationConfig,
    SplitSpec,
    TestVector,
    TestVectorSet,
    UnsupportedKind,
    generate,
    render,
)
from tvgen.core.kinds import BOOL, FLOAT, INT16, INTEGER, WORD8, list_of
from tvgen.generators.base import RejectionSampler
from tvgen.utils.metrics import SamplingStats, vector_set_metrics


def adder(t):
    """8-bit adder with carry-out, restricted to non-zero operands."""
    x = t.free(WORD8, "x")
    y = t.free(WORD8, "y")
    t.constrain(x != 0, "x non-zero")
    t.constrain(y != 0, "y non-zero")
    t.soft_constrain(x < y, "ordered")
    total = x + y
    t.output(total & 0xFF, WORD8)
    t.output(total > 0xFF, BOOL)


class TestEndToEnd:
    """Test complete generate-then-render workflows."""

    def test_adder_in_all_dialects(self):
        """Test one sampled set renders in each dialect."""
        vectors = generate(8, ConcreteProgram(adder, seed=42))

        functional = render("functional", "adder", vectors)
        struct_array = render("struct_array", "adder", vectors)
        bit_vector = render(
            "bit_vector",
            "adder",
            vectors,
            endianness=Endianness.BIG,
            splits=SplitSpec((8, 8), (8, 1)),
        )

        assert "adder :: [([Word8], (Word8, Bool))]" in functional
        assert functional.count("\n        , ") == 7
        assert "int adderLength = 8;" in struct_array
        assert bit_vector.count("c \"8'b") == 8 * 3

        for vector in vectors:
            x, y = (v.payload for v in vector.inputs)
            total, carry = (v.payload for v in vector.outputs)
            assert x != 0 and y != 0
            assert total == (x + y) & 0xFF
            assert carry == (x + y > 0xFF)

    def test_rows_follow_generation_order(self):
        """Test vector i is rendered as row i."""
        vectors = generate(5, ConcreteProgram(adder, seed=3))
        text = render("struct_array", "tv", vectors)

        positions = [
            text.index("{{0x%02x, 0x%02x}" % tuple(v.payload for v in vec.inputs))
            for vec in vectors
        ]
        assert positions == sorted(positions)

    def test_unsupported_kind_per_dialect(self):
        """Test one set can be valid in one dialect and rejected in another."""

        def body(t):
            t.output(t.free(INTEGER), INTEGER)

        vectors = generate(2, ConcreteProgram(body, seed=1))

        assert "Integer" in render("functional", "tv", vectors)
        with pytest.raises(UnsupportedKind):
            render("struct_array", "tv", vectors)
        with pytest.raises(UnsupportedKind):
            render("bit_vector", "tv", vectors, splits=SplitSpec((64,), (64,)))

    def test_floats_render_in_functional_and_struct(self):
        """Test float draws render in both numeric dialects."""

        def body(t):
            t.output(t.free(FLOAT) * 2, FLOAT)

        vectors = generate(3, ConcreteProgram(body, seed=9))

        assert "Float" in render("functional", "tv", vectors)
        assert "SFloat i0;" in render("struct_array", "tv", vectors)

    def test_values_accessor(self):
        """Test raw payload access for custom processing."""
        vectors = generate(4, ConcreteProgram(adder, seed=11))

        values = vectors.values()
        assert len(values) == 4
        for (ins, outs), vector in zip(values, vectors):
            assert ins == [v.payload for v in vector.inputs]
            assert outs == [v.payload for v in vector.outputs]

    def test_logging(self, caplog):
        """Test the sampler logs progress and a summary."""

        def body(t):
            x = t.free(INT16)
            t.constrain(x >= 0)
            t.output(x, INT16)

        with caplog.at_level(logging.DEBUG, logger="tvgen"):
            generate(
                4,
                ConcreteProgram(body, seed=5),
                GenerationConfig(log_progress_every=2),
            )

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Generated 4 test vectors") for m in messages)
        assert any(m == "Accepted 2/4 samples" for m in messages)


class TestMetrics:
    """Test sampling statistics."""

    def test_sampler_stats(self):
        """Test draw counters and the acceptance rate."""
        sampler = RejectionSampler(ConcreteProgram(adder, seed=42))
        sampler.generate(6)

        stats = sampler.stats.to_dict()
        assert stats["accepted"] == 6
        assert stats["draws"] == stats["accepted"] + stats["rejected"]
        assert 0.0 < stats["acceptance_rate"] <= 1.0
        assert stats["mean_attempts"] >= 1.0

    def test_empty_stats(self):
        """Test statistics before any draw."""
        stats = SamplingStats()
        assert stats.acceptance_rate == 0.0
        assert stats.to_dict()["max_attempts"] == 0

    def test_vector_set_metrics(self):
        """Test set summaries."""
        vectors = generate(10, ConcreteProgram(lambda t: t.free(BOOL), seed=0))
        metrics = vector_set_metrics(vectors)

        assert metrics["count"] == 10.0
        assert metrics["unique_inputs"] <= 0.2
        assert vector_set_metrics(vectors[:0])["count"] == 0.0

    def test_metrics_with_structural_payloads(self):
        """Test set summaries accept unhashable payloads such as lists."""
        vectors = TestVectorSet(
            [
                TestVector((), (ConcreteValue(list_of(WORD8), [1, 2]),)),
                TestVector((), (ConcreteValue(list_of(WORD8), [1, 2]),)),
                TestVector((), (ConcreteValue(list_of(WORD8), [3]),)),
            ]
        )
        metrics = vector_set_metrics(vectors)

        assert metrics["count"] == 3.0
        assert metrics["unique_vectors"] == 2 / 3
        assert metrics["unique_inputs"] == 1 / 3
