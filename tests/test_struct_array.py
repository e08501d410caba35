"""Tests for the struct-array renderer."""

import pytest

from tvgen.core.kinds import (
    BOOL,
    CHAR,
    DOUBLE,
    FLOAT,
    INT8,
    INT16,
    INT32,
    INT64,
    INTEGER,
    REAL,
    WORD8,
    WORD16,
    WORD32,
    WORD64,
    ConcreteValue,
    bounded,
    set_of,
    tuple_of,
)
from tvgen.core.types import HeterogeneousKinds, UnsupportedKind
from tvgen.core.vectors import TestVector, TestVectorSet
from tvgen.renderers.struct_array import StructArrayRenderer, c_format, c_value


def vec(inputs, outputs):
    return TestVector(
        tuple(ConcreteValue(k, p) for k, p in inputs),
        tuple(ConcreteValue(k, p) for k, p in outputs),
    )


def render(name, *vectors):
    return StructArrayRenderer().render(name, TestVectorSet(vectors))


class TestStructArrayDocument:
    """Test the generated C program."""

    def test_record_layout(self):
        """Test two Word8 inputs and one Int8 output."""
        text = render("tv", vec([(WORD8, 1), (WORD8, 2)], [(INT8, -1)]))
        lines = text.splitlines()

        assert lines[0] == "/* Automatically generated by tvgen. Do not edit! */"
        record = lines[lines.index("typedef struct {") : lines.index("} tvTestVector;") + 1]
        assert record == [
            "typedef struct {",
            "  struct {",
            "    SWord8 i0;",
            "    SWord8 i1;",
            "  } input;",
            "  struct {",
            "    SInt8 o0;",
            "  } output;",
            "} tvTestVector;",
        ]
        assert "tvTestVector tv[] = {" in lines
        assert "      {{0x01, 0x02}, {-0x01}}" in lines
        assert "int tvLength = 1;" in lines

    def test_driver(self):
        """Test the printf driver uses kind-specific formats."""
        text = render("tv", vec([(WORD8, 1), (BOOL, True)], [(INT8, -1)]))

        assert (
            '    printf("%*d. 0x%02"PRIx8" %s -> %"PRId8"\\n", 1, i\n'
            "           , tv[i].input.i0\n"
            '           , (tv[i].input.i1 == true) ? "true " : "false"\n'
            "           , tv[i].output.o0);"
        ) in text
        assert "  for(i = 0; i < tvLength; ++i)" in text
        assert text.endswith("  return 0;\n}")

    def test_rows_in_order(self):
        """Test every vector becomes a row, in generation order."""
        vectors = [vec([(WORD8, i)], [(BOOL, i % 2 == 0)]) for i in range(11)]
        text = render("t", *vectors)

        assert "      {{0x00}, {true }}\n    , {{0x01}, {false}}" in text
        assert "    , {{0x0a}, {true }}\n};" in text
        assert "int tLength = 11;" in text
        # Index column wide enough for the last index
        assert '\\n", 2, i' in text

    def test_empty_set(self):
        """Test rendering without vectors."""
        text = render("tv")

        assert "int tvLength = 0;" in text
        assert '    printf("");' in text

    def test_name_normalization(self):
        """Test names are turned into identifiers."""
        text = render("", vec([(BOOL, True)], []))
        assert "} testVectorsTestVector;" in text
        assert "int testVectorsLength = 1;" in text


class TestValues:
    """Test C literals and print formats."""

    @pytest.mark.parametrize(
        "kind, payload, expected",
        [
            (BOOL, True, "true "),
            (BOOL, False, "false"),
            (WORD8, 5, "0x05"),
            (WORD16, 5, "0x0005U"),
            (WORD32, 5, "0x00000005UL"),
            (WORD64, 5, "0x0000000000000005ULL"),
            (INT8, 3, "0x03"),
            (INT16, -3, "-0x0003"),
            (INT32, -2, "-0x00000002L"),
            (INT64, 1, "0x0000000000000001LL"),
            (FLOAT, 1.5, "1.5F"),
            (FLOAT, 0.1, "0.1F"),
            (DOUBLE, 0.1, "0.1"),
            (DOUBLE, float("nan"), "((double) NAN)"),
            (FLOAT, float("inf"), "((float) INFINITY)"),
            (DOUBLE, float("-inf"), "((double) (-INFINITY))"),
        ],
    )
    def test_literals(self, kind, payload, expected):
        """Test literal text per kind."""
        assert c_value(ConcreteValue(kind, payload)) == expected

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (BOOL, "%s"),
            (WORD8, '0x%02"PRIx8"'),
            (WORD16, '0x%04"PRIx16"U'),
            (WORD32, '0x%08"PRIx32"UL'),
            (WORD64, '0x%016"PRIx64"ULL'),
            (INT8, '%"PRId8"'),
            (INT16, '%"PRId16"'),
            (INT32, '%"PRId32"L'),
            (INT64, '%"PRId64"LL'),
            (FLOAT, "%f"),
            (DOUBLE, "%f"),
        ],
    )
    def test_formats(self, kind, expected):
        """Test printf conversions per kind."""
        assert c_format(kind) == expected


class TestUnsupported:
    """Test kinds the struct-array dialect rejects."""

    @pytest.mark.parametrize(
        "kind, payload",
        [
            (INTEGER, 5),
            (REAL, 1),
            (CHAR, "c"),
            (set_of(WORD8), {1}),
            (tuple_of(BOOL, BOOL), (True, False)),
            (bounded(True, 12), 1),
        ],
    )
    def test_unsupported_kind(self, kind, payload):
        """Test unsupported kinds raise instead of emitting text."""
        with pytest.raises(UnsupportedKind) as info:
            render("tv", vec([(kind, payload)], [(BOOL, True)]))
        assert info.value.kind == kind

    def test_heterogeneous_set_rejected(self):
        """Test the record layout must fit every vector."""
        with pytest.raises(HeterogeneousKinds):
            render(
                "tv",
                vec([(WORD8, 1)], [(BOOL, True)]),
                vec([(WORD8, 1), (WORD8, 2)], [(BOOL, True)]),
            )
