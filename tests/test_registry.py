"""Tests for the dialect registry and render dispatch."""

import pytest

from tvgen.core.kinds import BOOL, WORD8, ConcreteValue, Dialect
from tvgen.core.types import SplitSpec, ValidationError
from tvgen.core.vectors import TestVector, TestVectorSet
from tvgen.renderers import (
    BitVectorRenderer,
    DialectRegistry,
    FunctionalRenderer,
    Renderer,
    StructArrayRenderer,
    registry,
    render,
)

VECTORS = TestVectorSet(
    [TestVector((ConcreteValue(BOOL, True),), (ConcreteValue(WORD8, 3),))]
)


class TestDialectRegistry:
    """Test DialectRegistry functionality."""

    def test_builtin_dialects(self):
        """Test the global registry knows every dialect."""
        assert len(registry) == 3
        assert registry.get(Dialect.FUNCTIONAL) is FunctionalRenderer
        assert registry.get("struct_array") is StructArrayRenderer
        assert registry.get("BIT_VECTOR") is BitVectorRenderer
        assert sorted(registry.list_dialects()) == [
            "bit_vector",
            "functional",
            "struct_array",
        ]

    def test_register_and_unregister(self):
        """Test registering a renderer in a fresh registry."""
        local = DialectRegistry()
        local.register("functional", FunctionalRenderer)

        assert "functional" in local
        assert "nonsense" not in local
        assert local.unregister(Dialect.FUNCTIONAL)
        assert not local.unregister(Dialect.FUNCTIONAL)
        assert len(local) == 0

    def test_duplicate_registration(self):
        """Test duplicates need override=True."""
        local = DialectRegistry()
        local.register(Dialect.FUNCTIONAL, FunctionalRenderer)

        with pytest.raises(ValueError, match="already registered"):
            local.register(Dialect.FUNCTIONAL, FunctionalRenderer)
        local.register(Dialect.FUNCTIONAL, FunctionalRenderer, override=True)

    def test_register_requires_renderer(self):
        """Test only Renderer subclasses can be registered."""
        with pytest.raises(TypeError):
            DialectRegistry().register(Dialect.FUNCTIONAL, object)

    def test_unknown_dialect(self):
        """Test unknown dialect names are rejected."""
        with pytest.raises(ValidationError, match="Unknown dialect"):
            render("pascal", "tv", VECTORS)

    def test_unregistered_dialect(self):
        """Test rendering a dialect with no renderer."""
        with pytest.raises(ValidationError, match="No renderer"):
            DialectRegistry().render(Dialect.FUNCTIONAL, "tv", VECTORS)

    def test_abstract_renderer(self):
        """Test that Renderer is abstract."""
        with pytest.raises(TypeError):
            Renderer()


class TestRender:
    """Test the render entry point."""

    def test_functional(self):
        """Test dispatch to the functional renderer."""
        text = render(Dialect.FUNCTIONAL, "tv", VECTORS)
        assert "tv = [ (True , 0x03)" in text

    def test_struct_array(self):
        """Test dispatch to the struct-array renderer."""
        text = render("struct_array", "tv", VECTORS)
        assert "      {{true }, {0x03}}" in text

    def test_bit_vector(self):
        """Test dispatch to the bit-vector renderer with options."""
        text = render("bit_vector", "tv", VECTORS, splits=SplitSpec((1,), (4, 4)))
        assert "   in [ (T, (c \"4'b0000\", c \"4'b0011\"))" in text

    def test_options_rejected_for_other_dialects(self):
        """Test only the bit-vector dialect accepts options."""
        with pytest.raises(ValidationError, match="Unknown options"):
            render("functional", "tv", VECTORS, splits=SplitSpec((1,), (8,)))

    def test_plain_sequence_of_vectors(self):
        """Test a list of vectors is accepted in place of a set."""
        text = render("functional", "tv", list(VECTORS))
        assert "tv :: [(Bool, Word8)]" in text
