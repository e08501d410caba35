"""Dialect registry and the ``render`` entry point."""

from __future__ import annotations

from typing import Any

from tvgen.core.kinds import Dialect
from tvgen.core.types import ValidationError
from tvgen.core.vectors import TestVectorSet
from tvgen.renderers.base import Renderer


def as_dialect(dialect: Dialect | str) -> Dialect:
    """Accept a Dialect or its string name."""
    if isinstance(dialect, Dialect):
        return dialect
    try:
        return Dialect(str(dialect).lower())
    except ValueError:
        raise ValidationError(f"Unknown dialect {dialect!r}") from None


class DialectRegistry:
    """
    Registry mapping dialects to renderer classes.

    Provides functionality to:
    - Register and unregister renderers
    - Look renderers up by dialect or name
    - Render a vector set through the registered renderer
    """

    def __init__(self):
        """Initialize empty registry."""
        self._renderers: dict[Dialect, type[Renderer]] = {}

    def register(
        self,
        dialect: Dialect | str,
        renderer_class: type[Renderer],
        override: bool = False,
    ) -> None:
        """
        Register a renderer class.

        Args:
            dialect: Dialect the renderer produces
            renderer_class: Renderer class to register
            override: Whether to override an existing registration

        Raises:
            ValueError: If the dialect is already registered and override=False
        """
        dialect = as_dialect(dialect)
        if dialect in self._renderers and not override:
            raise ValueError(
                f"Dialect '{dialect}' already registered. Use override=True to replace."
            )

        if not isinstance(renderer_class, type) or not issubclass(
            renderer_class, Renderer
        ):
            raise TypeError("renderer_class must be a subclass of Renderer")

        self._renderers[dialect] = renderer_class

    def unregister(self, dialect: Dialect | str) -> bool:
        """
        Unregister a dialect.

        Returns:
            True if the dialect was found and removed, False otherwise
        """
        dialect = as_dialect(dialect)
        if dialect in self._renderers:
            del self._renderers[dialect]
            return True
        return False

    def get(self, dialect: Dialect | str) -> type[Renderer] | None:
        """Renderer class for ``dialect``, or None."""
        return self._renderers.get(as_dialect(dialect))

    def create(self, dialect: Dialect | str, **options: Any) -> Renderer:
        """
        Instantiate the renderer for ``dialect``.

        Raises:
            ValidationError: If no renderer is registered or options are invalid
        """
        renderer_class = self.get(dialect)
        if renderer_class is None:
            raise ValidationError(f"No renderer registered for dialect {dialect!r}")
        return renderer_class(**options)

    def render(
        self,
        dialect: Dialect | str,
        name: str,
        vectors: TestVectorSet,
        **options: Any,
    ) -> str:
        """Render ``vectors`` in ``dialect``."""
        return self.create(dialect, **options).render(name, vectors)

    def list_dialects(self) -> list[str]:
        """Names of all registered dialects."""
        return [d.value for d in self._renderers]

    def __len__(self) -> int:
        return len(self._renderers)

    def __contains__(self, dialect: object) -> bool:
        try:
            return as_dialect(dialect) in self._renderers  # type: ignore[arg-type]
        except ValidationError:
            return False

    def __iter__(self):
        return iter(self._renderers.keys())

    def __repr__(self) -> str:
        return f"DialectRegistry({len(self._renderers)} dialects)"
