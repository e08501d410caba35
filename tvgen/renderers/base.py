"""Base classes and helpers for test vector renderers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from tvgen.core.kinds import Dialect, require_supported
from tvgen.core.types import ValidationError
from tvgen.core.vectors import TestVectorSet

logger = logging.getLogger(__name__)

DEFAULT_NAME = "testVectors"
NAME_PREFIX = "tv"
BANNER = "Automatically generated by tvgen. Do not edit!"


def normalize_name(name: str) -> str:
    """
    Turn a user supplied name into a valid identifier.

    An empty name becomes ``testVectors``; a name that does not start with a
    letter gets a ``tv`` prefix.
    """
    if not name:
        return DEFAULT_NAME
    if not name[0].isalpha():
        return NAME_PREFIX + name
    return name


def mk_tuple(items: list[str]) -> str:
    """Render items as a tuple, leaving a single item bare."""
    if len(items) == 1:
        return items[0]
    return "(" + ", ".join(items) + ")"


class Renderer(ABC):
    """
    Abstract base class for dialect renderers.

    Subclasses declare their dialect and implement ``_render``. Every value of
    every vector is checked against the dialect before any text is produced,
    so a renderer either returns a complete document or raises.
    """

    dialect: ClassVar[Dialect]

    # Names of keyword options accepted by ``render``
    options: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, **options: Any):
        unknown = set(options) - self.options
        if unknown:
            raise ValidationError(
                f"Unknown options for the {self.dialect} dialect: "
                + ", ".join(sorted(unknown))
            )
        self.parameters = self._validate_options(options)

    def _validate_options(self, options: dict[str, Any]) -> dict[str, Any]:
        """Validate and fill in defaults for dialect options."""
        return dict(options)

    def render(self, name: str, vectors: TestVectorSet) -> str:
        """
        Render ``vectors`` as a document bound to ``name``.

        Raises:
            UnsupportedKind: If any value has no encoding in this dialect
        """
        if not isinstance(vectors, TestVectorSet):
            vectors = TestVectorSet(vectors)

        for vector in vectors:
            self._check_values(vector.inputs)
            self._check_values(vector.outputs)

        ident = normalize_name(name)
        logger.debug(
            "Rendering %d test vectors as %s (%s)", len(vectors), self.dialect, ident
        )
        return "\n".join(self._render(ident, vectors))

    def _check_values(self, values: Iterable[Any]) -> None:
        for value in values:
            require_supported(value, self.dialect)

    @abstractmethod
    def _render(self, name: str, vectors: TestVectorSet) -> list[str]:
        """Produce the document's lines."""
        pass
