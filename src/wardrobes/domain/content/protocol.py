"""Protocol definition for zone content generators."""

from __future__ import annotations

from typing import Any, Protocol

from .context import ContentContext
from .results import GenerationResult, ValidationResult


class ContentGenerator(Protocol):
    """Protocol for zone content generators.

    A content generator turns one content type's settings into components
    for the space described by a ``ContentContext``. Generators are
    registered with the ``ContentRegistry`` under their content type.

    Generators must never raise for sizes that do not fit: they adjust the
    computed sizes, report a warning in the result, and keep going so that
    the rest of the project still regenerates.

    Example:
        @content_registry.register(ContentType.SHELVES)
        class ShelvesContent:
            def validate(self, settings, context) -> ValidationResult:
                ...

            def generate(self, settings, context) -> GenerationResult:
                ...
    """

    def validate(self, settings: Any, context: ContentContext) -> ValidationResult:
        """Check settings against the available space.

        Args:
            settings: Settings record for the generator's content type.
            context: Space the content will be generated into.

        Returns:
            ValidationResult with any errors or warnings found.
        """
        ...

    def generate(self, settings: Any, context: ContentContext) -> GenerationResult:
        """Generate the components for ``settings`` in ``context``.

        Args:
            settings: Settings record for the generator's content type.
            context: Space the content will be generated into.

        Returns:
            GenerationResult with components and any sizing advisories.
        """
        ...
