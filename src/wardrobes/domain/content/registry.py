"""Registry of content generators keyed by content type."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..value_objects import ContentType
from .protocol import ContentGenerator

G = TypeVar("G", bound=ContentGenerator)


class ContentRegistry:
    """Singleton registry of content generator classes.

    Each ``ContentType`` maps to exactly one generator class. The separation
    generator looks up its sub-zone generators here, which is what makes
    sub-zone generation recursive.

    Example:
        @content_registry.register(ContentType.DRAWERS)
        class DrawersContent:
            ...

        generator = content_registry.get(ContentType.DRAWERS)()
    """

    _instance: ContentRegistry | None = None
    _generators: dict[ContentType, type[ContentGenerator]]

    def __new__(cls) -> ContentRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._generators = {}
        return cls._instance

    def register(self, content_type: ContentType | str) -> Callable[[type[G]], type[G]]:
        """Decorator registering a generator class for ``content_type``.

        Raises:
            ValueError: If ``content_type`` already has a generator.
        """
        key = ContentType(content_type)

        def decorator(cls: type[G]) -> type[G]:
            if key in self._generators:
                raise ValueError(f"Content generator for '{key.value}' already registered")
            self._generators[key] = cls
            return cls

        return decorator

    def get(self, content_type: ContentType | str) -> type[ContentGenerator]:
        """Get the generator class for ``content_type``.

        Raises:
            KeyError: If no generator is registered for it.
        """
        key = ContentType(content_type)
        if key not in self._generators:
            raise KeyError(f"No content generator for '{key.value}'")
        return self._generators[key]

    def list(self) -> list[str]:
        return sorted(key.value for key in self._generators)

    def clear(self) -> None:
        """Remove every registration. Intended for tests only."""
        self._generators = {}


content_registry = ContentRegistry()
