"""Registry mapping component type names to component classes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, TypeVar

if TYPE_CHECKING:
    from .base import Component

C = TypeVar("C", bound="type[Component]")


class ComponentTypeRegistry:
    """Class-level registry of component types, keyed by ``kind``.

    Serialization stores each component's ``kind`` and uses this registry
    to rebuild the right class when a project is loaded.

    Example:
        @ComponentTypeRegistry.register("shelf")
        class Shelf(Panel):
            kind: ClassVar[str] = "shelf"
    """

    _types: ClassVar[dict[str, type[Component]]] = {}

    @classmethod
    def register(cls, kind: str) -> Callable[[C], C]:
        """Decorator registering a component class under ``kind``.

        Raises:
            ValueError: If ``kind`` is already registered to another class.
        """

        def decorator(component_cls: C) -> C:
            existing = cls._types.get(kind)
            if existing is not None and existing is not component_cls:
                raise ValueError(f"Component type '{kind}' is already registered")
            cls._types[kind] = component_cls
            return component_cls

        return decorator

    @classmethod
    def get(cls, kind: str) -> type[Component]:
        """Look up a component class.

        Raises:
            KeyError: If ``kind`` is not registered.
        """
        if kind not in cls._types:
            available = ", ".join(sorted(cls._types))
            raise KeyError(f"Unknown component type '{kind}'. Available: {available}")
        return cls._types[kind]

    @classmethod
    def available_types(cls) -> list[str]:
        return sorted(cls._types)

    @classmethod
    def is_registered(cls, kind: str) -> bool:
        return kind in cls._types
