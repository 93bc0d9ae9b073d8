"""Bundled wardrobe project templates.

This package provides template configurations for common wardrobe layouts
and a TemplateManager class for accessing them.
"""

from wardrobes.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
