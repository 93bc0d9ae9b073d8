"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

import pytest

from wardrobes.application import Configurator, ConfiguratorSettings
from wardrobes.domain import FurnitureProject, InMemoryMaterialCatalog


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def catalog() -> InMemoryMaterialCatalog:
    """Material catalog seeded with the default materials."""
    return InMemoryMaterialCatalog()


@pytest.fixture
def project() -> FurnitureProject:
    """Default 2000 x 2400 x 600 project: shelves left, hanging rail right."""
    return FurnitureProject.create(name="Test wardrobe")


@pytest.fixture
def empty_project() -> FurnitureProject:
    """Single empty zone spanning the whole default cabinet."""
    return FurnitureProject.create(name="Empty", default_structure=False)


@pytest.fixture
def configurator(catalog: InMemoryMaterialCatalog) -> Configurator:
    """Configurator holding a freshly created default project."""
    configurator = Configurator(ConfiguratorSettings(), catalog=catalog)
    result = configurator.create_project(name="Test wardrobe")
    assert result.success
    return configurator
