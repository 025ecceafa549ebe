"""
Shared pytest fixtures and configuration for attributer tests.

This module provides:
- Automatic unit/integration markers based on test location
- A fresh owner class per test
- A factory for Attribute instances bound to that owner

Usage:
    def test_something(owner, make_attribute):
        attribute = make_attribute(name="title", kind="named")
"""

import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

# Ensure attributer package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from attributer import Attribute
from attributer import registry


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "integration" in str(test_path) or "test_end_to_end" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_registry() -> Generator[None, None, None]:
    """
    Restore the attribute set registry after each test.

    Classes declared inside a test are dropped; classes declared at module
    level (before the snapshot) stay registered.
    """
    saved = dict(registry._registry)
    yield
    registry.clear_registry()
    registry._registry.update(saved)


# =============================================================================
# Owner Fixtures
# =============================================================================


@pytest.fixture
def owner() -> type:
    """A plain owner class, new for every test."""

    class Owner:
        def normalize(self, value):
            return value.strip()

        def is_short(self, value):
            return len(value) < 10

    return Owner


@pytest.fixture
def instance(owner: type) -> Any:
    """An instance of the ``owner`` fixture."""
    return owner()


@pytest.fixture
def make_attribute(owner: type) -> Callable[..., Attribute]:
    """
    Factory for attributes owned by the ``owner`` fixture.

    Defaults to a named attribute called ``field``; any keyword overrides.
    """

    def factory(**options: Any) -> Attribute:
        options.setdefault("name", "field")
        options.setdefault("kind", "named")
        return Attribute(owner, **options)

    return factory
