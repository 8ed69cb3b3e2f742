"""Shared tree fixtures for grammar-tree tests."""

from __future__ import annotations

import pytest
from builders import ExampleTree, build_example


@pytest.fixture
def example() -> ExampleTree:
    """A fresh copy of the worked example tree."""
    return build_example()
