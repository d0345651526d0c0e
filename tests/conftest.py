"""Shared pytest fixtures and configuration for the constview test suite.

Guidelines
----------
* Core tests must be pure, with no side effects beyond the values they build.
* Every fixture returns a fresh composite so tests can assert that
  rejected operations left it untouched.
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def person() -> dict[str, Any]:
    """A nested mapping with primitive, array, and object members."""
    return {
        "name": "John",
        "age": 30,
        "tags": ["admin", "ops"],
        "address": {"city": "Oslo", "lines": ["Storgata 1", "0155"]},
    }


@pytest.fixture
def matrix() -> list[Any]:
    """A nested list with a mapping leaf."""
    return [[1, 2], [3, 4], {"label": "corner"}]
