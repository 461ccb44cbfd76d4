"""Shared pytest fixtures for vector2d tests."""

from collections import namedtuple

import pytest

from vector2d.config import reset_config
from vector2d.vector import Vector


# =============================================================================
# Config Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default config with no env overrides."""
    for name in ("VECTOR2D_RANDOM_LOW", "VECTOR2D_RANDOM_HIGH", "VECTOR2D_SEED"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Point Fixtures
# =============================================================================


class MutablePoint:
    """Caller-defined point type with plain attributes."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


@pytest.fixture
def vec() -> Vector:
    """A 3-4-5 vector."""
    return Vector(3, 4)


@pytest.fixture
def mutable_point() -> MutablePoint:
    return MutablePoint(7, 9)


@pytest.fixture
def frozen_point():
    """Read-only point (namedtuple)."""
    Point = namedtuple("Point", ["x", "y"])
    return Point(1, 2)


@pytest.fixture(params=[(3, 4), (-2.5, 7.25), (1e-3, -1e3), (0.1, 0.2)])
def sample_vector(request) -> Vector:
    """Assorted non-zero vectors for property checks."""
    return Vector(*request.param)
