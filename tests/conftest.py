"""Shared pytest fixtures for Argon2 hashing tests."""

from __future__ import annotations

import pytest
from argon2.low_level import Type

from argon2_interop.hashing.options import Argon2Options, Argon2Version
from tests.mocks.mock_argon2_primitive import MockArgon2Primitive, MockSaltSource

# Smallest costs libargon2 accepts (m >= 8 * p), to keep real derivations fast.
CHEAP_TIME_COST = 1
CHEAP_MEMORY_COST_KIB = 8
CHEAP_PARALLELISM = 1


@pytest.fixture
def cheap_options() -> Argon2Options:
    """Argon2id options with the cheapest legal costs."""
    return Argon2Options(
        variant=Type.ID,
        version=Argon2Version.V13,
        time_cost=CHEAP_TIME_COST,
        memory_cost=CHEAP_MEMORY_COST_KIB,
        parallelism=CHEAP_PARALLELISM,
        hash_length=32,
        min_salt_length=16,
    )


@pytest.fixture
def mock_primitive() -> MockArgon2Primitive:
    """Fresh in-memory primitive reporting success."""
    return MockArgon2Primitive()


@pytest.fixture
def mock_salt_source() -> MockSaltSource:
    """Fresh deterministic salt source."""
    return MockSaltSource()
