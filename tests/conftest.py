"""Shared fixtures for the Blobworld test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from blobworld.simulation.config import SimulationConfig
from blobworld.world.terrain import TerrainGrid, TerrainKind


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def soil_grid() -> TerrainGrid:
    """A 12x12 grid made entirely of soil."""
    return TerrainGrid(kinds=np.full((12, 12), TerrainKind.SOIL, dtype=np.int8))


@pytest.fixture
def striped_grid() -> TerrainGrid:
    """A 10x10 grid with one soil row, one sand row, the rest water."""
    kinds = np.full((10, 10), TerrainKind.WATER, dtype=np.int8)
    kinds[0, :] = TerrainKind.SOIL
    kinds[1, :] = TerrainKind.SAND
    return TerrainGrid(kinds=kinds)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def small_config() -> SimulationConfig:
    """A 20x20 world with a handful of blobs for fast engine tests."""
    return SimulationConfig(
        seed=777,
        grid_size=20,
        initial_food=15,
        initial_blobs=10,
    )
