"""SimulationEngine — the tick driver.

Owns the terrain grid, the current SimulationState and the master RNG.
Startup order:

1. Generate terrain
2. Scatter food on soil
3. Place blobs on soil

Each tick then replaces the state with ``advance(state)``.  The engine
keeps no timers of its own; the renderer or the headless loop decides
when ``step`` is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from blobworld.blobs.behavior import advance
from blobworld.simulation.config import SimulationConfig
from blobworld.simulation.state import SimulationState
from blobworld.world.placement import seed_blobs, seed_food
from blobworld.world.terrain import TerrainGrid, generate_terrain

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        grid: Immutable terrain grid.
        state: Current food and blobs.
        rng: Master seeded random generator.
        tick: Current tick count.
    """

    config: SimulationConfig
    grid: TerrainGrid = field(init=False)
    state: SimulationState = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build terrain, food and blobs from config."""
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = generate_terrain(self.config.grid_size, self.rng)
        food = seed_food(
            self.grid,
            self.rng,
            count=self.config.initial_food,
            max_attempts=self.config.max_placement_attempts,
        )
        blobs = seed_blobs(
            self.grid,
            self.rng,
            count=self.config.initial_blobs,
            max_attempts=self.config.max_placement_attempts,
        )
        self.state = SimulationState.from_items(food=food, blobs=blobs)

        fractions = self.grid.fractions()
        logger.info(
            "Simulation initialised: seed=%d grid=%dx%d "
            "soil=%.0f%% sand=%.0f%% water=%.0f%% food=%d blobs=%d",
            self.config.seed,
            self.grid.size,
            self.grid.size,
            *(100 * fractions[kind] for kind in sorted(fractions)),
            self.state.food_count,
            self.state.blob_count,
        )

    @property
    def is_extinct(self) -> bool:
        """Return True once every blob has starved."""
        return self.state.blob_count == 0

    def step(self) -> None:
        """Advance the simulation by one tick."""
        had_blobs = not self.is_extinct
        self.state = advance(
            self.state,
            self.rng,
            grid_size=self.grid.size,
            max_steps_without_food=self.config.max_steps_without_food,
        )
        self.tick += 1
        logger.debug(
            "Tick %d: blobs=%d food=%d",
            self.tick,
            self.state.blob_count,
            self.state.food_count,
        )
        if had_blobs and self.is_extinct:
            logger.info("All blobs starved by tick %d", self.tick)

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()
