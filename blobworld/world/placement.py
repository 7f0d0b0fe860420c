"""Placement — rejection sampling of starting positions.

Food and blobs are dropped onto random soil cells.  Each call keeps
drawing uniform coordinates until it has enough distinct soil cells or
runs out of attempts; running out is not an error, the caller simply
receives fewer positions (and a warning is logged).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blobworld.blobs.blob import Blob, FoodItem
from blobworld.world.terrain import TerrainKind

if TYPE_CHECKING:
    from numpy.random import Generator

    from blobworld.world.terrain import TerrainGrid

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 100
DEFAULT_MAX_ATTEMPTS = 10_000


def sample_distinct_positions(
    grid: TerrainGrid,
    count: int,
    restrict_to: TerrainKind,
    max_attempts: int,
    rng: Generator,
) -> list[tuple[int, int]]:
    """Draw up to ``count`` distinct coordinates on one terrain kind.

    Args:
        grid: Terrain to sample from.
        count: Number of positions wanted.
        restrict_to: Only cells of this kind are accepted.
        max_attempts: Cap on the number of random draws.
        rng: Seeded random generator.

    Returns:
        Accepted ``(x, y)`` coordinates in the order they were drawn.
        Shorter than ``count`` if the attempt cap was reached first.
    """
    accepted: list[tuple[int, int]] = []
    seen: set[tuple[int, int]] = set()
    attempts = 0
    while len(accepted) < count and attempts < max_attempts:
        x = int(rng.integers(grid.size))
        y = int(rng.integers(grid.size))
        attempts += 1
        if (x, y) in seen or grid.kinds[y, x] != restrict_to:
            continue
        seen.add((x, y))
        accepted.append((x, y))

    if len(accepted) < count:
        logger.warning(
            "Placement exhausted after %d attempts: wanted %d %s cells, found %d",
            attempts,
            count,
            restrict_to.name.lower(),
            len(accepted),
        )
    return accepted


def seed_food(
    grid: TerrainGrid,
    rng: Generator,
    count: int = DEFAULT_COUNT,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> list[FoodItem]:
    """Scatter food items over distinct soil cells."""
    positions = sample_distinct_positions(
        grid,
        count,
        TerrainKind.SOIL,
        max_attempts,
        rng,
    )
    return [FoodItem(x=x, y=y) for x, y in positions]


def seed_blobs(
    grid: TerrainGrid,
    rng: Generator,
    count: int = DEFAULT_COUNT,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> list[Blob]:
    """Place freshly fed blobs on distinct soil cells."""
    positions = sample_distinct_positions(
        grid,
        count,
        TerrainKind.SOIL,
        max_attempts,
        rng,
    )
    return [Blob(x=x, y=y) for x, y in positions]
