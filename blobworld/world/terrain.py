"""Terrain — procedurally grown soil/sand/water grid.

The grid is grown once, before the simulation starts, by a randomised
flood fill from the centre cell.  Each newly reached cell inherits a
kind from the cell that reached it, with a *chain* counter recording how
many same-kind cells precede it on that path.  Long chains become less
likely to continue:

- soil keeps producing soil with probability ``1 - 0.005 * (chain - 1)``,
  otherwise it produces sand;
- sand keeps producing sand with probability ``1 - 0.05 * (chain - 1)``,
  otherwise it produces water;
- water only ever produces water.

The frontier entry to expand and the order in which its eight
neighbours are visited are both drawn at random, which keeps the
patches from lining up along the grid axes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.random import Generator

logger = logging.getLogger(__name__)

# -- Constants ---------------------------------------------------------------

_SOIL_DECAY = 0.5  # percentage points lost per soil chain step
_SAND_DECAY = 5.0  # percentage points lost per sand chain step
_UNASSIGNED = -1

_NEIGHBOUR_OFFSETS = np.array(
    [
        (-1, -1),
        (0, -1),
        (1, -1),
        (-1, 0),
        (1, 0),
        (-1, 1),
        (0, 1),
        (1, 1),
    ],
    dtype=np.int64,
)


class TerrainKind(IntEnum):
    """Kind of ground occupying a grid cell."""

    SOIL = 0
    SAND = 1
    WATER = 2


def continue_probability(kind: TerrainKind, chain: int) -> float:
    """Return the chance that a child keeps its parent's terrain kind.

    Args:
        kind: Terrain kind of the parent cell.
        chain: Chain counter of the parent cell (1 for a fresh run).

    Returns:
        Probability in ``[0, 1]``.  Water always continues.
    """
    if kind == TerrainKind.SOIL:
        return max(100.0 - (chain - 1) * _SOIL_DECAY, 0.0) / 100.0
    if kind == TerrainKind.SAND:
        return max(100.0 - (chain - 1) * _SAND_DECAY, 0.0) / 100.0
    return 1.0


def child_of(
    kind: TerrainKind,
    chain: int,
    rng: Generator,
) -> tuple[TerrainKind, int]:
    """Draw the kind and chain of a cell reached from a parent.

    Args:
        kind: Parent terrain kind.
        chain: Parent chain counter.
        rng: Seeded random generator.

    Returns:
        ``(child_kind, child_chain)``.  A failed continuation degrades
        soil to sand and sand to water, restarting the chain at 1.
    """
    if kind == TerrainKind.WATER:
        return TerrainKind.WATER, chain + 1
    if rng.random() < continue_probability(kind, chain):
        return kind, chain + 1
    if kind == TerrainKind.SOIL:
        return TerrainKind.SAND, 1
    return TerrainKind.WATER, 1


@dataclass(frozen=True, eq=False)
class TerrainGrid:
    """Immutable square grid of terrain kinds.

    Attributes:
        kinds: ``(size, size)`` array of ``TerrainKind`` values indexed
            as ``kinds[y, x]``.  The array is read-only.
    """

    kinds: np.ndarray

    def __post_init__(self) -> None:
        # Lock a view so the caller's array stays writeable
        object.__setattr__(self, "kinds", self.kinds.view())
        self.kinds.flags.writeable = False

    @property
    def size(self) -> int:
        """Number of rows (and columns) in the grid."""
        return int(self.kinds.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies inside the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def kind_at(self, x: int, y: int) -> TerrainKind:
        """Return the terrain kind at grid coordinates ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.in_bounds(x, y):
            msg = f"({x}, {y}) out of bounds for {self.size}x{self.size}"
            raise IndexError(msg)
        return TerrainKind(int(self.kinds[y, x]))

    def counts(self) -> dict[TerrainKind, int]:
        """Return the number of cells of each terrain kind."""
        return {kind: int(np.count_nonzero(self.kinds == kind)) for kind in TerrainKind}

    def fractions(self) -> dict[TerrainKind, float]:
        """Return the share of the grid covered by each terrain kind."""
        total = self.kinds.size
        return {kind: n / total for kind, n in self.counts().items()}


def generate_terrain(grid_size: int, rng: Generator) -> TerrainGrid:
    """Grow a terrain grid from its centre cell.

    Cell state lives in two flat arrays (kind and chain) addressed by
    ``y * grid_size + x``; the frontier is a list of those indices.

    Args:
        grid_size: Width and height of the square grid.
        rng: Seeded random generator.

    Returns:
        A fully assigned TerrainGrid.

    Raises:
        ValueError: If ``grid_size`` is smaller than 1.
    """
    if grid_size < 1:
        msg = f"grid_size must be at least 1, got {grid_size}"
        raise ValueError(msg)

    kinds = np.full(grid_size * grid_size, _UNASSIGNED, dtype=np.int8)
    chains = np.zeros(grid_size * grid_size, dtype=np.int64)

    start = (grid_size // 2) * grid_size + grid_size // 2
    kinds[start] = TerrainKind.SOIL
    chains[start] = 1
    frontier = [start]

    while frontier:
        # Arbitrary-element removal: swap the pick with the tail, then pop
        pick = int(rng.integers(len(frontier)))
        frontier[pick], frontier[-1] = frontier[-1], frontier[pick]
        current = frontier.pop()

        y, x = divmod(current, grid_size)
        parent_kind = TerrainKind(int(kinds[current]))
        parent_chain = int(chains[current])

        for dx, dy in rng.permutation(_NEIGHBOUR_OFFSETS):
            nx, ny = x + int(dx), y + int(dy)
            if not (0 <= nx < grid_size and 0 <= ny < grid_size):
                continue
            index = ny * grid_size + nx
            if kinds[index] != _UNASSIGNED:
                continue
            kind, chain = child_of(parent_kind, parent_chain, rng)
            kinds[index] = kind
            chains[index] = chain
            frontier.append(index)

    grid = TerrainGrid(kinds=kinds.reshape(grid_size, grid_size))
    logger.debug(
        "Generated %dx%d terrain: %s",
        grid_size,
        grid_size,
        {kind.name.lower(): n for kind, n in grid.counts().items()},
    )
    return grid
