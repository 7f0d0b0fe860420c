"""Behaviour — the per-tick update of every blob.

Blobs are processed one after another against a single shared food set.
Each blob:

1. eats in place if it is standing on food;
2. otherwise steps onto an adjacent food cell if it can see one
   (picking at random among several);
3. otherwise steps to a random adjacent cell;
4. eats on arrival if the destination holds food.

Because the food set shrinks as blobs are processed, a blob earlier in
the sequence can take food that a later blob was about to reach.  The
outcome of a tick therefore depends on blob order.

After every blob has moved, blobs that have gone too long without food
are removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from blobworld.blobs.blob import Blob, FoodItem
from blobworld.simulation.state import SimulationState

if TYPE_CHECKING:
    from numpy.random import Generator

MAX_STEPS_WITHOUT_FOOD = 100

# dx outer, dy inner; the centre (0, 0) is not a move
_MOVE_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def candidate_moves(x: int, y: int, grid_size: int) -> list[tuple[int, int]]:
    """Return the in-bounds step offsets available from ``(x, y)``.

    Args:
        x: Column of the blob.
        y: Row of the blob.
        grid_size: Width and height of the grid (no wraparound).

    Returns:
        Up to eight ``(dx, dy)`` offsets; fewer on edges and corners.
    """
    return [
        (dx, dy)
        for dx, dy in _MOVE_OFFSETS
        if 0 <= x + dx < grid_size and 0 <= y + dy < grid_size
    ]


def step_blob(
    blob: Blob,
    food: set[FoodItem],
    rng: Generator,
    grid_size: int,
) -> Blob:
    """Advance a single blob by one tick.

    Any food the blob eats is removed from ``food``.

    Args:
        blob: The blob to update.
        food: Food still available this tick.  Mutated in place.
        rng: Seeded random generator.
        grid_size: Width and height of the grid.

    Returns:
        The blob's next state (before starvation culling).
    """
    here = FoodItem(blob.x, blob.y)
    if here in food:
        food.remove(here)
        return blob.fed()

    moves = candidate_moves(blob.x, blob.y, grid_size)
    towards_food = [
        (dx, dy) for dx, dy in moves if FoodItem(blob.x + dx, blob.y + dy) in food
    ]
    options = towards_food or moves
    dx, dy = options[int(rng.integers(len(options)))]

    destination = FoodItem(blob.x + dx, blob.y + dy)
    ate = destination in food
    if ate:
        food.remove(destination)
    return blob.moved_to(destination.x, destination.y, ate=ate)


def advance(
    state: SimulationState,
    rng: Generator,
    *,
    grid_size: int,
    max_steps_without_food: int = MAX_STEPS_WITHOUT_FOOD,
) -> SimulationState:
    """Compute the simulation state one tick after ``state``.

    ``state`` itself is left untouched.

    Args:
        state: Current food and blobs.
        rng: Seeded random generator.
        grid_size: Width and height of the grid.
        max_steps_without_food: Blobs whose hunger counter reaches this
            value are removed at the end of the tick.

    Returns:
        A new SimulationState.
    """
    food = set(state.food)
    moved = [step_blob(blob, food, rng, grid_size) for blob in state.blobs]
    survivors = [b for b in moved if b.steps_since_meal < max_steps_without_food]
    return SimulationState.from_items(food=food, blobs=survivors)
