"""SimulationState — the snapshot threaded from one tick to the next."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from blobworld.blobs.blob import Blob, FoodItem


@dataclass(frozen=True)
class SimulationState:
    """Food and blobs at one instant of the simulation.

    Instances are never modified; every tick builds a new one.

    Attributes:
        food: Remaining food items (distinct positions).
        blobs: Living blobs in processing order.
    """

    food: frozenset[FoodItem] = field(default_factory=frozenset)
    blobs: tuple[Blob, ...] = ()

    @classmethod
    def from_items(
        cls,
        food: Iterable[FoodItem],
        blobs: Iterable[Blob],
    ) -> SimulationState:
        """Build a state from any iterables of food and blobs."""
        return cls(food=frozenset(food), blobs=tuple(blobs))

    @property
    def blob_count(self) -> int:
        """Number of living blobs."""
        return len(self.blobs)

    @property
    def food_count(self) -> int:
        """Number of uneaten food items."""
        return len(self.food)
