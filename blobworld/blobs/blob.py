"""Blob and FoodItem — the two kinds of thing that sit on the grid.

Both are small immutable records.  A blob's only internal state is how
long it has gone without eating; everything else about its behaviour is
decided by ``blobworld.blobs.behavior``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FoodItem:
    """A stationary piece of food.

    Attributes:
        x: Column position in the grid.
        y: Row position in the grid.
    """

    x: int
    y: int


@dataclass(frozen=True)
class Blob:
    """A single foraging agent.

    Attributes:
        x: Current column position in the grid.
        y: Current row position in the grid.
        steps_since_meal: Consecutive ticks since the blob last ate.
    """

    x: int
    y: int
    steps_since_meal: int = 0

    @property
    def position(self) -> tuple[int, int]:
        """Return the blob's ``(x, y)`` coordinate."""
        return (self.x, self.y)

    def fed(self) -> Blob:
        """Return this blob with its hunger counter reset."""
        return replace(self, steps_since_meal=0)

    def moved_to(self, x: int, y: int, *, ate: bool) -> Blob:
        """Return this blob relocated to ``(x, y)``.

        Args:
            x: Destination column.
            y: Destination row.
            ate: Whether food was found at the destination.
        """
        steps = 0 if ate else self.steps_since_meal + 1
        return Blob(x=x, y=y, steps_since_meal=steps)
