"""Config — load simulation parameters from YAML files.

Grid size, population sizes, the starvation limit and the tick cadence
live in YAML and are parsed into a typed dataclass here.  The terrain
growth rules and blob movement rules are fixed and not configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        grid_size: Width and height of the square terrain grid.
        initial_food: Number of food items to scatter at startup.
        initial_blobs: Number of blobs to place at startup.
        max_placement_attempts: Random draws allowed per placement call
            before giving up with a partial result.
        max_steps_without_food: Ticks a blob survives without eating.
        tick_interval_ms: Real-time milliseconds between ticks when
            running with a window.
    """

    seed: int = 42
    grid_size: int = 100
    initial_food: int = 100
    initial_blobs: int = 100
    max_placement_attempts: int = 10_000
    max_steps_without_food: int = 100
    tick_interval_ms: int = 2000

    def __post_init__(self) -> None:
        """Reject values the simulation cannot run with.

        Raises:
            ValueError: If any parameter is out of range.
        """
        if self.grid_size < 2:
            msg = f"grid_size must be at least 2, got {self.grid_size}"
            raise ValueError(msg)
        if self.initial_food < 0 or self.initial_blobs < 0:
            msg = "initial_food and initial_blobs must not be negative"
            raise ValueError(msg)
        for name in (
            "max_placement_attempts",
            "max_steps_without_food",
            "tick_interval_ms",
        ):
            if getattr(self, name) <= 0:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            grid_size=data.get("grid_size", cls.grid_size),
            initial_food=data.get("initial_food", cls.initial_food),
            initial_blobs=data.get("initial_blobs", cls.initial_blobs),
            max_placement_attempts=data.get(
                "max_placement_attempts",
                cls.max_placement_attempts,
            ),
            max_steps_without_food=data.get(
                "max_steps_without_food",
                cls.max_steps_without_food,
            ),
            tick_interval_ms=data.get("tick_interval_ms", cls.tick_interval_ms),
        )
