"""Entry point for ``python -m blobworld``.

Loads the default YAML config, builds a simulation engine, and either
opens a Pygame window to watch the blobs forage or runs a fixed number
of ticks headless, logging the population as it goes.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from blobworld.simulation.config import SimulationConfig
from blobworld.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def run_headless(engine: SimulationEngine, ticks: int, report_every: int = 10) -> None:
    """Advance ``engine`` without a display, stopping early on extinction.

    Args:
        engine: The simulation to drive.
        ticks: Maximum number of ticks to run.
        report_every: Log the population every this many ticks.
    """
    for _ in range(ticks):
        engine.step()
        if engine.tick % report_every == 0:
            logger.info(
                "Tick %d: %d blobs, %d food",
                engine.tick,
                engine.state.blob_count,
                engine.state.food_count,
            )
        if engine.is_extinct:
            break
    logger.info(
        "Finished after %d ticks: %d blobs remaining, %d food remaining",
        engine.tick,
        engine.state.blob_count,
        engine.state.food_count,
    )


def main() -> None:
    """Parse CLI args, create engine, launch renderer or headless loop."""
    parser = argparse.ArgumentParser(
        prog="blobworld",
        description="Blobworld - foraging blobs on procedurally grown terrain",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the RNG seed from the config file",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=10,
        help="Pixel size per grid cell (default: 10)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and log population counts",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Ticks to run in headless mode (default: 1000)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every tick",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed
    engine = SimulationEngine(config=config)

    if args.headless:
        run_headless(engine, args.ticks)
        return

    from blobworld.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(engine=engine, cell_size=args.cell_size)
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
