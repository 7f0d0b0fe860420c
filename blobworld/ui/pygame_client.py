"""Pygame 2D visualization for the Blobworld simulation.

Renders the terrain, food and blobs in a window with a counter panel
beside it.  The simulation ticks at a fixed real-time interval while
the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from blobworld.simulation.engine import SimulationEngine

from blobworld.world.terrain import TerrainKind

# Colour palette
_BG = (20, 20, 20)
_TEXT = (200, 200, 200)
_FOOD = (0, 128, 0)
_BLOB = (255, 0, 0)

_TERRAIN_COLOURS: dict[TerrainKind, tuple[int, int, int]] = {
    TerrainKind.SOIL: (139, 69, 19),
    TerrainKind.SAND: (244, 164, 96),
    TerrainKind.WATER: (30, 144, 255),
}

# Bounds for the +/- interval controls, in milliseconds
_MIN_INTERVAL_MS = 15
_MAX_INTERVAL_MS = 16_000


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        tick_interval_ms: Real-time milliseconds between ticks.
        screen: The Pygame display surface.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 10,
        tick_interval_ms: int | None = None,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            tick_interval_ms: Milliseconds between ticks; defaults to the
                engine config's ``tick_interval_ms``.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.tick_interval_ms = tick_interval_ms or engine.config.tick_interval_ms
        self._elapsed_ms = 0

        side = engine.grid.size * cell_size
        self._panel_width = 220
        self._win_w = side + self._panel_width
        self._win_h = side

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Blobworld")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False
        self._terrain = self._paint_terrain()

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim on schedule, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt_ms = self.clock.tick(fps)
            self._handle_events()
            if not self.paused:
                self._elapsed_ms += dt_ms
                while self._elapsed_ms >= self.tick_interval_ms:
                    self._elapsed_ms -= self.tick_interval_ms
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self.tick_interval_ms = max(
                        _MIN_INTERVAL_MS,
                        self.tick_interval_ms // 2,
                    )
                elif event.key == pygame.K_MINUS:
                    self.tick_interval_ms = min(
                        _MAX_INTERVAL_MS,
                        self.tick_interval_ms * 2,
                    )

    def _paint_terrain(self) -> pygame.Surface:
        """Paint the (immutable) terrain once onto an off-screen surface."""
        cs = self.cell_size
        grid = self.engine.grid
        surface = pygame.Surface((grid.size * cs, grid.size * cs))
        for y in range(grid.size):
            for x in range(grid.size):
                colour = _TERRAIN_COLOURS[grid.kind_at(x, y)]
                pygame.draw.rect(surface, colour, (x * cs, y * cs, cs, cs))
        return surface

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self.screen.blit(self._terrain, (0, 0))
        self._draw_food()
        self._draw_blobs()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_food(self) -> None:
        """Draw each food item as a small green dot."""
        cs = self.cell_size
        radius = max(1, cs // 4)
        for item in self.engine.state.food:
            centre = (item.x * cs + cs // 2, item.y * cs + cs // 2)
            pygame.draw.circle(self.screen, _FOOD, centre, radius)

    def _draw_blobs(self) -> None:
        """Draw each blob as a red dot."""
        cs = self.cell_size
        radius = max(2, cs // 3)
        for blob in self.engine.state.blobs:
            centre = (blob.x * cs + cs // 2, blob.y * cs + cs // 2)
            pygame.draw.circle(self.screen, _BLOB, centre, radius)

    def _draw_info_panel(self) -> None:
        """Draw the counters panel on the right side of the window."""
        panel_x = self.engine.grid.size * self.cell_size + 10
        y = 10

        state = self.engine.state
        lines = [
            f"Tick: {self.engine.tick}",
            f"Interval: {self.tick_interval_ms} ms",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            f"Blobs remaining: {state.blob_count}",
            f"Food remaining: {state.food_count}",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
