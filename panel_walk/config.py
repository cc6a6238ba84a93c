"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .components import ENEMY_COUNT, PANEL_HEIGHT, PANEL_WIDTH, WORLD_COLS, WORLD_ROWS


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World
    world_rows: int = WORLD_ROWS
    world_cols: int = WORLD_COLS

    # Panels
    panel_height: int = PANEL_HEIGHT
    panel_width: int = PANEL_WIDTH

    # Entities
    enemy_count: int = ENEMY_COUNT

    # Timing
    tick_timeout: float = 0.1  # seconds to wait for one key per tick

    # RNG (None = seeded from the OS)
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def status_rows(self) -> int:
        """Screen rows reserved for the per-entity status overlay."""
        return 1 + self.enemy_count

    @property
    def min_height(self) -> int:
        """Smallest terminal height that fits the world, a panel and the overlay."""
        return self.world_rows + self.panel_height + self.status_rows

    @property
    def min_width(self) -> int:
        return self.world_cols + self.panel_width
