#!/usr/bin/env python3
"""
PANEL_WALK - Terminal Panel Walker
===================================
A player panel and a pair of wandering enemy panels on a 35x35 grid.

Controls:
    Arrows / WASD   - Move and turn
    F4 / Q / ESC    - Quit
"""

from typing import Optional
import argparse
import logging
import random
import sys

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .components import DIRECTIONAL_CODES, PLAYER_ID, InputCode, PanelSize
from .config import GameConfig
from .engine import RenderError, TerminalSurface
from .enemies import apply_random_walk, spawn_enemies
from .logsetup import setup_logging
from .panels import PanelRegistry
from .player import InputHandler, apply_move, create_player


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

PHASE_RUNNING = 'running'
PHASE_TERMINATED = 'terminated'


# =============================================================================
# GAME STATE
# =============================================================================

class GameState:
    """Central game state container: entities, panels and the tick loop."""

    def __init__(self, surface, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.surface = surface
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.input_handler = InputHandler()

        self.alive = True
        self.phase = PHASE_RUNNING
        self.tick = 0

        self.player = create_player()
        self.enemies = spawn_enemies(
            self.rng, self.config.enemy_count,
            self.config.world_rows, self.config.world_cols
        )

        self.panels = PanelRegistry(
            surface, PanelSize(self.config.panel_height, self.config.panel_width)
        )
        pos = self.player.position
        self.panels.populate(PLAYER_ID, pos.row, pos.col)
        for entity_id, enemy in self.enemy_items():
            self.panels.populate(entity_id, enemy.position.row, enemy.position.col)

        logger.info('game created with %d enemies', len(self.enemies))

    @property
    def running(self) -> bool:
        return self.phase == PHASE_RUNNING

    @property
    def world_bounds(self) -> tuple:
        return (self.config.world_rows, self.config.world_cols)

    def enemy_items(self):
        """Yield (entity_id, enemy) pairs; enemy IDs start at 1."""
        for index, enemy in enumerate(self.enemies):
            yield PLAYER_ID + 1 + index, enemy

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def read_input(self) -> Optional[InputCode]:
        """Block up to one tick for a key and translate it."""
        key = self.surface.poll_input(self.config.tick_timeout)
        return self.input_handler.translate(key)

    def step(self, code: Optional[InputCode]) -> str:
        """Run one tick for an already-read input code. Returns the new phase."""
        if not self.running:
            return self.phase

        if code is InputCode.QUIT:
            logger.info('quit requested at tick %d', self.tick)
            self.phase = PHASE_TERMINATED
            return self.phase

        if code in DIRECTIONAL_CODES:
            apply_move(self.player, code, self.world_bounds)

        self.update_enemies()
        self.draw_turn()
        self.tick += 1

        if not self.alive:
            logger.info('player no longer alive at tick %d', self.tick)
            self.phase = PHASE_TERMINATED
        return self.phase

    def update_enemies(self):
        rows, cols = self.world_bounds
        for enemy in self.enemies:
            apply_random_walk(enemy, self.rng, rows, cols)

    def draw_turn(self):
        """Redraw every panel and the status overlay."""
        height = self.surface.height
        pos = self.player.position
        self.panels.redraw(PLAYER_ID, pos.row, pos.col, self.player.facing)
        self.surface.write_status_line(height - 1, self.player.describe())

        for index, (entity_id, enemy) in enumerate(self.enemy_items()):
            self.panels.redraw(entity_id, enemy.position.row, enemy.position.col)
            self.surface.write_status_line(height - (2 + index), enemy.describe(entity_id))

        logger.debug('tick %d: %s', self.tick, self.player.describe())

    def run(self):
        """Loop until quit or the alive flag drops."""
        while self.running:
            self.step(self.read_input())
        self.panels.clear()
        logger.info('game over after %d ticks', self.tick)


# =============================================================================
# MAIN LOOP
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal panel walker")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for enemy spawning and movement")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING"])
    parser.add_argument("--log-file", type=str, default=None,
                        help="write log records to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(seed=args.seed, log_level=args.log_level, log_file=args.log_file)


def main(argv=None):
    """Entry point. Sets up the terminal and runs the ~10 Hz input-driven loop."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config.log_level, config.log_file)

    term = Terminal()
    if term.width < config.min_width or term.height < config.min_height:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {config.min_width}x{config.min_height}'
        )
        sys.exit(1)

    surface = TerminalSurface(term)
    try:
        with surface:
            game = GameState(surface, config)
            game.run()
    except RenderError:
        logger.exception('render surface failure, aborting')
        raise


if __name__ == '__main__':
    main()
