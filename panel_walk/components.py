"""
Component Definitions
======================
Grid constants and the plain dataclasses that make up the game state.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


# =============================================================================
# GRID CONSTANTS
# =============================================================================

WORLD_ROWS = 35
WORLD_COLS = 35

PANEL_HEIGHT = 6
PANEL_WIDTH = 12

ENEMY_COUNT = 2

PLAYER_ID = 0  # Enemies are numbered from 1


# =============================================================================
# INPUT
# =============================================================================

class InputCode(Enum):
    """Input codes recognized by the game loop."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()


DIRECTIONAL_CODES = (InputCode.UP, InputCode.DOWN, InputCode.LEFT, InputCode.RIGHT)


# =============================================================================
# SPATIAL COMPONENTS
# =============================================================================

class Direction(Enum):
    """Facing direction of the player."""
    NORTH = 'N'
    SOUTH = 'S'
    EAST = 'E'
    WEST = 'W'


@dataclass
class Position:
    """Grid cell, 1-based (row, col)."""
    row: int = 1
    col: int = 1

    def as_tuple(self) -> tuple:
        return (self.row, self.col)


@dataclass(frozen=True)
class PanelSize:
    """Outer size of a bordered panel in cells."""
    height: int = PANEL_HEIGHT
    width: int = PANEL_WIDTH


COMPONENT_SIZE = PanelSize(PANEL_HEIGHT, PANEL_WIDTH)


# =============================================================================
# ENTITIES
# =============================================================================

@dataclass
class Player:
    """The single player-controlled entity."""
    position: Position = field(default_factory=lambda: Position(5, 5))
    facing: Direction = Direction.EAST
    damage: int = 2
    hp: int = 20

    def describe(self) -> str:
        return (
            f'player pos=({self.position.row}, {self.position.col}) '
            f'facing={self.facing.value} dmg={self.damage} hp={self.hp}'
        )


@dataclass
class Enemy:
    """An autonomous random-walking entity."""
    position: Position = field(default_factory=Position)
    damage: int = 2
    hp: int = 20

    def describe(self, entity_id: int) -> str:
        return (
            f'enemy {entity_id} pos=({self.position.row}, {self.position.col}) '
            f'dmg={self.damage} hp={self.hp}'
        )
