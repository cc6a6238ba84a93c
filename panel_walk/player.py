"""
Player Module
==============
Player creation, keyboard translation and directional movement.
"""

from typing import Optional, Tuple

from .components import Direction, InputCode, Player, Position


# Input code -> (facing, row delta, col delta)
MOVES = {
    InputCode.UP: (Direction.NORTH, -1, 0),
    InputCode.DOWN: (Direction.SOUTH, 1, 0),
    InputCode.LEFT: (Direction.WEST, 0, -1),
    InputCode.RIGHT: (Direction.EAST, 0, 1),
}


def create_player() -> Player:
    """Create the player at its fixed starting cell, facing east."""
    return Player(position=Position(5, 5), facing=Direction.EAST, damage=2, hp=20)


def set_facing(player: Player, code: Optional[InputCode]) -> None:
    """Turn the player toward a directional code. Other codes are ignored."""
    move = MOVES.get(code)
    if move is not None:
        player.facing = move[0]


def apply_move(player: Player, code: Optional[InputCode],
               bounds: Optional[Tuple[int, int]] = None) -> None:
    """
    Turn and step the player one cell for a directional code.

    Facing is always updated before the step. With `bounds` given as
    (rows, cols) the new cell is clamped into [1, rows] x [1, cols];
    without it the step is unchecked.
    """
    move = MOVES.get(code)
    if move is None:
        return

    set_facing(player, code)
    _, d_row, d_col = move
    row = player.position.row + d_row
    col = player.position.col + d_col

    if bounds is not None:
        rows, cols = bounds
        row = min(max(row, 1), rows)
        col = min(max(col, 1), cols)

    player.position = Position(row, col)


class InputHandler:
    """
    Translates blessed keystrokes into input codes.

    Arrow keys and WASD move; F4, Q and Escape quit. Anything else
    translates to None.
    """

    KEY_NAMES = {
        'KEY_UP': InputCode.UP,
        'KEY_DOWN': InputCode.DOWN,
        'KEY_LEFT': InputCode.LEFT,
        'KEY_RIGHT': InputCode.RIGHT,
        'KEY_F4': InputCode.QUIT,
        'KEY_ESCAPE': InputCode.QUIT,
    }

    KEY_CHARS = {
        'w': InputCode.UP,
        's': InputCode.DOWN,
        'a': InputCode.LEFT,
        'd': InputCode.RIGHT,
        'q': InputCode.QUIT,
    }

    def translate(self, key) -> Optional[InputCode]:
        """Map a single keystroke from blessed's inkey() to an input code."""
        if key is None or not key:
            return None

        if key.is_sequence:
            return self.KEY_NAMES.get(key.name)

        return self.KEY_CHARS.get(key.lower())
