"""
Enemy Module
=============
Enemy spawning and the bounded random walk.

Enemies pick one +/-1 offset per axis per tick and apply it, clamped
to the world edges. Rows are drawn before columns so a seeded RNG
replays the same walk.
"""

import random

from .components import Enemy, Position, WORLD_COLS, WORLD_ROWS


STEPS = (-1, 1)


def spawn_enemy(rng: random.Random, rows: int = WORLD_ROWS, cols: int = WORLD_COLS) -> Enemy:
    """Create an enemy at a uniformly random cell inside the world."""
    row = rng.randint(1, rows)
    col = rng.randint(1, cols)
    return Enemy(position=Position(row, col), damage=2, hp=20)


def spawn_enemies(rng: random.Random, count: int,
                  rows: int = WORLD_ROWS, cols: int = WORLD_COLS) -> list:
    return [spawn_enemy(rng, rows, cols) for _ in range(count)]


def walk_axis(value: int, offset: int, bound: int) -> int:
    """Step one axis by `offset`, clamped into [1, bound]."""
    moved = value + offset
    if moved < 1:
        return 1
    if moved > bound:
        return bound
    return moved


def apply_random_walk(enemy: Enemy, rng: random.Random,
                      rows: int = WORLD_ROWS, cols: int = WORLD_COLS) -> None:
    """Move an enemy one random step on each axis."""
    row = walk_axis(enemy.position.row, rng.choice(STEPS), rows)
    col = walk_axis(enemy.position.col, rng.choice(STEPS), cols)
    enemy.position = Position(row, col)
