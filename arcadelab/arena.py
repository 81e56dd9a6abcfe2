"""Building the arena floor and the horde of zombies that fills it."""

from __future__ import annotations

import random
import time

from arcadelab.geometry import Quad, Rect, make_tile_quad
from arcadelab.zombie import Zombie, ZombieKind

TILE_SIZE = 50
TILE_TYPES = 3
SPAWN_MARGIN = 20


def create_background(arena: Rect) -> tuple[list[Quad], int]:
    """Tile the arena with walls round the edge and random floor inside.

    Returns the quads, column by column, and the tile size used.
    """
    world_width = int(arena.width) // TILE_SIZE
    world_height = int(arena.height) // TILE_SIZE
    now = int(time.time())
    quads: list[Quad] = []
    for w in range(world_width):
        for h in range(world_height):
            on_edge = h in (0, world_height - 1) or w in (0, world_width - 1)
            if on_edge:
                tile_type = TILE_TYPES
            else:
                tile_type = random.Random(now + h * w - h).randrange(TILE_TYPES)
            quads.append(make_tile_quad(w, h, TILE_SIZE, tile_type * TILE_SIZE))
    return quads, TILE_SIZE


def create_horde(num_zombies: int, arena: Rect) -> list[Zombie]:
    """Create ``num_zombies`` zombies spawned along the edges of the arena."""
    max_y = int(arena.height) - SPAWN_MARGIN
    min_y = int(arena.top) + SPAWN_MARGIN
    max_x = int(arena.width) - SPAWN_MARGIN
    min_x = int(arena.left) + SPAWN_MARGIN
    now = int(time.time())

    zombies: list[Zombie] = []
    for i in range(num_zombies):
        rng = random.Random(now * i)
        side = rng.randrange(4)
        if side == 0:
            x, y = min_x, rng.randrange(max_y) + min_y
        elif side == 1:
            x, y = max_x, rng.randrange(max_y) + min_y
        elif side == 2:
            x, y = rng.randrange(max_x) + min_x, min_y
        else:
            x, y = rng.randrange(max_x) + min_x, max_y

        kind = ZombieKind.from_code(random.Random(now * i * 2).randrange(3))
        zombie = Zombie()
        zombie.spawn(float(x), float(y), kind, i)
        zombies.append(zombie)
    return zombies