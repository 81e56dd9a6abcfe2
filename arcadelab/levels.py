"""Level maps read from text files, and the manager that steps through them."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from arcadelab.geometry import Quad, Vector2, make_tile_quad

TILE_SIZE = 50
VERTS_IN_QUAD = 4
NUM_LEVELS = 4

_LEVELS = {
    1: ("levels/level1.txt", Vector2(100, 100), 30.0),
    2: ("levels/level2.txt", Vector2(100, 3600), 100.0),
    3: ("levels/level3.txt", Vector2(1250, 0), 30.0),
    4: ("levels/level4.txt", Vector2(50, 200), 50.0),
}


def parse_level(text: str) -> list[list[int]]:
    """Turn a level file into rows of tile codes, one digit per tile."""
    grid: list[list[int]] = []
    for row in text.split():
        if not row.isdigit():
            raise ValueError(f"level row holds a non-digit: {row!r}")
        grid.append([int(ch) for ch in row])
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("level rows differ in length")
    return grid


def build_level_quads(grid: list[list[int]], tile_size: int = TILE_SIZE) -> list[Quad]:
    """Build one textured quad per tile, column by column."""
    if not grid:
        return []
    return [
        make_tile_quad(x, y, tile_size, grid[y][x] * tile_size)
        for x in range(len(grid[0]))
        for y in range(len(grid))
    ]


def _read_file(path: str) -> str:
    return Path(path).read_text()


class LevelManager:
    """Load the levels in turn, tightening the time limit on each full cycle."""

    def __init__(self, loader: Callable[[str], str] = _read_file) -> None:
        self._loader = loader
        self.level_size = Vector2(0, 0)
        self.start_position = Vector2()
        self.time_modifier = 1.0
        self.base_time_limit = 0.0
        self.current_level = 0
        self.grid: list[list[int]] = []
        self.quads: list[Quad] = []

    def next_level(self) -> tuple[list[list[int]], list[Quad]]:
        """Advance to the next level and return its tile grid and quads."""
        self.level_size = Vector2(0, 0)
        self.current_level += 1
        if self.current_level > NUM_LEVELS:
            self.current_level = 1
            self.time_modifier -= 0.1

        path, self.start_position, self.base_time_limit = _LEVELS[self.current_level]
        self.grid = parse_level(self._loader(path))
        width = len(self.grid[0]) if self.grid else 0
        self.level_size = Vector2(width, len(self.grid))
        self.quads = build_level_quads(self.grid, TILE_SIZE)
        return self.grid, self.quads

    def time_limit(self) -> float:
        """Seconds allowed for the current level."""
        return self.base_time_limit * self.time_modifier