"""Rules of the two-character platform game: levels, input, collisions and the camera."""

from __future__ import annotations

from collections.abc import Callable, Collection
from enum import Enum, auto

from arcadelab.characters import Bob, Key, PlayableCharacter, Thomas
from arcadelab.geometry import Quad, Rect, Vector2
from arcadelab.levels import TILE_SIZE, LevelManager
from arcadelab.textures import TextureCache

GRAVITY = 300

TILE_BLOCK = 1
TILE_FIRE = 2
TILE_WATER = 3
TILE_GOAL = 4


class EngineKey(Enum):
    """Keys that control the game as a whole rather than a character."""

    ESCAPE = auto()
    RETURN = auto()
    Q = auto()
    E = auto()


class Engine:
    """Holds the game state and advances it one frame at a time."""

    def __init__(
        self,
        textures: TextureCache | None = None,
        level_loader: Callable[[str], str] | None = None,
    ) -> None:
        self.thomas = Thomas(textures)
        self.bob = Bob(textures)
        self.levels = LevelManager(level_loader) if level_loader is not None else LevelManager()
        self.running = True
        self.playing = False
        self.character1 = True
        self.split_screen = False
        self.time_remaining = 0.0
        self.game_time_total = 0.0
        self.new_level_required = True
        self.grid: list[list[int]] = []
        self.quads: list[Quad] = []

    def load_level(self) -> None:
        """Load the next level, reset the clock and place both characters at its start."""
        self.playing = False
        self.grid, self.quads = self.levels.next_level()
        self.time_remaining = self.levels.time_limit()
        start = self.levels.start_position
        self.thomas.spawn(start, GRAVITY)
        self.bob.spawn(start, GRAVITY)
        self.new_level_required = False

    def detect_collisions(self, character: PlayableCharacter) -> bool:
        """Resolve the character against nearby tiles; return True if it reached the goal."""
        zone = character.bounds()
        width = int(self.levels.level_size.x)
        height = int(self.levels.level_size.y)

        start_x = max(int(zone.left / TILE_SIZE) - 1, 0)
        start_y = max(int(zone.top / TILE_SIZE) - 1, 0)
        end_x = min(int(zone.left / TILE_SIZE) + 2, width)
        # Characters are tall, so look a few tiles further down.
        end_y = min(int(zone.top / TILE_SIZE) + 3, height)

        level = Rect(0, 0, width * TILE_SIZE, height * TILE_SIZE)
        if not zone.intersects(level):
            character.spawn(self.levels.start_position, GRAVITY)

        reached_goal = False
        for x in range(start_x, end_x):
            for y in range(start_y, end_y):
                block = Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
                tile = self.grid[y][x]

                # The head is used so that the character sinks a little first.
                if tile in (TILE_FIRE, TILE_WATER) and character.head.intersects(block):
                    character.spawn(self.levels.start_position, GRAVITY)

                if tile == TILE_BLOCK:
                    if character.right.intersects(block):
                        character.stop_right(block.left)
                    elif character.left.intersects(block):
                        character.stop_left(block.left)
                    if character.feet.intersects(block):
                        character.stop_falling(block.top)
                    elif character.head.intersects(block):
                        character.stop_jump()

                if tile == TILE_GOAL:
                    reached_goal = True
        return reached_goal

    def on_key_pressed(self, key: EngineKey) -> None:
        """React to a key press: quit, start, switch character or toggle split screen."""
        if key is EngineKey.ESCAPE:
            self.running = False
        elif key is EngineKey.RETURN:
            self.playing = True
        elif key is EngineKey.Q:
            self.character1 = not self.character1
        elif key is EngineKey.E:
            self.split_screen = not self.split_screen

    def handle_input(self, keys: Collection[Key]) -> tuple[bool, bool]:
        """Pass the held keys to both characters; return whether each just jumped."""
        return self.thomas.handle_input(keys), self.bob.handle_input(keys)

    def update(self, dt_as_seconds: float) -> None:
        """Advance the game by ``dt_as_seconds``."""
        self.game_time_total += dt_as_seconds

        if self.new_level_required:
            self.load_level()

        if self.playing:
            self.time_remaining -= dt_as_seconds

            if self.detect_collisions(self.thomas) and self.detect_collisions(self.bob):
                self.new_level_required = True
            else:
                self.detect_collisions(self.bob)

            self.thomas.update(dt_as_seconds)
            self.bob.update(dt_as_seconds)

            # Let the characters stand on each other's heads.
            if self.bob.feet.intersects(self.thomas.head):
                self.bob.stop_falling(self.thomas.head.top)
            elif self.thomas.feet.intersects(self.bob.head):
                self.thomas.stop_falling(self.bob.head.top)

            if self.time_remaining <= 0:
                self.new_level_required = True

    def view_centers(self) -> dict[str, Vector2]:
        """Return where each active view is centred.

        In split screen the ``"left"`` view follows Thomas and the ``"right"``
        view follows Bob; otherwise the ``"main"`` view follows the focused one.
        """
        if self.split_screen:
            return {"left": self.thomas.center(), "right": self.bob.center()}
        focused = self.thomas if self.character1 else self.bob
        return {"main": focused.center()}