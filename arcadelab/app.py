"""The window that shows the platform game and feeds it keyboard input."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

import pygame

from arcadelab.characters import Key, PlayableCharacter
from arcadelab.game import Engine, EngineKey
from arcadelab.geometry import Vector2
from arcadelab.levels import TILE_SIZE
from arcadelab.textures import TextureCache

TITLE = "Thomas was late"
BACKGROUND_TEXTURE = "graphics/background.png"
TILES_TEXTURE = "graphics/tiles_sheet.png"
CLEAR_COLOUR = (255, 255, 255)
PLACEHOLDER_COLOUR = (128, 128, 128)

LEFT_VIEWPORT = (0.001, 0.001, 0.498, 0.998)
RIGHT_VIEWPORT = (0.5, 0.001, 0.499, 0.998)

_COMMAND_KEYS = {
    pygame.K_ESCAPE: EngineKey.ESCAPE,
    pygame.K_RETURN: EngineKey.RETURN,
    pygame.K_q: EngineKey.Q,
    pygame.K_e: EngineKey.E,
}

_HELD_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def _viewport(fractions: tuple[float, float, float, float], width: int, height: int) -> pygame.Rect:
    left, top, w, h = fractions
    return pygame.Rect(
        int(left * width), int(top * height), max(1, int(w * width)), max(1, int(h * height))
    )


class GameWindow:
    """A pygame window that runs an :class:`Engine` and draws its views."""

    def __init__(
        self,
        size: tuple[int, int] | None = None,
        textures: TextureCache | None = None,
        engine: Engine | None = None,
    ) -> None:
        pygame.init()
        if size is None:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        self.textures = textures if textures is not None else TextureCache()
        self.engine = engine if engine is not None else Engine(self.textures)
        self.background = self.textures.get(BACKGROUND_TEXTURE)
        self.tiles = self.textures.get(TILES_TEXTURE)
        self.clock = pygame.time.Clock()

    def _draw_character(self, surface: pygame.Surface, character: PlayableCharacter,
                        offset: Vector2) -> None:
        x = round(character.sprite.position.x + offset.x)
        y = round(character.sprite.position.y + offset.y)
        texture = character.sprite.texture
        if isinstance(texture, pygame.Surface):
            surface.blit(texture, (x, y))
        else:
            size = character.sprite.size
            surface.fill(PLACEHOLDER_COLOUR, pygame.Rect(x, y, int(size.x), int(size.y)))

    def _draw_view(self, viewport: pygame.Rect, center: Vector2,
                   characters: Iterable[PlayableCharacter]) -> None:
        surface = self.screen.subsurface(viewport)
        surface.blit(self.background, (0, 0))
        offset = Vector2(viewport.width / 2 - center.x, viewport.height / 2 - center.y)
        for quad in self.engine.quads:
            position, tex = quad.positions[0], quad.tex_coords[0]
            surface.blit(
                self.tiles,
                (round(position.x + offset.x), round(position.y + offset.y)),
                pygame.Rect(int(tex.x), int(tex.y), TILE_SIZE, TILE_SIZE),
            )
        for character in characters:
            self._draw_character(surface, character, offset)

    def draw(self) -> None:
        """Draw the current frame: one full view, or one view per character."""
        self.screen.fill(CLEAR_COLOUR)
        engine = self.engine
        width, height = self.screen.get_size()
        centers = engine.view_centers()
        if not engine.split_screen:
            self._draw_view(
                pygame.Rect(0, 0, width, height), centers["main"], (engine.thomas, engine.bob)
            )
        else:
            self._draw_view(
                _viewport(LEFT_VIEWPORT, width, height), centers["left"],
                (engine.bob, engine.thomas),
            )
            self._draw_view(
                _viewport(RIGHT_VIEWPORT, width, height), centers["right"],
                (engine.thomas, engine.bob),
            )

    def _held_keys(self) -> set[Key]:
        pressed = pygame.key.get_pressed()
        return {key for code, key in _HELD_KEYS.items() if pressed[code]}

    def run(self) -> int:
        """Run frames until the engine stops; return the number of frames shown."""
        frames = 0
        while self.engine.running:
            dt = self.clock.tick() / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.engine.running = False
                elif event.type == pygame.KEYDOWN and event.key in _COMMAND_KEYS:
                    self.engine.on_key_pressed(_COMMAND_KEYS[event.key])
            self.engine.handle_input(self._held_keys())
            self.engine.update(dt)
            self.draw()
            pygame.display.flip()
            frames += 1
        return frames


def main(argv: list[str] | None = None) -> int:
    """Start the platform game."""
    parser = argparse.ArgumentParser(prog="arcadelab", description="Play the platform game.")
    parser.add_argument(
        "--window", nargs=2, type=int, metavar=("WIDTH", "HEIGHT"),
        help="run in a window of this size instead of full screen",
    )
    args = parser.parse_args(argv)
    window = GameWindow(size=tuple(args.window) if args.window else None)
    try:
        window.run()
    finally:
        pygame.quit()
    return 0