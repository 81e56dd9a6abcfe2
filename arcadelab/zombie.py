"""Zombies of three kinds that chase the player and die after enough hits."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable
from enum import Enum

from arcadelab.geometry import Rect, Sprite, Vector2
from arcadelab.textures import TextureCache

ZOMBIE_SIZE = 50.0
MAX_VARIANCE = 30
OFFSET = 101 - MAX_VARIANCE
BLOOD_TEXTURE = "graphics/blood.png"


class ZombieKind(Enum):
    """The kinds of zombie, with their base speed, toughness and image."""

    BLOATER = (0, 40.0, 5.0, "graphics/bloater.png")
    CHASER = (1, 80.0, 1.0, "graphics/chaser.png")
    CRAWLER = (2, 20.0, 3.0, "graphics/crawler.png")

    def __init__(self, code: int, speed: float, health: float, texture: str) -> None:
        self.code = code
        self.speed = speed
        self.health = health
        self.texture = texture

    @classmethod
    def from_code(cls, code: int) -> ZombieKind:
        for kind in cls:
            if kind.code == code:
                return kind
        raise ValueError(f"unknown zombie kind: {code!r}")


class Zombie:
    """A zombie that walks towards the player each frame."""

    def __init__(
        self,
        textures: TextureCache | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._textures = textures
        self._clock = clock
        self.kind: ZombieKind | None = None
        self.position = Vector2()
        self.speed = 0.0
        self.health = 0.0
        self.alive = False
        self.sprite = Sprite(
            size=Vector2(ZOMBIE_SIZE, ZOMBIE_SIZE),
            origin=Vector2(ZOMBIE_SIZE / 2, ZOMBIE_SIZE / 2),
        )

    def _texture(self, filename: str) -> object:
        return self._textures.get(filename) if self._textures is not None else filename

    def spawn(self, start_x: float, start_y: float, kind: ZombieKind | int, seed: int) -> None:
        """Bring the zombie to life at the given point with a slightly varied speed."""
        if not isinstance(kind, ZombieKind):
            kind = ZombieKind.from_code(kind)
        self.kind = kind
        self.sprite = Sprite(
            size=Vector2(ZOMBIE_SIZE, ZOMBIE_SIZE),
            origin=Vector2(ZOMBIE_SIZE / 2, ZOMBIE_SIZE / 2),
            texture=self._texture(kind.texture),
        )
        self.speed = kind.speed
        self.health = kind.health

        rng = random.Random(int(self._clock()) * seed)
        modifier = (rng.randrange(MAX_VARIANCE) + OFFSET) / 100
        self.speed *= modifier

        self.position = Vector2(start_x, start_y)
        self.sprite.position = self.position
        self.alive = True

    def hit(self) -> bool:
        """Register a bullet hit; return True if it killed the zombie."""
        self.health -= 1
        if self.health < 0:
            self.alive = False
            self.sprite.texture = self._texture(BLOOD_TEXTURE)
            return True
        return False

    def update(self, elapsed_time: float, player_location: Vector2) -> None:
        """Step towards the player and turn to face them."""
        player_x, player_y = player_location
        x, y = self.position
        step = self.speed * elapsed_time
        if player_x > x:
            x += step
        if player_y > y:
            y += step
        if player_x < x:
            x -= step
        if player_y < y:
            y -= step
        self.position = Vector2(x, y)
        self.sprite.position = self.position
        self.sprite.rotation = (math.atan2(player_y - y, player_x - x) * 180) / 3.141

    def bounds(self) -> Rect:
        """Return the zombie's rectangle in world coordinates."""
        return self.sprite.global_bounds()