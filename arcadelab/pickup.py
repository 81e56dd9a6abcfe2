"""Health and ammo pickups that appear, vanish and reappear in the arena."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from enum import Enum

from arcadelab.geometry import Rect, Sprite, Vector2
from arcadelab.textures import TextureCache

PICKUP_SIZE = 50.0
START_WAIT_TIME = 10
START_SECONDS_TO_LIVE = 5
ARENA_MARGIN = 50


class PickupKind(Enum):
    """The kinds of pickup, with their starting value and image."""

    HEALTH = (1, 50, "graphics/health_pickup.png")
    AMMO = (2, 12, "graphics/ammo_pickup.png")

    def __init__(self, code: int, start_value: int, texture: str) -> None:
        self.code = code
        self.start_value = start_value
        self.texture = texture


class Pickup:
    """A pickup that lives for a while, then waits before spawning again."""

    def __init__(
        self,
        kind: PickupKind,
        textures: TextureCache | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.kind = kind
        self._clock = clock
        texture = textures.get(kind.texture) if textures is not None else kind.texture
        self.sprite = Sprite(
            size=Vector2(PICKUP_SIZE, PICKUP_SIZE),
            origin=Vector2(PICKUP_SIZE / 2, PICKUP_SIZE / 2),
            texture=texture,
        )
        self.value = kind.start_value
        self.arena = Rect()
        self.spawned = False
        self.seconds_since_spawn = 0.0
        self.seconds_since_despawn = 0.0
        self.seconds_to_live = float(START_SECONDS_TO_LIVE)
        self.seconds_to_wait = float(START_WAIT_TIME)

    def set_arena(self, arena: Rect) -> None:
        """Keep the pickup inside ``arena`` (less a margin) and spawn it."""
        self.arena = Rect(
            arena.left + ARENA_MARGIN,
            arena.top + ARENA_MARGIN,
            arena.width - ARENA_MARGIN,
            arena.height - ARENA_MARGIN,
        )
        self.spawn()

    def spawn(self) -> None:
        """Place the pickup at a random spot and start its lifetime."""
        now = int(self._clock())
        x = random.Random(now // self.kind.code).randrange(int(self.arena.width))
        y = random.Random(now * self.kind.code).randrange(int(self.arena.height))
        self.seconds_since_spawn = 0.0
        self.spawned = True
        self.sprite.position = Vector2(x, y)

    def collect(self) -> int:
        """Take the pickup and return what it is worth."""
        self.spawned = False
        self.seconds_since_despawn = 0.0
        return self.value

    def update(self, elapsed_time: float) -> None:
        """Advance the timers, hiding or respawning the pickup as needed."""
        if self.spawned:
            self.seconds_since_spawn += elapsed_time
        else:
            self.seconds_since_despawn += elapsed_time

        if self.seconds_since_spawn > self.seconds_to_live and self.spawned:
            self.spawned = False
            self.seconds_since_despawn = 0.0

        if self.seconds_since_despawn > self.seconds_to_wait and not self.spawned:
            self.spawn()

    def upgrade(self) -> None:
        """Make the pickup worth more and come back sooner."""
        self.value = int(self.value + self.kind.start_value * 0.5)
        self.seconds_to_live += START_SECONDS_TO_LIVE // 10
        self.seconds_to_wait -= START_WAIT_TIME // 10

    def bounds(self) -> Rect:
        """Return the pickup's rectangle in world coordinates."""
        return self.sprite.global_bounds()