"""The player's gun: a clip, spare ammunition, a fire rate and a pool of bullets."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from arcadelab.bullet import Bullet
from arcadelab.geometry import Vector2

BULLET_POOL_SIZE = 100
START_BULLETS_SPARE = 24
START_BULLETS_IN_CLIP = 6
START_CLIP_SIZE = 6
START_FIRE_RATE = 1.0


class ReloadResult(Enum):
    """What happened when the player tried to reload."""

    RELOADED = "reloaded"
    PARTIAL = "partial"
    FAILED = "failed"


class Gun:
    """Fires bullets from a fixed pool, limited by the clip and the fire rate."""

    def __init__(
        self,
        pool_size: int = BULLET_POOL_SIZE,
        bullets_spare: int = START_BULLETS_SPARE,
        bullets_in_clip: int = START_BULLETS_IN_CLIP,
        clip_size: int = START_CLIP_SIZE,
        fire_rate: float = START_FIRE_RATE,
    ) -> None:
        if pool_size <= 0:
            raise ValueError("the bullet pool must hold at least one bullet")
        self.bullets = [Bullet() for _ in range(pool_size)]
        self.current_bullet = 0
        self.bullets_spare = bullets_spare
        self.bullets_in_clip = bullets_in_clip
        self.clip_size = clip_size
        self.fire_rate = fire_rate
        self.last_pressed_ms = 0

    def reload(self) -> ReloadResult:
        """Fill the clip from the spare ammunition, as far as it goes."""
        if self.bullets_spare >= self.clip_size:
            self.bullets_in_clip = self.clip_size
            self.bullets_spare -= self.clip_size
            return ReloadResult.RELOADED
        if self.bullets_spare > 0:
            self.bullets_in_clip = self.bullets_spare
            self.bullets_spare = 0
            return ReloadResult.PARTIAL
        return ReloadResult.FAILED

    def can_fire(self, game_time_ms: int) -> bool:
        """True if enough time has passed since the last shot and the clip is not empty."""
        waited = game_time_ms - self.last_pressed_ms
        return waited > 1000 / self.fire_rate and self.bullets_in_clip > 0

    def fire(self, start: Vector2, target: Vector2, game_time_ms: int) -> Bullet | None:
        """Shoot the next bullet from ``start`` towards ``target``.

        Returns the bullet launched, or None if the gun could not fire.
        """
        if not self.can_fire(game_time_ms):
            return None
        bullet = self.bullets[self.current_bullet]
        bullet.shoot(start.x, start.y, target.x, target.y)
        self.current_bullet = (self.current_bullet + 1) % len(self.bullets)
        self.last_pressed_ms = game_time_ms
        self.bullets_in_clip -= 1
        return bullet

    def add_ammo(self, amount: int) -> None:
        """Add picked-up ammunition to the spare supply."""
        self.bullets_spare += amount

    def upgrade_fire_rate(self) -> None:
        """Allow one more shot per second."""
        self.fire_rate += 1

    def upgrade_clip_size(self) -> None:
        """Double the clip size; it takes effect at the next reload."""
        self.clip_size += self.clip_size

    def reset(self) -> None:
        """Restore the gun and ammunition for a new game."""
        self.current_bullet = 0
        self.bullets_spare = START_BULLETS_SPARE
        self.bullets_in_clip = START_BULLETS_IN_CLIP
        self.clip_size = START_CLIP_SIZE
        self.fire_rate = START_FIRE_RATE

    def update(self, elapsed_time: float) -> None:
        """Move every bullet that is in flight."""
        for bullet in self.bullets_in_flight():
            bullet.update(elapsed_time)

    def bullets_in_flight(self) -> Iterator[Bullet]:
        """Yield the bullets currently in flight."""
        return (bullet for bullet in list(self.bullets) if bullet.in_flight)