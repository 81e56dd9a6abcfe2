"""A bullet that flies in a straight line until it leaves its range or is stopped."""

from __future__ import annotations

import math

from arcadelab.geometry import Rect, Vector2

BULLET_SPEED = 1000.0
BULLET_RANGE = 1000.0
BULLET_SIZE = 4.0


class Bullet:
    """A single projectile; reused by calling :meth:`shoot` again."""

    def __init__(self, speed: float = BULLET_SPEED) -> None:
        self.speed = speed
        self.position = Vector2()
        self.in_flight = False
        self._velocity = Vector2()
        self._min = Vector2()
        self._max = Vector2()

    @property
    def velocity(self) -> Vector2:
        """Distance travelled per second along each axis."""
        return self._velocity

    def shoot(self, start_x: float, start_y: float, target_x: float, target_y: float) -> None:
        """Launch the bullet from the start point towards the target point."""
        self.in_flight = True
        self.position = Vector2(start_x, start_y)

        angle = math.atan2(target_y - start_y, target_x - start_x)
        self._velocity = Vector2(self.speed * math.cos(angle), self.speed * math.sin(angle))

        self._min = Vector2(start_x - BULLET_RANGE, start_y - BULLET_RANGE)
        self._max = Vector2(start_x + BULLET_RANGE, start_y + BULLET_RANGE)

    def stop(self) -> None:
        """Take the bullet out of flight."""
        self.in_flight = False

    def update(self, elapsed_time: float) -> None:
        """Advance the bullet and stop it once it is out of range."""
        self.position = self.position + self._velocity * elapsed_time
        x, y = self.position
        if x < self._min.x or x > self._max.x or y < self._min.y or y > self._max.y:
            self.in_flight = False

    def bounds(self) -> Rect:
        """Return the bullet's rectangle in world coordinates."""
        return Rect(self.position.x, self.position.y, BULLET_SIZE, BULLET_SIZE)