"""Plain 2D value types shared by the games: vectors, rectangles, sprites and tile quads."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap by a non-zero area.

        Rectangles with negative sizes are normalised first; rectangles that
        only touch along an edge do not intersect.
        """
        min_x1, max_x1 = sorted((self.left, self.left + self.width))
        min_y1, max_y1 = sorted((self.top, self.top + self.height))
        min_x2, max_x2 = sorted((other.left, other.left + other.width))
        min_y2, max_y2 = sorted((other.top, other.top + other.height))

        inter_left = max(min_x1, min_x2)
        inter_top = max(min_y1, min_y2)
        inter_right = min(max_x1, max_x2)
        inter_bottom = min(max_y1, max_y2)
        return inter_left < inter_right and inter_top < inter_bottom


@dataclass
class Sprite:
    """A positioned, rotatable image of a given size.

    ``origin`` is the point of the image, in local coordinates, that sits at
    ``position`` and around which the image rotates. ``rotation`` is in degrees.
    """

    size: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)
    origin: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    texture: object = None

    def _to_world(self, point: Vector2) -> Vector2:
        local = point - self.origin
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return Vector2(
            local.x * cos_a - local.y * sin_a + self.position.x,
            local.x * sin_a + local.y * cos_a + self.position.y,
        )

    def global_bounds(self) -> Rect:
        """Return the world-space bounding box of the transformed sprite."""
        corners = [
            self._to_world(Vector2(0.0, 0.0)),
            self._to_world(Vector2(self.size.x, 0.0)),
            self._to_world(Vector2(self.size.x, self.size.y)),
            self._to_world(Vector2(0.0, self.size.y)),
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)


@dataclass(frozen=True)
class Quad:
    """Four vertices of a textured tile, clockwise from the top-left corner."""

    positions: tuple[Vector2, Vector2, Vector2, Vector2]
    tex_coords: tuple[Vector2, Vector2, Vector2, Vector2]


def make_tile_quad(column: int, row: int, tile_size: int, vertical_offset: int) -> Quad:
    """Build the quad for the tile at ``(column, row)``.

    The texture coordinates pick a ``tile_size`` square from a vertical sprite
    sheet, starting ``vertical_offset`` pixels from its top.
    """
    x = column * tile_size
    y = row * tile_size
    positions = (
        Vector2(x, y),
        Vector2(x + tile_size, y),
        Vector2(x + tile_size, y + tile_size),
        Vector2(x, y + tile_size),
    )
    tex_coords = (
        Vector2(0, vertical_offset),
        Vector2(tile_size, vertical_offset),
        Vector2(tile_size, tile_size + vertical_offset),
        Vector2(0, tile_size + vertical_offset),
    )
    return Quad(positions, tex_coords)