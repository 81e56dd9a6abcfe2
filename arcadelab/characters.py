"""The two playable characters of the platform game and their shared physics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from enum import Enum, auto

from arcadelab.geometry import Rect, Sprite, Vector2
from arcadelab.textures import TextureCache

CHARACTER_SPEED = 400.0


class Key(Enum):
    """Keys the characters respond to."""

    W = auto()
    A = auto()
    D = auto()
    UP = auto()
    LEFT = auto()
    RIGHT = auto()


class PlayableCharacter(ABC):
    """A character that runs left and right, jumps and falls under gravity."""

    TEXTURE = ""
    JUMP_DURATION = 0.0
    DEFAULT_SIZE = Vector2(50.0, 100.0)

    def __init__(self, textures: TextureCache | None = None, size: Vector2 | None = None) -> None:
        texture = textures.get(self.TEXTURE) if textures is not None else self.TEXTURE
        if size is None:
            get_size = getattr(texture, "get_size", None)
            size = Vector2(*get_size()) if callable(get_size) else self.DEFAULT_SIZE
        self.sprite = Sprite(size=size, texture=texture)
        self.jump_duration = self.JUMP_DURATION
        self.is_jumping = False
        self.is_falling = False
        self.left_pressed = False
        self.right_pressed = False
        self.time_this_jump = 0.0
        self.just_jumped = False
        self.gravity = 0.0
        self.speed = CHARACTER_SPEED
        self.position = Vector2()
        self.feet = Rect()
        self.head = Rect()
        self.right = Rect()
        self.left = Rect()

    def spawn(self, start_position: Vector2, gravity: float) -> None:
        """Place the character at the start point with the given gravity."""
        self.position = Vector2(start_position.x, start_position.y)
        self.gravity = gravity
        self.sprite.position = self.position

    @abstractmethod
    def handle_input(self, keys: Collection[Key]) -> bool:
        """React to the keys held down; return True if a jump just started."""

    def _handle_keys(self, keys: Collection[Key], jump: Key, left: Key, right: Key) -> bool:
        self.just_jumped = False
        if jump in keys:
            if not self.is_jumping and not self.is_falling:
                self.is_jumping = True
                self.time_this_jump = 0.0
                self.just_jumped = True
        else:
            self.is_jumping = False
            self.is_falling = True
        self.left_pressed = left in keys
        self.right_pressed = right in keys
        return self.just_jumped

    def update(self, elapsed_time: float) -> None:
        """Move, jump and fall, then refresh the body-part rectangles."""
        x, y = self.position
        if self.right_pressed:
            x += self.speed * elapsed_time
        if self.left_pressed:
            x -= self.speed * elapsed_time

        if self.is_jumping:
            self.time_this_jump += elapsed_time
            if self.time_this_jump < self.jump_duration:
                y -= self.gravity * 2 * elapsed_time
            else:
                self.is_jumping = False
                self.is_falling = True
        if self.is_falling:
            y += self.gravity * elapsed_time
        self.position = Vector2(x, y)

        # The body parts follow the sprite as it was before this frame's move.
        r = self.bounds()
        self.feet = Rect(r.left + 3, r.top + r.height + 1, r.width - 6, 1)
        self.head = Rect(r.left, r.top + r.height * 0.3, r.width, 15)
        self.right = Rect(r.left + r.width - 2, r.top + r.height * 0.35, 1, r.height * 0.3)
        self.left = Rect(r.left + 1, r.top + r.height * 0.35, 1, r.height * 0.3)

        self.sprite.position = self.position

    def bounds(self) -> Rect:
        """Return the character's rectangle in world coordinates."""
        return self.sprite.global_bounds()

    def center(self) -> Vector2:
        """Return the centre point of the character."""
        r = self.bounds()
        return Vector2(self.position.x + r.width / 2, self.position.y + r.height / 2)

    def stop_falling(self, position: float) -> None:
        """Stand the character on a surface at height ``position``, unless jumping."""
        if not self.is_jumping:
            self.position = Vector2(self.position.x, position - self.bounds().height)
            self.sprite.position = self.position
            self.is_falling = False

    def stop_right(self, position: float) -> None:
        """Stop the character against a wall on its right."""
        self.position = Vector2(position - self.bounds().width, self.position.y)
        self.sprite.position = self.position

    def stop_left(self, position: float) -> None:
        """Stop the character against a wall on its left."""
        self.position = Vector2(position + self.bounds().width, self.position.y)
        self.sprite.position = self.position

    def stop_jump(self) -> None:
        """End a jump early and start falling."""
        self.is_jumping = False
        self.is_falling = True


class Thomas(PlayableCharacter):
    """The taller character, steered with W, A and D."""

    TEXTURE = "graphics/thomas.png"
    JUMP_DURATION = 0.45

    def handle_input(self, keys: Collection[Key]) -> bool:
        return self._handle_keys(keys, Key.W, Key.A, Key.D)


class Bob(PlayableCharacter):
    """The smaller character, steered with the arrow keys."""

    TEXTURE = "graphics/bob.png"
    JUMP_DURATION = 0.25
    DEFAULT_SIZE = Vector2(50.0, 50.0)

    def handle_input(self, keys: Collection[Key]) -> bool:
        return self._handle_keys(keys, Key.UP, Key.LEFT, Key.RIGHT)