"""A cache that loads each texture file once and hands out the same object afterwards."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _load_image(filename: str) -> Any:
    import pygame

    return pygame.image.load(filename)


class TextureCache:
    """Load textures by file name, keeping each one after its first load."""

    def __init__(self, loader: Callable[[str], Any] | None = None) -> None:
        self._loader = loader or _load_image
        self._textures: dict[str, Any] = {}

    def get(self, filename: str) -> Any:
        """Return the texture for ``filename``, loading it on first use."""
        try:
            return self._textures[filename]
        except KeyError:
            texture = self._loader(filename)
            self._textures[filename] = texture
            return texture

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, filename: object) -> bool:
        return filename in self._textures