"""Sprites drawn in isometric projection and the registry that orders them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Iterator

log = logging.getLogger(__name__)

_SIN = 7 * 3
_COS = 12 * 3
_HEIGHT = 15 * 3
_UI_SCALE = 30

CAMERA_OFFSET_X = 1000 / 2 - 250
CAMERA_OFFSET_Y = 800 / 2


class RenderingLayer(enum.IntEnum):
    """Layer a sprite is drawn on; higher layers are drawn later."""

    UI_LAYER = 0
    IN_GAME_LAYER = 1


@dataclass(eq=False)
class SpriteRenderer:
    """A named texture placed at a world (or UI) position."""

    texture_name: str = ""
    layer: RenderingLayer = RenderingLayer.IN_GAME_LAYER
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def sort_key(self) -> tuple[int, float, float]:
        """Key giving the drawing order: layer, then height, then depth."""
        return (int(self.layer), self.z, self.x + self.y)

    def is_greater_than(self, other: SpriteRenderer) -> bool:
        """Whether this sprite must be drawn after ``other``."""
        if self.layer != other.layer:
            return self.layer > other.layer
        if self.z != other.z:
            return self.z > other.z
        return self.x + self.y > other.x + other.y

    def destination(
        self, texture_width: float, texture_height: float
    ) -> tuple[float, float, float, float]:
        """Screen rectangle (x, y, width, height) for a texture of that size."""
        if self.layer is RenderingLayer.IN_GAME_LAYER:
            screen_x = (self.x - self.y) * _COS + CAMERA_OFFSET_X
            screen_y = (
                (self.x + self.y) * _SIN
                - self.z * _HEIGHT
                + CAMERA_OFFSET_Y
                - texture_height
            )
        elif self.layer is RenderingLayer.UI_LAYER:
            screen_x = _UI_SCALE * self.x
            screen_y = _UI_SCALE * self.y
        else:
            raise ValueError(f"Invalid layer {self.layer!r}")
        return (screen_x, screen_y, texture_width, texture_height)


class SpriteRegistry:
    """Every sprite to be drawn, kept in drawing order."""

    def __init__(self) -> None:
        self._sprites: list[SpriteRenderer] = []

    def add(self, sprite: SpriteRenderer) -> SpriteRenderer:
        """Register ``sprite`` for drawing and return it."""
        self._sprites.append(sprite)
        return sprite

    def remove(self, sprite: SpriteRenderer) -> bool:
        """Unregister ``sprite``; return whether it was registered."""
        for position, candidate in enumerate(self._sprites):
            if candidate is sprite:
                self._sprites[position] = self._sprites[-1]
                self._sprites.pop()
                return True
        return False

    def sort(self) -> None:
        """Put the sprites in drawing order."""
        self._sprites.sort(key=SpriteRenderer.sort_key)

    def display_all(self, surface: Any, resources: Any) -> int:
        """Draw every sprite onto ``surface``; return how many were drawn.

        Sprites whose texture cannot be loaded are skipped.
        """
        self.sort()
        drawn = 0
        for sprite in tuple(self._sprites):
            texture = resources.get_texture(sprite.texture_name)
            if texture is None:
                log.warning("No texture %s for sprite", sprite.texture_name)
                continue
            width, height = texture.get_size()
            screen_x, screen_y, _, _ = sprite.destination(width, height)
            surface.blit(texture, (screen_x, screen_y))
            drawn += 1
        return drawn

    def cleanup(self) -> None:
        """Forget every sprite."""
        self._sprites.clear()

    def __len__(self) -> int:
        return len(self._sprites)

    def __iter__(self) -> Iterator[SpriteRenderer]:
        return iter(self._sprites)