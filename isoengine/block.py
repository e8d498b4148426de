"""Static unit blocks that make up the level."""

from __future__ import annotations

import logging
from typing import Optional

from .collider_3d import Collider3DWorld
from .game_object import GameObject
from .sprite_renderer import RenderingLayer, SpriteRegistry, SpriteRenderer
from .updatable_object import UpdateRegistry
from .vector3d import Vector3D

log = logging.getLogger(__name__)

TEXTURE_NAME = "block_x_3"


class Block(GameObject):
    """A unit cube with a sprite and a collider that never moves."""

    def __init__(
        self,
        position_x: float,
        position_y: float,
        position_z: float,
        *,
        colliders: Collider3DWorld,
        sprites: Optional[SpriteRegistry] = None,
        updates: Optional[UpdateRegistry] = None,
    ) -> None:
        super().__init__(
            Vector3D(position_x, position_y, position_z), Vector3D(1, 1, 1), updates
        )
        self.sprite = SpriteRenderer(
            TEXTURE_NAME,
            RenderingLayer.IN_GAME_LAYER,
            self.position.x,
            self.position.y,
            self.position.z,
        )
        if sprites is not None:
            sprites.add(self.sprite)

        self.collider = colliders.create()
        self.collider.position = Vector3D(*self.position)
        self.collider.reference = Vector3D(*self.size)
        log.debug("Collider at %f, %f, size 1, 1", position_x, position_y)

    def update(self) -> None:
        """Blocks are static."""