"""The player-controlled character."""

from __future__ import annotations

from typing import Optional

from .clock import Clock
from .collider_3d import Collider3D, Collider3DWorld
from .event_manager import EventManager
from .game_object import GameObject
from .sprite_renderer import RenderingLayer, SpriteRegistry, SpriteRenderer
from .updatable_object import UpdateRegistry
from .vector3d import Vector3D

_STEP = 10
TEXTURE_NAME = "block_x_3"


class Character(GameObject):
    """A unit box moved by velocity events and pushed out of obstacles."""

    def __init__(
        self,
        velocity_x: float,
        velocity_y: float,
        position_x: float,
        position_y: float,
        *,
        events: EventManager,
        colliders: Collider3DWorld,
        sprites: Optional[SpriteRegistry] = None,
        updates: Optional[UpdateRegistry] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(
            Vector3D(position_x, position_y, 0), Vector3D(1, 1, 1), updates
        )
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.freeze = False
        self.clock = clock if clock is not None else Clock()

        self.sprite = SpriteRenderer(TEXTURE_NAME, RenderingLayer.IN_GAME_LAYER)
        if sprites is not None:
            sprites.add(self.sprite)

        events.add_listener("move_right", self.move_right)
        events.add_listener("move_left", self.move_left)
        events.add_listener("move_up", self.move_up)
        events.add_listener("move_down", self.move_down)

        self.collider = colliders.create()
        self.collider.position = Vector3D(*self.position)
        self.collider.reference = Vector3D(*self.size)
        self.collider.add_callback(self.resolve_collision)

    def update(self) -> None:
        """Move by velocity times the frame time and sync collider and sprite."""
        velocity_x, velocity_y = self.velocity_x, self.velocity_y
        if self.freeze:
            velocity_x = velocity_y = 0
        dt = self.clock.deltatime
        self.position.x += velocity_x * dt
        self.position.y += velocity_y * dt
        self.freeze = False
        self.collider.position = Vector3D(*self.position)
        self.sprite.x, self.sprite.y, self.sprite.z = self.position

    def move_right(self) -> None:
        self.velocity_x += _STEP

    def move_left(self) -> None:
        self.velocity_x -= _STEP

    def move_up(self) -> None:
        self.velocity_y -= _STEP

    def move_down(self) -> None:
        self.velocity_y += _STEP

    def resolve_collision(self, other: Collider3D) -> Vector3D:
        """Push the character out of ``other`` along the axis of least overlap.

        Returns the displacement applied; zero if the boxes only touch.
        """
        own = self.collider
        overlap = []
        for axis in range(3):
            other_low, other_high = other.extreme_value(axis)
            own_low, own_high = own.extreme_value(axis)
            overlap.append(min(other_high, own_high) - max(other_low, own_low))
        if not all(overlap):
            return Vector3D()

        ox, oy, oz = overlap
        if ox < oy and ox < oz:
            axis = 0
        elif abs(oy) < abs(oz):
            axis = 1
        else:
            axis = 2

        push = [0.0, 0.0, 0.0]
        amount = overlap[axis]
        push[axis] = (
            amount if other.central_value(axis) < own.central_value(axis) else -amount
        )
        displacement = Vector3D(*push)
        self.position += displacement
        self.collider.position = Vector3D(*self.position)
        return displacement