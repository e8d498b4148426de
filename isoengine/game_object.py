"""Base class for objects placed in the world."""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from .internal_event_manager import InternalEventManager
from .updatable_object import UpdatableObject, UpdateRegistry
from .vector3d import Vector3D


class GameObject(InternalEventManager, UpdatableObject):
    """An updatable object with a position, a size and its own events."""

    def __init__(
        self,
        position: Vector3D,
        size: Vector3D,
        registry: Optional[UpdateRegistry] = None,
    ) -> None:
        if not isinstance(position, Vector3D) or not isinstance(size, Vector3D):
            raise TypeError("Position and size of a GameObject must be Vector3D")
        InternalEventManager.__init__(self)
        UpdatableObject.__init__(self, registry)
        self.position = Vector3D(*position)
        self.size = Vector3D(*size)

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""