"""Objects that are updated once per frame, and the registry that drives them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, Optional


class UpdatableObject(ABC):
    """Something with per-frame behaviour.

    Passing a registry registers the object at once and gives it an id.
    """

    object_id: Optional[int]

    def __init__(self, registry: Optional[UpdateRegistry] = None) -> None:
        self.object_id = None
        if registry is not None:
            registry.register(self)

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""


class UpdateRegistry:
    """Ordered collection of updatable objects."""

    def __init__(self) -> None:
        self._objects: list[UpdatableObject] = []

    def register(self, obj: UpdatableObject) -> int:
        """Add ``obj`` and give it the id after the last registered one."""
        obj.object_id = self._objects[-1].object_id + 1 if self._objects else 0
        self._objects.append(obj)
        return obj.object_id

    def update_all(self) -> None:
        """Update every registered object in registration order."""
        for obj in tuple(self._objects):
            obj.update()

    def cleanup(self) -> None:
        """Forget every registered object."""
        self._objects.clear()

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[UpdatableObject]:
        return iter(self._objects)