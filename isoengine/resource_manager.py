"""Loads textures by name and keeps them cached."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

log = logging.getLogger(__name__)

TextureLoader = Callable[[Path], Any]


def _default_base_path() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def _pygame_loader(path: Path) -> Any:
    import pygame

    try:
        return pygame.image.load(str(path))
    except pygame.error as exc:
        raise OSError(str(exc)) from exc


class ResourceManager:
    """Cache of textures loaded from ``<base_path>/<name>.bmp``."""

    def __init__(
        self,
        base_path: Optional[Union[str, Path]] = None,
        loader: Optional[TextureLoader] = None,
    ) -> None:
        self.base_path = Path(base_path) if base_path is not None else _default_base_path()
        self._loader = loader or _pygame_loader
        self._textures: dict[str, Any] = {}

    def get_texture(self, texture_name: str) -> Optional[Any]:
        """Return the named texture, loading it on first use.

        Returns None and caches nothing if the file cannot be loaded.
        """
        if texture_name in self._textures:
            return self._textures[texture_name]
        path = self.base_path / f"{texture_name}.bmp"
        try:
            texture = self._loader(path)
        except OSError as exc:
            log.error("Couldn't load bitmap %s: %s", path, exc)
            return None
        self._textures[texture_name] = texture
        return texture

    def unload_texture(self, texture_name: str) -> bool:
        """Drop a cached texture; return whether it was cached."""
        if self._textures.pop(texture_name, None) is None:
            log.warning("Couldn't find texture: %s", texture_name)
            return False
        return True

    def cleanup(self) -> None:
        """Drop every cached texture."""
        self._textures.clear()

    def __contains__(self, texture_name: object) -> bool:
        return texture_name in self._textures

    def __len__(self) -> int:
        return len(self._textures)