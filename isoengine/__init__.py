"""An isometric game engine on pygame: vectors, events, input maps, colliders, sprites and a demo room."""

__version__ = "0.1.0"