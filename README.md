# isoengine

A small isometric game engine built on pygame, with a demo room you can walk
a character around in.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo

```
isoengine
```

Options:

- `--input-map PATH`: key-binding file to load (default
  `inputMaps/character_controller_1.csv`). If it cannot be opened, an error is
  logged and the game runs with no key bindings.
- `--base-path DIR`: directory holding the texture bitmaps. By default this
  is the directory of the running program.
- `--windowed`: open a 1000×800 window instead of going fullscreen.

Textures are read as `<base path>/<name>.bmp`. The demo needs
`astronaut.bmp` to be present and exits with status 1 without it; the blocks
and the character are drawn with `block_x_3.bmp`, and sprites whose texture
is missing are skipped. The level (`populate_level`) is a room of blocks with
an inner 2×2 pillar and one character. The character listens for the events
`move_right`, `move_left`, `move_up` and `move_down`, each of which changes
its velocity by 10 units per second along that direction, and is pushed out
of any block it runs into. The frame rate is drawn in the top-left corner.
Closing the window ends the program.

## Key-binding files

Each line of an input map has three comma-separated fields:

```
<kind>,<key name>,<event name>
```

A `kind` of `1` fires the event when the key goes down and `0` fires it when
the key comes up. Lines with any other kind are logged and skipped; a line
with a valid kind but fewer than three fields raises `ValueError`. Key names
are resolved with pygame's key names (unknown names map to key code 0). For
example:

```
1,right,move_right
0,right,move_left
```

binds pressing the right arrow to `move_right` and releasing it to
`move_left`, so the character moves only while the key is held.

`isoengine.input_map.parse_input_map(lines, key_from_name)` builds an
`InputMap` from any iterable of lines, and `load_input_map(path,
key_from_name)` reads one from a file. `key_from_name` may be any function
from a key name to a key code; it defaults to pygame's lookup.

## The modules

- `isoengine.vector2d.Vector2D` and `isoengine.vector3d.Vector3D`: mutable
  float vectors with `+`, scalar `*`, indexing, iteration and `magnitude`.
  `Vector2D` also has `/` by a scalar, `unit_vector()` and `dot_product()`
  (which returns the component-wise product as a vector). `Vector3D` also has
  `-`, `unit_vector()` (zero stays zero), `dot_product()` (a float),
  `cross_product()` and the static `projection(v1, v2)`.
- `isoengine.event_manager`: `EventManager`, a named-event bus. Listeners are
  grouped by `EventKind` (`VOID`, `INT`, `INT_INT`, `FLOAT`, `FLOAT_FLOAT`);
  `add_listener` returns an id, numbered from 1 within an event, that
  `remove_listener` takes. `invoke(name, *args)` picks the kind from the
  argument types, calls the matching listeners and returns how many ran; it
  raises `TypeError` for more than two arguments or mixed types.
- `isoengine.internal_event_manager`: `InternalEventManager`, per-object
  events taking a single int or float; other signatures raise
  `UnsupportedEventType`.
- `isoengine.collider_2d` and `isoengine.collider_3d`: axis-aligned boxes
  (`Collider2D`, `Collider3D`) owned by a world (`Collider2DWorld`,
  `Collider3DWorld`). `check_all_collisions()` splits the boxes recursively
  along alternating axes, then compares the small groups pairwise, and returns
  each overlapping pair once. Boxes that only touch do not collide. A
  `Collider3D` can carry callbacks (`add_callback`) that run with the other
  collider on every contact. When a world has a `Renderer`, its `lightness`
  grows with each collision found.
- `isoengine.renderer.Renderer`: the display surface and the per-frame
  `lightness`.
- `isoengine.updatable_object`: the abstract `UpdatableObject` and the
  `UpdateRegistry` that numbers objects and updates them in order.
- `isoengine.game_object.GameObject`: an updatable object with a `position`,
  a `size` (both `Vector3D`, anything else raises `TypeError`) and its own
  internal events.
- `isoengine.character.Character` and `isoengine.block.Block`: the demo's
  game objects.
- `isoengine.clock.Clock`: frame timing; `tick()` returns the seconds since
  the previous tick from a 32-bit millisecond counter.
- `isoengine.input_manager`: `InputManager` turns `InputEvent`s into named
  events through the active input maps, ignoring repeated key-down events
  until the key is released. A quit event returns `AppResult.SUCCESS`.
- `isoengine.resource_manager.ResourceManager`: loads and caches textures by
  name; a texture that cannot be loaded gives `None`.
- `isoengine.sprite_renderer`: `SpriteRenderer` places a texture in
  isometric projection (or on the UI layer), and `SpriteRegistry` sorts
  sprites by layer, height and depth and draws them.
- `isoengine.app`: `Engine` holds all of the above and runs one frame per
  `iterate()`; `main()` is the `isoengine` command.

## Examples

```python
from isoengine.event_manager import EventKind, EventManager

events = EventManager()
listener_id = events.add_listener("jump", lambda: print("jump"), EventKind.VOID)
events.invoke("jump")
events.remove_listener("jump", listener_id, EventKind.VOID)
```

```python
from isoengine.vector3d import Vector3D

a = Vector3D(1, 0, 0)
b = Vector3D(0, 1, 0)
print(a + b, a.dot_product(b), Vector3D.projection(a + b, a))
```

## What it does not do

- Gamepad and joystick input is only logged: buttons cannot be bound in input
  maps, and `InputManager.analyse_axis()` always returns an empty mapping.
- There is no physics beyond the character being pushed out of the boxes it
  overlaps; blocks never move.
- There is no level format: the demo room is built in code by
  `populate_level`.