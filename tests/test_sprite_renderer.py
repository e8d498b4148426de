import pytest

from isoengine.sprite_renderer import (
    CAMERA_OFFSET_X,
    CAMERA_OFFSET_Y,
    RenderingLayer,
    SpriteRegistry,
    SpriteRenderer,
)


class FakeTexture:
    def __init__(self, width=8, height=12):
        self._size = (width, height)

    def get_size(self):
        return self._size


class FakeSurface:
    def __init__(self):
        self.blits = []

    def blit(self, texture, position):
        self.blits.append((texture, position))


class FakeResources:
    def __init__(self, textures):
        self.textures = textures

    def get_texture(self, name):
        return self.textures.get(name)


def test_layer_decides_first():
    ui = SpriteRenderer("a", RenderingLayer.UI_LAYER, x=100, y=100, z=100)
    game = SpriteRenderer("b", RenderingLayer.IN_GAME_LAYER)
    assert game.is_greater_than(ui)
    assert not ui.is_greater_than(game)


def test_height_then_depth():
    low = SpriteRenderer("a", x=5, y=5, z=0)
    high = SpriteRenderer("b", x=0, y=0, z=1)
    assert high.is_greater_than(low)
    near = SpriteRenderer("c", x=1, y=1)
    far = SpriteRenderer("d", x=2, y=1)
    assert far.is_greater_than(near)
    assert not near.is_greater_than(near)


def test_ui_destination_scales_by_thirty():
    sprite = SpriteRenderer("a", RenderingLayer.UI_LAYER, x=1, y=1)
    assert sprite.destination(8, 12) == (30, 30, 8, 12)


def test_in_game_origin_uses_camera_offset():
    sprite = SpriteRenderer("a", x=0, y=0, z=0)
    x, y, w, h = sprite.destination(8, 12)
    assert x == pytest.approx(CAMERA_OFFSET_X)
    assert y + h == pytest.approx(CAMERA_OFFSET_Y)
    assert (w, h) == (8, 12)


def test_in_game_diagonal_keeps_screen_column():
    a = SpriteRenderer("a", x=2, y=3).destination(8, 12)
    b = SpriteRenderer("b", x=3, y=4).destination(8, 12)
    assert a[0] == pytest.approx(b[0])
    assert b[1] > a[1]


def test_in_game_height_raises_sprite():
    ground = SpriteRenderer("a", x=2, y=3, z=0).destination(8, 12)
    lifted = SpriteRenderer("b", x=2, y=3, z=1).destination(8, 12)
    assert lifted[0] == pytest.approx(ground[0])
    assert lifted[1] < ground[1]


def test_sort_puts_sprites_in_drawing_order():
    registry = SpriteRegistry()
    sprites = [
        SpriteRenderer("a", x=3, y=1, z=0),
        SpriteRenderer("b", RenderingLayer.UI_LAYER, x=9),
        SpriteRenderer("c", x=0, y=0, z=2),
        SpriteRenderer("d", x=1, y=0, z=0),
        SpriteRenderer("e", x=5, y=5, z=1),
    ]
    for sprite in sprites:
        registry.add(sprite)
    registry.sort()
    ordered = list(registry)
    assert len(ordered) == len(sprites)
    assert ordered[0].texture_name == "b"
    for before, after in zip(ordered, ordered[1:]):
        assert not before.is_greater_than(after)


def test_remove():
    registry = SpriteRegistry()
    first = registry.add(SpriteRenderer("a"))
    second = registry.add(SpriteRenderer("b"))
    assert registry.remove(first) is True
    assert list(registry) == [second]
    assert registry.remove(first) is False
    assert len(registry) == 1


def test_display_all_blits_in_order_and_skips_missing():
    texture = FakeTexture()
    registry = SpriteRegistry()
    back = registry.add(SpriteRenderer("tex", x=5, y=5))
    front = registry.add(SpriteRenderer("tex", x=0, y=0))
    registry.add(SpriteRenderer("missing"))
    surface = FakeSurface()
    drawn = registry.display_all(surface, FakeResources({"tex": texture}))
    assert drawn == 2
    assert [b[0] for b in surface.blits] == [texture, texture]
    assert surface.blits[0][1] == front.destination(8, 12)[:2]
    assert surface.blits[1][1] == back.destination(8, 12)[:2]


def test_cleanup():
    registry = SpriteRegistry()
    registry.add(SpriteRenderer("a"))
    registry.cleanup()
    assert len(registry) == 0