import itertools

import pytest

from isoengine.collider_2d import (
    Collider2D,
    Collider2DWorld,
    ColliderType,
    is_colliding,
)
from isoengine.renderer import Renderer
from isoengine.vector2d import Vector2D


def box(x, y, w=1.0, h=1.0):
    return Collider2D(Vector2D(x, y), Vector2D(w, h))


def pair_set(pairs):
    return {frozenset(p) for p in pairs}


def test_default_type_is_box():
    assert Collider2D().type is ColliderType.BOX_COLLIDER


def test_central_and_extreme_values():
    collider = box(2, 4, 2, 6)
    assert collider.central_value(0) == 3
    assert collider.central_value(1) == 7
    assert tuple(collider.extreme_value(1)) == (4, 10)


def test_axis_out_of_range():
    with pytest.raises(IndexError):
        box(0, 0).extreme_value(2)


def test_overlap_detected():
    assert is_colliding(box(0, 0), box(0.5, 0.5))


def test_touching_edges_do_not_collide():
    assert not is_colliding(box(0, 0), box(1, 0))


def test_overlap_on_one_axis_only():
    assert not is_colliding(box(0, 0), box(0.5, 3))


def test_world_create_and_cleanup():
    world = Collider2DWorld()
    first = world.create()
    world.create()
    assert len(world) == 2
    assert list(world)[0] is first
    world.cleanup()
    assert len(world) == 0


def test_empty_world_finds_nothing():
    assert Collider2DWorld().check_all_collisions() == []


def test_world_reports_pair_and_brightens():
    renderer = Renderer()
    world = Collider2DWorld(renderer)
    a = world.create()
    a.reference = Vector2D(1, 1)
    b = world.create()
    b.position = Vector2D(0.5, 0.5)
    b.reference = Vector2D(1, 1)
    c = world.create()
    c.position = Vector2D(5, 5)
    c.reference = Vector2D(1, 1)
    pairs = world.check_all_collisions()
    assert pair_set(pairs) == {frozenset((a, b))}
    assert renderer.lightness == len(pairs)


def test_grid_matches_pairwise_check():
    world = Collider2DWorld()
    colliders = []
    for i in range(8):
        for j in range(8):
            c = world.create()
            c.position = Vector2D(i * 1.0, j * 1.0)
            c.reference = Vector2D(1.5, 1.5)
            colliders.append(c)
    expected = {
        frozenset((a, b))
        for a, b in itertools.combinations(colliders, 2)
        if is_colliding(a, b)
    }
    pairs = world.check_all_collisions()
    assert pair_set(pairs) == expected
    assert len(pairs) == len(expected)