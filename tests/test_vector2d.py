import pytest

from isoengine.vector2d import Vector2D


def test_default_is_origin():
    v = Vector2D()
    assert (v.x, v.y) == (0.0, 0.0)
    assert v.magnitude == 0.0


def test_magnitude_of_classic_triangle():
    assert Vector2D(3, 4).magnitude == pytest.approx(5.0)


def test_indexing_matches_components():
    v = Vector2D(1.5, -2.5)
    assert v[0] == 1.5
    assert v[1] == -2.5
    assert list(v) == [1.5, -2.5]


@pytest.mark.parametrize("index", [2, -1, 10])
def test_indexing_out_of_range(index):
    with pytest.raises(IndexError):
        Vector2D(1, 2)[index]


def test_addition_is_commutative():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(-3.5, 0.25)
    assert a + b == b + a


def test_addition_with_zero_is_identity():
    a = Vector2D(7.0, -1.0)
    assert a + Vector2D() == a


def test_in_place_addition_mutates():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(3.0, 4.0)
    expected = a + b
    original = a
    a += b
    assert a is original
    assert a == expected


def test_scalar_multiplication_equals_repeated_addition():
    a = Vector2D(1.25, -0.5)
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_division_undoes_multiplication():
    a = Vector2D(6.0, -9.0)
    result = (a * 3) / 3
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_unit_vector_has_length_one_and_same_direction():
    v = Vector2D(3.0, 4.0)
    u = v.unit_vector()
    assert u.magnitude == pytest.approx(1.0)
    assert (u * v.magnitude).x == pytest.approx(v.x)
    assert (u * v.magnitude).y == pytest.approx(v.y)


def test_unit_vector_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D().unit_vector()


def test_dot_product_is_component_wise():
    a = Vector2D(2.0, 3.0)
    b = Vector2D(5.0, 7.0)
    product = a.dot_product(b)
    assert product == b.dot_product(a)
    assert product.x == a.x * b.x
    assert product.y == a.y * b.y


def test_setting_component_updates_magnitude():
    v = Vector2D(0.0, 0.0)
    v.x = 2.0
    assert v.magnitude == pytest.approx(2.0)