import math
import random

import pytest

from core.vector import (Vec3, ZERO, ONES, add, sub, mul, div, neg, dot, cross,
                         length, lensq, unit, rvius, fdiv)

SAMPLES = [
    Vec3(1, 2, 3),
    Vec3(-4.5, 0.25, 7),
    Vec3(0.1, -0.2, 0.3),
    Vec3(100, -50, 1e-3),
]


def test_add_and_dot_commute():
    for u in SAMPLES:
        for v in SAMPLES:
            assert add(u, v) == add(v, u)
            assert dot(u, v) == dot(v, u)


def test_length_and_lensq():
    for u in SAMPLES:
        assert length(u) >= 0
        assert lensq(u) == dot(u, u)
        assert length(u) == pytest.approx(math.sqrt(dot(u, u)))
    assert length(Vec3(3, 4, 0)) == 5.0


def test_unit_has_length_one():
    for u in SAMPLES:
        assert length(unit(u)) == pytest.approx(1.0)


def test_cross_is_orthogonal():
    for u in SAMPLES:
        for v in SAMPLES:
            w = cross(u, v)
            scale = length(u) * length(v) + 1.0
            assert dot(w, u) == pytest.approx(0.0, abs=1e-9 * scale * scale)
            assert dot(w, v) == pytest.approx(0.0, abs=1e-9 * scale * scale)


def test_cross_is_right_handed():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert cross(Vec3(0, 1, 0), Vec3(1, 0, 0)) == Vec3(0, 0, -1)


def test_variadic_folds():
    a, b, c = Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(-1, 0, 2)

    assert add() == ZERO
    assert add(a, b, c) == Vec3(4, 7, 11)
    assert sub(a) == a
    assert sub(a, b, c) == Vec3(-2, -3, -5)
    assert mul() == ONES
    assert mul(a, b) == Vec3(4, 10, 18)
    assert mul(2.0, a, b) == Vec3(8, 20, 36)
    assert mul(0.5, a) == Vec3(0.5, 1, 1.5)


def test_operators_match_functions():
    a, b = Vec3(1, 2, 3), Vec3(4, 5, 6)

    assert a + b == add(a, b)
    assert a - b == sub(a, b)
    assert a * b == mul(a, b)
    assert 2 * a == a * 2 == Vec3(2, 4, 6)
    assert a / 2 == div(a, 2) == Vec3(0.5, 1, 1.5)
    assert b / Vec3(2, 5, 3) == Vec3(2, 1, 2)
    assert -a == neg(a) == Vec3(-1, -2, -3)


def test_division_by_zero_follows_ieee():
    v = div(Vec3(1, -1, 0), 0.0)
    assert v.x == math.inf
    assert v.y == -math.inf
    assert math.isnan(v.z)

    w = Vec3(1, 0, -2) / Vec3(0, 0, 0)
    assert w.x == math.inf
    assert math.isnan(w.y)
    assert w.z == -math.inf

    assert fdiv(1.0, -0.0) == -math.inf
    assert fdiv(6.0, 3.0) == 2.0


def test_unit_of_zero_vector_is_nan():
    assert all(math.isnan(c) for c in unit(ZERO))


def test_accessor_aliases():
    v = Vec3(0.1, 0.2, 0.3)
    assert (v.x, v.y, v.z) == (v.r, v.g, v.b) == (v.e0, v.e1, v.e2)
    assert tuple(v) == (0.1, 0.2, 0.3)


def test_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.e0 = 5
    with pytest.raises(AttributeError):
        v.x = 5
    assert v == Vec3(1, 2, 3)


def test_equality_and_hash():
    assert Vec3(1, 2, 3) == Vec3(1.0, 2.0, 3.0)
    assert Vec3(1, 2, 3) != Vec3(1, 2, 3.0000001)
    assert len({Vec3(1, 2, 3), Vec3(1.0, 2.0, 3.0), Vec3(0, 0, 0)}) == 2
    assert Vec3(0.0, 0, 0) == Vec3(-0.0, 0, 0)
    assert str(Vec3(1, 0.5, -2)) == "(1.00, 0.50, -2.00)"


def test_rvius_stays_inside_unit_sphere():
    rng = random.Random(7)
    for _ in range(10000):
        assert lensq(rvius(rng)) < 1.0


def test_rvius_is_reproducible_per_stream():
    first = [rvius(random.Random(3)) for _ in range(5)]
    second = [rvius(random.Random(3)) for _ in range(5)]
    assert first == second

    rng = random.Random(3)
    assert rvius(rng) != rvius(rng)
