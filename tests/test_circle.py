import itertools

import numpy as np
import pytest
from cg2d.circle import enclosing_center, enclosing_circle
from cg2d.geom import Pt, distance
from cg2d.predicates import circle_from_diameter, circumscribe

TOL = 1e-9


def _brute_force_radius(pts):
    """Найменший радіус серед кіл на парах і трійках, що містять усе."""
    best = None
    candidates = [circle_from_diameter(p, q) for p, q in itertools.combinations(pts, 2)]
    for p, q, r in itertools.combinations(pts, 3):
        cc = circumscribe(p, q, r)
        if cc.r > 0:
            candidates.append(cc)
    for c in candidates:
        if all(distance(c.c, p) <= c.r + TOL for p in pts):
            if best is None or c.r < best:
                best = c.r
    return best


def _random_sets(seed, count, size):
    rng = np.random.default_rng(seed)
    for _ in range(count):
        arr = rng.uniform(0.0, 100.0, size=(size, 2))
        yield [Pt(float(x), float(y)) for x, y in arr]


@pytest.mark.unit
def test_single_point():
    c = enclosing_circle([Pt(5, 5)])
    assert c.c == Pt(5, 5)
    assert c.r == 0


@pytest.mark.unit
def test_identical_points():
    c = enclosing_circle([Pt(2, 3)] * 4)
    assert c.c == Pt(2, 3)
    assert c.r == 0


@pytest.mark.unit
def test_collinear_points_use_extreme_diameter():
    c = enclosing_circle([Pt(0, 0), Pt(1, 0), Pt(2, 0)])
    assert c.c.x == pytest.approx(1.0)
    assert c.c.y == pytest.approx(0.0)
    assert c.r == pytest.approx(1.0)
    assert c.r2 == pytest.approx(1.0)


@pytest.mark.unit
def test_collinear_points_in_any_order():
    c = enclosing_circle([Pt(1, 1), Pt(3, 3), Pt(0, 0), Pt(2, 2)])
    assert c.c.x == pytest.approx(1.5)
    assert c.c.y == pytest.approx(1.5)
    assert c.r == pytest.approx(distance(Pt(0, 0), Pt(3, 3)) / 2)


@pytest.mark.unit
def test_right_triangle_uses_hypotenuse():
    c = enclosing_circle([Pt(0, 0), Pt(4, 0), Pt(0, 3)])
    assert c.c.x == pytest.approx(2.0)
    assert c.c.y == pytest.approx(1.5)
    assert c.r == pytest.approx(2.5)


@pytest.mark.unit
def test_equilateral_triangle_uses_circumcircle():
    h = 3 ** 0.5
    c = enclosing_circle([Pt(0, 0), Pt(2, 0), Pt(1, h)])
    assert c.c.x == pytest.approx(1.0)
    assert c.c.y == pytest.approx(h / 3)
    assert c.r == pytest.approx(2 / h)


@pytest.mark.unit
def test_rectangle_scenario():
    c = enclosing_circle([Pt(0, 0), Pt(4, 0), Pt(4, 3), Pt(0, 3)])
    assert c.c.x == pytest.approx(2.0)
    assert c.c.y == pytest.approx(1.5)
    assert c.r == pytest.approx(2.5)


@pytest.mark.unit
def test_enclosing_center():
    assert enclosing_center([Pt(5, 5)]) == Pt(5, 5)


@pytest.mark.unit
def test_empty_set_raises():
    with pytest.raises(ValueError):
        enclosing_circle([])


@pytest.mark.unit
def test_circumscribe_collinear_returns_zero_radius_sentinel():
    cc = circumscribe(Pt(0, 0), Pt(1, 1), Pt(2, 2))
    assert cc.r == 0


@pytest.mark.unit
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_contains_every_point(seed):
    for pts in _random_sets(seed, 20, 30):
        c = enclosing_circle(pts)
        for p in pts:
            assert distance(c.c, p) <= c.r + TOL


@pytest.mark.unit
@pytest.mark.parametrize("size", [2, 3, 5, 8])
def test_minimal_against_brute_force(size):
    for pts in _random_sets(size, 25, size):
        c = enclosing_circle(pts)
        assert c.r == pytest.approx(_brute_force_radius(pts), abs=TOL)


@pytest.mark.unit
def test_result_does_not_depend_on_order():
    for pts in _random_sets(42, 10, 12):
        a = enclosing_circle(pts)
        b = enclosing_circle(list(reversed(pts)))
        assert a.r == pytest.approx(b.r, abs=TOL)
        assert distance(a.c, b.c) == pytest.approx(0.0, abs=1e-6)
