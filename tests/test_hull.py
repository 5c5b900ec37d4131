import numpy as np
import pytest
from scipy.spatial import ConvexHull
from cg2d.geom import Pt
from cg2d.hull import ConvexHull2D, convex_hull
from cg2d.polygon import polygon_area
from cg2d.predicates import orient2d


def _random_points(rng, size):
    return [Pt(float(x), float(y)) for x, y in rng.uniform(-50.0, 50.0, size=(size, 2))]


@pytest.mark.unit
def test_empty_input():
    assert convex_hull([]) == []


@pytest.mark.unit
def test_single_point():
    assert convex_hull([Pt(5, 5)]) == [Pt(5, 5)]


@pytest.mark.unit
def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        convex_hull([Pt(0, 0)], n=-1)


@pytest.mark.unit
def test_count_limits_the_input():
    pts = [Pt(0, 0), Pt(4, 0), Pt(4, 3), Pt(100, 100)]
    assert convex_hull(pts, n=3) == [Pt(0, 0), Pt(4, 0), Pt(4, 3)]
    assert convex_hull(pts, n=0) == []


@pytest.mark.unit
def test_rectangle_is_returned_counterclockwise():
    pts = [Pt(0, 3), Pt(4, 3), Pt(0, 0), Pt(4, 0)]
    hull = convex_hull(pts)
    assert hull == [Pt(0, 0), Pt(4, 0), Pt(4, 3), Pt(0, 3)]
    assert polygon_area(hull) == pytest.approx(12.0)


@pytest.mark.unit
def test_collinear_points_reduce_to_extremes():
    assert convex_hull([Pt(0, 0), Pt(1, 0), Pt(2, 0)]) == [Pt(0, 0), Pt(2, 0)]
    assert convex_hull([Pt(2, 2), Pt(0, 0), Pt(1, 1)]) == [Pt(0, 0), Pt(2, 2)]


@pytest.mark.unit
def test_vertical_collinear_points():
    assert convex_hull([Pt(0, 2), Pt(0, 0), Pt(0, 1)]) == [Pt(0, 0), Pt(0, 2)]


@pytest.mark.unit
def test_identical_points_collapse():
    assert convex_hull([Pt(1, 1), Pt(1, 1), Pt(1, 1)]) == [Pt(1, 1)]


@pytest.mark.unit
def test_boundary_and_interior_points_are_dropped():
    pts = [
        Pt(0, 0), Pt(1, 0), Pt(2, 0), Pt(2, 1), Pt(2, 2),
        Pt(1, 2), Pt(0, 2), Pt(0, 1), Pt(1, 1), Pt(0, 0),
    ]
    assert convex_hull(pts) == [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]


@pytest.mark.unit
def test_input_is_not_modified():
    pts = [Pt(3, 1), Pt(0, 0), Pt(1, 4)]
    before = list(pts)
    convex_hull(pts)
    assert pts == before


@pytest.mark.unit
def test_validate_reports_clean_hull():
    rng = np.random.default_rng(7)
    hull = ConvexHull2D(_random_points(rng, 40))
    report = hull.validate()
    assert report["vertices"] == len(hull)
    assert report["bad_turns"] == []
    assert report["outside_points"] == []
    assert report["foreign_vertices"] == []


@pytest.mark.unit
def test_edges_close_the_contour():
    hull = ConvexHull2D([Pt(0, 0), Pt(1, 0), Pt(0, 1)])
    edges = hull.edges()
    assert len(edges) == 3
    assert edges[-1] == (Pt(0, 1), Pt(0, 0))


@pytest.mark.unit
@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_matches_qhull(seed):
    rng = np.random.default_rng(seed)
    pts = _random_points(rng, 60)
    hull = convex_hull(pts)

    qh = ConvexHull(np.array([(p.x, p.y) for p in pts]))
    assert set(hull) == {pts[int(i)] for i in qh.vertices}
    # у 2D qhull.volume — це площа
    assert polygon_area(hull) == pytest.approx(qh.volume)


@pytest.mark.unit
@pytest.mark.parametrize("seed", [10, 11, 12])
def test_no_three_consecutive_collinear_on_grid(seed):
    # цілочисельна сітка дає багато колінеарних трійок
    rng = np.random.default_rng(seed)
    pts = [Pt(float(x), float(y)) for x, y in rng.integers(0, 6, size=(40, 2))]
    hull = convex_hull(pts)
    n = len(hull)
    assert n >= 3
    for i in range(n):
        assert orient2d(hull[i - 1], hull[i], hull[(i + 1) % n]) > 0
    for p in pts:
        assert all(orient2d(hull[i], hull[(i + 1) % n], p) >= 0 for i in range(n))
    assert set(hull) <= set(pts)
