"""
Найменше охоплююче коло (інкрементальний алгоритм у стилі Велцля).

Точки обробляються у порядку вхідного списку, без перемішування: для
невеликих наборів (дотики на екрані) цього досить, але на «поганому»
порядку час зростає до O(n^3). Сам результат від порядку не залежить
(з точністю до похибки float).
"""
from __future__ import annotations
import logging
from typing import Optional, Sequence

from .geom import Pt, Circle, sub, cross
from .predicates import circle_contains, circle_from_diameter, circumscribe

log = logging.getLogger(__name__)


def _contains_all(circle: Circle, pts: Sequence[Pt]) -> bool:
    return all(circle_contains(circle, p) for p in pts)


def _circle_2points(pts: Sequence[Pt], p: Pt, q: Pt) -> Circle:
    """Мінімальне коло для pts, у якого p і q лежать на межі."""
    diam = circle_from_diameter(p, q)
    if _contains_all(diam, pts):
        return diam

    pq = sub(q, p)
    left: Optional[Circle] = None
    right: Optional[Circle] = None
    for r in pts:
        cc = circumscribe(p, q, r)
        if cc.r == 0:
            continue  # колінеарна трійка — сентинел
        side = cross(pq, sub(r, p))
        reach = cross(pq, sub(cc.c, p))
        if side > 0 and (left is None or reach > cross(pq, sub(left.c, p))):
            left = cc
        elif side < 0 and (right is None or reach < cross(pq, sub(right.c, p))):
            right = cc

    if left is None and right is None:
        # лише сентинели: усе лежить на прямій pq
        log.debug("circle through %s, %s: no circumscribed candidates", p, q)
        return diam
    if right is None:
        return left
    if left is None:
        return right
    return left if left.r <= right.r else right


def _circle_1point(pts: Sequence[Pt], p: Pt) -> Circle:
    """Мінімальне коло для pts, у якого p лежить на межі."""
    c = Circle(p, 0.0)
    for i, q in enumerate(pts):
        if circle_contains(c, q):
            continue
        if c.r == 0:
            c = circle_from_diameter(p, q)
        else:
            c = _circle_2points(pts[:i], p, q)
    return c


def enclosing_circle(points: Sequence[Pt]) -> Circle:
    """
    Коло мінімального радіуса, що містить усі точки.
    Порожня множина — ValueError.
    """
    if not points:
        raise ValueError("empty set")
    pts = list(points)
    c = Circle(pts[0], 0.0)
    for i in range(1, len(pts)):
        if not circle_contains(c, pts[i]):
            c = _circle_1point(pts[:i], pts[i])
    return c


def enclosing_center(points: Sequence[Pt]) -> Pt:
    return enclosing_circle(points).c
