# cg2d/predicates.py
from __future__ import annotations

from .geom import Pt, Circle, sub, cross, dot, distance

# відносний допуск для «точка в колі»: радіус після sqrt може втратити кілька ulp
CIRCLE_REL_EPS = 1e-14

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """> 0 якщо a→b→c лівий поворот (проти годинникової), < 0 — правий, 0 — колінеарні."""
    return cross(sub(b, a), sub(c, a))

def left_turn(a: Pt, b: Pt, c: Pt) -> bool:
    # рівність нулю — НЕ лівий поворот (колінеарні точки відкидаються)
    return orient2d(a, b, c) > 0

def circle_from_diameter(p: Pt, q: Pt) -> Circle:
    c = Pt((p.x + q.x) / 2, (p.y + q.y) / 2)
    return Circle(c, distance(p, q) / 2)

def circumscribe(p: Pt, q: Pt, r: Pt) -> Circle:
    """
    Описане коло трійки (p, q, r).
    Для колінеарних точок (d == 0) повертає сентинел Circle(Pt(0, 0), 0.0) —
    викликач мусить його пропускати.
    """
    d = 2 * (cross(p, q) + cross(q, r) + cross(r, p))
    if d == 0:
        return Circle(Pt(0.0, 0.0), 0.0)
    pp, qq, rr = dot(p, p), dot(q, q), dot(r, r)
    cx = (pp * (q.y - r.y) + qq * (r.y - p.y) + rr * (p.y - q.y)) / d
    cy = (pp * (r.x - q.x) + qq * (p.x - r.x) + rr * (q.x - p.x)) / d
    c = Pt(cx, cy)
    return Circle(c, distance(p, c))

def circle_contains(circle: Circle, p: Pt) -> bool:
    return distance(circle.c, p) <= circle.r * (1 + CIRCLE_REL_EPS)
