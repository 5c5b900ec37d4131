"""
Мінімальний за площею орієнтований прямокутник навколо опуклої оболонки
(обертові штангенциркулі, rotating calipers).

Оптимальний прямокутник завжди має сторону вздовж якогось ребра оболонки,
а конфігурації повторюються кожні 90°, тож досить повернути систему з
чотирьох «губок» на чверть оберту.
"""
from __future__ import annotations
import logging
from math import inf
from typing import List, Sequence, Tuple

from .geom import Pt, add, sub, scale, dot, perp, cross, norm, unit
from .polygon import polygon_area

log = logging.getLogger(__name__)

# початкові напрямки губок: низ, право, верх, ліво (оболонка завжди зліва)
_CARDINALS = (Pt(1.0, 0.0), Pt(0.0, 1.0), Pt(-1.0, 0.0), Pt(0.0, -1.0))


def _extremes(hull: Sequence[Pt]) -> List[int]:
    """
    Індекси вершин з min-y, max-x, max-y, min-x.
    На пласкому ребрі береться його перша вершина в порядку обходу
    (строго з боку попередньої, нестрого з боку наступної).
    """
    n = len(hull)
    b = r = t = l = 0
    for i in range(n):
        p, prev, nxt = hull[i], hull[i - 1], hull[(i + 1) % n]
        if p.y < prev.y and p.y <= nxt.y:
            b = i
        if p.x > prev.x and p.x >= nxt.x:
            r = i
        if p.y > prev.y and p.y >= nxt.y:
            t = i
        if p.x < prev.x and p.x <= nxt.x:
            l = i
    return [b, r, t, l]


def _intersect(p: Pt, r: Pt, q: Pt, s: Pt) -> Pt:
    """Перетин прямих p + r*t та q + s*u (r і s не паралельні)."""
    t = cross(sub(q, p), s) / cross(r, s)
    return add(p, scale(r, t))


def _corners(hull: Sequence[Pt], anchor: List[int], dirs: List[Pt]) -> List[Pt]:
    return [
        _intersect(hull[anchor[i]], dirs[i], hull[anchor[(i + 1) % 4]], dirs[(i + 1) % 4])
        for i in range(4)
    ]


def oriented_bbox(hull: Sequence[Pt]) -> List[Pt]:
    """
    4 кути мінімального орієнтованого прямокутника (проти годинникової).
    hull — вершини опуклої оболонки проти годинникової (як з convex_hull),
    щонайменше 2. Для відрізка — прямокутник нульової ширини.
    """
    n = len(hull)
    if n < 2:
        raise ValueError("Need at least 2 hull points")
    if n == 2:
        a, b = hull
        return [a, b, b, a]

    # одиничні напрямки ребер: edges[i] = hull[i] -> hull[i+1]
    edges = [unit(sub(hull[(i + 1) % n], hull[i])) for i in range(n)]

    anchor = _extremes(hull)
    dirs = list(_CARDINALS)

    best: List[Pt] = []
    best_area = inf
    steps = 0
    while True:
        # губка з найбільшим косинусом доходить до свого ребра першою
        cosines = [dot(dirs[k], edges[anchor[k]]) for k in range(4)]
        k = max(range(4), key=cosines.__getitem__)

        d = edges[anchor[k]]
        anchor[k] = (anchor[k] + 1) % n
        for j in range(4):
            dirs[(k + j) % 4] = d
            d = perp(d)

        rect = _corners(hull, anchor, dirs)
        area = polygon_area(rect)
        if area < best_area:
            best_area = area
            best = rect
        steps += 1

        # губка, що стартувала з (1, 0), пройшла чверть оберту
        if dirs[0].x <= 0:
            break

    log.debug("oriented bbox: %d hull points, %d caliper steps, area %g", n, steps, best_area)
    return best


def rect_dimensions(rect: Sequence[Pt]) -> Tuple[float, float]:
    """(довжина, ширина) прямокутника з 4 кутів, довша сторона першою."""
    w = norm(sub(rect[1], rect[0]))
    h = norm(sub(rect[2], rect[1]))
    return (w, h) if w >= h else (h, w)
