from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence, Tuple

EPS = 1e-10  # обережний епс для перевірок

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y


@dataclass(frozen=True)
class Circle:
    """
    Коло: центр c і радіус r.
    r2 — квадрат радіуса (для порівнянь без sqrt).
    r == 0 для вироджених кіл (одна точка або «сентинел» колінеарної трійки).
    """
    c: Pt
    r: float

    @property
    def r2(self) -> float:
        return self.r * self.r


# ---------- векторна арифметика ----------
def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def scale(a: Pt, s: float) -> Pt:
    return Pt(a.x*s, a.y*s)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def perp(a: Pt) -> Pt:
    """Поворот на +90° (проти годинникової стрілки)."""
    return Pt(-a.y, a.x)

def cross(a: Pt, b: Pt) -> float:
    """
    Орієнтована площа паралелограма на (a, b): a.x*b.y - b.x*a.y.
    > 0 — b лежить проти годинникової від a (лівий поворот).
    """
    return dot(perp(a), b)

def norm2(a: Pt) -> float:
    return dot(a, a)

def norm(a: Pt) -> float:
    return sqrt(norm2(a))

def unit(a: Pt) -> Pt:
    """Одиничний вектор; для нульового — умовно (1, 0), щоб не отримати NaN."""
    d = norm(a)
    if d == 0.0:
        return Pt(1.0, 0.0)
    return Pt(a.x / d, a.y / d)

def distance2(a: Pt, b: Pt) -> float:
    return norm2(sub(b, a))

def distance(a: Pt, b: Pt) -> float:
    return norm(sub(b, a))


# ---------- зведення по множині точок ----------
def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def bbox(points: Sequence[Pt]) -> Tuple[Pt, Pt]:
    """(min, max) кути осе-орієнтованого прямокутника; для порожньої множини — два нулі."""
    if not points:
        return Pt(0.0, 0.0), Pt(0.0, 0.0)
    min_x = max_x = points[0].x
    min_y = max_y = points[0].y
    for p in points[1:]:
        if p.x < min_x: min_x = p.x
        if p.x > max_x: max_x = p.x
        if p.y < min_y: min_y = p.y
        if p.y > max_y: max_y = p.y
    return Pt(min_x, min_y), Pt(max_x, max_y)

def bbox_center(points: Sequence[Pt]) -> Pt:
    lo, hi = bbox(points)
    return Pt((lo.x + hi.x) / 2, (lo.y + hi.y) / 2)

def unique_points(points: Iterable[Tuple[float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    `scale=1e9` ≈ EPS=1e-9 на координату. Порядок перших входжень зберігається.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for x, y in points:
        key = (int(round(x*scale)), int(round(y*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y))
    return list(seen.values())
