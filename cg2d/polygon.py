from __future__ import annotations
from typing import Optional, Sequence

from .geom import Pt


def polygon_area(poly: Sequence[Pt], n: Optional[int] = None) -> float:
    """
    Орієнтована площа многокутника (формула шнурівки).
    > 0 для обходу проти годинникової стрілки, < 0 — за годинниковою.
    """
    if n is not None:
        if n < 0:
            raise ValueError(f"negative point count: {n}")
        poly = poly[:n]
    total = 0.0
    prev = poly[-1] if poly else None
    for cur in poly:
        total += (cur.x + prev.x) * (cur.y - prev.y)
        prev = cur
    return total / 2
