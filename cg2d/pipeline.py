from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .geom import Pt, Circle, centroid, bbox_center, unique_points
from .circle import enclosing_circle
from .hull import convex_hull
from .calipers import oriented_bbox, rect_dimensions
from .polygon import polygon_area
from .config import OverlayConfig, default_config

log = logging.getLogger(__name__)

PointLike = Union[Pt, Tuple[float, float]]


@dataclass
class FrameSummary:
    """
    Геометричний підсумок одного кадру дотиків.
    Поля, що не визначені для такої кількості точок, — None.
    """
    count: int
    centroid: Optional[Pt]
    bbox_center: Pt
    circle: Optional[Circle]
    hull: List[Pt] = field(default_factory=list)
    hull_area: float = 0.0
    rect: Optional[List[Pt]] = None
    rect_size: Optional[Tuple[float, float]] = None


def _as_points(points: Iterable[PointLike], dedupe: bool) -> List[Pt]:
    if dedupe:
        return unique_points(tuple(p) for p in points)
    return [p if isinstance(p, Pt) else Pt(float(p[0]), float(p[1])) for p in points]


def _scipy_hull(pts: Sequence[Pt]) -> List[Pt]:
    try:
        import numpy as np
        from scipy.spatial import ConvexHull, QhullError
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай backend='internal'."
        ) from e

    if len(pts) < 3:
        return convex_hull(pts)

    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    try:
        qh = ConvexHull(arr)
    except QhullError:
        # Qhull не будує вироджені (колінеарні) оболонки
        log.debug("qhull rejected %d points, falling back to monotone chain", len(pts))
        return convex_hull(pts)

    # у 2D Qhull віддає вершини проти годинникової; вирівнюємо старт під internal
    verts = [pts[int(i)] for i in qh.vertices]
    start = min(range(len(verts)), key=lambda i: (verts[i].x, verts[i].y))
    return verts[start:] + verts[:start]


def summarize(
    points: Iterable[PointLike],
    backend: Optional[str] = None,
    config: OverlayConfig = default_config,
) -> FrameSummary:
    """
    Повний пайплайн для кадру:
      - (опційно) прибирає збіжні точки;
      - центроїд, центр bbox, найменше охоплююче коло;
      - опукла оболонка (internal або scipy) та її площа;
      - мінімальний орієнтований прямокутник.
    """
    backend = (backend or config.hull_backend).lower()
    if backend not in ("internal", "scipy"):
        raise ValueError(f"Unknown backend: {backend}")

    pts = _as_points(points, config.dedupe)
    n = len(pts)

    if n == 0:
        return FrameSummary(count=0, centroid=None, bbox_center=bbox_center(pts), circle=None)

    hull = _scipy_hull(pts) if backend == "scipy" else convex_hull(pts)
    rect = oriented_bbox(hull) if len(hull) >= 2 else None

    summary = FrameSummary(
        count=n,
        centroid=centroid(pts),
        bbox_center=bbox_center(pts),
        circle=enclosing_circle(pts),
        hull=hull,
        hull_area=polygon_area(hull),
        rect=rect,
        rect_size=rect_dimensions(rect) if rect is not None else None,
    )
    log.debug("frame: %d points, hull %d, backend %s", n, len(hull), backend)
    return summary


def status_lines(summary: FrameSummary, precision: int = default_config.text_precision) -> List[str]:
    """Рядки статусу оверлею: кількість дотиків і, якщо є, центроїд."""
    lines = [f"Touches: {summary.count}"]
    if summary.centroid is not None:
        c = summary.centroid
        lines.append(f"C: ({c.x:.{precision}f}, {c.y:.{precision}f})")
    return lines
