"""
cg2d — мінімальна бібліотека 2D обчислювальної геометрії для точок дотику.
Центроїд, центр bbox, найменше охоплююче коло, опукла оболонка,
мінімальний орієнтований прямокутник, орієнтована площа многокутника.
"""

__version__ = "0.1.0"

from cg2d.geom import (
    Pt, Circle, EPS,
    add, sub, scale, dot, perp, cross, norm2, norm, unit, distance2, distance,
    centroid, bbox, bbox_center, unique_points,
)
from cg2d.predicates import orient2d, left_turn, circumscribe, circle_from_diameter, circle_contains
from cg2d.circle import enclosing_circle, enclosing_center
from cg2d.hull import ConvexHull2D, convex_hull
from cg2d.calipers import oriented_bbox, rect_dimensions
from cg2d.polygon import polygon_area
from cg2d.pipeline import FrameSummary, summarize, status_lines

__all__ = [
    "Pt", "Circle", "EPS",
    "add", "sub", "scale", "dot", "perp", "cross", "norm2", "norm", "unit",
    "distance2", "distance",
    "centroid", "bbox", "bbox_center", "unique_points",
    "orient2d", "left_turn", "circumscribe", "circle_from_diameter", "circle_contains",
    "enclosing_circle", "enclosing_center",
    "ConvexHull2D", "convex_hull",
    "oriented_bbox", "rect_dimensions",
    "polygon_area",
    "FrameSummary", "summarize", "status_lines",
    "__version__",
]
