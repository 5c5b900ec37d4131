from cg2d.geom import unique_points
from cg2d.hull import ConvexHull2D
from cg2d.calipers import oriented_bbox
from cg2d.polygon import polygon_area

if __name__ == "__main__":
    raw = [
        (0,0), (4,0), (4,3), (0,3),
        (2,1.5), (1,1), (3,2), (2,0), (4,3)
    ]
    pts = unique_points(raw)
    hull = ConvexHull2D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("Hull:", hull.vertices)
    print("Area:", polygon_area(hull.vertices))
    print("Oriented bbox:", oriented_bbox(hull.vertices))
