from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .geom import Pt, EPS
from .predicates import orient2d, left_turn


class ConvexHull2D:
    """
    Опукла оболонка на площині (monotone chain, Andrew).

    Вхід: послідовність Pt (будь-який порядок, дублікати дозволені).
    Вихід: self.vertices — вершини оболонки проти годинникової стрілки,
    починаючи з найменшої (x, y); колінеарні точки на ребрах відкинуті.
    Вироджені випадки: 0 точок -> [], 1 точка (або всі збігаються) -> [p],
    усі на одній прямій -> два крайні кінці.
    """

    def __init__(self, points: Sequence[Pt]):
        self.P: List[Pt] = list(points)  # копія, вхід не чіпаємо
        self.vertices: List[Pt] = self._build()

    # ---------------- Публічний API ----------------
    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def edges(self) -> List[Tuple[Pt, Pt]]:
        """Ребра (a, b) у порядку обходу, останнє замикає контур."""
        n = len(self.vertices)
        if n < 2:
            return []
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    # ---------------- Побудова ----------------
    def _build(self) -> List[Pt]:
        n = len(self.P)
        if n == 0:
            return []
        if n == 1:
            return [self.P[0]]

        # лексикографічний порядок (x, потім y): повний і детермінований
        xsorted = sorted(self.P, key=lambda p: (p.x, p.y))

        lower = self._chain(xsorted)
        upper = self._chain(reversed(xsorted))

        # останні точки ланцюгів дублюють перші точки іншого ланцюга
        hull = lower[:-1] + upper[:-1]
        if len(hull) == 2 and hull[0] == hull[1]:
            # усі точки збігаються
            return hull[:1]
        return hull

    @staticmethod
    def _chain(points) -> List[Pt]:
        chain: List[Pt] = []
        for p in points:
            # прибираємо середню з трьох останніх, поки немає строгого лівого повороту
            while len(chain) >= 2 and not left_turn(chain[-2], chain[-1], p):
                chain.pop()
            chain.append(p)
        return chain

    # ---------------- Діагностика ----------------
    def validate(self, eps: float = EPS) -> dict:
        """
        Перевірка коректності:
          - кожна трійка послідовних вершин робить строгий лівий поворот;
          - кожна вхідна точка лежить усередині або на межі оболонки;
          - кожна вершина є однією з вхідних точок.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        hull = self.vertices
        n = len(hull)

        # 1) повороти (для n < 3 перевіряти нічого)
        bad_turns: List[int] = []
        if n >= 3:
            for i in range(n):
                a, b, c = hull[i - 1], hull[i], hull[(i + 1) % n]
                if not left_turn(a, b, c):
                    bad_turns.append(i)

        # 2) вхідні точки поза оболонкою
        outside: List[int] = []
        if n >= 3:
            edges = self.edges()
            for pi, p in enumerate(self.P):
                for a, b in edges:
                    if orient2d(a, b, p) < -eps:
                        outside.append(pi)
                        break

        # 3) вершини, яких немає серед вхідних
        inputs = set(self.P)
        foreign = [i for i, v in enumerate(hull) if v not in inputs]

        return {
            "vertices": n,
            "bad_turns": bad_turns,
            "outside_points": outside,
            "foreign_vertices": foreign,
        }


def convex_hull(points: Sequence[Pt], n: Optional[int] = None) -> List[Pt]:
    """
    Вершини опуклої оболонки (проти годинникової).
    n — скільки перших точок брати (як у буферному API); від'ємне n — ValueError.
    """
    if n is not None:
        if n < 0:
            raise ValueError(f"negative point count: {n}")
        points = points[:n]
    return ConvexHull2D(points).vertices
