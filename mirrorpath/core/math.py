import math
from dataclasses import dataclass
from typing import Literal

Point = tuple[float, float]
Op = tuple[Literal["M", "C", "Z"], tuple]

CLOSEST_POINT_STEPS = 30
COLLINEAR_TOLERANCE = 1e-3


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def dist(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def lerp(a: Point, b: Point, t: float) -> Point:
    u = 1.0 - t
    return (u * a[0] + t * b[0], u * a[1] + t * b[1])


def polar(origin: Point, angle: float, length: float) -> Point:
    """Point at `length` from `origin` in direction `angle` (radians)."""
    return (origin[0] + length * math.cos(angle), origin[1] + length * math.sin(angle))


def cubic_eval(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    u = 1.0 - t
    uu = u * u
    tt = t * t
    uuu = uu * u
    ttt = tt * t
    x = uuu * p0[0] + 3.0 * uu * t * p1[0] + 3.0 * u * tt * p2[0] + ttt * p3[0]
    y = uuu * p0[1] + 3.0 * uu * t * p1[1] + 3.0 * u * tt * p2[1] + ttt * p3[1]
    return (x, y)


def closest_on_cubic(target: Point, p0: Point, p1: Point, p2: Point, p3: Point,
                     steps: int = CLOSEST_POINT_STEPS) -> tuple[float, float]:
    """
    Return (distance, t) of the sample closest to `target`.

    The curve is sampled uniformly at steps + 1 parameter values; this is an
    approximation meant for threshold hit-testing, not exact projection.
    """
    best_t = 0.0
    best_d2 = float("inf")
    for i in range(steps + 1):
        t = i / steps
        d2 = dist2(cubic_eval(t, p0, p1, p2, p3), target)
        if d2 < best_d2:
            best_d2 = d2
            best_t = t
    return math.sqrt(best_d2), best_t


@dataclass(frozen=True)
class Subdivision:
    """
    Result of splitting a cubic at t:
      - left_ctrl2:  new outgoing handle of the segment start
      - right_ctrl1: new incoming handle of the segment end
      - anchor, ctrl1, ctrl2: the node created at the split point
    """
    left_ctrl2: Point
    right_ctrl1: Point
    anchor: Point
    ctrl1: Point
    ctrl2: Point


def subdivide_cubic(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Subdivision:
    # de Casteljau
    p01 = lerp(p0, p1, t)
    p12 = lerp(p1, p2, t)
    p23 = lerp(p2, p3, t)
    p012 = lerp(p01, p12, t)
    p123 = lerp(p12, p23, t)
    anchor = lerp(p012, p123, t)
    return Subdivision(left_ctrl2=p01, right_ctrl1=p23, anchor=anchor, ctrl1=p012, ctrl2=p123)


def cross(a: Point, b: Point, c: Point) -> float:
    # cross((b-a),(c-a))
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def is_collinear(a: Point, b: Point, c: Point, tolerance: float = COLLINEAR_TOLERANCE) -> bool:
    """
    True when c lies on the line through a and b. The tolerance bounds the
    absolute cross-product magnitude, not a distance.
    """
    return abs(cross(a, b, c)) < tolerance


def reflect_across_line(p: Point, a: Point, b: Point) -> Point:
    """
    Mirror p across the infinite line through a and b, written as Ax + By + C = 0.
    A zero-length line (a == b) leaves p unchanged.
    """
    A = b[1] - a[1]
    B = a[0] - b[0]
    C = b[0] * a[1] - b[1] * a[0]
    D = A * A + B * B
    if D == 0.0:
        return (p[0], p[1])
    val = A * p[0] + B * p[1] + C
    return (p[0] - 2.0 * A * val / D, p[1] - 2.0 * B * val / D)
