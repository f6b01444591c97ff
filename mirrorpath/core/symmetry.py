"""
Mirror a closed path across one of its straight edges.

The picked edge A -> B becomes the mirror axis. The nodes strictly between B
and A (walking forward from B) form the body; the body is reflected, reversed
and spliced in between A and B so the result is symmetric about the axis:

    [A', reflected body (reversed), B', original body]
"""
import logging
from dataclasses import replace

from .errors import NoEligiblePathError, NotStraightEdgeError
from .math import CLOSEST_POINT_STEPS, COLLINEAR_TOLERANCE, Point, is_collinear, reflect_across_line
from .node import NodeKind
from .path import Path

logger = logging.getLogger(__name__)


def reflect_and_merge(path: Path, picked: Point,
                      tolerance: float = COLLINEAR_TOLERANCE,
                      steps: int = CLOSEST_POINT_STEPS) -> Path:
    if not path.closed or len(path) < 3:
        raise NoEligiblePathError()

    hit = path.closest_segment(picked, steps=steps)
    if hit is None:
        raise NoEligiblePathError()
    a_idx = hit[0]
    n = len(path)
    b_idx = (a_idx + 1) % n
    A = path[a_idx]
    B = path[b_idx]

    if not (is_collinear(A.anchor, B.anchor, A.ctrl2, tolerance)
            and is_collinear(A.anchor, B.anchor, B.ctrl1, tolerance)):
        raise NotStraightEdgeError(a_idx)

    axis = (A.anchor, B.anchor)

    # walk forward from B to A, exclusive of both
    body = [path[(b_idx + k) % n] for k in range(1, n - 1)]
    mirrored = [node.reflected(*axis).reversed() for node in reversed(body)]

    new_a = replace(A, ctrl2=reflect_across_line(A.ctrl1, *axis), kind=NodeKind.SMOOTH)
    new_b = replace(B, ctrl1=reflect_across_line(B.ctrl2, *axis), kind=NodeKind.SMOOTH)

    logger.debug("Mirrored %d body nodes across segment %d", len(body), a_idx)
    return Path(nodes=(new_a, *mirrored, new_b, *body), closed=True)
