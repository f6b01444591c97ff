import math
from dataclasses import dataclass, replace
from typing import Iterator, TYPE_CHECKING

from .math import (
    CLOSEST_POINT_STEPS, Op, Point, closest_on_cubic, cubic_eval, dist, polar, subdivide_cubic,
)
from .node import Node, NodeKind, Role

if TYPE_CHECKING:
    from PySide6 import QtGui

SMOOTHING_FACTOR = 0.25
DEFAULT_HANDLE_OFFSET = 50.0

Segment = tuple[Point, Point, Point, Point]


def _tangent_handles(start: Point, end: Point, smoothing: float) -> tuple[Point, Point]:
    """
    Handles for the joint start -> end: one leaving `start` toward `end`, one
    arriving at `end` from `start`, both `smoothing * |end - start|` long.
    """
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    length = dist(start, end) * smoothing
    return polar(start, angle, length), polar(end, angle, -length)


def _fmt(v: float) -> str:
    if v == int(v):
        return str(int(v))
    return repr(float(v))


@dataclass(frozen=True)
class Path:
    """
      - nodes: ordered path vertices (immutable, safe to share with history)
      - closed: whether the last node connects back to the first

    Every edit returns a new Path.
    """
    nodes: tuple[Node, ...] = ()
    closed: bool = False

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    # ---- segments ------------------------------------------------------------
    def segment_count(self) -> int:
        n = len(self.nodes)
        if n < 2:
            return 0
        return n if self.closed else n - 1

    def segment(self, index: int) -> Segment:
        if not 0 <= index < self.segment_count():
            raise IndexError(index)
        a = self.nodes[index]
        b = self.nodes[(index + 1) % len(self.nodes)]
        return a.anchor, a.ctrl2, b.ctrl1, b.anchor

    def segments(self) -> Iterator[Segment]:
        for i in range(self.segment_count()):
            yield self.segment(i)

    def point_at(self, index: int, t: float) -> Point:
        return cubic_eval(t, *self.segment(index))

    def closest_segment(self, point: Point, max_distance: float = float("inf"),
                        steps: int = CLOSEST_POINT_STEPS) -> tuple[int, float, float] | None:
        """
        Return (segment index, distance, t) of the segment nearest to `point`,
        or None if no segment is strictly closer than `max_distance`.
        """
        best = None
        best_d = max_distance
        for i, seg in enumerate(self.segments()):
            d, t = closest_on_cubic(point, *seg, steps=steps)
            if d < best_d:
                best_d = d
                best = (i, d, t)
        return best

    # ---- edits ----------------------------------------------------------------
    def append(self, p: Point, kind: NodeKind = NodeKind.CORNER,
               smoothing: float = SMOOTHING_FACTOR) -> "Path":
        anchor = (float(p[0]), float(p[1]))
        if not self.nodes:
            node = Node(
                anchor=anchor,
                ctrl1=(anchor[0] - DEFAULT_HANDLE_OFFSET, anchor[1]),
                ctrl2=(anchor[0] + DEFAULT_HANDLE_OFFSET, anchor[1]),
                kind=kind,
            )
            return replace(self, nodes=(node,))

        prev = self.nodes[-1]
        prev_ctrl2, ctrl1 = _tangent_handles(prev.anchor, anchor, smoothing)
        ctrl2 = (2.0 * anchor[0] - ctrl1[0], 2.0 * anchor[1] - ctrl1[1])
        node = Node(anchor=anchor, ctrl1=ctrl1, ctrl2=ctrl2, kind=kind)
        return replace(self, nodes=self.nodes[:-1] + (replace(prev, ctrl2=prev_ctrl2), node))

    def _replace_node(self, index: int, node: Node) -> "Path":
        nodes = list(self.nodes)
        nodes[index] = node
        return replace(self, nodes=tuple(nodes))

    def move_anchor(self, index: int, p: Point) -> "Path":
        return self._replace_node(index, self.nodes[index].moved_to((float(p[0]), float(p[1]))))

    def move_handle(self, index: int, role: Role, p: Point) -> "Path":
        return self._replace_node(index, self.nodes[index].with_handle(role, p))

    def move(self, index: int, role: Role, p: Point) -> "Path":
        if role is Role.ANCHOR:
            return self.move_anchor(index, p)
        return self.move_handle(index, role, p)

    def set_kind(self, index: int, kind: NodeKind) -> "Path":
        """
        Change a node's kind. Becoming smooth realigns ctrl1 opposite ctrl2,
        keeping ctrl1's length.
        """
        node = replace(self.nodes[index], kind=kind)
        if kind is NodeKind.SMOOTH:
            node = node.with_handle(Role.CTRL2, node.ctrl2)
        return self._replace_node(index, node)

    def insert_on_segment(self, index: int, t: float) -> "Path":
        """
        Split segment `index` at `t` without changing the drawn curve. The new
        smooth node lands at index + 1.
        """
        p0, p1, p2, p3 = self.segment(index)
        sub = subdivide_cubic(t, p0, p1, p2, p3)
        n = len(self.nodes)
        j = (index + 1) % n

        nodes = list(self.nodes)
        nodes[index] = replace(nodes[index], ctrl2=sub.left_ctrl2)
        nodes[j] = replace(nodes[j], ctrl1=sub.right_ctrl1)
        nodes.insert(index + 1, Node(anchor=sub.anchor, ctrl1=sub.ctrl1, ctrl2=sub.ctrl2,
                                     kind=NodeKind.SMOOTH))
        return replace(self, nodes=tuple(nodes))

    def delete_node(self, index: int) -> "Path":
        if not 0 <= index < len(self.nodes):
            raise IndexError(index)
        nodes = self.nodes[:index] + self.nodes[index + 1:]
        return Path(nodes=nodes, closed=self.closed and len(nodes) >= 3)

    def close(self, smoothing: float = SMOOTHING_FACTOR) -> "Path":
        if len(self.nodes) < 2:
            return replace(self, closed=True)
        first, last = self.nodes[0], self.nodes[-1]
        last_ctrl2, first_ctrl1 = _tangent_handles(last.anchor, first.anchor, smoothing)
        nodes = list(self.nodes)
        nodes[0] = replace(first, ctrl1=first_ctrl1)
        nodes[-1] = replace(nodes[-1], ctrl2=last_ctrl2)
        return Path(nodes=tuple(nodes), closed=True)

    def open(self) -> "Path":
        return replace(self, closed=False)

    def toggle_closed(self, smoothing: float = SMOOTHING_FACTOR) -> "Path":
        return self.open() if self.closed else self.close(smoothing)

    def reflect_and_merge(self, picked: Point, **kwargs) -> "Path":
        from .symmetry import reflect_and_merge
        return reflect_and_merge(self, picked, **kwargs)

    # ---- output -----------------------------------------------------------------
    def path_ops(self) -> list[Op]:
        """
        Convert nodes to simple drawing ops:
          - ("M", (x,y))       moveTo
          - ("C", (c1,c2,p2))  cubicTo
          - ("Z", ())          closePath
        """
        if not self.nodes:
            return []
        ops: list[Op] = [("M", self.nodes[0].anchor)]
        for _, c1, c2, p2 in self.segments():
            ops.append(("C", (c1, c2, p2)))
        if self.closed:
            ops.append(("Z", ()))
        return ops

    def path_data(self) -> str:
        """SVG path description, e.g. 'M 0 0 C 25 0, 75 0, 100 0 Z'."""
        parts = []
        for op, data in self.path_ops():
            if op == "M":
                parts.append(f"M {_fmt(data[0])} {_fmt(data[1])}")
            elif op == "C":
                c1, c2, p2 = data
                parts.append(
                    f"C {_fmt(c1[0])} {_fmt(c1[1])}, {_fmt(c2[0])} {_fmt(c2[1])}, "
                    f"{_fmt(p2[0])} {_fmt(p2[1])}"
                )
            elif op == "Z":
                parts.append("Z")
        return " ".join(parts)

    def make_qpath(self) -> "QtGui.QPainterPath":
        from PySide6 import QtCore, QtGui

        qp = QtGui.QPainterPath()
        qpf = lambda t: QtCore.QPointF(t[0], t[1])

        for op, data in self.path_ops():
            if op == "M":
                qp.moveTo(qpf(data))
            elif op == "C":
                c1, c2, p2 = data
                qp.cubicTo(qpf(c1), qpf(c2), qpf(p2))
            elif op == "Z":
                qp.closeSubpath()
        return qp
