import math
from dataclasses import dataclass, replace
from enum import Enum

from .math import Point, dist, polar, reflect_across_line


class NodeKind(Enum):
    CORNER = "corner"
    SMOOTH = "smooth"


class Role(Enum):
    ANCHOR = "anchor"
    CTRL1 = "ctrl1"
    CTRL2 = "ctrl2"


@dataclass(frozen=True)
class Node:
    """
    One path vertex. Handles are absolute world points, not offsets:
      - ctrl1: incoming handle (shapes the segment ending here)
      - ctrl2: outgoing handle (shapes the segment starting here)
    """
    anchor: Point
    ctrl1: Point
    ctrl2: Point
    kind: NodeKind = NodeKind.CORNER

    def point(self, role: Role) -> Point:
        match role:
            case Role.ANCHOR:
                return self.anchor
            case Role.CTRL1:
                return self.ctrl1
            case Role.CTRL2:
                return self.ctrl2
            case _:
                raise ValueError(role)

    def translated(self, dx: float, dy: float) -> "Node":
        return replace(
            self,
            anchor=(self.anchor[0] + dx, self.anchor[1] + dy),
            ctrl1=(self.ctrl1[0] + dx, self.ctrl1[1] + dy),
            ctrl2=(self.ctrl2[0] + dx, self.ctrl2[1] + dy),
        )

    def moved_to(self, p: Point) -> "Node":
        return self.translated(p[0] - self.anchor[0], p[1] - self.anchor[1])

    def with_handle(self, role: Role, p: Point) -> "Node":
        """
        Set one handle. Smooth nodes swing the other handle onto the opposite
        ray, keeping its own distance from the anchor.
        """
        if role is Role.ANCHOR:
            raise ValueError("with_handle expects CTRL1 or CTRL2")
        p = (float(p[0]), float(p[1]))
        ax, ay = self.anchor
        if role is Role.CTRL1:
            node = replace(self, ctrl1=p)
            other = self.ctrl2
        else:
            node = replace(self, ctrl2=p)
            other = self.ctrl1
        if self.kind is not NodeKind.SMOOTH:
            return node

        angle = math.atan2(ay - p[1], ax - p[0])
        mirrored = polar(self.anchor, angle, dist(self.anchor, other))
        if role is Role.CTRL1:
            return replace(node, ctrl2=mirrored)
        return replace(node, ctrl1=mirrored)

    def reflected(self, a: Point, b: Point) -> "Node":
        return replace(
            self,
            anchor=reflect_across_line(self.anchor, a, b),
            ctrl1=reflect_across_line(self.ctrl1, a, b),
            ctrl2=reflect_across_line(self.ctrl2, a, b),
        )

    def reversed(self) -> "Node":
        """Swap handle roles, for traversal in the opposite direction."""
        return replace(self, ctrl1=self.ctrl2, ctrl2=self.ctrl1)
