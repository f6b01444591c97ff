from dataclasses import dataclass, replace

from .math import Point

MIN_ZOOM = 0.1
MAX_ZOOM = 10.0
ZOOM_STEP = 1.1
INITIAL_ZOOM = 0.25
GRID_SIZE = 10.0


@dataclass(frozen=True)
class ViewState:
    """
    World -> device affine map: device = world * zoom + pan.
    `pan` is in device units and is not scaled by zoom.
    """
    zoom: float = INITIAL_ZOOM
    pan: Point = (0.0, 0.0)

    def to_world(self, p: Point) -> Point:
        return ((p[0] - self.pan[0]) / self.zoom, (p[1] - self.pan[1]) / self.zoom)

    def to_device(self, p: Point) -> Point:
        return (p[0] * self.zoom + self.pan[0], p[1] * self.zoom + self.pan[1])

    def zoomed_at(self, device: Point, zoom_in: bool, step: float = ZOOM_STEP,
                  min_zoom: float = MIN_ZOOM, max_zoom: float = MAX_ZOOM) -> "ViewState":
        """
        One wheel tick of zoom, keeping the world point under `device` fixed.
        Returns self when the zoom is already at its bound.
        """
        new_zoom = self.zoom * step if zoom_in else self.zoom / step
        new_zoom = max(min_zoom, min(max_zoom, new_zoom))
        if new_zoom == self.zoom:
            return self
        ratio = new_zoom / self.zoom
        pan = (
            device[0] - (device[0] - self.pan[0]) * ratio,
            device[1] - (device[1] - self.pan[1]) * ratio,
        )
        return ViewState(zoom=new_zoom, pan=pan)

    def panned(self, dx: float, dy: float) -> "ViewState":
        return replace(self, pan=(self.pan[0] + dx, self.pan[1] + dy))

    def centered(self, width: float, height: float, extent_w: float, extent_h: float) -> "ViewState":
        """Pan so a world rectangle (0, 0, extent_w, extent_h) sits centred in a viewport."""
        return replace(self, pan=((width - extent_w * self.zoom) / 2.0,
                                  (height - extent_h * self.zoom) / 2.0))


def snap(value: float, grid: float = GRID_SIZE) -> float:
    return round(value / grid) * grid


def snap_point(p: Point, grid: float = GRID_SIZE) -> Point:
    return (snap(p[0], grid), snap(p[1], grid))


def grid_spacing(zoom: float, base: float = 100.0) -> tuple[float, float]:
    """
    (major, minor) world spacing of the drawn grid, rescaled by powers of 5 so
    major lines stay 60-300 device pixels apart.
    """
    major = base
    while major * zoom < 60:
        major *= 5
    while major * zoom > 300:
        major /= 5
    return major, major / 5
