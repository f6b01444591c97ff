import logging
from dataclasses import dataclass, replace
from enum import Flag, auto
from pathlib import Path as FilePath
from typing import Callable

from .errors import EditorError, NoEligiblePathError, NotStraightEdgeError
from .export import DEFAULT_FILENAME, svg_document, write_svg
from .history import History
from .math import Point, dist
from .node import Node, NodeKind, Role
from .path import Path
from .settings import EditorSettings
from .view import ViewState, snap_point

logger = logging.getLogger(__name__)


class Modifier(Flag):
    NONE = 0
    CTRL = auto()
    SHIFT = auto()
    ALT = auto()
    META = auto()


# ---- interaction states -------------------------------------------------------
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Clicking:
    """Pressed on empty canvas; releasing without travelling appends a node."""
    origin: Point  # world
    travelled: bool = False


@dataclass(frozen=True)
class Dragging:
    index: int
    role: Role
    origin: Point  # world
    travelled: bool = False


@dataclass(frozen=True)
class Panning:
    last: Point  # device


@dataclass(frozen=True)
class PickingSymmetryEdge:
    pass


State = Idle | Clicking | Dragging | Panning | PickingSymmetryEdge


class PathEditor:
    """
    Path editing engine: owns the live path, the history and the view, and
    turns pointer/keyboard events (device coordinates) into committed edits.

    Intra-drag moves only update the live path; the history gets exactly one
    entry per user action.
    """

    def __init__(self,
                 settings: EditorSettings | None = None,
                 view: ViewState | None = None,
                 on_notice: Callable[[EditorError], None] | None = None):
        self.settings = settings or EditorSettings()
        self._history = History()
        self._path: Path = self._history.current
        self._view = view or ViewState(zoom=self.settings.initial_zoom)
        self._state: State = Idle()
        self._selected: int | None = None
        self.snap_enabled = False
        self.space_held = False
        self.last_error: EditorError | None = None
        self.on_notice = on_notice

    # ---- read surface ---------------------------------------------------------
    @property
    def path(self) -> Path:
        return self._path

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._path.nodes

    @property
    def closed(self) -> bool:
        return self._path.closed

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def history(self) -> History:
        return self._history

    @property
    def state(self) -> State:
        return self._state

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def picking_symmetry(self) -> bool:
        return isinstance(self._state, PickingSymmetryEdge)

    @property
    def can_apply_symmetry(self) -> bool:
        return self._path.closed and len(self._path) >= 3

    def path_data(self) -> str:
        return self._path.path_data()

    def set_view(self, view: ViewState) -> None:
        self._view = view

    def center_view(self, width: float, height: float) -> None:
        """Centre the export extent in a viewport of the given device size."""
        self._view = self._view.centered(width, height,
                                         self.settings.canvas_width, self.settings.canvas_height)

    # ---- helpers --------------------------------------------------------------
    def _commit(self, path: Path) -> None:
        self._path = self._history.commit(path)

    def _world(self, device: Point) -> Point:
        return self._view.to_world(device)

    def _snap(self, p: Point) -> Point:
        if self.snap_enabled:
            return snap_point(p, self.settings.grid_size)
        return p

    def _exceeds_drag(self, origin: Point, world: Point) -> bool:
        return dist(origin, world) > self.settings.drag_threshold / self._view.zoom

    def _cancel_gesture(self) -> None:
        if isinstance(self._state, Dragging):
            self._finish_drag()
        elif isinstance(self._state, (Clicking, Panning)):
            self._state = Idle()

    def _finish_drag(self) -> None:
        self._state = Idle()
        if self._path != self._history.current:
            self._commit(self._path)

    def _clamp_selection(self) -> None:
        if self._selected is not None and self._selected >= len(self._path):
            self._selected = None

    def hit_test(self, world: Point) -> tuple[int, Role] | None:
        """
        Anchor or handle under `world`, searching from the last node. Handles
        are only hit-testable on a closed path.
        """
        anchor_r = self.settings.anchor_hit_radius / self._view.zoom
        handle_r = self.settings.handle_hit_radius / self._view.zoom
        closed = self._path.closed
        for i in range(len(self._path) - 1, -1, -1):
            node = self._path[i]
            if dist(world, node.anchor) < anchor_r:
                return i, Role.ANCHOR
            if closed:
                if dist(world, node.ctrl1) < handle_r:
                    return i, Role.CTRL1
                if dist(world, node.ctrl2) < handle_r:
                    return i, Role.CTRL2
        return None

    # ---- pointer events ---------------------------------------------------------
    def pointer_down(self, device: Point, modifiers: Modifier = Modifier.NONE) -> None:
        match self._state:
            case PickingSymmetryEdge():
                # consumed: never creates or drags a node
                self.apply_symmetry(self._world(device))
            case Idle() if self.space_held:
                self._state = Panning(last=device)
            case Idle():
                self._press(self._world(device), modifiers)
            case _:
                pass

    def _press(self, world: Point, modifiers: Modifier) -> None:
        hit = self.hit_test(world)
        if hit is not None:
            index, role = hit
            self._selected = index
            if role is Role.ANCHOR and modifiers & Modifier.CTRL:
                self.toggle_node_kind(index)
                return
            self._state = Dragging(index=index, role=role, origin=world)
            return

        found = self._path.closest_segment(world, self.settings.insert_threshold / self._view.zoom,
                                           steps=self.settings.closest_point_steps)
        if found is not None:
            index, _, t = found
            self._commit(self._path.insert_on_segment(index, t))
            logger.debug("Inserted node on segment %d at t=%.3f", index, t)
            self._selected = index + 1
            self._state = Dragging(index=index + 1, role=Role.ANCHOR, origin=world)
            return

        self._selected = None
        self._state = Clicking(origin=world)

    def pointer_move(self, device: Point) -> None:
        match self._state:
            case Panning(last=last):
                self._view = self._view.panned(device[0] - last[0], device[1] - last[1])
                self._state = Panning(last=device)
            case Clicking(origin=origin, travelled=False):
                if self._exceeds_drag(origin, self._world(device)):
                    self._state = Clicking(origin=origin, travelled=True)
            case Dragging(index=index, role=role, origin=origin, travelled=travelled):
                world = self._world(device)
                if not travelled and self._exceeds_drag(origin, world):
                    self._state = replace(self._state, travelled=True)
                self._path = self._path.move(index, role, self._snap(world))
            case _:
                pass

    def pointer_up(self, device: Point, modifiers: Modifier = Modifier.NONE) -> None:
        match self._state:
            case Panning():
                self._state = Idle()
            case Dragging():
                self._finish_drag()
            case Clicking(origin=origin, travelled=travelled):
                self._state = Idle()
                world = self._world(device)
                if travelled or self.space_held or self._exceeds_drag(origin, world):
                    return
                if modifiers & ~Modifier.CTRL:
                    return
                kind = NodeKind.SMOOTH if modifiers & Modifier.CTRL else NodeKind.CORNER
                self.append(self._snap(world), kind)
            case _:
                pass

    def pointer_leave(self) -> None:
        self._cancel_gesture()

    def wheel(self, device: Point, delta_y: float) -> None:
        """Zoom one step at the pointer; negative delta zooms in."""
        if delta_y == 0:
            return
        s = self.settings
        self._view = self._view.zoomed_at(device, delta_y < 0, s.zoom_step, s.min_zoom, s.max_zoom)

    # ---- keyboard events ----------------------------------------------------------
    def key_down(self, key: str, modifiers: Modifier = Modifier.NONE) -> None:
        k = key.lower()
        command = modifiers & (Modifier.CTRL | Modifier.META)
        if k in ("space", " "):
            self.space_held = True
        elif k in ("delete", "backspace"):
            self.delete_selected()
        elif command and k == "z":
            if modifiers & Modifier.SHIFT:
                self.redo()
            else:
                self.undo()
        elif command and k == "y":
            self.redo()
        elif k == "escape" and self.picking_symmetry:
            self._state = Idle()

    def key_up(self, key: str) -> None:
        if key.lower() in ("space", " "):
            self.space_held = False
            if isinstance(self._state, Panning):
                self._state = Idle()

    # ---- commands ------------------------------------------------------------------
    def append(self, p: Point, kind: NodeKind = NodeKind.CORNER) -> None:
        self._commit(self._path.append(p, kind, self.settings.smoothing_factor))
        self._selected = len(self._path) - 1

    def undo(self) -> None:
        self._cancel_gesture()
        self._path = self._history.undo()
        self._clamp_selection()

    def redo(self) -> None:
        self._cancel_gesture()
        self._path = self._history.redo()
        self._clamp_selection()

    def toggle_close_path(self) -> bool:
        """Close or open the path. Closing needs at least 3 nodes."""
        self._cancel_gesture()
        if not self._path.closed and len(self._path) < 3:
            logger.info("Cannot close a path of %d nodes", len(self._path))
            return False
        self._commit(self._path.toggle_closed(self.settings.smoothing_factor))
        return True

    def toggle_snap(self) -> bool:
        self.snap_enabled = not self.snap_enabled
        return self.snap_enabled

    def toggle_node_kind(self, index: int) -> None:
        node = self._path[index]
        kind = NodeKind.CORNER if node.kind is NodeKind.SMOOTH else NodeKind.SMOOTH
        self._commit(self._path.set_kind(index, kind))

    def delete_selected(self) -> None:
        if self._selected is None:
            return
        self._cancel_gesture()
        self._commit(self._path.delete_node(self._selected))
        self._selected = None

    def clear(self) -> None:
        self._cancel_gesture()
        self._commit(Path())
        self._selected = None

    def toggle_apply_symmetry(self) -> bool:
        if self.picking_symmetry:
            self._state = Idle()
            return False
        self._cancel_gesture()
        self._state = PickingSymmetryEdge()
        self._selected = None
        return True

    def apply_symmetry(self, world: Point) -> bool:
        """
        Mirror the closed path across the straight edge nearest to `world`.
        Failures leave the path untouched; picking mode ends either way.
        """
        self._state = Idle()
        try:
            merged = self._path.reflect_and_merge(world,
                                                  tolerance=self.settings.collinear_tolerance,
                                                  steps=self.settings.closest_point_steps)
        except NoEligiblePathError as e:
            self.last_error = e
            logger.info("Symmetry ignored: %s", e)
            return False
        except NotStraightEdgeError as e:
            self.last_error = e
            logger.warning("Symmetry rejected on segment %d: %s", e.segment_index, e)
            if self.on_notice is not None:
                self.on_notice(e)
            return False

        self.last_error = None
        self._commit(merged)
        logger.info("Applied symmetry: %d nodes", len(merged))
        return True

    def svg_document(self) -> str:
        return svg_document(self._path.path_data(), self._path.closed,
                            self.settings.canvas_width, self.settings.canvas_height)

    def export_svg(self, filename: str | FilePath = DEFAULT_FILENAME) -> FilePath:
        return write_svg(filename, self._path, self.settings.canvas_width, self.settings.canvas_height)
