from .math import Point, cubic_eval, closest_on_cubic, subdivide_cubic, is_collinear, reflect_across_line, dist, dist2
from .node import Node, NodeKind, Role
from .path import Path, SMOOTHING_FACTOR
from .errors import EditorError, NoEligiblePathError, NotStraightEdgeError
from .view import ViewState, snap, snap_point, grid_spacing
from .history import History
from .settings import EditorSettings
from .editor import PathEditor, Modifier, Idle, Clicking, Dragging, Panning, PickingSymmetryEdge
from .export import svg_document, write_svg
