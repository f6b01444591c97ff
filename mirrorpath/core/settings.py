from dataclasses import dataclass

from .math import CLOSEST_POINT_STEPS, COLLINEAR_TOLERANCE
from .path import SMOOTHING_FACTOR
from .view import GRID_SIZE, INITIAL_ZOOM, MAX_ZOOM, MIN_ZOOM, ZOOM_STEP


@dataclass(frozen=True)
class EditorSettings:
    """
    Tunable constants of the editor. Pixel values are device-space and get
    divided by the current zoom before hit-testing in world space.
    """
    smoothing_factor: float = SMOOTHING_FACTOR
    anchor_hit_radius: float = 10.0     # px
    handle_hit_radius: float = 8.0      # px
    insert_threshold: float = 10.0      # px
    drag_threshold: float = 3.0         # px
    grid_size: float = GRID_SIZE
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM
    zoom_step: float = ZOOM_STEP
    initial_zoom: float = INITIAL_ZOOM
    canvas_width: float = 4000.0
    canvas_height: float = 4000.0
    closest_point_steps: int = CLOSEST_POINT_STEPS
    collinear_tolerance: float = COLLINEAR_TOLERANCE
