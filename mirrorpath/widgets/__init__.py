from .canvas import CanvasWidget, modifiers_from_qt

__all__ = [
    "CanvasWidget",
    "modifiers_from_qt",
]
