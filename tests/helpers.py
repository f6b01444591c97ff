"""Gesture helpers driving a PathEditor with device points."""

from mirrorpath.core import Modifier, PathEditor


def click(editor: PathEditor, point, modifiers: Modifier = Modifier.NONE):
    """Press and release at the same device point."""
    editor.pointer_down(point, modifiers)
    editor.pointer_up(point, modifiers)


def drag(editor: PathEditor, start, end, steps: int = 4):
    """Press at `start`, move in a few steps to `end`, release."""
    editor.pointer_down(start)
    for i in range(1, steps + 1):
        t = i / steps
        editor.pointer_move((start[0] + (end[0] - start[0]) * t, start[1] + (end[1] - start[1]) * t))
    editor.pointer_up(end)
