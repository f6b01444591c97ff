import logging

from PySide6 import QtCore, QtGui, QtWidgets

from mirrorpath.core import EditorError, Modifier, NodeKind, PathEditor, grid_spacing
from mirrorpath.widgets.utils import cosmetic_pen, point_to_qpoint, qpoint_to_point, square_around

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    QtCore.Qt.Key.Key_Space: "space",
    QtCore.Qt.Key.Key_Delete: "delete",
    QtCore.Qt.Key.Key_Backspace: "backspace",
    QtCore.Qt.Key.Key_Escape: "escape",
    QtCore.Qt.Key.Key_Z: "z",
    QtCore.Qt.Key.Key_Y: "y",
}


def modifiers_from_qt(mods: QtCore.Qt.KeyboardModifier) -> Modifier:
    out = Modifier.NONE
    if mods & QtCore.Qt.KeyboardModifier.ControlModifier:
        out |= Modifier.CTRL
    if mods & QtCore.Qt.KeyboardModifier.ShiftModifier:
        out |= Modifier.SHIFT
    if mods & QtCore.Qt.KeyboardModifier.AltModifier:
        out |= Modifier.ALT
    if mods & QtCore.Qt.KeyboardModifier.MetaModifier:
        out |= Modifier.META
    return out


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for a PathEditor.
    Forwards Qt input to the editor and paints whatever state it exposes;
    no geometry lives here.
    """

    pathChanged = QtCore.Signal()         # emitted after any event that may have changed the path
    noticeRaised = QtCore.Signal(str)     # user-facing condition (e.g. symmetry on a curved edge)

    def __init__(self, editor: PathEditor | None = None, parent=None):
        super().__init__(parent)
        self._editor = editor or PathEditor()
        self._editor.on_notice = self._on_notice
        self._centered = False

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

    # --- public API -------------------------
    @property
    def editor(self) -> PathEditor:
        return self._editor

    def refresh(self):
        self.pathChanged.emit()
        self.update()

    def sizeHint(self):
        return QtCore.QSize(900, 700)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # --- internals --------------------------
    def _on_notice(self, error: EditorError):
        self.noticeRaised.emit(str(error))

    def _update_cursor(self):
        if self._editor.space_held:
            self.setCursor(QtCore.Qt.CursorShape.OpenHandCursor)
        elif self._editor.picking_symmetry:
            self.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)
        else:
            self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

    # ---------- Qt events ----------
    def showEvent(self, event):
        super().showEvent(event)
        if not self._centered:
            self._editor.center_view(self.width(), self.height())
            self._centered = True

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        self.setFocus()
        self._editor.pointer_down(qpoint_to_point(e.position()), modifiers_from_qt(e.modifiers()))
        self._update_cursor()
        self.refresh()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self._editor.pointer_move(qpoint_to_point(e.position()))
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        self._editor.pointer_up(qpoint_to_point(e.position()), modifiers_from_qt(e.modifiers()))
        self.refresh()

    def leaveEvent(self, event):
        self._editor.pointer_leave()
        self.refresh()
        super().leaveEvent(event)

    def wheelEvent(self, e: QtGui.QWheelEvent):
        # Qt reports positive angles when scrolling up, which zooms in
        self._editor.wheel(qpoint_to_point(e.position()), -e.angleDelta().y())
        self.update()

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        key = _KEY_NAMES.get(QtCore.Qt.Key(e.key()))
        if key is None or (key == "space" and e.isAutoRepeat()):
            super().keyPressEvent(e)
            return
        self._editor.key_down(key, modifiers_from_qt(e.modifiers()))
        self._update_cursor()
        self.refresh()

    def keyReleaseEvent(self, e: QtGui.QKeyEvent):
        key = _KEY_NAMES.get(QtCore.Qt.Key(e.key()))
        if key is None or e.isAutoRepeat():
            super().keyReleaseEvent(e)
            return
        self._editor.key_up(key)
        self._update_cursor()
        self.update()

    # ---------- painting ----------
    def _draw_grid(self, painter: QtGui.QPainter):
        s = self._editor.settings
        major, minor = grid_spacing(self._editor.view.zoom)
        minor_pen = cosmetic_pen(QtGui.QColor(0, 0, 0, 20))
        major_pen = cosmetic_pen(QtGui.QColor(0, 0, 0, 45))

        steps = int(s.canvas_width // minor)
        for i in range(steps + 1):
            x = i * minor
            painter.setPen(major_pen if i % 5 == 0 else minor_pen)
            painter.drawLine(QtCore.QPointF(x, 0), QtCore.QPointF(x, s.canvas_height))
        steps = int(s.canvas_height // minor)
        for i in range(steps + 1):
            y = i * minor
            painter.setPen(major_pen if i % 5 == 0 else minor_pen)
            painter.drawLine(QtCore.QPointF(0, y), QtCore.QPointF(s.canvas_width, y))

    def _draw_frame(self, painter: QtGui.QPainter):
        s = self._editor.settings
        painter.setPen(cosmetic_pen(QtGui.QColor(0, 0, 0, 80)))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawRect(QtCore.QRectF(0, 0, s.canvas_width, s.canvas_height))

        painter.setPen(cosmetic_pen(QtGui.QColor(0, 120, 215, 60), style=QtCore.Qt.PenStyle.DashLine))
        cx, cy = s.canvas_width / 2, s.canvas_height / 2
        painter.drawLine(QtCore.QPointF(cx, 0), QtCore.QPointF(cx, s.canvas_height))
        painter.drawLine(QtCore.QPointF(0, cy), QtCore.QPointF(s.canvas_width, cy))

    def _draw_spline(self, painter: QtGui.QPainter):
        path = self._editor.path
        painter.setPen(cosmetic_pen(QtGui.QColor(0, 0, 0, 220), 2.0))
        if path.closed:
            painter.setBrush(QtGui.QColor(0, 0, 0, 25))
        else:
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawPath(path.make_qpath())

    def _draw_controls(self, painter: QtGui.QPainter):
        """Markers are drawn in device space so they keep a constant size."""
        path = self._editor.path
        view = self._editor.view
        selected = self._editor.selected

        if path.closed:
            painter.setPen(QtGui.QPen(QtGui.QColor(0, 120, 215, 160), 1.5))
            for node in path.nodes:
                a = point_to_qpoint(view.to_device(node.anchor))
                for ctrl in (node.ctrl1, node.ctrl2):
                    c = point_to_qpoint(view.to_device(ctrl))
                    painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
                    painter.drawLine(a, c)
                    painter.setBrush(QtGui.QColor(255, 255, 255, 230))
                    painter.drawEllipse(c, 6.0, 6.0)

        for i, node in enumerate(path.nodes):
            a = point_to_qpoint(view.to_device(node.anchor))
            fill = QtGui.QColor(0, 120, 215) if i == selected else QtGui.QColor(255, 255, 255, 230)
            painter.setBrush(fill)
            painter.setPen(QtGui.QPen(QtGui.QColor(0, 0, 0, 200), 2.0))
            if node.kind is NodeKind.CORNER:
                painter.drawRect(square_around(a, 7.0))
            else:
                painter.drawEllipse(a, 8.0, 8.0)

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), QtGui.QColor(250, 250, 250))

        view = self._editor.view
        painter.save()
        painter.translate(view.pan[0], view.pan[1])
        painter.scale(view.zoom, view.zoom)
        if self._editor.snap_enabled:
            self._draw_grid(painter)
        self._draw_frame(painter)
        if self._editor.path.nodes:
            self._draw_spline(painter)
        painter.restore()

        if not self._editor.picking_symmetry:
            self._draw_controls(painter)

        painter.end()
