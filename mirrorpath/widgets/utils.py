from PySide6 import QtCore, QtGui

from mirrorpath.core import Point


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


def cosmetic_pen(color: QtGui.QColor, width: float = 1.0,
                 style: QtCore.Qt.PenStyle = QtCore.Qt.PenStyle.SolidLine) -> QtGui.QPen:
    """Pen whose width stays in device pixels under the view's scale."""
    pen = QtGui.QPen(color, width, style)
    pen.setCosmetic(True)
    return pen


def square_around(center: QtCore.QPointF, half: float) -> QtCore.QRectF:
    return QtCore.QRectF(center.x() - half, center.y() - half, 2 * half, 2 * half)
