import logging

from PySide6 import QtCore, QtWidgets

from mirrorpath.core.export import DEFAULT_FILENAME
from mirrorpath.menu.translations import tr
from mirrorpath.widgets import CanvasWidget

logger = logging.getLogger(__name__)


class Bar(QtWidgets.QToolBar):
    """Command surface of the editor. Buttons only dispatch; the canvas owns the state."""

    languageChanged = QtCore.Signal(str)

    def __init__(self, canvas: CanvasWidget, language: str = "en"):
        super().__init__()

        self.canvas = canvas
        self.language = language
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.undo_button = QtWidgets.QPushButton()
        self.redo_button = QtWidgets.QPushButton()
        self.close_button = QtWidgets.QPushButton()
        self.symmetry_button = QtWidgets.QPushButton()
        self.snap_button = QtWidgets.QPushButton()
        self.snap_button.setCheckable(True)
        self.delete_button = QtWidgets.QPushButton()
        self.clear_button = QtWidgets.QPushButton()
        self.export_button = QtWidgets.QPushButton()
        self.language_button = QtWidgets.QPushButton()

        for button in (self.undo_button, self.redo_button, self.close_button,
                       self.symmetry_button, self.snap_button, self.delete_button,
                       self.clear_button, self.export_button, self.language_button):
            self.addWidget(button)

        self.undo_button.clicked.connect(self._undo)
        self.redo_button.clicked.connect(self._redo)
        self.close_button.clicked.connect(self._toggle_close)
        self.symmetry_button.clicked.connect(self._toggle_symmetry)
        self.snap_button.clicked.connect(self._toggle_snap)
        self.delete_button.clicked.connect(self._delete)
        self.clear_button.clicked.connect(self._clear)
        self.export_button.clicked.connect(self._export)
        self.language_button.clicked.connect(self._toggle_language)

        self.canvas.pathChanged.connect(self.refresh)
        self.refresh()

    def t(self, key: str) -> str:
        return tr(self.language, key)

    @QtCore.Slot()
    def refresh(self):
        editor = self.canvas.editor
        n = len(editor.nodes)

        self.undo_button.setText(self.t("undo"))
        self.redo_button.setText(self.t("redo"))
        self.close_button.setText(self.t("openPath") if editor.closed else self.t("closePath"))
        self.symmetry_button.setText(
            self.t("cancelSymmetry") if editor.picking_symmetry else self.t("applySymmetry")
        )
        self.snap_button.setText(self.t("snapToGrid"))
        self.delete_button.setText(self.t("deleteNode"))
        self.clear_button.setText(self.t("clearCanvas"))
        self.export_button.setText(self.t("exportSVG"))
        self.language_button.setText(self.t("language"))

        self.undo_button.setEnabled(editor.history.can_undo)
        self.redo_button.setEnabled(editor.history.can_redo)
        self.close_button.setEnabled(n >= 3 or editor.closed)
        self.symmetry_button.setEnabled(editor.can_apply_symmetry)
        self.snap_button.setChecked(editor.snap_enabled)
        self.delete_button.setEnabled(editor.selected is not None)
        self.export_button.setEnabled(n > 0)

    # ---- slots ---------------------------------------------------------------
    @QtCore.Slot()
    def _undo(self):
        self.canvas.editor.undo()
        self.canvas.refresh()

    @QtCore.Slot()
    def _redo(self):
        self.canvas.editor.redo()
        self.canvas.refresh()

    @QtCore.Slot()
    def _toggle_close(self):
        self.canvas.editor.toggle_close_path()
        self.canvas.refresh()

    @QtCore.Slot()
    def _toggle_symmetry(self):
        self.canvas.editor.toggle_apply_symmetry()
        self.canvas.refresh()

    @QtCore.Slot()
    def _toggle_snap(self):
        self.canvas.editor.toggle_snap()
        self.canvas.refresh()

    @QtCore.Slot()
    def _delete(self):
        self.canvas.editor.delete_selected()
        self.canvas.refresh()

    @QtCore.Slot()
    def _clear(self):
        self.canvas.editor.clear()
        self.canvas.refresh()

    @QtCore.Slot()
    def _export(self):
        filename, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, self.t("exportSVG"), DEFAULT_FILENAME, "SVG (*.svg)"
        )
        if not filename:
            return
        try:
            self.canvas.editor.export_svg(filename)
        except OSError as e:
            logger.error("Export to %s failed: %s", filename, e)
            QtWidgets.QMessageBox.critical(self, self.t("exportSVG"), str(e))

    @QtCore.Slot()
    def _toggle_language(self):
        self.language = "es" if self.language == "en" else "en"
        self.refresh()
        self.languageChanged.emit(self.language)
