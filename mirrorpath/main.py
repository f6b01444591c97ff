import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from mirrorpath import __version__
from mirrorpath.core import EditorSettings, PathEditor
from mirrorpath.menu import Bar, tr
from mirrorpath.widgets import CanvasWidget


def setup_logging(debug: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging initialized at %s level", "DEBUG" if debug else "INFO")


class MyWidget(QtWidgets.QWidget):
    def __init__(self, settings: EditorSettings, language: str = "en"):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CanvasWidget(PathEditor(settings), parent=self)
        self.top_bar = Bar(self.canvas, language)
        self.prompt = QtWidgets.QLabel()

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.prompt)
        self.layout.addWidget(self.canvas, stretch=1)

        self.canvas.pathChanged.connect(self._refresh_texts)
        self.canvas.noticeRaised.connect(self._show_notice)
        self.top_bar.languageChanged.connect(self._refresh_texts)
        self._refresh_texts()

    def _refresh_texts(self, *_):
        language = self.top_bar.language
        self.setWindowTitle(tr(language, "title"))
        key = "pickEdgePrompt" if self.canvas.editor.picking_symmetry else "instructions"
        self.prompt.setText(tr(language, key))

    @QtCore.Slot(str)
    def _show_notice(self, _message: str):
        language = self.top_bar.language
        QtWidgets.QMessageBox.warning(self, tr(language, "title"), tr(language, "notStraightEdgeError"))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Interactive Bézier path editor with edge symmetry")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--language", choices=("en", "es"), default="en", help="Display language")
    parser.add_argument("--grid-size", type=float, default=EditorSettings.grid_size,
                        help="Snap grid spacing in world units")
    parser.add_argument("--initial-zoom", type=float, default=EditorSettings.initial_zoom,
                        help="Zoom factor at startup")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)
    settings = EditorSettings(grid_size=args.grid_size, initial_zoom=args.initial_zoom)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName("mirrorpath")
    app.setApplicationVersion(__version__)

    widget = MyWidget(settings, args.language)
    widget.resize(1000, 800)
    widget.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
