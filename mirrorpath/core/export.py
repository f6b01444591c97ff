import logging
from pathlib import Path as FilePath

from .path import Path

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "bezier-creation.svg"
CLOSED_FILL = "rgba(0,0,0,0.1)"


def svg_document(path_data: str, closed: bool, width: float = 4000, height: float = 4000) -> str:
    """Standalone SVG of the given extent with the path stroked, filled only when closed."""
    w = f"{width:g}"
    h = f"{height:g}"
    fill = CLOSED_FILL if closed else "none"
    return (
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">\n'
        f'  <path d="{path_data}" stroke="black" fill="{fill}" stroke-width="2"/>\n'
        f'</svg>'
    )


def write_svg(filename: str | FilePath, path: Path, width: float = 4000, height: float = 4000) -> FilePath:
    target = FilePath(filename)
    target.write_text(svg_document(path.path_data(), path.closed, width, height), encoding="utf-8")
    logger.info("Exported %d nodes to %s", len(path), target)
    return target
