"""
Pytest configuration and shared fixtures for the path editing engine.
"""

import sys
from pathlib import Path as FilePath

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from mirrorpath.core import EditorSettings, Path, PathEditor, ViewState


# ============== Path Fixtures ==============

@pytest.fixture
def line_path() -> Path:
    """Open two-node path along the x axis from (0, 0) to (100, 0)."""
    return Path().append((0, 0)).append((100, 0))


@pytest.fixture
def square_path() -> Path:
    """Closed 100x100 square built by four appends and a close."""
    return (
        Path()
        .append((0, 0))
        .append((100, 0))
        .append((100, 100))
        .append((0, 100))
        .close()
    )


# ============== Editor Fixtures ==============

@pytest.fixture
def editor() -> PathEditor:
    """Editor at zoom 1 with no pan, so device and world coordinates coincide."""
    return PathEditor(EditorSettings(), view=ViewState(zoom=1.0, pan=(0.0, 0.0)))
