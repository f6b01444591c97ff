import logging

from .path import Path

logger = logging.getLogger(__name__)


class History:
    """
    Linear undo/redo log of Path snapshots.

    Committing after an undo discards the redo tail. Undo at the first entry
    and redo at the last one are no-ops.
    """

    def __init__(self, initial: Path | None = None):
        self._entries: list[Path] = [initial if initial is not None else Path()]
        self._index = 0

    @property
    def current(self) -> Path:
        return self._entries[self._index]

    @property
    def index(self) -> int:
        return self._index

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def __len__(self):
        return len(self._entries)

    def commit(self, path: Path) -> Path:
        del self._entries[self._index + 1:]
        self._entries.append(path)
        self._index = len(self._entries) - 1
        logger.debug("Committed entry %d (%d nodes, closed=%s)", self._index, len(path), path.closed)
        return path

    def undo(self) -> Path:
        if self.can_undo:
            self._index -= 1
            logger.debug("Undo -> entry %d", self._index)
        return self.current

    def redo(self) -> Path:
        if self.can_redo:
            self._index += 1
            logger.debug("Redo -> entry %d", self._index)
        return self.current
