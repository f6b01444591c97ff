"""
Unit tests for the linear undo/redo history.
"""

from mirrorpath.core import History, Path


def build(n: int) -> tuple[History, list[Path]]:
    history = History()
    path = Path()
    states = []
    for i in range(n):
        path = path.append((i * 10, 0))
        history.commit(path)
        states.append(path)
    return history, states


class TestHistory:
    """Tests for History."""

    def test_initial_state(self):
        history = History()
        assert len(history) == 1
        assert history.index == 0
        assert history.current == Path()
        assert not history.can_undo
        assert not history.can_redo

    def test_undo_all_then_redo_all(self):
        history, states = build(5)
        for _ in range(5):
            history.undo()
        assert history.current == Path()
        for _ in range(5):
            history.redo()
        assert history.current is states[-1]

    def test_bounds_are_noops(self):
        history, states = build(2)
        history.redo()
        assert history.index == 2
        for _ in range(4):
            history.undo()
        assert history.index == 0
        assert history.undo() == Path()

    def test_commit_discards_redo_tail(self):
        history, states = build(5)
        for _ in range(3):
            history.undo()
        assert history.index == 2
        branch = states[1].append((999, 999))
        history.commit(branch)
        assert len(history) == 4
        assert history.current is branch
        assert not history.can_redo
        history.redo()
        assert history.current is branch

    def test_undo_returns_snapshot_by_reference(self):
        history, states = build(3)
        assert history.undo() is states[1]
