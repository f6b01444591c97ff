class EditorError(Exception):
    """Recoverable, user-facing condition. Never leaves the path modified."""


class NoEligiblePathError(EditorError):
    def __init__(self, message: str = "Symmetry needs a closed path with at least 3 nodes."):
        super().__init__(message)


class NotStraightEdgeError(EditorError):
    def __init__(self, segment_index: int,
                 message: str = "Symmetry can only be applied to a straight edge."):
        super().__init__(message)
        self.segment_index = segment_index
