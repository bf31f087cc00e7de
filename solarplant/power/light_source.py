"""Light source (the Sun) in a one-dimensional world."""


class LightSource:
    """Single angular position of the light source.

    No wraparound is applied; callers keep the angle in range
    (a day sweep uses -pi/2 .. pi/2).

    Attributes:
        angle: Current source angle (rad)
    """

    def __init__(self, angle: float = 0.0):
        """Initialize light source.

        Args:
            angle: Initial source angle (rad), default 0
        """
        self._angle = angle

    @property
    def angle(self) -> float:
        """Current source angle (rad)."""
        return self._angle

    def set_angle(self, angle: float) -> None:
        """Set the source angle (rad)."""
        self._angle = angle

    def move_angle_by(self, delta: float) -> None:
        """Move the source by delta (rad)."""
        self._angle += delta

    def __repr__(self) -> str:
        return f"LightSource(angle={self._angle!r})"
