"""Bounding box accumulator for path replay.

A Bounds value is the smallest axis-aligned rectangle enclosing the points
seen so far, together with the pen position. Every operation returns a new
value, so intermediate states stay valid after the replay moves on.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box plus the current pen position.

    Attributes:
        x1: Left edge
        y1: Top edge (smallest y)
        x2: Right edge
        y2: Bottom edge (largest y)
        last_point: Pen position after the most recent command
    """

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    last_point: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def empty(cls) -> "Bounds":
        """Return the degenerate zero box with the pen at the origin."""
        return cls()

    def start_at(self, x: float, y: float) -> "Bounds":
        """Collapse the box onto a single point.

        Used for the first point of a path, which establishes the origin
        of the box instead of extending a box that starts at (0, 0).

        Args:
            x: X coordinate of the point
            y: Y coordinate of the point

        Returns:
            New Bounds with both corners and the pen at (x, y)
        """
        return Bounds(x1=x, y1=y, x2=x, y2=y, last_point=(x, y))

    def move_last_point(self, x: float, y: float, is_first_point: bool) -> "Bounds":
        """Move the pen, starting the box if this is the first point.

        Args:
            x: X coordinate of the new pen position
            y: Y coordinate of the new pen position
            is_first_point: Whether this is the first point of the path

        Returns:
            New Bounds with the pen at (x, y)
        """
        if is_first_point:
            return self.start_at(x, y)
        return self.extend(x, y)

    def extend(self, x: float, y: float) -> "Bounds":
        """Grow the box to include a point and move the pen there.

        Args:
            x: X coordinate of the point
            y: Y coordinate of the point

        Returns:
            New Bounds enclosing the old box and (x, y)
        """
        return Bounds(
            x1=min(self.x1, x),
            y1=min(self.y1, y),
            x2=max(self.x2, x),
            y2=max(self.y2, y),
            last_point=(x, y),
        )

    def close(self) -> "Bounds":
        """Return the pen to the start corner, leaving the box unchanged."""
        return Bounds(
            x1=self.x1,
            y1=self.y1,
            x2=self.x2,
            y2=self.y2,
            last_point=(self.x1, self.y1),
        )

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.y2 - self.y1

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to a (x1, y1, x2, y2) tuple.

        Returns:
            Tuple of the box corners
        """
        return (self.x1, self.y1, self.x2, self.y2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with corner and pen fields
        """
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "last_point": list(self.last_point),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bounds":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with corner and pen fields

        Returns:
            Bounds instance
        """
        x, y = data["last_point"]
        return cls(
            x1=data["x1"],
            y1=data["y1"],
            x2=data["x2"],
            y2=data["y2"],
            last_point=(x, y),
        )
