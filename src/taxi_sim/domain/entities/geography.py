# domain/entities/geography.py
from dataclasses import dataclass


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


# Integer grid coordinate; equality and hash come from the dataclass
@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0:
            raise ValueError(f"negative x-coordinate: {self.x}")
        if self.y < 0:
            raise ValueError(f"negative y-coordinate: {self.y}")

    def distance(self, other: "Position") -> int:
        """Chebyshev distance: the number of ticks needed to reach `other`."""
        if other is None:
            raise TypeError("destination is None")
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def step(self, destination: "Position") -> "Position":
        """One king-move towards `destination`; returns `destination` once reached."""
        if destination is None:
            raise TypeError("destination is None")
        dx = _sign(destination.x - self.x)
        dy = _sign(destination.y - self.y)
        if dx == 0 and dy == 0:
            return destination
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"location {self.x},{self.y}"
