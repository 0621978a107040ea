"""Coordinates on the delivery grid."""

from __future__ import annotations

import secrets

from delivery.errors import ValueIsInvalidError, ValueIsOutOfRangeError

MIN_COORD = 1
MAX_COORD = 10


class Location:
    """An immutable point on the grid, or the empty location."""

    __slots__ = ("_x", "_y", "_is_set")

    def __init__(self, x: int, y: int) -> None:
        for name, value in (("Location.x", x), ("Location.y", y)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not MIN_COORD <= value <= MAX_COORD:
                raise ValueIsOutOfRangeError(name, value, MIN_COORD, MAX_COORD)
        self._x = x
        self._y = y
        self._is_set = True

    @classmethod
    def empty(cls) -> Location:
        """Return a location that has not been set."""
        loc = cls.__new__(cls)
        loc._x = 0
        loc._y = 0
        loc._is_set = False
        return loc

    @classmethod
    def random(cls) -> Location:
        """Return a randomly chosen location."""
        span = MAX_COORD - MIN_COORD
        return cls(secrets.randbelow(span) + MIN_COORD, secrets.randbelow(span) + MIN_COORD)

    def distance_to(self, target: Location) -> int:
        """Return the Manhattan distance to ``target``."""
        if not self._is_set:
            raise ValueIsInvalidError(
                "Location", ValueError("source location not initialized")
            )
        if not target._is_set:
            raise ValueIsInvalidError(
                "Location", ValueError("target location not initialized")
            )
        return abs(self._x - target._x) + abs(self._y - target._y)

    def is_empty(self) -> bool:
        return not self._is_set

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return (self._x, self._y, self._is_set) == (other._x, other._y, other._is_set)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._is_set))

    def __repr__(self) -> str:
        if not self._is_set:
            return "Location.empty()"
        return f"Location(x={self._x}, y={self._y})"