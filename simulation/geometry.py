"""Integer grid geometry: positions and compass orientations.

The y axis is inverted: NORTH points towards decreasing y.
"""


class Vector2:
    """Integer (x, y) pair, used both for positions and unit directions."""

    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = int(x)
        self.y = int(y)

    def shift(self, dx, dy):
        """Move in place by (dx, dy)."""
        self.x += dx
        self.y += dy

    def copy(self):
        return Vector2(self.x, self.y)

    def to_list(self):
        return [self.x, self.y]

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if isinstance(other, Vector2):
            return self.x == other.x and self.y == other.y
        if isinstance(other, (tuple, list)) and len(other) == 2:
            return self.x == other[0] and self.y == other[1]
        return NotImplemented

    def __repr__(self):
        return f"{type(self).__name__}({self.x}, {self.y})"

    def __str__(self):
        return f"[{self.x}, {self.y}]"


_COMPASS = {
    (0, -1): "NORTH",
    (0, 1): "SOUTH",
    (1, 0): "EAST",
    (-1, 0): "WEST",
}


class Orientation(Vector2):
    """Facing direction, always one of the four cardinal unit vectors."""

    __slots__ = ()

    def __init__(self, x, y):
        if (int(x), int(y)) not in _COMPASS:
            raise ValueError(f"orientation must be a cardinal unit vector, got ({x}, {y})")
        super().__init__(x, y)

    @classmethod
    def north(cls):
        return cls(0, -1)

    @classmethod
    def south(cls):
        return cls(0, 1)

    @classmethod
    def east(cls):
        return cls(1, 0)

    @classmethod
    def west(cls):
        return cls(-1, 0)

    @property
    def name(self):
        return _COMPASS[(self.x, self.y)]

    def rotate_cw(self):
        """Rotate 90 degrees clockwise in place, e.g. NORTH -> EAST."""
        self.x, self.y = -self.y, self.x

    def rotate_ccw(self):
        """Rotate 90 degrees counterclockwise in place, e.g. NORTH -> WEST."""
        self.x, self.y = self.y, -self.x

    def copy(self):
        return Orientation(self.x, self.y)

    def shift(self, dx, dy):
        raise TypeError("orientation changes only by rotation")
