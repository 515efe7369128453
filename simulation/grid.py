"""Grid defines the simulation boundaries."""


class Grid:
    """Fixed-size table the objects move on. Positions are never clamped."""

    __slots__ = ("_width", "_height", "_objects")

    def __init__(self, width, height):
        self._width = width
        self._height = height
        self._objects = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def objects(self):
        return tuple(self._objects)

    def add_object(self, obj):
        self._objects.append(obj)

    def contains(self, position):
        """True when position lies inside [0, width) x [0, height)."""
        return 0 <= position.x < self._width and 0 <= position.y < self._height
