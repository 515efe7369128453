import uuid

from internal.logging import format_timestamp

FAILURE_SENTINEL = (-1, -1)


class ObjectState:
    __slots__ = ("x", "y", "orientation")

    def __init__(self, x, y, orientation):
        self.x, self.y, self.orientation = x, y, orientation

    def to_dict(self):
        return {"x": self.x, "y": self.y, "orientation": self.orientation}


class RunResult:
    """Outcome of one run: the final position, or the failure sentinel."""

    __slots__ = ("id", "timestamp", "position", "on_grid", "applied", "halted_at")

    def __init__(self, position, on_grid, applied=0, halted_at=None, id=None, timestamp=None):
        self.id = id or uuid.uuid4().hex
        self.timestamp = timestamp or format_timestamp()
        self.position = tuple(position)
        self.on_grid = on_grid
        self.applied = applied
        self.halted_at = halted_at

    @property
    def value(self):
        return self.position if self.on_grid else FAILURE_SENTINEL

    def __str__(self):
        if self.on_grid:
            return f"[{self.position[0]}, {self.position[1]}]"
        return "[-1,-1]"

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "result": str(self),
            "value": list(self.value),
            "position": list(self.position) if self.on_grid else None,
            "on_grid": self.on_grid,
            "applied": self.applied,
            "halted_at": self.halted_at,
        }


class SimulationSnapshot:
    __slots__ = ("timestamp", "state", "grid", "object")

    def __init__(self, state, grid, obj, timestamp=None):
        self.timestamp = timestamp or format_timestamp()
        self.state = state
        self.grid = grid
        self.object = obj

    def to_dict(self):
        return {
            "timestamp": self.timestamp,
            "state": self.state,
            "grid": {"width": self.grid[0], "height": self.grid[1]} if self.grid else None,
            "object": self.object.to_dict() if self.object else None,
        }
