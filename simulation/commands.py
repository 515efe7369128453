"""Commands accepted by the simulation, looked up by their numeric index."""

from enum import Enum
from types import MappingProxyType


class Action(Enum):
    QUIT = "quit"
    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"


class Command:
    __slots__ = ("_index", "_action")

    def __init__(self, index, action):
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_action", action)

    def __setattr__(self, name, value):
        raise AttributeError("Command is immutable")

    @property
    def index(self):
        return self._index

    @property
    def action(self):
        return self._action

    @property
    def name(self):
        return self._action.name

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self._index == other._index and self._action is other._action

    def __hash__(self):
        return hash((self._index, self._action))

    def __repr__(self):
        return f"Command({self._index}, {self._action.name})"


QUIT = Command(0, Action.QUIT)
MOVE_FORWARD = Command(1, Action.MOVE_FORWARD)
MOVE_BACKWARD = Command(2, Action.MOVE_BACKWARD)
ROTATE_CW = Command(3, Action.ROTATE_CW)
ROTATE_CCW = Command(4, Action.ROTATE_CCW)

COMMANDS = MappingProxyType({command.index: command for command in
                             (QUIT, MOVE_FORWARD, MOVE_BACKWARD, ROTATE_CW, ROTATE_CCW)})

# Actions routed to the object; anything else would target the grid.
OBJECT_ACTIONS = frozenset({Action.MOVE_FORWARD, Action.MOVE_BACKWARD, Action.ROTATE_CW, Action.ROTATE_CCW})


def find_by_index(index):
    """Return the Command with this index, or None if there is none."""
    if isinstance(index, bool):
        return None
    try:
        return COMMANDS.get(index)
    except TypeError:
        return None
