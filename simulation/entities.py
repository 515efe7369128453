from core.errors import CommandDispatchError
from simulation.commands import Action
from simulation.geometry import Orientation, Vector2
from simulation.state import ObjectState


class MovableObject:
    """A rigid object on the grid, facing one of the four compass directions."""

    def __init__(self, position, orientation=None):
        self.position = Vector2(*position)
        self.orientation = orientation.copy() if orientation else Orientation.north()
        self._handlers = {
            Action.MOVE_FORWARD: self.move_forward,
            Action.MOVE_BACKWARD: self.move_backward,
            Action.ROTATE_CW: self.rotate_cw,
            Action.ROTATE_CCW: self.rotate_ccw,
        }

    def execute(self, command):
        """Apply the operation named by command.action."""
        handler = self._handlers.get(command.action)
        if handler is None:
            raise CommandDispatchError(f"{type(self).__name__} cannot execute {command.name}",
                                       action=command.action)
        handler()

    def move_forward(self):
        self.position.shift(self.orientation.x, self.orientation.y)

    def move_backward(self):
        self.position.shift(-self.orientation.x, -self.orientation.y)

    def rotate_cw(self):
        self.orientation.rotate_cw()

    def rotate_ccw(self):
        self.orientation.rotate_ccw()

    def to_state(self):
        """Immutable snapshot for logging and API responses."""
        return ObjectState(self.position.x, self.position.y, self.orientation.name)

    def __repr__(self):
        return f"{type(self).__name__}(position={self.position}, orientation={self.orientation.name})"


class Rectangle(MovableObject):
    """The shape placed by the simulation."""
