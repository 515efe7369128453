from core.errors import InitializationError, SimulationStateError
from internal.logging import LogLevel, get_logger
from simulation import commands
from simulation.entities import Rectangle
from simulation.grid import Grid
from simulation.state import RunResult, SimulationSnapshot

INIT_ARITY = 4


class EngineState:
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    FINISHED = "finished"


class Simulation:
    """Single object on a single grid, driven by a sequence of command indices.

    ``init`` builds a fresh grid and object; ``run`` applies commands in order
    and reports the final position, or the failure sentinel when the object
    has left the grid. Repeated ``run`` calls continue from the state the
    previous run left behind.
    """

    def __init__(self):
        self._log = get_logger()
        self._state = EngineState.UNINITIALIZED
        self.grid = None
        self.shape = None

    @property
    def state(self):
        return self._state

    def init(self, values):
        """Create the grid and object from (width, height, x, y, ...).

        Prior state is discarded first, so a rejected init leaves the
        engine uninitialized rather than running the previous object.
        """
        self.grid = None
        self.shape = None
        self._state = EngineState.UNINITIALIZED

        values = list(values)
        if len(values) < INIT_ARITY:
            raise InitializationError(f"init needs {INIT_ARITY} integers (width, height, x, y), got {len(values)}",
                                      values=values)
        width, height, x, y = (_as_integer(value, values) for value in values[:INIT_ARITY])

        grid = Grid(width, height)
        shape = Rectangle((x, y))
        grid.add_object(shape)

        # a single object for now; selecting among several would need a new command
        self.grid = grid
        self.shape = shape
        self._state = EngineState.READY
        self._log.debug("simulation init", grid=[width, height], object=shape.to_state().to_dict())

    def run(self, indices):
        """Apply command indices in order, then report the outcome."""
        if self._state == EngineState.UNINITIALIZED:
            raise SimulationStateError("run called before init", state=self._state)

        self._state = EngineState.RUNNING
        applied = 0
        halted_at = None
        for position, index in enumerate(indices):
            command = commands.find_by_index(index)

            if command is None:
                self._log.warn("Unknown command, interrupting simulation", index=index, position=position)
                halted_at = position
                break

            if command is commands.QUIT:
                halted_at = position
                break

            self._execute(command)
            applied += 1

        self._state = EngineState.FINISHED
        result = RunResult(self.shape.position, self.is_object_on_grid(), applied, halted_at)
        self._log.info("simulation run", result=str(result), applied=applied, halted_at=halted_at)
        return result

    def is_object_on_grid(self):
        return self.grid.contains(self.shape.position)

    def get_snapshot(self):
        if self._state == EngineState.UNINITIALIZED:
            return SimulationSnapshot(self._state, None, None)
        return SimulationSnapshot(self._state, (self.grid.width, self.grid.height), self.shape.to_state())

    def _execute(self, command):
        # object commands go to the shape; grid-level commands would be handled here
        if command.action in commands.OBJECT_ACTIONS:
            self.shape.execute(command)
            if self._log.is_enabled(LogLevel.DEBUG):
                self._log.debug("command applied", command=command.name, object=self.shape.to_state().to_dict())


def _as_integer(value, values):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InitializationError(f"init value {value!r} is not an integer", values=values)
