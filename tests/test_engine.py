"""Unit tests for the Simulation engine."""

import io
import json

import pytest
from core.errors import InitializationError, SimulationStateError
from internal.logging import LogLevel, StructuredLogger
from simulation.engine import EngineState, Simulation
from simulation.state import FAILURE_SENTINEL, RunResult


def run(setup, command_indices):
    sim = Simulation()
    sim.init(setup)
    return sim.run(command_indices)


class TestSimulationLifecycle:
    """Tests for engine states and init."""

    def test_engine_creation(self):
        """Engine starts uninitialized."""
        sim = Simulation()
        assert sim.state == EngineState.UNINITIALIZED
        assert sim.grid is None

    def test_init_builds_grid_and_object(self, simulation):
        """init places a north facing object on the grid."""
        assert simulation.state == EngineState.READY
        assert (simulation.grid.width, simulation.grid.height) == (4, 4)
        assert simulation.shape.position == (2, 2)
        assert simulation.shape.orientation.name == "NORTH"
        assert simulation.grid.objects == (simulation.shape,)

    def test_init_ignores_extra_values(self):
        """Trailing values after x, y are ignored."""
        sim = Simulation()
        sim.init([5, 6, 1, 2, 99, 100])
        assert (sim.grid.width, sim.grid.height) == (5, 6)
        assert sim.shape.position == (1, 2)

    def test_init_accepts_off_grid_start(self):
        """An off-grid start is legal and reported at the end."""
        sim = Simulation()
        sim.init([4, 4, 7, 7])
        assert str(sim.run([])) == "[-1,-1]"

    def test_init_too_few_values(self):
        """init needs four integers."""
        sim = Simulation()
        with pytest.raises(InitializationError) as exc_info:
            sim.init([4, 4, 2])
        assert exc_info.value.context["values"] == [4, 4, 2]
        assert sim.state == EngineState.UNINITIALIZED

    def test_failed_reinit_discards_state(self, simulation):
        """A rejected init still drops the previous grid and object."""
        simulation.run([1])
        with pytest.raises(InitializationError):
            simulation.init([4, 4])
        assert simulation.state == EngineState.UNINITIALIZED
        assert simulation.grid is None
        assert simulation.shape is None
        with pytest.raises(SimulationStateError):
            simulation.run([1])

    @pytest.mark.parametrize("values", [[4, 4, 2.7, 2], [4.5, 4, 2, 2], [4, 4, "2", 2], [4, 4, True, 2]])
    def test_init_rejects_non_integers(self, values):
        """Non-integral values are rejected, not truncated."""
        sim = Simulation()
        with pytest.raises(InitializationError):
            sim.init(values)
        assert sim.state == EngineState.UNINITIALIZED

    def test_init_accepts_integral_floats(self):
        """2.0 is the integer 2."""
        sim = Simulation()
        sim.init([4.0, 4, 2, 2.0])
        assert sim.grid.width == 4
        assert sim.shape.position == (2, 2)

    def test_run_before_init(self):
        """run on an uninitialized engine is rejected."""
        with pytest.raises(SimulationStateError):
            Simulation().run([1])

    def test_run_finishes(self, simulation):
        """run leaves the engine finished."""
        simulation.run([1])
        assert simulation.state == EngineState.FINISHED

    def test_reinit_discards_state(self, simulation):
        """A second init fully replaces grid and object."""
        simulation.run([3, 1, 1])
        old_shape = simulation.shape
        simulation.init([4, 4, 2, 2])
        assert simulation.shape is not old_shape
        assert simulation.shape.orientation.name == "NORTH"
        assert str(simulation.run([1])) == "[2, 1]"

    def test_rerun_continues(self, simulation):
        """run without init continues from the last position and heading."""
        assert str(simulation.run([3])) == "[2, 2]"
        assert str(simulation.run([1])) == "[3, 2]"
        assert str(simulation.run([1])) == "[-1,-1]"
        assert str(simulation.run([2])) == "[3, 2]"

    def test_snapshot(self, simulation):
        """Snapshot reports grid and object."""
        data = simulation.get_snapshot().to_dict()
        assert data["state"] == "ready"
        assert data["grid"] == {"width": 4, "height": 4}
        assert data["object"] == {"x": 2, "y": 2, "orientation": "NORTH"}

    def test_snapshot_uninitialized(self):
        """Snapshot before init has no grid or object."""
        data = Simulation().get_snapshot().to_dict()
        assert data["state"] == "uninitialized"
        assert data["grid"] is None
        assert data["object"] is None


class TestScenarios:
    """Golden scenarios on a 4x4 grid starting at (2, 2)."""

    def test_full_rotation_cw(self):
        assert str(run([4, 4, 2, 2], [3, 3, 3, 3])) == "[2, 2]"

    def test_full_rotation_ccw(self):
        assert str(run([4, 4, 2, 2], [4, 4, 4, 4])) == "[2, 2]"

    def test_move_forward_backward(self):
        assert str(run([4, 4, 2, 2], [1, 1, 2, 2, 1, 1])) == "[2, 0]"

    def test_unexpected_command(self):
        assert str(run([4, 4, 2, 2], [1, 12, 2, 2, 1, 1])) == "[2, 1]"

    def test_task_example(self):
        assert str(run([4, 4, 2, 2], [1, 4, 1, 3, 2, 3, 2, 4, 1, 0])) == "[0, 1]"

    def test_fall_off_top(self):
        assert str(run([4, 4, 2, 2], [1, 1, 1])) == "[-1,-1]"

    def test_empty_commands(self):
        assert str(run([4, 4, 2, 2], [])) == "[2, 2]"


class TestRunSemantics:
    """Tests for halting and result reporting."""

    def test_quit_stops_processing(self, simulation):
        """Commands after QUIT are not applied."""
        result = simulation.run([1, 0, 1, 1])
        assert result.position == (2, 1)
        assert result.applied == 1
        assert result.halted_at == 1

    def test_unknown_halts_rest(self, simulation):
        """Only commands before an unknown index are applied."""
        result = simulation.run([3, 1, 7, 1, 1, 1])
        assert result.position == (3, 2)
        assert result.applied == 2
        assert result.halted_at == 2

    def test_unknown_logged(self, simulation):
        """Unknown indices produce a warning with index and position."""
        stream = io.StringIO()
        simulation._log = StructuredLogger(LogLevel.INFO, stream)
        simulation.run([1, 9])
        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        warning = next(r for r in records if r["level"] == "WARN")
        assert warning["index"] == 9
        assert warning["position"] == 1

    def test_debug_traces_each_command(self):
        """At DEBUG level every applied command is traced."""
        stream = io.StringIO()
        StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
        sim = Simulation()
        sim.init([4, 4, 2, 2])
        sim.run([1, 3])
        traces = [json.loads(line) for line in stream.getvalue().splitlines()]
        applied = [r for r in traces if r["msg"] == "command applied"]
        assert [r["command"] for r in applied] == ["MOVE_FORWARD", "ROTATE_CW"]
        assert applied[-1]["object"] == {"x": 2, "y": 1, "orientation": "EAST"}

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
    def test_boundary_law(self, x, y):
        """Off-grid final positions report the sentinel."""
        result = run([4, 4, x, y], [])
        assert result.on_grid is False
        assert result.value == FAILURE_SENTINEL
        assert str(result) == "[-1,-1]"

    def test_negative_zero_edge(self):
        """Corners are on the grid."""
        result = run([4, 4, 0, 0], [])
        assert result.value == (0, 0)
        assert str(result) == "[0, 0]"


class TestRunResult:
    """Tests for RunResult."""

    def test_to_dict_on_grid(self):
        result = RunResult((1, 2), True, applied=3)
        d = result.to_dict()
        assert d["result"] == "[1, 2]"
        assert d["position"] == [1, 2]
        assert d["value"] == [1, 2]
        assert d["applied"] == 3

    def test_to_dict_off_grid(self):
        result = RunResult((5, 2), False)
        d = result.to_dict()
        assert d["result"] == "[-1,-1]"
        assert d["position"] is None
        assert d["value"] == [-1, -1]

    def test_result_has_id(self):
        assert RunResult((0, 0), True).id != RunResult((0, 0), True).id
