"""Console front end: one configuration line in, one result line out."""

import sys

from core.errors import InitializationError, SimulationStateError
from internal.logging import get_logger
from parsing import parse_input
from simulation.engine import Simulation
from simulation.state import FAILURE_SENTINEL

INIT_CAPTION = "Input table size and object position. Ex: 4,4,2,2"
RUN_CAPTION = "Input simulation commands. Ex: 1,4,1,3,2,3,2,4,1,0"
FAILURE_LINE = "[{},{}]".format(*FAILURE_SENTINEL)


class ConsoleSession:
    def __init__(self, stdin=None, stdout=None, print_captions=True, simulation=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.print_captions = print_captions
        self.simulation = simulation or Simulation()
        self._log = get_logger()

    def _write(self, line):
        self.stdout.write(line + "\n")
        self.stdout.flush()

    def _prompt(self, caption):
        if self.print_captions:
            self._write(caption)
        return self.stdin.readline()

    def run(self):
        """Read setup and commands, print the outcome. Returns the printed line."""
        values = parse_input(self._prompt(INIT_CAPTION))
        try:
            self.simulation.init(values)
        except InitializationError as exc:
            self._log.error("Invalid table configuration", error=exc, values=values)
            self._write(FAILURE_LINE)
            return FAILURE_LINE

        indices = parse_input(self._prompt(RUN_CAPTION))
        try:
            line = str(self.simulation.run(indices))
        except SimulationStateError as exc:
            self._log.error("Simulation not ready", error=exc)
            line = FAILURE_LINE
        self._write(line)
        return line
