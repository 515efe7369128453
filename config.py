import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("debug",)

    def __init__(self, debug=False):
        self.debug = debug


class ConsoleConfig:
    __slots__ = ("print_captions",)

    def __init__(self, print_captions=True):
        self.print_captions = print_captions


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "file")

    def __init__(self, level="INFO", file="logs/runs.log"):
        self.level = level
        self.file = file


class Config:
    __slots__ = ("simulation", "console", "server", "logging")

    def __init__(self, simulation=None, console=None, server=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.console = console or ConsoleConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            ConsoleConfig(**d.get("console", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )

    @property
    def log_level_name(self):
        # debug mode traces object state after every command
        return "DEBUG" if self.simulation.debug else self.logging.level


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
