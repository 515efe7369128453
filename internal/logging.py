import asyncio
import json
import os
import sys
import threading
import time
from datetime import datetime, timezone
from enum import IntEnum


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_logger = None
_logger_lock = threading.Lock()


def format_timestamp(epoch_s=None):
    """Format timestamp as ISO 8601 UTC with microseconds."""
    if epoch_s is None:
        epoch_s = time.time()
    dt = datetime.fromtimestamp(epoch_s, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


class StructuredLogger:
    """JSON-lines diagnostics on stderr; stdout stays reserved for results."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
            pass

    def is_enabled(self, level):
        return level >= self.level

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger


def level_from_name(name):
    """Map a config level name to LogLevel, accepting WARNING as WARN."""
    name = (name or "INFO").upper()
    if name == "WARNING":
        name = "WARN"
    return LogLevel[name]


_STOP = object()


class RunLogWriter:
    """Appends one JSON line per simulation run from a background task."""

    def __init__(self, file_path, queue_size=1000):
        self.path = file_path
        self.queue = asyncio.Queue(maxsize=queue_size)
        self._task = None
        self.written = 0
        self.dropped = 0

    def record(self, run):
        """Queue a run record; returns False when the queue is full."""
        try:
            self.queue.put_nowait({"timestamp": format_timestamp(), **run})
        except asyncio.QueueFull:
            self.dropped += 1
            return False
        return True

    async def start(self):
        if self._task:
            return
        dir_path = os.path.dirname(self.path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        self._task = asyncio.create_task(self._write_loop())

    async def stop(self):
        if not self._task:
            return
        await self.queue.put(_STOP)
        await self._task
        self._task = None

    def get_stats(self):
        return {"queued": self.queue.qsize(), "written": self.written, "dropped": self.dropped}

    async def _write_loop(self):
        with open(self.path, "a") as file:
            while True:
                run = await self.queue.get()
                if run is _STOP:
                    break
                file.write(json.dumps(run, default=str) + "\n")
                file.flush()
                self.written += 1
