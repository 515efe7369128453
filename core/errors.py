"""Simulation errors with tracking IDs."""

import uuid

from internal.logging import format_timestamp


class BaseSimError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = uuid.uuid4().hex
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "type": type(self).__name__,
            "msg": self.args[0] if self.args else "",
            "context": self.context,
        }


class InitializationError(BaseSimError):
    """Init received too few values to build the grid and the object."""

    def __init__(self, message, values=None, **kwargs):
        context = kwargs.pop("context", {})
        if values is not None:
            context["values"] = list(values)
        super().__init__(message, context=context, **kwargs)


class SimulationStateError(BaseSimError):
    """Operation not allowed in the current engine state."""

    def __init__(self, message, state=None, **kwargs):
        context = kwargs.pop("context", {})
        if state:
            context["state"] = state
        super().__init__(message, context=context, **kwargs)


class CommandDispatchError(BaseSimError):
    """An object has no handler for the requested action."""

    def __init__(self, message, action=None, **kwargs):
        context = kwargs.pop("context", {})
        if action is not None:
            context["action"] = str(action)
        super().__init__(message, context=context, **kwargs)
