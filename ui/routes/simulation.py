"""Simulation control routes."""

import asyncio
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from core.errors import InitializationError, SimulationStateError
from internal.logging import get_logger
from parsing import parse_input

router = APIRouter(prefix="/api/v1/simulation", tags=["simulation"])

# These will be set by app.py
_simulation = None
_run_log = None
_lock = None


def init(simulation, run_log):
    """Initialize with simulation and run-log references."""
    global _simulation, _run_log, _lock
    _simulation = simulation
    _run_log = run_log
    _lock = asyncio.Lock()


class InitRequest(BaseModel):
    values: Optional[List[int]] = None
    input: Optional[str] = None


class RunRequest(BaseModel):
    commands: Optional[List[int]] = None
    input: Optional[str] = None


def _values(numbers, raw):
    return list(numbers) if numbers is not None else parse_input(raw)


@router.post("/init")
async def init_simulation(request: InitRequest):
    """Create a fresh grid and object."""
    values = _values(request.values, request.input)
    async with _lock:
        try:
            _simulation.init(values)
        except InitializationError as exc:
            get_logger().warn("init rejected", error=exc)
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.to_dict())
        return _simulation.get_snapshot().to_dict()


@router.post("/run")
async def run_simulation(request: RunRequest):
    """Apply a command sequence and report the outcome."""
    indices = _values(request.commands, request.input)
    async with _lock:
        try:
            result = _simulation.run(indices)
        except SimulationStateError as exc:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.to_dict())
    payload = result.to_dict()
    _run_log.record({"commands": indices, **payload})
    return payload


@router.get("/state")
async def state():
    """Current grid and object state."""
    async with _lock:
        return _simulation.get_snapshot().to_dict()
