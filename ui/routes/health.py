"""Liveness routes."""

from fastapi import APIRouter

from internal.logging import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# These will be set by app.py
_simulation = None
_run_log = None


def init(simulation, run_log):
    """Initialize with simulation and run-log references."""
    global _simulation, _run_log
    _simulation = simulation
    _run_log = run_log


@router.get("/heartbeat")
async def heartbeat():
    """Lightweight heartbeat for frequent polling."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "engine_state": _simulation.state,
        "run_log": _run_log.get_stats(),
    }
