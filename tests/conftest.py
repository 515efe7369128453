"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, LoggingConfig
from internal.logging import LogLevel, StructuredLogger
from simulation.engine import Simulation
from simulation.entities import MovableObject
from simulation.grid import Grid
from ui.app import create_app


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep diagnostics at INFO for every test."""
    StructuredLogger.configure(min_level=LogLevel.INFO)
    yield
    StructuredLogger.configure(min_level=LogLevel.INFO)


@pytest.fixture
def grid():
    """Create a test grid."""
    return Grid(width=4, height=4)


@pytest.fixture
def shape():
    """Create a test object in the middle of a 4x4 grid."""
    return MovableObject((2, 2))


@pytest.fixture
def simulation():
    """Simulation initialized with the 4,4,2,2 setup."""
    sim = Simulation()
    sim.init([4, 4, 2, 2])
    return sim


@pytest.fixture
def app_config(tmp_path):
    """Config writing the run log under tmp_path."""
    return Config(logging=LoggingConfig(file=str(tmp_path / "runs.log")))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
