"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from internal.logging import RunLogWriter, StructuredLogger, get_logger, level_from_name
from simulation.engine import Simulation
from ui.routes import health, simulation as simulation_routes


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=level_from_name(config.log_level_name))
    logger_instance = get_logger()

    simulation = Simulation()
    run_log = RunLogWriter(file_path=config.logging.file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0")
        await run_log.start()
        yield
        logger_instance.info("Application shutting down")
        await run_log.stop()

    app = FastAPI(
        title="Grid Simulator",
        version="1.0.0",
        description="single object grid movement simulation",
        lifespan=lifespan,
    )

    simulation_routes.init(simulation, run_log)
    health.init(simulation, run_log)

    app.include_router(simulation_routes.router)
    app.include_router(health.router)

    app.state.simulation = simulation
    app.state.run_log = run_log
    return app
