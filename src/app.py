"""
Car Store Backend API Server
Core functionality: CRUD over car records stored in MongoDB
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, ALLOWED_METHODS, ALLOWED_HEADERS, REQUEST_TIMEOUT_SECONDS
from database.car_repository import CarRepository
from database.connection import init_database, close_database
from api.routes import health, cars
from services.cars_service import CarsService
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[CarRepository] = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        repository: Pre-built repository to serve from. When omitted, the
            lifespan connects to MongoDB and fails startup if the server
            does not answer a ping.
        timeout: Deadline in seconds for each storage call
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        if repository is not None:
            app.state.cars_service = CarsService(repository, timeout=timeout)
            yield
            return

        try:
            connection = await init_database()
        except Exception as e:
            logger.critical(f"Failed to connect to MongoDB: {e}")
            raise

        app.state.cars_service = CarsService(CarRepository(connection.collection), timeout=timeout)
        try:
            yield
        finally:
            await close_database(connection)

    app = FastAPI(
        title="Car Store Backend",
        description="Backend API for creating, reading, updating and deleting car records",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(cars.router, tags=["Cars"])

    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
