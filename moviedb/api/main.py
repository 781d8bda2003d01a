"""
FastAPI application entry point for the movie database API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviedb import __version__
from moviedb.api.config import (
    get_api_host,
    get_api_port,
    get_auto_create_tables,
    get_log_file,
    get_log_level,
)
from moviedb.api.dependencies import get_database
from moviedb.api.errors import register_error_handlers
from moviedb.api.routers import movies, system
from moviedb.database.init_db import init_database
from moviedb.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and the database on startup, release the pool on shutdown."""
    setup_logging(log_file=get_log_file(), level=get_log_level())

    db_manager = get_database()
    if get_auto_create_tables():
        init_database(db_manager=db_manager)
    logger.info(f"Movie API {__version__} started")

    yield

    db_manager.close()
    logger.info("Movie API stopped")


app = FastAPI(
    title="Movie Database API",
    description="REST API for creating, reading, updating, deleting and listing movies",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Database API",
        "docs": "/docs",
        "health": "/healthcheck",
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
