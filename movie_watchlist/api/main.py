"""
FastAPI application entry point for the Movie Watchlist API.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_watchlist import __version__
from movie_watchlist.api.config import get_api_host, get_api_port, get_log_level
from movie_watchlist.api.routers import users, movies, watchlist, system
from movie_watchlist.core.errors import (
    WatchlistError,
    ValidationError,
    Conflict,
    NotFound,
    Unauthorized,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: 422,
    NotFound: 404,
    Conflict: 409,
    Unauthorized: 401,
}

app = FastAPI(
    title="Movie Watchlist API",
    description="REST API for users, a movie catalog and per-user watchlists",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(movies.router)
app.include_router(watchlist.router)
app.include_router(system.router)


@app.exception_handler(WatchlistError)
async def watchlist_error_handler(request: Request, exc: WatchlistError):
    """Turn an operation failure into a JSON error response."""
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Watchlist API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run():
    """Run the API with uvicorn using environment configuration."""
    import uvicorn
    from movie_watchlist.utils.logging_config import configure_api_logging

    configure_api_logging(level=get_log_level())
    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
