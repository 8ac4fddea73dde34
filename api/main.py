"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.routes import blackjack, craps, games, roulette, simulator, slots
from casino_math.errors import InvalidParameterError, UnknownGameError
from config import config

logger = logging.getLogger("house_edge.api")

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[f"{config.rate_limit.requests_per_minute}/minute"],
)


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


def _invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    """Reject out-of-range calculator input."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "parameter": exc.name},
    )


def _unknown_game_handler(request: Request, exc: UnknownGameError) -> JSONResponse:
    """Unknown variant, strategy or profile key."""
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup and shutdown."""
    configure_logging()
    logger.info("House Edge Visualizer started")
    yield


app = FastAPI(
    title="House Edge Visualizer",
    description="Casino house edge, expected value and bankroll simulation API",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan,
)

# Add rate limiter to app state and exception handlers
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(InvalidParameterError, _invalid_parameter_handler)
app.add_exception_handler(UnknownGameError, _unknown_game_handler)

# Apply the default limit to every route
app.add_middleware(SlowAPIMiddleware)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
@limiter.limit(f"{config.rate_limit.requests_per_minute}/minute")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(games.router, prefix="/api/games", tags=["games"])
app.include_router(roulette.router, prefix="/api/roulette", tags=["roulette"])
app.include_router(blackjack.router, prefix="/api/blackjack", tags=["blackjack"])
app.include_router(slots.router, prefix="/api/slots", tags=["slots"])
app.include_router(craps.router, prefix="/api/craps", tags=["craps"])
app.include_router(simulator.router, prefix="/api/simulator", tags=["simulator"])
