from typing import Any

from fastapi import FastAPI

from steam_age import __version__
from steam_age.api.dependencies import HandlerDep, lifespan
from steam_age.config import settings
from steam_age.dto import HealthCheckResponse, LookupResponse, StatsResponse
from steam_age.logging_config import configure_logging

configure_logging(settings)

app = FastAPI(
    title="Steam Account Age API",
    description="Creation time of Steam accounts, exact for public profiles and interpolated otherwise",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Steam Account Age API",
        "version": __version__,
        "endpoints": {
            "lookup": "/lookup?steamid64=<id>",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/lookup", response_model=LookupResponse)
async def lookup(handler: HandlerDep, steamid64: str = "") -> LookupResponse:
    """
    Resolve the creation time of a Steam account.

    Args:
        steamid64: The account's 64-bit Steam ID.

    Returns:
        Creation time with its error margin (0 when exact).
    """
    return await handler.lookup(steamid64)


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/stats", response_model=StatsResponse)
async def stats(handler: HandlerDep) -> StatsResponse:
    """Cache size and resolution counters."""
    return await handler.get_stats()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "steam_age.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
