"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The Redis client is created here and passed explicitly to the
      repository; no module-level connection handle
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from steam_age.config import get_redis_client, settings
from steam_age.handlers import LookupHandler
from steam_age.repositories import RedisCreationRepository, SteamProfileResolver
from steam_age.services import ResolutionService

logger = structlog.get_logger()


def get_handler(request: Request) -> LookupHandler:
    """Dependency injection for LookupHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "lookup_handler", None)
    if handler is None:
        raise RuntimeError("LookupHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repository and resolver (data access)
    2. Service (business logic)
    3. Handler (HTTP endpoints) - app.state.lookup_handler

    Cleanup closes the HTTP client and the Redis connection pool.
    """
    if not settings.has_steam_api_key:
        logger.warning("STEAM_API_KEY is not set; every lookup will fall back to estimation")

    store = RedisCreationRepository.create(redis_client=get_redis_client())
    resolver = SteamProfileResolver.create()

    resolution_service = ResolutionService.create(store=store, resolver=resolver)
    lookup_handler = LookupHandler(resolution_service=resolution_service)

    app.state.lookup_handler = lookup_handler

    logger.info(
        "Resolution service initialized",
        key_prefix=settings.cache_key_prefix,
        cache_healthy=await store.health_check(),
    )

    yield

    await resolver.close()
    await store.close()
    del app.state.lookup_handler
    logger.info("Resolution service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[LookupHandler, Depends(get_handler)]
