"""Steam Age - creation time of Steam accounts, exact or interpolated.

Layers:
    - protocols: Interface contracts (CreationStore, UpstreamResolver)
    - repositories: Redis cache and Steam Web API implementations
    - services: Resolution logic and the interpolation estimator
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from steam_age.repositories import RedisCreationRepository, SteamProfileResolver
    from steam_age.services import ResolutionService

    service = ResolutionService.create(
        store=RedisCreationRepository.create(),
        resolver=SteamProfileResolver.create(),
    )
    result = await service.resolve(76561197960287930)
    ```

For HTTP API:
    ```python
    from steam_age.api.app import app
    ```
"""

__version__ = "0.1.0"

from steam_age.config import get_redis_client, settings
from steam_age.entities import CreationRecord, ResolutionEntity, ResolutionSource, UpstreamOutcome
from steam_age.exceptions import (
    InsufficientDataError,
    SteamAgeError,
    StoreConflictError,
    StoreError,
    StoreUnavailableError,
    UnresolvableError,
)
from steam_age.handlers import LookupHandler
from steam_age.protocols import CreationStore, UpstreamResolver
from steam_age.repositories import RedisCreationRepository, SteamProfileResolver
from steam_age.services import ResolutionService, estimate

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CreationStore",
    "UpstreamResolver",
    # Services (business logic)
    "ResolutionService",
    "estimate",
    # Handlers (HTTP)
    "LookupHandler",
    # Repositories (data access)
    "RedisCreationRepository",
    "SteamProfileResolver",
    # Entities (domain models)
    "CreationRecord",
    "ResolutionEntity",
    "ResolutionSource",
    "UpstreamOutcome",
    # Errors
    "SteamAgeError",
    "StoreError",
    "StoreConflictError",
    "StoreUnavailableError",
    "InsufficientDataError",
    "UnresolvableError",
]
