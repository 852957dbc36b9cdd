"""Repository layer for data access.

This layer hides Redis and the Steam Web API behind the protocols in
``steam_age.protocols``. The repositories are protocol-based (structural
typing), not inheritance-based.
"""

from steam_age.protocols import CreationStore, UpstreamResolver

from .redis_repository import RedisCreationRepository
from .steam_resolver import SteamProfileResolver

__all__ = [
    "CreationStore",
    "UpstreamResolver",
    "RedisCreationRepository",
    "SteamProfileResolver",
]
