"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
The resolution service depends only on these, so the Redis repository
and the Steam resolver can be replaced by in-memory fakes in tests.

Usage:
    ```python
    from steam_age.protocols import CreationStore, UpstreamResolver

    store: CreationStore = RedisCreationRepository.create()
    resolver: UpstreamResolver = SteamProfileResolver.create()
    ```
"""

from .creation_store import CreationStore
from .upstream_resolver import UpstreamResolver

__all__ = [
    "CreationStore",
    "UpstreamResolver",
]
