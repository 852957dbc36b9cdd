"""Steam Web API implementation of UpstreamResolver.

Looks up ``timecreated`` through ``ISteamUser/GetPlayerSummaries/v2``. The
field is only present for public profiles; anything else (private profile,
unknown id, non-2xx status) is reported as NOT_FOUND, while network errors,
timeouts and non-JSON bodies are TRANSPORT_ERROR.
"""

import httpx
import structlog

from steam_age.config import settings
from steam_age.entities import UpstreamOutcome

logger = structlog.get_logger()

PLAYER_SUMMARIES_PATH = "/ISteamUser/GetPlayerSummaries/v2/"


def extract_timecreated(body: object) -> int | None:
    """Read ``response.players[0].timecreated`` from a summaries payload.

    Args:
        body: Decoded JSON body

    Returns:
        The creation time, or None if the field is absent or not an integer
    """
    try:
        value = body["response"]["players"][0]["timecreated"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError):
        return None
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class SteamProfileResolver:
    """Steam Web API implementation of UpstreamResolver protocol.

    This class satisfies the UpstreamResolver protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        resolver = SteamProfileResolver.create(api_key="...")
        outcome = await resolver.resolve(76561197960287930)
        if outcome.is_found:
            print(outcome.created_at)
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Steam resolver.

        Args:
            api_key: Steam Web API key. Defaults to settings.steam_api_key.
            base_url: API base URL. Defaults to settings.steam_api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            client: Pre-built HTTP client (used by tests).
        """
        self._api_key = api_key if api_key is not None else settings.steam_api_key
        self._base_url = (base_url or settings.steam_api_base_url).rstrip("/")
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "SteamProfileResolver":
        """Factory method to create SteamProfileResolver with defaults.

        Args:
            api_key: Steam Web API key. If None, uses settings.
            base_url: API base URL. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured SteamProfileResolver
        """
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    async def resolve(self, identifier: int) -> UpstreamOutcome:
        """Look up the creation time of one profile.

        Args:
            identifier: The steamid64 to look up

        Returns:
            UpstreamOutcome describing the result; never raises
        """
        url = f"{self._base_url}{PLAYER_SUMMARIES_PATH}"
        params = {"key": self._api_key, "steamids": str(identifier)}

        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(
                "Steam API request failed",
                steamid64=identifier,
                error_type=type(e).__name__,
            )
            return UpstreamOutcome.transport_error(f"Could not GET Steam API: {type(e).__name__}")

        if not response.is_success:
            logger.info("Steam API returned error status", steamid64=identifier, status=response.status_code)
            return UpstreamOutcome.not_found(f"Steam API status {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            logger.warning("Steam API response is not JSON", steamid64=identifier)
            return UpstreamOutcome.transport_error("Steam API response is not JSON")

        timecreated = extract_timecreated(body)
        if timecreated is None:
            logger.debug("Profile has no public creation time", steamid64=identifier)
            return UpstreamOutcome.not_found("timecreated not present")

        return UpstreamOutcome.found(timecreated)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
