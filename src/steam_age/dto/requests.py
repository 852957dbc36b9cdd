"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

MAX_STEAMID64 = 2**63 - 1


class LookupQuery(BaseModel):
    """Parsed ``/lookup`` query.

    The raw query value stays a string so malformed ids reach the handler and
    get the service's own 400 message instead of FastAPI's validation body.
    """

    steamid64: int = Field(..., description="The account identifier", ge=0, le=MAX_STEAMID64)

    @classmethod
    def parse(cls, raw: str) -> "LookupQuery":
        """Parse a raw query value.

        Args:
            raw: The ``steamid64`` query parameter as received

        Returns:
            LookupQuery with the integer identifier

        Raises:
            ValueError: If the value is not a decimal integer in range
                (pydantic.ValidationError is a ValueError)
        """
        raw = raw.strip()
        if not raw.isascii() or not raw.isdigit():
            raise ValueError(f"Not a decimal identifier: {raw!r}")
        return cls(steamid64=int(raw))
