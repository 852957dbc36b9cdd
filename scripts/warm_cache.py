#!/usr/bin/env python3
"""
Warm the creation-time cache.

Resolves identifiers one at a time through the resolution service, so every
public profile among them is looked up in the Steam Web API and cached.
Private profiles are estimated (if enough data exists) but never cached.

Usage:
    python scripts/warm_cache.py 76561197960287930 76561197960265728
    python scripts/warm_cache.py --file ids.txt
"""

import argparse
import asyncio
from pathlib import Path

from steam_age.config import settings
from steam_age.exceptions import UnresolvableError
from steam_age.logging_config import configure_logging
from steam_age.repositories import RedisCreationRepository, SteamProfileResolver
from steam_age.services import ResolutionService


def read_identifiers(values: list[str], file: Path | None) -> list[int]:
    """Collect identifiers from arguments and an optional file (one per line, # comments)."""
    raw = list(values)
    if file is not None:
        for line in file.read_text().splitlines():
            line = line.split("#", 1)[0].strip()
            if line:
                raw.append(line)
    return [int(value) for value in raw]


async def warm(identifiers: list[int]) -> int:
    """Resolve each identifier and print the outcome.

    Returns:
        Number of identifiers that resolved to an exact value.
    """
    store = RedisCreationRepository.create()
    resolver = SteamProfileResolver.create()
    service = ResolutionService.create(store=store, resolver=resolver)

    exact = 0
    try:
        for identifier in identifiers:
            try:
                result = await service.resolve(identifier)
            except UnresolvableError as e:
                print(f"  ✗ {identifier}: {e.reason}")
                continue
            if result.is_exact:
                exact += 1
                print(f"  ✓ {identifier}: {result.created_at} ({result.source.value})")
            else:
                print(f"  ~ {identifier}: {result.created_at} ± {result.error_margin}s (estimate)")
    finally:
        await resolver.close()
        await store.close()

    return exact


def main() -> None:
    """Parse arguments and warm the cache."""
    parser = argparse.ArgumentParser(description="Warm the steamid64 creation-time cache")
    parser.add_argument("ids", nargs="*", help="steamid64 values to resolve")
    parser.add_argument("--file", type=Path, help="file with one steamid64 per line")
    args = parser.parse_args()

    configure_logging(settings)
    identifiers = read_identifiers(args.ids, args.file)
    if not identifiers:
        parser.error("no identifiers given")

    exact = asyncio.run(warm(identifiers))
    print(f"\n{exact}/{len(identifiers)} identifiers resolved exactly")


if __name__ == "__main__":
    main()
