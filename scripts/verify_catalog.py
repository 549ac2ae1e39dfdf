#!/usr/bin/env python3
"""
Check that every icon in the built-in catalog exists upstream.

This script fetches each catalog icon for one weight from the phosphor-icons/core
GitHub repository and reports the ones that are missing or unreachable, so catalog
edits can be checked before release.
"""

import argparse
import sys
from pathlib import Path

import anyio

sys.path.insert(0, str(Path(__file__).parent.parent))

from phosphor.assets import AssetFetcher, AssetOutcome, icon_url
from phosphor.catalog import default_catalog
from phosphor.config import WEIGHTS


async def verify_catalog(catalog, weight: str, fetcher: AssetFetcher = None) -> dict:
    """Fetch every catalog icon for a weight.

    Args:
        catalog: Catalog to check
        weight: Icon weight to check (e.g., "bold")
        fetcher: AssetFetcher to use (a default one when omitted)

    Returns:
        Mapping of icon name to AssetOutcome, in catalog order
    """
    fetcher = fetcher or AssetFetcher()
    outcomes = {}
    for entry in catalog:
        response = await fetcher.fetch(icon_url(entry.name, weight))
        outcomes[entry.name] = response.outcome
    return outcomes


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--weight", choices=WEIGHTS, default="regular")
    args = parser.parse_args(argv)

    catalog = default_catalog()
    print(f"Checking {len(catalog)} catalog icons ({args.weight})...")

    outcomes = anyio.run(verify_catalog, catalog, args.weight)
    failed = {name: outcome for name, outcome in outcomes.items() if outcome is not AssetOutcome.OK}

    for name, outcome in failed.items():
        print(f"  {name}: {outcome.value}", file=sys.stderr)

    if failed:
        print(f"\n{len(failed)} of {len(catalog)} icons did not resolve.", file=sys.stderr)
        return 1

    print(f"\nSuccess! All {len(catalog)} icons resolve for weight '{args.weight}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
