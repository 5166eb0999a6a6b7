#!/usr/bin/env python
"""
Load the lab data once and print the snapshot and latest news as JSON.

Reads sources from DATA_BASE_URL or DATA_ROOT (see labsite.core.config),
which makes it a quick way to check a data directory before deploying.

Usage:
    python scripts/dump_snapshot.py [--news-only] [--limit N]
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from labsite.core.config import get_settings
from labsite.core.logging_config import configure_logging
from labsite.ingest.fetcher import create_fetcher
from labsite.services.site import LoadStatus, SiteService


async def main(news_only: bool, limit: Optional[int]) -> int:
    """Run the load phase and dump the results."""
    settings = get_settings()
    configure_logging(settings)

    async with create_fetcher(settings) as fetcher:
        service = SiteService(fetcher, settings)
        result = await service.load()

    if result is not LoadStatus.READY:
        print(f"Error: {service.error_message}", file=sys.stderr)
        return 1

    output = {
        "news": [item.to_dict() for item in service.latest_news(limit)],
        "failed_sources": service.failed_sources(),
    }
    if not news_only:
        output["datasets"] = service.snapshot.to_dict()

    print(json.dumps(output, ensure_ascii=False, indent=2))

    failed = service.failed_sources()
    if failed:
        print(f"Warning: {len(failed)} sources fell back to defaults: {', '.join(failed)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Dump the loaded lab data snapshot")
    parser.add_argument("--news-only", action="store_true", help="Only print the latest news feed")
    parser.add_argument("--limit", type=int, default=None, help="Number of news items")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.news_only, args.limit)))
