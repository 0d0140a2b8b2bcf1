import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import requests

from agency_listings.core.classify import classify
from agency_listings.core.storage import append_timestamp, write_output
from agency_listings.suppliers.agency import AgencyClient, FeedError, default_suppliers, fetch_feeds
from agency_listings.utils.formatting import count_table, total_items
from agency_listings.utils.images import ensure_image
from runner import config

log = logging.getLogger("runner")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Fetch agent listings into a JSON file for the site.")
    ap.add_argument("--agent-key", default=config.AGENT_KEY, help="operator key (env AGENT_KEY)")
    ap.add_argument("--output", type=Path, default=config.OUTPUT_PATH, help="output JSON path")
    ap.add_argument("--raw", action="store_true",
                    help="write the six raw category arrays instead of classified buckets")
    ap.add_argument("--no-timestamp", action="store_true", help="skip the fetch timestamp log")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def run(args: argparse.Namespace, session: requests.Session | None = None) -> int:
    client = AgencyClient(
        args.agent_key,
        session,
        base_url=config.BASE_URL,
        owner_rt=config.OWNER_RT,
        page_size=config.PAGE_SIZE,
        referer=config.AGENT_REFERER,
        origin=config.SITE_ORIGIN,
        timeout=config.HTTP_TIMEOUT,
    )

    # 1) Fetch every feed concurrently
    raw_feeds = fetch_feeds(default_suppliers(client), max_workers=config.FETCH_WORKERS)
    feeds = {name: [ensure_image(it) for it in items] for name, items in raw_feeds.items()}
    log.info("Feed sizes:\n%s", count_table(feeds))

    # 2) Classify
    output = feeds if args.raw else classify(feeds)
    if not args.raw:
        log.info("Buckets:\n%s", count_table(output))

    # 3) Persist
    if not args.no_timestamp:
        append_timestamp(config.TIMESTAMP_LOG)
    write_output(args.output, output)
    log.info("Wrote %d listings to %s", total_items(output), args.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        return run(args)
    except (FeedError, requests.RequestException, ValueError, OSError) as e:
        log.error("Error fetching listings: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
