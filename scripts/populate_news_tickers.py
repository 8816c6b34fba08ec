"""Populate the document store with sample news tickers."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

load_dotenv()

from common.cli_helpers import setup_logging
from document_store.connection import get_store
from seed_content.seed import seed_news_tickers

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--backend",
        choices=["sql", "memory"],
        default="sql",
        help="Document store backend (sql reads DATABASE_URL)",
    )
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    ids = seed_news_tickers(get_store(args.backend, args.database_url))
    logger.info("Successfully populated %d news tickers", len(ids))


if __name__ == "__main__":
    main()
