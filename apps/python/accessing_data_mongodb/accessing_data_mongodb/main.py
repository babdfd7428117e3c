"""Entry point: configure logging and MongoDB, then run the demo once.

Run with:

    accessing-data-mongodb --uri mongodb://localhost:27017 --db test
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from loguru import logger

from customers_repo import CustomerRepository
from db_core import close_mongo_client, configure, ping

from .config import AppSettings
from .runner import run


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.info("Logger configured at {level} level", level=level.upper())


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reset the customer collection, seed two customers and query them."
    )
    parser.add_argument("--uri", help="MongoDB connection URI (overrides MONGO_URI)")
    parser.add_argument("--db", dest="db_name", help="Database name (overrides MONGO_DB_NAME)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


async def _run_app() -> None:
    try:
        await ping()
        await run(CustomerRepository())
    finally:
        close_mongo_client()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        app_settings = AppSettings(**({"log_level": args.log_level} if args.log_level else {}))
        _configure_logging(app_settings.log_level)
        mongo_settings = configure(uri=args.uri, db_name=args.db_name)
        logger.info("Using database {db}", db=mongo_settings.db_name)
        asyncio.run(_run_app())
    except Exception:
        logger.exception("Run aborted")
        return 1
    logger.info("Run completed")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
