from __future__ import annotations

import argparse
import logging
import sys

from app.connections import close_mongo, get_database, init_mongo
from app.services.maintenance import purge_expired
from app.services.schema import initialize
from app.utils.base import BootstrapError
from app.utils.config import settings


logger = logging.getLogger("app.bootstrap")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="blog-bootstrap",
        description="Create the Blog API collections and indexes, optionally with sample data.",
    )
    parser.add_argument("--database", default=settings.mongo_db, help="Target database name")
    parser.add_argument("--seed", action="store_true", help="Insert the admin user, welcome blog and tags")
    parser.add_argument("--purge-expired", action="store_true", help="Delete expired sessions and reset tokens")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    init_mongo(db=args.database)
    try:
        database = get_database()
        report = initialize(database, seed=args.seed)
        if args.purge_expired:
            purge_expired(database)
    except BootstrapError as exc:
        logger.error("Setup of %s failed: %s", args.database, exc)
        return 1
    finally:
        close_mongo()

    logger.info("Database collections:")
    for name in report.collections:
        logger.info("  - %s", name)
    logger.info("MongoDB setup of %s completed successfully", report.database)
    return 0


if __name__ == "__main__":
    sys.exit(main())
