"""
CLI entrypoint for the price sync job. Run from cron, e.g.:

  python -m app.sync

Or daily at 01:00: 0 1 * * * cd /path/to/selectshop && .venv/bin/python -m app.sync
"""

import asyncio
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.price_sync import run_price_sync

logger = logging.getLogger(__name__)


def main() -> int:
    """Run price sync: refresh lprice of every product from the search provider."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    db = SessionLocal()
    try:
        updated, failed = asyncio.run(run_price_sync(db, settings))
        logger.info("Price sync completed: updated=%s failed=%s", updated, failed)
        return 0
    except Exception as e:
        logger.exception("Price sync job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
