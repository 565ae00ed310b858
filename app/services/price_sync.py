"""Price sync: refresh every product's lowest price from the shopping search provider."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.models import Product
from app.schemas.search import ItemDto
from app.services.products import update_by_search
from app.services.search import SearchNotConfiguredError, SearchServiceError, search_items

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, "Settings"], Awaitable[list[ItemDto]]]


async def run_price_sync(
    session: Session,
    settings: "Settings",
    search: SearchFn = search_items,
) -> tuple[int, int]:
    """
    Search each product by title and store the first result's lprice.

    Returns (updated, failed). A product whose search fails or returns nothing
    counts as failed and the run continues. Missing search credentials abort
    the run with SearchNotConfiguredError.
    """
    if not settings.PRICE_SYNC_ENABLED:
        logger.info("Price sync is disabled (PRICE_SYNC_ENABLED=false); skipping.")
        return (0, 0)

    product_ids = [pid for (pid,) in session.query(Product.id).order_by(Product.id).all()]
    updated = 0
    failed = 0
    for index, product_id in enumerate(product_ids):
        if index and settings.PRICE_SYNC_DELAY_SEC:
            await asyncio.sleep(settings.PRICE_SYNC_DELAY_SEC)
        product = session.get(Product, product_id)
        if product is None:
            continue
        try:
            items = await search(product.title, settings)
        except SearchNotConfiguredError:
            raise
        except SearchServiceError as e:
            logger.warning("Price sync search failed: product_id=%s error=%s", product_id, e.message)
            failed += 1
            continue
        if not items:
            logger.warning("Price sync found no items: product_id=%s", product_id)
            failed += 1
            continue
        update_by_search(session, product_id, items[0])
        updated += 1

    logger.info("Price sync run: products=%s updated=%s failed=%s", len(product_ids), updated, failed)
    return (updated, failed)
