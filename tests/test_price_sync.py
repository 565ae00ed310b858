"""Tests for app.services.price_sync: lowest-price refresh from search results."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

from app.models import Product
from app.schemas.search import ItemDto
from app.services.price_sync import run_price_sync
from app.services.search import SearchNotConfiguredError, SearchServiceError
from support import DatabaseTestCase


def _settings(enabled: bool = True) -> MagicMock:
    settings = MagicMock()
    settings.PRICE_SYNC_ENABLED = enabled
    settings.PRICE_SYNC_DELAY_SEC = 0
    return settings


class TestRunPriceSync(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.make_user("alice")
        self.bob = self.make_user("bobby")
        self.p1 = self.make_product(self.alice, title="ipad", lprice=1000)
        self.p2 = self.make_product(self.bob, title="kettle", lprice=500)

    def _lprice(self, product: Product) -> int:
        self.db.expire_all()
        return self.db.get(Product, product.id).lprice

    def test_disabled_does_nothing(self) -> None:
        search = AsyncMock()
        self.assertEqual(asyncio.run(run_price_sync(self.db, _settings(enabled=False), search)), (0, 0))
        search.assert_not_called()

    def test_updates_every_product_from_first_result(self) -> None:
        async def search(query: str, settings: object) -> list[ItemDto]:
            prices = {"ipad": [900, 1200], "kettle": [450]}
            return [ItemDto(title=query, lprice=p) for p in prices[query]]

        self.assertEqual(asyncio.run(run_price_sync(self.db, _settings(), search)), (2, 0))
        self.assertEqual(self._lprice(self.p1), 900)
        self.assertEqual(self._lprice(self.p2), 450)

    def test_failures_are_counted_and_skipped(self) -> None:
        async def search(query: str, settings: object) -> list[ItemDto]:
            if query == "ipad":
                raise SearchServiceError("Search provider returned status 500.", status_code=500)
            return []

        self.assertEqual(asyncio.run(run_price_sync(self.db, _settings(), search)), (0, 2))
        self.assertEqual(self._lprice(self.p1), 1000)
        self.assertEqual(self._lprice(self.p2), 500)

    def test_missing_configuration_aborts(self) -> None:
        search = AsyncMock(side_effect=SearchNotConfiguredError("not configured"))
        with self.assertRaises(SearchNotConfiguredError):
            asyncio.run(run_price_sync(self.db, _settings(), search))
