import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence
from abc import ABC, abstractmethod

from playwright.async_api import Locator, Page

log = logging.getLogger(__name__)

PRICE_NOT_AVAILABLE = "not available"


@dataclass
class Product:
    title: str
    price: str = ""


async def find_first_available(page: Page, selectors: Sequence[str]) -> Optional[Locator]:
    """Return a locator for the first selector that matches anything, or None."""
    for sel in selectors:
        locator = page.locator(sel)
        if await locator.count() > 0:
            return locator
    return None


async def extract(title_locator: Optional[Locator], price_locator: Optional[Locator],
                  max_products: int = 5) -> list[Product]:
    """Read up to max_products title/price pairs concurrently.

    A failing price read degrades to PRICE_NOT_AVAILABLE for that item only.
    A failing title read propagates.
    """
    title_count = await title_locator.count() if title_locator is not None else 0
    if title_count == 0:
        log.warning("No product titles found - check for changes in selectors")
        return []

    # Price is optional on result cards
    price_count = await price_locator.count() if price_locator is not None else 0
    n = min(title_count, max_products)

    async def read_item(i: int) -> Product:
        title = await title_locator.nth(i).inner_text()
        price = ""
        if price_locator is not None and i < price_count:
            try:
                price = await price_locator.nth(i).inner_text()
            except Exception:
                log.warning(f"Could not extract price for product {i + 1}")
                price = PRICE_NOT_AVAILABLE
        return Product(title=title.strip(), price=price.strip())

    return list(await asyncio.gather(*(read_item(i) for i in range(n))))


class BaseScraper(ABC):
    title_selectors: Sequence[str] = ()
    price_selectors: Sequence[str] = ()

    def __init__(self, page: Page):
        self.page = page

    @abstractmethod
    async def search_product(self, query: str) -> None:
        pass

    async def extract_products(self, max_products: int = 5) -> list[Product]:
        title_locator = await find_first_available(self.page, self.title_selectors)
        price_locator = await find_first_available(self.page, self.price_selectors)
        return await extract(title_locator, price_locator, max_products)
