import asyncio
import logging
import sys

from playwright.async_api import async_playwright

from config import HEADLESS, MAX_PRODUCTS, TEXTS
from scrapers import MercadoLibreScraper, Product

log = logging.getLogger(__name__)


def log_products(products: list[Product]):
    if not products:
        log.info("No products found")
        return

    log.info(f"First {len(products)} products with titles and prices:")
    for i, product in enumerate(products, 1):
        log.info(f"{i}. {product.title} - ${product.price}")


async def run_journey(search_term: str = TEXTS["SEARCH_TERM"], max_products: int = MAX_PRODUCTS,
                      headless: bool = HEADLESS) -> list[Product]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless)
        try:
            page = await browser.new_page()
            products = await MercadoLibreScraper(page).run(search_term, max_products)
        finally:
            await browser.close()

    log_products(products)
    return products


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    try:
        asyncio.run(run_journey())
    except Exception as e:
        log.error(f"Error en el recorrido: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
