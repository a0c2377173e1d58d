import asyncio
import logging
from pathlib import Path

from playwright.async_api import Page, expect

from config import (BASE_URL, NAV_TIMEOUT_MS, POPUP_TIMEOUT_MS, SCREENSHOTS_DIR,
                    SELECTORS, TEXTS)
from .base import BaseScraper, Product

log = logging.getLogger(__name__)


class MercadoLibreScraper(BaseScraper):
    title_selectors = SELECTORS["PRODUCT_TITLES"]
    price_selectors = SELECTORS["PRODUCT_PRICES"]

    def __init__(self, page: Page, screenshots_dir: Path = SCREENSHOTS_DIR, base_url: str = BASE_URL):
        super().__init__(page)
        self.screenshots_dir = Path(screenshots_dir)
        self.base_url = base_url

    async def _screenshot(self, name: str, full_page: bool = False):
        path = self.screenshots_dir / f"{name}.png"
        await self.page.screenshot(path=str(path), full_page=full_page)
        log.debug(f"Screenshot: {path}")

    async def dismiss_popups(self):
        # Either popup may be missing, a miss is not a failure
        outcomes = await asyncio.gather(
            self.page.get_by_role("button", name=TEXTS["LATER_BUTTON"]).click(timeout=POPUP_TIMEOUT_MS),
            self.page.get_by_role("button", name=TEXTS["COOKIES"]).click(timeout=POPUP_TIMEOUT_MS),
            return_exceptions=True,
        )
        for label, outcome in zip((TEXTS["LATER_BUTTON"], TEXTS["COOKIES"]), outcomes):
            if isinstance(outcome, Exception):
                log.debug(f"Popup '{label}' not dismissed: {outcome}")

    async def visit_country_site(self, country: str = TEXTS["COUNTRY"]):
        log.info(f"Abriendo {self.base_url}")
        await self.page.goto(self.base_url, wait_until="domcontentloaded", timeout=NAV_TIMEOUT_MS)
        await self._screenshot("1-landing-page")

        await self.page.get_by_role("link", name=country).click()
        await self.dismiss_popups()
        await self._screenshot("2-mexico-landing-page")

    async def search_product(self, query: str):
        log.info(f"Buscando: {query}")
        search_box = self.page.get_by_role("combobox", name=TEXTS["SEARCH_BOX"])
        await search_box.click()
        await search_box.fill(query)
        await self._screenshot("3-playstation-search")

        await self.page.get_by_role("button", name=TEXTS["SEARCH_BUTTON"]).click()

    async def apply_filters_and_sort(self, sort_by: str = TEXTS["SORTED_BY"]):
        new_item_filter = self.page.locator(SELECTORS["NEW_ITEM_FILTER"])
        await new_item_filter.scroll_into_view_if_needed()
        await expect(new_item_filter).to_be_visible()
        await self._screenshot("4-results-without-filter")

        await new_item_filter.click()
        await self._screenshot("5-results-with-new-filter", full_page=True)

        log.info(f"Ordenando por: {sort_by}")
        await self.page.get_by_role("button", name=TEXTS["SORT_BUTTON"]).click()
        await self._screenshot("6-sort-options")

        await self.page.get_by_text(sort_by).click()
        await self._screenshot("7-results-sorted-by-price")

    async def run(self, search_term: str = TEXTS["SEARCH_TERM"], max_products: int = 5) -> list[Product]:
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        try:
            await self.visit_country_site()
            await self.search_product(search_term)
            await self.apply_filters_and_sort()
            return await self.extract_products(max_products)
        except Exception:
            try:
                await self._screenshot("error", full_page=True)
            except Exception as e:
                log.warning(f"No se pudo capturar screenshot de error: {e}")
            raise
