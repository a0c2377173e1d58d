import os
from pathlib import Path

BASE_URL = os.environ.get("MELI_BASE_URL", "https://www.mercadolibre.com/")
SCREENSHOTS_DIR = Path(os.environ.get("SCREENSHOTS_DIR", "screenshots"))
HEADLESS = os.environ.get("HEADLESS", "1").lower() not in ("0", "false", "no")
MAX_PRODUCTS = int(os.environ.get("MAX_PRODUCTS", 5))
NAV_TIMEOUT_MS = int(os.environ.get("NAV_TIMEOUT_MS", 30000))
POPUP_TIMEOUT_MS = int(os.environ.get("POPUP_TIMEOUT_MS", 3000))

SELECTORS = {
    "NEW_ITEM_FILTER": (
        "#root-app > div > div.ui-search-main.ui-search-main--only-products"
        ".ui-search-main--with-topkeywords > aside > section.ui-search-filter-groups"
        " > div:nth-child(5) > ul > li:nth-child(1) > a"
    ),
    # Newest markup first, legacy variants after
    "PRODUCT_TITLES": (
        ".ui-search-item__title",
        ".poly-component__title",
        '[data-testid="item-title"]',
        ".ui-search-item__group__element h2 a",
    ),
    "PRODUCT_PRICES": (
        ".andes-money-amount__fraction",
        ".price-tag-fraction",
        ".ui-search-price__part",
        '[data-testid="price"] .andes-money-amount__fraction',
    ),
}

TEXTS = {
    "SEARCH_TERM": "Playstation 5",
    "COUNTRY": "México",
    "SEARCH_BOX": "Ingresa lo que quieras",
    "SEARCH_BUTTON": "Buscar",
    "SORT_BUTTON": "Más relevantes",
    "SORTED_BY": "Menor precio",
    # Popups that cover the page in screenshots
    "LATER_BUTTON": "Más tarde",
    "COOKIES": "Aceptar cookies",
}
