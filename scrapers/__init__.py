from .base import Product, PRICE_NOT_AVAILABLE, find_first_available, extract
from .mercadolibre import MercadoLibreScraper
