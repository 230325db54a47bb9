import logging
from uuid import uuid4

import models.products.product_data as product_keys
import utils.valid_messages as valid_messages
from database.builder_models.Product import Product
from database.seed_data import SEED_PRODUCTS

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

PRODUCT_FIELDS = {
    "name",
    "category",
    "brand",
    "price",
    "image",
    "description",
    "specs",
    "socket",
    "wattage",
    "in_stock",
}


class CatalogStore:
    """
    In-memory product catalog.

    Products are kept in insertion order and never updated or removed once
    listed, except through save_product.
    """

    def __init__(self, seed=True):
        self._products = {}
        if seed:
            self.seed(SEED_PRODUCTS)

    def seed(self, products_data):
        for product in products_data:
            self.create_product(product)
        valid_messages.catalog_seeded(len(products_data))

    def __len__(self):
        return len(self._products)

    def list_products(self, category=None, brands=None, sockets=None, price_range=None, search=None):
        """
        Returns the products matching every supplied filter.

        :param category: exact category id
        :param brands: iterable of accepted brands
        :param sockets: iterable of accepted sockets, products without socket never match
        :param price_range: (min, max) tuple, inclusive, None bounds mean 0 / unbounded
        :param search: case-insensitive substring of the name or the brand
        :return: list of products in insertion order
        """
        products = list(self._products.values())

        if category:
            products = [p for p in products if p.category == category]

        if brands:
            brands = set(brands)
            products = [p for p in products if p.brand in brands]

        if sockets:
            sockets = set(sockets)
            products = [p for p in products if p.socket and p.socket in sockets]

        if price_range:
            min_price, max_price = price_range
            min_price = 0 if min_price is None else min_price
            products = [p for p in products if p.price >= min_price and (max_price is None or p.price <= max_price)]

        if search:
            search_lower = search.lower()
            products = [p for p in products if search_lower in p.name.lower() or search_lower in p.brand.lower()]

        return products

    def get_product(self, product_id):
        return self._products.get(product_id)

    def create_product(self, product_data):
        unknown = set(product_data) - PRODUCT_FIELDS
        if unknown:
            raise ValueError(f"Unknown product fields: {', '.join(sorted(unknown))}")

        product = Product(id=str(uuid4()), **product_data)
        documented = product_keys.SPECS_KEYS.get(product.category)
        if documented and product.specs:
            undocumented = set(product.specs) - set(documented)
            if undocumented:
                logger.warning(f"Undocumented specs for {product.category} {product.name}: {', '.join(sorted(undocumented))}")

        self._products[product.id] = product
        return product

    def save_product(self, product):
        self._products[product.id] = product
        logger.info(f"Product saved: {product.id} - {product.name}")
        return product
