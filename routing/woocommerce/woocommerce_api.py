import base64
import json
import logging
from datetime import datetime

import models.woocommerce.woocommerce_data as wc_data
import pytz
import requests
from config import WOOCOMMERCE_CONSUMER_KEY, WOOCOMMERCE_CONSUMER_SECRET, WOOCOMMERCE_KEYS, WooCommerceConfig, load_woocommerce_config
from database.builder_models.Product import Product
from database.db_connection import WOOCOMMERCE_EXTENSION

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True


class WooCommerceError(Exception):
    """Raised when the store is unreachable or rejects a request."""


class WooCommerceNotConfiguredError(WooCommerceError):
    def __init__(self, missing=()):
        self.missing = tuple(missing)
        super().__init__(f"WooCommerce API not configured - missing: {', '.join(self.missing)}")


class WooCommerceAPI(object):
    """
    Thin client over the WooCommerce REST API (v3).

    Holds either a WooCommerceConfig or a WooCommerceUnconfigured, which lets
    routes report a missing configuration without attempting any request.
    """

    def __init__(self, config=None, app=None):
        self.config = config
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if self.config is None:
            self.config = load_woocommerce_config(app.config)
        app.extensions[WOOCOMMERCE_EXTENSION] = self

    @property
    def is_configured(self):
        return isinstance(self.config, WooCommerceConfig)

    @property
    def missing(self):
        if self.is_configured:
            return ()
        return getattr(self.config, "missing", WOOCOMMERCE_KEYS)

    def status(self):
        if self.is_configured:
            return {
                "woocommerce_configured": True,
                "api_url": self.config.base_url,
                "has_consumer_key": True,
                "has_consumer_secret": True,
            }

        missing = self.missing
        return {
            "woocommerce_configured": False,
            "api_url": None,
            "has_consumer_key": WOOCOMMERCE_CONSUMER_KEY not in missing,
            "has_consumer_secret": WOOCOMMERCE_CONSUMER_SECRET not in missing,
        }

    def auth_header(self):
        token = f"{self.config.consumer_key}:{self.config.consumer_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")

    def request(self, endpoint, method="GET", params=None, body=None):
        if not self.is_configured:
            raise WooCommerceNotConfiguredError(self.missing)

        url = f"{self.config.base_url}/{wc_data.API_PATH}/{endpoint}"
        headers = {
            "Authorization": self.auth_header(),
            "Content-Type": "application/json",
        }

        try:
            r = requests.request(method, url, params=params, json=body, headers=headers, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"WooCommerce request failed: {method} {url} - {e}")
            raise WooCommerceError(f"WooCommerce API unreachable: {e}") from e

        if not r.ok:
            logger.error(f"WooCommerce API error: {method} {url} - {r.status_code} {r.reason}")
            raise WooCommerceError(f"WooCommerce API error: {r.status_code} {r.reason}")

        try:
            return r.json()
        except ValueError as e:
            raise WooCommerceError("WooCommerce API returned an invalid JSON body") from e

    def get_products(self, category_slug, filters=None):
        params = {"category": category_slug, "per_page": wc_data.PRODUCTS_PER_PAGE, "status": "publish"}
        params.update(filters or {})
        return self.request("products", params=params)

    def get_product(self, product_id):
        return self.request(f"products/{product_id}")

    def get_categories(self):
        return self.request("products/categories", params={"per_page": wc_data.CATEGORIES_PER_PAGE})

    def import_category(self, category, catalog):
        """
        Copies the published store products of a category into the catalog.

        Store products that can't be converted are skipped.

        :param category: configurator category id
        :param catalog: CatalogStore receiving the products
        :return: list of imported products
        """
        slug = wc_data.WOOCOMMERCE_CATEGORY_MAPPING[category]
        products = []
        for wc_product in self.get_products(slug):
            try:
                product = self.convert_to_product(wc_product, category)
            except WooCommerceError as e:
                logger.warning(f"Skipping WooCommerce product: {e}")
                continue
            products.append(catalog.save_product(product))

        logger.info(f"Imported {len(products)} WooCommerce products into {category}")
        return products

    def create_pc_build_order(self, products, customer_info):
        """
        Creates an unpaid bank-transfer order with one line per product.

        :param products: list of Product
        :param customer_info: billing data, also used as shipping
        :return: the order as returned by WooCommerce
        """
        total_price = sum(product.price for product in products)
        build_configuration = {
            "components": [product.to_dict() for product in products],
            "total_price": total_price,
            "build_date": datetime.now(pytz.utc).isoformat(),
            "builder_version": wc_data.BUILDER_VERSION,
        }

        order_data = {
            "payment_method": wc_data.PAYMENT_METHOD,
            "payment_method_title": wc_data.PAYMENT_METHOD_TITLE,
            "set_paid": False,
            "billing": dict(customer_info),
            "shipping": dict(customer_info),
            "line_items": [
                {"product_id": product.id, "quantity": 1, "name": product.name, "price": product.price} for product in products
            ],
            "meta_data": [
                {"key": wc_data.META_BUILD, "value": json.dumps(build_configuration, ensure_ascii=False)},
                {"key": wc_data.META_ORDER_TYPE, "value": wc_data.ORDER_TYPE},
            ],
        }

        logger.info(f"Creating WooCommerce order with {len(products)} products - total: {total_price}")
        return self.request("orders", method="POST", body=order_data)

    @staticmethod
    def convert_to_product(wc_product, category):
        meta = {item.get("key"): item.get("value") for item in wc_product.get("meta_data", [])}

        specs = meta.get(wc_data.META_SPECS) or {}
        if not isinstance(specs, dict):
            try:
                specs = json.loads(specs)
            except (TypeError, ValueError):
                specs = None
            if not isinstance(specs, dict):
                logger.warning(f"Invalid specs for WooCommerce product {wc_product.get('id')}")
                specs = {}

        name = wc_product.get("name", "")
        brand = meta.get(wc_data.META_BRAND) or (name.split(" ")[0] if name else "")

        wattage = None
        if meta.get(wc_data.META_WATTAGE):
            try:
                wattage = int(meta[wc_data.META_WATTAGE])
            except (TypeError, ValueError):
                wattage = None

        try:
            price = int(float(wc_product.get("regular_price") or wc_product.get("price") or "0"))
        except (OverflowError, TypeError, ValueError):
            price = 0

        images = wc_product.get("images") or []
        try:
            return Product(
                id=str(wc_product["id"]),
                name=name,
                category=category,
                brand=brand,
                price=price,
                image=images[0].get("src") if images else wc_data.PLACEHOLDER_IMAGE,
                description=wc_product.get("short_description") or wc_product.get("description") or None,
                specs=specs,
                socket=meta.get(wc_data.META_SOCKET) or None,
                wattage=wattage or None,
                in_stock=True,
            )
        except ValueError as e:
            raise WooCommerceError(f"Invalid WooCommerce product {wc_product.get('id')}: {e}") from e

    @staticmethod
    def convert_from_product(product, category_id):
        meta_data = [
            {"key": wc_data.META_BRAND, "value": product.brand},
            {"key": wc_data.META_SPECS, "value": json.dumps(product.specs)},
        ]
        if product.socket:
            meta_data.append({"key": wc_data.META_SOCKET, "value": product.socket})
        if product.wattage:
            meta_data.append({"key": wc_data.META_WATTAGE, "value": str(product.wattage)})

        return {
            "name": product.name,
            "description": product.description,
            "regular_price": str(product.price),
            "categories": [{"id": category_id, "name": "", "slug": ""}],
            "meta_data": meta_data,
        }
