from flask import current_app

CATALOG_EXTENSION = "catalog_store"
BUILD_EXTENSION = "build_store"
WOOCOMMERCE_EXTENSION = "woocommerce"


def init_stores(app, catalog, builds):
    app.extensions[CATALOG_EXTENSION] = catalog
    app.extensions[BUILD_EXTENSION] = builds


def catalog_connection():
    return current_app.extensions[CATALOG_EXTENSION]


def build_connection():
    return current_app.extensions[BUILD_EXTENSION]


def woocommerce_connection():
    return current_app.extensions[WOOCOMMERCE_EXTENSION]
