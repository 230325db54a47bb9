import logging
from http import HTTPStatus

import models.products.product_data as product_data
import utils.error_messages as errors
import utils.valid_messages as valid_messages
from database.db_connection import catalog_connection
from flask import Blueprint, jsonify, request
from utils.error_messages_management import generate_error_data
from utils.validate_inputs import valid_data_recv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

product_routing_blueprint = Blueprint("product_routing", __name__)


@product_routing_blueprint.route("/products", methods=["GET"])
def get_products():
    """
    Returns the products matching the query string filters.

    Filters: category, brand (comma separated), socket (comma separated),
    search, minPrice and maxPrice (inclusive).

    :return: list of products
    """
    data, status = valid_data_recv(request.args, "ProductFilters", user_ip=request.remote_addr)
    if status != HTTPStatus.OK:
        return data, status
    filters = data

    products = catalog_connection().list_products(
        category=filters["category"],
        brands=filters["brands"],
        sockets=filters["sockets"],
        price_range=filters["price_range"],
        search=filters["search"],
    )

    valid_messages.petition_completed(f"get_products: {len(products)} results")
    return jsonify([product.to_dict() for product in products]), HTTPStatus.OK


@product_routing_blueprint.route("/products/<string:product_id>", methods=["GET"])
def get_product(product_id):
    """
    Returns the product matching the id.

    :param product_id: identify the product
    :return: dictionary with the product data
    """
    product = catalog_connection().get_product(product_id)
    if not product:
        return generate_error_data(errors.PRODUCT_NOT_FOUND, user_ip=request.remote_addr), HTTPStatus.NOT_FOUND

    valid_messages.petition_completed(f"product: {product_id}")
    return product.to_dict(), HTTPStatus.OK


@product_routing_blueprint.route("/categories", methods=["GET"])
def get_categories():
    """
    Returns the component categories in display order.
    """
    categories = [
        {"id": category, "name": name, "order": order}
        for order, (category, name) in enumerate(product_data.CATEGORIES.items(), start=1)
    ]
    return jsonify(categories), HTTPStatus.OK
