import logging
from http import HTTPStatus

import utils.error_messages as errors
import utils.valid_messages as valid_messages
from database.db_connection import catalog_connection, woocommerce_connection
from flask import Blueprint, request
from routing.woocommerce.woocommerce_api import WooCommerceError
from utils.error_messages_management import generate_error_data
from utils.validate_inputs import valid_data_recv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

woocommerce_routing_blueprint = Blueprint("woocommerce_routing", __name__)

ORDER_CREATED = "PC build order created successfully!"


@woocommerce_routing_blueprint.route("/woocommerce/order", methods=["POST"])
def create_order():
    """
    Creates a WooCommerce order from the selected products.

    Expected JSON: {"components": [product ids], "customerInfo": {...}}
    Ids that are not in the catalog are skipped.

    :return: dict with the order id, its total and the raw WooCommerce order
    """
    user_ip = request.remote_addr
    woocommerce = woocommerce_connection()
    if not woocommerce.is_configured:
        return generate_error_data(errors.WOOCOMMERCE_NOT_CONFIGURED, user_ip=user_ip), HTTPStatus.BAD_REQUEST

    request_body = request.get_json(silent=True)
    data, status = valid_data_recv(request_body, "WooCommerceOrder", user_ip=user_ip)
    if status != HTTPStatus.OK:
        return data, status

    catalog = catalog_connection()
    products = []
    for product_id in data["components"]:
        product = catalog.get_product(product_id)
        if not product:
            logger.warning(f"Skipping unknown product in order: {product_id}")
            continue
        products.append(product)

    if not products:
        return generate_error_data(errors.NO_VALID_PRODUCTS, user_ip=user_ip), HTTPStatus.BAD_REQUEST

    try:
        order = woocommerce.create_pc_build_order(products, data["customer_info"])
    except WooCommerceError as e:
        logger.exception("WooCommerce order creation error")
        return generate_error_data(errors.ORDER_FAILED, detail=str(e), user_ip=user_ip), HTTPStatus.INTERNAL_SERVER_ERROR

    valid_messages.order_created(order.get("id"), order.get("total"))
    return {
        "success": True,
        "order_id": order.get("id"),
        "order_total": order.get("total"),
        "message": ORDER_CREATED,
        "woocommerce_order": order,
    }, HTTPStatus.OK


@woocommerce_routing_blueprint.route("/woocommerce/status", methods=["GET"])
def get_status():
    """
    Returns which WooCommerce settings are present, never their values.
    """
    valid_messages.petition_completed("woocommerce_status")
    return woocommerce_connection().status(), HTTPStatus.OK
