import logging
from http import HTTPStatus

import models.compatibility.compatibility_data as compat_data
import utils.valid_messages as valid_messages
from database.db_connection import catalog_connection
from flask import Blueprint, current_app, request
from utils.compatibility import evaluate_compatibility
from utils.validate_inputs import valid_data_recv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

compatibility_routing_blueprint = Blueprint("compatibility_routing", __name__)


@compatibility_routing_blueprint.route("/compatibility", methods=["POST"])
def check_compatibility():
    """
    Checks the selected components against each other.

    Expected JSON: {"components": {category: product id}}

    :return: dict with the compatibility verdict and the total wattage
    """
    request_body = request.get_json(silent=True)
    data, status = valid_data_recv(request_body, "Compatibility", user_ip=request.remote_addr)
    if status != HTTPStatus.OK:
        return data, status

    verdict, total_wattage = evaluate_compatibility(
        data["components"],
        catalog_connection(),
        count_psu_wattage=current_app.config.get("COUNT_PSU_WATTAGE", False),
    )

    valid_messages.petition_completed(f"compatibility: {len(data['components'])} components")
    return {compat_data.COMPATIBILITY: verdict, compat_data.TOTAL_WATTAGE: total_wattage}, HTTPStatus.OK
