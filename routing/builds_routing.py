import logging
from http import HTTPStatus

import utils.error_messages as errors
import utils.valid_messages as valid_messages
from database.db_connection import build_connection
from flask import Blueprint, request
from utils.error_messages_management import generate_error_data
from utils.validate_inputs import valid_data_recv

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

build_routing_blueprint = Blueprint("build_routing", __name__)


@build_routing_blueprint.route("/builds", methods=["POST"])
def build_add():
    """
    Saves a new build.

    Expected JSON: {"name": str, "components": {category: product id}, "totalPrice": int}

    :return: the created build
    """
    request_body = request.get_json(silent=True)
    data, status = valid_data_recv(request_body, "CreateBuild", user_ip=request.remote_addr)
    if status != HTTPStatus.OK:
        return data, status

    build = build_connection().create_build(data)

    valid_messages.build_saved(build.id, build.name)
    return build.to_dict(), HTTPStatus.OK


@build_routing_blueprint.route("/builds/<string:build_id>", methods=["GET"])
def get_build(build_id):
    """
    Returns the build matching the id.

    :param build_id: build to be retrieved
    :return: dict with the build data
    """
    build = build_connection().get_build(build_id)
    if not build:
        return generate_error_data(errors.BUILD_NOT_FOUND, user_ip=request.remote_addr), HTTPStatus.NOT_FOUND

    valid_messages.petition_completed(f"get_build: {build_id}")
    return build.to_dict(), HTTPStatus.OK


@build_routing_blueprint.route("/builds/<string:build_id>", methods=["PATCH"])
def build_update(build_id):
    """
    Updates some fields of a saved build. The total price is stored as sent.

    :param build_id: build to be updated
    :return: dict with the updated build data
    """
    request_body = request.get_json(silent=True)
    data, status = valid_data_recv(request_body, "UpdateBuild", user_ip=request.remote_addr)
    if status != HTTPStatus.OK:
        return data, status

    build = build_connection().update_build(build_id, data)
    if not build:
        return generate_error_data(errors.BUILD_NOT_FOUND, user_ip=request.remote_addr), HTTPStatus.NOT_FOUND

    valid_messages.build_updated(build_id, list(data))
    return build.to_dict(), HTTPStatus.OK
