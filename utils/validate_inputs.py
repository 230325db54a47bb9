import logging
from http import HTTPStatus

import models.builds.build_data as build_data
import models.compatibility.compatibility_data as compat_data
import models.products.product_data as product_data
import models.woocommerce.woocommerce_data as wc_data
import utils.error_messages as errors
from utils.error_messages_management import field_error, generate_error_data

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True


def is_non_negative_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_product_id(value):
    return isinstance(value, str) and value.strip() != ""


def check_build_name(value, field_errors):
    if not isinstance(value, str) or value.strip() == "":
        field_errors.append(field_error(build_data.BUILD_NAME, errors.BUILD_NAME_NOT_VALID))


def check_components_map(value, field_errors, field=build_data.BUILD_COMPONENTS):
    if not isinstance(value, dict):
        field_errors.append(field_error(field, errors.COMPONENTS_NOT_VALID))
        return

    for category, product_id in value.items():
        if category not in product_data.CATEGORIES:
            field_errors.append(field_error(f"{field}.{category}", errors.CATEGORY_NOT_VALID))
        elif not is_product_id(product_id):
            field_errors.append(field_error(f"{field}.{category}", errors.COMPONENTS_NOT_VALID))


def check_total_price(value, field_errors):
    if not is_non_negative_int(value):
        field_errors.append(field_error(build_data.BUILD_TOTAL_PRICE, errors.TOTAL_PRICE_NOT_VALID))


def parse_price(value, field, field_errors):
    if value is None or value == "":
        return None
    try:
        price = int(str(value).strip())
    except ValueError:
        field_errors.append(field_error(field, errors.PRICE_NOT_VALID))
        return None
    if price < 0:
        field_errors.append(field_error(field, errors.PRICE_NOT_VALID))
        return None
    return price


def split_list(value):
    if not value:
        return None
    items = [item.strip() for item in str(value).split(product_data.LIST_SEPARATOR) if item.strip()]
    return items or None


def valid_data_recv(request_body, check, user_ip=None):
    """
    Validates a request payload for the given check and returns the cleaned data.

    :param request_body: decoded JSON body (or query args for ProductFilters)
    :param check: name of the validation to run
    :param user_ip: remote address, only used for logging
    :return: (clean data, HTTPStatus.OK) or (error payload, HTTPStatus.BAD_REQUEST)
    """
    if check != "ProductFilters" and not isinstance(request_body, dict):
        return generate_error_data(errors.REQUEST_EMPTY, user_ip=user_ip), HTTPStatus.BAD_REQUEST

    logger.info(f"{check}: {request_body}")

    field_errors = []
    user_data = {}

    ####################################################################################################
    if check == "CreateBuild":
        error_text = errors.BUILD_NOT_VALID
        for key in (build_data.BUILD_NAME, build_data.BUILD_TOTAL_PRICE):
            if key not in request_body:
                field_errors.append(field_error(key, errors.FIELD_REQUIRED))

        if build_data.BUILD_NAME in request_body:
            check_build_name(request_body[build_data.BUILD_NAME], field_errors)
        if build_data.BUILD_TOTAL_PRICE in request_body:
            check_total_price(request_body[build_data.BUILD_TOTAL_PRICE], field_errors)

        components = request_body.get(build_data.BUILD_COMPONENTS)
        if components is not None:
            check_components_map(components, field_errors)

        user_data = {field: request_body.get(key) for key, field in build_data.BUILD_FIELDS.items()}
        user_data["components"] = dict(components) if isinstance(components, dict) else {}

    ####################################################################################################
    elif check == "UpdateBuild":
        error_text = errors.BUILD_NOT_VALID
        if build_data.BUILD_NAME in request_body:
            check_build_name(request_body[build_data.BUILD_NAME], field_errors)

        components = request_body.get(build_data.BUILD_COMPONENTS)
        if components is not None:
            check_components_map(components, field_errors)

        if build_data.BUILD_TOTAL_PRICE in request_body:
            check_total_price(request_body[build_data.BUILD_TOTAL_PRICE], field_errors)

        user_data = {field: request_body[key] for key, field in build_data.BUILD_FIELDS.items() if key in request_body}
        if "components" in user_data:
            user_data["components"] = dict(components) if isinstance(components, dict) else {}

    ####################################################################################################
    elif check == "Compatibility":
        error_text = errors.COMPATIBILITY_NOT_VALID
        components = request_body.get(compat_data.COMPONENTS)
        if components is None:
            field_errors.append(field_error(compat_data.COMPONENTS, errors.FIELD_REQUIRED))
        else:
            check_components_map(components, field_errors, field=compat_data.COMPONENTS)
            user_data["components"] = dict(components) if isinstance(components, dict) else {}

    ####################################################################################################
    elif check == "WooCommerceOrder":
        error_text = errors.ORDER_NOT_VALID
        components = request_body.get(wc_data.COMPONENTS)
        customer_info = request_body.get(wc_data.CUSTOMER_INFO)

        if not isinstance(components, list) or not all(is_product_id(item) for item in components):
            field_errors.append(field_error(wc_data.COMPONENTS, errors.ORDER_COMPONENTS_NOT_VALID))

        if not isinstance(customer_info, dict):
            field_errors.append(field_error(wc_data.CUSTOMER_INFO, errors.CUSTOMER_INFO_NOT_VALID))
        else:
            for key in wc_data.CUSTOMER_REQUIRED:
                value = customer_info.get(key)
                if not isinstance(value, str) or value.strip() == "":
                    field_errors.append(field_error(f"{wc_data.CUSTOMER_INFO}.{key}", errors.FIELD_REQUIRED))
            for key in wc_data.CUSTOMER_OPTIONAL:
                value = customer_info.get(key)
                if value is not None and not isinstance(value, str):
                    field_errors.append(field_error(f"{wc_data.CUSTOMER_INFO}.{key}", errors.PARAM_NOT_VALID))

        if not field_errors:
            user_data["components"] = list(components)
            user_data["customer_info"] = {
                key: customer_info[key]
                for key in wc_data.CUSTOMER_REQUIRED + wc_data.CUSTOMER_OPTIONAL
                if customer_info.get(key) is not None
            }

    ####################################################################################################
    elif check == "ProductFilters":
        error_text = errors.PARAM_NOT_VALID
        request_body = request_body or {}

        category = request_body.get(product_data.CATEGORY) or None
        if category and category not in product_data.CATEGORIES:
            field_errors.append(field_error(product_data.CATEGORY, errors.CATEGORY_NOT_VALID))

        min_price = parse_price(request_body.get(product_data.MIN_PRICE), product_data.MIN_PRICE, field_errors)
        max_price = parse_price(request_body.get(product_data.MAX_PRICE), product_data.MAX_PRICE, field_errors)

        user_data["category"] = category
        user_data["brands"] = split_list(request_body.get(product_data.BRAND))
        user_data["sockets"] = split_list(request_body.get(product_data.SOCKET))
        user_data["price_range"] = (min_price, max_price) if min_price is not None or max_price is not None else None
        user_data["search"] = request_body.get(product_data.SEARCH) or None

    ####################################################################################################
    else:
        logger.error(f"Unknown validation requested - check: {check}")
        return generate_error_data(errors.DATA_NOT_PRESENT, user_ip=user_ip), HTTPStatus.BAD_REQUEST

    ####################################################################################################
    if field_errors:
        return generate_error_data(error_text, errors=field_errors, user_ip=user_ip), HTTPStatus.BAD_REQUEST

    return user_data, HTTPStatus.OK
